from abc import ABC, abstractmethod


class GameState(ABC):
    """
    Abstract Base Class for a two-player, perfect-information game state.

    This is everything the minimax search needs. States are immutable:
    `apply_move` returns a new state and leaves the receiver untouched.
    """

    @abstractmethod
    def valid_moves(self):
        """
        Returns an iterable of the legal moves for the player to move.
        """
        pass

    @abstractmethod
    def apply_move(self, move):
        """
        Returns the successor state after the player to move plays `move`.
        """
        pass

    @abstractmethod
    def is_over(self):
        """
        Returns True if the game has ended.
        """
        pass

    def is_valid_move(self, move):
        """
        Returns True if `move` is legal for the player to move.
        """
        return move in self.valid_moves()
