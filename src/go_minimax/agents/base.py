from abc import ABC, abstractmethod


class Agent(ABC):
    """A bot that picks a move for the player to move in a game state."""

    @abstractmethod
    def select_move(self, game_state):
        pass
