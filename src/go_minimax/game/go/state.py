"""
Immutable Go game state.

Each move produces a new GoState holding a cloned board, swapped players and
extended histories. Earlier states stay valid, which lets the search branch
freely from any position.

Ko is positional superko: a play is rejected when the resulting
(color to move, board hash) pair has been seen before in this game.
"""

from typing import Iterator, Optional, Tuple

from go_minimax.engine.zobrist import DEFAULT_SEED
from go_minimax.game.game import GameState
from go_minimax.game.go.board import Board
from go_minimax.game.go.player import Player
from go_minimax.game.go.types import Color, Move


class GoState(GameState):
    """
    Go position plus the history needed to judge legality.

    Attributes:
        board: Current board
        next_player: Player to move
        previous_player: Player who made the last move
        previous_states: (color to move, board hash) after every move so far
        moves: Moves played so far
    """

    def __init__(
        self,
        board: Board,
        next_player: Player,
        previous_player: Player,
        previous_states: Tuple[Tuple[Color, int], ...] = (),
        moves: Tuple[Move, ...] = ()
    ):
        self.board = board
        self.next_player = next_player
        self.previous_player = previous_player
        self.previous_states = previous_states
        self.moves = moves

    @classmethod
    def new_game(cls, board_size: int, seed: int = DEFAULT_SEED) -> "GoState":
        return cls.from_board(Board(board_size, seed=seed), Player.black())

    @classmethod
    def from_board(cls, board: Board, next_player: Player) -> "GoState":
        """Start a game from an existing position, mainly for fixtures."""
        return cls(board, next_player, Player(next_player.color.other))

    def __repr__(self):
        return (f"GoState({self.board.rows}x{self.board.cols}, "
                f"next={self.next_player.color}, moves={len(self.moves)})")

    @property
    def last_move(self) -> Optional[Move]:
        return self.moves[-1] if self.moves else None

    # ── Transitions ────────────────────────────────────────────────────
    def apply_move(self, move: Move) -> "GoState":
        """
        Return the state after the player to move plays `move`.

        Legality is not checked here; filter through `is_valid_move` first.
        Playing onto an occupied point raises OccupiedPointError.
        """
        next_board = self.board.copy()
        captured = 0
        if move.is_play:
            captured = next_board.place_stone(self.next_player.color, move.point)

        return GoState(
            board=next_board,
            next_player=self.previous_player,
            previous_player=self.next_player.with_captures(captured),
            previous_states=self.previous_states + ((self.previous_player.color, next_board.hash),),
            moves=self.moves + (move,)
        )

    # ── Legality ───────────────────────────────────────────────────────
    def _board_after(self, color: Color, move: Move) -> Optional[Board]:
        # None when the move does not place a stone on an empty point
        if not move.is_play:
            return None
        if not self.board.is_on_grid(move.point) or self.board.get(move.point) is not None:
            return None
        next_board = self.board.copy()
        next_board.place_stone(color, move.point)
        return next_board

    def is_move_self_capture(self, color: Color, move: Move) -> bool:
        next_board = self._board_after(color, move)
        if next_board is None:
            return False
        return not next_board.is_alive(move.point)

    def does_move_violate_ko(self, color: Color, move: Move) -> bool:
        next_board = self._board_after(color, move)
        if next_board is None:
            return False
        return (color.other, next_board.hash) in self.previous_states

    def is_valid_move(self, move: Move) -> bool:
        if not move.is_play:
            return True
        color = self.next_player.color
        return (
            not self.is_over() and
            self.board.is_on_grid(move.point) and
            self.board.get(move.point) is None and
            not self.is_move_self_capture(color, move) and
            not self.does_move_violate_ko(color, move)
        )

    def valid_moves(self) -> Iterator[Move]:
        """
        Legal plays in row-major order, then pass (while the game is on),
        then resign.
        """
        for point in self.board.empty_points():
            move = Move.play(point)
            if self.is_valid_move(move):
                yield move
        if not self.is_over():
            yield Move.pass_turn()
        yield Move.resign()

    # ── Termination ────────────────────────────────────────────────────
    def is_over(self) -> bool:
        if not self.moves:
            return False
        last_move = self.moves[-1]
        if last_move.is_resign:
            return True
        if last_move.is_pass:
            return len(self.moves) > 1 and self.moves[-2].is_pass
        return False

    def winner(self) -> Optional[Color]:
        """The opponent of a resigning player; None otherwise (no scoring)."""
        if self.last_move is not None and self.last_move.is_resign:
            return self.next_player.color
        return None
