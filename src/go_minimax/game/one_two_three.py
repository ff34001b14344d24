"""
One-Two-Three, a tiny game for checking search code.

- Players in turn choose one, two or three
- A player's score is the sum of the numbers they have chosen
- The first player to reach 9 points wins

Choosing three is always correct, and the first player always wins with
correct play, so any sound search must find Three.
"""

import enum
from typing import List, Tuple

from go_minimax.game.game import GameState

TARGET_SCORE = 9


class Move(enum.IntEnum):
    ONE = 1
    TWO = 2
    THREE = 3


class OneTwoThreeState(GameState):

    def __init__(self, points: Tuple[int, int] = (0, 0), current_player: int = 0):
        self.points = points
        self.current_player = current_player

    def __repr__(self):
        return f"OneTwoThreeState(points={self.points}, current_player={self.current_player})"

    @property
    def other_player(self) -> int:
        return 1 - self.current_player

    def apply_move(self, move: Move) -> "OneTwoThreeState":
        points = list(self.points)
        points[self.current_player] += int(move)
        return OneTwoThreeState(tuple(points), self.other_player)

    def valid_moves(self) -> List[Move]:
        return [Move.ONE, Move.TWO, Move.THREE]

    def is_over(self) -> bool:
        return any(p >= TARGET_SCORE for p in self.points)


def score_difference(state: OneTwoThreeState) -> int:
    """Current player's score minus the other player's."""
    return state.points[state.current_player] - state.points[state.other_player]
