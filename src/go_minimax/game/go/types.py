"""
Basic Go value types: stone colors, board points and moves.
"""

import enum
from collections import namedtuple
from dataclasses import dataclass
from typing import Optional


class Color(enum.Enum):
    """Stone color, also used as player identity."""
    BLACK = 'x'
    WHITE = 'o'

    @property
    def other(self) -> "Color":
        return Color.WHITE if self is Color.BLACK else Color.BLACK

    @property
    def index(self) -> int:
        # Zobrist table slot
        return 0 if self is Color.BLACK else 1

    @property
    def symbol(self) -> str:
        return self.value

    def __str__(self):
        return self.name.capitalize()


class Point(namedtuple("Point", "row col")):
    """Immutable (row, col) coordinate, 1-based."""
    __slots__ = ()

    def neighbors(self):
        r, c = self.row, self.col
        return [Point(r - 1, c), Point(r + 1, c), Point(r, c - 1), Point(r, c + 1)]

    def diagonals(self):
        r, c = self.row, self.col
        return [Point(r - 1, c - 1), Point(r + 1, c - 1), Point(r - 1, c + 1), Point(r + 1, c + 1)]


@dataclass(frozen=True)
class Move:
    """
    A play on a point, a pass or a resignation.

    Build moves with the classmethods rather than the constructor.
    """
    point: Optional[Point] = None
    is_pass: bool = False
    is_resign: bool = False

    def __post_init__(self):
        assert (self.point is not None) + self.is_pass + self.is_resign == 1

    @property
    def is_play(self) -> bool:
        return self.point is not None

    @classmethod
    def play(cls, point: Point) -> "Move":
        return cls(point=point)

    @classmethod
    def pass_turn(cls) -> "Move":
        return cls(is_pass=True)

    @classmethod
    def resign(cls) -> "Move":
        return cls(is_resign=True)

    def __str__(self):
        if self.is_pass:
            return "pass"
        if self.is_resign:
            return "resign"
        return f"({self.point.row},{self.point.col})"
