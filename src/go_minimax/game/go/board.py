"""
Go board with capture rules and an incrementally maintained Zobrist hash.

Stones live in a flat numpy array (row-major, 1-based points mapped to
`(row - 1) * cols + (col - 1)`), so copying a board for a new game state is
a single array copy. Groups are never stored; they are found by flood fill
whenever liberties matter.
"""

import logging
from typing import Iterator, Optional, Set

import numpy as np

from go_minimax.engine.zobrist import DEFAULT_SEED, get_zobrist_hasher
from go_minimax.errors import BoardFormatError, InvalidCharacterError, OccupiedPointError
from go_minimax.game.go.types import Color, Point

logger = logging.getLogger(__name__)

EMPTY = 0
_CODE = {Color.BLACK: 1, Color.WHITE: 2}
_COLOR = {1: Color.BLACK, 2: Color.WHITE}
_SYMBOLS = {'x': Color.BLACK, 'o': Color.WHITE, '.': None}


class Board:
    """
    Square Go board.

    Attributes:
        rows: Number of rows
        cols: Number of columns (always equal to rows)
        hasher: Shared, read-only ZobristHasher for this size and seed
    """

    def __init__(self, size: int, seed: int = DEFAULT_SEED):
        self.rows = size
        self.cols = size
        self.hasher = get_zobrist_hasher(size, seed)
        self._grid = np.zeros(size * size, dtype=np.int8)
        self._hash = self.hasher.empty_board()

    def __repr__(self):
        return f"Board({self.rows}x{self.cols}, hash={self._hash:#x})"

    def copy(self) -> "Board":
        new = Board.__new__(Board)
        new.rows, new.cols = self.rows, self.cols
        new.hasher = self.hasher
        new._grid = self._grid.copy()
        new._hash = self._hash
        return new

    @property
    def hash(self) -> int:
        return self._hash

    # ── Occupancy ──────────────────────────────────────────────────────
    def is_on_grid(self, point: Point) -> bool:
        return 1 <= point.row <= self.rows and 1 <= point.col <= self.cols

    def is_on_edge(self, point: Point) -> bool:
        return point.row in (1, self.rows) or point.col in (1, self.cols)

    def _index(self, point: Point) -> int:
        if not self.is_on_grid(point):
            raise IndexError(f"{point} is off the {self.rows}x{self.cols} board")
        return (point.row - 1) * self.cols + (point.col - 1)

    def get(self, point: Point) -> Optional[Color]:
        """Stone color at `point`, or None when empty. Off-grid points raise IndexError."""
        return _COLOR.get(int(self._grid[self._index(point)]))

    def _set(self, point: Point, color: Optional[Color]):
        self._grid[self._index(point)] = EMPTY if color is None else _CODE[color]

    def number_of_stones(self, color: Color) -> int:
        return int(np.count_nonzero(self._grid == _CODE[color]))

    def points(self) -> Iterator[Point]:
        """All board points in row-major order."""
        for row in range(1, self.rows + 1):
            for col in range(1, self.cols + 1):
                yield Point(row, col)

    def empty_points(self) -> Iterator[Point]:
        """Points that are empty at the time of iteration."""
        return (p for p in self.points() if self._grid[self._index(p)] == EMPTY)

    def _neighbors(self, point: Point):
        return [n for n in point.neighbors() if self.is_on_grid(n)]

    # ── Stones and captures ────────────────────────────────────────────
    def place_stone(self, color: Color, point: Point) -> int:
        """
        Place a stone and remove opponent groups left without liberties.

        The placed stone's own group is not checked for liberties; rejecting
        self-capture is up to the game state.

        Args:
            color: Color of the stone
            point: Target point (must be on the board)

        Returns:
            Number of opponent stones captured

        Raises:
            OccupiedPointError: If the point already holds a stone
        """
        if self.get(point) is not None:
            raise OccupiedPointError(point)

        self._apply_hash(color, point)
        self._set(point, color)

        captured: Set[Point] = set()
        for neighbor in self._neighbors(point):
            if self.get(neighbor) is color.other and neighbor not in captured:
                captured |= self._group_without_liberties(neighbor)

        for captured_point in captured:
            self._remove_stone(captured_point)

        if captured:
            logger.debug("%s at %s captured %d stone(s)", color, point, len(captured))
        return len(captured)

    def _remove_stone(self, point: Point):
        color = self.get(point)
        assert color is not None, f"No stone to remove at {point}"
        self._apply_hash(color, point)
        self._set(point, None)

    def _apply_hash(self, color: Color, point: Point):
        self._hash = self.hasher.hash_move(self._hash, color, point)

    def _group_without_liberties(self, point: Point) -> Set[Point]:
        """
        Flood-fill the group at `point`.

        Returns the whole group if it has no liberties, or an empty set as
        soon as any liberty is found.
        """
        color = self._grid[self._index(point)]
        frontier = [point]
        explored = {point}

        while frontier:
            current = frontier.pop()
            for neighbor in self._neighbors(current):
                value = self._grid[self._index(neighbor)]
                if value == EMPTY:
                    return set()
                if value == color and neighbor not in explored:
                    explored.add(neighbor)
                    frontier.append(neighbor)

        return explored

    def is_alive(self, point: Point) -> bool:
        """True if the group containing the stone at `point` has a liberty."""
        if self.get(point) is None:
            raise ValueError(f"No stone at {point}")
        return not self._group_without_liberties(point)

    def is_eye(self, point: Point, color: Color) -> bool:
        """
        Check whether `point` is an eye of `color`.

        The point must be empty with every on-board orthogonal neighbour of
        `color`. In the middle of the board at least 3 of the 4 diagonal
        corners must be `color`; on the edge every on-board corner must be.
        """
        if self.get(point) is not None:
            return False

        for neighbor in self._neighbors(point):
            if self.get(neighbor) is not color:
                return False

        friendly_corners = 0
        off_board_corners = 0
        for corner in point.diagonals():
            if self.is_on_grid(corner):
                if self.get(corner) is color:
                    friendly_corners += 1
            else:
                off_board_corners += 1

        if off_board_corners > 0:
            return off_board_corners + friendly_corners == 4
        return friendly_corners >= 3

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        if self.rows != other.rows or self.cols != other.cols:
            return False
        # Hash is only a pre-filter; occupancy decides
        if self.hasher == other.hasher and self._hash != other._hash:
            return False
        return np.array_equal(self._grid, other._grid)

    __hash__ = None

    # ── Text format ────────────────────────────────────────────────────
    @classmethod
    def from_string(cls, text: str, seed: int = DEFAULT_SEED) -> "Board":
        """
        Parse a board from text.

        One line per row, 'x' for Black, 'o' for White and '.' for an empty
        point. Surrounding whitespace and blank lines are ignored.

        Raises:
            BoardFormatError: If the block is empty or not square
            InvalidCharacterError: For any other character
        """
        lines = [line.strip() for line in text.splitlines()]
        lines = [line for line in lines if line]
        if not lines:
            raise BoardFormatError("Board text is empty")

        size = len(lines)
        for row_idx, line in enumerate(lines, start=1):
            if len(line) != size:
                raise BoardFormatError(
                    f"Row {row_idx} has {len(line)} points, expected {size}"
                )

        board = cls(size, seed=seed)
        for row_idx, line in enumerate(lines, start=1):
            for col_idx, char in enumerate(line, start=1):
                if char not in _SYMBOLS:
                    raise InvalidCharacterError(char)
                color = _SYMBOLS[char]
                if color is not None:
                    point = Point(row_idx, col_idx)
                    board._apply_hash(color, point)
                    board._set(point, color)

        return board

    def _symbol(self, point: Point) -> str:
        color = self.get(point)
        return '.' if color is None else color.symbol

    def __str__(self):
        return "".join(
            "".join(self._symbol(Point(row, col)) for col in range(1, self.cols + 1)) + "\n"
            for row in range(1, self.rows + 1)
        )

    def render(self) -> str:
        """Bordered grid with 1-based row and column headers."""
        lines = ["  " + "".join(f" {col:2}" for col in range(1, self.cols + 1))]
        for row in range(1, self.rows + 1):
            cells = "".join(f" {self._symbol(Point(row, col))} " for col in range(1, self.cols + 1))
            lines.append(f"{row:2} {cells}")
        return "\n".join(lines) + "\n"
