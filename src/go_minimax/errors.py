"""
Exceptions raised by the Go engine.

Placement and parsing failures are recoverable and subclass ValueError so
callers can catch either the specific error or the builtin.
"""


class GoError(Exception):
    """Base class for engine errors."""


class OccupiedPointError(GoError, ValueError):
    """A stone was placed on a point that already holds one."""

    def __init__(self, point):
        super().__init__(f"{point} is not empty")
        self.point = point


class BoardFormatError(GoError, ValueError):
    """Board text could not be parsed."""


class InvalidCharacterError(BoardFormatError):
    """Board text contains a character outside the 'x', 'o', '.' alphabet."""

    def __init__(self, character: str):
        super().__init__(f"Invalid character: {character!r}")
        self.character = character


class NoMoveError(GoError, ValueError):
    """Search finished without selecting a move."""
