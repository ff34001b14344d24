from dataclasses import dataclass, replace

from go_minimax.game.go.types import Color


@dataclass(frozen=True)
class Player:
    """A side in a Go game and the number of opponent stones it has captured."""
    color: Color
    captured: int = 0

    @classmethod
    def black(cls) -> "Player":
        return cls(Color.BLACK)

    @classmethod
    def white(cls) -> "Player":
        return cls(Color.WHITE)

    def with_captures(self, count: int) -> "Player":
        return replace(self, captured=self.captured + count)
