"""
Go rules: board, captures, ko and game state.
"""

from go_minimax.game.go.types import Color, Point, Move
from go_minimax.game.go.board import Board
from go_minimax.game.go.player import Player
from go_minimax.game.go.state import GoState
from go_minimax.game.go.evaluation import stone_difference

__all__ = [
    'Color',
    'Point',
    'Move',
    'Board',
    'Player',
    'GoState',
    'stone_difference',
]
