"""
Game definitions searchable by the minimax engine.
"""

from go_minimax.game.game import GameState

__all__ = ['GameState']
