"""
Search engine components.

- Zobrist hashing for position fingerprints
- Depth-bounded negamax search over any GameState
"""

from go_minimax.engine.zobrist import ZobristHasher, get_zobrist_hasher, DEFAULT_SEED
from go_minimax.engine.minimax import minimax, select_move, SearchResult

__all__ = [
    'ZobristHasher',
    'get_zobrist_hasher',
    'DEFAULT_SEED',
    'minimax',
    'select_move',
    'SearchResult',
]
