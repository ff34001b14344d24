"""
Zobrist hashing for Go positions.

Zobrist hashing gives every board position a compact fingerprint that can be
updated incrementally as stones are placed and captured, which is what the
ko check needs to recognise repeated positions cheaply.

Implementation:
- Pre-generate random 63-bit keys for each (row, col, color) combination
- Hash = XOR of all keys corresponding to occupied points
- Incremental update: hash ^= key[row][col][color]
- The empty board hashes to 0
"""

import numpy as np
from typing import Dict, Tuple


DEFAULT_SEED = 1985
MAX63 = 2**63 - 1


class ZobristHasher:
    """
    Zobrist hashing for square Go boards.

    A board of size N needs N x N x 2 keys, one per point and stone color.

    Features:
    - Deterministic key generation (explicit seed, never process-randomized)
    - Self-inverse updates: hashing the same stone twice removes it again
    - Read-only after construction, so boards can share one instance
    """

    def __init__(self, board_size: int, seed: int = DEFAULT_SEED):
        """
        Initialize the Zobrist table with seeded random keys.

        Args:
            board_size: Number of rows (and columns) of the board
            seed: Random seed; equal seeds give identical tables
        """
        self.board_size = board_size
        self.seed = seed

        rng = np.random.RandomState(seed)

        # Generate zobrist keys: [row, col, color_idx]
        self.zobrist_table = rng.randint(
            0, MAX63,
            size=(board_size, board_size, 2),
            dtype=np.uint64
        )

    @staticmethod
    def empty_board() -> int:
        """Hash of a board without stones."""
        return 0

    def hash_move(self, current_hash: int, color, point) -> int:
        """
        XOR the key for a stone of `color` at `point` into `current_hash`.

        The same call adds a stone or removes it again. `point` must lie on
        the board; that is the caller's responsibility.

        Args:
            current_hash: Current board hash
            color: Color of the stone being added or removed
            point: 1-based board point

        Returns:
            Updated hash value
        """
        key = self.zobrist_table[point.row - 1, point.col - 1, color.index]
        return current_hash ^ int(key)

    def __eq__(self, other):
        if not isinstance(other, ZobristHasher):
            return NotImplemented
        return self.board_size == other.board_size and self.seed == other.seed

    def __hash__(self):
        return hash((self.board_size, self.seed))

    def __repr__(self):
        return f"ZobristHasher(board_size={self.board_size}, seed={self.seed})"


# Shared instances, one per (board_size, seed)
_hashers: Dict[Tuple[int, int], ZobristHasher] = {}


def get_zobrist_hasher(board_size: int, seed: int = DEFAULT_SEED) -> ZobristHasher:
    """
    Get or create the shared Zobrist hasher for a board size and seed.

    All boards of the same size and seed reuse one table, which is safe
    because the table is never written after construction.

    Args:
        board_size: Board rows (and columns)
        seed: Random seed

    Returns:
        ZobristHasher instance
    """
    key = (board_size, seed)
    if key not in _hashers:
        _hashers[key] = ZobristHasher(board_size, seed)
    return _hashers[key]
