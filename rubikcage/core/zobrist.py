"""Zobrist hashing of (cage, player to move).

The tables are generated once per process from fixed seeds and are
read-only afterwards, so every solve can share them without locking.
"""

import numpy as np

from .cubie import Cubie

POS_COLOR_SEED = 0x12345678
P2_TO_MOVE_SEED = 0x87654321

_UINT64_MAX = np.iinfo(np.uint64).max


def _build_pos_color_table() -> np.ndarray:
    rng = np.random.default_rng(POS_COLOR_SEED)
    # Row 0 stands for empty slots and stays zero so a whole grid can be
    # hashed with one fancy-index lookup.
    table = np.zeros((len(Cubie) + 1, 3, 3, 3), dtype=np.uint64)
    table[1:] = rng.integers(0, _UINT64_MAX, size=(len(Cubie), 3, 3, 3), dtype=np.uint64, endpoint=True)
    table.setflags(write=False)
    return table


POS_COLOR = _build_pos_color_table()
P2_TO_MOVE = int(
    np.random.default_rng(P2_TO_MOVE_SEED).integers(0, _UINT64_MAX, dtype=np.uint64, endpoint=True)
)

_X, _Y, _Z = np.indices((3, 3, 3))


def slot_key(color: int, x: int, y: int, z: int) -> int:
    return int(POS_COLOR[color, x, y, z])


def compute_hash(grid: np.ndarray, mover_id: int) -> int:
    """Hash a full grid from scratch."""
    h = int(np.bitwise_xor.reduce(POS_COLOR[grid, _X, _Y, _Z], axis=None))
    if mover_id == 1:
        h ^= P2_TO_MOVE
    return h
