"""Cage symmetry transformations.

The cage is symmetric under the 8 elements of the dihedral group acting on
the horizontal plane:
- 4 rotations about the vertical axis (0°, 90°, 180°, 270°)
- the same 4 rotations preceded by a reflection x -> 2-x

Vertical order is never changed, gravity is preserved and the center
column maps onto itself, so each image is again a valid cage with the same
game evaluation. Normalizing to one representative per orbit shrinks the
search space roughly eightfold.
"""

from typing import List, Tuple

import numpy as np


class CageSymmetry:
    """Handles cage symmetry transformations.

    Symmetry IDs (0-7), for a grid indexed ``[x, y, z]`` with N = 3:
        0: Identity                  (x, y) -> (x, y)
        1: Rotate 90°               (x, y) -> (N-1-y, x)
        2: Rotate 180°              (x, y) -> (N-1-x, N-1-y)
        3: Rotate 270°              (x, y) -> (y, N-1-x)
        4: Reflect                   (x, y) -> (N-1-x, y)
        5: Reflect + rotate 90°     (x, y) -> (N-1-y, N-1-x)
        6: Reflect + rotate 180°    (x, y) -> (x, N-1-y)
        7: Reflect + rotate 270°    (x, y) -> (y, x)

    IDs 4-7 contain an odd number of reflections, which reverses the sense
    of layer rotations.
    """

    SIZE = 3
    NUM_SYMMETRIES = 8

    @staticmethod
    def is_reflection(sym_id: int) -> bool:
        return sym_id >= 4

    @staticmethod
    def transform_coordinates(x: int, y: int, sym_id: int) -> Tuple[int, int]:
        """Transform a column position according to symmetry.

        Args:
            x: Column x coordinate (0-based)
            y: Column y coordinate (0-based)
            sym_id: Symmetry ID (0-7)

        Returns:
            (x', y'): Transformed column position
        """
        if not 0 <= sym_id < CageSymmetry.NUM_SYMMETRIES:
            raise ValueError(f"Invalid symmetry ID: {sym_id}. Must be 0-7.")

        N = CageSymmetry.SIZE
        if CageSymmetry.is_reflection(sym_id):
            x = N - 1 - x
        for _ in range(sym_id % 4):
            x, y = N - 1 - y, x
        return x, y

    @staticmethod
    def transform_grid(grid: np.ndarray, sym_id: int) -> np.ndarray:
        """Transform a cage grid of shape [3, 3, 3] according to symmetry.

        Args:
            grid: Grid indexed [x, y, z]
            sym_id: Symmetry ID (0-7)

        Returns:
            Transformed grid (a new contiguous array)
        """
        if not 0 <= sym_id < CageSymmetry.NUM_SYMMETRIES:
            raise ValueError(f"Invalid symmetry ID: {sym_id}. Must be 0-7.")

        result = grid
        if CageSymmetry.is_reflection(sym_id):
            result = result[::-1]
        # rot90 turns from axis 0 towards axis 1: (x, y) -> (N-1-y, x)
        result = np.rot90(result, sym_id % 4, axes=(0, 1))
        return np.ascontiguousarray(result)

    @staticmethod
    def all_images(grid: np.ndarray) -> List[np.ndarray]:
        """All 8 symmetric images, indexed by symmetry ID."""
        return [CageSymmetry.transform_grid(grid, s) for s in range(CageSymmetry.NUM_SYMMETRIES)]

    @staticmethod
    def normalize_grid(grid: np.ndarray) -> Tuple[np.ndarray, bool]:
        """Pick the lexicographically largest image of ``grid``.

        Grids compare slot by slot in ``[x, y, z]`` order, which for int8
        grids holding non-negative values is the order of their raw bytes.
        Images are scanned in symmetry ID order and only a strictly larger
        one replaces the current best, so a reflection is reported only when
        no rotation alone reaches the maximum.

        Returns:
            (canonical grid, whether the chosen image is reflected)
        """
        best = grid
        best_key = grid.tobytes()
        best_sym = 0

        for sym_id in range(1, CageSymmetry.NUM_SYMMETRIES):
            image = CageSymmetry.transform_grid(grid, sym_id)
            key = image.tobytes()
            if key > best_key:
                best, best_key, best_sym = image, key, sym_id

        if best is grid:
            best = grid.copy()
        return best, CageSymmetry.is_reflection(best_sym)

    @staticmethod
    def canonical_key(grid: np.ndarray) -> bytes:
        """Raw bytes of the canonical image; equal for grids in the same orbit."""
        return max(image.tobytes() for image in CageSymmetry.all_images(grid))
