"""The 28 winning lines of the cage.

The center column (1, 1, *) is not part of the puzzle, so only lines that
avoid it are listed.
"""

from typing import Tuple

import numpy as np

Slot = Tuple[int, int, int]
Line = Tuple[Slot, Slot, Slot]

LINES: Tuple[Line, ...] = (
    # Horizontal lines, per layer
    ((0, 0, 0), (1, 0, 0), (2, 0, 0)),
    ((0, 0, 0), (0, 1, 0), (0, 2, 0)),
    ((2, 0, 0), (2, 1, 0), (2, 2, 0)),
    ((0, 2, 0), (1, 2, 0), (2, 2, 0)),
    ((0, 0, 1), (1, 0, 1), (2, 0, 1)),
    ((0, 0, 1), (0, 1, 1), (0, 2, 1)),
    ((2, 0, 1), (2, 1, 1), (2, 2, 1)),
    ((0, 2, 1), (1, 2, 1), (2, 2, 1)),
    ((0, 0, 2), (1, 0, 2), (2, 0, 2)),
    ((0, 0, 2), (0, 1, 2), (0, 2, 2)),
    ((2, 0, 2), (2, 1, 2), (2, 2, 2)),
    ((0, 2, 2), (1, 2, 2), (2, 2, 2)),
    # Vertical lines
    ((0, 0, 0), (0, 0, 1), (0, 0, 2)),
    ((1, 0, 0), (1, 0, 1), (1, 0, 2)),
    ((2, 0, 0), (2, 0, 1), (2, 0, 2)),
    ((0, 1, 0), (0, 1, 1), (0, 1, 2)),
    ((2, 1, 0), (2, 1, 1), (2, 1, 2)),
    ((0, 2, 0), (0, 2, 1), (0, 2, 2)),
    ((1, 2, 0), (1, 2, 1), (1, 2, 2)),
    ((2, 2, 0), (2, 2, 1), (2, 2, 2)),
    # Diagonals on the side faces
    ((0, 0, 0), (0, 1, 1), (0, 2, 2)),
    ((0, 0, 0), (1, 0, 1), (2, 0, 2)),
    ((0, 2, 0), (0, 1, 1), (0, 0, 2)),
    ((0, 2, 0), (1, 2, 1), (2, 2, 2)),
    ((2, 0, 0), (2, 1, 1), (2, 2, 2)),
    ((2, 0, 0), (1, 0, 1), (0, 0, 2)),
    ((2, 2, 0), (2, 1, 1), (2, 0, 2)),
    ((2, 2, 0), (1, 2, 1), (0, 2, 2)),
)

# Fancy-index arrays of shape (28, 3) for vectorized line scans
_LINE_ARRAY = np.array(LINES, dtype=np.intp)
LINE_X = _LINE_ARRAY[:, :, 0]
LINE_Y = _LINE_ARRAY[:, :, 1]
LINE_Z = _LINE_ARRAY[:, :, 2]
