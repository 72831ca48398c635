"""The 3x3x3 cage holding the cubies."""

from typing import List, Optional, Tuple

import numpy as np

from .cubie import EMPTY, Cubie
from .errors import LegalityError, LegalityErrorKind
from .lines import LINE_X, LINE_Y, LINE_Z, LINES, Line
from .moves import Column, Layer, Rotation

SIZE = 3
CENTER: Column = (1, 1)

# Playable columns in drop scan order
COLUMNS: Tuple[Column, ...] = tuple(
    (x, y) for x in range(SIZE) for y in range(SIZE) if (x, y) != CENTER
)


def is_center(x: int, y: int) -> bool:
    return (x, y) == CENTER


class Cage:
    """Cage grid stored as an int8 array indexed ``[x, y, z]``.

    ``z = 0`` is the bottom layer; empty slots hold ``EMPTY``. Every
    structural operation (rotation, flip) is followed by gravity, so
    cubies always rest at the bottom of their column.
    """

    __slots__ = ("grid",)

    def __init__(self, grid: Optional[np.ndarray] = None):
        if grid is None:
            grid = np.zeros((SIZE, SIZE, SIZE), dtype=np.int8)
        elif grid.shape != (SIZE, SIZE, SIZE):
            raise ValueError(f"Cage grid must be {SIZE}x{SIZE}x{SIZE}, got {grid.shape}")
        self.grid = grid

    def copy(self) -> "Cage":
        return Cage(self.grid.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cage):
            return NotImplemented
        return np.array_equal(self.grid, other.grid)

    def __repr__(self) -> str:
        return f"Cage({self.to_str()!r})"

    def get(self, x: int, y: int, z: int) -> Optional[Cubie]:
        value = int(self.grid[x, y, z])
        return None if value == EMPTY else Cubie(value)

    def count(self, color: Optional[Cubie] = None) -> int:
        if color is None:
            return int(np.count_nonzero(self.grid))
        return int(np.count_nonzero(self.grid == color))

    def is_column_full(self, x: int, y: int) -> bool:
        return bool(self.grid[x, y, SIZE - 1] != EMPTY)

    def drop(self, color: Cubie, column: Column) -> int:
        """Place ``color`` at the lowest empty slot of ``column``.

        Returns:
            The z coordinate the cubie landed on.

        Raises:
            LegalityError: The column is the center one, out of range or full.
                The cage is left untouched.
        """
        x, y = column
        if is_center(x, y):
            raise LegalityError(LegalityErrorKind.DROP_ON_CENTER_COLUMN, column)
        if not (0 <= x < SIZE and 0 <= y < SIZE):
            raise LegalityError(LegalityErrorKind.INVALID_COLUMN_INDEX, column)

        for z in range(SIZE):
            if self.grid[x, y, z] == EMPTY:
                self.grid[x, y, z] = color
                return z

        raise LegalityError(LegalityErrorKind.DROP_ON_FULL_COLUMN, column)

    def apply_gravity(self) -> None:
        """Let every cubie fall to the lowest empty slot of its column."""
        for x, y in COLUMNS:
            column = self.grid[x, y]
            cubies = column[column != EMPTY]
            column[:] = EMPTY
            column[: len(cubies)] = cubies

    def rotate_layer(self, layer: Layer, rotation: Rotation) -> None:
        z = int(layer)
        self.grid[:, :, z] = np.rot90(self.grid[:, :, z], rotation.k).copy()
        self.apply_gravity()

    def flip(self) -> None:
        """Turn the cage upside down around the x axis: (x, y, z) -> (x, 2-y, 2-z)."""
        self.grid = np.ascontiguousarray(self.grid[:, ::-1, ::-1])
        self.apply_gravity()

    def complete_lines(self) -> List[Tuple[Cubie, Line]]:
        """All lines holding three cubies of one color, in ``LINES`` order."""
        values = self.grid[LINE_X, LINE_Y, LINE_Z]
        first = values[:, 0]
        complete = (first != EMPTY) & (first == values[:, 1]) & (first == values[:, 2])
        return [(Cubie(int(first[idx])), LINES[idx]) for idx in np.flatnonzero(complete)]

    def has_line(self) -> Optional[Tuple[Cubie, Line]]:
        """Return the color and slots of the first line of three equal cubies."""
        lines = self.complete_lines()
        return lines[0] if lines else None

    @classmethod
    def from_str(cls, s: str) -> "Cage":
        """Parse the text notation produced by :meth:`to_str`.

        27 characters, top layer first; within a layer ``x`` varies fastest,
        then ``y``. ``.`` is an empty slot, letters are cubie colors.
        Whitespace and commas are ignored. The character at the center
        column is skipped whatever it is.
        """
        cage = cls()
        idx = 0
        for ch in s:
            if ch.isspace() or ch == ",":
                continue
            if idx >= SIZE ** 3:
                raise ValueError(f"Expected 27 non-whitespace, non-comma characters, got more: {s!r}")

            x = idx % SIZE
            y = (idx // SIZE) % SIZE
            z = SIZE - 1 - idx // (SIZE * SIZE)
            idx += 1

            if is_center(x, y):
                continue
            if ch != ".":
                cage.grid[x, y, z] = Cubie.from_char(ch)

        if idx != SIZE ** 3:
            raise ValueError(f"Expected 27 non-whitespace, non-comma characters, got {idx}")
        return cage

    def to_str(self) -> str:
        layers = []
        for z in reversed(range(SIZE)):
            chars = []
            for y in range(SIZE):
                for x in range(SIZE):
                    value = int(self.grid[x, y, z])
                    chars.append("." if value == EMPTY else Cubie(value).char)
            layers.append("".join(chars))
        return ",".join(layers)

    def render(self) -> str:
        """Multi-line drawing, top layer first, rows skewed for depth."""
        rows = []
        for z in reversed(range(SIZE)):
            for y in range(SIZE):
                cells = []
                for x in range(SIZE):
                    if is_center(x, y):
                        cells.append(" ")
                        continue
                    value = int(self.grid[x, y, z])
                    cells.append("." if value == EMPTY else Cubie(value).char)
                rows.append(" " * (SIZE - y) + "".join(cells))
            rows.append("")
        return "\n".join(rows).rstrip("\n")
