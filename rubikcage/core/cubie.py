"""Cubie colors."""

from enum import IntEnum

# Value stored in empty cage slots. Sorts below every color.
EMPTY = 0


class Cubie(IntEnum):
    """Colors a cubie can have.

    The integer values define the total order used when comparing cages
    during normalization, so they must not be reordered.
    """

    WHITE = 1
    YELLOW = 2
    RED = 3
    ORANGE = 4
    BLUE = 5
    GREEN = 6

    @classmethod
    def from_char(cls, c: str) -> "Cubie":
        """Parse a one-letter color code (R, G, B, Y, W, O)."""
        try:
            return _CHAR_TO_CUBIE[c]
        except KeyError:
            raise ValueError(f"Invalid color char: {c!r}") from None

    @property
    def char(self) -> str:
        return _CUBIE_TO_CHAR[self]

    def __str__(self) -> str:
        return self.name.capitalize()


_CUBIE_TO_CHAR = {
    Cubie.WHITE: "W",
    Cubie.YELLOW: "Y",
    Cubie.RED: "R",
    Cubie.ORANGE: "O",
    Cubie.BLUE: "B",
    Cubie.GREEN: "G",
}
_CHAR_TO_CUBIE = {v: k for k, v in _CUBIE_TO_CHAR.items()}
