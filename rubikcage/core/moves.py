"""Move types: drop a cubie, rotate a horizontal layer, flip the cage."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple, Union

from .cubie import Cubie

Column = Tuple[int, int]


class Layer(IntEnum):
    """Horizontal layers, valued by their z coordinate."""

    DOWN = 0
    EQUATOR = 1
    UP = 2


class Rotation(Enum):
    """Layer rotations as seen from above.

    ``k`` is the number of counter-clockwise quarter turns numpy's ``rot90``
    needs on an ``[x, y]`` plane to produce the rotation.
    """

    CLOCKWISE = 1
    COUNTER_CLOCKWISE = -1
    HALF_TURN = 2

    @property
    def k(self) -> int:
        return self.value

    def inverse(self) -> "Rotation":
        if self is Rotation.CLOCKWISE:
            return Rotation.COUNTER_CLOCKWISE
        if self is Rotation.COUNTER_CLOCKWISE:
            return Rotation.CLOCKWISE
        return Rotation.HALF_TURN


@dataclass(frozen=True)
class Drop:
    color: Cubie
    column: Column

    def inverse(self) -> None:
        # Dropping a cubie cannot be undone
        return None

    def mirrored(self) -> "Drop":
        x, y = self.column
        return Drop(self.color, (2 - x, y))

    def __str__(self) -> str:
        return f"Drop {self.color!s} at {self.column}"


@dataclass(frozen=True)
class RotateLayer:
    layer: Layer
    rotation: Rotation

    def inverse(self) -> "RotateLayer":
        return RotateLayer(self.layer, self.rotation.inverse())

    def mirrored(self) -> "RotateLayer":
        # A reflection reverses the sense of a rotation
        return RotateLayer(self.layer, self.rotation.inverse())

    def __str__(self) -> str:
        return f"Rotate {self.layer.name.capitalize()} {_ROTATION_LABELS[self.rotation]}"


@dataclass(frozen=True)
class Flip:
    def inverse(self) -> "Flip":
        return self

    def mirrored(self) -> "Flip":
        return self

    def __str__(self) -> str:
        return "Flip"


Move = Union[Drop, RotateLayer, Flip]

FLIP = Flip()

_ROTATION_LABELS = {
    Rotation.CLOCKWISE: "clockwise",
    Rotation.COUNTER_CLOCKWISE: "counter-clockwise",
    Rotation.HALF_TURN: "half turn",
}

# Rotations offered by legal-move generation, in enumeration order.
# Half turns are valid moves but are never generated.
GENERATED_ROTATIONS: Tuple[RotateLayer, ...] = tuple(
    RotateLayer(layer, rotation)
    for layer in (Layer.DOWN, Layer.EQUATOR, Layer.UP)
    for rotation in (Rotation.CLOCKWISE, Rotation.COUNTER_CLOCKWISE)
)


def inverse(move: Optional[Move]) -> Optional[Move]:
    """Inverse of ``move``; ``None`` for drops and for no move at all."""
    if move is None:
        return None
    return move.inverse()
