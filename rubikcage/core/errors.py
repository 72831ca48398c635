"""Exceptions raised by the game model and the solver."""

from enum import Enum


class LegalityErrorKind(Enum):
    DROP_ON_FULL_COLUMN = "Column is full"
    DROP_ON_CENTER_COLUMN = "Cannot drop into the center column"
    INVALID_COLUMN_INDEX = "Invalid column coordinates"


class LegalityError(ValueError):
    """An illegal drop target was requested.

    Callers are expected to recover by simply not offering the move.
    """

    def __init__(self, kind: LegalityErrorKind, column=None):
        self.kind = kind
        self.column = column
        message = kind.value if column is None else f"{kind.value}: {column}"
        super().__init__(message)


class SolverInvariantError(RuntimeError):
    """The solver reached a state that legal-move generation should make impossible."""
