"""Board, moves and game state."""

from .cage import Cage
from .cubie import Cubie
from .errors import LegalityError, LegalityErrorKind, SolverInvariantError
from .game import GameState, Player, apply_move, legal_moves, normalize
from .moves import FLIP, Drop, Flip, Layer, Move, RotateLayer, Rotation

__all__ = [
    "Cage",
    "Cubie",
    "GameState",
    "Player",
    "apply_move",
    "legal_moves",
    "normalize",
    "Drop",
    "Flip",
    "FLIP",
    "RotateLayer",
    "Layer",
    "Rotation",
    "Move",
    "LegalityError",
    "LegalityErrorKind",
    "SolverInvariantError",
]
