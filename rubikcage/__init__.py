"""Rubik's cage: a 3D connect-three game and its exhaustive solver."""

__version__ = "0.1.0"
