"""Utility functions for rubikcage."""

from .metrics import append_solve_metrics
from .symmetry import CageSymmetry

__all__ = ['append_solve_metrics', 'CageSymmetry']
