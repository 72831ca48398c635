"""Exhaustive game-tree search."""

from .evaluator import DRAW_DISTANCE, Evaluation, ExhaustiveEvaluator, SearchMode, evaluate, solve
from .lookup import EvaluationLookup
from .runner import run_with_stack, solve_game

__all__ = [
    "Evaluation",
    "ExhaustiveEvaluator",
    "SearchMode",
    "DRAW_DISTANCE",
    "evaluate",
    "solve",
    "EvaluationLookup",
    "run_with_stack",
    "solve_game",
]
