"""Evaluate positions from a precomputed map, solving misses on demand."""

import logging
from typing import Dict, List, Mapping, Optional, Tuple

from ..config import SolverConfig
from ..core.game import GameState, normalize
from ..core.moves import Move
from .evaluator import Evaluation, ExhaustiveEvaluator, SearchMode
from .runner import run_with_stack

logger = logging.getLogger(__name__)


class EvaluationLookup:
    """Read-through cache over a base evaluation map.

    The base is typically a filtered map holding only the hard positions,
    or an ``EvaluationDB``. Positions missing from it are solved from
    scratch and the results kept in an in-memory overlay; entries already
    present are never overwritten.
    """

    def __init__(self, base: Optional[Mapping[int, Evaluation]] = None, config: Optional[SolverConfig] = None):
        self.base = base if base is not None else {}
        self.config = config or SolverConfig()
        self.overlay: Dict[int, Evaluation] = {}
        self.solves = 0

    def __len__(self) -> int:
        return len(self.overlay)

    def _get(self, key: int) -> Optional[Evaluation]:
        evaluation = self.overlay.get(key)
        if evaluation is None:
            evaluation = self.base.get(key)
        return evaluation

    def _solve(self, state: GameState, mode: SearchMode) -> None:
        evaluator = ExhaustiveEvaluator(mode)
        evaluations = run_with_stack(
            evaluator.search,
            state,
            stack_size_mb=self.config.stack_size_mb,
            recursion_limit=self.config.recursion_limit,
        )
        self.solves += 1
        added = 0
        for key, evaluation in evaluations.items():
            if key not in self.overlay and key not in self.base:
                self.overlay[key] = evaluation
                added += 1
        logger.debug("On-demand solve added %d of %d evaluations", added, len(evaluations))

    def evaluate_position(self, state: GameState, mode: SearchMode = SearchMode.PRUNED) -> Evaluation:
        """Evaluation of ``state``'s canonical position."""
        key = normalize(state).zobrist_hash
        evaluation = self._get(key)
        if evaluation is None:
            self._solve(state, mode)
            evaluation = self._get(key)
        return evaluation

    def evaluate_moves(
        self, state: GameState, mode: SearchMode = SearchMode.PRUNED
    ) -> List[Tuple[Move, Evaluation]]:
        """Evaluation after each legal move, in legal-move order."""
        results = []
        for move in state.legal_moves():
            child = state.copy()
            child.apply_move_normalize(move)
            results.append((move, self.evaluate_position(child, mode)))
        return results
