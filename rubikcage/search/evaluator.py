"""Exhaustive minimax solver over canonical cage positions."""

import logging
import sys
import time
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Set

from tqdm import tqdm

from ..core.errors import LegalityError, SolverInvariantError
from ..core.game import GameState

logger = logging.getLogger(__name__)

# Distance reported for drawn (or unresolved) positions
DRAW_DISTANCE = -1


@dataclass(frozen=True)
class Evaluation:
    """Game-theoretic value of a position."""

    outcome: int  # 1: first player wins, -1: second player wins, 0: draw
    # Plies to the forced win/loss; DRAW_DISTANCE for draws. Exact under
    # FULL and OPTIMAL_WL, an upper bound on the winner's distance under PRUNED.
    distance: int

    def __str__(self) -> str:
        if self.outcome == 1:
            return f"Player 1 win in {self.distance}"
        if self.outcome == -1:
            return f"Player 2 win in {self.distance}"
        return "Draw"


class SearchMode(Enum):
    # Search all reachable positions. Goes past one-move wins (as if the
    # player missed the chance) but never continues an already won game.
    FULL = "full"
    # Does not go past one-move wins, since no faster win exists there, but
    # otherwise keeps searching for the fastest win.
    OPTIMAL_WL = "optimal"
    # Stops as soon as the evaluation is certain, without looking for the
    # optimal distance.
    PRUNED = "pruned"


@dataclass
class SearchStats:
    nodes_expanded: int = 0
    cache_hits: int = 0
    cycle_skips: int = 0
    immediate_wins: int = 0
    positions: int = 0
    time_ms: int = 0


class ExhaustiveEvaluator:
    """Memoized minimax over canonical positions with an in-path cycle guard.

    One instance performs one solve: the visited set and the evaluation map
    belong to it and are never shared.
    """

    def __init__(self, mode: SearchMode = SearchMode.FULL, progress: bool = False):
        self.mode = mode
        self.progress = progress
        # Positions on the current search path
        self.visited: Set[int] = set()
        # Finalized positions, keyed by canonical fingerprint
        self.evaluated: Dict[int, Evaluation] = {}
        self.stats = SearchStats()
        self._pbar: Optional[tqdm] = None

    def search(self, state: GameState) -> Dict[int, Evaluation]:
        """Evaluate every position reachable from ``state``.

        Args:
            state: Starting position; it is copied and normalized, never modified.

        Returns:
            Map from canonical fingerprint to evaluation. The root is stored
            under ``normalize(state).zobrist_hash``.
        """
        root = state.copy()
        root.normalize()

        logger.debug("Solving from %s (mode=%s)", root.describe(), self.mode.value)
        start_time = time.time()
        self._pbar = tqdm(desc="Evaluating", unit="pos", disable=not self.progress)
        try:
            evaluation = self._minimax(root)
        finally:
            self._pbar.close()
            self._pbar = None

        self.stats.positions = len(self.evaluated)
        self.stats.time_ms = int((time.time() - start_time) * 1000)
        logger.info(
            "Solved: %s, %d positions, %d expanded, %d cache hits, %d cycle skips in %d ms",
            evaluation,
            self.stats.positions,
            self.stats.nodes_expanded,
            self.stats.cache_hits,
            self.stats.cycle_skips,
            self.stats.time_ms,
        )
        return self.evaluated

    def _finalize(self, key: int, evaluation: Evaluation) -> Evaluation:
        self.visited.discard(key)
        self.evaluated[key] = evaluation
        if self._pbar is not None:
            self._pbar.update(1)
        return evaluation

    def _child(self, state: GameState, move) -> GameState:
        child = state.copy()
        try:
            child.apply_move_normalize(move)
        except LegalityError as e:
            raise SolverInvariantError(f"Generated move {move} is illegal in {state.describe()}") from e
        return child

    def _minimax(self, state: GameState) -> Evaluation:
        key = state.zobrist_hash
        cached = self.evaluated.get(key)
        if cached is not None:
            self.stats.cache_hits += 1
            return cached

        self.visited.add(key)
        self.stats.nodes_expanded += 1

        winner = state.won()
        if winner is not None:
            player, _ = winner
            score = 1 if player.id == state.players[0].id else -1
            return self._finalize(key, Evaluation(score, 0))

        mover_id = state.player_to_move.id
        moves = state.legal_moves()
        children = [self._child(state, m) for m in moves]

        if self.mode is not SearchMode.FULL:
            # A one-move win cannot be beaten; skip the rest
            for child in children:
                child_winner = child.won()
                if child_winner is not None and child_winner[0].id == mover_id:
                    self.stats.immediate_wins += 1
                    return self._finalize(key, Evaluation(1 if mover_id == 0 else -1, 1))

        # Each player can do no worse than losing
        best_score = -1 if mover_id == 0 else 1

        # Distances over children won by player 1 and by player 2
        p1win_max, p1win_min = 0, sys.maxsize
        p1loss_max, p1loss_min = 0, sys.maxsize

        no_children = True
        for child in children:
            if child.zobrist_hash in self.visited:
                # Back on the current path: nothing new to learn there
                self.stats.cycle_skips += 1
                continue

            no_children = False
            evaluation = self._minimax(child)

            if evaluation.outcome == 1:
                p1win_max = max(p1win_max, evaluation.distance)
                p1win_min = min(p1win_min, evaluation.distance)
            elif evaluation.outcome == -1:
                p1loss_max = max(p1loss_max, evaluation.distance)
                p1loss_min = min(p1loss_min, evaluation.distance)

            if mover_id == 0:
                best_score = max(best_score, evaluation.outcome)
                if best_score == 1 and self.mode is SearchMode.PRUNED:
                    break
            else:
                best_score = min(best_score, evaluation.outcome)
                if best_score == -1 and self.mode is SearchMode.PRUNED:
                    break

        # Every continuation repeats a position on the path: drawn by repetition
        if no_children:
            best_score = 0

        if best_score == 1:
            # Player 1 takes the fastest win; player 2 delays the loss
            distance = (p1win_min if mover_id == 0 else p1win_max) + 1
        elif best_score == -1:
            distance = (p1loss_max if mover_id == 0 else p1loss_min) + 1
        else:
            distance = DRAW_DISTANCE

        return self._finalize(key, Evaluation(best_score, distance))


def evaluate(state: GameState, mode: SearchMode = SearchMode.FULL, progress: bool = False) -> Dict[int, Evaluation]:
    """Convenience function: solve ``state`` and return the evaluation map."""
    return ExhaustiveEvaluator(mode, progress=progress).search(state)


solve = evaluate
