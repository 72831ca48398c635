"""Run solves with enough stack for deep recursion."""

import logging
import sys
import threading
from typing import Any, Callable, Dict, Optional, Tuple

from ..config import SolverConfig
from ..core.game import GameState, normalize
from .evaluator import Evaluation, ExhaustiveEvaluator, SearchMode

logger = logging.getLogger(__name__)


def run_with_stack(
    fn: Callable[..., Any],
    *args: Any,
    stack_size_mb: Optional[int] = None,
    recursion_limit: Optional[int] = None,
    **kwargs: Any,
) -> Any:
    """Call ``fn(*args, **kwargs)`` on a worker thread with a larger stack.

    The search recurses once per ply, which outgrows both the interpreter's
    default recursion limit and the default thread stack on larger games.

    Args:
        fn: Callable to run
        stack_size_mb: Thread stack size (default from ``SolverConfig``)
        recursion_limit: Recursion limit while ``fn`` runs (default from ``SolverConfig``)

    Returns:
        Whatever ``fn`` returns. Exceptions raised by ``fn`` are re-raised
        in the calling thread.
    """
    defaults = SolverConfig()
    stack_size_mb = stack_size_mb if stack_size_mb is not None else defaults.stack_size_mb
    recursion_limit = recursion_limit if recursion_limit is not None else defaults.recursion_limit

    result: Dict[str, Any] = {}

    def target() -> None:
        try:
            result["value"] = fn(*args, **kwargs)
        except BaseException as e:  # re-raised in the caller
            result["error"] = e

    old_stack_size = threading.stack_size(stack_size_mb * 1024 * 1024)
    old_limit = sys.getrecursionlimit()
    sys.setrecursionlimit(max(old_limit, recursion_limit))
    try:
        worker = threading.Thread(target=target, name="rubikcage-solver")
        worker.start()
        worker.join()
    finally:
        threading.stack_size(old_stack_size)
        sys.setrecursionlimit(old_limit)

    if "error" in result:
        raise result["error"]
    return result.get("value")


def solve_game(
    p1_cubies: int,
    p2_cubies: int,
    mode: SearchMode = SearchMode.FULL,
    config: Optional[SolverConfig] = None,
) -> Tuple[int, Dict[int, Evaluation]]:
    """Solve a new game with the given cubie counts.

    Returns:
        (root fingerprint, evaluation map)
    """
    config = config or SolverConfig(mode=mode.value)
    state = GameState.new(p1_cubies, p2_cubies)
    root = normalize(state).zobrist_hash

    logger.info("Evaluating game with %d/%d cubies (mode=%s)", p1_cubies, p2_cubies, mode.value)
    evaluator = ExhaustiveEvaluator(mode, progress=config.progress)
    evaluations = run_with_stack(
        evaluator.search,
        state,
        stack_size_mb=config.stack_size_mb,
        recursion_limit=config.recursion_limit,
    )
    return root, evaluations
