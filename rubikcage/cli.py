"""Command-line interface for solving games and managing evaluation maps.

Example:
    python -m rubikcage.cli evaluate 4 4 evaluations.bin --mode full --progress
    python -m rubikcage.cli preset lopsided lopsided.bin --show-config
    python -m rubikcage.cli filter evaluations.bin hard.bin 3
    python -m rubikcage.cli info hard.bin
    python -m rubikcage.cli export-db hard.bin ./hard_db
"""

import argparse
import logging
import sys
from collections import Counter
from typing import List, Optional

from .config import (
    GAME_PRESETS,
    SEARCH_MODES,
    GameConfig,
    SolverConfig,
    StoreConfig,
    get_game_config,
    get_solver_config,
    print_config_summary,
)
from .core.game import GameState, normalize
from .search.evaluator import ExhaustiveEvaluator
from .search.runner import run_with_stack
from .store.codec import EvaluationDecodeError, filter_evaluations, load_evaluations, save_evaluations
from .store.eval_db import export_to_db
from .utils.metrics import append_solve_metrics
from .utils.validation import (
    print_validation_errors,
    validate_filter_config,
    validate_game_config,
    validate_solver_config,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INVALID = 2


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Setup logging for the command-line tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    return logger


def _solve_and_save(args, game: GameConfig) -> int:
    errors = validate_game_config(game.p1_cubies, game.p2_cubies)
    errors += validate_solver_config(args.mode, args.stack_size_mb)
    if errors:
        print_validation_errors(errors, logger)
        return EXIT_INVALID

    config = get_solver_config(args.mode, progress=args.progress)
    config.stack_size_mb = args.stack_size_mb
    if args.show_config:
        print_config_summary(game, config)

    state = GameState.new(game.p1_cubies, game.p2_cubies)
    root = normalize(state).zobrist_hash

    logger.info("Solving %s (%s mode)", game.get_description(), config.mode)
    evaluator = ExhaustiveEvaluator(config.search_mode, progress=config.progress)
    evaluations = run_with_stack(
        evaluator.search,
        state,
        stack_size_mb=config.stack_size_mb,
        recursion_limit=config.recursion_limit,
    )
    evaluation = evaluations[root]

    print(f"Evaluation: {evaluation}")
    print(f"Number of states: {len(evaluations)}")

    try:
        save_evaluations(args.output, evaluations)
        if args.metrics_csv:
            append_solve_metrics(
                args.metrics_csv, game.p1_cubies, game.p2_cubies, config.mode, evaluation, evaluator.stats
            )
    except OSError as e:
        logger.error("Failed to write results: %s", e)
        return EXIT_ERROR
    return EXIT_OK


def cmd_evaluate(args) -> int:
    return _solve_and_save(args, GameConfig(args.p1_cubies, args.p2_cubies))


def cmd_preset(args) -> int:
    return _solve_and_save(args, get_game_config(args.name))


def cmd_filter(args) -> int:
    errors = validate_filter_config(args.min_distance)
    if errors:
        print_validation_errors(errors, logger)
        return EXIT_INVALID

    try:
        evaluations = load_evaluations(args.input)
        filtered = filter_evaluations(evaluations, args.min_distance)
        save_evaluations(args.output, filtered)
    except (OSError, EvaluationDecodeError) as e:
        logger.error("Failed to filter %s: %s", args.input, e)
        return EXIT_ERROR

    print(f"Kept {len(filtered)} of {len(evaluations)} states with distance >= {args.min_distance}")
    return EXIT_OK


def cmd_info(args) -> int:
    try:
        evaluations = load_evaluations(args.input)
    except (OSError, EvaluationDecodeError) as e:
        logger.error("Failed to read %s: %s", args.input, e)
        return EXIT_ERROR

    outcomes = Counter(ev.outcome for ev in evaluations.values())
    distances = Counter(ev.distance for ev in evaluations.values() if ev.outcome != 0)

    print(f"States: {len(evaluations)}")
    print(f"  Player 1 wins: {outcomes[1]}")
    print(f"  Player 2 wins: {outcomes[-1]}")
    print(f"  Draws: {outcomes[0]}")
    if distances:
        print("Distance histogram (decided states):")
        for distance in sorted(distances):
            print(f"  {distance:3d}: {distances[distance]}")
    return EXIT_OK


def cmd_export_db(args) -> int:
    try:
        evaluations = load_evaluations(args.input)
        added = export_to_db(evaluations, args.db_dir, map_size=args.map_size_mb * 1024**2)
    except (OSError, EvaluationDecodeError) as e:
        logger.error("Failed to export %s: %s", args.input, e)
        return EXIT_ERROR

    print(f"Added {added} of {len(evaluations)} states to {args.db_dir}")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Rubik\'s cage exhaustive evaluator')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    solve_options = argparse.ArgumentParser(add_help=False)
    solve_options.add_argument('--mode', type=str, choices=list(SEARCH_MODES), default='full',
                               help='Search mode')
    solve_options.add_argument('--progress', action='store_true', help='Show a progress bar')
    solve_options.add_argument('--stack-size-mb', type=int, default=SolverConfig().stack_size_mb,
                               help='Solver thread stack size in MB')
    solve_options.add_argument('--metrics-csv', type=str, default=None,
                               help='Append solve statistics to this CSV file')
    solve_options.add_argument('--show-config', action='store_true',
                               help='Print the game and solver settings before solving')

    evaluate = subparsers.add_parser('evaluate', parents=[solve_options],
                                     help='Solve a new game and save every evaluation')
    evaluate.add_argument('p1_cubies', type=int, help='Cubies for player 1')
    evaluate.add_argument('p2_cubies', type=int, help='Cubies for player 2')
    evaluate.add_argument('output', type=str, help='Output file')
    evaluate.set_defaults(func=cmd_evaluate)

    preset = subparsers.add_parser('preset', parents=[solve_options],
                                   help='Solve a named game preset and save every evaluation')
    preset.add_argument('name', type=str, choices=list(GAME_PRESETS), help='Game preset')
    preset.add_argument('output', type=str, help='Output file')
    preset.set_defaults(func=cmd_preset)

    filter_cmd = subparsers.add_parser('filter', help='Keep only states far from the end of the game')
    filter_cmd.add_argument('input', type=str, help='Input file')
    filter_cmd.add_argument('output', type=str, help='Output file')
    filter_cmd.add_argument('min_distance', type=int, help='Minimum distance to keep')
    filter_cmd.set_defaults(func=cmd_filter)

    info = subparsers.add_parser('info', help='Summarize a saved evaluation map')
    info.add_argument('input', type=str, help='Input file')
    info.set_defaults(func=cmd_info)

    export = subparsers.add_parser('export-db', help='Copy a saved evaluation map into an LMDB store')
    export.add_argument('input', type=str, help='Input file')
    export.add_argument('db_dir', type=str, help='LMDB directory')
    export.add_argument('--map-size-mb', type=int, default=StoreConfig().lmdb_map_size_mb,
                        help='Initial LMDB map size in MB')
    export.set_defaults(func=cmd_export_db)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
