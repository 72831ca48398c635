"""Utilities for logging solve statistics to CSV files."""

import csv
import os

SOLVE_METRICS_HEADERS = [
    "p1_cubies",
    "p2_cubies",
    "mode",
    "outcome",
    "distance",
    "positions",
    "nodes_expanded",
    "cache_hits",
    "cycle_skips",
    "time_ms",
]


def append_solve_metrics(csv_path: str, p1_cubies: int, p2_cubies: int, mode: str, evaluation, stats) -> None:
    """Append one solve (root evaluation and solver statistics) to a CSV file.

    Creates the file and its directory with a header row if it doesn't exist.

    Example:
        >>> append_solve_metrics('solves.csv', 3, 0, 'full', evaluator_result, evaluator.stats)
    """
    directory = os.path.dirname(csv_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    file_exists = os.path.exists(csv_path)
    row = [
        p1_cubies,
        p2_cubies,
        mode,
        evaluation.outcome,
        evaluation.distance,
        stats.positions,
        stats.nodes_expanded,
        stats.cache_hits,
        stats.cycle_skips,
        stats.time_ms,
    ]

    with open(csv_path, 'a', newline='') as f:
        writer = csv.writer(f)
        if not file_exists:
            writer.writerow(SOLVE_METRICS_HEADERS)
        writer.writerow(row)
