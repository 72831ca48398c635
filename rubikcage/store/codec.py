"""Binary serialization of evaluation maps.

Layout (all integers little-endian):

    b"RCEV" | version (u8) | count (u64) | count x record

Records are ``(key: u64, outcome: i8, distance: i32)`` packed without
padding and sorted by key, so equal maps always encode to equal bytes.
"""

import logging
import os
from typing import Dict, Mapping

import numpy as np

from ..search.evaluator import Evaluation

logger = logging.getLogger(__name__)

MAGIC = b"RCEV"
VERSION = 1

RECORD_DTYPE = np.dtype([("key", "<u8"), ("outcome", "i1"), ("distance", "<i4")])
_COUNT_DTYPE = np.dtype("<u8")
HEADER_SIZE = len(MAGIC) + 1 + _COUNT_DTYPE.itemsize


class EvaluationDecodeError(ValueError):
    """Raised when bytes are not a valid encoded evaluation map."""


def encode(evaluations: Mapping[int, Evaluation]) -> bytes:
    records = np.empty(len(evaluations), dtype=RECORD_DTYPE)
    for idx, (key, evaluation) in enumerate(evaluations.items()):
        records[idx] = (key, evaluation.outcome, evaluation.distance)
    records.sort(order="key")

    header = MAGIC + bytes([VERSION]) + np.array(len(records), dtype=_COUNT_DTYPE).tobytes()
    return header + records.tobytes()


def decode(data: bytes) -> Dict[int, Evaluation]:
    """Inverse of :func:`encode`.

    Raises:
        EvaluationDecodeError: Wrong magic or version, truncated or trailing
            bytes, or an outcome outside {-1, 0, 1}.
    """
    if len(data) < HEADER_SIZE:
        raise EvaluationDecodeError(f"Truncated header: {len(data)} bytes")
    if data[: len(MAGIC)] != MAGIC:
        raise EvaluationDecodeError(f"Bad magic: {data[:len(MAGIC)]!r}")
    version = data[len(MAGIC)]
    if version != VERSION:
        raise EvaluationDecodeError(f"Unsupported version: {version}")

    count = int(np.frombuffer(data, dtype=_COUNT_DTYPE, count=1, offset=len(MAGIC) + 1)[0])
    expected = HEADER_SIZE + count * RECORD_DTYPE.itemsize
    if len(data) < expected:
        raise EvaluationDecodeError(f"Truncated data: expected {expected} bytes, got {len(data)}")
    if len(data) > expected:
        raise EvaluationDecodeError(f"Trailing data: expected {expected} bytes, got {len(data)}")

    records = np.frombuffer(data, dtype=RECORD_DTYPE, count=count, offset=HEADER_SIZE)
    if not np.isin(records["outcome"], (-1, 0, 1)).all():
        raise EvaluationDecodeError("Invalid outcome in record")

    return {
        int(key): Evaluation(int(outcome), int(distance))
        for key, outcome, distance in zip(records["key"], records["outcome"], records["distance"])
    }


def filter_evaluations(evaluations: Mapping[int, Evaluation], min_distance: int) -> Dict[int, Evaluation]:
    """Keep entries with ``distance >= min_distance``. Draws carry distance -1."""
    return {key: ev for key, ev in evaluations.items() if ev.distance >= min_distance}


def merge_evaluations(base: Mapping[int, Evaluation], *others: Mapping[int, Evaluation]) -> Dict[int, Evaluation]:
    """Combine maps from independent solves; the first map holding a key wins."""
    merged = dict(base)
    for other in others:
        for key, evaluation in other.items():
            merged.setdefault(key, evaluation)
    return merged


def save_evaluations(path: str, evaluations: Mapping[int, Evaluation]) -> None:
    data = encode(evaluations)
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "wb") as f:
        f.write(data)
    logger.info("Saved %d evaluations to %s (%d bytes)", len(evaluations), path, len(data))


def load_evaluations(path: str) -> Dict[int, Evaluation]:
    with open(path, "rb") as f:
        data = f.read()
    evaluations = decode(data)
    logger.info("Loaded %d evaluations from %s", len(evaluations), path)
    return evaluations
