"""Evaluation map persistence."""

from .codec import (
    EvaluationDecodeError,
    decode,
    encode,
    filter_evaluations,
    load_evaluations,
    merge_evaluations,
    save_evaluations,
)
from .eval_db import EvaluationDB, export_to_db

__all__ = [
    "encode",
    "decode",
    "EvaluationDecodeError",
    "filter_evaluations",
    "merge_evaluations",
    "save_evaluations",
    "load_evaluations",
    "EvaluationDB",
    "export_to_db",
]
