import logging
from collections.abc import Mapping
from typing import Iterable, Iterator, Optional, Tuple

import lmdb

from ..search.evaluator import Evaluation

logger = logging.getLogger(__name__)


def _encode_key(key: int) -> bytes:
    # Big-endian so LMDB's byte order matches numeric order
    return key.to_bytes(8, "big")


def _encode_value(evaluation: Evaluation) -> bytes:
    return evaluation.outcome.to_bytes(1, "little", signed=True) + evaluation.distance.to_bytes(
        4, "little", signed=True
    )


def _decode_value(value: bytes) -> Evaluation:
    return Evaluation(
        int.from_bytes(value[:1], "little", signed=True),
        int.from_bytes(value[1:5], "little", signed=True),
    )


class EvaluationDB(Mapping):
    """LMDB-backed fingerprint -> evaluation store.

    Reads follow the ``dict`` interface so the store can stand in for an
    in-memory map. Writes only add: an existing entry is never replaced.
    """

    def __init__(self, db_path: str, map_size: int = 256 * 1024**2, readonly: bool = False):
        self.db_path = db_path
        self.readonly = readonly
        self.env = lmdb.open(db_path, map_size=map_size, readonly=readonly)

    def __getitem__(self, key: int) -> Evaluation:
        with self.env.begin() as txn:
            value = txn.get(_encode_key(key))
        if value is None:
            raise KeyError(key)
        return _decode_value(value)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        with self.env.begin() as txn:
            return txn.get(_encode_key(key)) is not None

    def __iter__(self) -> Iterator[int]:
        for key, _ in self.items():
            yield key

    def __len__(self) -> int:
        with self.env.begin() as txn:
            return txn.stat()["entries"]

    def items(self) -> Iterator[Tuple[int, Evaluation]]:
        """Entries in ascending fingerprint order."""
        with self.env.begin() as txn:
            for key, value in txn.cursor():
                yield int.from_bytes(key, "big"), _decode_value(value)

    def _write(self, entries) -> int:
        added = 0
        with self.env.begin(write=True) as txn:
            for key, evaluation in entries:
                if txn.put(_encode_key(key), _encode_value(evaluation), overwrite=False):
                    added += 1
        return added

    def put_many(self, entries: Iterable[Tuple[int, Evaluation]]) -> int:
        """Add entries whose fingerprint is not stored yet.

        Returns:
            Number of entries actually added
        """
        entries = list(entries)
        try:
            added = self._write(entries)
        except lmdb.MapFullError as e:
            # The failed transaction was aborted, so the retry starts clean
            try:
                while True:
                    self._resize_map()
                    try:
                        added = self._write(entries)
                        break
                    except lmdb.MapFullError:
                        continue
            except lmdb.Error as resize_error:
                logger.error("Failed to resize LMDB and retry operation: %s", resize_error)
                raise RuntimeError(f"Unable to store evaluations due to LMDB resize failure: {resize_error}") from e

        logger.debug("Stored %d of %d evaluations in %s", added, len(entries), self.db_path)
        return added

    def put(self, key: int, evaluation: Evaluation) -> bool:
        return self.put_many([(key, evaluation)]) == 1

    def _resize_map(self) -> None:
        """Grow the LMDB map by 50%"""
        current_size = self.env.info()["map_size"]
        new_size = int(current_size * 1.5)
        logger.warning(
            "Resizing LMDB map: %.1fMB -> %.1fMB", current_size / 1024**2, new_size / 1024**2
        )
        self.env.set_mapsize(new_size)

    def close(self) -> None:
        """Close the LMDB environment"""
        if getattr(self, "env", None) is not None:
            try:
                self.env.close()
            finally:
                self.env = None

    def __del__(self):
        self.close()

    def __enter__(self) -> "EvaluationDB":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def export_to_db(evaluations, db_path: str, map_size: Optional[int] = None) -> int:
    """Copy an evaluation map into an ``EvaluationDB`` at ``db_path``.

    Returns:
        Number of entries added
    """
    kwargs = {} if map_size is None else {"map_size": map_size}
    with EvaluationDB(db_path, **kwargs) as db:
        return db.put_many(evaluations.items())
