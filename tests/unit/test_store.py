"""Unit tests for evaluation map serialization and helpers."""

import os

import pytest

from rubikcage.search.evaluator import Evaluation
from rubikcage.store.codec import (
    HEADER_SIZE,
    MAGIC,
    RECORD_DTYPE,
    EvaluationDecodeError,
    decode,
    encode,
    filter_evaluations,
    load_evaluations,
    merge_evaluations,
    save_evaluations,
)


class TestCodec:
    """Test encode/decode."""

    def test_round_trip(self, sample_evaluations):
        """Test decoding restores the map exactly."""
        assert decode(encode(sample_evaluations)) == sample_evaluations

    def test_empty_map(self):
        """Test the empty map encodes to a bare header."""
        data = encode({})
        assert len(data) == HEADER_SIZE
        assert decode(data) == {}

    def test_layout(self, sample_evaluations):
        """Test header and record sizes."""
        data = encode(sample_evaluations)
        assert data.startswith(MAGIC)
        assert RECORD_DTYPE.itemsize == 13
        assert len(data) == HEADER_SIZE + len(sample_evaluations) * 13

    def test_encoding_independent_of_insertion_order(self, sample_evaluations):
        """Test records are sorted by key."""
        reversed_map = dict(reversed(list(sample_evaluations.items())))
        assert encode(reversed_map) == encode(sample_evaluations)

    def test_bad_magic(self, sample_evaluations):
        """Test foreign data is rejected."""
        data = b"XXXX" + encode(sample_evaluations)[4:]
        with pytest.raises(EvaluationDecodeError):
            decode(data)

    def test_bad_version(self, sample_evaluations):
        """Test unknown format versions are rejected."""
        data = bytearray(encode(sample_evaluations))
        data[len(MAGIC)] = 99
        with pytest.raises(EvaluationDecodeError):
            decode(bytes(data))

    def test_truncated(self, sample_evaluations):
        """Test missing bytes are detected."""
        data = encode(sample_evaluations)
        with pytest.raises(EvaluationDecodeError):
            decode(data[:-1])
        with pytest.raises(EvaluationDecodeError):
            decode(data[:5])

    def test_trailing_bytes(self, sample_evaluations):
        """Test extra bytes are detected."""
        with pytest.raises(EvaluationDecodeError):
            decode(encode(sample_evaluations) + b"\x00")

    def test_invalid_outcome(self):
        """Test outcomes outside {-1, 0, 1} are rejected."""
        data = bytearray(encode({5: Evaluation(1, 3)}))
        data[HEADER_SIZE + 8] = 7
        with pytest.raises(EvaluationDecodeError):
            decode(bytes(data))

    def test_decode_error_is_value_error(self):
        """Test callers can catch decode errors as ValueError."""
        with pytest.raises(ValueError):
            decode(b"")


class TestMapHelpers:
    """Test filtering and merging."""

    @pytest.mark.parametrize("threshold", [-1, 0, 3, 5, 100])
    def test_filter_is_subset(self, sample_evaluations, threshold):
        """Test filtered maps keep only far enough entries."""
        filtered = filter_evaluations(sample_evaluations, threshold)
        assert set(filtered) <= set(sample_evaluations)
        for key, evaluation in filtered.items():
            assert evaluation == sample_evaluations[key]
            assert evaluation.distance >= threshold
        dropped = set(sample_evaluations) - set(filtered)
        assert all(sample_evaluations[key].distance < threshold for key in dropped)

    def test_filter_drops_draws_for_positive_threshold(self, sample_evaluations):
        """Test draws carry the -1 sentinel."""
        assert 0 not in filter_evaluations(sample_evaluations, 0)
        assert 0 in filter_evaluations(sample_evaluations, -1)

    def test_merge_first_writer_wins(self):
        """Test existing entries are never overwritten."""
        base = {1: Evaluation(1, 3)}
        other = {1: Evaluation(0, -1), 2: Evaluation(-1, 2)}
        merged = merge_evaluations(base, other)
        assert merged == {1: Evaluation(1, 3), 2: Evaluation(-1, 2)}
        assert base == {1: Evaluation(1, 3)}


class TestFiles:
    """Test saving and loading."""

    def test_save_and_load(self, sample_evaluations, temp_data_dir):
        """Test a map survives a trip through a file."""
        path = os.path.join(temp_data_dir, "nested", "evaluations.bin")
        save_evaluations(path, sample_evaluations)
        assert os.path.exists(path)
        assert load_evaluations(path) == sample_evaluations

    def test_load_missing_file(self, temp_data_dir):
        """Test missing files raise OSError."""
        with pytest.raises(OSError):
            load_evaluations(os.path.join(temp_data_dir, "missing.bin"))
