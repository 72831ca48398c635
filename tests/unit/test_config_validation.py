"""Unit tests for configuration presets, validation and metrics logging."""

import csv
import logging
import os

import pytest

from rubikcage.config import (
    GAME_PRESETS,
    SolverConfig,
    StoreConfig,
    get_game_config,
    get_solver_config,
    print_config_summary,
)
from rubikcage.search.evaluator import DRAW_DISTANCE, Evaluation, SearchMode, SearchStats
from rubikcage.utils.metrics import SOLVE_METRICS_HEADERS, append_solve_metrics
from rubikcage.utils.validation import (
    print_validation_errors,
    validate_filter_config,
    validate_game_config,
    validate_solver_config,
)


class TestConfig:
    """Test presets and helpers."""

    def test_game_presets(self):
        """Test the named games."""
        assert (GAME_PRESETS["trivial"].p1_cubies, GAME_PRESETS["trivial"].p2_cubies) == (1, 1)
        assert (GAME_PRESETS["lopsided"].p1_cubies, GAME_PRESETS["lopsided"].p2_cubies) == (3, 0)
        assert get_game_config("standard").total_cubies == 24

    def test_unknown_preset(self):
        """Test unknown names raise ValueError."""
        with pytest.raises(ValueError):
            get_game_config("huge")
        with pytest.raises(ValueError):
            get_solver_config("fastest")

    def test_search_mode(self):
        """Test mode names map onto search modes."""
        assert SolverConfig().search_mode is SearchMode.FULL
        assert get_solver_config("optimal").search_mode is SearchMode.OPTIMAL_WL
        assert get_solver_config("pruned", progress=True).progress
        with pytest.raises(ValueError):
            SolverConfig(mode="bogus").search_mode

    def test_store_defaults(self):
        """Test the default filter threshold."""
        assert StoreConfig().min_distance == 3

    def test_print_config_summary(self, capsys):
        """Test the summary mentions every section."""
        print_config_summary(get_game_config("small"), SolverConfig(), StoreConfig())
        out = capsys.readouterr().out
        assert "Player 1 cubies: 2" in out
        assert "Mode: full" in out
        assert "Min distance kept: 3" in out


class TestValidation:
    """Test argument validation."""

    def test_valid_arguments(self):
        """Test sensible arguments pass."""
        assert validate_game_config(4, 4) == []
        assert validate_solver_config("pruned", 256) == []
        assert validate_filter_config(3) == []

    def test_invalid_arguments(self):
        """Test each problem is reported."""
        assert len(validate_game_config(-1, -2)) == 2
        assert len(validate_game_config(20, 20)) == 1
        assert len(validate_solver_config("fast", 0)) == 2
        assert len(validate_filter_config(-1)) == 1

    def test_print_validation_errors(self, caplog):
        """Test errors are logged."""
        logger = logging.getLogger("rubikcage.test")
        with caplog.at_level(logging.ERROR):
            print_validation_errors(validate_filter_config(-1), logger)
        assert "Invalid minimum distance" in caplog.text


class TestMetrics:
    """Test CSV metrics logging."""

    def test_append_creates_header_once(self, temp_data_dir):
        """Test the header is written only for a new file."""
        path = os.path.join(temp_data_dir, "out", "solves.csv")
        stats = SearchStats(nodes_expanded=12, cache_hits=3, positions=9, time_ms=41)
        append_solve_metrics(path, 3, 0, "full", Evaluation(1, 5), stats)
        append_solve_metrics(path, 1, 1, "pruned", Evaluation(0, DRAW_DISTANCE), SearchStats())

        with open(path, newline="") as f:
            rows = list(csv.reader(f))
        assert rows[0] == SOLVE_METRICS_HEADERS
        assert rows[1] == ["3", "0", "full", "1", "5", "9", "12", "3", "0", "41"]
        assert rows[2][:5] == ["1", "1", "pruned", "0", "-1"]
        assert len(rows) == 3
