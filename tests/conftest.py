"""Pytest configuration and shared fixtures."""

import random
import shutil
import tempfile

import pytest

from rubikcage.core.game import GameState
from rubikcage.search.evaluator import Evaluation


@pytest.fixture
def rng():
    """Seeded random generator for reproducible random play."""
    return random.Random(42)


@pytest.fixture
def new_game():
    """Factory for fresh games."""
    def make(p1_cubies=4, p2_cubies=4):
        return GameState.new(p1_cubies, p2_cubies)
    return make


@pytest.fixture
def temp_data_dir():
    """Temporary directory for test data."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def sample_evaluations():
    """Small hand-made evaluation map covering every outcome."""
    return {
        0: Evaluation(0, -1),
        1: Evaluation(1, 0),
        7: Evaluation(-1, 4),
        2**63 + 5: Evaluation(1, 9),
        2**64 - 1: Evaluation(-1, 2),
        123456789: Evaluation(1, 3),
    }


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit test")
    config.addinivalue_line("markers", "integration: Integration test")
    config.addinivalue_line("markers", "slow: Slow test")
    config.addinivalue_line("markers", "solver: Runs the exhaustive solver")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add automatic markers."""
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)

        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "solve" in item.name.lower():
            item.add_marker(pytest.mark.solver)
