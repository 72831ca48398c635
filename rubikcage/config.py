"""Centralized configuration for rubikcage.

Game presets, solver settings and evaluation store settings live here so
that the CLI, scripts and tests agree on the defaults.
"""

from dataclasses import dataclass
from typing import Dict, Optional


# ============================================================================
# Game Presets
# ============================================================================

@dataclass
class GameConfig:
    """Starting cubie counts for a game"""
    p1_cubies: int
    p2_cubies: int
    description: str = ""

    @property
    def total_cubies(self) -> int:
        return self.p1_cubies + self.p2_cubies

    def get_description(self) -> str:
        """Get human-readable description"""
        if self.description:
            return self.description
        return f"{self.p1_cubies} vs {self.p2_cubies} cubies"


GAME_PRESETS: Dict[str, GameConfig] = {
    "trivial": GameConfig(
        p1_cubies=1,
        p2_cubies=1,
        description="One cubie each: nobody can complete a line (draw)"
    ),
    "lopsided": GameConfig(
        p1_cubies=3,
        p2_cubies=0,
        description="Three cubies against none: first player wins in 5"
    ),
    "small": GameConfig(
        p1_cubies=2,
        p2_cubies=2,
        description="Two cubies each: solves in well under a second"
    ),
    "quick": GameConfig(
        p1_cubies=4,
        p2_cubies=4,
        description="Four cubies each: a few minutes"
    ),
    "standard": GameConfig(
        p1_cubies=12,
        p2_cubies=12,
        description="Full game, enough cubies to fill the cage: very long solve"
    ),
}


# ============================================================================
# Solver Configuration
# ============================================================================

SEARCH_MODES = ("full", "optimal", "pruned")


@dataclass
class SolverConfig:
    """Exhaustive search settings"""
    mode: str = "full"
    progress: bool = False
    # Worker thread stack for the recursive search
    stack_size_mb: int = 256
    recursion_limit: int = 100_000

    @property
    def search_mode(self):
        """The ``SearchMode`` member named by ``mode``"""
        from .search.evaluator import SearchMode

        if self.mode not in SEARCH_MODES:
            raise ValueError(f"Unknown search mode: {self.mode}. Available: {list(SEARCH_MODES)}")
        return SearchMode(self.mode)


# ============================================================================
# Store Configuration
# ============================================================================

@dataclass
class StoreConfig:
    """Evaluation store settings"""
    # Positions closer than this to the end of the game are cheap to solve
    # on demand and get filtered out of shipped maps
    min_distance: int = 3
    lmdb_map_size_mb: int = 256


# ============================================================================
# Helper Functions
# ============================================================================

def get_game_config(preset: str) -> GameConfig:
    """Get game configuration by preset name"""
    if preset not in GAME_PRESETS:
        raise ValueError(f"Unknown game preset: {preset}. Available: {list(GAME_PRESETS.keys())}")
    return GAME_PRESETS[preset]


def get_solver_config(mode: str = "full", progress: bool = False) -> SolverConfig:
    """Get solver configuration for a search mode name"""
    if mode not in SEARCH_MODES:
        raise ValueError(f"Unknown search mode: {mode}. Available: {list(SEARCH_MODES)}")
    return SolverConfig(mode=mode, progress=progress)


def print_config_summary(
    game: GameConfig,
    solver: SolverConfig,
    store: Optional[StoreConfig] = None,
) -> None:
    """Print configuration summary"""
    print("=" * 70)
    print("RUBIKCAGE CONFIGURATION")
    print("=" * 70)

    print(f"\n🎲 Game: {game.get_description()}")
    print(f"   Player 1 cubies: {game.p1_cubies}")
    print(f"   Player 2 cubies: {game.p2_cubies}")

    print(f"\n🔍 Solver:")
    print(f"   Mode: {solver.mode}")
    print(f"   Progress bar: {'on' if solver.progress else 'off'}")
    print(f"   Stack: {solver.stack_size_mb} MB, recursion limit {solver.recursion_limit:,}")

    if store is not None:
        print(f"\n💾 Store:")
        print(f"   Min distance kept: {store.min_distance}")
        print(f"   LMDB map size: {store.lmdb_map_size_mb} MB")

    print("=" * 70)


# ============================================================================
# Exports
# ============================================================================

__all__ = [
    "GameConfig",
    "SolverConfig",
    "StoreConfig",
    "GAME_PRESETS",
    "SEARCH_MODES",
    "get_game_config",
    "get_solver_config",
    "print_config_summary",
]
