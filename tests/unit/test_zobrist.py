"""Unit tests for position fingerprints."""

import numpy as np

from rubikcage.core import zobrist
from rubikcage.core.cubie import Cubie
from rubikcage.core.game import GameState
from rubikcage.core.moves import Drop, Layer, RotateLayer, Rotation


class TestTables:
    """Test the shared random tables."""

    def test_empty_row_is_zero(self):
        """Test empty slots contribute nothing."""
        assert not zobrist.POS_COLOR[0].any()
        assert zobrist.compute_hash(np.zeros((3, 3, 3), dtype=np.int8), 0) == 0

    def test_tables_read_only(self):
        """Test the table cannot be modified."""
        assert not zobrist.POS_COLOR.flags.writeable

    def test_entries_distinct(self):
        """Test color/slot entries do not collide."""
        entries = zobrist.POS_COLOR[1:].ravel()
        assert len(np.unique(entries)) == entries.size
        assert zobrist.P2_TO_MOVE not in set(int(e) for e in entries)

    def test_second_player_constant(self):
        """Test the mover is part of the fingerprint."""
        grid = np.zeros((3, 3, 3), dtype=np.int8)
        assert zobrist.compute_hash(grid, 1) == zobrist.P2_TO_MOVE

    def test_single_slot(self):
        """Test a one-cubie grid hashes to its slot entry."""
        grid = np.zeros((3, 3, 3), dtype=np.int8)
        grid[2, 1, 0] = Cubie.GREEN
        assert zobrist.compute_hash(grid, 0) == zobrist.slot_key(Cubie.GREEN, 2, 1, 0)


class TestIncrementalHash:
    """Test fingerprint upkeep while playing."""

    def test_drop_is_incremental(self):
        """Test a drop XORs in the slot entry and the mover constant."""
        state = GameState.new(2, 2)
        state.apply_move(Drop(Cubie.BLUE, (0, 0)))
        expected = zobrist.slot_key(Cubie.BLUE, 0, 0, 0) ^ zobrist.P2_TO_MOVE
        assert state.zobrist_hash == expected

    def test_transpositions_share_fingerprint(self):
        """Test different move orders reaching the same position."""
        game1 = GameState.new(4, 4)
        game2 = GameState.new(4, 4)

        game1.apply_move(Drop(Cubie.BLUE, (0, 0)))
        game2.apply_move(Drop(Cubie.BLUE, (2, 0)))
        game2.apply_move(RotateLayer(Layer.DOWN, Rotation.COUNTER_CLOCKWISE))
        assert game1.zobrist_hash != game2.zobrist_hash

        game1.apply_move(RotateLayer(Layer.UP, Rotation.CLOCKWISE))
        assert game1.zobrist_hash == game2.zobrist_hash

    def test_incremental_matches_rebuild_after_random_play(self, rng):
        """Test the maintained fingerprint against a full rescan."""
        for _ in range(20):
            state = GameState.new(6, 6)
            for _ in range(50):
                if state.won() is not None:
                    break
                state.apply_move(rng.choice(state.legal_moves()))
                assert state.zobrist_hash == zobrist.compute_hash(state.cage.grid, state.player_to_move.id)

    def test_normalized_states_keep_invariant(self, rng):
        """Test the fingerprint after canonicalizing moves."""
        state = GameState.new(6, 6)
        for _ in range(40):
            if state.won() is not None:
                break
            state.apply_move_normalize(rng.choice(state.legal_moves()))
            assert state.zobrist_hash == zobrist.compute_hash(state.cage.grid, state.player_to_move.id)
