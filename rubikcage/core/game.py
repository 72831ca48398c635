"""Game state: cage, players, remaining cubies and the position fingerprint."""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from . import zobrist
from .cage import COLUMNS, Cage
from .cubie import Cubie
from .lines import Line
from .moves import FLIP, GENERATED_ROTATIONS, Drop, Flip, Move, RotateLayer
from ..utils.symmetry import CageSymmetry


@dataclass(frozen=True)
class Player:
    color: Cubie
    id: int


@dataclass
class GameState:
    """Position of a two-player game.

    ``zobrist_hash`` always equals ``zobrist.compute_hash(cage.grid,
    player_to_move.id)``. Drops maintain it incrementally, every other
    move rebuilds it.
    """

    cage: Cage
    players: Tuple[Player, Player]
    remaining_cubies: List[int]
    player_to_move: Player
    zobrist_hash: int = 0
    last_move: Optional[Move] = None

    @classmethod
    def new(cls, p1_cubies: int, p2_cubies: int) -> "GameState":
        if p1_cubies < 0 or p2_cubies < 0:
            raise ValueError("Cubie counts must be non-negative")
        players = (Player(Cubie.BLUE, 0), Player(Cubie.RED, 1))
        return cls(
            cage=Cage(),
            players=players,
            remaining_cubies=[p1_cubies, p2_cubies],
            player_to_move=players[0],
        )

    def copy(self) -> "GameState":
        return GameState(
            cage=self.cage.copy(),
            players=self.players,
            remaining_cubies=list(self.remaining_cubies),
            player_to_move=self.player_to_move,
            zobrist_hash=self.zobrist_hash,
            last_move=self.last_move,
        )

    def legal_moves(self) -> List[Move]:
        """Moves available to the player to move, in a fixed order.

        Drops into every non-full, non-center column (if the player still
        has cubies), then the flip, then the six quarter-turn rotations.
        A move that exactly inverts the previous one is never offered.
        """
        moves: List[Move] = []
        mover = self.player_to_move

        if self.remaining_cubies[mover.id] > 0:
            for x, y in COLUMNS:
                if not self.cage.is_column_full(x, y):
                    moves.append(Drop(mover.color, (x, y)))

        undo = self.last_move.inverse() if self.last_move is not None else None

        if undo != FLIP:
            moves.append(FLIP)

        for rotation in GENERATED_ROTATIONS:
            if rotation != undo:
                moves.append(rotation)

        return moves

    def _advance_player_to_move(self) -> None:
        if self.player_to_move.id == 0:
            self.player_to_move = self.players[1]
        else:
            self.player_to_move = self.players[0]

    def _apply_to_cage(self, move: Move) -> None:
        """Apply ``move`` and pass the turn. Leaves the fingerprint to the caller."""
        mover = self.player_to_move
        if isinstance(move, Drop):
            # Validates before touching anything
            self.cage.drop(move.color, move.column)
            self.remaining_cubies[mover.id] -= 1
        elif isinstance(move, RotateLayer):
            self.cage.rotate_layer(move.layer, move.rotation)
        elif isinstance(move, Flip):
            self.cage.flip()
        else:
            raise TypeError(f"Unknown move: {move!r}")
        self._advance_player_to_move()
        self.last_move = move

    def apply_move(self, move: Move) -> None:
        """Apply ``move`` in place.

        Raises:
            LegalityError: Illegal drop target. The state is left unchanged.
        """
        if isinstance(move, Drop):
            x, y = move.column
            z = self.cage.drop(move.color, move.column)
            self.remaining_cubies[self.player_to_move.id] -= 1
            self._advance_player_to_move()
            self.last_move = move
            self.zobrist_hash ^= zobrist.slot_key(move.color, x, y, z) ^ zobrist.P2_TO_MOVE
        else:
            self._apply_to_cage(move)
            self.rebuild_zobrist_hash()

    def apply_move_normalize(self, move: Move) -> None:
        """Apply ``move`` and bring the result to canonical form."""
        self._apply_to_cage(move)
        self.normalize()

    def normalize(self) -> bool:
        """Replace the cage by its canonical symmetric image.

        Returns whether a reflection was used; in that case the last move
        is mirrored too so that inverse-move bookkeeping stays valid.
        """
        grid, reflected = CageSymmetry.normalize_grid(self.cage.grid)
        self.cage = Cage(grid)
        if reflected and self.last_move is not None:
            self.last_move = self.last_move.mirrored()
        self.rebuild_zobrist_hash()
        return reflected

    def won(self) -> Optional[Tuple[Player, Line]]:
        """Winning player and their line, if any player has three in a line."""
        for color, line in self.cage.complete_lines():
            for player in self.players:
                if player.color == color:
                    return player, line
        return None

    def rebuild_zobrist_hash(self) -> None:
        self.zobrist_hash = zobrist.compute_hash(self.cage.grid, self.player_to_move.id)

    def describe(self) -> str:
        mover = self.player_to_move
        return (
            f"Player {mover.id + 1} ({mover.color!s}) to move, "
            f"remaining cubies {self.remaining_cubies[0]}/{self.remaining_cubies[1]}, "
            f"last move: {self.last_move if self.last_move is not None else '-'}"
        )


def legal_moves(state: GameState) -> List[Move]:
    return state.legal_moves()


def apply_move(state: GameState, move: Move) -> GameState:
    """Return a new state with ``move`` applied; ``state`` is not modified."""
    new_state = state.copy()
    new_state.apply_move(move)
    return new_state


def normalize(state: GameState) -> GameState:
    """Canonical copy of ``state``, keyed the way evaluation maps are."""
    new_state = state.copy()
    new_state.normalize()
    return new_state
