"""
Game State - The single snapshot the engine operates on.

Design principles:
- Immutable-friendly: all mutations return new state
- Serializable: plain dataclasses, enums and lists
- Replayable: the seed is part of the state, so the same actions
  applied to the same snapshot always give the same result
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from copy import deepcopy
from enum import Enum

from .board import Board, StagingArea
from .rng import Seed
from .tiles import Tile, STORE_COUNT, sort_tiles


class GamePhase(Enum):
    """Where the game loop stands."""
    AWAITING_DRAFT = "awaiting_draft"
    AWAITING_PLACEMENT = "awaiting_placement"
    ROUND_END = "round_end"
    GAME_OVER = "game_over"


@dataclass
class PlayerState:
    """
    State for a single player.

    to_place holds drafted tiles until the player picks a staging row.
    has_token_penalty marks that the player took the first-player token
    from the pool this round; the token fills the first penalty slot.
    """
    player_id: str
    name: str
    board: Board = field(default_factory=Board)
    staging: StagingArea = field(default_factory=StagingArea)
    negatives: list[Tile] = field(default_factory=list)
    score: int = 0
    to_place: list[Tile] = field(default_factory=list)
    is_first_player: bool = False
    has_token_penalty: bool = False

    @property
    def tile_count(self) -> int:
        return (
            len(self.to_place)
            + len(self.negatives)
            + self.staging.tile_count
            + self.board.tile_count
        )

    def _copy_with(self, **kwargs) -> PlayerState:
        """Create a copy with some fields replaced."""
        return replace(self, **kwargs)


@dataclass
class CenterPool:
    """Tiles passed over during drafting, plus the first-player token."""
    tiles: list[Tile] = field(default_factory=list)
    has_first_player_token: bool = False

    @property
    def is_empty(self) -> bool:
        """True when no tiles remain; the token alone does not count."""
        return len(self.tiles) == 0

    def with_tiles(self, tiles: list[Tile]) -> CenterPool:
        return CenterPool(
            tiles=sort_tiles(tiles),
            has_first_player_token=self.has_first_player_token,
        )


def _empty_stores() -> list[list[Tile]]:
    return [[] for _ in range(STORE_COUNT)]


@dataclass
class GameState:
    """
    Complete game state at a point in time.

    players is ordered; that order is the turn order.
    All state changes go through the reducer.
    """
    game_id: str

    # Players
    players: list[PlayerState] = field(default_factory=list)
    current_player_idx: int = 0

    # Draft area
    stores: list[list[Tile]] = field(default_factory=_empty_stores)
    pool: CenterPool = field(default_factory=CenterPool)

    # Supply
    bag: list[Tile] = field(default_factory=list)
    discard: list[Tile] = field(default_factory=list)

    # Randomness
    seed: Seed = field(default_factory=lambda: Seed(0))
    initial_seed: int = 0

    # Progress
    phase: GamePhase = GamePhase.AWAITING_DRAFT
    round_number: int = 1
    turn_number: int = 0
    winner_ids: list[str] = field(default_factory=list)

    @property
    def current_player(self) -> PlayerState:
        return self.players[self.current_player_idx]

    @property
    def player_turn(self) -> str:
        """Id of the player whose turn it is."""
        return self.current_player.player_id

    @property
    def num_players(self) -> int:
        return len(self.players)

    @property
    def is_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    def get_player(self, player_id: str) -> PlayerState | None:
        """Get player by ID."""
        for p in self.players:
            if p.player_id == player_id:
                return p
        return None

    def get_store(self, store_index: int) -> list[Tile]:
        """Bounds-checked store access."""
        if not 0 <= store_index < len(self.stores):
            raise IndexError(f"Store {store_index} does not exist")
        return self.stores[store_index]

    def with_player(self, player: PlayerState) -> GameState:
        """Return new state with updated player."""
        new_players = [
            player if p.player_id == player.player_id else p
            for p in self.players
        ]
        return self._copy_with(players=new_players)

    def with_store(self, store_index: int, tiles: list[Tile]) -> GameState:
        """Return new state with updated store contents."""
        self.get_store(store_index)
        new_stores = [list(s) for s in self.stores]
        new_stores[store_index] = sort_tiles(tiles)
        return self._copy_with(stores=new_stores)

    def tile_count(self) -> int:
        """Every tile in play or set aside; always equals the supply size."""
        return (
            len(self.bag)
            + len(self.discard)
            + sum(len(s) for s in self.stores)
            + len(self.pool.tiles)
            + sum(p.tile_count for p in self.players)
        )

    def _copy_with(self, **kwargs) -> GameState:
        """Create a copy with some fields replaced."""
        return replace(self, **kwargs)

    def clone(self) -> GameState:
        """Deep copy the state."""
        return deepcopy(self)
