"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the contract between the view and the engine.
The state response is a read-only rendering of the full GameState
snapshot: stores, pool, every player's board, staging rows, negatives,
score and held tiles, plus whose turn it is.

Error Codes:
- INVALID_SELECTION: Store, tile type or pool selection not available
- INVALID_PLACEMENT: Held tiles cannot go to the requested row
- NOT_PLAYERS_TURN: Action issued by the wrong player
- GAME_OVER: Only a new game can be started
- GAME_NOT_FOUND: Game session does not exist
"""

from __future__ import annotations
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from ..engine_core.state import GameState, PlayerState
from ..engine_core.tiles import Tile, STORE_COUNT, BOARD_WIDTH, PENALTY_ROW
from ..engine_core.action import Action


# =============================================================================
# Enums
# =============================================================================

class GamePhaseName(str, Enum):
    """Game phase values."""
    AWAITING_DRAFT = "awaiting_draft"
    AWAITING_PLACEMENT = "awaiting_placement"
    ROUND_END = "round_end"
    GAME_OVER = "game_over"


class ErrorCode(str, Enum):
    """Structured error codes."""
    INVALID_SELECTION = "INVALID_SELECTION"
    INVALID_PLACEMENT = "INVALID_PLACEMENT"
    NOT_PLAYERS_TURN = "NOT_PLAYERS_TURN"
    GAME_OVER = "GAME_OVER"
    UNKNOWN_ACTION = "UNKNOWN_ACTION"
    GAME_NOT_FOUND = "GAME_NOT_FOUND"


# =============================================================================
# Shared Models
# =============================================================================

class PlayerInfo(BaseModel):
    """One player's area, rendered row by row."""
    player_id: str
    name: str
    score: int = 0
    is_first_player: bool = False
    is_current_turn: bool = False
    board: list[list[Optional[Tile]]] = Field(
        default_factory=list, description="5 rows of 5 cells, null for empty"
    )
    staging: list[list[Optional[Tile]]] = Field(
        default_factory=list, description="Rows of capacity 1..5, right-aligned"
    )
    negatives: list[Tile] = Field(default_factory=list)
    has_token_penalty: bool = False
    to_place: list[Tile] = Field(default_factory=list)

    @classmethod
    def from_player(cls, player: PlayerState, is_current_turn: bool) -> PlayerInfo:
        return cls(
            player_id=player.player_id,
            name=player.name,
            score=player.score,
            is_first_player=player.is_first_player,
            is_current_turn=is_current_turn,
            board=[player.board.row(row) for row in range(BOARD_WIDTH)],
            staging=[list(row) for row in player.staging.rows],
            negatives=list(player.negatives),
            has_token_penalty=player.has_token_penalty,
            to_place=list(player.to_place),
        )


class StoreInfo(BaseModel):
    store_index: int
    tiles: list[Tile] = Field(default_factory=list)


class PoolInfo(BaseModel):
    tiles: list[Tile] = Field(default_factory=list)
    has_first_player_token: bool = False


class ActionInfo(BaseModel):
    """A legal action, in request form."""
    action_type: str
    player_id: Optional[str] = None
    store_index: Optional[int] = None
    tile: Optional[Tile] = None
    row_index: Optional[int] = None

    @classmethod
    def from_action(cls, action: Action) -> ActionInfo:
        p = action.payload
        return cls(
            action_type=action.action_type.value,
            player_id=p.player_id,
            store_index=p.store_index,
            tile=p.tile,
            row_index=p.row_index,
        )


# =============================================================================
# Request Models
# =============================================================================

class CreateGameRequest(BaseModel):
    """Request to create a new game session."""
    seed: Optional[int] = Field(None, description="Root seed; random if omitted")
    player_names: list[str] = Field(
        default_factory=lambda: ["Player 1", "Player 2"],
        min_length=2,
        max_length=2,
    )


class NewGameRequest(BaseModel):
    """Request to re-initialize an existing session."""
    seed: Optional[int] = Field(None, description="Seed; the game's threaded seed if omitted")


class StoreSelectionRequest(BaseModel):
    player_id: str
    store_index: int = Field(ge=0, lt=STORE_COUNT)
    tile: Tile


class PoolSelectionRequest(BaseModel):
    player_id: str
    tile: Tile


class PlacementRequest(BaseModel):
    player_id: str
    row_index: int = Field(
        ge=PENALTY_ROW, lt=BOARD_WIDTH,
        description="Staging row 0-4, or -1 for the penalty line",
    )


# =============================================================================
# Response Models
# =============================================================================

class GameStateResponse(BaseModel):
    """Complete game state for rendering."""
    game_id: str
    phase: GamePhaseName
    round_number: int
    turn_number: int
    player_turn: str
    players: list[PlayerInfo] = Field(default_factory=list)
    stores: list[StoreInfo] = Field(default_factory=list)
    pool: PoolInfo
    bag_count: int = 0
    discard_count: int = 0
    seed: int
    winner_ids: list[str] = Field(default_factory=list)

    @classmethod
    def from_state(cls, state: GameState) -> GameStateResponse:
        return cls(
            game_id=state.game_id,
            phase=GamePhaseName(state.phase.value),
            round_number=state.round_number,
            turn_number=state.turn_number,
            player_turn=state.player_turn,
            players=[
                PlayerInfo.from_player(p, is_current_turn=i == state.current_player_idx)
                for i, p in enumerate(state.players)
            ],
            stores=[
                StoreInfo(store_index=i, tiles=list(tiles))
                for i, tiles in enumerate(state.stores)
            ],
            pool=PoolInfo(
                tiles=list(state.pool.tiles),
                has_first_player_token=state.pool.has_first_player_token,
            ),
            bag_count=len(state.bag),
            discard_count=len(state.discard),
            seed=state.initial_seed,
            winner_ids=list(state.winner_ids),
        )


class ActionResponse(BaseModel):
    """Outcome of an action; state is unchanged when success is false."""
    success: bool
    error: Optional[str] = None
    error_code: Optional[ErrorCode] = None
    changes: list[str] = Field(default_factory=list)
    round_ended: bool = False
    state: GameStateResponse


class LegalActionsResponse(BaseModel):
    game_id: str
    player_turn: str
    actions: list[ActionInfo] = Field(default_factory=list)


class GameListResponse(BaseModel):
    games: list[str] = Field(default_factory=list)
    count: int = 0


class EndGameResponse(BaseModel):
    success: bool
    game_id: str


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    error_code: ErrorCode


class HealthResponse(BaseModel):
    status: str = "healthy"
    service: str = "tessera-engine"
    version: str
