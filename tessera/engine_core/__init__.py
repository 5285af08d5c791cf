"""
Engine Core - Deterministic game state management for the tile-drafting game.

The engine is the runtime that:
1. Creates a GameState from a seed
2. Generates legal actions
3. Applies actions via the reducer
4. Resolves round ends, scoring and game over
"""

from .tiles import Tile, TILE_ORDER, PENALTY_ROW, TOTAL_TILES
from .board import Board, StagingArea, from_2d_point_to_index, from_index_to_2d_point
from .rng import Seed, shuffle, sample_without_replacement, apply_n_times
from .state import GameState, GamePhase, PlayerState, CenterPool
from .errors import (
    ErrorCode,
    EngineError,
    InvalidSelection,
    InvalidPlacement,
    NotPlayersTurn,
    GameOverError,
)
from .action import Action, ActionType, ActionPayload, ActionResult
from .setup import new_game
from .stores import fill_stores, refill_stores
from .reducer import Reducer, apply_action
from .action_generator import ActionGenerator, legal_actions, is_legal

__all__ = [
    "Tile",
    "TILE_ORDER",
    "PENALTY_ROW",
    "TOTAL_TILES",
    "Board",
    "StagingArea",
    "from_2d_point_to_index",
    "from_index_to_2d_point",
    "Seed",
    "shuffle",
    "sample_without_replacement",
    "apply_n_times",
    "GameState",
    "GamePhase",
    "PlayerState",
    "CenterPool",
    "ErrorCode",
    "EngineError",
    "InvalidSelection",
    "InvalidPlacement",
    "NotPlayersTurn",
    "GameOverError",
    "Action",
    "ActionType",
    "ActionPayload",
    "ActionResult",
    "new_game",
    "fill_stores",
    "refill_stores",
    "Reducer",
    "apply_action",
    "ActionGenerator",
    "legal_actions",
    "is_legal",
]
