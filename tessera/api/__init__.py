"""
API Module - Presentation layer interface.

Exposes the engine via REST for a thin view that renders state and
emits user intents:
1. Creates games from a seed
2. Forwards draft and placement actions
3. Returns the full state snapshot after each action

All state is session-scoped and in memory.
"""

from .schemas import (
    # Requests
    CreateGameRequest,
    NewGameRequest,
    StoreSelectionRequest,
    PoolSelectionRequest,
    PlacementRequest,
    # Responses
    ActionResponse,
    GameStateResponse,
    LegalActionsResponse,
    ErrorResponse,
    # Shared
    PlayerInfo,
    StoreInfo,
    PoolInfo,
    ActionInfo,
)
from .service import APIService

__all__ = [
    # Requests
    "CreateGameRequest",
    "NewGameRequest",
    "StoreSelectionRequest",
    "PoolSelectionRequest",
    "PlacementRequest",
    # Responses
    "ActionResponse",
    "GameStateResponse",
    "LegalActionsResponse",
    "ErrorResponse",
    # Shared
    "PlayerInfo",
    "StoreInfo",
    "PoolInfo",
    "ActionInfo",
    # Service
    "APIService",
]
