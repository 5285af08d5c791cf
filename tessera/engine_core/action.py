"""
Action System - Actions, payloads, and results.

Actions represent the intents the presentation layer sends:
1. Starting a new game
2. Drafting from a store or from the pool
3. Placing held tiles on a staging row

All state changes flow through actions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .errors import ErrorCode
from .tiles import Tile


class ActionType(Enum):
    """Types of actions in the system."""
    NEW_GAME = "new_game"
    SELECT_FROM_STORE = "select_from_store"
    SELECT_FROM_POOL = "select_from_pool"
    PLACE_FROM_HELD = "place_from_held"


@dataclass
class ActionPayload:
    """
    Payload for an action - contains the action parameters.

    Different action types use different fields.
    Validation happens in the reducer.
    """
    player_id: str | None = None
    store_index: int | None = None
    tile: Tile | None = None
    row_index: int | None = None

    # For new games
    seed: int | None = None


@dataclass
class Action:
    """
    A complete action to be applied to the game state.

    Actions are applied atomically by the reducer: either the whole
    action succeeds or the state is left untouched.
    """
    action_type: ActionType
    payload: ActionPayload = field(default_factory=ActionPayload)

    @classmethod
    def new_game(cls, seed: int | None = None) -> Action:
        """Factory for a full re-initialization."""
        return cls(
            action_type=ActionType.NEW_GAME,
            payload=ActionPayload(seed=seed),
        )

    @classmethod
    def select_from_store(cls, player_id: str, store_index: int, tile: Tile) -> Action:
        """Factory for a store draft."""
        return cls(
            action_type=ActionType.SELECT_FROM_STORE,
            payload=ActionPayload(player_id=player_id, store_index=store_index, tile=tile),
        )

    @classmethod
    def select_from_pool(cls, player_id: str, tile: Tile) -> Action:
        """Factory for a pool draft."""
        return cls(
            action_type=ActionType.SELECT_FROM_POOL,
            payload=ActionPayload(player_id=player_id, tile=tile),
        )

    @classmethod
    def place_from_held(cls, player_id: str, row_index: int) -> Action:
        """Factory for placing held tiles (PENALTY_ROW for the penalty line)."""
        return cls(
            action_type=ActionType.PLACE_FROM_HELD,
            payload=ActionPayload(player_id=player_id, row_index=row_index),
        )

    def describe(self) -> str:
        p = self.payload
        if self.action_type == ActionType.SELECT_FROM_STORE:
            return f"{p.player_id} takes {p.tile.value} from store {p.store_index}"
        if self.action_type == ActionType.SELECT_FROM_POOL:
            return f"{p.player_id} takes {p.tile.value} from the pool"
        if self.action_type == ActionType.PLACE_FROM_HELD:
            return f"{p.player_id} places held tiles on row {p.row_index}"
        return "new game"


@dataclass
class ActionResult:
    """
    Result of applying an action.

    Contains:
    - Whether action succeeded
    - The resulting state (the unchanged input state on failure)
    - Error message and code (if failed)
    - Human-readable changes (for the view)
    """
    success: bool
    new_state: Any | None = None  # GameState
    error: str | None = None
    error_code: ErrorCode | None = None

    state_changes: list[str] = field(default_factory=list)

    @classmethod
    def failure(cls, state: Any, error: str, error_code: ErrorCode) -> ActionResult:
        """Create a failure result carrying the unchanged state."""
        return cls(success=False, new_state=state, error=error, error_code=error_code)

    @classmethod
    def success_with_state(cls, state: Any, changes: list[str] | None = None) -> ActionResult:
        """Create a success result with new state."""
        return cls(success=True, new_state=state, state_changes=changes or [])
