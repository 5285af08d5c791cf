"""
Game Loop - Drives a session through draft, placement and round ends.

The loop:
1. Current player drafts from a store or the pool
2. Same player places the held tiles
3. Turn passes; when the draft is exhausted the round resolves
4. Repeat until a board completes a row
5. From GAME_OVER only a new game is accepted

Actions are applied strictly in the order they are submitted.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING
import logging

from ..engine_core.action import Action, ActionType
from ..engine_core.action_generator import legal_actions
from ..engine_core.errors import ErrorCode
from ..engine_core.reducer import Reducer
from ..engine_core.state import GameState, GamePhase
from ..engine_core.tiles import Tile

if TYPE_CHECKING:
    from .manager import Session

logger = logging.getLogger(__name__)


class LoopState(Enum):
    """State of the game loop."""
    AWAITING_DRAFT = "awaiting_draft"
    AWAITING_PLACEMENT = "awaiting_placement"
    ROUND_END = "round_end"
    GAME_OVER = "game_over"


_PHASE_TO_LOOP = {
    GamePhase.AWAITING_DRAFT: LoopState.AWAITING_DRAFT,
    GamePhase.AWAITING_PLACEMENT: LoopState.AWAITING_PLACEMENT,
    GamePhase.ROUND_END: LoopState.ROUND_END,
    GamePhase.GAME_OVER: LoopState.GAME_OVER,
}


@dataclass
class TurnResult:
    """
    Result of submitting one action.

    state is the snapshot after the action; on failure it is the
    unchanged snapshot.
    """
    success: bool
    loop_state: LoopState
    state: GameState

    changes: list[str] = field(default_factory=list)
    error: str | None = None
    error_code: ErrorCode | None = None

    round_ended: bool = False
    winners: list[str] = field(default_factory=list)


class GameLoop:
    """
    The main game loop driver.

    Usage:
        loop = GameLoop(session)

        result = loop.select_from_store("player_1", 3, Tile.RED)
        if not result.success:
            show_error(result.error)

        result = loop.place_from_held("player_1", 2)
        render(result.state)
    """

    def __init__(self, session: Session, reducer: Reducer | None = None):
        self.session = session
        self.reducer = reducer or Reducer()

    @property
    def state(self) -> LoopState:
        return _PHASE_TO_LOOP[self.session.game_state.phase]

    def submit(self, action: Action) -> TurnResult:
        """Apply one action to the session's current snapshot."""
        before = self.session.game_state
        result = self.reducer.apply(before, action)

        if not result.success:
            logger.info(
                "Session %s rejected %s: %s",
                self.session.session_id, action.describe(), result.error,
            )
            return TurnResult(
                success=False,
                loop_state=self.state,
                state=before,
                error=result.error,
                error_code=result.error_code,
            )

        after = result.new_state
        self.session.replace_state(after)
        logger.debug("Session %s applied %s", self.session.session_id, action.describe())

        return TurnResult(
            success=True,
            loop_state=self.state,
            state=after,
            changes=result.state_changes,
            round_ended=action.action_type == ActionType.PLACE_FROM_HELD and (
                after.round_number != before.round_number
                or after.phase == GamePhase.GAME_OVER
            ),
            winners=list(after.winner_ids),
        )

    def new_game(self, seed: int | None = None) -> TurnResult:
        return self.submit(Action.new_game(seed))

    def select_from_store(self, player_id: str, store_index: int, tile: Tile) -> TurnResult:
        return self.submit(Action.select_from_store(player_id, store_index, tile))

    def select_from_pool(self, player_id: str, tile: Tile) -> TurnResult:
        return self.submit(Action.select_from_pool(player_id, tile))

    def place_from_held(self, player_id: str, row_index: int) -> TurnResult:
        return self.submit(Action.place_from_held(player_id, row_index))

    def legal_actions(self) -> list[Action]:
        return legal_actions(self.session.game_state)
