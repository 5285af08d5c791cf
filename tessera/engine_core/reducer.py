"""
Reducer - Applies actions to game state.

The reducer is the single point of state mutation.
All state changes must go through apply_action().

Design principles:
- Pure function: (state, action) -> new_state
- Validates before applying
- Returns ActionResult with success/failure; a failure carries the
  unchanged input state
- Delegates rules to the drafting, scoring and round modules
"""

from __future__ import annotations
import logging

from .action import Action, ActionType, ActionResult
from .drafting import select_from_store, select_from_pool, next_player_index
from .errors import (
    EngineError,
    ErrorCode,
    GameOverError,
    InvalidPlacement,
    InvalidSelection,
    NotPlayersTurn,
)
from .rounds import is_round_over, resolve_round_end
from .scoring import place_held_tiles
from .setup import new_game
from .state import GameState, GamePhase

logger = logging.getLogger(__name__)

DRAFT_ACTIONS = {ActionType.SELECT_FROM_STORE, ActionType.SELECT_FROM_POOL}


class Reducer:
    """
    Reducer applies actions to game state.

    Stateless - all state is in GameState.
    """

    def apply(self, state: GameState, action: Action) -> ActionResult:
        """
        Apply an action to the game state.

        Returns ActionResult with new state or error.
        """
        handler = self._get_handler(action.action_type)
        if not handler:
            return ActionResult.failure(
                state,
                f"No handler for action type: {action.action_type}",
                ErrorCode.UNKNOWN_ACTION,
            )

        try:
            self._validate_action(state, action)
            result = handler(state, action)
        except EngineError as e:
            logger.debug("Rejected %s in game %s: %s", action.action_type.value, state.game_id, e)
            return ActionResult.failure(state, str(e), e.code)

        return result

    def _validate_action(self, state: GameState, action: Action) -> None:
        """
        Check that an action is legal in the current state.

        Raises an EngineError describing the first problem found.
        """
        if action.action_type == ActionType.NEW_GAME:
            return

        if state.phase == GamePhase.GAME_OVER:
            raise GameOverError("Game is over - only a new game can be started")

        player_id = action.payload.player_id
        if player_id != state.player_turn:
            raise NotPlayersTurn(f"Not {player_id}'s turn")

        if action.action_type in DRAFT_ACTIONS:
            if state.phase != GamePhase.AWAITING_DRAFT:
                raise InvalidSelection("Held tiles must be placed before drafting again")
            if action.payload.tile is None:
                raise InvalidSelection("No tile type selected")

        if action.action_type == ActionType.PLACE_FROM_HELD:
            if state.phase != GamePhase.AWAITING_PLACEMENT:
                raise InvalidPlacement("No drafted tiles to place")
            if action.payload.row_index is None:
                raise InvalidPlacement("No row selected")

    def _get_handler(self, action_type: ActionType):
        """Get the handler function for an action type."""
        handlers = {
            ActionType.NEW_GAME: self._handle_new_game,
            ActionType.SELECT_FROM_STORE: self._handle_select_from_store,
            ActionType.SELECT_FROM_POOL: self._handle_select_from_pool,
            ActionType.PLACE_FROM_HELD: self._handle_place_from_held,
        }
        return handlers.get(action_type)

    def _handle_new_game(self, state: GameState, action: Action) -> ActionResult:
        """Full re-initialization, consuming the threaded seed unless one is given."""
        seed = action.payload.seed
        if seed is None:
            seed = state.seed.value

        new_state = new_game(
            seed=seed,
            players=[(p.player_id, p.name) for p in state.players] or None,
            game_id=state.game_id,
        )
        return ActionResult.success_with_state(
            new_state,
            changes=[f"New game started. {new_state.current_player.name} plays first"],
        )

    def _handle_select_from_store(self, state: GameState, action: Action) -> ActionResult:
        p = action.payload
        if p.store_index is None:
            raise InvalidSelection("No store selected")
        new_state = select_from_store(state, p.player_id, p.store_index, p.tile)
        held = len(new_state.current_player.to_place)
        return ActionResult.success_with_state(
            new_state,
            changes=[f"{state.current_player.name} took {held} {p.tile.value} from store {p.store_index}"],
        )

    def _handle_select_from_pool(self, state: GameState, action: Action) -> ActionResult:
        p = action.payload
        new_state = select_from_pool(state, p.player_id, p.tile)
        held = len(new_state.current_player.to_place)
        changes = [f"{state.current_player.name} took {held} {p.tile.value} from the pool"]
        if state.pool.has_first_player_token and not new_state.pool.has_first_player_token:
            changes.append(f"{state.current_player.name} takes the first-player token")
        return ActionResult.success_with_state(new_state, changes=changes)

    def _handle_place_from_held(self, state: GameState, action: Action) -> ActionResult:
        """Place held tiles, then pass the turn or resolve the round end."""
        player = state.current_player
        row_index = action.payload.row_index

        new_player, excess = place_held_tiles(player, row_index)
        new_state = state.with_player(new_player)._copy_with(
            discard=state.discard + excess,
            turn_number=state.turn_number + 1,
        )
        changes = [f"{player.name} placed held tiles on row {row_index}"]

        if is_round_over(new_state):
            finished_round = new_state.round_number
            new_state = resolve_round_end(new_state)
            changes.append(f"Round {finished_round} ended")
            if new_state.phase == GamePhase.GAME_OVER:
                changes.append(f"Game over. Winner(s): {', '.join(new_state.winner_ids)}")
            else:
                changes.append(f"Round {new_state.round_number} started. {new_state.current_player.name} plays first")
        else:
            new_state = new_state._copy_with(
                current_player_idx=next_player_index(new_state),
                phase=GamePhase.AWAITING_DRAFT,
            )

        return ActionResult.success_with_state(new_state, changes=changes)


def apply_action(state: GameState, action: Action) -> ActionResult:
    """
    Convenience function to apply an action.

    Creates a Reducer and applies the action.
    """
    reducer = Reducer()
    return reducer.apply(state, action)
