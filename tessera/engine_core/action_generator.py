"""
Action Generator - Generates all legal actions from a game state.

The action generator is used by:
1. The view to show available moves
2. The CLI playout
3. Validation (is this action in legal_actions?)

Design: Generates Action objects, not just action types.
This ensures all generated actions are fully specified.
"""

from __future__ import annotations

from .action import Action, ActionType
from .scoring import can_stage
from .state import GameState, GamePhase
from .tiles import STAGING_CAPACITIES, PENALTY_ROW, sort_tiles


class ActionGenerator:
    """Generates legal actions for the current player."""

    def generate(self, state: GameState) -> list[Action]:
        """
        Generate all legal actions for the current player.

        Returns a list of fully-specified Action objects.
        """
        if state.phase == GamePhase.GAME_OVER:
            return [Action.new_game()]

        if state.phase == GamePhase.AWAITING_PLACEMENT:
            return self._generate_placement_actions(state)

        actions = []
        actions.extend(self._generate_store_actions(state))
        actions.extend(self._generate_pool_actions(state))
        return actions

    def _generate_store_actions(self, state: GameState) -> list[Action]:
        """One action per distinct tile type in each store."""
        player_id = state.player_turn
        actions = []
        for index, store in enumerate(state.stores):
            for tile in sort_tiles(set(store)):
                actions.append(Action.select_from_store(player_id, index, tile))
        return actions

    def _generate_pool_actions(self, state: GameState) -> list[Action]:
        player_id = state.player_turn
        return [
            Action.select_from_pool(player_id, tile)
            for tile in sort_tiles(set(state.pool.tiles))
        ]

    def _generate_placement_actions(self, state: GameState) -> list[Action]:
        """Every compatible staging row, plus the penalty line which is always legal."""
        player = state.current_player
        if not player.to_place:
            return []

        tile = player.to_place[0]
        actions = [
            Action.place_from_held(player.player_id, row)
            for row in range(len(STAGING_CAPACITIES))
            if can_stage(player, row, tile)
        ]
        actions.append(Action.place_from_held(player.player_id, PENALTY_ROW))
        return actions


def legal_actions(state: GameState) -> list[Action]:
    """
    Convenience function to get legal actions.

    Creates an ActionGenerator and generates actions.
    """
    generator = ActionGenerator()
    return generator.generate(state)


def is_legal(state: GameState, action: Action) -> bool:
    """Check if a specific action is legal."""
    if action.action_type == ActionType.NEW_GAME:
        return True
    for a in legal_actions(state):
        if a.action_type == action.action_type and a.payload == action.payload:
            return True
    return False
