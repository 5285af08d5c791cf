"""
Turn/Draft Engine - Takes tiles of one type from a store or the pool.

A draft moves every tile of the chosen type into the acting player's
to_place list. Drafting from a store pushes the rest of that store into
the pool; the first pool draw of a round also takes the first-player
token. Turn order and phase checks live in the reducer.
"""

from __future__ import annotations
import logging

from .errors import InvalidSelection
from .state import GameState, GamePhase
from .stores import merge_into_pool, stores_empty
from .tiles import Tile

logger = logging.getLogger(__name__)


def partition_tiles(tiles: list[Tile], tile: Tile) -> tuple[list[Tile], list[Tile]]:
    """Split tiles into (matching, non_matching)."""
    matching = [t for t in tiles if t == tile]
    non_matching = [t for t in tiles if t != tile]
    return matching, non_matching


def select_from_store(
    state: GameState,
    player_id: str,
    store_index: int,
    tile: Tile,
) -> GameState:
    """Take every tile of one type from a store; the rest go to the pool."""
    player = state.get_player(player_id)
    if player is None:
        raise InvalidSelection(f"Player {player_id} not found")
    if not 0 <= store_index < len(state.stores):
        raise InvalidSelection(f"Store {store_index} does not exist")

    store = state.get_store(store_index)
    if not store:
        raise InvalidSelection(f"Store {store_index} is empty")

    matching, non_matching = partition_tiles(store, tile)
    if not matching:
        raise InvalidSelection(f"Store {store_index} has no {tile.value} tiles")

    new_player = player._copy_with(to_place=player.to_place + matching)
    new_state = state.with_store(store_index, []).with_player(new_player)
    return new_state._copy_with(
        pool=merge_into_pool(state.pool, non_matching),
        phase=GamePhase.AWAITING_PLACEMENT,
    )


def select_from_pool(state: GameState, player_id: str, tile: Tile) -> GameState:
    """Take every tile of one type from the pool, claiming the token if present."""
    player = state.get_player(player_id)
    if player is None:
        raise InvalidSelection(f"Player {player_id} not found")

    matching, non_matching = partition_tiles(state.pool.tiles, tile)
    if not matching:
        raise InvalidSelection(f"Pool has no {tile.value} tiles")

    new_player = player._copy_with(to_place=player.to_place + matching)
    new_state = state.with_player(new_player)._copy_with(
        pool=state.pool.with_tiles(non_matching),
        phase=GamePhase.AWAITING_PLACEMENT,
    )

    if state.pool.has_first_player_token:
        new_state = claim_first_player_token(new_state, player_id)
    return new_state


def claim_first_player_token(state: GameState, player_id: str) -> GameState:
    """
    Move the first-player token from the pool to a player.

    The claimant becomes the only first player and takes the token
    penalty for this round.
    """
    if state.get_player(player_id) is None:
        logger.warning(
            "Invariant violation: token claimed by unknown player %r in game %s",
            player_id, state.game_id,
        )
        return state

    new_players = [
        p._copy_with(
            is_first_player=p.player_id == player_id,
            has_token_penalty=p.has_token_penalty or p.player_id == player_id,
        )
        for p in state.players
    ]
    new_pool = state.pool.with_tiles(state.pool.tiles)
    new_pool.has_first_player_token = False
    return state._copy_with(players=new_players, pool=new_pool)


def next_player_index(state: GameState) -> int:
    """Round-robin over the ordered player list."""
    return (state.current_player_idx + 1) % state.num_players


def draft_exhausted(state: GameState) -> bool:
    """True when every store and the pool are out of tiles."""
    return stores_empty(state.stores) and state.pool.is_empty
