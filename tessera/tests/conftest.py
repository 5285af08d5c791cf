"""
Pytest fixtures for Tessera tests.
"""

import pytest

from ..engine_core.setup import new_game
from ..engine_core.state import GameState, GamePhase, CenterPool
from ..engine_core.tiles import Tile, STORE_COUNT, sort_tiles


SEED = 42


def arrange_stores(state: GameState, contents: dict[int, list[Tile]]) -> GameState:
    """
    Return state with the given store contents and every other store empty.

    Tiles move between the bag and the stores so the tile census holds.
    """
    bag = list(state.bag)
    for store in state.stores:
        bag.extend(store)
    bag.extend(state.pool.tiles)

    stores: list[list[Tile]] = [[] for _ in range(STORE_COUNT)]
    for index, tiles in contents.items():
        for tile in tiles:
            bag.remove(tile)
        stores[index] = sort_tiles(tiles)

    return state._copy_with(
        stores=stores,
        bag=bag,
        pool=CenterPool(tiles=[], has_first_player_token=state.pool.has_first_player_token),
    )


def arrange_pool(state: GameState, tiles: list[Tile], token: bool = True) -> GameState:
    """Return state with the given pool contents, drawn from the bag."""
    bag = list(state.bag) + list(state.pool.tiles)
    for tile in tiles:
        bag.remove(tile)
    return state._copy_with(
        bag=bag,
        pool=CenterPool(tiles=sort_tiles(tiles), has_first_player_token=token),
    )


@pytest.fixture
def seed() -> int:
    return SEED


@pytest.fixture
def fresh_state(seed) -> GameState:
    """A freshly dealt game."""
    return new_game(seed=seed)


@pytest.fixture
def store_state(fresh_state) -> GameState:
    """Game where store 0 holds two blue and one yellow, store 1 holds four red."""
    return arrange_stores(
        fresh_state,
        {
            0: [Tile.BLUE, Tile.BLUE, Tile.YELLOW],
            1: [Tile.RED, Tile.RED, Tile.RED, Tile.RED],
        },
    )


@pytest.fixture
def placement_state(store_state) -> GameState:
    """Current player holds two blue tiles and must place them."""
    player = store_state.current_player
    store_tiles = store_state.stores[0]
    state = store_state.with_store(0, [])
    state = state.with_player(player._copy_with(to_place=[Tile.BLUE, Tile.BLUE]))
    return state._copy_with(
        pool=state.pool.with_tiles([t for t in store_tiles if t != Tile.BLUE]),
        phase=GamePhase.AWAITING_PLACEMENT,
    )
