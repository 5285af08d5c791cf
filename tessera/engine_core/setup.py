"""
Game Setup - Creates the initial game state.

This module handles:
- Shuffling the 100-tile supply with the game seed
- Drawing the first player at random
- Filling the stores for round one
- Putting the first-player token in the pool

The same seed always yields the same initial state.
"""

from __future__ import annotations

from .rng import Seed, shuffle, sample_without_replacement
from .state import GameState, PlayerState, CenterPool, GamePhase
from .stores import fill_stores
from .tiles import PLAYER_COUNT, make_tile_supply

DEFAULT_PLAYERS: tuple[tuple[str, str], ...] = (
    ("player_1", "Player 1"),
    ("player_2", "Player 2"),
)


def new_game(
    seed: int | None = None,
    players: list[tuple[str, str]] | None = None,
    game_id: str | None = None,
) -> GameState:
    """
    Set up a new game.

    Args:
        seed: Root seed for every random decision (wall clock if None)
        players: (player_id, name) pairs in turn order
        game_id: Identifier for the game (derived from the seed if None)

    Returns:
        Initial GameState awaiting the first draft
    """
    player_defs = list(players) if players is not None else list(DEFAULT_PLAYERS)
    if len(player_defs) != PLAYER_COUNT:
        raise ValueError(f"Exactly {PLAYER_COUNT} players are supported")
    player_ids = [player_id for player_id, _ in player_defs]
    if len(set(player_ids)) != len(player_ids):
        raise ValueError("Player ids must be unique")

    root = Seed(seed) if seed is not None else Seed.from_clock()

    bag, rng_seed = shuffle(make_tile_supply(), root)
    (first_id,), _, rng_seed = sample_without_replacement(1, player_ids, rng_seed)
    stores, bag, rng_seed = fill_stores(bag, rng_seed)

    player_states = [
        PlayerState(
            player_id=player_id,
            name=name,
            is_first_player=player_id == first_id,
        )
        for player_id, name in player_defs
    ]

    return GameState(
        game_id=game_id or f"tessera_{root.value}",
        players=player_states,
        current_player_idx=player_ids.index(first_id),
        stores=stores,
        pool=CenterPool(has_first_player_token=True),
        bag=bag,
        discard=[],
        seed=rng_seed,
        initial_seed=root.value,
        phase=GamePhase.AWAITING_DRAFT,
        round_number=1,
        turn_number=0,
    )
