"""
Round transitions - Round end resolution, refill and game over.

The reducer calls resolve_round_end() after every placement. Once the
draft is exhausted and nobody holds tiles, each player tiles their wall
and pays penalties. The game ends if any board has a completed row;
otherwise the stores are refilled and the first-player token holder
opens the next round.

ROUND_END is a transient phase: end_round() runs while the state is in
it and always leaves it for AWAITING_DRAFT or GAME_OVER, so callers of
resolve_round_end() never observe it.
"""

from __future__ import annotations
import logging

from .drafting import draft_exhausted
from .scoring import tile_wall, apply_penalties, apply_final_bonus
from .state import GameState, GamePhase, CenterPool, PlayerState
from .stores import refill_stores

logger = logging.getLogger(__name__)


def is_round_over(state: GameState) -> bool:
    """Draft exhausted and no held tiles left to place."""
    return draft_exhausted(state) and all(not p.to_place for p in state.players)


def resolve_round_end(state: GameState) -> GameState:
    """End the round if it is over, otherwise return state unchanged."""
    if not is_round_over(state):
        return state
    return end_round(state._copy_with(phase=GamePhase.ROUND_END))


def end_round(state: GameState) -> GameState:
    """Wall tiling and penalties for every player, then next round or game over."""
    players = []
    discard = list(state.discard)

    for player in state.players:
        player, walled, gained = tile_wall(player)
        player, penalized, lost = apply_penalties(player)
        discard.extend(walled)
        discard.extend(penalized)
        players.append(player)
        logger.debug(
            "Round %d: %s gained %d, lost %d, score %d",
            state.round_number, player.player_id, gained, lost, player.score,
        )

    state = state._copy_with(players=players, discard=discard)

    if any(p.board.completed_rows() > 0 for p in state.players):
        return finish_game(state)
    return start_round(state)


def start_round(state: GameState) -> GameState:
    """Refill stores, return the token to the pool, hand the turn to the first player."""
    fill = refill_stores(state.bag, state.discard, state.seed)

    first_idx = next(
        (i for i, p in enumerate(state.players) if p.is_first_player),
        None,
    )
    if first_idx is None:
        logger.warning(
            "Invariant violation: no first player in game %s, keeping turn order",
            state.game_id,
        )
        first_idx = state.current_player_idx

    state = state._copy_with(
        stores=fill.stores,
        bag=fill.bag,
        discard=fill.discard,
        seed=fill.seed,
        pool=CenterPool(tiles=list(state.pool.tiles), has_first_player_token=True),
        current_player_idx=first_idx,
        round_number=state.round_number + 1,
        phase=GamePhase.AWAITING_DRAFT,
    )

    if fill.dealt == 0:
        # Nothing left to draft: the game cannot progress.
        logger.info("Game %s: supply exhausted at round %d", state.game_id, state.round_number)
        return finish_game(state)

    logger.debug("Game %s: round %d started, %d tiles dealt", state.game_id, state.round_number, fill.dealt)
    return state


def finish_game(state: GameState) -> GameState:
    """Apply end of game bonuses and record the winners."""
    players = [apply_final_bonus(p) for p in state.players]
    winners = determine_winners(players)
    logger.info(
        "Game %s over after round %d: winners %s",
        state.game_id, state.round_number, ", ".join(winners),
    )
    return state._copy_with(
        players=players,
        phase=GamePhase.GAME_OVER,
        winner_ids=winners,
    )


def determine_winners(players: list[PlayerState]) -> list[str]:
    """Highest score wins; ties go to most completed rows, then are shared."""
    if not players:
        return []

    def rank(p: PlayerState) -> tuple[int, int]:
        return p.score, p.board.completed_rows()

    best = max(rank(p) for p in players)
    return [p.player_id for p in players if rank(p) == best]
