"""
Scoring & Wall-Placement Engine.

Handles:
- Moving held tiles onto a staging row (or straight to the penalty line)
- Round-end wall tiling with adjacency scoring
- Penalty accounting for negative tiles and the first-player token
- End of game bonuses

Every function takes a PlayerState and returns a new one, plus any
tiles that leave the player area for the discard pile.
"""

from __future__ import annotations

from .board import Board
from .errors import InvalidPlacement
from .state import PlayerState
from .tiles import (
    Tile,
    BOARD_WIDTH,
    STAGING_CAPACITIES,
    PENALTY_VALUES,
    PENALTY_ROW,
    ROW_BONUS,
    COLUMN_BONUS,
    COLOR_BONUS,
    wall_column,
)


def can_stage(player: PlayerState, row_index: int, tile: Tile) -> bool:
    """Whether a staging row can take tiles of this type."""
    if not 0 <= row_index < len(STAGING_CAPACITIES):
        return False
    staging = player.staging
    held = staging.row_tile(row_index)
    if held is not None and held != tile:
        return False
    if staging.is_full(row_index):
        return False
    return not player.board.row_has(row_index, tile)


def penalty_slots_free(player: PlayerState) -> int:
    used = len(player.negatives) + (1 if player.has_token_penalty else 0)
    return max(0, len(PENALTY_VALUES) - used)


def add_negatives(player: PlayerState, tiles: list[Tile]) -> tuple[PlayerState, list[Tile]]:
    """
    Put tiles on the penalty line.

    Returns (new player, tiles that did not fit and go to the discard).
    """
    free = penalty_slots_free(player)
    kept, excess = tiles[:free], tiles[free:]
    return player._copy_with(negatives=player.negatives + kept), excess


def place_held_tiles(player: PlayerState, row_index: int) -> tuple[PlayerState, list[Tile]]:
    """
    Move the player's held tiles to a staging row or the penalty line.

    Returns (new player, tiles sent to the discard because the penalty
    line was full). Raises InvalidPlacement if nothing is held or the
    row cannot take the tile type.
    """
    held = list(player.to_place)
    if not held:
        raise InvalidPlacement(f"{player.player_id} holds no tiles")

    player = player._copy_with(to_place=[])
    if row_index == PENALTY_ROW:
        return add_negatives(player, held)

    if not 0 <= row_index < len(STAGING_CAPACITIES):
        raise InvalidPlacement(f"Row {row_index} does not exist")

    tile = held[0]
    if not can_stage(player, row_index, tile):
        raise InvalidPlacement(f"Row {row_index} cannot take {tile.value} tiles")

    staging, overflow = player.staging.with_tiles(row_index, tile, len(held))
    player = player._copy_with(staging=staging)
    if overflow:
        return add_negatives(player, [tile] * overflow)
    return player, []


def placement_points(board: Board, col: int, row: int) -> int:
    """
    Points for a tile just placed at (col, row).

    An isolated tile scores 1. Otherwise each direction with a
    contiguous run longer than one scores the run length.
    """
    def run(d_col: int, d_row: int) -> int:
        length = 1
        for sign in (1, -1):
            c, r = col + sign * d_col, row + sign * d_row
            while 0 <= c < BOARD_WIDTH and 0 <= r < BOARD_WIDTH and board.get(c, r) is not None:
                length += 1
                c, r = c + sign * d_col, r + sign * d_row
        return length

    horizontal = run(1, 0)
    vertical = run(0, 1)
    if horizontal == 1 and vertical == 1:
        return 1
    points = 0
    if horizontal > 1:
        points += horizontal
    if vertical > 1:
        points += vertical
    return points


def tile_wall(player: PlayerState) -> tuple[PlayerState, list[Tile], int]:
    """
    Round-end wall tiling.

    Each full staging row, top to bottom, moves one tile to the board
    and scores it; the rest of the row goes to the discard.
    Returns (new player, discarded tiles, points gained).
    """
    board = player.board
    staging = player.staging
    discarded: list[Tile] = []
    gained = 0

    for row in range(len(STAGING_CAPACITIES)):
        if not staging.is_full(row):
            continue
        tile = staging.row_tile(row)
        col = wall_column(row, tile)
        board = board.with_tile(col, row, tile)
        gained += placement_points(board, col, row)
        discarded.extend([tile] * (staging.capacity(row) - 1))
        staging = staging.cleared(row)

    new_player = player._copy_with(board=board, staging=staging, score=player.score + gained)
    return new_player, discarded, gained


def penalty_points(slots: int) -> int:
    """Total penalty for the first n occupied penalty slots."""
    return sum(PENALTY_VALUES[:slots])


def apply_penalties(player: PlayerState) -> tuple[PlayerState, list[Tile], int]:
    """
    Deduct penalties, floor the score at zero and empty the penalty line.

    Returns (new player, discarded tiles, points lost).
    """
    slots = len(player.negatives) + (1 if player.has_token_penalty else 0)
    lost = penalty_points(min(slots, len(PENALTY_VALUES)))
    new_player = player._copy_with(
        score=max(0, player.score - lost),
        negatives=[],
        has_token_penalty=False,
    )
    return new_player, list(player.negatives), lost


def final_bonus(board: Board) -> int:
    return (
        board.completed_rows() * ROW_BONUS
        + board.completed_columns() * COLUMN_BONUS
        + board.completed_colors() * COLOR_BONUS
    )


def apply_final_bonus(player: PlayerState) -> PlayerState:
    return player._copy_with(score=player.score + final_bonus(player.board))
