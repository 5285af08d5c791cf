"""
Tiles - The tile enumeration, canonical ordering and rule constants.

Tiles have no identity beyond their type. The declaration order of
Tile is the canonical order used to sort stores and the pool, and it
also drives the diagonal pattern of the wall.
"""

from __future__ import annotations
from enum import Enum
from typing import Iterable


class Tile(Enum):
    """The five tile types."""
    BLUE = "blue"
    YELLOW = "yellow"
    RED = "red"
    BLACK = "black"
    WHITE = "white"

    @property
    def order(self) -> int:
        """Position in the canonical ordering."""
        return TILE_ORDER.index(self)


TILE_ORDER: tuple[Tile, ...] = tuple(Tile)

# Supply
TILES_PER_TYPE = 20
TOTAL_TILES = TILES_PER_TYPE * len(TILE_ORDER)

# Draft area
STORE_COUNT = 9
TILES_PER_STORE = 4
PLAYER_COUNT = 2

# Player area
BOARD_WIDTH = 5
STAGING_CAPACITIES: tuple[int, ...] = (1, 2, 3, 4, 5)
PENALTY_VALUES: tuple[int, ...] = (1, 1, 2, 2, 2, 3, 3)
PENALTY_ROW = -1

# End of game bonuses
ROW_BONUS = 2
COLUMN_BONUS = 7
COLOR_BONUS = 10


def sort_tiles(tiles: Iterable[Tile]) -> list[Tile]:
    """Return tiles sorted by canonical order."""
    return sorted(tiles, key=lambda tile: tile.order)


def make_tile_supply() -> list[Tile]:
    """The full, unshuffled supply of tiles."""
    supply: list[Tile] = []
    for tile in TILE_ORDER:
        supply.extend([tile] * TILES_PER_TYPE)
    return supply


def wall_column(row: int, tile: Tile) -> int:
    """Board column a tile lands in for a given row (diagonal wrap)."""
    return (row + tile.order) % BOARD_WIDTH


def wall_tile(col: int, row: int) -> Tile:
    """The only tile type a board cell accepts."""
    return TILE_ORDER[(col - row) % BOARD_WIDTH]


def parse_tile(value: str | Tile) -> Tile:
    """Parse a tile from its name or value ("blue", "BLUE")."""
    if isinstance(value, Tile):
        return value
    try:
        return Tile(value.lower())
    except ValueError:
        raise ValueError(f"Unknown tile type: {value}") from None
