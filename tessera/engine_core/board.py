"""
Board primitives - The 5x5 scoring board and the triangular staging area.

Both containers are immutable-friendly: every change returns a new
instance. Cells hold a Tile or None (empty).
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .tiles import Tile, BOARD_WIDTH, STAGING_CAPACITIES, TILE_ORDER


def from_2d_point_to_index(width: int, point: tuple[int, int]) -> int:
    """Map a (column, row) point to a flat index."""
    col, row = point
    if width <= 0:
        raise ValueError(f"Width must be positive, got {width}")
    if not 0 <= col < width or row < 0:
        raise ValueError(f"Point {point} is outside a grid of width {width}")
    return row * width + col


def from_index_to_2d_point(width: int, index: int) -> tuple[int, int]:
    """Map a flat index back to its (column, row) point."""
    if width <= 0:
        raise ValueError(f"Width must be positive, got {width}")
    if index < 0:
        raise ValueError(f"Index must be non-negative, got {index}")
    row, col = divmod(index, width)
    return col, row


def _empty_cells() -> list[Tile | None]:
    return [None] * (BOARD_WIDTH * BOARD_WIDTH)


@dataclass
class Board:
    """
    A player's 5x5 wall.

    Cells are stored flat; (col, row) addressing goes through
    from_2d_point_to_index.
    """
    cells: list[Tile | None] = field(default_factory=_empty_cells)

    def get(self, col: int, row: int) -> Tile | None:
        return self.cells[from_2d_point_to_index(BOARD_WIDTH, (col, row))]

    def with_tile(self, col: int, row: int, tile: Tile) -> Board:
        """Return new board with a tile placed."""
        new_cells = self.cells.copy()
        new_cells[from_2d_point_to_index(BOARD_WIDTH, (col, row))] = tile
        return Board(cells=new_cells)

    def row(self, row: int) -> list[Tile | None]:
        start = row * BOARD_WIDTH
        return self.cells[start:start + BOARD_WIDTH]

    def column(self, col: int) -> list[Tile | None]:
        return [self.get(col, row) for row in range(BOARD_WIDTH)]

    def row_has(self, row: int, tile: Tile) -> bool:
        return tile in self.row(row)

    def completed_rows(self) -> int:
        return sum(
            1 for row in range(BOARD_WIDTH)
            if all(cell is not None for cell in self.row(row))
        )

    def completed_columns(self) -> int:
        return sum(
            1 for col in range(BOARD_WIDTH)
            if all(cell is not None for cell in self.column(col))
        )

    def completed_colors(self) -> int:
        return sum(
            1 for tile in TILE_ORDER
            if self.cells.count(tile) == BOARD_WIDTH
        )

    @property
    def tile_count(self) -> int:
        return sum(1 for cell in self.cells if cell is not None)


def _empty_rows() -> list[list[Tile | None]]:
    return [[None] * capacity for capacity in STAGING_CAPACITIES]


@dataclass
class StagingArea:
    """
    The five staging rows of capacity 1..5.

    Rows are right-aligned: tiles fill from the end of the list
    towards the start, so an empty cell is always on the left.
    """
    rows: list[list[Tile | None]] = field(default_factory=_empty_rows)

    def capacity(self, row: int) -> int:
        return STAGING_CAPACITIES[row]

    def tiles_in(self, row: int) -> list[Tile]:
        return [cell for cell in self.rows[row] if cell is not None]

    def row_tile(self, row: int) -> Tile | None:
        """The tile type a row currently holds, None if empty."""
        tiles = self.tiles_in(row)
        return tiles[0] if tiles else None

    def free_capacity(self, row: int) -> int:
        return self.capacity(row) - len(self.tiles_in(row))

    def is_full(self, row: int) -> bool:
        return self.free_capacity(row) == 0

    def with_tiles(self, row: int, tile: Tile, count: int) -> tuple[StagingArea, int]:
        """
        Return (new staging area, overflow count) after adding tiles to a row.

        The caller checks type compatibility; this only enforces capacity.
        """
        fitted = min(count, self.free_capacity(row))
        filled = len(self.tiles_in(row)) + fitted
        capacity = self.capacity(row)
        new_row: list[Tile | None] = [None] * (capacity - filled) + [tile] * filled
        new_rows = [list(r) for r in self.rows]
        new_rows[row] = new_row
        return StagingArea(rows=new_rows), count - fitted

    def cleared(self, row: int) -> StagingArea:
        """Return new staging area with a row emptied."""
        new_rows = [list(r) for r in self.rows]
        new_rows[row] = [None] * self.capacity(row)
        return StagingArea(rows=new_rows)

    @property
    def tile_count(self) -> int:
        return sum(len(self.tiles_in(row)) for row in range(len(self.rows)))
