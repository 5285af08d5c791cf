"""
Tests for tile and board primitives.

Tests:
- Canonical tile ordering and supply
- Wall diagonal pattern
- (col, row) <-> index bijection
- Board and staging area updates
"""

import pytest

from ..engine_core.tiles import (
    Tile,
    TILE_ORDER,
    TOTAL_TILES,
    make_tile_supply,
    sort_tiles,
    wall_column,
    wall_tile,
    parse_tile,
)
from ..engine_core.board import (
    Board,
    StagingArea,
    from_2d_point_to_index,
    from_index_to_2d_point,
)


class TestTiles:
    """Tests for the tile enumeration."""

    def test_canonical_order(self):
        """Declaration order is the canonical order."""
        assert [t.order for t in TILE_ORDER] == [0, 1, 2, 3, 4]
        assert sort_tiles([Tile.WHITE, Tile.BLUE, Tile.RED, Tile.BLUE]) == [
            Tile.BLUE, Tile.BLUE, Tile.RED, Tile.WHITE,
        ]

    def test_supply_has_twenty_of_each(self):
        """The supply is 100 tiles, 20 per type."""
        supply = make_tile_supply()
        assert len(supply) == TOTAL_TILES == 100
        for tile in TILE_ORDER:
            assert supply.count(tile) == 20

    def test_parse_tile(self):
        """Tiles parse from their value in any case."""
        assert parse_tile("red") == Tile.RED
        assert parse_tile("BLACK") == Tile.BLACK
        assert parse_tile(Tile.WHITE) == Tile.WHITE
        with pytest.raises(ValueError):
            parse_tile("green")


class TestWallPattern:
    """Tests for the diagonal wall layout."""

    def test_each_row_and_column_holds_every_type_once(self):
        """Every type appears exactly once per row and per column."""
        for row in range(5):
            assert {wall_column(row, t) for t in TILE_ORDER} == set(range(5))
        for col in range(5):
            assert {wall_tile(col, row) for row in range(5)} == set(TILE_ORDER)

    def test_diagonal_wrap(self):
        """Blue sits on the main diagonal; each row shifts one column right."""
        assert wall_column(0, Tile.BLUE) == 0
        assert wall_column(1, Tile.BLUE) == 1
        assert wall_column(0, Tile.WHITE) == 4
        assert wall_column(1, Tile.WHITE) == 0

    def test_wall_tile_inverts_wall_column(self):
        for row in range(5):
            for tile in TILE_ORDER:
                assert wall_tile(wall_column(row, tile), row) == tile


class TestIndexMapping:
    """Tests for the (col, row) <-> flat index bijection."""

    @pytest.mark.parametrize("width", [1, 3, 5, 8])
    def test_point_round_trip(self, width):
        """Every valid point survives point -> index -> point."""
        for row in range(width):
            for col in range(width):
                index = from_2d_point_to_index(width, (col, row))
                assert from_index_to_2d_point(width, index) == (col, row)

    @pytest.mark.parametrize("width", [1, 3, 5, 8])
    def test_index_round_trip(self, width):
        """Every valid index survives index -> point -> index."""
        for index in range(width * width):
            point = from_index_to_2d_point(width, index)
            assert from_2d_point_to_index(width, point) == index

    def test_row_major_layout(self):
        assert from_2d_point_to_index(5, (0, 0)) == 0
        assert from_2d_point_to_index(5, (4, 0)) == 4
        assert from_2d_point_to_index(5, (0, 1)) == 5
        assert from_2d_point_to_index(5, (2, 3)) == 17

    def test_invalid_inputs_raise(self):
        """Points outside the grid and negative indices are rejected."""
        with pytest.raises(ValueError):
            from_2d_point_to_index(5, (5, 0))
        with pytest.raises(ValueError):
            from_2d_point_to_index(5, (-1, 2))
        with pytest.raises(ValueError):
            from_index_to_2d_point(5, -1)
        with pytest.raises(ValueError):
            from_2d_point_to_index(0, (0, 0))


class TestBoard:
    """Tests for the 5x5 board."""

    def test_with_tile_returns_new_board(self):
        """Placing a tile leaves the original board untouched."""
        board = Board()
        placed = board.with_tile(2, 3, Tile.RED)

        assert placed.get(2, 3) == Tile.RED
        assert board.get(2, 3) is None
        assert placed.tile_count == 1

    def test_completed_rows_columns_colors(self):
        board = Board()
        for col in range(5):
            board = board.with_tile(col, 0, wall_tile(col, 0))
        for row in range(1, 5):
            board = board.with_tile(0, row, wall_tile(0, row))

        assert board.completed_rows() == 1
        assert board.completed_columns() == 1
        assert board.completed_colors() == 0
        assert board.row_has(0, Tile.WHITE)
        assert not board.row_has(1, Tile.BLUE)


class TestStagingArea:
    """Tests for the triangular staging rows."""

    def test_rows_have_increasing_capacity(self):
        staging = StagingArea()
        assert [len(r) for r in staging.rows] == [1, 2, 3, 4, 5]
        assert staging.tile_count == 0

    def test_tiles_fill_from_the_right(self):
        """Rows are right-aligned."""
        staging, overflow = StagingArea().with_tiles(3, Tile.RED, 2)

        assert overflow == 0
        assert staging.rows[3] == [None, None, Tile.RED, Tile.RED]
        assert staging.row_tile(3) == Tile.RED
        assert staging.free_capacity(3) == 2

    def test_overflow_is_reported(self):
        """Tiles beyond capacity come back as overflow."""
        staging, overflow = StagingArea().with_tiles(1, Tile.BLACK, 5)

        assert overflow == 3
        assert staging.is_full(1)

    def test_cleared_row(self):
        staging, _ = StagingArea().with_tiles(2, Tile.WHITE, 3)
        cleared = staging.cleared(2)

        assert cleared.tiles_in(2) == []
        assert staging.tiles_in(2) == [Tile.WHITE] * 3
