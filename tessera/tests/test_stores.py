"""
Tests for the draft pool manager.

Tests:
- Store population from the bag
- Canonical sorting of store contents
- Bag exhaustion and discard recycling
- Pool merging
"""

from ..engine_core.rng import Seed
from ..engine_core.state import CenterPool
from ..engine_core.stores import fill_stores, refill_stores, merge_into_pool, stores_empty
from ..engine_core.tiles import Tile, make_tile_supply, sort_tiles


class TestFillStores:
    """Tests for fill_stores."""

    def test_full_bag_fills_nine_stores_of_four(self):
        bag = make_tile_supply()
        stores, remaining, _ = fill_stores(bag, Seed(1))

        assert len(stores) == 9
        assert all(len(s) == 4 for s in stores)
        assert len(remaining) == 100 - 36
        assert len(bag) == 100

    def test_stores_are_sorted(self):
        """Every store is in canonical tile order."""
        stores, _, _ = fill_stores(make_tile_supply(), Seed(2))
        for store in stores:
            assert store == sort_tiles(store)

    def test_tiles_are_conserved(self):
        bag = make_tile_supply()
        stores, remaining, _ = fill_stores(bag, Seed(3))
        dealt = [t for s in stores for t in s]

        assert sort_tiles(dealt + remaining) == sort_tiles(bag)

    def test_short_bag_leaves_later_stores_short(self):
        """With 10 tiles, two stores get 4, one gets 2, the rest stay empty."""
        bag = [Tile.RED] * 10
        stores, remaining, _ = fill_stores(bag, Seed(4))

        assert [len(s) for s in stores] == [4, 4, 2, 0, 0, 0, 0, 0, 0]
        assert remaining == []

    def test_deterministic(self):
        bag = make_tile_supply()
        assert fill_stores(bag, Seed(5)) == fill_stores(bag, Seed(5))


class TestRefillStores:
    """Tests for refill_stores with discard recycling."""

    def test_discard_recycled_when_bag_runs_short(self):
        bag = [Tile.BLUE] * 6
        discard = [Tile.WHITE] * 40
        fill = refill_stores(bag, discard, Seed(6))

        assert fill.dealt == 36
        assert fill.discard == []
        assert len(fill.bag) == 46 - 36
        dealt = [t for s in fill.stores for t in s]
        assert dealt.count(Tile.BLUE) + fill.bag.count(Tile.BLUE) == 6

    def test_discard_untouched_when_bag_suffices(self):
        bag = make_tile_supply()
        discard = [Tile.RED] * 3
        fill = refill_stores(bag, discard, Seed(7))

        assert fill.discard == discard
        assert len(fill.bag) == 64

    def test_both_exhausted_leaves_stores_short(self):
        fill = refill_stores([Tile.RED] * 3, [Tile.BLACK] * 2, Seed(8))

        assert fill.dealt == 5
        assert fill.bag == []
        assert fill.discard == []
        assert all(len(s) <= 4 for s in fill.stores)

    def test_nothing_to_deal(self):
        fill = refill_stores([], [], Seed(9))

        assert fill.dealt == 0
        assert stores_empty(fill.stores)


class TestPool:
    """Tests for pool merging."""

    def test_merge_resorts(self):
        pool = CenterPool(tiles=[Tile.BLUE, Tile.WHITE], has_first_player_token=True)
        merged = merge_into_pool(pool, [Tile.RED, Tile.BLUE])

        assert merged.tiles == [Tile.BLUE, Tile.BLUE, Tile.RED, Tile.WHITE]
        assert merged.has_first_player_token
        assert pool.tiles == [Tile.BLUE, Tile.WHITE]

    def test_token_alone_is_empty(self):
        assert CenterPool(tiles=[], has_first_player_token=True).is_empty
