"""
Draft Pool Manager - Populates the stores and maintains the center pool.

Stores are filled at round start only. When the bag runs short the
whole discard pile is shuffled back into it before the next draw; if
both are exhausted the remaining stores stay short or empty.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging

from .rng import Seed, shuffle, sample_without_replacement, apply_n_times
from .state import CenterPool
from .tiles import Tile, STORE_COUNT, TILES_PER_STORE, sort_tiles

logger = logging.getLogger(__name__)


@dataclass
class StoreFill:
    """Result of a round-start refill."""
    stores: list[list[Tile]]
    bag: list[Tile]
    discard: list[Tile]
    seed: Seed

    @property
    def dealt(self) -> int:
        return sum(len(s) for s in self.stores)


def fill_stores(
    bag: list[Tile],
    seed: Seed,
    store_count: int = STORE_COUNT,
) -> tuple[list[list[Tile]], list[Tile], Seed]:
    """
    Draw TILES_PER_STORE tiles per store from the bag.

    Returns (stores, remaining bag, next seed). Each store is sorted
    in canonical tile order.
    """
    def draw_store(index, acc, seed):
        stores, remaining = acc
        drawn, remaining, seed = sample_without_replacement(TILES_PER_STORE, remaining, seed)
        return (stores + [sort_tiles(drawn)], remaining), seed

    (stores, remaining), seed = apply_n_times(store_count, draw_store, ([], list(bag)), seed)
    return stores, remaining, seed


def refill_stores(
    bag: list[Tile],
    discard: list[Tile],
    seed: Seed,
    store_count: int = STORE_COUNT,
) -> StoreFill:
    """
    Fill every store, recycling the discard pile into the bag on underflow.
    """
    def draw_store(index, acc, seed):
        stores, bag, discard = acc
        if len(bag) < TILES_PER_STORE and discard:
            recycled, seed = shuffle(discard, seed)
            logger.debug(
                "Bag short (%d tiles) at store %d, recycling %d discarded tiles",
                len(bag), index - 1, len(recycled),
            )
            bag, discard = bag + recycled, []
        drawn, bag, seed = sample_without_replacement(TILES_PER_STORE, bag, seed)
        return (stores + [sort_tiles(drawn)], bag, discard), seed

    (stores, bag, discard), seed = apply_n_times(
        store_count, draw_store, ([], list(bag), list(discard)), seed
    )
    return StoreFill(stores=stores, bag=bag, discard=discard, seed=seed)


def merge_into_pool(pool: CenterPool, tiles: list[Tile]) -> CenterPool:
    """Return new pool with tiles merged in canonical order."""
    return pool.with_tiles(pool.tiles + list(tiles))


def stores_empty(stores: list[list[Tile]]) -> bool:
    return all(len(s) == 0 for s in stores)
