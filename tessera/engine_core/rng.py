"""
Randomness - Seeded, explicitly threaded random decisions.

Every operation takes a Seed and returns the next Seed alongside its
result. A fresh random.Random is derived from the incoming seed for
each call, so the same seed and the same sequence of operations always
produce the same outputs. Nothing here touches the global random module.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Sequence, TypeVar
import random
import time

T = TypeVar("T")
A = TypeVar("A")

_SEED_BITS = 64


@dataclass(frozen=True)
class Seed:
    """Generator state threaded through every random transition."""
    value: int

    @classmethod
    def from_clock(cls) -> Seed:
        return cls(time.time_ns())

    def generator(self) -> random.Random:
        return random.Random(self.value)


def _next(rng: random.Random) -> Seed:
    return Seed(rng.getrandbits(_SEED_BITS))


def shuffle(sequence: Sequence[T], seed: Seed) -> tuple[list[T], Seed]:
    """Return (shuffled copy, next seed)."""
    rng = seed.generator()
    items = list(sequence)
    rng.shuffle(items)
    return items, _next(rng)


def sample_without_replacement(
    n: int,
    sequence: Sequence[T],
    seed: Seed,
) -> tuple[list[T], list[T], Seed]:
    """
    Draw n items without replacement.

    Returns (picked, remainder, next seed). The remainder keeps the
    input order. Asking for more items than available returns all of
    them in drawn order.
    """
    if n < 0:
        raise ValueError(f"Cannot sample a negative number of items: {n}")

    rng = seed.generator()
    items = list(sequence)
    n = min(n, len(items))
    indices = rng.sample(range(len(items)), n)
    chosen = set(indices)

    picked = [items[i] for i in indices]
    remainder = [item for i, item in enumerate(items) if i not in chosen]
    return picked, remainder, _next(rng)


def apply_n_times(
    count: int,
    step: Callable[[int, A, Seed], tuple[A, Seed]],
    initial: A,
    seed: Seed,
) -> tuple[A, Seed]:
    """
    Thread the seed through count applications of step.

    step receives its 1-based index, the running accumulator and the
    current seed, and returns (new accumulator, next seed).
    """
    accumulator = initial
    for index in range(1, count + 1):
        accumulator, seed = step(index, accumulator, seed)
    return accumulator, seed
