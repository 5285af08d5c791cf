"""
Tests for the seeded randomness service.

Tests:
- Determinism for equal seeds
- Sampling without replacement
- Seed threading through repeated steps
"""

import pytest

from ..engine_core.rng import Seed, shuffle, sample_without_replacement, apply_n_times


class TestShuffle:
    """Tests for shuffle."""

    def test_same_seed_same_result(self):
        """Equal seeds give equal shuffles and equal next seeds."""
        items = list(range(50))
        first, next_a = shuffle(items, Seed(7))
        second, next_b = shuffle(items, Seed(7))

        assert first == second
        assert next_a == next_b

    def test_different_seeds_differ(self):
        items = list(range(50))
        first, _ = shuffle(items, Seed(1))
        second, _ = shuffle(items, Seed(2))

        assert first != second

    def test_input_untouched_and_permuted(self):
        """Shuffle returns a permutation without mutating its input."""
        items = list(range(20))
        shuffled, _ = shuffle(items, Seed(3))

        assert items == list(range(20))
        assert sorted(shuffled) == items

    def test_seed_advances(self):
        _, next_seed = shuffle([1, 2, 3], Seed(3))
        assert next_seed != Seed(3)


class TestSampleWithoutReplacement:
    """Tests for sample_without_replacement."""

    def test_partition(self):
        """Picked and remainder together are the input multiset."""
        items = ["a", "b", "b", "c", "d", "e"]
        picked, remainder, _ = sample_without_replacement(4, items, Seed(11))

        assert len(picked) == 4
        assert len(remainder) == 2
        assert sorted(picked + remainder) == sorted(items)

    def test_remainder_keeps_input_order(self):
        items = list(range(10))
        _, remainder, _ = sample_without_replacement(3, items, Seed(5))

        assert remainder == sorted(remainder)

    def test_more_than_available_returns_everything(self):
        picked, remainder, _ = sample_without_replacement(10, [1, 2, 3], Seed(5))

        assert sorted(picked) == [1, 2, 3]
        assert remainder == []

    def test_zero_and_empty(self):
        picked, remainder, _ = sample_without_replacement(0, [1, 2], Seed(5))
        assert picked == []
        assert remainder == [1, 2]

        picked, remainder, _ = sample_without_replacement(4, [], Seed(5))
        assert picked == []
        assert remainder == []

    def test_negative_count_raises(self):
        with pytest.raises(ValueError):
            sample_without_replacement(-1, [1, 2], Seed(5))

    def test_deterministic(self):
        items = list(range(30))
        assert sample_without_replacement(6, items, Seed(9)) == sample_without_replacement(6, items, Seed(9))


class TestApplyNTimes:
    """Tests for the repeated-application combinator."""

    def test_indices_are_one_based(self):
        def step(index, acc, seed):
            return acc + [index], seed

        result, _ = apply_n_times(4, step, [], Seed(0))
        assert result == [1, 2, 3, 4]

    def test_zero_count_returns_initial(self):
        result, seed = apply_n_times(0, lambda i, acc, s: (acc + 1, s), 10, Seed(4))
        assert result == 10
        assert seed == Seed(4)

    def test_seed_is_threaded_between_steps(self):
        """Each step sees the seed returned by the previous one."""
        seen = []

        def step(index, acc, seed):
            seen.append(seed)
            return acc, Seed(seed.value + 1)

        _, final = apply_n_times(3, step, None, Seed(100))
        assert seen == [Seed(100), Seed(101), Seed(102)]
        assert final == Seed(103)
