from __future__ import annotations

import random

import pytest

from lottery_consulter.errors import InvalidRangeError
from lottery_consulter.services.sampling import pick_unique


@pytest.mark.parametrize("count,max_value,min_value", [(6, 33, 1), (1, 16, 1), (20, 80, 1), (5, 5, 1), (3, 12, 10)])
def test_pick_unique_returns_sorted_distinct_values_in_range(count, max_value, min_value):
    rng = random.Random(1234)
    for _ in range(200):
        values = pick_unique(count, max_value, min_value, rng=rng)
        assert len(values) == count
        assert len(set(values)) == count
        assert values == sorted(values)
        assert all(min_value <= v <= max_value for v in values)


def test_pick_unique_full_range_is_a_permutation():
    assert pick_unique(9, 9) == list(range(1, 10))


def test_pick_unique_skips_excluded_values():
    rng = random.Random(7)
    for _ in range(100):
        values = pick_unique(3, 6, exclude=[1, 2, 3], rng=rng)
        assert values == [4, 5, 6]


def test_pick_unique_zero_count():
    assert pick_unique(0, 10) == []


def test_pick_unique_rejects_count_larger_than_range():
    with pytest.raises(InvalidRangeError) as exc:
        pick_unique(34, 33)
    assert exc.value.code == "invalid_range"


def test_pick_unique_counts_exclusions_against_range():
    with pytest.raises(InvalidRangeError):
        pick_unique(2, 5, exclude=[1, 2, 3, 4])


def test_pick_unique_ignores_exclusions_outside_range():
    assert pick_unique(3, 3, exclude=[0, 4, 99]) == [1, 2, 3]
