import random

import pytest

from kyopro90.fenwick import (
    MOD,
    FenwickTree,
    count_crossing_chords,
    count_inversion_limited_splits,
)


def test_fenwick_matches_plain_list():
    rng = random.Random(17)
    size = 37
    tree = FenwickTree(size)
    model = [0] * size
    for _ in range(300):
        i = rng.randrange(size)
        x = rng.randint(-20, 20)
        tree.add(i, x)
        model[i] += x
        l = rng.randint(0, size)
        r = rng.randint(l, size)
        assert tree.range_sum(l, r) == sum(model[l:r])


def test_fenwick_empty_range_is_zero_sum():
    tree = FenwickTree(5)
    tree.add(2, 9)
    assert tree.range_sum(3, 3) == tree.range_sum(0, 0)
    assert tree.range_sum(0, 5) == 9


def test_fenwick_rejects_out_of_range():
    tree = FenwickTree(4)
    with pytest.raises(IndexError):
        tree.add(4, 1)
    with pytest.raises(IndexError):
        tree.range_sum(3, 2)
    with pytest.raises(ValueError):
        FenwickTree(-1)


def test_crossing_pair_counted_once():
    assert count_crossing_chords(4, [(1, 3), (2, 4)]) == 1


def test_nested_and_separate_chords_do_not_cross():
    nested = count_crossing_chords(6, [(1, 6), (2, 5), (3, 4)])
    separate = count_crossing_chords(6, [(1, 2), (3, 4), (5, 6)])
    shared = count_crossing_chords(6, [(1, 3), (3, 5)])
    assert nested == separate == shared == count_crossing_chords(6, [])


def _random_chords(rng, n, m):
    chords = []
    for _ in range(m):
        l = rng.randint(1, n - 1)
        chords.append((l, rng.randint(l + 1, n)))
    return chords


def test_invalid_chord_raises():
    with pytest.raises(ValueError):
        count_crossing_chords(4, [(3, 3)])


def test_splits_unbounded_gives_all_compositions():
    values = [5, 1, 4, 2, 3, 9, 0]
    assert count_inversion_limited_splits(values, 10**6) == pow(2, len(values) - 1, MOD)


def test_splits_sorted_values_with_zero_budget():
    values = list(range(8))
    assert count_inversion_limited_splits(values, 0) == pow(2, len(values) - 1, MOD)


def test_splits_descending_with_zero_budget_forces_singletons():
    assert count_inversion_limited_splits([6, 5, 4, 3, 2, 1], 0) == 1


def test_splits_monotone_in_budget():
    values = [3, 1, 4, 1, 5, 9, 2, 6, 5, 3]
    counts = [count_inversion_limited_splits(values, k) for k in range(25)]
    assert counts == sorted(counts)