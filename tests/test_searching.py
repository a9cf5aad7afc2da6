import random

import pytest

from kyopro90.searching import (
    can_split_cake,
    longest_bitonic,
    longest_with_k_kinds,
    max_min_piece,
    max_score,
    min_mismatch_distance,
    min_total_manhattan,
    nearest_rating,
)


def test_max_min_piece_even_cuts():
    length, cuts = 30, [6, 12, 18, 24]
    assert max_min_piece(length, cuts, len(cuts)) == cuts[0]


def test_max_min_piece_monotone_and_bounded():
    length = 100
    cuts = [7, 15, 31, 40, 52, 66, 71, 88]
    results = [max_min_piece(length, cuts, k) for k in range(1, len(cuts) + 1)]
    assert results == sorted(results, reverse=True)
    for k, r in enumerate(results, 1):
        assert r * (k + 1) <= length


def test_nearest_rating_exact_and_beyond():
    ratings = [30, 10, 20]
    assert nearest_rating(ratings, [20, 40, 5]) == [0, 40 - 30, 10 - 5]


def test_nearest_rating_empty():
    with pytest.raises(ValueError):
        nearest_rating([], [1])


def test_min_mismatch_same_multiset():
    assert min_mismatch_distance([1, 5, 3], [3, 1, 5]) == 0


def test_min_mismatch_order_invariant():
    rng = random.Random(4)
    a = [rng.randint(-50, 50) for _ in range(12)]
    b = [rng.randint(-50, 50) for _ in range(12)]
    shuffled = b[:]
    rng.shuffle(shuffled)
    assert min_mismatch_distance(a, b) == min_mismatch_distance(a[::-1], shuffled)


def test_min_mismatch_length_mismatch():
    with pytest.raises(ValueError):
        min_mismatch_distance([1], [1, 2])


def test_k_kinds_whole_sequence():
    values = [1, 2, 1, 3, 3]
    assert longest_with_k_kinds(values, len(set(values))) == len(values)


def test_k_kinds_zero():
    assert longest_with_k_kinds([1, 2, 3], 0) == 0


def test_k_kinds_monotone():
    rng = random.Random(9)
    values = [rng.randint(1, 5) for _ in range(40)]
    results = [longest_with_k_kinds(values, k) for k in range(6)]
    assert results == sorted(results)
    assert results[-1] == len(values)


def test_max_score_single_problem():
    a, b = 10, 3
    assert max_score(1, [(a, b)]) == a - b
    assert max_score(2, [(a, b)]) == a


def test_max_score_too_many_minutes():
    with pytest.raises(ValueError):
        max_score(3, [(10, 3)])


def test_bitonic_increasing():
    values = [1, 2, 3, 4]
    assert longest_bitonic(values) == len(values)


def test_bitonic_constant():
    assert longest_bitonic([5, 5, 5]) == 1


def test_bitonic_reverse_invariant():
    rng = random.Random(2)
    values = [rng.randint(1, 20) for _ in range(30)]
    assert longest_bitonic(values) == longest_bitonic(values[::-1])


def test_bitonic_peak():
    values = [1, 3, 2]
    assert longest_bitonic(values) == len(values)


def test_manhattan_two_points():
    assert min_total_manhattan([(0, 0), (10, 0)]) == 10 - 0


def test_manhattan_single_point():
    assert min_total_manhattan([(4, -7)]) == 0


def test_manhattan_translation_invariant():
    points = [(1, 5), (3, -2), (8, 8), (-4, 0)]
    moved = [(x + 100, y - 50) for x, y in points]
    assert min_total_manhattan(points) == min_total_manhattan(moved)


def test_manhattan_empty():
    with pytest.raises(ValueError):
        min_total_manhattan([])


def test_cake_equal_pieces():
    assert can_split_cake([1] * 10) is True


def test_cake_not_divisible():
    assert can_split_cake([1] * 9 + [2]) is False


def test_cake_no_arc():
    assert can_split_cake([2, 5, 3]) is False


def test_cake_wraps_around():
    assert can_split_cake([2, 36, 2]) is True