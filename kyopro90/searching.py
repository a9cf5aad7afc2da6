"""Binary search, sorting and two-pointer problems."""

from __future__ import annotations

from bisect import bisect_left
from collections import Counter
from itertools import pairwise

_SEARCH_CEILING = 1_000_000_000


def max_min_piece(length, cuts, k):
    """Largest shortest piece when a bar of ``length`` is cut at ``k`` of the ``cuts``."""
    marks = [0, *cuts, length]

    def pieces(minimum):
        count = 0
        run = 0
        for prev, cur in pairwise(marks):
            run += cur - prev
            if run >= minimum and length - cur >= minimum:
                count += 1
                run = 0
        return count

    left, right = 1, _SEARCH_CEILING
    while left + 1 < right:
        mid = (left + right) // 2
        if pieces(mid) >= k:
            left = mid
        else:
            right = mid
    return left


def nearest_rating(ratings, queries):
    """For each query, its distance to the closest rating."""
    if not ratings:
        raise ValueError("ratings must not be empty")
    ordered = sorted(ratings)
    answers = []
    for q in queries:
        pos = bisect_left(ordered, q)
        answers.append(min(abs(ordered[i] - q) for i in (pos - 1, pos) if 0 <= i < len(ordered)))
    return answers


def min_mismatch_distance(a, b):
    """Smallest total absolute difference over pairings of ``a`` with ``b``."""
    if len(a) != len(b):
        raise ValueError("sequences must have the same length")
    return sum(abs(x - y) for x, y in zip(sorted(a), sorted(b)))


def longest_with_k_kinds(values, k):
    """Longest contiguous run holding at most ``k`` distinct values."""
    counts = Counter()
    left = 0
    best = 0
    for right, value in enumerate(values):
        counts[value] += 1
        while len(counts) > k:
            gone = values[left]
            counts[gone] -= 1
            if not counts[gone]:
                del counts[gone]
            left += 1
        best = max(best, right - left + 1)
    return best


def max_score(k, problems):
    """Best score in ``k`` minutes; problem ``(a, b)`` gives b for one minute, a for two."""
    parts = []
    for a, b in problems:
        parts.extend((b, a - b))
    if not 0 <= k <= len(parts):
        raise ValueError("k is out of range")
    return sum(sorted(parts, reverse=True)[:k])


def _increasing_ends(values):
    tails = []
    lengths = []
    for v in values:
        pos = bisect_left(tails, v)
        if pos == len(tails):
            tails.append(v)
        else:
            tails[pos] = v
        lengths.append(pos)
    return lengths


def longest_bitonic(values):
    """Longest subsequence that strictly rises and then strictly falls."""
    if not values:
        return 0
    rising = _increasing_ends(values)
    falling = _increasing_ends(values[::-1])[::-1]
    return max(r + f + 1 for r, f in zip(rising, falling))


def min_total_manhattan(points):
    """Smallest total Manhattan distance from the points to one chosen point."""
    if not points:
        raise ValueError("points must not be empty")
    xs = sorted(x for x, _ in points)
    ys = sorted(y for _, y in points)
    mid = len(points) // 2
    return sum(abs(xs[mid] - x) for x in xs) + sum(abs(ys[mid] - y) for y in ys)


def can_split_cake(pieces):
    """Whether a contiguous arc of the circular cake weighs a tenth of the whole."""
    total = sum(pieces)
    if total % 10:
        return False
    target = total // 10
    ring = list(pieces) * 2
    n = len(ring)
    right = 0
    run = 0
    for left in range(n):
        while right < n and run + ring[right] <= target:
            run += ring[right]
            right += 1
        if run == target:
            return True
        if left == right:
            right += 1
        else:
            run -= ring[left]
    return False