"""Binary indexed tree and the counting problems built on it."""

from __future__ import annotations

from collections import Counter
from itertools import accumulate

MOD = 1_000_000_007


class FenwickTree:
    """Point updates and range sums over ``n`` positions."""

    def __init__(self, n):
        if n < 0:
            raise ValueError("size must be non-negative")
        self._size = n
        self._data = [0] * n

    def __len__(self):
        return self._size

    def add(self, i, x):
        """Add ``x`` at position ``i``."""
        if not 0 <= i < self._size:
            raise IndexError(f"position {i} out of range")
        i += 1
        while i <= self._size:
            self._data[i - 1] += x
            i += i & -i

    def _prefix(self, i):
        total = 0
        while i > 0:
            total += self._data[i - 1]
            i -= i & -i
        return total

    def range_sum(self, l, r):
        """Sum over the half-open range ``[l, r)``."""
        if not 0 <= l <= r <= self._size:
            raise IndexError(f"range [{l}, {r}) out of bounds")
        return self._prefix(r) - self._prefix(l)


def count_crossing_chords(n, chords):
    """Count pairs of chords ``(l, r)`` between n points on a circle that cross."""
    pairs = []
    for l, r in chords:
        if not 1 <= l < r <= n:
            raise ValueError(f"invalid chord ({l}, {r})")
        pairs.append((r - 1, l - 1))
    m = len(pairs)
    total = m * (m - 1) // 2

    endpoints = Counter()
    for r, l in pairs:
        endpoints[r] += 1
        endpoints[l] += 1
    total -= sum(c * (c - 1) // 2 for c in endpoints.values())

    right_counts = [0] * n
    for r, _ in pairs:
        right_counts[r] += 1
    ends_before = list(accumulate(right_counts))
    total -= sum(ends_before[l - 1] for _, l in pairs if l)

    tree = FenwickTree(n)
    for r, l in sorted(pairs):
        total -= tree.range_sum(l + 1, r)
        tree.add(l, 1)
    return total


def _compress(values):
    order = {v: i for i, v in enumerate(sorted(set(values)))}
    return [order[v] for v in values]


def count_inversion_limited_splits(values, k):
    """Ways to cut ``values`` into segments each with at most ``k`` inversions."""
    ranks = _compress(values)
    n = len(ranks)
    tree = FenwickTree(n)
    left = n - 1
    inversions = 0
    start = [0] * n
    for right in range(n - 1, -1, -1):
        while left >= 0 and inversions + tree.range_sum(0, ranks[left]) <= k:
            inversions += tree.range_sum(0, ranks[left])
            tree.add(ranks[left], 1)
            left -= 1
        start[right] = left
        if right == left:
            tree.add(ranks[left], -1)
            left -= 1
        inversions -= tree.range_sum(ranks[right] + 1, n)
        tree.add(ranks[right], -1)

    ways = 1
    prefix = [1]
    for i, first in enumerate(start):
        ways = prefix[i] if first < 0 else (prefix[i] - prefix[first]) % MOD
        prefix.append((prefix[i] + ways) % MOD)
    return ways