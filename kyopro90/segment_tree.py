"""Segment trees for range maxima and the problems that use them."""

from __future__ import annotations

NEG_INF = float("-inf")


def _capacity(size):
    n = 1
    while n < size:
        n *= 2
    return n


class RangeAssignMaxTree:
    """Range assignment and range maximum over values starting at zero."""

    def __init__(self, size):
        self._size = size
        self._n = _capacity(size)
        self._max = [0] * (2 * self._n - 1)
        self._lazy = [None] * (2 * self._n - 1)

    def __len__(self):
        return self._size

    def _check(self, a, b):
        if not 0 <= a <= b <= self._size:
            raise IndexError(f"range [{a}, {b}) out of bounds")

    def _push(self, k):
        value = self._lazy[k]
        if value is None:
            return
        if k < self._n - 1:
            self._lazy[2 * k + 1] = value
            self._lazy[2 * k + 2] = value
        self._max[k] = value
        self._lazy[k] = None

    def update(self, a, b, x):
        """Set every position in ``[a, b)`` to ``x``."""
        self._check(a, b)
        self._update(a, b, x, 0, 0, self._n)

    def _update(self, a, b, x, k, l, r):
        self._push(k)
        if a <= l and r <= b:
            self._lazy[k] = x
            self._push(k)
        elif a < r and l < b:
            mid = (l + r) // 2
            self._update(a, b, x, 2 * k + 1, l, mid)
            self._update(a, b, x, 2 * k + 2, mid, r)
            self._max[k] = max(self._max[2 * k + 1], self._max[2 * k + 2])

    def query(self, a, b):
        """Maximum over ``[a, b)``; zero for an empty range."""
        self._check(a, b)
        return self._query(a, b, 0, 0, self._n)

    def _query(self, a, b, k, l, r):
        self._push(k)
        if r <= a or b <= l:
            return 0
        if a <= l and r <= b:
            return self._max[k]
        mid = (l + r) // 2
        return max(self._query(a, b, 2 * k + 1, l, mid), self._query(a, b, 2 * k + 2, mid, r))


class MaxSegmentTree:
    """Point assignment and range maximum; unset positions hold ``-inf``."""

    def __init__(self, size):
        self._size = size
        self._n = _capacity(size)
        self._max = [NEG_INF] * (2 * self._n - 1)

    def __len__(self):
        return self._size

    def _load(self, values):
        base = self._n - 1
        self._max[base:base + len(values)] = values
        for k in range(self._n - 2, -1, -1):
            self._max[k] = max(self._max[2 * k + 1], self._max[2 * k + 2])

    def update(self, k, value):
        """Set position ``k`` to ``value``."""
        if not 0 <= k < self._size:
            raise IndexError(f"position {k} out of range")
        k += self._n - 1
        self._max[k] = value
        while k > 0:
            k = (k - 1) // 2
            self._max[k] = max(self._max[2 * k + 1], self._max[2 * k + 2])

    def query(self, a, b):
        """Maximum over ``[a, b)``; ``-inf`` for an empty range."""
        if not 0 <= a <= b <= self._size:
            raise IndexError(f"range [{a}, {b}) out of bounds")
        return self._query(a, b, 0, 0, self._n)

    def _query(self, a, b, k, l, r):
        if r <= a or b <= l:
            return NEG_INF
        if a <= l and r <= b:
            return self._max[k]
        mid = (l + r) // 2
        return max(self._query(a, b, 2 * k + 1, l, mid), self._query(a, b, 2 * k + 2, mid, r))

    def __getitem__(self, i):
        if not 0 <= i < self._size:
            raise IndexError(f"position {i} out of range")
        return self._max[i + self._n - 1]


def stack_bricks(width, bricks):
    """Drop bricks covering 1-indexed columns ``[l, r]``; return each top height."""
    tree = RangeAssignMaxTree(width)
    heights = []
    for l, r in bricks:
        height = tree.query(l - 1, r) + 1
        heights.append(height)
        tree.update(l - 1, r, height)
    return heights


def max_spice_value(width, dishes):
    """Best total value using each dish ``(low, high, value)`` at most once.

    A used dish takes between ``low`` and ``high`` units; the units must add
    up to exactly ``width``.  Returns None when that is impossible.
    """
    current = MaxSegmentTree(width + 1)
    current.update(0, 0)
    for low, high, value in dishes:
        values = []
        for j in range(width + 1):
            best = current[j]
            prev = current.query(max(0, j - high), max(0, j - low + 1))
            if prev != NEG_INF:
                best = max(best, prev + value)
            values.append(best)
        current = MaxSegmentTree(width + 1)
        current._load(values)
    result = current[width]
    return None if result == NEG_INF else result