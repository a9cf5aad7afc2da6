"""Finding the peak of a unimodal sequence with few questions."""

from __future__ import annotations

_SPAN = 1596
_SMALL = 15
_FILLER = 1_000_000_007


def find_maximum(n, ask):
    """Largest value of a unimodal sequence of length ``n``.

    ``ask(i)`` returns the 1-indexed ``i``-th value; each position is asked
    at most once, using a Fibonacci search for longer sequences.
    """
    if not 1 <= n <= _SPAN:
        raise ValueError(f"n must lie in [1, {_SPAN}]")
    if n <= _SMALL:
        return max(ask(i) for i in range(1, n + 1))

    cache = {}

    def value(i):
        if i >= n:
            return -_FILLER - i
        if i not in cache:
            cache[i] = ask(i + 1)
        return cache[i]

    left, right = -1, _SPAN
    l, r = 609, 986
    while left + 3 < right:
        if value(l) < value(r):
            left, l, r = l, r, right - r + l
        else:
            right, r, l = r, l, left - l + r
    return max(value(i) for i in range(left + 1, right))