"""Counting problems modulo a prime."""

from __future__ import annotations

from functools import reduce

MOD = 1_000_000_007

_WORD = "atcoder"
_WORD_POSITION = {ch: i for i, ch in enumerate(_WORD)}


class BinomialTable:
    """Binomial coefficients modulo ``MOD`` for arguments below ``limit``."""

    def __init__(self, limit):
        if limit < 1:
            raise ValueError("limit must be positive")
        self._limit = limit
        fact = [1] * limit
        for i in range(1, limit):
            fact[i] = fact[i - 1] * i % MOD
        inv = [1] * limit
        inv[-1] = pow(fact[-1], MOD - 2, MOD)
        for i in range(limit - 1, 0, -1):
            inv[i - 1] = inv[i] * i % MOD
        self._fact = fact
        self._inv = inv

    def choose(self, n, r):
        """Return ``C(n, r) mod MOD``; zero when ``r`` is outside ``[0, n]``."""
        if not 0 <= n < self._limit:
            raise IndexError(f"{n} is outside the table")
        if not 0 <= r <= n:
            return 0
        return self._fact[n] * self._inv[n - r] % MOD * self._inv[r] % MOD


def count_selections(n):
    """For k = 1..n, count non-empty subsets of 1..n whose elements differ by at least k."""
    table = BinomialTable(n + 1)
    results = []
    for k in range(1, n + 1):
        total = 0
        for j in range(1, (n - 1) // k + 2):
            rest = n - ((j - 1) * k + 1)
            total += table.choose(j + rest, j)
        results.append(total % MOD)
    return results


def count_atcoder_subsequences(s):
    """Number of subsequences of ``s`` spelling "atcoder", modulo ``MOD``."""
    ways = [1] + [0] * len(_WORD)
    for ch in s:
        i = _WORD_POSITION.get(ch)
        if i is not None:
            ways[i + 1] = (ways[i + 1] + ways[i]) % MOD
    return ways[-1]


def count_digit_sequences(k):
    """Sequences of digits 1..9 summing to ``k`` (zero unless k is a multiple of 9)."""
    if k % 9:
        return 0
    ways = [1]
    for i in range(1, k + 1):
        ways.append(sum(ways[max(0, i - 9):i]) % MOD)
    return ways[k]


def count_stair_climbs(n, l):
    """Ways to climb n steps taking either one step or ``l`` steps at a time."""
    if l < 1:
        raise ValueError("stride must be at least 1")
    ways = [1]
    for i in range(n):
        value = ways[i]
        if i - l + 1 >= 0:
            value += ways[i - l + 1]
        ways.append(value % MOD)
    return ways[n]


def dice_product_sum(dice):
    """Sum over all rolls of the product of the faces, modulo ``MOD``."""
    return reduce(lambda acc, die: acc * sum(die) % MOD, dice, 1)


def count_colorings(n, k):
    """Colour a row of n items with k colours so any three consecutive differ."""
    if min(3, n) > k:
        return 0
    if n == 1:
        return k % MOD
    return k * (k - 1) % MOD * pow(k - 2, n - 2, MOD) % MOD


def digit_length_sum(l, r):
    """Sum of ``x * digits(x)`` for x in ``[l, r]``, modulo ``MOD``."""
    if l > r:
        raise ValueError("l must not exceed r")
    total = 0
    for digits in range(len(str(l)), len(str(r)) + 1):
        low = max(l, 10 ** (digits - 1))
        high = min(r, 10 ** digits - 1)
        total += digits * (low + high) * (high - low + 1) // 2
    return total % MOD