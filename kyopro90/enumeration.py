"""Problems solved by enumerating candidates exhaustively."""

from __future__ import annotations

from bisect import bisect_right
from functools import reduce
from itertools import combinations, combinations_with_replacement, product
from math import prod
from operator import or_

from kyopro90.combinatorics import MOD

_COIN_LIMIT = 10_000


def balanced_parentheses(n):
    """All balanced strings of ``n`` parentheses in lexicographic order."""
    if n % 2:
        return []
    found = []
    for chars in product("()", repeat=n):
        depth = 0
        for ch in chars:
            depth += 1 if ch == "(" else -1
            if depth < 0:
                break
        else:
            if depth == 0:
                found.append("".join(chars))
    return found


def min_coins(n, a, b, c):
    """Fewest coins of values a, b and c paying exactly ``n``; fewer than 10000.

    Returns None when no such payment exists.
    """
    if min(a, b, c) < 1:
        raise ValueError("coin values must be positive")
    best = None
    for i in range(min(_COIN_LIMIT - 1, n // a) + 1):
        after_a = n - i * a
        for j in range(min(_COIN_LIMIT - 1 - i, after_a // b) + 1):
            rest = after_a - j * b
            if rest % c == 0:
                total = i + j + rest // c
                if best is None or total < best:
                    best = total
    return best


def count_digit_product_matches(n, b):
    """Count m in ``1..n`` with ``m - (product of m's digits) == b``."""
    count = 0
    for length in range(12):
        for digits in combinations_with_replacement("123456789", length):
            value = prod(int(d) for d in digits) + b
            if value <= n and "".join(sorted(str(value))) == "".join(digits):
                count += 1
    if "0" in str(b) and n >= b:
        count += 1
    return count


def _subset_sums(part, k, p):
    by_size = []
    for size in range(min(k, len(part)) + 1):
        by_size.append(sorted(s for s in map(sum, combinations(part, size)) if s <= p))
    return by_size


def count_subsets_within(values, k, p):
    """Number of ways to choose ``k`` of the values with sum at most ``p``."""
    if k < 0:
        return 0
    half = len(values) // 2
    left = _subset_sums(values[:half], k, p)
    right = _subset_sums(values[half:], k, p)
    total = 0
    for size, sums in enumerate(right):
        need = k - size
        if need >= len(left):
            continue
        pool = left[need]
        total += sum(bisect_right(pool, p - v) for v in sums)
    return total


def count_products(values, p, q):
    """Number of 5-element choices whose product is ``q`` modulo ``p``."""
    if p < 1:
        raise ValueError("the modulus must be positive")
    return sum(1 for combo in combinations(values, 5) if prod(combo) % p == q)


def count_non_full_or(values, d):
    """Count ``d``-bit x with ``x & v != 0`` for every value v, by inclusion-exclusion."""
    low = (1 << d) - 1
    total = 0
    for size in range(len(values) + 1):
        sign = -1 if size & 1 else 1
        for combo in combinations(values, size):
            covered = reduce(or_, combo, 0) & low
            total += sign * (1 << (d - bin(covered).count("1")))
    return total


def count_bit_assignments(n, conditions):
    """Count sequences of n 60-bit numbers with ``A[x] | A[y] | A[z] == w``.

    Conditions are ``(x, y, z, w)`` with 1-indexed positions; the count is
    taken modulo ``MOD``.
    """
    shifted = [(x - 1, y - 1, z - 1, w) for x, y, z, w in conditions]
    per_pattern = {}
    answer = 1
    for bit in range(60):
        pattern = tuple(w >> bit & 1 for *_, w in shifted)
        if pattern not in per_pattern:
            per_pattern[pattern] = sum(
                1
                for assignment in range(1 << n)
                if all(
                    ((assignment >> x | assignment >> y | assignment >> z) & 1) == want
                    for (x, y, z, _), want in zip(shifted, pattern)
                )
            )
        answer = answer * per_pattern[pattern] % MOD
    return answer


def find_equal_sum_subsets(values, conflicts):
    """Two different allowed subsets with the same sum, as 1-indexed lists.

    A conflict ``(x, y)`` forbids choosing y once x is chosen.  Returns the
    pair in the order the search meets them, or None if there is no pair.
    """
    n = len(values)
    blocks = [[] for _ in range(n)]
    for x, y in conflicts:
        blocks[x - 1].append(y - 1)
    blocked = [0] * n
    chosen = []

    def walk(i, total):
        if i == n:
            yield total, [c + 1 for c in chosen]
            return
        yield from walk(i + 1, total)
        if blocked[i]:
            return
        for y in blocks[i]:
            blocked[y] += 1
        chosen.append(i)
        yield from walk(i + 1, total + values[i])
        chosen.pop()
        for y in blocks[i]:
            blocked[y] -= 1

    seen = {}
    for total, subset in walk(0, 0):
        if total in seen:
            return seen[total], subset
        seen[total] = subset
    return None