"""Number-theoretic problems: divisibility, primes, bases and cycles."""

from __future__ import annotations

import math
from collections import Counter

MOD = 998_244_353
_LARGE = 10**18
_RESIDUE = 46
_WALK_MODULUS = 100_000


def is_less_than_power(a, b, c):
    """Whether ``a < c ** b``."""
    if b < 0:
        raise ValueError("the exponent must be non-negative")
    return a < c**b


def min_cuts(a, b, c):
    """Fewest cuts splitting an ``a x b x c`` block into equal cubes."""
    if min(a, b, c) < 1:
        raise ValueError("sides must be positive")
    side = math.gcd(a, b, c)
    return (a + b + c) // side - 3


def can_match_in_steps(a, b, k):
    """Whether ``a`` becomes ``b`` in exactly ``k`` unit increments or decrements."""
    if len(a) != len(b):
        raise ValueError("sequences must have the same length")
    distance = sum(abs(x - y) for x, y in zip(a, b))
    return k >= distance and (k - distance) % 2 == 0


def count_with_prime_factors(n, k):
    """Count integers in ``1..n`` having at least ``k`` distinct prime factors."""
    if n < 0:
        raise ValueError("n must be non-negative")
    distinct = [0] * (n + 1)
    for i in range(2, n + 1):
        if not distinct[i]:
            for j in range(i, n + 1, i):
                distinct[j] += 1
    return sum(1 for c in distinct[1:] if c >= k)


def max_lights(h, w):
    """Most lights on an ``h x w`` board with no two in any 2x2 square."""
    if h < 1 or w < 1:
        raise ValueError("the board must not be empty")
    if h == 1 or w == 1:
        return h * w
    return ((h + 1) // 2) * ((w + 1) // 2)


def lcm_or_large(a, b):
    """Least common multiple of ``a`` and ``b``, or None above ``10**18``."""
    if a < 1 or b < 1:
        raise ValueError("arguments must be positive")
    reduced = a // math.gcd(a, b)
    if reduced * b > _LARGE:
        return None
    return reduced * b


def count_sums_divisible(a, b, c):
    """Count choices of one value from each list whose sum is divisible by 46."""
    first = Counter(x % _RESIDUE for x in a)
    second = Counter(x % _RESIDUE for x in b)
    third = Counter(x % _RESIDUE for x in c)
    pairs = Counter()
    for r1, c1 in first.items():
        for r2, c2 in second.items():
            pairs[(r1 + r2) % _RESIDUE] += c1 * c2
    return sum(count * pairs[(-r) % _RESIDUE] for r, count in third.items())


def count_switch_patterns(switches, m, target):
    """Count subsets of switches toggling exactly the lit lamps of ``target``.

    Each switch lists the 1-indexed lamps it toggles; ``target`` holds one
    0 or 1 per lamp.  The count is taken modulo 998244353.
    """
    if len(target) != m:
        raise ValueError("target must describe every lamp")
    masks = []
    for lamps in switches:
        mask = 0
        for lamp in lamps:
            if not 1 <= lamp <= m:
                raise ValueError(f"lamp {lamp} out of range")
            mask |= 1 << (lamp - 1)
        masks.append(mask)

    basis = []
    for mask in masks:
        for vector in basis:
            mask = min(mask, mask ^ vector)
        if mask:
            basis.append(mask)
            basis.sort(reverse=True)

    want = sum(bit << i for i, bit in enumerate(target) if bit)
    for vector in basis:
        want = min(want, want ^ vector)
    if want:
        return 0
    return pow(2, len(masks) - len(basis), MOD)


def _digit_step(x):
    return (x + sum(map(int, str(x)))) % _WALK_MODULUS


def digit_sum_walk(n, k):
    """Apply ``x -> (x + digit sum of x) mod 100000`` to ``n`` exactly ``k`` times."""
    if not 0 <= n < _WALK_MODULUS:
        raise ValueError("n must lie in [0, 100000)")
    if k < 0:
        raise ValueError("k must be non-negative")
    seen = {}
    history = []
    x = n
    step = 0
    while step < k:
        if x in seen:
            start = seen[x]
            return history[start + (k - start) % (step - start)]
        seen[x] = step
        history.append(x)
        x = _digit_step(x)
        step += 1
    return x


def base8_to_base9_repeated(s, k):
    """Read ``s`` in base 8, write it in base 9 with 8 turned into 5; ``k`` times."""
    for _ in range(k):
        value = int(s, 8)
        digits = []
        while value:
            value, digit = divmod(value, 9)
            digits.append(digit)
        s = "".join("5" if d == 8 else str(d) for d in reversed(digits)) or "0"
    return s


def letters_value(s):
    """Value of ``s`` read as a little-endian base-2 number with digits a=0, b=1, ..."""
    if not all("a" <= ch <= "z" for ch in s):
        raise ValueError("only lowercase letters are allowed")
    return sum((ord(ch) - ord("a")) << i for i, ch in enumerate(s))


def min_split_days(n):
    """Fewest days to split ``n`` into primes when each day every part may split in two."""
    if n < 1:
        raise ValueError("n must be positive")
    count = 0
    p = 2
    while p * p <= n:
        while n % p == 0:
            n //= p
            count += 1
        p += 1
    if n > 1:
        count += 1
    return max(count - 1, 0).bit_length()


def count_cuboids(k):
    """Count ``a <= b <= c`` with ``a * b * c == k``."""
    if k < 1:
        raise ValueError("k must be positive")
    count = 0
    i = 1
    while i * i * i <= k:
        if k % i == 0:
            rest = k // i
            j = i
            while j * j <= rest:
                if rest % j == 0:
                    count += 1
                j += 1
        i += 1
    return count