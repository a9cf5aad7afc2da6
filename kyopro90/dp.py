"""Dynamic-programming problems over sequences, subsets and games."""

from __future__ import annotations

import math
from collections import Counter
from itertools import pairwise, permutations


def smallest_subsequence(s, k):
    """Lexicographically smallest subsequence of ``s`` with length ``k``."""
    n = len(s)
    if not 0 <= k <= n:
        raise ValueError(f"k must lie between 0 and {n}")
    letters = sorted(set(s))
    following = [None] * (n + 1)
    following[n] = {}
    for i in range(n - 1, -1, -1):
        table = dict(following[i + 1])
        table[s[i]] = i
        following[i] = table

    picked = []
    start = 0
    for remaining in range(k, 0, -1):
        table = following[start]
        for ch in letters:
            pos = table.get(ch)
            if pos is not None and pos + remaining <= n:
                picked.append(ch)
                start = pos + 1
                break
    return "".join(picked)


def max_reward(jobs):
    """Largest total reward from jobs ``(deadline, days, reward)`` done one after another.

    A job must be finished by its deadline day; each job is done at most once.
    """
    ordered = sorted(jobs)
    if not ordered:
        return 0
    horizon = max(0, max(d for d, _, _ in ordered))
    best = [0] * (horizon + 1)
    for deadline, days, reward in ordered:
        if days < 0:
            raise ValueError("a job cannot take negative time")
        updated = best[:]
        for day in range(days, min(deadline, horizon) + 1):
            updated[day] = max(best[day], best[day - days] + reward)
        best = updated
    return max(best)


def min_pairing_cost(values):
    """Cheapest way to remove a row of values by adjacent pairs.

    Removing two neighbouring values costs their absolute difference, and the
    row closes up after each removal.
    """
    m = len(values)
    if m % 2:
        raise ValueError("the row must hold an even number of values")
    if not m:
        return 0
    cost = [[0] * m for _ in range(m)]
    for length in range(2, m + 1, 2):
        for left in range(m - length + 1):
            right = left + length - 1
            best = abs(values[left] - values[right])
            if length > 2:
                best += cost[left + 1][right - 1]
            for mid in range(left + 1, right, 2):
                best = min(best, cost[left][mid] + cost[mid + 1][right])
            cost[left][right] = best
    return cost[0][m - 1]


def _grundy_rows(white, blue):
    """Grundy values for every state reachable from ``(white, blue)``."""
    if white < 0 or blue < 0:
        raise ValueError("stone counts must be non-negative")
    rows = []
    for x in range(white + 1):
        limit = blue + (white - x) * (white + x + 1) // 2
        row = []
        window = Counter()
        low = 0
        for y in range(limit + 1):
            # window holds the values of (x, y') for y' in [ceil(y / 2), y - 1]
            if y:
                window[row[y - 1]] += 1
            while low < (y + 1) // 2:
                gone = row[low]
                window[gone] -= 1
                if not window[gone]:
                    del window[gone]
                low += 1
            extra = rows[x - 1][y + x] if x else None
            value = 0
            while value in window or value == extra:
                value += 1
            row.append(value)
        rows.append(row)
    return rows


def grundy(white, blue):
    """Grundy number of a pile with ``white`` white stones and ``blue`` blue stones."""
    return _grundy_rows(white, blue)[white][blue]


def first_player_wins(white, blue):
    """Whether the first player wins the sum of piles ``(white[i], blue[i])``."""
    if len(white) != len(blue):
        raise ValueError("white and blue must have the same length")
    if not white:
        return False
    rows = _grundy_rows(max(white), max(blue))
    total = 0
    for w, b in zip(white, blue):
        total ^= rows[w][b]
    return total != 0


def min_relay_time(costs, conflicts):
    """Fastest relay order; ``costs[i][j]`` is runner i's time on leg j.

    Runners in a conflict pair (1-indexed) may not run consecutive legs.
    Returns None when no order is allowed.
    """
    n = len(costs)
    banned = set()
    for x, y in conflicts:
        banned.add((x - 1, y - 1))
        banned.add((y - 1, x - 1))
    best = None
    for order in permutations(range(n)):
        if any(pair in banned for pair in pairwise(order)):
            continue
        total = sum(costs[runner][leg] for leg, runner in enumerate(order))
        if best is None or total < best:
            best = total
    return best


def min_max_group_distance(points, k):
    """Split points into ``k`` groups minimising the largest squared group diameter."""
    n = len(points)
    if not n:
        raise ValueError("points must not be empty")
    if k < 1:
        raise ValueError("k must be at least 1")
    full = 1 << n
    spread = [0] * full
    for mask in range(1, full):
        low = mask & -mask
        i = low.bit_length() - 1
        rest = mask ^ low
        xi, yi = points[i]
        reach = 0
        for j in range(i + 1, n):
            if rest >> j & 1:
                xj, yj = points[j]
                reach = max(reach, (xi - xj) ** 2 + (yi - yj) ** 2)
        spread[mask] = max(spread[rest], reach)

    current = spread[:]
    for _ in range(k - 1):
        following = [math.inf] * full
        for s in range(1, full):
            best = math.inf
            t = s
            while t:
                best = min(best, max(current[s & ~t], spread[t]))
                t = (t - 1) & s
            following[s] = best
        current = following
    return current[full - 1]


def choose_products(s, items):
    """Pick option A or B of every item ``(a, b)`` so the prices add up to ``s``.

    Returns a string of 'A' and 'B', preferring 'A' from the last item back,
    or None when no choice works.
    """
    if s < 0:
        raise ValueError("the target must be non-negative")
    if any(a < 1 or b < 1 for a, b in items):
        raise ValueError("prices must be positive")
    mask = (1 << (s + 1)) - 1
    reach = [1]
    for a, b in items:
        r = reach[-1]
        reach.append(((r << a) | (r << b)) & mask)
    if not reach[-1] >> s & 1:
        return None
    picks = []
    left = s
    for i in range(len(items) - 1, -1, -1):
        a, b = items[i]
        if left - a >= 0 and reach[i] >> (left - a) & 1:
            left -= a
            picks.append("A")
        elif left - b >= 0 and reach[i] >> (left - b) & 1:
            left -= b
            picks.append("B")
        else:
            return None
    return "".join(reversed(picks))