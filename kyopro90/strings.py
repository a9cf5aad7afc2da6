"""String problems: first occurrences, Z-function and substring counting."""

from __future__ import annotations

_COLOURS = {"R": 0, "G": 1, "B": 2}


def first_registrations(names):
    """1-indexed positions at which a name appears for the first time."""
    seen = set()
    result = []
    for i, name in enumerate(names, 1):
        if name not in seen:
            seen.add(name)
            result.append(i)
    return result


def z_algorithm(seq):
    """Z-array: ``z[i]`` is the longest common prefix of ``seq`` and ``seq[i:]``."""
    n = len(seq)
    if not n:
        return []
    z = [0] * n
    z[0] = n
    i, j = 1, 0
    while i < n:
        while i + j < n and seq[j] == seq[i + j]:
            j += 1
        z[i] = j
        if not j:
            i += 1
            continue
        k = 1
        while k < j and z[k] + k < j:
            z[i + k] = z[k]
            k += 1
        i += k
        j -= k
    return z


def _colours(s):
    try:
        return [_COLOURS[ch] for ch in s]
    except KeyError as exc:
        raise ValueError(f"unknown colour {exc.args[0]!r}") from None


def _aligned(head, tail, first_shift):
    n = len(head)
    total = 0
    for _ in range(3):
        z = z_algorithm(head + tail)
        total += sum(1 for j in range(first_shift, n) if z[n + j] == n - j)
        head = [(v + 1) % 3 for v in head]
    return total


def count_matching_shifts(s, t):
    """Count overlaps of the colour strings ``s`` and ``t`` (letters R, G, B).

    An overlap counts when, on every aligned position, the two colours are
    either all equal or combine the same way across the overlap.
    """
    if len(s) != len(t):
        raise ValueError("strings must have the same length")
    if not s:
        return 0
    forward = _colours(s)
    backward = [(-c) % 3 for c in _colours(t)]
    return _aligned(forward, backward, 0) + _aligned(backward, forward, 1)


def count_mixed_substrings(s):
    """Count substrings holding at least one 'o' and at least one 'x'."""
    last_o = last_x = -1
    total = 0
    for i, ch in enumerate(s):
        if ch == "o":
            last_o = i
            total += last_x + 1
        elif ch == "x":
            last_x = i
            total += last_o + 1
    return total