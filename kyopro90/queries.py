"""Problems answering a stream of queries over a sequence."""

from __future__ import annotations

from collections import deque
from itertools import pairwise


def class_score_sums(students, queries):
    """Per-class score totals over 1-indexed student ranges ``(l, r)``.

    Each student is ``(class, score)`` with class 1 or 2.  Returns one
    ``(class 1 total, class 2 total)`` pair per query.
    """
    first = [0]
    second = [0]
    for group, score in students:
        if group not in (1, 2):
            raise ValueError(f"unknown class {group}")
        first.append(first[-1] + (score if group == 1 else 0))
        second.append(second[-1] + (score if group == 2 else 0))
    n = len(students)
    answers = []
    for l, r in queries:
        if not 1 <= l <= r <= n:
            raise IndexError(f"range [{l}, {r}] out of bounds")
        answers.append((first[r] - first[l - 1], second[r] - second[l - 1]))
    return answers


def shift_and_swap(values, queries):
    """Run swap, rotate and read queries ``(t, x, y)`` over ``values``.

    ``t == 1`` swaps positions x and y, ``t == 2`` moves the last value to
    the front and ``t == 3`` reads position x; positions are 1-indexed.
    Returns the values read.
    """
    items = list(values)
    n = len(items)
    shift = 0

    def position(x):
        if not 1 <= x <= n:
            raise IndexError(f"position {x} out of range")
        return (x - 1 - shift) % n

    answers = []
    for kind, x, y in queries:
        if kind == 1:
            i, j = position(x), position(y)
            items[i], items[j] = items[j], items[i]
        elif kind == 2:
            shift += 1
        elif kind == 3:
            answers.append(items[position(x)])
        else:
            raise ValueError(f"unknown query type {kind}")
    return answers


def deck_queries(queries):
    """Run deck queries ``(t, x)`` and return the cards read.

    ``t == 1`` puts x on top, ``t == 2`` puts x at the bottom and ``t == 3``
    reads the x-th card from the top.
    """
    deck = deque()
    answers = []
    for kind, x in queries:
        if kind == 1:
            deck.appendleft(x)
        elif kind == 2:
            deck.append(x)
        elif kind == 3:
            if not 1 <= x <= len(deck):
                raise IndexError(f"position {x} out of range")
            answers.append(deck[x - 1])
        else:
            raise ValueError(f"unknown query type {kind}")
    return answers


def terrain_inconvenience(heights, updates):
    """Total absolute height change between neighbours after each update.

    An update ``(l, r, v)`` raises the 1-indexed heights ``l..r`` by ``v``.
    """
    n = len(heights)
    diffs = [b - a for a, b in pairwise(heights)]
    total = sum(map(abs, diffs))
    answers = []
    for l, r, v in updates:
        if not 1 <= l <= r <= n:
            raise IndexError(f"range [{l}, {r}] out of bounds")
        if l >= 2:
            old = diffs[l - 2]
            diffs[l - 2] = old + v
            total += abs(old + v) - abs(old)
        if r < n:
            old = diffs[r - 1]
            diffs[r - 1] = old - v
            total += abs(old - v) - abs(old)
        answers.append(total)
    return answers