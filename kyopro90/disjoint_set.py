"""Disjoint-set forests and the problems solved with them."""

from __future__ import annotations

_NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))


class UnionFind:
    """Disjoint sets with union by size and path compression."""

    def __init__(self, n):
        # A negative entry marks a root and holds minus the size of its set.
        self._parent = [-1] * n

    def __len__(self):
        return len(self._parent)

    def _check(self, x):
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range")

    def root(self, x):
        """Return the representative of the set holding ``x``."""
        self._check(x)
        path = []
        while self._parent[x] >= 0:
            path.append(x)
            x = self._parent[x]
        for node in path:
            self._parent[node] = x
        return x

    def unite(self, x, y):
        """Join the sets of ``x`` and ``y``; return False if already joined."""
        x, y = self.root(x), self.root(y)
        if x == y:
            return False
        if self._parent[x] > self._parent[y]:
            x, y = y, x
        self._parent[x] += self._parent[y]
        self._parent[y] = x
        return True

    def same(self, x, y):
        return self.root(x) == self.root(y)

    def size(self, x):
        return -self._parent[self.root(x)]


class WeightedUnionFind:
    """Disjoint sets that also track potential differences between members."""

    def __init__(self, n):
        self._parent = list(range(n))
        self._rank = [0] * n
        self._diff = [0] * n

    def __len__(self):
        return len(self._parent)

    def root(self, x):
        """Return the representative of ``x``, compressing the path on the way."""
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range")
        path = []
        while self._parent[x] != x:
            path.append(x)
            x = self._parent[x]
        for node in reversed(path):
            self._diff[node] += self._diff[self._parent[node]]
            self._parent[node] = x
        return x

    def weight(self, x):
        """Potential of ``x`` relative to its root."""
        self.root(x)
        return self._diff[x]

    def same(self, x, y):
        return self.root(x) == self.root(y)

    def merge(self, x, y, w):
        """Record ``weight(y) - weight(x) == w``; return False if already joined."""
        w += self.weight(x) - self.weight(y)
        x, y = self.root(x), self.root(y)
        if x == y:
            return False
        if self._rank[x] < self._rank[y]:
            x, y = y, x
            w = -w
        if self._rank[x] == self._rank[y]:
            self._rank[x] += 1
        self._parent[y] = x
        self._diff[y] = w
        return True

    def diff(self, x, y):
        """Return ``weight(y) - weight(x)``."""
        return self.weight(y) - self.weight(x)


def paint_and_query(h, w, queries):
    """Paint cells red and ask whether two cells are joined by red cells.

    Each query is ``(t, r, c)`` with odd ``t`` to paint the 1-indexed cell,
    or ``(t, ra, ca, rb, cb)`` with even ``t`` to ask about two cells.
    Returns one bool per asking query.
    """
    tree = UnionFind(h * w)
    painted = [[False] * w for _ in range(h)]
    answers = []
    for kind, *args in queries:
        if kind & 1:
            r, c = args[0] - 1, args[1] - 1
            painted[r][c] = True
            for dr, dc in _NEIGHBOURS:
                y, x = r + dr, c + dc
                if 0 <= y < h and 0 <= x < w and painted[y][x]:
                    tree.unite(r * w + c, y * w + x)
        else:
            a, b, c, d = (v - 1 for v in args)
            if (a, b) == (c, d):
                answers.append(painted[a][b])
            else:
                answers.append(tree.same(a * w + b, c * w + d))
    return answers


def min_cost_to_determine(n, operations):
    """Cheapest set of range-sum questions ``(cost, l, r)`` fixing all n values.

    Returns None when the values cannot all be determined.
    """
    edges = sorted(((cost, l - 1, r) for cost, l, r in operations), key=lambda e: e[0])
    tree = UnionFind(n + 1)
    total = 0
    for cost, u, v in edges:
        if tree.unite(u, v):
            total += cost
    return total if tree.size(0) == n + 1 else None


def sequence_queries(n, queries):
    """Answer queries on a sequence constrained by ``A[x] + A[x+1] = v``.

    Queries are ``(t, x, y, v)``, 1-indexed.  ``t == 0`` records the sum of
    neighbours ``x`` and ``y``; otherwise the query asks for ``A[y]`` given
    ``A[x] = v``.  Returns one entry per asking query, None when ambiguous.
    """
    tree = WeightedUnionFind(n)
    answers = []
    for kind, x, y, v in queries:
        x -= 1
        y -= 1
        if kind == 0:
            tree.merge(x, y, v if x & 1 else -v)
            continue
        if not tree.same(x, y):
            answers.append(None)
            continue
        d = tree.diff(x, y)
        d = d - v if x & 1 else d + v
        answers.append(-d if y & 1 else d)
    return answers