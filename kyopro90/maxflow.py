"""Maximum flow by Dinic's algorithm and a matching problem solved with it."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass

# (dx, dy) for directions 1..8
_DIRECTIONS = ((1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1), (0, -1), (1, -1))


@dataclass(slots=True)
class _Edge:
    to: int
    rev: int
    cap: int
    is_rev: bool


class Dinic:
    """Flow network on ``n`` vertices."""

    def __init__(self, n):
        self._graph = [[] for _ in range(n)]

    def __len__(self):
        return len(self._graph)

    def add_edge(self, frm, to, cap):
        """Add a directed edge of capacity ``cap``."""
        self._graph[frm].append(_Edge(to, len(self._graph[to]), cap, False))
        self._graph[to].append(_Edge(frm, len(self._graph[frm]) - 1, 0, True))

    def max_flow(self, s, t):
        """Push as much flow as possible from ``s`` to ``t`` and return it."""
        if s == t:
            raise ValueError("source and sink must differ")
        flow = 0
        while (level := self._levels(s, t)) is not None:
            progress = [0] * len(self._graph)
            while (pushed := self._augment(s, t, math.inf, level, progress)) > 0:
                flow += pushed
        return flow

    def flows(self):
        """Yield ``(frm, to, flow, capacity)`` for every edge that was added."""
        for frm, edges in enumerate(self._graph):
            for edge in edges:
                if edge.is_rev:
                    continue
                back = self._graph[edge.to][edge.rev]
                yield frm, edge.to, back.cap, edge.cap + back.cap

    def _levels(self, s, t):
        level = [-1] * len(self._graph)
        level[s] = 0
        queue = deque([s])
        while queue and level[t] == -1:
            v = queue.popleft()
            for edge in self._graph[v]:
                if edge.cap > 0 and level[edge.to] == -1:
                    level[edge.to] = level[v] + 1
                    queue.append(edge.to)
        return level if level[t] != -1 else None

    def _augment(self, v, t, limit, level, progress):
        if v == t:
            return limit
        edges = self._graph[v]
        while progress[v] < len(edges):
            edge = edges[progress[v]]
            if edge.cap > 0 and level[v] < level[edge.to]:
                pushed = self._augment(edge.to, t, min(limit, edge.cap), level, progress)
                if pushed > 0:
                    edge.cap -= pushed
                    self._graph[edge.to][edge.rev].cap += pushed
                    return pushed
            progress[v] += 1
        return 0


def assign_directions(t, starts, targets):
    """Move every start point ``t`` steps in one of eight directions.

    The moved points must be exactly the target points.  Returns the chosen
    direction numbers (1 to 8) for each start, or None if impossible.
    """
    n = len(starts)
    if len(targets) != n:
        raise ValueError("starts and targets must have the same length")
    index = {tuple(p): i for i, p in enumerate(targets, 1)}
    sink = 2 * n + 1
    net = Dinic(2 * n + 2)
    for i, (x, y) in enumerate(starts, 1):
        net.add_edge(0, i, 1)
        net.add_edge(n + i, sink, 1)
        for dx, dy in _DIRECTIONS:
            v = index.get((x + t * dx, y + t * dy))
            if v:
                net.add_edge(i, n + v, 1)
    if net.max_flow(0, sink) != n:
        return None

    matched = {}
    for frm, to, flow, _ in net.flows():
        if 1 <= frm <= n and flow > 0:
            matched.setdefault(frm, to - n)

    result = []
    for i, (x, y) in enumerate(starts, 1):
        target = matched[i]
        result.append(next(
            d for d, (dx, dy) in enumerate(_DIRECTIONS, 1)
            if index.get((x + t * dx, y + t * dy)) == target
        ))
    return result