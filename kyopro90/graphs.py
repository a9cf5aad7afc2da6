"""Graph problems: trees, shortest paths and strongly connected components."""

from __future__ import annotations

import heapq
import math
from collections import deque

MOD = 1_000_000_007
_SEARCH_CEILING = 5_000_000_000


def _undirected(n, edges):
    adj = [[] for _ in range(n)]
    for a, b in edges:
        adj[a - 1].append(b - 1)
        adj[b - 1].append(a - 1)
    return adj


def _bfs_levels(adj, start):
    dist = [-1] * len(adj)
    dist[start] = 0
    queue = deque([start])
    while queue:
        v = queue.popleft()
        for u in adj[v]:
            if dist[u] == -1:
                dist[u] = dist[v] + 1
                queue.append(u)
    return dist


def _tree_order(adj, root=0):
    """Return vertices in preorder from ``root`` and each vertex's parent."""
    parent = [-1] * len(adj)
    seen = [False] * len(adj)
    seen[root] = True
    order = []
    stack = [root]
    while stack:
        v = stack.pop()
        order.append(v)
        for u in adj[v]:
            if not seen[u]:
                seen[u] = True
                parent[u] = v
                stack.append(u)
    return order, parent


def longest_cycle_by_one_edge(n, edges):
    """Longest cycle made by adding one edge to a tree: its diameter plus one."""
    if n < 1:
        raise ValueError("the tree needs at least one vertex")
    adj = _undirected(n, edges)
    first = _bfs_levels(adj, 0)
    far = first.index(max(first))
    return max(_bfs_levels(adj, far)) + 1


def _dijkstra(adj, source):
    dist = [None] * len(adj)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, v = heapq.heappop(heap)
        if d > dist[v]:
            continue
        for u, cost in adj[v]:
            nd = d + cost
            if dist[u] is None or nd < dist[u]:
                dist[u] = nd
                heapq.heappush(heap, (nd, u))
    return dist


def shortest_via_each(n, edges):
    """Shortest route from vertex 1 to vertex n that passes each vertex.

    Edges are ``(a, b, cost)``, 1-indexed and undirected.  An entry is None
    when the vertex cannot be reached from both ends.
    """
    adj = [[] for _ in range(n)]
    for a, b, cost in edges:
        adj[a - 1].append((b - 1, cost))
        adj[b - 1].append((a - 1, cost))
    from_start = _dijkstra(adj, 0)
    from_goal = _dijkstra(adj, n - 1)
    return [
        None if s is None or g is None else s + g
        for s, g in zip(from_start, from_goal)
    ]


def count_mutually_reachable_pairs(n, edges):
    """Count unordered pairs of vertices that can reach each other."""
    forward = [[] for _ in range(n)]
    backward = [[] for _ in range(n)]
    for a, b in edges:
        forward[a - 1].append(b - 1)
        backward[b - 1].append(a - 1)

    finished = []
    seen = [False] * n
    for s in range(n):
        if seen[s]:
            continue
        seen[s] = True
        stack = [(s, iter(forward[s]))]
        while stack:
            v, neighbours = stack[-1]
            for u in neighbours:
                if not seen[u]:
                    seen[u] = True
                    stack.append((u, iter(forward[u])))
                    break
            else:
                stack.pop()
                finished.append(v)

    assigned = [False] * n
    total = 0
    for s in reversed(finished):
        if assigned[s]:
            continue
        assigned[s] = True
        stack = [s]
        size = 0
        while stack:
            v = stack.pop()
            size += 1
            for u in backward[v]:
                if not assigned[u]:
                    assigned[u] = True
                    stack.append(u)
        total += size * (size - 1) // 2
    return total


def independent_half(n, edges):
    """Pick ``n // 2`` pairwise non-adjacent vertices of a tree, 1-indexed, ascending."""
    adj = _undirected(n, edges)
    colour = [0] * n
    colour[0] = 1
    queue = deque([0])
    while queue:
        v = queue.popleft()
        for u in adj[v]:
            if not colour[u]:
                colour[u] = 3 ^ colour[v]
                queue.append(u)
    half = n // 2
    chosen = 2 if colour.count(1) < half else 1
    picked = [i + 1 for i, c in enumerate(colour) if c == chosen]
    return picked[:half]


def total_path_length(n, edges):
    """Sum of the distances between all pairs of vertices of a tree."""
    adj = _undirected(n, edges)
    order, parent = _tree_order(adj)
    size = [1] * n
    for v in reversed(order):
        if parent[v] >= 0:
            size[parent[v]] += size[v]
    total = 0
    for a, b in edges:
        t = min(size[a - 1], size[b - 1])
        total += t * (n - t)
    return total


def coauthor_distances(n, papers):
    """Co-author distance of every author from author 1; -1 when unconnected.

    Each paper is a list of its 1-indexed authors.
    """
    adj = [[] for _ in range(n + len(papers))]
    for i, authors in enumerate(papers):
        node = n + i
        for author in authors:
            adj[author - 1].append(node)
            adj[node].append(author - 1)
    levels = _bfs_levels(adj, 0)
    return [level // 2 if level >= 0 else -1 for level in levels[:n]]


def paint_order(n, pairs):
    """Order in which to paint balls, 1-indexed, or None if not all can be painted.

    Ball ``i`` is described by ``pairs[i] = (a, b)``.
    """
    if len(pairs) != n:
        raise ValueError("one pair is needed per ball")
    dependents = [[] for _ in range(n)]
    seen = [False] * n
    queue = deque()
    for i, (a, b) in enumerate(pairs):
        a -= 1
        b -= 1
        dependents[a].append(i)
        dependents[b].append(i)
        if i in (a, b):
            seen[i] = True
            queue.append(i)
    order = []
    while queue:
        v = queue.popleft()
        order.append(v)
        for u in dependents[v]:
            if not seen[u]:
                seen[u] = True
                queue.append(u)
    if len(order) != n:
        return None
    return [v + 1 for v in reversed(order)]


def count_valid_splits(labels, edges):
    """Ways to delete tree edges so every part holds both an 'a' and a 'b'."""
    n = len(labels)
    if any(label not in ("a", "b") for label in labels):
        raise ValueError("labels must be 'a' or 'b'")
    adj = _undirected(n, edges)
    order, parent = _tree_order(adj)
    dp = [None] * n
    for v in reversed(order):
        is_a = labels[v] == "a"
        same = 1
        total = 1
        for u in adj[v]:
            if u == parent[v]:
                continue
            only_a, only_b, both = dp[u]
            same = same * ((only_a if is_a else only_b) + both) % MOD
            total = total * (only_a + only_b + 2 * both) % MOD
        mixed = (total - same) % MOD
        dp[v] = (same, 0, mixed) if is_a else (0, same, mixed)
    return dp[0][2]


def count_special_vertices(n, edges):
    """Count vertices with exactly one neighbour of smaller number."""
    smaller = [0] * n
    for a, b in edges:
        smaller[max(a, b) - 1] += 1
    return sum(1 for c in smaller if c == 1)


def _close_pairs(adjacency, unknown, p):
    n = len(adjacency)
    dist = [[unknown if w == -1 else w for w in row] for row in adjacency]
    for k in range(n):
        through = dist[k]
        for row in dist:
            via = row[k]
            for j, d in enumerate(through):
                if via + d < row[j]:
                    row[j] = via + d
    return sum(1 for i in range(n) for j in range(i + 1, n) if dist[i][j] <= p)


def count_unknown_weights(adjacency, p, k):
    """Count weights X for the -1 entries leaving exactly ``k`` pairs within ``p``.

    Returns ``math.inf`` when infinitely many X qualify.
    """

    def threshold(limit):
        left, right = 0, _SEARCH_CEILING
        while left + 1 < right:
            mid = (left + right) // 2
            if _close_pairs(adjacency, mid, p) <= limit:
                right = mid
            else:
                left = mid
        return left

    span = threshold(k - 1) - threshold(k)
    return math.inf if span >= MOD else span