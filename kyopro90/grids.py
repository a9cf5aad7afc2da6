"""Problems on rectangular grids."""

from __future__ import annotations

from collections import Counter, deque
from itertools import accumulate

_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def cross_sums(grid):
    """For every cell, the sum of its row and column, counting the cell once."""
    row_sums = [sum(row) for row in grid]
    col_sums = [sum(col) for col in zip(*grid)]
    return [
        [row_sums[i] + col_sums[j] - value for j, value in enumerate(row)]
        for i, row in enumerate(grid)
    ]


def overlap_areas(n, rectangles):
    """Area covered by exactly k of the rectangles, for k = 1..n.

    Rectangles are ``(lx, ly, rx, ry)`` with non-negative integer corners.
    """
    if not rectangles:
        return [0] * n
    for lx, ly, rx, ry in rectangles:
        if not (0 <= lx <= rx and 0 <= ly <= ry):
            raise ValueError(f"invalid rectangle {(lx, ly, rx, ry)}")
    width = max(r[2] for r in rectangles) + 1
    height = max(r[3] for r in rectangles) + 1
    diff = [[0] * width for _ in range(height)]
    for lx, ly, rx, ry in rectangles:
        diff[ly][lx] += 1
        diff[ry][lx] -= 1
        diff[ly][rx] -= 1
        diff[ry][rx] += 1
    rows = [list(accumulate(row)) for row in diff]
    layers = accumulate(rows, lambda above, row: [p + q for p, q in zip(above, row)])
    counts = Counter(v for row in layers for v in row)
    return [counts[k] for k in range(1, n + 1)]


def min_turns(grid, start, goal):
    """Fewest turns to walk from ``start`` to ``goal`` avoiding '#' cells.

    Positions are 1-indexed ``(row, column)``.  Returns None if unreachable.
    """
    h, w = len(grid), len(grid[0])
    sy, sx = start[0] - 1, start[1] - 1
    ty, tx = goal[0] - 1, goal[1] - 1
    unset = None
    best = [[[unset] * 4 for _ in range(w)] for _ in range(h)]
    queue = deque()
    for d in range(4):
        best[sy][sx][d] = 0
        queue.append((0, sy, sx, d))
    while queue:
        cost, y, x, d = queue.popleft()
        if cost > best[y][x][d]:
            continue
        for nd in range(4):
            current = best[y][x][nd]
            if current is None or current > cost + 1:
                best[y][x][nd] = cost + 1
                queue.append((cost + 1, y, x, nd))
        dy, dx = _STEPS[d]
        ny, nx = y + dy, x + dx
        if not (0 <= ny < h and 0 <= nx < w) or grid[ny][nx] == "#":
            continue
        current = best[ny][nx][d]
        if current is None or current > cost:
            best[ny][nx][d] = cost
            queue.appendleft((cost, ny, nx, d))
    reached = [c for c in best[ty][tx] if c is not None]
    return min(reached) if reached else None


def largest_uniform_subgrid(grid):
    """Largest cell count of a row-and-column selection holding a single value."""
    best = 0
    h = len(grid)
    for mask in range(1, 1 << h):
        rows = [row for i, row in enumerate(grid) if mask >> i & 1]
        counts = Counter(col[0] for col in zip(*rows) if all(v == col[0] for v in col))
        if counts:
            best = max(best, max(counts.values()) * len(rows))
    return best


def longest_cycle(grid):
    """Longest cycle through open '.' cells, or None if none of length 4 or more."""
    h, w = len(grid), len(grid[0]) if grid else 0

    def walk(y, x, sy, sx, depth, visited):
        found = 0
        for dy, dx in _STEPS:
            ny, nx = y + dy, x + dx
            if not (0 <= ny < h and 0 <= nx < w):
                continue
            if (ny, nx) == (sy, sx):
                found = max(found, depth)
            if grid[ny][nx] == "#" or (ny, nx) in visited:
                continue
            visited.add((ny, nx))
            found = max(found, walk(ny, nx, sy, sx, depth + 1, visited))
            visited.discard((ny, nx))
        return found

    best = 0
    for sy in range(h):
        for sx in range(w):
            if grid[sy][sx] == "#":
                continue
            best = max(best, walk(sy, sx, sy, sx, 1, {(sy, sx)}))
    return best if best >= 4 else None


def toggle_steps(a, b):
    """Fewest unit 2x2 block increments or decrements turning ``a`` into ``b``.

    Returns None if ``a`` cannot be turned into ``b``.
    """
    if len(a) != len(b) or any(len(p) != len(q) for p, q in zip(a, b)):
        raise ValueError("grids must have the same shape")
    current = [list(row) for row in a]
    h, w = len(current), len(current[0])
    steps = 0
    for i in range(h - 1):
        for j in range(w - 1):
            t = b[i][j] - current[i][j]
            current[i + 1][j] += t
            current[i][j + 1] += t
            current[i + 1][j + 1] += t
            steps += abs(t)
    if any(current[i][w - 1] != b[i][w - 1] for i in range(h)):
        return None
    if any(current[h - 1][j] != b[h - 1][j] for j in range(w)):
        return None
    return steps


def max_apples_in_square(points, k):
    """Most points ``(a, b)`` inside a square spanning ``k + 1`` units each way."""
    if k < 0:
        raise ValueError("k must be non-negative")
    if not points:
        return 0
    if any(a < 1 or b < 1 for a, b in points):
        raise ValueError("coordinates must be positive")
    size = max(max(max(a, b) for a, b in points), k + 1)
    counts = [[0] * (size + 1) for _ in range(size + 1)]
    for a, b in points:
        counts[a][b] += 1
    prefix = [[0] * (size + 1)]
    for row in counts[1:]:
        above = prefix[-1]
        prefix.append([r + p for r, p in zip(accumulate(row), above)])
    side = k + 1
    best = 0
    for i in range(side, size + 1):
        top, bottom = prefix[i - side], prefix[i]
        for j in range(side, size + 1):
            inside = bottom[j] - top[j] - bottom[j - side] + top[j - side]
            best = max(best, inside)
    return best