"""Plane geometry problems."""

from __future__ import annotations

import math
from bisect import bisect_left


def _gap(a, b):
    v = abs(a - b)
    return 2 * math.pi - v if v > math.pi else v


def max_angle(points):
    """Largest angle, in degrees, formed by three of the given points."""
    if len(points) < 3:
        raise ValueError("at least three points are needed")
    best = 0.0
    for i, (cx, cy) in enumerate(points):
        directions = sorted(
            math.atan2(y - cy, x - cx) for j, (x, y) in enumerate(points) if j != i
        )
        m = len(directions)
        for d in directions:
            target = d - math.pi if d > 0 else d + math.pi
            pos = bisect_left(directions, target)
            for other in (directions[pos % m], directions[pos - 1]):
                best = max(best, _gap(d, other))
    return math.degrees(best)


def ferris_wheel_angles(t, l, x, y, times):
    """Elevation angle, in degrees, of a Ferris wheel car seen from a statue.

    The wheel of diameter ``l`` turns once every ``t`` minutes; the statue
    stands at ``(x, y)`` on the ground.
    """
    if t <= 0:
        raise ValueError("the period must be positive")
    radius = l / 2
    angles = []
    for e in times:
        rad = -math.pi / 2 - 2 * e / t * math.pi
        car_y = radius * math.cos(rad)
        ground = math.hypot(x, car_y - y)
        height = radius * math.sin(rad) + radius
        angles.append(math.degrees(math.atan2(height, ground)))
    return angles


def farthest_distances(points, queries):
    """For each 1-indexed query point, the largest Manhattan distance to any point."""
    if not points:
        raise ValueError("points must not be empty")
    sums = [x + y for x, y in points]
    diffs = [x - y for x, y in points]
    hi_s, lo_s = max(sums), min(sums)
    hi_d, lo_d = max(diffs), min(diffs)
    answers = []
    for q in queries:
        s, d = sums[q - 1], diffs[q - 1]
        answers.append(max(hi_s - s, s - lo_s, hi_d - d, d - lo_d))
    return answers


def _det(o, a, b):
    return (a[0] - o[0]) * (b[1] - a[1]) - (a[1] - o[1]) * (b[0] - a[0])


def count_interior_points(points):
    """Lattice points in the convex hull of ``points`` (boundary included) that are not given."""
    ordered = sorted(tuple(p) for p in points)
    hull = []
    for p in ordered:
        while len(hull) > 1 and _det(hull[-2], hull[-1], p) <= 0:
            hull.pop()
        hull.append(p)
    lower = len(hull)
    for p in reversed(ordered[:-1]):
        while len(hull) > lower and _det(hull[-2], hull[-1], p) <= 0:
            hull.pop()
        hull.append(p)
    if hull:
        hull.pop()

    k = len(hull)
    boundary = k
    twice_area = 0
    for i, (ax, ay) in enumerate(hull):
        bx, by = hull[(i + 1) % k]
        boundary += math.gcd(abs(ax - bx), abs(ay - by)) - 1
        twice_area += (ax - bx) * (ay + by)
    twice_area = abs(twice_area)
    return (twice_area + 2 + boundary) // 2 - len(ordered)


def expected_inversions(ranges):
    """Expected inversion count when each value is uniform on its integer range."""
    total = 0.0
    for i, (li, ri) in enumerate(ranges):
        for lj, rj in ranges[i + 1:]:
            larger = sum(max(min(k, rj + 1) - lj, 0) for k in range(li, ri + 1))
            total += larger / (ri - li + 1) / (rj - lj + 1)
    return total