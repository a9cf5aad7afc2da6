import pytest

from kyopro90.grids import (
    cross_sums,
    largest_uniform_subgrid,
    longest_cycle,
    max_apples_in_square,
    min_turns,
    overlap_areas,
    toggle_steps,
)


def _transpose(grid):
    return [list(col) for col in zip(*grid)]


def test_cross_sums_single_row():
    row = [1, 2, 3]
    assert cross_sums([row]) == [[sum(row)] * len(row)]


def test_cross_sums_single_cell():
    assert cross_sums([[7]]) == [[7]]


def test_cross_sums_transpose():
    grid = [[1, 2, 3], [4, 5, 6]]
    assert cross_sums(_transpose(grid)) == _transpose(cross_sums(grid))


def test_overlap_single_rectangle():
    lx, ly, rx, ry = 1, 2, 4, 6
    assert overlap_areas(1, [(lx, ly, rx, ry)]) == [(rx - lx) * (ry - ly)]


def test_overlap_identical_rectangles():
    rect = (0, 0, 2, 3)
    assert overlap_areas(2, [rect, rect]) == [0, 2 * 3]


def test_overlap_weighted_total_is_total_area():
    rects = [(0, 0, 3, 3), (1, 1, 5, 4), (2, 0, 4, 6)]
    result = overlap_areas(3, rects)
    total = sum((rx - lx) * (ry - ly) for lx, ly, rx, ry in rects)
    assert sum(k * count for k, count in enumerate(result, 1)) == total


def test_overlap_rejects_negative():
    with pytest.raises(ValueError):
        overlap_areas(1, [(-1, 0, 2, 2)])


OPEN = ["...", "...", "..."]


def test_min_turns_straight():
    assert min_turns(OPEN, (1, 1), (1, 3)) == 0


def test_min_turns_corner():
    assert min_turns(OPEN, (1, 1), (3, 3)) == 1


def test_min_turns_symmetric():
    grid = ["..#..", ".#...", "...#.", "#...."]
    assert min_turns(grid, (1, 1), (4, 5)) == min_turns(grid, (4, 5), (1, 1))


def test_min_turns_unreachable():
    assert min_turns(["..#", ".##", "#.."], (1, 1), (3, 3)) is None


def test_largest_uniform_all_same():
    grid = [[7] * 4 for _ in range(3)]
    assert largest_uniform_subgrid(grid) == 3 * 4


def test_largest_uniform_at_least_row_frequency():
    grid = [[1, 2, 2, 3], [4, 2, 5, 6]]
    best_single = max(row.count(v) for row in grid for v in row)
    assert largest_uniform_subgrid(grid) >= best_single


def test_longest_cycle_square():
    assert longest_cycle(["..", ".."]) == 4


def test_longest_cycle_three_by_three():
    assert longest_cycle(["...", "...", "..."]) == 8


def test_longest_cycle_none_in_line():
    assert longest_cycle(["...."]) is None


def test_longest_cycle_blocked_square():
    assert longest_cycle(["..", ".#"]) is None


def test_toggle_identity():
    a = [[1, 2, 3], [4, 5, 6]]
    assert toggle_steps(a, [row[:] for row in a]) == 0


@pytest.mark.parametrize("t", [3, -3])
def test_toggle_single_block(t):
    a = [[1, 2, 3], [4, 5, 6]]
    b = [row[:] for row in a]
    for i, j in ((0, 0), (0, 1), (1, 0), (1, 1)):
        b[i][j] += t
    assert toggle_steps(a, b) == abs(t)


def test_toggle_impossible():
    a = [[0, 0], [0, 0]]
    assert toggle_steps(a, [[0, 0], [0, 1]]) is None


def test_toggle_shape_mismatch():
    with pytest.raises(ValueError):
        toggle_steps([[1, 2]], [[1, 2, 3]])


def test_apples_all_together():
    points = [(5, 5)] * 4
    assert max_apples_in_square(points, 2) == len(points)


def test_apples_far_apart():
    points = [(1, 1), (50, 50), (100, 1)]
    assert max_apples_in_square(points, 3) == 1


def test_apples_monotone_in_k():
    points = [(1, 1), (3, 4), (6, 2), (8, 8), (2, 7)]
    results = [max_apples_in_square(points, k) for k in range(10)]
    assert results == sorted(results)
    assert results[-1] == len(points)


def test_apples_rejects_zero_coordinate():
    with pytest.raises(ValueError):
        max_apples_in_square([(0, 1)], 1)