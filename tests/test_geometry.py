import pytest

from kyopro90.geometry import (
    count_interior_points,
    expected_inversions,
    farthest_distances,
    ferris_wheel_angles,
    max_angle,
)


def test_max_angle_right_triangle():
    assert max_angle([(0, 0), (1, 0), (0, 1)]) == pytest.approx(90.0)


@pytest.mark.parametrize(
    "points",
    [
        [(0, 0), (5, 1), (2, 7)],
        [(0, 0), (1, 0), (2, 0)],
        [(1, 1), (4, 2), (3, 9), (-2, 5)],
    ],
)
def test_max_angle_bounds(points):
    angle = max_angle(points)
    assert 60.0 - 1e-9 <= angle <= 180.0 + 1e-9


def test_max_angle_translation_invariant():
    points = [(0, 0), (5, 1), (2, 7), (-3, 4)]
    moved = [(x + 11, y - 6) for x, y in points]
    assert max_angle(moved) == pytest.approx(max_angle(points))


def test_max_angle_too_few():
    with pytest.raises(ValueError):
        max_angle([(0, 0), (1, 1)])


def test_ferris_wheel_top_of_wheel():
    (angle,) = ferris_wheel_angles(4, 5, 3, 4, [2])
    assert angle == pytest.approx(45.0)


def test_ferris_wheel_periodic():
    first = ferris_wheel_angles(8, 10, 2, 3, [1, 3])
    later = ferris_wheel_angles(8, 10, 2, 3, [9, 11])
    assert later == pytest.approx(first)


def test_ferris_wheel_bottom_is_lowest():
    angles = ferris_wheel_angles(8, 10, 2, 3, range(8))
    assert angles[0] == pytest.approx(min(angles))


def test_ferris_wheel_bad_period():
    with pytest.raises(ValueError):
        ferris_wheel_angles(0, 1, 1, 1, [0])


def test_farthest_distances_two_points_symmetric():
    a, b = farthest_distances([(0, 0), (2, 3)], [1, 2])
    assert a == b == abs(2 - 0) + abs(3 - 0)


def test_farthest_distances_single_point():
    assert farthest_distances([(4, 4)], [1]) == [0]


def test_farthest_distances_translation_invariant():
    points = [(1, 5), (-3, 2), (7, -4), (0, 0)]
    moved = [(x + 100, y - 50) for x, y in points]
    queries = [1, 2, 3, 4]
    assert farthest_distances(moved, queries) == farthest_distances(points, queries)


def test_farthest_distances_at_least_any_distance():
    points = [(1, 5), (-3, 2), (7, -4), (0, 0)]
    result = farthest_distances(points, [1, 2, 3, 4])
    for (qx, qy), best in zip(points, result):
        for x, y in points:
            assert best >= abs(qx - x) + abs(qy - y)


def test_count_interior_points_square():
    assert count_interior_points([(0, 0), (2, 0), (0, 2), (2, 2)]) == 5


def test_count_interior_points_given_point_removed():
    square = [(0, 0), (3, 0), (0, 3), (3, 3)]
    assert count_interior_points(square + [(1, 1)]) == count_interior_points(square) - 1


def test_count_interior_points_translation_invariant():
    shape = [(0, 0), (4, 1), (2, 5), (-1, 3)]
    moved = [(x + 7, y + 9) for x, y in shape]
    assert count_interior_points(moved) == count_interior_points(shape)


def test_expected_inversions_single_range():
    assert expected_inversions([(1, 10)]) == 0.0


def test_expected_inversions_disjoint():
    assert expected_inversions([(1, 2), (5, 6)]) == pytest.approx(0.0)
    assert expected_inversions([(5, 6), (1, 2)]) == pytest.approx(1.0)


def test_expected_inversions_pair_bounds():
    a, b = (1, 4), (2, 6)
    forward = expected_inversions([a, b])
    backward = expected_inversions([b, a])
    assert 0.0 <= forward <= 1.0
    assert forward + backward <= 1.0 + 1e-12


def test_expected_inversions_identical_ranges_symmetric():
    r = (1, 3)
    assert expected_inversions([r, r]) == pytest.approx(expected_inversions([r, r][::-1]))
    assert expected_inversions([r, r]) < 0.5