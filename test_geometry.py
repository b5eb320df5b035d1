import pytest
import numpy as np

from geometry import Point, PointSet, convex_hull_andrew, cross, extends_chain, is_right_turn, orientation


def test_point_equality_ignores_id():
    a = Point(1.0, 2.0, 0)
    b = Point(1.0, 2.0, 7)
    assert a == b
    assert hash(a) == hash(b)
    assert a != Point(1.0, 3.0, 0)


@pytest.mark.parametrize("a, b", [
    (Point(0, 5), Point(1, 0)),
    (Point(1, 0), Point(1, 2)),
    (Point(-3, 10), Point(-3, 11)),
])
def test_point_lexicographic_order(a, b):
    assert a < b
    assert not b < a


def test_equal_points_are_not_less():
    a, b = Point(2, 2, 0), Point(2, 2, 1)
    assert not a < b and not b < a


def test_point_str():
    assert str(Point(1, 2, 3)) == "(1, 2)"


def test_add_new_point_assigns_increasing_ids():
    ps = PointSet()
    ids = [ps.add_new_point(x, 0).id for x in range(5)]
    assert ids == [0, 1, 2, 3, 4]
    assert ps.next_id == 5
    assert ps.size() == len(ps) == 5


def test_add_point_keeps_id_and_counter():
    ps = PointSet()
    ps.add_new_point(0, 0)
    ps.add_point(Point(3, 3, 42))
    assert ps[1].id == 42
    assert ps.next_id == 1


def test_sort_is_stable_for_duplicates():
    ps = PointSet.from_coords([3, 1, 3, 1, 0], [0, 5, 0, 2, 9])
    ps.sort()
    assert [(p.x, p.y) for p in ps] == [(0, 9), (1, 2), (1, 5), (3, 0), (3, 0)]
    # duplicates stay adjacent and keep insertion order
    assert [p.id for p in ps][-2:] == [0, 2]


def test_reverse_keeps_membership():
    ps = PointSet.from_coords([0, 1, 2], [0, 1, 2])
    ps.reverse()
    assert [p.id for p in ps] == [2, 1, 0]


def test_reset():
    ps = PointSet.from_coords([0, 1], [0, 1])
    ps.reset()
    assert ps.size() == 0
    assert ps.add_new_point(5, 5).id == 0


def test_coords_projections():
    ps = PointSet.from_coords([1, 2, 3], [4, 5, 6])
    assert isinstance(ps.x_coords(), np.ndarray)
    assert np.array_equal(ps.x_coords(), [1.0, 2.0, 3.0])
    assert np.array_equal(ps.y_coords(), [4.0, 5.0, 6.0])


def test_point_set_str():
    ps = PointSet.from_coords([1, 2], [3, 4])
    assert str(ps) == "[(1.0, 3.0), (2.0, 4.0)]"


def test_cross():
    assert cross(Point(0, 0), Point(4, 0), Point(0, 4)) == 16
    assert cross(Point(0, 0), Point(0, 4), Point(4, 0)) == -16


@pytest.mark.parametrize("a, b, c, expected", [
    # screen coordinates: going right along the top and then down is clockwise
    (Point(0, 0), Point(4, 0), Point(4, 4), 1),
    (Point(0, 0), Point(4, 0), Point(4, -4), -1),
    (Point(0, 0), Point(2, 0), Point(4, 0), 0),
    # vertical segments
    (Point(0, 0), Point(0, 4), Point(-1, 5), 1),
    (Point(0, 4), Point(0, 0), Point(-1, -1), -1),
    (Point(0, 0), Point(3, 3), Point(3, 6), 1),
])
def test_orientation(a, b, c, expected):
    assert orientation(a, b, c) == expected


def test_is_right_turn_collinear_policy():
    a, b, c = Point(0, 0), Point(1, 1), Point(2, 2)
    assert is_right_turn(a, b, c)
    assert not is_right_turn(a, b, c, strict=True)
    assert is_right_turn(Point(0, 0), Point(4, 0), Point(4, 4), strict=True)
    assert not is_right_turn(Point(0, 0), Point(4, 0), Point(4, -4))


def test_convex_hull_andrew_square():
    points = sorted([Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4), Point(2, 2), Point(2, 0)])
    hull = convex_hull_andrew(points)
    assert [(p.x, p.y) for p in hull] == [(0, 0), (4, 0), (4, 4), (0, 4)]

    hull = convex_hull_andrew(points, keep_collinear=True)
    assert [(p.x, p.y) for p in hull] == [(0, 0), (2, 0), (4, 0), (4, 4), (0, 4)]


@pytest.mark.parametrize("c, strict_expected, collinear_expected", [
    (Point(4, 4), True, True),
    (Point(4, -4), False, False),
    # further along the segment
    (Point(6, 0), False, True),
    # coincides with b
    (Point(4, 0), False, False),
    # back along the segment
    (Point(2, 0), False, False),
    (Point(-1, 0), False, False),
])
def test_extends_chain(c, strict_expected, collinear_expected):
    a, b = Point(0, 0), Point(4, 0)
    assert extends_chain(a, b, c) == strict_expected
    assert extends_chain(a, b, c, keep_collinear=True) == collinear_expected


def test_extends_chain_rejects_zero_length_segment():
    a, b = Point(1, 1, 0), Point(1, 1, 1)
    assert not extends_chain(a, b, Point(5, 5), keep_collinear=True)


@pytest.mark.parametrize("keep_collinear", [False, True])
def test_convex_hull_andrew_skips_duplicates(keep_collinear):
    ps = PointSet.from_coords([0, 4, 2, 2, 4, 0], [0, 0, 1, 1, 4, 4])
    hull = convex_hull_andrew(sorted(ps.points), keep_collinear=keep_collinear)
    assert [p.id for p in hull] == [0, 1, 4, 5]
