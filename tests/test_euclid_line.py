import math

import pytest

from geomkit.euclid_line import (
    Line,
    direction,
    dist_to_line,
    intersect_lines,
    normal,
)
from geomkit.euclid_point import Point, cross, dot, length

LINE = Line(Point(1.0, 2.0), Point(4.0, 3.0))


class _Shift:
    def __init__(self, dx, dy):
        self.delta = Point(dx, dy)

    def transform(self, p):
        return p + self.delta


def _on(line, p):
    a, b, c = line.abc()
    return math.isclose(a * p.x + b * p.y + c, 0, abs_tol=1e-9)


def test_default_line_uses_origin():
    line = Line()
    assert line.p1 == Point() and line.p2 == Point(0, 0)


def test_abc_vertical_line():
    assert Line(Point(2, 0), Point(2, 5)).abc() == (1.0, 0.0, -2)


def test_abc_contains_defining_points():
    a, b, c = LINE.abc()
    assert (a, b, c) == (1.0, -3.0, 5.0)
    assert a * LINE.p1.x + b * LINE.p1.y + c == pytest.approx(0, abs=1e-12)
    assert a * LINE.p2.x + b * LINE.p2.y + c == pytest.approx(0, abs=1e-12)


def test_bounding_points_span_fixed_x_range():
    q1, q2 = LINE.bounding_points()
    assert (q1.x, q2.x) == (-10.0, 10.0)
    assert _on(LINE, q1) and _on(LINE, q2)


def test_bounding_points_vertical_line():
    q1, q2 = Line(Point(2, 0), Point(2, 5)).bounding_points()
    assert q1 == Point(2, -10) and q2 == Point(2, 10)


def test_direction_and_normal_are_orthonormal():
    d = direction(LINE)
    n = normal(LINE)
    assert math.isclose(length(d), 1.0)
    assert math.isclose(length(n), 1.0)
    assert math.isclose(dot(d, n), 0, abs_tol=1e-12)


def test_dist_to_line():
    assert dist_to_line(LINE, LINE.p1) == pytest.approx(0, abs=1e-12)
    p = LINE.p1 + normal(LINE) * 3
    assert dist_to_line(LINE, p) == pytest.approx(3)


def test_nearest_point_is_perpendicular_foot():
    p = Point(-2.0, 5.0)
    q = LINE.nearest_point(p)
    assert _on(LINE, q)
    assert math.isclose(cross(p - q, normal(LINE)), 0, abs_tol=1e-9)


def test_pos_value_at_defining_points():
    assert LINE.point_to_pos_value(LINE.p1) == pytest.approx(0)
    assert LINE.point_to_pos_value(LINE.p2) == pytest.approx(1)


@pytest.mark.parametrize("val", [-1.5, 0.3, 2.0])
def test_pos_value_round_trip(val):
    q = LINE.pos_value_to_point(val)
    assert _on(LINE, q)
    assert LINE.point_to_pos_value(q) == pytest.approx(val)


def test_intersect_parallel_lines_is_none():
    other = Line(LINE.p1 + Point(0, 1), LINE.p2 + Point(0, 1))
    assert intersect_lines(LINE, other) is None


def test_intersection_lies_on_both_lines():
    other = Line(Point(0, 5), Point(3, -1))
    p = intersect_lines(LINE, other)
    a1, b1, c1 = LINE.abc()
    a2, b2, c2 = other.abc()
    assert a1 * p.x + b1 * p.y + c1 == pytest.approx(0, abs=1e-9)
    assert a2 * p.x + b2 * p.y + c2 == pytest.approx(0, abs=1e-9)


def test_transformed_moves_both_points():
    moved = LINE.transformed(_Shift(1.0, -2.0))
    assert moved.p1 == LINE.p1 + Point(1.0, -2.0)
    assert moved.p2 == LINE.p2 + Point(1.0, -2.0)