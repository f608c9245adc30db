import math

import pytest

from geomkit.euclid_point import Point as EPoint
from geomkit.euclid_point import collinear
from geomkit.euclid_point import dist as edist
from geomkit.hyper_circle import Circle
from geomkit.hyper_constructions import (
    circle_by_center_and_point,
    circle_by_center_and_radius,
    distance,
    horoparallel,
    hyperparallel,
    intersect,
    line_by_two_points,
    middle,
    perpendicular,
    radius,
)
from geomkit.hyper_line import Line
from geomkit.hyper_point import Point

X_AXIS = Line(Point(-0.5, 0.0), Point(0.5, 0.0))
Y_AXIS = Line(Point(0.0, -0.5), Point(0.0, 0.5))


def _e(p):
    return EPoint(p.x, p.y)


def test_intersect_crossing_lines():
    result = intersect(X_AXIS, Y_AXIS)
    assert len(result) == 1
    assert result[0] == Point(0.0, 0.0)


def test_intersect_parallel_lines_is_empty():
    l1 = Line(Point(-0.5, 0.1), Point(0.5, 0.1))
    l2 = Line(Point(-0.5, 0.2), Point(0.5, 0.2))
    assert intersect(l1, l2) == ()


def test_intersect_line_and_circle_points_lie_on_circle():
    circle = Circle(Point(0.0, 0.0), 0.5)
    result = intersect(X_AXIS, circle)
    assert len(result) == 2
    for p in result:
        assert p.y == pytest.approx(0.0, abs=1e-7)
        assert distance(circle.o, p) == pytest.approx(0.5, abs=1e-6)
    assert result[0].x == pytest.approx(-result[1].x, abs=1e-7)


def test_intersect_is_order_independent_for_line_and_circle():
    circle = Circle(Point(0.0, 0.0), 0.5)
    first = sorted((p.x, p.y) for p in intersect(X_AXIS, circle))
    second = sorted((p.x, p.y) for p in intersect(circle, X_AXIS))
    assert first == pytest.approx(second)


def test_intersect_two_circles():
    w1 = Circle(Point(-0.3, 0.0), 0.5)
    w2 = Circle(Point(0.3, 0.0), 0.5)
    result = intersect(w1, w2)
    assert len(result) == 2
    for p in result:
        assert distance(w1.o, p) == pytest.approx(0.5, abs=1e-6)
        assert distance(w2.o, p) == pytest.approx(0.5, abs=1e-6)


def test_intersect_far_apart_circles_is_empty():
    w1 = Circle(Point(-0.5, 0.0), 0.1)
    w2 = Circle(Point(0.5, 0.0), 0.1)
    assert intersect(w1, w2) == ()


def test_intersect_rejects_points():
    with pytest.raises(TypeError):
        intersect(Point(0.1, 0.1), X_AXIS)


def test_middle_is_equidistant():
    a = Point(0.6, 0.1)
    b = Point(-0.2, 0.4)
    m = middle(a, b)
    assert distance(a, m) == pytest.approx(distance(m, b), abs=1e-9)
    assert distance(a, m) == pytest.approx(distance(a, b) / 2, abs=1e-9)


def test_middle_of_symmetric_points_is_origin():
    assert middle(Point(0.5, 0.0), Point(-0.5, 0.0)) == Point(0.0, 0.0)


def test_line_by_two_points():
    a, b = Point(0.1, 0.2), Point(-0.3, 0.4)
    line = line_by_two_points(a, b)
    assert line == Line(a, b)
    assert line_by_two_points(a, Point(0.1, 0.2)) is None


def test_perpendicular_to_x_axis_is_vertical():
    line = perpendicular(Point(0.0, 0.5), X_AXIS)
    assert line.p1.x == pytest.approx(0.0, abs=1e-12)
    assert line.p2.x == pytest.approx(0.0, abs=1e-12)
    assert intersect(line, X_AXIS)[0] == Point(0.0, 0.0)


def test_perpendicular_passes_through_point():
    p = Point(0.2, 0.3)
    line = Line(Point(-0.4, -0.1), Point(0.5, 0.05))
    result = perpendicular(p, line)
    assert collinear(_e(result.p1), _e(result.p2), _e(p))
    assert len(intersect(result, line)) == 1


def test_horoparallel_lines_meet_line_at_ideal_points():
    p = Point(0.0, 0.5)
    lines = horoparallel(p, X_AXIS)
    assert len(lines) == 2
    ends = (EPoint(-1.0, 0.0), EPoint(1.0, 0.0))
    for result, end in zip(lines, ends):
        assert result.p1 == p
        assert collinear(_e(result.p1), _e(result.p2), end)
        assert intersect(result, X_AXIS) == ()


def test_hyperparallel_passes_through_point_and_misses_line():
    p = Point(0.0, 0.5)
    result = hyperparallel(p, X_AXIS)
    assert result.p1.y == pytest.approx(0.5, abs=1e-12)
    assert result.p2.y == pytest.approx(0.5, abs=1e-12)
    assert intersect(result, X_AXIS) == ()


def test_hyperparallel_general_line():
    p = Point(0.1, -0.4)
    line = Line(Point(-0.3, 0.2), Point(0.4, 0.35))
    result = hyperparallel(p, line)
    assert collinear(_e(result.p1), _e(result.p2), _e(p))
    assert intersect(result, line) == ()


def test_circle_by_center_and_point():
    o = Point(0.0, 0.0)
    p = Point(0.5, 0.0)
    circle = circle_by_center_and_point(o, p)
    assert circle.o == o
    assert radius(circle) == pytest.approx(distance(o, p))
    image = circle.to_poincare()
    assert edist(image.o, p.to_poincare()) == pytest.approx(image.r, abs=1e-9)


def test_circle_by_center_and_point_rejects_same_point():
    assert circle_by_center_and_point(Point(0.2, 0.1), Point(0.2, 0.1)) is None


@pytest.mark.parametrize("r", [0.0, -1.0, 1e-12])
def test_circle_by_center_and_radius_rejects_non_positive(r):
    assert circle_by_center_and_radius(Point(0.1, 0.1), r) is None


def test_circle_by_center_and_radius():
    circle = circle_by_center_and_radius(Point(0.1, 0.1), 0.5)
    assert circle == Circle(Point(0.1, 0.1), 0.5)
    assert radius(circle) == 0.5


def test_distance_from_origin():
    assert distance(Point(0.0, 0.0), Point(0.5, 0.0)) == pytest.approx(math.atanh(0.5))


def test_distance_is_symmetric_and_additive():
    a, o, b = Point(-0.5, 0.0), Point(0.0, 0.0), Point(0.5, 0.0)
    assert distance(a, b) == pytest.approx(distance(b, a))
    assert distance(a, b) == pytest.approx(distance(a, o) + distance(o, b))