"""Ruler-and-compass constructions and measurements in the Euclidean plane."""

from __future__ import annotations

import math

from geomkit.cramer import cramer_augmented
from geomkit.euclid_circle import Circle, intersect_circles, intersect_line_circle
from geomkit.euclid_line import Line, direction, dist_to_line, intersect_lines, normal
from geomkit.euclid_point import Point, dist, length as vector_length, norm, perp, rot
from geomkit.euclid_segment import Segment, on_segment
from geomkit.numeric import eq, geq, gr, le, leq, sq

Linear = Line | Segment
Intersectable = Line | Segment | Circle


def _carrier(obj: Linear) -> Line:
    return obj.to_line() if isinstance(obj, Segment) else obj


def _segments_of(*objs: object) -> list[Segment]:
    return [o for o in objs if isinstance(o, Segment)]


def intersect(a: Intersectable, b: Intersectable) -> tuple[Point, ...]:
    """Common points of two lines, segments or circles."""
    for obj in (a, b):
        if not isinstance(obj, (Line, Segment, Circle)):
            raise TypeError(f"cannot intersect {type(obj).__name__}")

    if isinstance(a, Circle) and isinstance(b, Circle):
        return intersect_circles(a, b)

    if isinstance(a, Circle) or isinstance(b, Circle):
        circle, linear = (a, b) if isinstance(a, Circle) else (b, a)
        points = intersect_line_circle(_carrier(linear), circle)
        return tuple(
            p for p in points
            if not isinstance(linear, Segment) or on_segment(p, linear)
        )

    p = intersect_lines(_carrier(a), _carrier(b))
    if p is None:
        return ()
    if not all(on_segment(p, s) for s in _segments_of(a, b)):
        return ()
    return (p,)


def middle(p1: Point, p2: Point) -> Point:
    """Midpoint of two points."""
    return (p1 + p2) / 2


def line_by_two_points(p1: Point, p2: Point) -> Line | None:
    """Line through two points, or ``None`` when they coincide."""
    if p1 == p2:
        return None
    return Line(p1, p2)


def segment_by_two_points(p1: Point, p2: Point) -> Segment | None:
    """Segment between two points, or ``None`` when they coincide."""
    if p1 == p2:
        return None
    return Segment(p1, p2)


def perpendicular(p: Point, line: Linear) -> Line:
    """Line through ``p`` perpendicular to a line or segment."""
    return Line(p, p + normal(_carrier(line)))


def parallel(p: Point, line: Linear) -> Line:
    """Line through ``p`` parallel to a line or segment."""
    return Line(p, p + direction(_carrier(line)))


def bisector(a: Point, o: Point, b: Point) -> Line:
    """Bisector of the angle ``a o b`` with its vertex at ``o``."""
    oa = a - o
    ob = b - o
    l1 = vector_length(oa)
    l2 = vector_length(ob)
    oc = oa * l2 + ob * l1
    return Line(o, o + oc)


def tangents(p: Point, circle: Circle) -> tuple[Line, ...]:
    """Tangent lines from ``p`` to ``circle``: none, one or two."""
    o, r = circle.o, circle.r
    d = dist(p, o)

    if le(d, r):
        return ()
    if eq(d, r):
        return (Line(p, p + perp(o - p)),)

    x = math.sqrt(sq(d) - sq(r))
    sin_a = r / d
    cos_a = x / d
    v = norm(o - p) * x
    return (
        Line(p, p + rot(v, sin_a, cos_a)),
        Line(p, p + rot(v, -sin_a, cos_a)),
    )


def common_tangents(w1: Circle, w2: Circle) -> tuple[Line, ...]:
    """Outer common tangents of two circles."""
    if gr(w1.r, w2.r):
        w1, w2 = w2, w1

    o1, o2 = w1.o, w2.o
    r1, r2 = w1.r, w2.r
    d = dist(o1, o2)

    if gr(r2 - r1, d):
        return ()

    if eq(r2 - r1, d):
        v = norm(o1 - o2) * r2
        p = o2 + v
        return (Line(p, p + perp(v)),)

    if eq(r1, r2):
        offset = normal(Line(o1, o2)) * r1
        return (
            Line(o1 + offset, o2 + offset),
            Line(o1 - offset, o2 - offset),
        )

    result = []
    for tangent in tangents(o1, Circle(o2, r2 - r1)):
        offset = normal(tangent) * r1
        shifted = Line(tangent.p1 + offset, tangent.p2 + offset)
        if not eq(r2, dist_to_line(shifted, o2)):
            shifted = Line(tangent.p1 - offset, tangent.p2 - offset)
        result.append(shifted)
    return tuple(result)


def circle_by_center_and_point(o: Point, p: Point) -> Circle | None:
    """Circle centred at ``o`` through ``p``, or ``None`` when they coincide."""
    if o == p:
        return None
    return Circle(o, dist(o, p))


def circle_by_center_and_radius(o: Point, r: float) -> Circle | None:
    """Circle with centre ``o`` and radius ``r``; ``None`` unless ``r > 0``."""
    if leq(r, 0):
        return None
    return Circle(o, r)


def circle_by_three_points(p1: Point, p2: Point, p3: Point) -> Circle | None:
    """Circle through three points, or ``None`` when they are collinear."""
    # Unknowns: x0, y0 and M = r^2 - x0^2 - y0^2.
    ans = cramer_augmented([
        [2 * p.x, 2 * p.y, 1, sq(p.x) + sq(p.y)]
        for p in (p1, p2, p3)
    ])
    if ans is None:
        return None
    x0, y0, m = ans
    return Circle(Point(x0, y0), math.sqrt(m + sq(x0) + sq(y0)))


def incircle(a: Point, b: Point, c: Point) -> Circle:
    """Inscribed circle of the triangle with vertices ``a``, ``b``, ``c``."""
    side_a = dist(b, c)
    side_b = dist(a, c)
    side_c = dist(a, b)
    perimeter = side_a + side_b + side_c

    center = (side_a * a + side_b * b + side_c * c) / perimeter

    p = perimeter / 2
    area = math.sqrt(max(0.0, p * (p - side_a) * (p - side_b) * (p - side_c)))
    return Circle(center, area / p)


def distance(a: Point, b: Point) -> float:
    """Distance between two points."""
    return dist(a, b)


def length(obj: Segment | Circle) -> float:
    """Length of a segment or circumference of a circle."""
    if isinstance(obj, Segment):
        return dist(obj.p1, obj.p2)
    if isinstance(obj, Circle):
        return 2 * math.pi * obj.r
    raise TypeError(f"cannot measure length of {type(obj).__name__}")


def radius(circle: Circle) -> float:
    """Radius of a circle."""
    return circle.r


def angle(p1: Point, o: Point, p2: Point) -> float:
    """Angle ``p1 o p2`` in degrees, between 0 and 180."""
    a1 = math.atan2(p1.y - o.y, p1.x - o.x)
    a2 = math.atan2(p2.y - o.y, p2.x - o.x)
    a = a1 - a2
    while le(a, 0):
        a += 2 * math.pi
    while geq(a, 2 * math.pi):
        a -= 2 * math.pi
    if a > math.pi:
        a = 2 * math.pi - a
    return a * 180 / math.pi