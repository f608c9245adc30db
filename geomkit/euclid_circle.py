"""Circles of the Euclidean plane and their intersections."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Protocol

from geomkit.euclid_line import Line, direction, dist_to_line, normal
from geomkit.euclid_point import Point, dist, norm, rot
from geomkit.numeric import eq, gr, sq


class _PointTransform(Protocol):
    def transform(self, p: Point) -> Point: ...


@dataclass(frozen=True)
class Circle:
    """A circle given by its centre ``o`` and radius ``r``."""

    o: Point = field(default_factory=Point)
    r: float = 1.0

    def transformed(self, t: _PointTransform) -> Circle:
        """Image of the circle: centre and one rim point are mapped."""
        rim = self.o + Point(self.r, 0.0)
        o = t.transform(self.o)
        return Circle(o, dist(o, t.transform(rim)))

    def nearest_point(self, p: Point) -> Point:
        """Point of the circle closest to ``p``."""
        return self.o + norm(p - self.o) * self.r

    def point_to_pos_value(self, p: Point) -> float:
        """Polar angle of ``p`` around the centre."""
        v = p - self.o
        return math.atan2(v.y, v.x)

    def pos_value_to_point(self, val: float) -> Point:
        """Point of the circle at polar angle ``val``."""
        return self.o + self.r * Point(math.cos(val), math.sin(val))

    def three_points(self) -> tuple[Point, Point, Point]:
        """Three points of the circle spaced by 120 degrees, starting at angle 0."""
        a, b, c = (
            self.pos_value_to_point(2 * math.pi / 3 * i) for i in range(3)
        )
        return a, b, c


def intersect_circles(w1: Circle, w2: Circle) -> tuple[Point, ...]:
    """Intersection points of two circles: none, one (tangency) or two."""
    r1, r2 = w1.r, w2.r
    o1, o2 = w1.o, w2.o
    d = dist(o1, o2)

    if gr(abs(r1 - r2), d) or gr(d, r1 + r2):
        return ()

    if eq(abs(r1 - r2), d) or eq(d, r1 + r2):
        return (norm(o2 - o1) * r1 + o1,)

    cos_a = (sq(r1) + sq(d) - sq(r2)) / (2 * r1 * d)
    sin_a = math.sqrt(max(0.0, 1 - cos_a * cos_a))
    v = norm(o2 - o1) * r1
    return (rot(v, sin_a, cos_a) + o1, rot(v, -sin_a, cos_a) + o1)


def intersect_line_circle(line: Line, circle: Circle) -> tuple[Point, ...]:
    """Intersection points of a line and a circle: none, one or two."""
    o, r = circle.o, circle.r
    d = dist_to_line(line, o)
    if gr(d, r):
        return ()

    h = o + normal(line) * d
    if not eq(dist_to_line(line, h), 0):
        h = o - normal(line) * d
    if eq(d, r):
        return (h,)

    x = math.sqrt(sq(r) - sq(d)) * direction(line)
    return (h + x, h - x)