"""Circles of the hyperbolic plane in the Beltrami-Klein model."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Protocol

from geomkit.cramer import cramer_augmented
from geomkit.euclid_circle import Circle as ECircle
from geomkit.euclid_point import Point as EPoint
from geomkit.euclid_point import dist as edist
from geomkit.euclid_point import length as elength
from geomkit.euclid_point import norm as enorm
from geomkit.hyper_line import Line, dist, two_points_on_line
from geomkit.hyper_point import Point, midpoint
from geomkit.numeric import eq, solve_quadratic, sq


class _PointTransform(Protocol):
    def transform(self, p: Point) -> Point: ...


def _lifted_row(p: Point) -> list[float]:
    return [p.x, p.y, 1.0, math.sqrt(1 - sq(p.x) - sq(p.y))]


def _plane_through(p1: Point, p2: Point, p3: Point) -> tuple[float, float, float]:
    ans = cramer_augmented([_lifted_row(p) for p in (p1, p2, p3)])
    if ans is None:
        raise ValueError("points do not determine a circle")
    return ans[0], ans[1], ans[2]


@dataclass(frozen=True)
class Circle:
    """A hyperbolic circle with centre ``o`` and hyperbolic radius ``r``."""

    o: Point = field(default_factory=Point)
    r: float = 1.0

    def to_poincare(self) -> ECircle:
        """The Euclidean circle that shows this circle on the Poincare disk."""
        center = EPoint(self.o.x, self.o.y)
        c = elength(center)
        way = EPoint(1.0, 0.0) if eq(c, 0) else enorm(center)

        m = ((1 + c) / (1 - c)) * math.exp(-2 * self.r)
        a = (m - 1) / (m + 1)
        near = way * a
        near_p = Point(near.x, near.y).to_poincare()

        n = ((1 + c) / (1 - c)) * math.exp(2 * self.r)
        b = (n - 1) / (n + 1)
        far = way * b
        far_p = Point(far.x, far.y).to_poincare()

        o = (near_p + far_p) / 2
        return ECircle(o, edist(o, near_p))

    def three_points(self) -> tuple[Point, Point, Point]:
        """Three points of the circle."""
        e1, e2, e3 = self.to_poincare().three_points()
        return Point.from_poincare(e1), Point.from_poincare(e2), Point.from_poincare(e3)

    @classmethod
    def from_three_points(cls, p1: Point, p2: Point, p3: Point) -> Circle:
        """Circle through three points; ValueError when they determine none."""
        return cls.from_abc(*_plane_through(p1, p2, p3))

    def abc(self) -> tuple[float, float, float]:
        """``(a, b, c)`` of the circle equation ``sqrt(1 - x^2 - y^2) = ax + by + c``."""
        return _plane_through(*self.three_points())

    @classmethod
    def from_abc(cls, a: float, b: float, c: float) -> Circle:
        """Circle given by the coefficients of :meth:`abc`."""
        h = math.hypot(a, b)
        v = Point(1.0, 0.0) if eq(h, 0) else Point(a, b) / h
        roots = solve_quadratic(sq(a) + sq(b) + 1, 2 * c * h, sq(c) - 1)
        if len(roots) != 2:
            raise ValueError("coefficients do not describe a circle")
        near = v * roots[0]
        far = v * roots[1]
        o = midpoint(near, far)
        return cls(o, dist(near, o))

    def nearest_point(self, p: Point) -> Point:
        """Point of the circle closest to ``p``."""
        hits = intersect_line_circle(Line(self.o, p), self)
        if len(hits) != 2:
            raise ValueError("line through the centre does not cross the circle twice")
        p1, p2 = hits
        return p1 if dist(p, p1) < dist(p, p2) else p2

    def point_to_pos_value(self, p: Point) -> float:
        """Polar angle of ``p`` around the circle's Poincare image."""
        return self.to_poincare().point_to_pos_value(p.to_poincare())

    def pos_value_to_point(self, val: float) -> Point:
        """Point of the circle at position ``val``."""
        return Point.from_poincare(self.to_poincare().pos_value_to_point(val))

    def transformed(self, t: _PointTransform) -> Circle:
        """Circle through the images of three of its points."""
        p1, p2, p3 = (t.transform(p) for p in self.three_points())
        return Circle.from_three_points(p1, p2, p3)


def intersect_line_circle(line: Line, circle: Circle) -> tuple[Point, ...]:
    """Intersection points of a line and a circle: none, one or two."""
    a, b, c = line.abc()
    d, e, f = circle.abc()

    if eq(b, 0):
        x = -c / a
        k = a * f - d * c
        roots = solve_quadratic(
            sq(a) * (sq(e) + 1),
            2 * a * e * k,
            sq(k) - sq(a) + sq(c),
        )
        return tuple(Point(x, y) for y in roots)

    u = b * d - a * e
    w = b * f - e * c
    roots = solve_quadratic(
        sq(u) + sq(a) + sq(b),
        2 * (a * c + u * w),
        sq(w) - sq(b) + sq(c),
    )
    return tuple(Point(x, -(a * x + c) / b) for x in roots)


def intersect_circles(w1: Circle, w2: Circle) -> tuple[Point, ...]:
    """Intersection points of two circles: none, one or two."""
    a, b, c = w1.abc()
    d, e, f = w2.abc()
    try:
        lp1, lp2 = two_points_on_line(d - a, e - b, f - c)
    except (ValueError, ZeroDivisionError):
        return ()
    return intersect_line_circle(Line(lp1, lp2), w1)