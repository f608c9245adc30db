"""Infinite lines of the Euclidean plane."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Protocol

from geomkit.cramer import cramer_augmented
from geomkit.euclid_point import Point, dot, length
from geomkit.numeric import eq


class _PointTransform(Protocol):
    def transform(self, p: Point) -> Point: ...


@dataclass(frozen=True)
class Line:
    """A line through two points."""

    p1: Point = field(default_factory=Point)
    p2: Point = field(default_factory=Point)

    def abc(self) -> tuple[float, float, float]:
        """Coefficients ``(A, B, C)`` of ``Ax + By + C = 0``."""
        p1, p2 = self.p1, self.p2
        if eq(p1.x, p2.x):
            return (1.0, 0.0, -p1.x)
        a = p2.y - p1.y
        b = p1.x - p2.x
        c = -(a * p1.x + b * p1.y)
        return (a, b, c)

    def bounding_points(self) -> tuple[Point, Point]:
        """Two points on the line at x = -10 and x = 10 (y for vertical lines)."""
        a, b, c = self.abc()
        if eq(b, 0):
            x = -c / a
            return Point(x, -10.0), Point(x, 10.0)
        x1, x2 = -10.0, 10.0
        return (
            Point(x1, -(a * x1 + c) / b),
            Point(x2, -(a * x2 + c) / b),
        )

    def nearest_point(self, p: Point) -> Point:
        """Foot of the perpendicular from ``p`` to the line."""
        n = normal(self) * dist_to_line(self, p)
        ans = p + n
        if not eq(dist_to_line(self, ans), 0):
            ans = p - n
        return ans

    def point_to_pos_value(self, p: Point) -> float:
        """Position of ``p`` along the line: 0 at ``p1``, 1 at ``p2``."""
        return dot(p - self.p1, direction(self)) / length(self.p2 - self.p1)

    def pos_value_to_point(self, val: float) -> Point:
        """Point at position ``val`` along the line."""
        return self.p1 + val * length(self.p2 - self.p1) * direction(self)

    def transformed(self, t: _PointTransform) -> Line:
        """Line through the images of both defining points."""
        return Line(t.transform(self.p1), t.transform(self.p2))


def dist_to_line(line: Line, p: Point) -> float:
    """Distance from ``p`` to ``line``."""
    a, b, c = line.abc()
    return abs(a * p.x + b * p.y + c) / math.hypot(a, b)


def direction(line: Line) -> Point:
    """Unit vector from ``p1`` towards ``p2``."""
    v = line.p2 - line.p1
    return v / length(v)


def normal(line: Line) -> Point:
    """Unit normal of the line (direction turned clockwise)."""
    d = direction(line)
    return Point(d.y, -d.x)


def intersect_lines(l1: Line, l2: Line) -> Point | None:
    """Intersection point, or ``None`` for parallel lines."""
    a1, b1, c1 = l1.abc()
    a2, b2, c2 = l2.abc()
    ans = cramer_augmented([[a1, b1, -c1], [a2, b2, -c2]])
    if ans is None:
        return None
    return Point(ans[0], ans[1])