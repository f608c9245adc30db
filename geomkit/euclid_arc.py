"""Circular arcs of the Euclidean plane, drawn as cubic Bezier curves."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Protocol

from geomkit.euclid_point import Point, cross, dist, dot, norm, perp


class _PointTransform(Protocol):
    def transform(self, p: Point) -> Point: ...


@dataclass(frozen=True)
class Arc:
    """Arc of the circle centred at ``o`` from ``p1`` to ``p2``.

    A centre with an infinite coordinate turns the arc into the straight
    segment between its end points.
    """

    o: Point = field(default_factory=Point)
    p1: Point = field(default_factory=Point)
    p2: Point = field(default_factory=Point)

    def transformed(self, t: _PointTransform) -> Arc:
        """Arc with mapped end points; the centre is kept as it is."""
        return Arc(self.o, t.transform(self.p1), t.transform(self.p2))

    def path(self) -> tuple[Point, ...]:
        """Drawing path of the arc.

        Two points mean a straight line; four points are the control
        points of a cubic Bezier curve approximating the arc.
        """
        o, p1, p2 = self.o, self.p1, self.p2
        if math.isinf(o.x) or math.isinf(o.y):
            return (p1, p2)

        op1 = p1 - o
        op2 = p2 - o
        t1 = perp(norm(op1))
        t2 = perp(norm(op2))

        r = dist(o, p1)
        a = math.atan2(cross(op1, op2), dot(op1, op2))
        handle = 4.0 / 3 * r * math.tan(a / 4)

        return (p1, p1 + handle * t1, p2 - handle * t2, p2)