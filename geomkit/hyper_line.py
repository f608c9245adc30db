"""Lines of the hyperbolic plane in the Beltrami-Klein model."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Protocol

from geomkit.cramer import cramer_augmented
from geomkit.euclid_arc import Arc
from geomkit.euclid_point import Point as EPoint
from geomkit.euclid_point import collinear, dot
from geomkit.euclid_point import dist as edist
from geomkit.euclid_point import norm as enorm
from geomkit.hyper_point import Point
from geomkit.numeric import eq, geq, sgn, solve_quadratic, sq


class _PointTransform(Protocol):
    def transform(self, p: Point) -> Point: ...


def _e(p: Point) -> EPoint:
    return EPoint(p.x, p.y)


@dataclass(frozen=True)
class Line:
    """A hyperbolic line through two points of the disk."""

    p1: Point = field(default_factory=Point)
    p2: Point = field(default_factory=Point)

    def abc(self) -> tuple[float, float, float]:
        """Coefficients ``(A, B, C)`` of ``Ax + By + C = 0``, scaled by ``1/(A^2 + B^2)``."""
        p1, p2 = self.p1, self.p2
        if eq(p1.x, p2.x):
            a, b, c = 1.0, 0.0, -p1.x
        else:
            a = p2.y - p1.y
            b = p1.x - p2.x
            c = -(a * p1.x + b * p1.y)
        t = sq(a) + sq(b)
        return (a / t, b / t, c / t)

    def nearest_point(self, p: Point) -> Point:
        """Foot of the hyperbolic perpendicular from ``p`` to the line."""
        ans = intersect_lines(self, perp(self, p))
        if ans is None:
            raise ValueError("perpendicular does not meet the line")
        return ans

    def point_to_pos_value(self, p: Point) -> float:
        """Signed hyperbolic distance from ``p1`` in units of ``dist(p1, p2)``."""
        ep1, ep2, ep = _e(self.p1), _e(self.p2), _e(p)
        return sgn(dot(ep2 - ep1, ep - ep1)) * dist(self.p1, p) / dist(self.p1, self.p2)

    def pos_value_to_point(self, val: float) -> Point:
        """Point at position ``val`` along the line."""
        ep1, ep2 = _e(self.p1), _e(self.p2)
        h1, h2 = intersections_with_absolute(self)
        a = edist(_e(h1), ep1)
        b = edist(_e(h2), ep1)
        r = val * dist(self.p1, self.p2)
        m = math.exp(2 * r)
        x = (m - 1) * a * b / (m * a + b)
        ans = ep1 + enorm(ep2 - ep1) * x
        return Point(ans.x, ans.y)

    def to_poincare(self) -> Arc:
        """Arc representing the line on the Poincare disk."""
        h1, h2 = intersections_with_absolute(self)
        ep1 = self.p1.to_poincare()
        ep2 = self.p2.to_poincare()
        if collinear(ep1, ep2, EPoint(0.0, 0.0)):
            o = EPoint(math.inf, math.inf)
        else:
            p = complex(ep1.x, ep1.y)
            q = complex(ep2.x, ep2.y)
            z = (p * (q * q.conjugate() + 1) - q * (p * p.conjugate() + 1)) / (
                p * q.conjugate() - q * p.conjugate()
            )
            o = EPoint(z.real, z.imag)
        return Arc(o, _e(h1), _e(h2))

    def transformed(self, t: _PointTransform) -> Line:
        """Line through the images of both defining points."""
        return Line(t.transform(self.p1), t.transform(self.p2))


def _absolute_hits(a: float, b: float, c: float) -> tuple[Point, Point]:
    if eq(b, 0):
        x = -c / a
        y = math.sqrt(1 - sq(x))
        return Point(x, y), Point(x, -y)
    roots = solve_quadratic(sq(a) + sq(b), 2 * a * c, sq(c) - sq(b))
    if len(roots) != 2:
        raise ValueError("line does not cross the absolute")
    x1, x2 = roots
    return Point(x1, -(a * x1 + c) / b), Point(x2, -(a * x2 + c) / b)


def intersections_with_absolute(line: Line) -> tuple[Point, Point]:
    """Ends of the line on the unit circle, the one on ``p1``'s side first."""
    h1, h2 = _absolute_hits(*line.abc())
    if edist(_e(h1), _e(line.p1)) > edist(_e(h1), _e(line.p2)):
        h1, h2 = h2, h1
    return h1, h2


def two_points_on_line(a: float, b: float, c: float) -> tuple[Point, Point]:
    """Two points inside the disk on the line ``ax + by + c = 0``."""
    m = Point(a, b) * (-c / (sq(a) + sq(b)))
    h1, h2 = _absolute_hits(a, b, c)
    return (h1 + m) / 2, (h2 + m) / 2


def dist(p1: Point, p2: Point) -> float:
    """Hyperbolic distance between two points."""
    a1, a2 = intersections_with_absolute(Line(p1, p2))
    ep1, ep2, ea1, ea2 = _e(p1), _e(p2), _e(a1), _e(a2)
    return 0.5 * math.log(
        (edist(ea1, ep2) * edist(ep1, ea2)) / (edist(ea1, ep1) * edist(ep2, ea2))
    )


def perp(line: Line, p: Point) -> Line:
    """Line through ``p`` perpendicular to ``line``."""
    # Lines Ax + By + C = 0 and Dx + Ey + F = 0 are perpendicular when AD + BE = CF.
    x, y = p
    a, b, c = line.abc()
    d = c * y + b
    e = -(c * x + a)
    f = -(d * x + e * y)
    return Line(*two_points_on_line(d, e, f))


def intersect_lines(l1: Line, l2: Line) -> Point | None:
    """Common point of two lines inside the disk, or ``None``."""
    a1, b1, c1 = l1.abc()
    a2, b2, c2 = l2.abc()
    ans = cramer_augmented([[a1, b1, -c1], [a2, b2, -c2]])
    if ans is None:
        return None
    pt = Point(ans[0], ans[1])
    if geq(sq(pt.x) + sq(pt.y), 1):
        return None
    return pt