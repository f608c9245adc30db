"""Constructions and measurements in the hyperbolic plane (Beltrami-Klein model)."""

from __future__ import annotations

from geomkit.hyper_circle import Circle, intersect_circles, intersect_line_circle
from geomkit.hyper_line import (
    Line,
    dist,
    intersect_lines,
    intersections_with_absolute,
    perp,
    two_points_on_line,
)
from geomkit.hyper_point import Point, midpoint
from geomkit.numeric import leq

Intersectable = Line | Circle


def intersect(a: Intersectable, b: Intersectable) -> tuple[Point, ...]:
    """Common points of two lines or circles inside the disk."""
    for obj in (a, b):
        if not isinstance(obj, (Line, Circle)):
            raise TypeError(f"cannot intersect {type(obj).__name__}")

    if isinstance(a, Line) and isinstance(b, Line):
        p = intersect_lines(a, b)
        return () if p is None else (p,)

    if isinstance(a, Circle) and isinstance(b, Circle):
        return intersect_circles(a, b)

    line, circle = (a, b) if isinstance(a, Line) else (b, a)
    return intersect_line_circle(line, circle)


def middle(p1: Point, p2: Point) -> Point:
    """Hyperbolic midpoint of two points."""
    return midpoint(p1, p2)


def line_by_two_points(p1: Point, p2: Point) -> Line | None:
    """Line through two points, or ``None`` when they coincide."""
    if p1 == p2:
        return None
    return Line(p1, p2)


def perpendicular(p: Point, line: Line) -> Line:
    """Line through ``p`` perpendicular to ``line``."""
    return perp(line, p)


def horoparallel(p: Point, line: Line) -> tuple[Line, Line]:
    """The two lines through ``p`` that meet ``line`` on the absolute."""
    h1, h2 = intersections_with_absolute(line)
    return (Line(p, (h1 + p) / 2), Line(p, (h2 + p) / 2))


def hyperparallel(p: Point, line: Line) -> Line:
    """A line through ``p`` that shares no point with ``line``, even at infinity."""
    # Lines Ax + By + C = 0 and Dx + Ey + F = 0 are hyperparallel when A * E = D * B.
    x, y = p
    a, b, _ = line.abc()
    d = -a
    e = -b
    f = a * x + b * y
    return Line(*two_points_on_line(d, e, f))


def circle_by_center_and_point(o: Point, p: Point) -> Circle | None:
    """Circle centred at ``o`` through ``p``, or ``None`` when they coincide."""
    if o == p:
        return None
    return Circle(o, dist(o, p))


def circle_by_center_and_radius(o: Point, r: float) -> Circle | None:
    """Circle with centre ``o`` and hyperbolic radius ``r``; ``None`` unless ``r > 0``."""
    if leq(r, 0):
        return None
    return Circle(o, r)


def distance(a: Point, b: Point) -> float:
    """Hyperbolic distance between two points."""
    return dist(a, b)


def radius(circle: Circle) -> float:
    """Hyperbolic radius of a circle."""
    return circle.r