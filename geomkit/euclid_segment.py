"""Line segments of the Euclidean plane."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from geomkit.euclid_line import Line
from geomkit.euclid_point import Point, cross, dot, length
from geomkit.numeric import eq, le, leq


class _PointTransform(Protocol):
    def transform(self, p: Point) -> Point: ...


@dataclass(frozen=True)
class Segment:
    """The segment between ``p1`` and ``p2``."""

    p1: Point = field(default_factory=Point)
    p2: Point = field(default_factory=Point)

    def abc(self) -> tuple[float, float, float]:
        """Coefficients of the supporting line ``Ax + By + C = 0``."""
        return self.to_line().abc()

    def to_line(self) -> Line:
        """The line that carries the segment."""
        return Line(self.p1, self.p2)

    def nearest_point(self, p: Point) -> Point:
        """Point of the segment closest to ``p``."""
        if le(dot(p - self.p1, self.p2 - self.p1), 0):
            return self.p1
        if le(dot(p - self.p2, self.p1 - self.p2), 0):
            return self.p2
        return self.to_line().nearest_point(p)

    def point_to_pos_value(self, p: Point) -> float:
        """Position of ``p`` along the segment: 0 at ``p1``, 1 at ``p2``."""
        return self.to_line().point_to_pos_value(p)

    def pos_value_to_point(self, val: float) -> Point:
        """Point at position ``val`` along the segment's line."""
        return self.to_line().pos_value_to_point(val)

    def transformed(self, t: _PointTransform) -> Segment:
        """Segment between the images of both end points."""
        return Segment(t.transform(self.p1), t.transform(self.p2))


def segment_direction(s: Segment) -> Point:
    """Unit vector from ``p1`` towards ``p2``."""
    v = s.p2 - s.p1
    return v / length(v)


def segment_normal(s: Segment) -> Point:
    """Unit normal of the segment (direction turned clockwise)."""
    d = segment_direction(s)
    return Point(d.y, -d.x)


def on_segment(p: Point, s: Segment) -> bool:
    """True when ``p`` lies on the segment, end points included."""
    p1, p2 = s.p1, s.p2
    return eq(cross(p2 - p1, p - p1), 0) and leq(dot(p1 - p, p2 - p), 0)