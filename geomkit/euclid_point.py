"""Points and vector operations of the Euclidean plane."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Iterator

from geomkit.jsonio import ParseError, get_or_throw
from geomkit.numeric import eq


def _number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ParseError()
    return float(value)


@dataclass(frozen=True, eq=False)
class Point:
    """A point (or vector) of the Euclidean plane."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, k: object) -> Point:
        if isinstance(k, bool) or not isinstance(k, Real):
            return NotImplemented
        return Point(self.x * k, self.y * k)

    def __rmul__(self, k: object) -> Point:
        return self.__mul__(k)

    def __truediv__(self, k: object) -> Point:
        if isinstance(k, bool) or not isinstance(k, Real):
            return NotImplemented
        return Point(self.x / k, self.y / k)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return eq(self.x, other.x) and eq(self.y, other.y)

    def to_json(self) -> dict[str, float]:
        """Serialise as ``{"x": ..., "y": ...}``."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_json(cls, data: Any) -> Point:
        """Build a point from a document made by :meth:`to_json`."""
        return cls(
            _number(get_or_throw(data, "x")),
            _number(get_or_throw(data, "y")),
        )


def dot(a: Point, b: Point) -> float:
    """Dot product."""
    return a.x * b.x + a.y * b.y


def cross(a: Point, b: Point) -> float:
    """Z component of the cross product."""
    return a.x * b.y - b.x * a.y


def length(v: Point) -> float:
    """Euclidean length of a vector."""
    return math.hypot(v.x, v.y)


def dist(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return length(p1 - p2)


def rot(v: Point, sin_a: float, cos_a: float) -> Point:
    """Rotate ``v`` by the angle with the given sine and cosine."""
    return Point(v.x * cos_a - v.y * sin_a, v.y * cos_a + v.x * sin_a)


def rot_angle(v: Point, a: float) -> Point:
    """Rotate ``v`` counter-clockwise by ``a`` radians."""
    return rot(v, math.sin(a), math.cos(a))


def norm(v: Point) -> Point:
    """Unit vector in the direction of ``v``."""
    return v / length(v)


def perp(v: Point) -> Point:
    """``v`` turned by a right angle counter-clockwise."""
    return Point(-v.y, v.x)


def collinear(a: Point, b: Point, c: Point) -> bool:
    """True when the three points lie on one line."""
    return eq((b.y - a.y) * (c.x - b.x) - (c.y - b.y) * (b.x - a.x), 0)