"""Points of the hyperbolic plane in Beltrami-Klein disk coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Iterator

from geomkit.euclid_point import Point as EPoint
from geomkit.jsonio import ParseError, get_or_throw
from geomkit.numeric import eq, sq


def _number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ParseError()
    return float(value)


@dataclass(frozen=True, eq=False)
class Point:
    """A point of the unit disk, in Beltrami-Klein coordinates."""

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

    def to_poincare(self) -> EPoint:
        """The same point in the Poincare disk model."""
        return EPoint(self.x, self.y) / (1 + math.sqrt(1 - sq(self.x) - sq(self.y)))

    @classmethod
    def from_poincare(cls, p: EPoint) -> Point:
        """Point given by its position on the Poincare disk."""
        t = 1 + sq(p.x) + sq(p.y)
        return cls(2 * p.x / t, 2 * p.y / t)


def midpoint(p1: Point, p2: Point) -> Point:
    """Hyperbolic midpoint of two points."""
    x1, y1 = p1
    x2, y2 = p2
    t1 = math.sqrt(1 - sq(x1) - sq(y1))
    t2 = math.sqrt(1 - sq(x2) - sq(y2))
    return Point(
        (x1 * t2 + x2 * t1) / (t1 + t2),
        (y1 * t2 + y2 * t1) / (t1 + t2),
    )