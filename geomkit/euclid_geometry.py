"""The Euclidean geometry: object kinds, point factory and view transformation."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from geomkit.euclid_point import Point
from geomkit.euclid_transform import Transformation


class ObjectKind(enum.IntFlag):
    """Bit flags identifying object kinds; arguments may accept several."""

    REAL = 1 << 0
    POINT = 1 << 1
    LINE = 1 << 2
    CIRCLE = 1 << 3
    SEGMENT = 1 << 4
    ARC = 1 << 5


_TYPE_NAMES = {
    ObjectKind.REAL: "Real",
    ObjectKind.POINT: "Point",
    ObjectKind.LINE: "Line",
    ObjectKind.CIRCLE: "Circle",
    ObjectKind.SEGMENT: "Segment",
}


@dataclass
class Geometry:
    """Euclidean plane with its own view transformation."""

    transformation: Transformation = field(default_factory=Transformation)

    @property
    def name(self) -> str:
        """Display name of the geometry."""
        return "Euclidian"

    def make_point(self, x: float = 0.0, y: float = 0.0) -> Point:
        """Create a point at the given coordinates."""
        return Point(x, y)

    def type_name(self, kind: int) -> str:
        """Display name of a single object kind."""
        try:
            return _TYPE_NAMES[ObjectKind(kind)]
        except (KeyError, ValueError):
            raise ValueError("Wrong or complex type") from None