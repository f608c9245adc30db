"""The hyperbolic geometry: object kinds, point factory and view transformation."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

from geomkit.euclid_point import Point as EPoint
from geomkit.hyper_point import Point
from geomkit.hyper_transform import Transformation
from geomkit.numeric import geq

_DISK_LIMIT = 0.99


class ObjectKind(enum.IntFlag):
    """Bit flags identifying object kinds; arguments may accept several."""

    REAL = 1 << 0
    POINT = 1 << 1
    LINE = 1 << 2
    CIRCLE = 1 << 3


_TYPE_NAMES = {
    ObjectKind.REAL: "Real",
    ObjectKind.POINT: "Point",
    ObjectKind.LINE: "Line",
    ObjectKind.CIRCLE: "Circle",
}


@dataclass
class Geometry:
    """Hyperbolic plane shown on the Poincare disk, with its view transformation."""

    transformation: Transformation = field(default_factory=Transformation)

    @property
    def name(self) -> str:
        """Display name of the geometry."""
        return "Hyperbolic"

    def make_point(self, x: float = 0.0, y: float = 0.0) -> Point:
        """Point shown at ``(x, y)`` on the Poincare disk, kept inside the disk."""
        pt = EPoint(x, y)
        r = math.hypot(x, y)
        if geq(r, _DISK_LIMIT):
            pt = pt * (_DISK_LIMIT / r)
        return Point.from_poincare(pt)

    def type_name(self, kind: int) -> str:
        """Display name of a single object kind."""
        try:
            return _TYPE_NAMES[ObjectKind(kind)]
        except (KeyError, ValueError):
            raise ValueError("Wrong or complex type") from None