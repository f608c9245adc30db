"""View transformation of the Euclidean plane: panning and zooming."""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Real
from typing import Any, ClassVar

from geomkit.euclid_point import Point
from geomkit.jsonio import ParseError, get_or_throw


def _number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ParseError()
    return float(value)


@dataclass
class Transformation:
    """Maps plane coordinates to view coordinates as ``(p + center) * scale``."""

    center: Point = field(default_factory=Point)
    scale: float = 1.0

    SCROLL_SPEED: ClassVar[float] = 0.01
    ZOOM_SPEED: ClassVar[float] = 0.01

    def scroll(self, dx: float, dy: float) -> None:
        """Pan the view by a scroll delta."""
        self.center = self.center + Point(dx, dy) * self.SCROLL_SPEED / self.scale

    def move(self, source: Point, target: Point) -> None:
        """Drag the view so that ``source`` lands where ``target`` was shown."""
        self.center = self.center - (source - target)

    def zoom(self, amount: float, cx: float, cy: float) -> None:
        """Zoom around the view point ``(cx, cy)``."""
        s1 = self.scale
        s2 = s1 * 2.0 ** (amount * self.ZOOM_SPEED)
        self.center = self.center + Point(cx, cy) * (1 / s2 - 1 / s1)
        self.scale = s2

    def clear(self) -> None:
        """Reset to the identity transformation."""
        self.scale = 1.0
        self.center = Point(0.0, 0.0)

    def to_json(self) -> dict[str, Any]:
        """Serialise the centre and scale."""
        return {"center": self.center.to_json(), "scale": self.scale}

    def from_json(self, data: Any) -> None:
        """Load state from a document made by :meth:`to_json`."""
        center = Point.from_json(get_or_throw(data, "center"))
        scale = _number(get_or_throw(data, "scale"))
        self.center = center
        self.scale = scale

    def transform(self, p: Point) -> Point:
        """Plane point to view point."""
        return (p + self.center) * self.scale

    def untransform(self, p: Point) -> Point:
        """View point to plane point."""
        return p / self.scale - self.center