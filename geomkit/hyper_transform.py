"""View transformation of the hyperbolic plane as a Mobius map of the Poincare disk."""

from __future__ import annotations

import cmath
from dataclasses import dataclass
from numbers import Real
from typing import Any, ClassVar

from geomkit.cramer import cramer_augmented
from geomkit.euclid_point import Point as EPoint
from geomkit.hyper_point import Point
from geomkit.jsonio import ParseError, get_or_throw


def _number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ParseError()
    return float(value)


def _complex(p: EPoint) -> complex:
    return complex(p.x, p.y)


def _from_complex(z: complex) -> Point:
    return Point.from_poincare(EPoint(z.real, z.imag))


@dataclass
class Transformation:
    """Maps ``z`` on the Poincare disk to ``exp(i*phi) * (z - z0) / (1 - conj(z0) * z)``."""

    z0: complex = 0j
    phi: float = 0.0

    SCROLL_SPEED: ClassVar[float] = 5e-3
    ROTATION_SPEED: ClassVar[float] = 3e-3

    def scroll(self, dx: float, dy: float) -> None:
        """Shift the view by a scroll delta."""
        self.z0 += complex(dx, dy) * self.SCROLL_SPEED

    def move(self, source: Point, target: Point) -> None:
        """Change the view so that ``source`` lands where ``target`` was shown."""
        z = _complex(source.to_poincare())
        q = _complex(self.transform(target).to_poincare())
        turn = cmath.exp(-1j * self.phi)

        # z0 - n * conj(z0) = m, split into real and imaginary parts.
        m = z - q * turn
        n = q * turn * z
        ans = cramer_augmented([
            [1 - n.real, -n.imag, m.real],
            [-n.imag, 1 + n.real, m.imag],
        ])
        if ans is None:
            raise ValueError("cannot move the view between these points")
        self.z0 = complex(ans[0], ans[1])

    def zoom(self, amount: float, cx: float, cy: float) -> None:
        """Rotate the view; the centre is ignored."""
        self.phi += amount * self.ROTATION_SPEED

    def clear(self) -> None:
        """Reset to the identity transformation."""
        self.phi = 0.0
        self.z0 = 0j

    def to_json(self) -> dict[str, float]:
        """Serialise the Mobius parameters."""
        return {"Re_z0": self.z0.real, "Im_z0": self.z0.imag, "phi": self.phi}

    def from_json(self, data: Any) -> None:
        """Load state from a document made by :meth:`to_json`."""
        re = _number(get_or_throw(data, "Re_z0"))
        im = _number(get_or_throw(data, "Im_z0"))
        phi = _number(get_or_throw(data, "phi"))
        self.z0 = complex(re, im)
        self.phi = phi

    def transform(self, p: Point) -> Point:
        """Plane point to view point."""
        z = _complex(p.to_poincare())
        z = cmath.exp(1j * self.phi) * (z - self.z0) / (1 - self.z0.conjugate() * z)
        return _from_complex(z)

    def untransform(self, p: Point) -> Point:
        """View point to plane point."""
        z = _complex(p.to_poincare())
        e = cmath.exp(-1j * self.phi)
        z = (z * e + self.z0) / (z * self.z0.conjugate() * e + 1)
        return _from_complex(z)