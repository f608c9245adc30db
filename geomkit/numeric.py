"""Tolerant floating-point comparisons and small numeric helpers."""

from __future__ import annotations

import math

EPS = 1e-9


def eq(a: float, b: float) -> bool:
    """True when ``a`` and ``b`` differ by less than ``EPS``."""
    return abs(a - b) < EPS


def le(a: float, b: float) -> bool:
    """Strictly less than, beyond the tolerance."""
    return a < b - EPS


def gr(a: float, b: float) -> bool:
    """Strictly greater than, beyond the tolerance."""
    return a > b + EPS


def leq(a: float, b: float) -> bool:
    """Less than or equal within the tolerance."""
    return a < b + EPS


def geq(a: float, b: float) -> bool:
    """Greater than or equal within the tolerance."""
    return a > b - EPS


def sq(x: float) -> float:
    """Square of ``x``."""
    return x * x


def circle_rect(cx: float, cy: float, radius: float) -> tuple[float, float, float, float]:
    """Return ``(left, top, width, height)`` of the square enclosing a circle."""
    return (cx - radius, cy - radius, radius * 2, radius * 2)


def solve_quadratic(a: float, b: float, c: float) -> tuple[float, ...]:
    """Real roots of ``a*x^2 + b*x + c = 0``.

    Returns an empty tuple, a single (double) root, or two roots with the
    root using ``-sqrt(D)`` first.
    """
    d = b * b - 4 * a * c
    if d < -sq(EPS):
        return ()
    if abs(d) < sq(EPS):
        return (-b / (2 * a),)
    sq_d = math.sqrt(d)
    return ((-b - sq_d) / (2 * a), (-b + sq_d) / (2 * a))


def sgn(x: float) -> float:
    """Sign of ``x`` as -1.0, 0.0 or 1.0."""
    return float((x > 0) - (x < 0))