"""Linear systems solved by Cramer's rule."""

from __future__ import annotations

from collections.abc import Sequence

from geomkit.numeric import eq

Matrix = Sequence[Sequence[float]]


def _check_square(a: Matrix) -> None:
    n = len(a)
    if n == 0 or any(len(row) != n for row in a):
        raise ValueError("matrix must be square and non-empty")


def _minor(a: Matrix, row: int, col: int) -> list[list[float]]:
    return [
        [v for j, v in enumerate(r) if j != col]
        for i, r in enumerate(a)
        if i != row
    ]


def _det(a: Matrix) -> float:
    if len(a) == 1:
        return float(a[0][0])
    return sum(
        (1 if j % 2 == 0 else -1) * v * _det(_minor(a, 0, j))
        for j, v in enumerate(a[0])
    )


def _with_column(a: Matrix, col: int, values: Sequence[float]) -> list[list[float]]:
    return [
        [value if j == col else v for j, v in enumerate(row)]
        for row, value in zip(a, values)
    ]


def determinant(a: Matrix) -> float:
    """Determinant of a square matrix by cofactor expansion."""
    _check_square(a)
    return _det(a)


def cramer(a: Matrix, c: Sequence[float]) -> list[float] | None:
    """Solve ``a @ x = c``; return ``None`` when the determinant is zero."""
    _check_square(a)
    if len(c) != len(a):
        raise ValueError("right-hand side length does not match the matrix")
    d = _det(a)
    if eq(d, 0):
        return None
    return [_det(_with_column(a, j, c)) / d for j in range(len(a))]


def cramer_augmented(b: Matrix) -> list[float] | None:
    """Solve a system given as an augmented ``n x (n + 1)`` matrix."""
    n = len(b)
    if n == 0 or any(len(row) != n + 1 for row in b):
        raise ValueError("augmented matrix must have one more column than rows")
    return cramer([list(row[:n]) for row in b], [row[n] for row in b])