"""Immutable 3x3 matrices."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterator, Sequence

Vec3 = tuple[float, float, float]


class Matrix3x3:
    """A 3x3 matrix built from nine row-major entries; no entries gives the identity."""

    __slots__ = ("_rows",)

    def __init__(self, *entries: float) -> None:
        if not entries:
            entries = (1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)
        if len(entries) != 9:
            raise ValueError(f"expected 9 entries, got {len(entries)}")
        values = tuple(float(e) for e in entries)
        self._rows = (values[0:3], values[3:6], values[6:9])

    @classmethod
    def identity(cls) -> "Matrix3x3":
        """The 3x3 identity matrix."""
        return cls()

    @classmethod
    def zeros(cls, val: float = 0.0) -> "Matrix3x3":
        """A matrix with every entry set to ``val``."""
        return cls(*([val] * 9))

    @classmethod
    def cross_product(cls, u: Sequence[float]) -> "Matrix3x3":
        """The matrix of the left cross product with ``u``."""
        x, y, z = u
        return cls(0.0, -z, y, z, 0.0, -x, -y, x, 0.0)

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = index
        return self._rows[i][j]

    def __iter__(self) -> Iterator[Vec3]:
        return iter(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"Matrix3x3{self._rows!r}"

    def _entries(self) -> list[float]:
        return [v for row in self._rows for v in row]

    def with_entry(self, i: int, j: int, value: float) -> "Matrix3x3":
        """A copy of this matrix with entry ``(i, j)`` replaced."""
        entries = self._entries()
        if not (0 <= i < 3 and 0 <= j < 3):
            raise IndexError(f"entry ({i}, {j}) out of range")
        entries[3 * i + j] = value
        return Matrix3x3(*entries)

    def column(self, i: int) -> Vec3:
        """The ``i``-th column."""
        return tuple(row[i] for row in self._rows)

    def transpose(self) -> "Matrix3x3":
        """The transposed matrix."""
        return Matrix3x3(*(v for j in range(3) for v in self.column(j)))

    def det(self) -> float:
        """Determinant."""
        (a, b, c), (d, e, f), (g, h, k) = self._rows
        return a * (e * k - f * h) - b * (d * k - f * g) + c * (d * h - e * g)

    def norm(self) -> float:
        """Frobenius norm."""
        return math.sqrt(sum(v * v for v in self._entries()))

    def inverse(self) -> "Matrix3x3":
        """The inverse matrix; raises ZeroDivisionError if singular."""
        det = self.det()
        if det == 0.0:
            raise ZeroDivisionError("matrix is singular")
        (a, b, c), (d, e, f), (g, h, k) = self._rows
        adjugate = (
            e * k - f * h, c * h - b * k, b * f - c * e,
            f * g - d * k, a * k - c * g, c * d - a * f,
            d * h - e * g, b * g - a * h, a * e - b * d,
        )
        return Matrix3x3(*(v / det for v in adjugate))

    def __neg__(self) -> "Matrix3x3":
        return Matrix3x3(*(-v for v in self._entries()))

    def __add__(self, other: "Matrix3x3") -> "Matrix3x3":
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        return Matrix3x3(*(a + b for a, b in zip(self._entries(), other._entries())))

    def __sub__(self, other: "Matrix3x3") -> "Matrix3x3":
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        return Matrix3x3(*(a - b for a, b in zip(self._entries(), other._entries())))

    def __mul__(self, other):
        if isinstance(other, Matrix3x3):
            return Matrix3x3(
                *(
                    sum(row[k] * other._rows[k][j] for k in range(3))
                    for row in self._rows
                    for j in range(3)
                )
            )
        if isinstance(other, Real):
            return Matrix3x3(*(v * other for v in self._entries()))
        try:
            vec = tuple(other)
        except TypeError:
            return NotImplemented
        if len(vec) != 3:
            raise ValueError("matrix-vector product needs a 3-component vector")
        return tuple(sum(a * b for a, b in zip(row, vec)) for row in self._rows)

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __truediv__(self, x: float) -> "Matrix3x3":
        if not isinstance(x, Real):
            return NotImplemented
        return Matrix3x3(*(v / x for v in self._entries()))


def outer(u: Sequence[float], v: Sequence[float]) -> Matrix3x3:
    """The outer product ``u * v^T`` of two 3-vectors."""
    return Matrix3x3(*(a * b for a in u for b in v))