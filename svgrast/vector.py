"""Immutable 2D and 4D vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator


@dataclass(frozen=True)
class Vector2D:
    """A 2D vector with float components."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y)[index]

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def __add__(self, other: "Vector2D") -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, r: float) -> "Vector2D":
        if not isinstance(r, Real):
            return NotImplemented
        return Vector2D(self.x * r, self.y * r)

    __rmul__ = __mul__

    def __truediv__(self, r: float) -> "Vector2D":
        if not isinstance(r, Real):
            return NotImplemented
        return Vector2D(self.x / r, self.y / r)

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def norm2(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y

    def unit(self) -> "Vector2D":
        """Unit vector parallel to this one."""
        return self / self.norm()


@dataclass(frozen=True)
class Vector4D:
    """A 4D vector with float components."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield from (self.x, self.y, self.z, self.w)

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z, self.w)[index]

    def __neg__(self) -> "Vector4D":
        return Vector4D(-self.x, -self.y, -self.z, -self.w)

    def __add__(self, other: "Vector4D") -> "Vector4D":
        if not isinstance(other, Vector4D):
            return NotImplemented
        return Vector4D(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other: "Vector4D") -> "Vector4D":
        if not isinstance(other, Vector4D):
            return NotImplemented
        return Vector4D(*(a - b for a, b in zip(self, other)))

    def __mul__(self, c: float) -> "Vector4D":
        if not isinstance(c, Real):
            return NotImplemented
        return Vector4D(*(a * c for a in self))

    __rmul__ = __mul__

    def __truediv__(self, c: float) -> "Vector4D":
        if not isinstance(c, Real):
            return NotImplemented
        rc = 1.0 / c
        return Vector4D(*(rc * a for a in self))

    def rcp(self) -> "Vector4D":
        """Per-component reciprocal."""
        return Vector4D(*(1.0 / a for a in self))

    def norm(self) -> float:
        """Euclidean length over all four components."""
        return math.sqrt(self.norm2())

    def norm2(self) -> float:
        """Squared Euclidean length over all four components."""
        return sum(a * a for a in self)

    def unit(self) -> "Vector4D":
        """x, y and z divided by the 4D length; w is set to zero."""
        r_norm = 1.0 / math.sqrt(self.norm2())
        return Vector4D(r_norm * self.x, r_norm * self.y, r_norm * self.z)

    def to_3d(self) -> tuple[float, float, float]:
        """The x, y and z components, ignoring w."""
        return (self.x, self.y, self.z)

    def project_to_3d(self) -> tuple[float, float, float]:
        """The x, y and z components divided by w."""
        return (self.x / self.w, self.y / self.w, self.z / self.w)


def dot(u, v) -> float:
    """Inner product of two vectors of the same dimension."""
    return sum(a * b for a, b in zip(u, v, strict=True))


def cross(u: Vector2D, v: Vector2D) -> float:
    """Scalar 2D cross product."""
    return u.x * v.y - u.y * v.x