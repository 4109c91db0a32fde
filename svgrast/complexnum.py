"""Complex numbers stored as real and imaginary components."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator


@dataclass(frozen=True)
class Complex:
    """The complex number ``x + y*i``."""

    x: float = 0.0
    y: float = 0.0

    @property
    def real(self) -> float:
        return self.x

    @property
    def imag(self) -> float:
        return self.y

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __complex__(self) -> complex:
        return complex(self.x, self.y)

    def __neg__(self) -> "Complex":
        return Complex(-self.x, -self.y)

    def __add__(self, other: "Complex") -> "Complex":
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Complex") -> "Complex":
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.x - other.x, self.y - other.y)

    def __mul__(self, other) -> "Complex":
        if isinstance(other, Complex):
            a, b = self.x, self.y
            c, d = other.x, other.y
            return Complex(a * c - b * d, a * d + b * c)
        if isinstance(other, Real):
            return Complex(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other) -> "Complex":
        if isinstance(other, Real):
            return Complex(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other) -> "Complex":
        if isinstance(other, Complex):
            return self * other.inv()
        if isinstance(other, Real):
            return Complex(self.x / other, self.y / other)
        return NotImplemented

    def norm(self) -> float:
        """Modulus."""
        return math.sqrt(self.norm2())

    def norm2(self) -> float:
        """Squared modulus."""
        return self.x * self.x + self.y * self.y

    def conj(self) -> "Complex":
        """Complex conjugate."""
        return Complex(self.x, -self.y)

    def inv(self) -> "Complex":
        """Multiplicative inverse."""
        r = 1.0 / self.norm2()
        return Complex(r * self.x, -r * self.y)

    def arg(self) -> float:
        """Argument in radians."""
        return math.atan2(self.y, self.x)

    def exponential(self) -> "Complex":
        """Complex exponential ``e**z``."""
        return math.exp(self.x) * Complex(math.cos(self.y), math.sin(self.y))