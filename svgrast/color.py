"""RGB colors with float components."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Iterator

from .mathutil import clamp


@dataclass(frozen=True)
class Color:
    """An RGB color; components are nominally in ``[0, 1]``."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.r
        yield self.g
        yield self.b

    def __add__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other) -> "Color":
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, Real):
            return Color(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def __rmul__(self, other) -> "Color":
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Parse ``#rrggbb`` or ``#rgb`` (the ``#`` is optional)."""
        digits = text.strip().lstrip("#")
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) != 6:
            raise ValueError(f"invalid hex color: {text!r}")
        try:
            values = [int(digits[k:k + 2], 16) for k in (0, 2, 4)]
        except ValueError as exc:
            raise ValueError(f"invalid hex color: {text!r}") from exc
        return cls(*(v / 255.0 for v in values))

    @classmethod
    def from_bytes(cls, data) -> "Color":
        """Build a color from the first three 8-bit channel values."""
        if len(data) < 3:
            raise ValueError("need three channel bytes")
        return cls(data[0] / 255.0, data[1] / 255.0, data[2] / 255.0)

    def to_bytes(self) -> bytes:
        """The color as three 8-bit channels, clamped and truncated."""
        return bytes(int(255.0 * clamp(c, 0.0, 1.0)) for c in self)


Color.BLACK = Color(0.0, 0.0, 0.0)
Color.WHITE = Color(1.0, 1.0, 1.0)