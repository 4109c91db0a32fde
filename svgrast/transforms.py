"""2D homogeneous transforms."""

from __future__ import annotations

import math

from .matrix import Matrix3x3
from .vector import Vector2D


def apply(m: Matrix3x3, v: Vector2D) -> Vector2D:
    """Transform a 2D point by a homogeneous 3x3 matrix."""
    x, y, z = m * (v.x, v.y, 1.0)
    return Vector2D(x / z, y / z)


def translate(dx: float, dy: float) -> Matrix3x3:
    """Translation by ``(dx, dy)``."""
    return Matrix3x3(1, 0, dx, 0, 1, dy, 0, 0, 1)


def scale(sx: float, sy: float) -> Matrix3x3:
    """Axis-aligned scaling by ``sx`` and ``sy``."""
    return Matrix3x3(sx, 0, 0, 0, sy, 0, 0, 0, 1)


def rotate(deg: float) -> Matrix3x3:
    """Counter-clockwise rotation by ``deg`` degrees."""
    rad = deg * (math.pi / 180.0)
    c, s = math.cos(rad), math.sin(rad)
    return Matrix3x3(c, -s, 0, s, c, 0, 0, 0, 1)