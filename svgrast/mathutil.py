"""Small numeric helpers and constants shared across the package."""

from __future__ import annotations

import math
import os
from typing import TypeVar

PI = 3.14159265358979323
EPS_D = 0.00000000001
EPS_F = 0.00001
INF_D = math.inf
INF_F = math.inf

T = TypeVar("T")


def radians(deg):
    """Convert an angle in degrees to radians."""
    return deg * (PI / 180)


def degrees(rad):
    """Convert an angle in radians to degrees."""
    return rad * (180 / PI)


def clamp(x: T, lo: T, hi: T) -> T:
    """Clamp ``x`` into the closed range ``[lo, hi]``."""
    return min(max(x, lo), hi)


def resolve_path(filename: str | os.PathLike) -> str:
    """Return the absolute, symlink-resolved path of ``filename``."""
    return os.path.realpath(os.fspath(filename))