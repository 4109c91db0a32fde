"""Ear-clipping triangulation of simple polygons."""

from __future__ import annotations

from typing import Sequence

from .vector import Vector2D

EPSILON = 0.0000000001


def inside(a: Vector2D, b: Vector2D, c: Vector2D, p: Vector2D) -> bool:
    """Whether ``p`` lies in the counter-clockwise triangle ``abc`` (edges included)."""
    ax, ay = c.x - b.x, c.y - b.y
    bx, by = a.x - c.x, a.y - c.y
    cx, cy = b.x - a.x, b.y - a.y
    apx, apy = p.x - a.x, p.y - a.y
    bpx, bpy = p.x - b.x, p.y - b.y
    cpx, cpy = p.x - c.x, p.y - c.y

    a_cross_bp = ax * bpy - ay * bpx
    c_cross_ap = cx * apy - cy * apx
    b_cross_cp = bx * cpy - by * cpx
    return a_cross_bp >= 0.0 and b_cross_cp >= 0.0 and c_cross_ap >= 0.0


def area(contour: Sequence[Vector2D]) -> float:
    """Signed area of a polygon; positive when counter-clockwise."""
    total = 0.0
    n = len(contour)
    for q in range(n):
        p = contour[q - 1] if q else contour[n - 1]
        cur = contour[q]
        total += p.x * cur.y - cur.x * p.y
    return total * 0.5


def _snip(contour: Sequence[Vector2D], u: int, v: int, w: int, order: list[int]) -> bool:
    a, b, c = contour[order[u]], contour[order[v]], contour[order[w]]
    if EPSILON > ((b.x - a.x) * (c.y - a.y)) - ((b.y - a.y) * (c.x - a.x)):
        return False
    return not any(
        inside(a, b, c, contour[idx])
        for p, idx in enumerate(order)
        if p not in (u, v, w)
    )


def triangulate(points: Sequence[Vector2D]) -> list[Vector2D]:
    """Triangulate a simple polygon into a flat list of vertex triples.

    For a polygon that cannot be triangulated, the triangles found so far
    are returned.
    """
    contour = list(points)
    n = len(contour)
    if n < 3:
        return []

    order = list(range(n)) if area(contour) > 0.0 else list(range(n - 1, -1, -1))
    triangles: list[Vector2D] = []
    count = 2 * n
    v = n - 1
    while len(order) > 2:
        nv = len(order)
        if count <= 0:
            return triangles
        count -= 1

        u = v if v < nv else 0
        v = u + 1 if u + 1 < nv else 0
        w = v + 1 if v + 1 < nv else 0

        if _snip(contour, u, v, w, order):
            triangles.extend(contour[order[k]] for k in (u, v, w))
            del order[v]
            count = 2 * len(order)
    return triangles