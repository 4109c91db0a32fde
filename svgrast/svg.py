"""The SVG scene graph: elements, styles and their draw routines."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from itertools import pairwise
from typing import ClassVar, Protocol

from .color import Color
from .matrix import Matrix3x3
from .texture import Texture
from .transforms import apply
from .triangulation import triangulate
from .vector import Vector2D


class ElementType(IntEnum):
    NONE = 0
    POINT = 1
    LINE = 2
    POLYLINE = 3
    RECT = 4
    POLYGON = 5
    ELLIPSE = 6
    IMAGE = 7
    GROUP = 8
    TRIANGLE = 9


class Rasterizer(Protocol):
    """The drawing primitives a scene is rendered through, in screen space."""

    def rasterize_point(self, x: float, y: float, color: Color) -> None:
        """Draw a single point."""

    def rasterize_line(
        self, x0: float, y0: float, x1: float, y1: float, color: Color
    ) -> None:
        """Draw a line segment."""

    def rasterize_triangle(
        self,
        x0: float, y0: float,
        x1: float, y1: float,
        x2: float, y2: float,
        color: Color,
    ) -> None:
        """Draw a flat-colored triangle."""

    def rasterize_interpolated_color_triangle(
        self,
        x0: float, y0: float, c0: Color,
        x1: float, y1: float, c1: Color,
        x2: float, y2: float, c2: Color,
    ) -> None:
        """Draw a triangle with per-vertex colors."""

    def rasterize_textured_triangle(
        self,
        x0: float, y0: float, u0: float, v0: float,
        x1: float, y1: float, u1: float, v1: float,
        x2: float, y2: float, u2: float, v2: float,
        tex: Texture | None,
    ) -> None:
        """Draw a texture-mapped triangle."""


@dataclass
class Style:
    """Stroke and fill settings of an element."""

    stroke_color: Color = field(default_factory=Color)
    fill_color: Color = field(default_factory=Color)
    stroke_width: float = 0.0
    miter_limit: float = 0.0
    stroke_visible: bool = False


def _compose(global_transform: Matrix3x3 | None, local: Matrix3x3) -> Matrix3x3:
    if global_transform is None:
        global_transform = Matrix3x3.identity()
    return global_transform * local


@dataclass
class SVGElement(ABC):
    """Base of all drawable elements; carries style and a local transform."""

    type: ClassVar[ElementType] = ElementType.NONE

    style: Style = field(default_factory=Style)
    transform: Matrix3x3 = field(default_factory=Matrix3x3.identity)

    @abstractmethod
    def draw(self, rasterizer: Rasterizer, global_transform: Matrix3x3 | None = None) -> None:
        """Draw this element through ``rasterizer``."""


@dataclass
class Triangle(SVGElement):
    """A triangle with a uniform color."""

    type: ClassVar[ElementType] = ElementType.TRIANGLE

    p0_svg: Vector2D = field(default_factory=Vector2D)
    p1_svg: Vector2D = field(default_factory=Vector2D)
    p2_svg: Vector2D = field(default_factory=Vector2D)
    clr: Color = field(default_factory=Color)

    def _screen_points(self, global_transform: Matrix3x3 | None):
        m = _compose(global_transform, self.transform)
        return apply(m, self.p0_svg), apply(m, self.p1_svg), apply(m, self.p2_svg)

    def draw(self, rasterizer: Rasterizer, global_transform: Matrix3x3 | None = None) -> None:
        p0, p1, p2 = self._screen_points(global_transform)
        rasterizer.rasterize_triangle(p0.x, p0.y, p1.x, p1.y, p2.x, p2.y, Color())


@dataclass
class InterpolatedColorTriangle(Triangle):
    """A triangle whose color interpolates its vertex colors."""

    p0_col: Color = field(default_factory=Color)
    p1_col: Color = field(default_factory=Color)
    p2_col: Color = field(default_factory=Color)

    def draw(self, rasterizer: Rasterizer, global_transform: Matrix3x3 | None = None) -> None:
        p0, p1, p2 = self._screen_points(global_transform)
        rasterizer.rasterize_interpolated_color_triangle(
            p0.x, p0.y, self.p0_col,
            p1.x, p1.y, self.p1_col,
            p2.x, p2.y, self.p2_col,
        )


@dataclass
class TexturedTriangle(Triangle):
    """A triangle colored by mapping a texture through per-vertex uvs."""

    p0_uv: Vector2D = field(default_factory=Vector2D)
    p1_uv: Vector2D = field(default_factory=Vector2D)
    p2_uv: Vector2D = field(default_factory=Vector2D)
    tex: Texture | None = None

    def draw(self, rasterizer: Rasterizer, global_transform: Matrix3x3 | None = None) -> None:
        p0, p1, p2 = self._screen_points(global_transform)
        rasterizer.rasterize_textured_triangle(
            p0.x, p0.y, self.p0_uv.x, self.p0_uv.y,
            p1.x, p1.y, self.p1_uv.x, self.p1_uv.y,
            p2.x, p2.y, self.p2_uv.x, self.p2_uv.y,
            self.tex,
        )


@dataclass
class Group(SVGElement):
    """A list of elements sharing the group's transform, drawn in order."""

    type: ClassVar[ElementType] = ElementType.GROUP

    elements: list[SVGElement] = field(default_factory=list)

    def draw(self, rasterizer: Rasterizer, global_transform: Matrix3x3 | None = None) -> None:
        m = _compose(global_transform, self.transform)
        for element in self.elements:
            element.draw(rasterizer, m)


@dataclass
class Point(SVGElement):
    """A single point drawn in the fill color."""

    type: ClassVar[ElementType] = ElementType.POINT

    position: Vector2D = field(default_factory=Vector2D)

    def draw(self, rasterizer: Rasterizer, global_transform: Matrix3x3 | None = None) -> None:
        p = apply(_compose(global_transform, self.transform), self.position)
        rasterizer.rasterize_point(p.x, p.y, self.style.fill_color)


@dataclass
class Line(SVGElement):
    """A line segment, drawn only when the stroke is visible."""

    type: ClassVar[ElementType] = ElementType.LINE

    start: Vector2D = field(default_factory=Vector2D)
    end: Vector2D = field(default_factory=Vector2D)

    def draw(self, rasterizer: Rasterizer, global_transform: Matrix3x3 | None = None) -> None:
        m = _compose(global_transform, self.transform)
        f, t = apply(m, self.start), apply(m, self.end)
        if self.style.stroke_visible:
            rasterizer.rasterize_line(f.x, f.y, t.x, t.y, self.style.stroke_color)


@dataclass
class Polyline(SVGElement):
    """An open chain of line segments in the stroke color."""

    type: ClassVar[ElementType] = ElementType.POLYLINE

    points: list[Vector2D] = field(default_factory=list)

    def draw(self, rasterizer: Rasterizer, global_transform: Matrix3x3 | None = None) -> None:
        m = _compose(global_transform, self.transform)
        color = self.style.stroke_color
        screen = [apply(m, p) for p in self.points]
        for p0, p1 in pairwise(screen):
            rasterizer.rasterize_line(p0.x, p0.y, p1.x, p1.y, color)


@dataclass
class Rect(SVGElement):
    """An axis-aligned rectangle, filled as two triangles."""

    type: ClassVar[ElementType] = ElementType.RECT

    position: Vector2D = field(default_factory=Vector2D)
    dimension: Vector2D = field(default_factory=Vector2D)

    def draw(self, rasterizer: Rasterizer, global_transform: Matrix3x3 | None = None) -> None:
        m = _compose(global_transform, self.transform)
        x, y = self.position.x, self.position.y
        w, h = self.dimension.x, self.dimension.y

        p0 = apply(m, Vector2D(x, y))
        p1 = apply(m, Vector2D(x + w, y))
        p2 = apply(m, Vector2D(x, y + h))
        p3 = apply(m, Vector2D(x + w, y + h))

        fill = self.style.fill_color
        rasterizer.rasterize_triangle(p0.x, p0.y, p1.x, p1.y, p2.x, p2.y, fill)
        rasterizer.rasterize_triangle(p2.x, p2.y, p1.x, p1.y, p3.x, p3.y, fill)

        if self.style.stroke_visible:
            stroke = self.style.stroke_color
            for a, b in ((p0, p1), (p1, p3), (p3, p2), (p2, p0)):
                rasterizer.rasterize_line(a.x, a.y, b.x, b.y, stroke)


@dataclass
class Polygon(SVGElement):
    """A simple polygon, filled by triangulation and optionally outlined."""

    type: ClassVar[ElementType] = ElementType.POLYGON

    points: list[Vector2D] = field(default_factory=list)

    def draw(self, rasterizer: Rasterizer, global_transform: Matrix3x3 | None = None) -> None:
        m = _compose(global_transform, self.transform)

        fill = self.style.fill_color
        corners = [apply(m, p) for p in triangulate(self.points)]
        for k in range(0, len(corners) - 2, 3):
            p0, p1, p2 = corners[k:k + 3]
            rasterizer.rasterize_triangle(p0.x, p0.y, p1.x, p1.y, p2.x, p2.y, fill)

        if self.style.stroke_visible and self.points:
            stroke = self.style.stroke_color
            screen = [apply(m, p) for p in self.points]
            for p0, p1 in zip(screen, screen[1:] + screen[:1]):
                rasterizer.rasterize_line(p0.x, p0.y, p1.x, p1.y, stroke)


@dataclass
class Image(SVGElement):
    """A bitmap drawn pixel by pixel with bilinear sampling."""

    type: ClassVar[ElementType] = ElementType.IMAGE

    position: Vector2D = field(default_factory=Vector2D)
    dimension: Vector2D = field(default_factory=Vector2D)
    tex: Texture = field(default_factory=Texture)

    def draw(self, rasterizer: Rasterizer, global_transform: Matrix3x3 | None = None) -> None:
        m = _compose(global_transform, self.transform)
        p0 = apply(m, self.position)
        p1 = apply(m, self.position + self.dimension)
        span_x = p1.x - p0.x + 1
        span_y = p1.y - p0.y + 1
        for x in range(math.floor(p0.x), math.floor(p1.x) + 1):
            for y in range(math.floor(p0.y), math.floor(p1.y) + 1):
                uv = Vector2D((x + 0.5 - p0.x) / span_x, (y + 0.5 - p0.y) / span_y)
                rasterizer.rasterize_point(x, y, self.tex.sample_bilinear(uv))


@dataclass
class SVG:
    """A whole document: its size, its elements in paint order and its textures."""

    width: float = 0.0
    height: float = 0.0
    elements: list[SVGElement] = field(default_factory=list)
    textures: dict[str, Texture] = field(default_factory=dict)

    def draw(self, rasterizer: Rasterizer, global_transform: Matrix3x3 | None = None) -> None:
        """Draw every element in document order."""
        if global_transform is None:
            global_transform = Matrix3x3.identity()
        for element in self.elements:
            element.draw(rasterizer, global_transform)