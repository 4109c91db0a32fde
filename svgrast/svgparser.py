"""Loading SVG documents into the scene graph."""

from __future__ import annotations

import base64
import binascii
import io
import logging
import math
import os
import re
import xml.etree.ElementTree as ET
from typing import Callable, Iterator

from PIL import Image as PILImage

from .color import Color
from .mathutil import PI, resolve_path
from .matrix import Matrix3x3
from .svg import (
    SVG,
    Group,
    Image,
    InterpolatedColorTriangle,
    Line,
    Point,
    Polygon,
    Polyline,
    Rect,
    SVGElement,
    TexturedTriangle,
)
from .texture import MipLevel, Texture
from .transforms import rotate, scale, translate
from .vector import Vector2D

logger = logging.getLogger(__name__)

_XLINK_NS = "{http://www.w3.org/1999/xlink}"
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_TRANSFORM_RE = re.compile(r"([^()]*)\(([^)]*)\)")


class SVGParseError(ValueError):
    """Raised when a document cannot be read as an SVG scene."""


class _Stream:
    """Reads whitespace-separated values the way formatted stream input does."""

    def __init__(self, text: str | None) -> None:
        self._text = text or ""
        self._pos = 0

    def _skip_ws(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1

    def read_float(self) -> float | None:
        self._skip_ws()
        match = _FLOAT_RE.match(self._text, self._pos)
        if match is None:
            return None
        self._pos = match.end()
        return float(match.group())

    def read_char(self) -> str | None:
        self._skip_ws()
        if self._pos >= len(self._text):
            return None
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def floats(self) -> Iterator[float]:
        while (value := self.read_float()) is not None:
            yield value

    def take(self, count: int, default: float = 0.0) -> list[float]:
        values = []
        for _ in range(count):
            value = self.read_float()
            if value is None:
                break
            values.append(value)
        return values + [default] * (count - len(values))


def _read_or(stream: _Stream, default: float) -> float:
    value = stream.read_float()
    return default if value is None else value


def parse_transform(text: str) -> Matrix3x3:
    """Compose an SVG ``transform`` attribute into one matrix."""
    result = Matrix3x3.identity()
    for match in _TRANSFORM_RE.finditer(text):
        kind = match.group(1).strip(" ,\t\r\n")
        data = match.group(2)
        m = Matrix3x3.identity()
        if kind == "matrix":
            a, b, c, d, e, f = _Stream(data.replace(",", " ")).take(6)
            m = Matrix3x3(a, c, e, b, d, f, 0, 0, 1)
        elif kind == "translate":
            stream = _Stream(data)
            x = _read_or(stream, 0.0)
            y = _read_or(stream, 0.0)
            m = translate(x, y)
        elif kind == "scale":
            stream = _Stream(data)
            x = _read_or(stream, 1.0)
            y = _read_or(stream, 1.0)
            m = scale(x, y)
        elif kind == "rotate":
            stream = _Stream(data)
            a = _read_or(stream, 0.0)
            x = _read_or(stream, 0.0)
            y = _read_or(stream, 0.0)
            m = translate(x, y) * rotate(a) * translate(-x, -y)
        elif kind == "skewX":
            a = _read_or(_Stream(data), 0.0)
            m = m.with_entry(0, 1, math.tan(a * PI / 180.0))
        elif kind == "skewY":
            a = _read_or(_Stream(data), 0.0)
            m = m.with_entry(1, 0, math.tan(a * PI / 180.0))
        else:
            logger.warning("unknown transformation type: %s", kind)
        result = result * m
    return result


def parse_points(text: str | None) -> list[Vector2D]:
    """Parse a ``points`` list of ``x<sep>y`` pairs with one separator character."""
    stream = _Stream(text)
    points = []
    while True:
        x = stream.read_float()
        if x is None or stream.read_char() is None:
            break
        y = stream.read_float()
        if y is None:
            break
        points.append(Vector2D(x, y))
    return points


def decode_png_rgb(data: bytes) -> tuple[bytes, int, int]:
    """Decode PNG bytes into packed RGB bytes (alpha dropped), width and height."""
    try:
        with PILImage.open(io.BytesIO(data)) as img:
            fmt = img.format
            rgba = img.convert("RGBA")
    except (OSError, ValueError, SyntaxError) as exc:
        raise SVGParseError(f"could not decode image: {exc}") from exc
    if fmt != "PNG":
        raise SVGParseError(f"expected PNG data, got {fmt}")
    raw = rgba.tobytes()
    rgb = bytearray(len(raw) // 4 * 3)
    for k in range(3):
        rgb[k::3] = raw[k::4]
    return bytes(rgb), rgba.width, rgba.height


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _attr(xml: ET.Element, name: str) -> str | None:
    if name.startswith("xlink:"):
        value = xml.get(_XLINK_NS + name[len("xlink:"):])
        if value is not None:
            return value
    return xml.get(name)


def _query_float(xml: ET.Element, name: str) -> float | None:
    value = xml.get(name)
    if value is None:
        return None
    return _Stream(value).read_float()


def _float_attr(xml: ET.Element, name: str) -> float:
    value = _query_float(xml, name)
    return 0.0 if value is None else value


def _parse_color(text: str) -> Color:
    try:
        return Color.from_hex(text)
    except ValueError as exc:
        raise SVGParseError(str(exc)) from exc


def _required(xml: ET.Element, name: str) -> str:
    value = _attr(xml, name)
    if value is None:
        raise SVGParseError(f"<{_local(xml.tag)}> is missing attribute {name!r}")
    return value


def _vertex_triple(text: str | None) -> list[Vector2D]:
    values = _Stream(text).take(6)
    return [Vector2D(values[k], values[k + 1]) for k in (0, 2, 4)]


class _Parser:
    def __init__(self, svg: SVG, base_dir: str) -> None:
        self.svg = svg
        self.base_dir = base_dir
        self._builders: dict[str, Callable[[ET.Element], SVGElement]] = {
            "line": self._line,
            "polyline": self._polyline,
            "rect": self._rect,
            "polygon": self._polygon,
            "image": self._image,
            "g": self._group,
            "colortri": self._color_tri,
            "textri": self._tex_tri,
        }

    def parse_children(self, xml: ET.Element) -> list[SVGElement]:
        elements = []
        for child in xml:
            if not isinstance(child.tag, str):
                continue
            tag = _local(child.tag)
            if tag == "texture":
                self._texture(child)
                continue
            builder = self._builders.get(tag)
            if builder is not None:
                elements.append(builder(child))
        return elements

    @staticmethod
    def _common(xml: ET.Element, element: SVGElement) -> None:
        style = element.style
        fill = xml.get("fill")
        if fill is not None:
            style.fill_color = _parse_color(fill)
        stroke = xml.get("stroke")
        if stroke is not None:
            style.stroke_color = _parse_color(stroke)
            style.stroke_visible = True
        else:
            style.stroke_color = Color.BLACK
            style.stroke_visible = False
        width = _query_float(xml, "stroke-width")
        if width is not None:
            style.stroke_width = width
        miter = _query_float(xml, "stroke-miterlimit")
        if miter is not None:
            style.miter_limit = miter
        trans = xml.get("transform")
        if trans is not None:
            element.transform = parse_transform(trans)

    def _line(self, xml: ET.Element) -> Line:
        line = Line()
        self._common(xml, line)
        line.start = Vector2D(_float_attr(xml, "x1"), _float_attr(xml, "y1"))
        line.end = Vector2D(_float_attr(xml, "x2"), _float_attr(xml, "y2"))
        return line

    def _polyline(self, xml: ET.Element) -> Polyline:
        polyline = Polyline()
        self._common(xml, polyline)
        polyline.points = parse_points(xml.get("points"))
        return polyline

    def _rect(self, xml: ET.Element) -> SVGElement:
        w = _float_attr(xml, "width")
        h = _float_attr(xml, "height")
        position = Vector2D(_float_attr(xml, "x"), _float_attr(xml, "y"))
        if w == 0 and h == 0:
            point = Point()
            self._common(xml, point)
            point.position = position
            return point
        rect = Rect()
        self._common(xml, rect)
        rect.position = position
        rect.dimension = Vector2D(w, h)
        return rect

    def _polygon(self, xml: ET.Element) -> Polygon:
        polygon = Polygon()
        self._common(xml, polygon)
        polygon.points = parse_points(xml.get("points"))
        return polygon

    def _image(self, xml: ET.Element) -> Image:
        image = Image()
        self._common(xml, image)
        image.position = Vector2D(_float_attr(xml, "x"), _float_attr(xml, "y"))
        image.dimension = Vector2D(_float_attr(xml, "width"), _float_attr(xml, "height"))

        href = _required(xml, "xlink:href")
        comma = href.find(",")
        if comma < 0:
            raise SVGParseError("image data is not a data URI")
        encoded = re.sub(r"[ \t\n]", "", href[comma + 1:])
        try:
            pixels, width, height = decode_png_rgb(base64.b64decode(encoded))
        except (SVGParseError, binascii.Error) as exc:
            logger.warning("could not load image: %s", exc)
            return image
        image.tex = Texture(width, height, [MipLevel(width, height, bytearray(pixels))])
        return image

    def _group(self, xml: ET.Element) -> Group:
        group = Group()
        self._common(xml, group)
        group.elements = self.parse_children(xml)
        return group

    def _color_tri(self, xml: ET.Element) -> InterpolatedColorTriangle:
        ctri = InterpolatedColorTriangle()
        self._common(xml, ctri)
        ctri.p0_svg, ctri.p1_svg, ctri.p2_svg = _vertex_triple(xml.get("points"))
        values = _Stream(xml.get("colors")).take(12)
        ctri.p0_col, ctri.p1_col, ctri.p2_col = (
            Color(*values[k:k + 3]) for k in (0, 4, 8)
        )
        return ctri

    def _tex_tri(self, xml: ET.Element) -> TexturedTriangle:
        ttri = TexturedTriangle()
        self._common(xml, ttri)
        ttri.p0_svg, ttri.p1_svg, ttri.p2_svg = _vertex_triple(xml.get("points"))
        ttri.p0_uv, ttri.p1_uv, ttri.p2_uv = _vertex_triple(xml.get("uvs"))
        ttri.tex = self.svg.textures.get(_required(xml, "texid"))
        return ttri

    def _texture(self, xml: ET.Element) -> None:
        texid = _required(xml, "texid")
        filename = _required(xml, "filename")
        path = os.path.join(self.base_dir, filename)
        try:
            with open(path, "rb") as fh:
                data = fh.read()
            pixels, width, height = decode_png_rgb(data)
        except (OSError, SVGParseError) as exc:
            logger.warning("could not load image %s: %s", filename, exc)
            return
        self.svg.textures[texid] = Texture.from_pixels(pixels, width, height)


def parse_svg_string(text: str | bytes, base_dir: str | os.PathLike | None = None) -> SVG:
    """Parse an SVG document; texture files are looked up under ``base_dir``."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise SVGParseError(f"malformed XML: {exc}") from exc
    if _local(root.tag) != "svg":
        raise SVGParseError("not an SVG file")

    svg = SVG()
    width = _query_float(root, "width")
    if width is not None:
        svg.width = width
    height = _query_float(root, "height")
    if height is not None:
        svg.height = height

    directory = os.fspath(base_dir) if base_dir is not None else os.getcwd()
    svg.elements = _Parser(svg, directory).parse_children(root)
    return svg


def load(filename: str | os.PathLike) -> SVG:
    """Read and parse an SVG file; textures resolve relative to its directory."""
    path = resolve_path(filename)
    with open(path, "rb") as fh:
        data = fh.read()
    return parse_svg_string(data, os.path.dirname(path))