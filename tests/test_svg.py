import pytest

from svgrast.color import Color
from svgrast.matrix import Matrix3x3
from svgrast.svg import (
    SVG,
    ElementType,
    Group,
    Image,
    InterpolatedColorTriangle,
    Line,
    Point,
    Polygon,
    Polyline,
    Rect,
    Style,
    SVGElement,
    TexturedTriangle,
    Triangle,
)
from svgrast.texture import Texture
from svgrast.transforms import apply, rotate, scale, translate
from svgrast.vector import Vector2D


class Recorder:
    def __init__(self):
        self.calls = []

    def rasterize_point(self, x, y, color):
        self.calls.append(("point", x, y, color))

    def rasterize_line(self, x0, y0, x1, y1, color):
        self.calls.append(("line", x0, y0, x1, y1, color))

    def rasterize_triangle(self, x0, y0, x1, y1, x2, y2, color):
        self.calls.append(("triangle", x0, y0, x1, y1, x2, y2, color))

    def rasterize_interpolated_color_triangle(self, x0, y0, c0, x1, y1, c1, x2, y2, c2):
        self.calls.append(("ctri", x0, y0, c0, x1, y1, c1, x2, y2, c2))

    def rasterize_textured_triangle(self, x0, y0, u0, v0, x1, y1, u1, v1, x2, y2, u2, v2, tex):
        self.calls.append(("ttri", x0, y0, u0, v0, x1, y1, u1, v1, x2, y2, u2, v2, tex))

    def kinds(self):
        return [c[0] for c in self.calls]


RED = Color(1.0, 0.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)


def test_element_types():
    assert Point().type == ElementType.POINT
    assert Group().type == ElementType.GROUP
    assert InterpolatedColorTriangle().type == ElementType.TRIANGLE
    assert Image().type == ElementType.IMAGE


def test_abstract_element_cannot_be_built():
    with pytest.raises(TypeError):
        SVGElement()


def test_point_applies_transforms():
    point = Point(style=Style(fill_color=RED), position=Vector2D(1, 2), transform=translate(3, 4))
    rec = Recorder()
    point.draw(rec, scale(2, 2))
    expected = apply(scale(2, 2) * translate(3, 4), Vector2D(1, 2))
    kind, x, y, color = rec.calls[0]
    assert kind == "point"
    assert (x, y) == pytest.approx((expected.x, expected.y))
    assert color == RED


def test_line_hidden_without_stroke():
    rec = Recorder()
    Line(start=Vector2D(0, 0), end=Vector2D(5, 5)).draw(rec, Matrix3x3.identity())
    assert rec.calls == []


def test_line_drawn_with_stroke():
    rec = Recorder()
    style = Style(stroke_color=BLUE, stroke_visible=True)
    Line(style=style, start=Vector2D(0, 1), end=Vector2D(5, 6)).draw(rec)
    assert rec.calls == [("line", 0.0, 1.0, 5.0, 6.0, BLUE)]


def test_polyline_draws_open_chain():
    rec = Recorder()
    pts = [Vector2D(0, 0), Vector2D(1, 0), Vector2D(1, 1), Vector2D(0, 1)]
    Polyline(style=Style(stroke_color=RED), points=pts).draw(rec)
    assert rec.kinds() == ["line"] * (len(pts) - 1)
    assert rec.calls[-1][1:5] == (1.0, 1.0, 0.0, 1.0)


def test_rect_fill_and_outline():
    rec = Recorder()
    style = Style(fill_color=RED, stroke_color=BLUE, stroke_visible=True)
    Rect(style=style, position=Vector2D(1, 2), dimension=Vector2D(3, 4)).draw(rec)
    assert rec.kinds() == ["triangle", "triangle", "line", "line", "line", "line"]
    assert all(c[-1] == RED for c in rec.calls[:2])
    assert all(c[-1] == BLUE for c in rec.calls[2:])
    assert rec.calls[0][1:3] == (1.0, 2.0)


def test_rect_without_stroke_only_fills():
    rec = Recorder()
    Rect(position=Vector2D(0, 0), dimension=Vector2D(2, 2)).draw(rec)
    assert rec.kinds() == ["triangle", "triangle"]


def test_polygon_triangulated_and_closed_outline():
    rec = Recorder()
    pts = [Vector2D(0, 0), Vector2D(4, 0), Vector2D(4, 4), Vector2D(0, 4)]
    style = Style(fill_color=RED, stroke_color=BLUE, stroke_visible=True)
    Polygon(style=style, points=pts).draw(rec)
    kinds = rec.kinds()
    assert kinds.count("triangle") == len(pts) - 2
    assert kinds.count("line") == len(pts)
    last_line = rec.calls[-1]
    assert last_line[1:5] == (0.0, 4.0, 0.0, 0.0)


def test_group_composes_transforms():
    child = Point(position=Vector2D(1, 1), transform=scale(2, 3))
    group = Group(elements=[child], transform=translate(5, 7))
    rec = Recorder()
    group.draw(rec, rotate(90))
    expected = apply(rotate(90) * translate(5, 7) * scale(2, 3), Vector2D(1, 1))
    assert rec.calls[0][1:3] == pytest.approx((expected.x, expected.y))


def test_triangle_uses_empty_color():
    tri = Triangle(p0_svg=Vector2D(0, 0), p1_svg=Vector2D(1, 0), p2_svg=Vector2D(0, 1), clr=RED)
    rec = Recorder()
    tri.draw(rec)
    assert rec.calls == [("triangle", 0.0, 0.0, 1.0, 0.0, 0.0, 1.0, Color())]


def test_interpolated_triangle_passes_vertex_colors():
    tri = InterpolatedColorTriangle(
        p0_svg=Vector2D(0, 0), p1_svg=Vector2D(1, 0), p2_svg=Vector2D(0, 1),
        p0_col=RED, p1_col=BLUE, p2_col=Color.WHITE,
    )
    rec = Recorder()
    tri.draw(rec)
    call = rec.calls[0]
    assert call[0] == "ctri"
    assert (call[3], call[6], call[9]) == (RED, BLUE, Color.WHITE)


def test_textured_triangle_passes_uvs_and_texture():
    tex = Texture.from_pixels(bytes([1, 2, 3] * 4), 2, 2)
    tri = TexturedTriangle(
        p0_svg=Vector2D(0, 0), p1_svg=Vector2D(1, 0), p2_svg=Vector2D(0, 1),
        p0_uv=Vector2D(0, 0), p1_uv=Vector2D(1, 0), p2_uv=Vector2D(0, 1), tex=tex,
    )
    rec = Recorder()
    tri.draw(rec)
    call = rec.calls[0]
    assert call[0] == "ttri"
    assert call[3:5] == (0.0, 0.0)
    assert call[7:9] == (1.0, 0.0)
    assert call[-1] is tex


def test_image_draws_uniform_texture():
    pixels = bytes([10, 20, 30] * 4)
    tex = Texture.from_pixels(pixels, 2, 2)
    image = Image(position=Vector2D(0, 0), dimension=Vector2D(1, 1), tex=tex)
    rec = Recorder()
    image.draw(rec)
    expected = Color.from_bytes(pixels[:3])
    coords = sorted((c[1], c[2]) for c in rec.calls)
    assert coords == [(0, 0), (0, 1), (1, 0), (1, 1)]
    for call in rec.calls:
        assert tuple(call[3]) == pytest.approx(tuple(expected))


def test_svg_draws_in_document_order():
    doc = SVG(width=10, height=10, elements=[
        Point(position=Vector2D(1, 1)),
        Line(style=Style(stroke_visible=True), start=Vector2D(0, 0), end=Vector2D(1, 1)),
        Rect(position=Vector2D(0, 0), dimension=Vector2D(1, 1)),
    ])
    rec = Recorder()
    doc.draw(rec)
    assert rec.kinds() == ["point", "line", "triangle", "triangle"]


def test_svg_global_transform_applies_to_all():
    doc = SVG(elements=[Point(position=Vector2D(2, 3))])
    rec = Recorder()
    m = translate(10, 20)
    doc.draw(rec, m)
    expected = apply(m, Vector2D(2, 3))
    assert rec.calls[0][1:3] == pytest.approx((expected.x, expected.y))