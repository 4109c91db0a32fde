# svgrast

Building blocks for a software SVG rasterizer: a small linear-algebra toolkit,
2D homogeneous transforms, an SVG scene model, a parser for a practical subset
of SVG, ear-clipping polygon triangulation and mipmapped texture sampling.

## What it does not do

The package turns no pixels on by itself and writes no image files. Drawing a
scene means handing it an object with the methods of the
`svgrast.svg.Rasterizer` protocol (`rasterize_point`, `rasterize_line`,
`rasterize_triangle`, `rasterize_interpolated_color_triangle`,
`rasterize_textured_triangle`); the scene walks its elements in document order
and calls those methods with screen-space coordinates. There is no
command-line program and no viewer window.

## Installing

    pip install svgrast

## Loading and drawing a scene

```python
from svgrast.svgparser import load
from svgrast.matrix import Matrix3x3

svg = load("drawing.svg")
print(svg.width, svg.height)

svg.draw(my_rasterizer, Matrix3x3.identity())
```

`load(filename)` reads a file; `<texture>` files it names are looked up
relative to the file's directory. `parse_svg_string(text, base_dir=None)`
parses SVG text or bytes already in memory, looking textures up under
`base_dir` (the current directory when it is not given). Malformed XML, a root
element other than `<svg>`, a `fill` or `stroke` that is not a `#rrggbb` or
`#rgb` hex color, and a missing required attribute (`texid`, `filename`,
`xlink:href`) raise `SVGParseError`. An image or texture whose PNG data cannot
be decoded is logged as a warning and left empty or skipped.

The supported elements are `line`, `polyline`, `rect` (a rect with zero width
and height becomes a `Point`), `polygon`, `image` (an embedded base64 PNG data
URI), `g` (groups can be nested), `colortri` (a triangle with per-vertex
colors), `textri` (a triangle with texture coordinates referring to a texture
by `texid`) and `texture`. Other elements are ignored. The `transform`
attribute understands `matrix`, `translate`, `scale`, `rotate`, `skewX` and
`skewY`; an unknown transform is logged and treated as the identity.

The parser's helpers are public too: `parse_transform(text)` returns a
`Matrix3x3`, `parse_points(text)` returns a list of `Vector2D`, and
`decode_png_rgb(data)` returns packed RGB bytes (alpha dropped), width and
height.

## Scene model

`svgrast.svg` holds `SVG` (width, height, elements, textures), the element
classes `Point`, `Line`, `Polyline`, `Rect`, `Polygon`, `Image`, `Group`,
`Triangle`, `InterpolatedColorTriangle` and `TexturedTriangle`, their common
base `SVGElement`, the `Style` dataclass and the `ElementType` enum. Every
element carries a local `transform` that is composed with the one passed to
`draw`. Polygons are filled by triangulation; lines and outlines are drawn
only when the element has a visible stroke.

## Transforms

```python
from svgrast.transforms import apply, rotate, scale, translate
from svgrast.vector import Vector2D

m = translate(10, 0) * rotate(90) * scale(2, 2)
p = apply(m, Vector2D(1, 0))
```

`rotate` takes degrees, counter-clockwise. `apply` divides by the homogeneous
coordinate.

## Triangulation

```python
from svgrast.triangulation import triangulate
from svgrast.vector import Vector2D

square = [Vector2D(0, 0), Vector2D(1, 0), Vector2D(1, 1), Vector2D(0, 1)]
triangles = triangulate(square)   # a flat list of vertices, three per triangle
```

Fewer than three points give an empty list; for a polygon that cannot be
triangulated the triangles found so far are returned. `area(contour)` gives
the signed area and `inside(a, b, c, p)` tests a point against a triangle.

## Textures

```python
from svgrast.texture import (
    LevelSampleMethod, PixelSampleMethod, SampleParams, Texture,
)
from svgrast.vector import Vector2D

tex = Texture.from_pixels(rgb_bytes, width, height)  # mip levels built automatically
color = tex.sample_bilinear(Vector2D(0.5, 0.5), 0)
```

`Texture.sample` takes a `SampleParams` with a pixel sampling method (nearest
or bilinear) and a level sampling method (level zero, nearest level, or
linear between two levels). `get_level` derives the mip level from the
screen-space derivatives of the texture coordinates. Sampling a level that
does not exist returns magenta.

## Other pieces

- `svgrast.vector`: `Vector2D`, `Vector4D`, `dot`, `cross`
- `svgrast.complexnum`: `Complex`
- `svgrast.matrix`: `Matrix3x3` (immutable; `*` multiplies by matrices,
  scalars and 3-vectors), `outer`
- `svgrast.color`: `Color`, with `from_hex`, `from_bytes` and `to_bytes`
- `svgrast.mathutil`: `radians`, `degrees`, `clamp`, `resolve_path`
- `svgrast.timer`: `Timer`, also usable as a context manager

## Running the tests

    pip install "svgrast[test]"
    pytest