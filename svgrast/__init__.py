"""SVG scene model, parser, triangulation and texture sampling for software rasterizers."""

__version__ = "0.1.0"

__all__ = [
    "color",
    "complexnum",
    "mathutil",
    "matrix",
    "svg",
    "svgparser",
    "texture",
    "timer",
    "transforms",
    "triangulation",
    "vector",
]