import pytest

from svgrast.color import Color
from svgrast.texture import (
    K_MAX_MIP_LEVELS,
    LevelSampleMethod,
    MipLevel,
    PixelSampleMethod,
    SampleParams,
    Texture,
)
from svgrast.vector import Vector2D


def _solid(width, height, rgb=(255, 255, 255)):
    return Texture.from_pixels(bytes(rgb) * (width * height), width, height)


def _two_by_two():
    texels = [(0, 0, 0), (255, 0, 0), (0, 255, 0), (0, 0, 255)]
    return Texture.from_pixels(b"".join(bytes(t) for t in texels), 2, 2)


def _checker(n):
    data = bytearray()
    for y in range(n):
        for x in range(n):
            data += bytes((255, 255, 255) if (x + y) % 2 else (0, 0, 0))
    return Texture.from_pixels(bytes(data), n, n)


def test_mip_pyramid_dimensions():
    tex = _solid(4, 4)
    assert [(m.width, m.height) for m in tex.mipmap] == [(4, 4), (2, 2), (1, 1)]


def test_mip_level_count_limited():
    tex = _solid(1 << 14, 1)
    assert len(tex.mipmap) == K_MAX_MIP_LEVELS


def test_first_mip_of_white_is_white():
    tex = _solid(4, 4)
    assert bytes(tex.mipmap[1].texels) == b"\xff" * (3 * 2 * 2)


def test_from_pixels_rejects_wrong_size():
    with pytest.raises(ValueError):
        Texture.from_pixels(b"\x00" * 5, 2, 1)


def test_generate_mips_invalid_start():
    tex = _solid(2, 2)
    with pytest.raises(IndexError):
        tex.generate_mips(10)


def test_get_texel_layout():
    mip = MipLevel(2, 1, bytearray(b"\x00\x00\x00\xff\x00\x00"))
    assert mip.get_texel(1, 0) == Color(1.0, 0.0, 0.0)
    with pytest.raises(IndexError):
        mip.get_texel(2, 0)


def test_sample_nearest_corners():
    tex = _two_by_two()
    assert tex.sample_nearest(Vector2D(0, 0)) == tex.mipmap[0].get_texel(0, 0)
    assert tex.sample_nearest(Vector2D(1, 0)) == tex.mipmap[0].get_texel(1, 0)
    assert tex.sample_nearest(Vector2D(1, 1)) == tex.mipmap[0].get_texel(1, 1)


def test_invalid_level_is_magenta():
    tex = _two_by_two()
    assert tex.sample_nearest(Vector2D(0, 0), 99) == Color(1, 0, 1)
    assert tex.sample_bilinear(Vector2D(0, 0), -1) == Color(1, 0, 1)


@pytest.mark.parametrize("uv", [(0, 0), (1, 0), (0, 1), (1, 1)])
def test_bilinear_matches_nearest_on_texel_centres(uv):
    tex = _two_by_two()
    assert tex.sample_bilinear(Vector2D(*uv)) == tex.sample_nearest(Vector2D(*uv))


def test_bilinear_midpoint_averages():
    pixels = bytes((0, 0, 0, 255, 255, 255))
    tex = Texture.from_pixels(pixels, 2, 1)
    mid = tex.sample_bilinear(Vector2D(0.5, 0.0))
    assert list(mid) == pytest.approx([0.5, 0.5, 0.5])


def test_get_level_zero_without_derivatives():
    tex = _solid(4, 4)
    assert tex.get_level(SampleParams(p_uv=Vector2D(0.3, 0.3),
                                      p_dx_uv=Vector2D(0.3, 0.3),
                                      p_dy_uv=Vector2D(0.3, 0.3))) == 0.0


def test_get_level_doubling_footprint_adds_one():
    tex = _solid(8, 8)
    small = tex.get_level(SampleParams(p_dx_uv=Vector2D(0.25, 0)))
    large = tex.get_level(SampleParams(p_dx_uv=Vector2D(0.5, 0)))
    assert large - small == pytest.approx(1.0)


def test_get_level_clamped_to_mip_count():
    tex = _solid(4, 4)
    level = tex.get_level(SampleParams(p_dx_uv=Vector2D(1e6, 0)))
    assert level == len(tex.mipmap)


def test_sample_level_zero_equals_nearest():
    tex = _checker(4)
    uv = Vector2D(0.4, 0.7)
    sp = SampleParams(p_uv=uv, psm=PixelSampleMethod.P_NEAREST,
                      lsm=LevelSampleMethod.L_ZERO)
    assert tex.sample(sp) == tex.sample_nearest(uv, 0)


def test_sample_level_zero_bilinear():
    tex = _checker(4)
    uv = Vector2D(0.4, 0.7)
    sp = SampleParams(p_uv=uv, psm=PixelSampleMethod.P_LINEAR,
                      lsm=LevelSampleMethod.L_ZERO)
    assert tex.sample(sp) == tex.sample_bilinear(uv, 0)


def test_sample_linear_level_uses_upper_level():
    tex = _checker(4)
    uv = Vector2D(0.0, 0.0)
    sp = SampleParams(p_uv=uv, p_dx_uv=Vector2D(0.375, 0.0),
                      psm=PixelSampleMethod.P_NEAREST,
                      lsm=LevelSampleMethod.L_LINEAR)
    assert 0 < tex.get_level(sp) < 1
    assert tex.sample(sp) == tex.sample_nearest(uv, 1)


def test_sample_nearest_level_rounds():
    tex = _checker(4)
    uv = Vector2D(0.0, 0.0)
    sp = SampleParams(p_uv=uv, p_dx_uv=Vector2D(0.5, 0.0),
                      psm=PixelSampleMethod.P_NEAREST,
                      lsm=LevelSampleMethod.L_NEAREST)
    assert tex.sample(sp) == tex.sample_nearest(uv, round(tex.get_level(sp)))