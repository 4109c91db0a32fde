"""Mipmapped RGB textures and texture sampling."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum

from .color import Color
from .vector import Vector2D

K_MAX_MIP_LEVELS = 14

MAGENTA = Color(1.0, 0.0, 1.0)


class PixelSampleMethod(IntEnum):
    P_NEAREST = 0
    P_LINEAR = 1


class LevelSampleMethod(IntEnum):
    L_ZERO = 0
    L_NEAREST = 1
    L_LINEAR = 2


@dataclass
class SampleParams:
    """Where and how to sample a texture."""

    p_uv: Vector2D = field(default_factory=Vector2D)
    p_dx_uv: Vector2D = field(default_factory=Vector2D)
    p_dy_uv: Vector2D = field(default_factory=Vector2D)
    psm: PixelSampleMethod = PixelSampleMethod.P_NEAREST
    lsm: LevelSampleMethod = LevelSampleMethod.L_ZERO


@dataclass
class MipLevel:
    """One mip level: packed 8-bit RGB texels in row-major order."""

    width: int
    height: int
    texels: bytearray

    def get_texel(self, tx: int, ty: int) -> Color:
        """The color of texel ``(tx, ty)``."""
        if not (0 <= tx < self.width and 0 <= ty < self.height):
            raise IndexError(f"texel ({tx}, {ty}) out of range")
        offset = 3 * (tx + ty * self.width)
        return Color.from_bytes(self.texels[offset:offset + 3])


def _round_half_away(x: float) -> int:
    return int(math.floor(x + 0.5)) if x >= 0 else -int(math.floor(-x + 0.5))


def _read(mem: bytearray, offset: int) -> tuple[float, float, float]:
    return (mem[offset] / 255.0, mem[offset + 1] / 255.0, mem[offset + 2] / 255.0)


def _store(mem: bytearray, offset: int, rgb) -> None:
    for k, value in enumerate(rgb):
        mem[offset + k] = int(255.0 * max(0.0, min(1.0, value)))


def _taps(prev_len: int, curr_len: int, index: int) -> list[tuple[int, float]]:
    """Source indices and weights along one axis for output ``index``."""
    if prev_len == curr_len:
        return [(index, 1.0)]
    if prev_len & 1:
        support, decimal = 3, 1.0 / curr_len
    else:
        support, decimal = 2, 0.0
    norm = 1.0 / (2.0 + decimal)
    weights = (norm * (1.0 - decimal * index), norm * 1.0, norm * decimal * (index + 1))
    return [(2 * index + k, weights[k]) for k in range(support)]


def _downsample(prev: MipLevel, curr: MipLevel) -> None:
    prev_pitch = prev.width * 3
    curr_pitch = curr.width * 3
    for j in range(curr.height):
        rows = _taps(prev.height, curr.height, j)
        for i in range(curr.width):
            cols = _taps(prev.width, curr.width, i)
            result = [0.0, 0.0, 0.0]
            for row, h_weight in rows:
                for col, w_weight in cols:
                    weight = h_weight * w_weight
                    texel = _read(prev.texels, prev_pitch * row + 3 * col)
                    for k in range(3):
                        result[k] += weight * texel[k]
            _store(curr.texels, curr_pitch * j + 3 * i, result)


@dataclass
class Texture:
    """An RGB texture with a mipmap pyramid; level 0 is the original image."""

    width: int = 0
    height: int = 0
    mipmap: list[MipLevel] = field(default_factory=list)

    @classmethod
    def from_pixels(cls, pixels, width: int, height: int) -> "Texture":
        """Build a texture from packed RGB bytes and generate its mips."""
        if width <= 0 or height <= 0:
            raise ValueError("texture dimensions must be positive")
        if len(pixels) != 3 * width * height:
            raise ValueError(
                f"expected {3 * width * height} bytes, got {len(pixels)}"
            )
        tex = cls(width, height, [MipLevel(width, height, bytearray(pixels))])
        tex.generate_mips()
        return tex

    def generate_mips(self, start_level: int = 0) -> None:
        """Rebuild the mip levels below ``start_level``."""
        if not 0 <= start_level < len(self.mipmap):
            raise IndexError(f"invalid start level {start_level}")
        base = self.mipmap[start_level]
        num_sub_levels = int(math.log2(max(base.width, base.height)))
        num_sub_levels = min(num_sub_levels, K_MAX_MIP_LEVELS - start_level - 1)
        del self.mipmap[start_level + 1:]

        width, height = base.width, base.height
        for _ in range(num_sub_levels):
            width = max(1, width // 2)
            height = max(1, height // 2)
            self.mipmap.append(MipLevel(width, height, bytearray(3 * width * height)))

        sub_levels = num_sub_levels - (start_level + 1)
        for level in range(start_level + 1, start_level + sub_levels + 1):
            _downsample(self.mipmap[level - 1], self.mipmap[level])

    def get_level(self, sp: SampleParams) -> float:
        """The mip level suggested by the screen-space uv derivatives."""
        dx = sp.p_dx_uv - sp.p_uv
        dy = sp.p_dy_uv - sp.p_uv
        dx = Vector2D(dx.x * self.width, dx.y * self.width)
        dy = Vector2D(dy.x * self.height, dy.y * self.height)
        length = max(dx.norm(), dy.norm())
        if length > 0:
            return min(math.log2(length), float(len(self.mipmap)))
        return 0.0

    def sample(self, sp: SampleParams) -> Color:
        """Sample using the pixel and level methods in ``sp``."""
        level0 = level1 = 0
        weight = 0
        if sp.lsm == LevelSampleMethod.L_NEAREST:
            level0 = level1 = _round_half_away(self.get_level(sp))
        elif sp.lsm == LevelSampleMethod.L_LINEAR:
            level_f = self.get_level(sp)
            level0 = math.floor(level_f)
            level1 = math.ceil(level_f)
            weight = math.trunc(level_f - level0)

        if sp.psm == PixelSampleMethod.P_NEAREST:
            pick = self.sample_nearest
        else:
            pick = self.sample_bilinear
        color0 = pick(sp.p_uv, level0)
        color1 = pick(sp.p_uv, level1)
        return color0 * weight + color1 * (1 - weight)

    def sample_nearest(self, uv: Vector2D, level: int = 0) -> Color:
        """Nearest-texel lookup; magenta for an invalid level."""
        if not 0 <= level < len(self.mipmap):
            return MAGENTA
        mip = self.mipmap[level]
        x = _round_half_away(uv.x * (mip.width - 1))
        y = _round_half_away(uv.y * (mip.height - 1))
        return mip.get_texel(x, y)

    def sample_bilinear(self, uv: Vector2D, level: int = 0) -> Color:
        """Bilinearly filtered lookup; magenta for an invalid level."""
        if not 0 <= level < len(self.mipmap):
            return MAGENTA
        mip = self.mipmap[level]
        u = uv.x * (mip.width - 1)
        v = uv.y * (mip.height - 1)
        x0, y0 = math.floor(u), math.floor(v)
        x1, y1 = math.ceil(u), math.ceil(v)

        c00 = mip.get_texel(x0, y0)
        c10 = mip.get_texel(x1, y0)
        c01 = mip.get_texel(x0, y1)
        c11 = mip.get_texel(x1, y1)

        s = u - x0
        top = c00 * (1 - s) + c10 * s
        bottom = c01 * (1 - s) + c11 * s
        t = v - y0
        return top * (1 - t) + bottom * t