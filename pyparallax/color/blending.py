"""
Blend-factor compositing for PyParallax.

Implements the classic graphics-pipeline blend equation

    dst' = dst * resolve(dst_factor) + src * resolve(src_factor)

per channel, where a factor may depend on the source or destination
colour or alpha. The result is clamped to [0, 1]. All functions work on
float arrays whose last axis holds the RGBA channels, so a single colour
and a whole canvas go through the same code.
"""

from enum import Enum

import numpy as np

from .. import constants as cte
from ..errors import ConfigError
from .canvas import from_canvas, to_canvas
from .color import Color


class BlendFactor(Enum):
    """Blend factors, named as they appear in layer configurations."""

    Zero = 0
    One = 1
    SrcColor = 2
    OneMinusSrcColor = 3
    DstColor = 4
    OneMinusDstColor = 5
    SrcAlpha = 6
    OneMinusSrcAlpha = 7
    DstAlpha = 8
    OneMinusDstAlpha = 9

    @classmethod
    def parse(cls, name):
        """
        Look a factor up by its exact (case-sensitive) name.

        Raises:
            ConfigError: If ``name`` is not a factor name
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str) or name not in cls.__members__:
            valid = ", ".join(cls.__members__)
            raise ConfigError(f"Unknown blend factor {name!r}, expected one of: {valid}")
        return cls.__members__[name]


def resolve_factor(factor, src, dst):
    """
    Compute the per-channel multiplier of a blend factor.

    Args:
        factor: BlendFactor to resolve
        src: Source colours, float array (..., 4)
        dst: Destination colours, float array (..., 4)

    Returns:
        numpy.ndarray: Multiplier broadcastable against ``src``/``dst``
    """
    if factor is BlendFactor.Zero:
        return np.zeros_like(src)
    if factor is BlendFactor.One:
        return np.ones_like(src)
    if factor is BlendFactor.SrcColor:
        return src
    if factor is BlendFactor.OneMinusSrcColor:
        return 1.0 - src
    if factor is BlendFactor.DstColor:
        return dst
    if factor is BlendFactor.OneMinusDstColor:
        return 1.0 - dst
    if factor is BlendFactor.SrcAlpha:
        return src[..., 3:4]
    if factor is BlendFactor.OneMinusSrcAlpha:
        return 1.0 - src[..., 3:4]
    if factor is BlendFactor.DstAlpha:
        return dst[..., 3:4]
    if factor is BlendFactor.OneMinusDstAlpha:
        return 1.0 - dst[..., 3:4]
    raise TypeError(f"Unsupported blend factor {factor!r}")


def blend(dst, src, dst_factor, src_factor):
    """
    Blend source colours into destination colours.

    Args:
        dst: Destination colours, float array (..., 4) in [0, 1]
        src: Source colours, float array (..., 4) in [0, 1]
        dst_factor: BlendFactor applied to ``dst``
        src_factor: BlendFactor applied to ``src``

    Returns:
        numpy.ndarray: Blended colours clamped to [0, 1]
    """
    dst = np.asarray(dst, dtype=cte.FLOAT_TYPE_NP)
    src = np.asarray(src, dtype=cte.FLOAT_TYPE_NP)
    out = dst * resolve_factor(dst_factor, src, dst) + src * resolve_factor(src_factor, src, dst)
    return np.clip(out, 0.0, 1.0)


def blend_colors(dst, src, dst_factor, src_factor):
    """Blend a single source Color into a destination Color."""
    out = blend(dst.to_array(), src.to_array(), dst_factor, src_factor)
    return Color(*(float(v) for v in out))


def blend_into(canvas, src, src_factor, dst_factor):
    """
    Blend a float source buffer into a byte canvas in place.

    Args:
        canvas: uint8 canvas of shape (height, width, 4), modified in place
        src: Source colours, float array of the same height and width
        src_factor: BlendFactor applied to the source
        dst_factor: BlendFactor applied to the canvas
    """
    if src.shape[:2] != canvas.shape[:2]:
        raise ValueError(
            f"Source buffer shape {src.shape[:2]} does not match canvas shape {canvas.shape[:2]}"
        )
    canvas[...] = to_canvas(blend(from_canvas(canvas), src, dst_factor, src_factor))
