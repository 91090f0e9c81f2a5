"""
Canvas helpers for PyParallax.

A canvas is a numpy uint8 array of shape (height, width, 4), row-major
RGBA. Its dimensions are fixed at allocation; layers mutate it in place.
"""

import numpy as np

from .. import constants as cte
from .color import BLACK, normalize, quantize


def new_canvas(width, height, color=BLACK):
    """
    Allocate a canvas filled with a single colour.

    Args:
        width: Canvas width in pixels (> 0)
        height: Canvas height in pixels (> 0)
        color: Fill colour (default: opaque black)

    Returns:
        numpy.ndarray: uint8 array of shape (height, width, 4)
    """
    width, height = validate_size((width, height))
    canvas = np.empty((height, width, 4), dtype=cte.CHANNEL_TYPE_NP)
    canvas[...] = color.to_bytes()
    return canvas


def validate_size(size):
    """Return ``(width, height)`` as ints, raising ValueError unless both are positive."""
    try:
        width, height = size
    except (TypeError, ValueError):
        raise ValueError(f"Size must be a (width, height) pair, got {size!r}") from None
    if isinstance(width, bool) or isinstance(height, bool):
        raise ValueError(f"Size must be integers, got {size!r}")
    if int(width) != width or int(height) != height:
        raise ValueError(f"Size must be integers, got {size!r}")
    width, height = int(width), int(height)
    if width <= 0 or height <= 0:
        raise ValueError(f"Size must be positive, got ({width}, {height})")
    return width, height


def canvas_size(canvas):
    """Return ``(width, height)`` of a canvas."""
    height, width = canvas.shape[:2]
    return width, height


def from_canvas(canvas):
    return normalize(canvas)


def to_canvas(values):
    return quantize(values)
