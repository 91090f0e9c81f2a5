"""
Colour and blend model for PyParallax.

- Color: immutable RGBA colour with normalised channels, hex parsing
- BlendFactor / blend: graphics-pipeline style blend equation
- new_canvas: byte RGBA canvas allocation
"""

from .color import BLACK, WHITE, Color, interpolate_between, lerp_colors, normalize, quantize
from .canvas import canvas_size, from_canvas, new_canvas, to_canvas, validate_size
from .blending import BlendFactor, blend, blend_colors, blend_into, resolve_factor

__all__ = [
    "Color", "WHITE", "BLACK",
    "interpolate_between", "lerp_colors", "normalize", "quantize",
    "new_canvas", "validate_size", "canvas_size", "from_canvas", "to_canvas",
    "BlendFactor", "blend", "blend_colors", "blend_into", "resolve_factor",
]
