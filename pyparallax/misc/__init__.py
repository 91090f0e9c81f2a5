"""
Miscellaneous Utilities for PyParallax

Available Functions:
- canvas_to_image: Convert a canvas to a Pillow RGBA image
- save_canvas: Write a canvas to a PNG file
- show_canvas: Preview a canvas with matplotlib
"""

from .image_utils import canvas_to_image, save_canvas, show_canvas

__all__ = [
    "canvas_to_image",
    "save_canvas",
    "show_canvas",
]
