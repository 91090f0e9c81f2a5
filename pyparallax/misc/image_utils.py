"""
Image conversion utilities for PyParallax canvases.

Canvases are plain numpy arrays; these helpers hand them over to Pillow
for encoding and to matplotlib for a quick on-screen preview.
"""

import numpy as np
from PIL import Image


def canvas_to_image(canvas):
    """
    Wrap a canvas in a Pillow image.

    Args:
        canvas: uint8 array of shape (height, width, 4)

    Returns:
        PIL.Image.Image: RGBA image sharing no memory with the canvas
    """
    canvas = np.asarray(canvas)
    if canvas.ndim != 3 or canvas.shape[2] != 4:
        raise ValueError(f"Canvas must have shape (height, width, 4), got {canvas.shape}")
    return Image.fromarray(np.ascontiguousarray(canvas, dtype=np.uint8), mode="RGBA")


def save_canvas(canvas, output_path):
    """
    Encode a canvas to an image file (format from the extension, PNG advised).

    Raises:
        OSError: If the file cannot be written
    """
    image = canvas_to_image(canvas)
    try:
        image.save(output_path)
    except (OSError, ValueError) as e:
        raise OSError(f"Failed to save image to '{output_path}': {e}") from e
    return output_path


def show_canvas(canvas, title=None):
    """Display a canvas with matplotlib (blocks until the window is closed)."""
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots()
    ax.imshow(canvas)
    ax.set_axis_off()
    if title:
        ax.set_title(title)
    plt.show()
    return fig
