"""
Parallax generator: builds layers from a configuration and composites
them onto a fresh canvas.

The canvas starts opaque black and layers are applied strictly in list
order; later layers blend on top of earlier results. The generator
holds no state besides its parsed layers, so generating twice with the
same size yields byte-identical canvases.
"""

import logging
import time

from ..backend import init_taichi
from ..color import new_canvas, validate_size
from .config import parse_layers

logger = logging.getLogger(__name__)


class ParallaxGenerator:
    """
    Ordered stack of parsed layers.

    Args:
        layers: Sequence of Layer instances

    Example:
        generator = ParallaxGenerator.from_config(config)
        canvas = generator.generate((1920, 1080))
    """

    def __init__(self, layers):
        self.layers = list(layers)

    @classmethod
    def from_config(cls, config):
        """Parse every layer of ``config``; fails before any pixel work."""
        return cls(parse_layers(config))

    def apply(self, canvas):
        """Apply every layer, in order, to ``canvas`` in place."""
        for index, layer in enumerate(self.layers):
            layer.apply(canvas)
            logger.debug("Layer %d done!", index)
        return canvas

    def generate(self, size):
        """
        Generate a canvas of ``size = (width, height)``.

        Returns:
            numpy.ndarray: uint8 RGBA canvas of shape (height, width, 4)
        """
        width, height = validate_size(size)
        init_taichi()

        start = time.perf_counter()
        canvas = new_canvas(width, height)
        self.apply(canvas)
        logger.debug("Total time: %.3f s", time.perf_counter() - start)
        return canvas


def generate_parallax(config, size):
    """
    Generate a seamless parallax background.

    Args:
        config: Mapping with a ``layers`` list of layer tables
        size: ``(width, height)`` of the output in pixels

    Returns:
        numpy.ndarray: uint8 RGBA canvas of shape (height, width, 4)

    Raises:
        ConfigError: Unknown layer type, enum name or malformed literal
        ParameterError: Invalid field value (e.g. power <= 0, threshold >= 1)
        ValueError: Invalid size
    """
    logger.debug("Generating parallax!")
    width, height = validate_size(size)
    generator = ParallaxGenerator.from_config(config)
    logger.debug("Parsed %d layers for a %dx%d canvas", len(generator.layers), width, height)
    return generator.generate((width, height))
