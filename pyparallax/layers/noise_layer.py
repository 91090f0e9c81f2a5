"""
Noise layer: paints every pixel of the canvas from tiled noise.

Per pixel, the noise value is shaped with the layer threshold and power,
used to interpolate between the outer and inner colour, and the result
(with alpha set to the shaped value) is blended into the canvas with the
layer's blend-factor pair.
"""

import logging
from dataclasses import dataclass, field

from .. import constants as cte
from ..color import BLACK, WHITE, BlendFactor, Color, blend_into, canvas_size, lerp_colors
from ..noise import NoiseParameters, TiledNoise, shape_noise, validate_shaping
from .base import Layer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoiseLayerConfig:
    inner_color: Color = WHITE
    outer_color: Color = BLACK
    noise: NoiseParameters = field(default_factory=NoiseParameters)
    threshold: float = cte.DEFAULT_THRESHOLD
    power: float = cte.DEFAULT_POWER
    src_factor: BlendFactor = BlendFactor.One
    dst_factor: BlendFactor = BlendFactor.One

    def __post_init__(self):
        validate_shaping(self.threshold, self.power)


class NoiseLayer(Layer):
    type_name = "noise"

    def shaped_values(self, width, height):
        """
        Shaped noise weight of every pixel.

        Returns:
            numpy.ndarray: Values in [0, 1] of shape (height, width)
        """
        noise = TiledNoise(self.config.noise.with_period(width, height))
        return shape_noise(noise.grid(width, height), self.config.threshold, self.config.power)

    def apply(self, canvas):
        width, height = canvas_size(canvas)
        weights = self.shaped_values(width, height)

        src = lerp_colors(self.config.outer_color, self.config.inner_color, weights)
        src[..., 3] = weights

        blend_into(canvas, src, self.config.src_factor, self.config.dst_factor)
        logger.debug("Noise layer (seed %d) applied to %dx%d canvas",
                     self.config.noise.seed, width, height)
