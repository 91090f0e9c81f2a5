"""
Points layer: scatters square splats at seeded random positions.

Points are drawn into an intermediate buffer (opaque black) and the whole
buffer is then blended into the canvas with the layer's blend-factor
pair, so overlapping splats of the same layer overwrite each other
instead of blending against partially drawn results.

Random draws come from a single per-layer stream in a fixed order:
x, y, then (masked layers only) the acceptance draw, then the distance
draw that picks the splat colour between ``far_color`` and ``close_color``.

Masked layers reject candidate positions with probability
``1 - shaped_mask_noise``. Rejections are bounded by a global budget of
``MAX_POINT_ATTEMPTS`` retries per layer; once it is spent every further
candidate is accepted as drawn, so the layer always places exactly
``count`` points.
"""

import logging
from dataclasses import dataclass, field
from typing import NamedTuple, Optional

import numpy as np

from .. import constants as cte
from ..color import (
    BLACK,
    WHITE,
    BlendFactor,
    Color,
    blend_into,
    canvas_size,
    from_canvas,
    interpolate_between,
    new_canvas,
)
from ..errors import ParameterError
from ..noise import NoiseParameters, TiledNoise, shape_noise, validate_shaping
from .base import Layer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PointsMaskConfig:
    noise: NoiseParameters = field(default_factory=NoiseParameters)
    threshold: float = cte.DEFAULT_THRESHOLD
    power: float = cte.DEFAULT_POWER

    def __post_init__(self):
        validate_shaping(self.threshold, self.power)


@dataclass(frozen=True)
class PointsLayerConfig:
    seed: int = cte.DEFAULT_SEED
    count: int = cte.DEFAULT_POINT_COUNT
    point_size: int = cte.DEFAULT_POINT_SIZE
    close_color: Color = WHITE
    far_color: Color = BLACK
    src_factor: BlendFactor = BlendFactor.One
    dst_factor: BlendFactor = BlendFactor.One
    mask: Optional[PointsMaskConfig] = None

    def __post_init__(self):
        if self.count < 0:
            raise ParameterError(f"count must be >= 0, got {self.count}")
        if self.point_size < 1:
            raise ParameterError(f"pointsize must be >= 1, got {self.point_size}")

    @property
    def masked(self):
        return self.mask is not None


class Point(NamedTuple):
    x: int
    y: int
    distance: float


def paint_splat(buffer, x, y, point_size, color):
    """
    Overwrite a square splat centred on (x, y).

    The splat has side ``2 * (point_size - 1) + 1`` and wraps around the
    buffer edges.

    Args:
        buffer: uint8 buffer of shape (height, width, 4), modified in place
        x, y: Splat centre
        point_size: Splat radius plus one (1 paints a single pixel)
        color: Colour written to every covered pixel
    """
    height, width = buffer.shape[:2]
    o = point_size - 1
    rows = np.mod(np.arange(y - o, y + o + 1), height)
    cols = np.mod(np.arange(x - o, x + o + 1), width)
    buffer[np.ix_(rows, cols)] = color.to_bytes()


class PointsLayer(Layer):
    type_name = "points"

    def mask_values(self, width, height):
        """
        Acceptance probability of every pixel for a masked layer.

        Returns:
            numpy.ndarray: Shaped mask noise of shape (height, width)
        """
        mask = self.config.mask
        noise = TiledNoise(mask.noise.with_period(width, height))
        return shape_noise(noise.grid(width, height), mask.threshold, mask.power)

    def place_points(self, width, height):
        """
        Draw the positions and colour distances of every point.

        Args:
            width: Canvas width
            height: Canvas height

        Returns:
            list[Point]: Exactly ``count`` points, in drawing order
        """
        rng = np.random.RandomState(self.config.seed & 0xFFFFFFFF)
        mask = self.mask_values(width, height) if self.config.masked else None

        points = []
        attempts = 0
        budget_spent = False
        for _ in range(self.config.count):
            while True:
                x = rng.randint(0, width)
                y = rng.randint(0, height)
                if mask is None:
                    break
                if rng.random_sample() <= mask[y, x]:
                    break
                if attempts >= cte.MAX_POINT_ATTEMPTS:
                    # Budget spent: accept the rejected candidate as drawn
                    if not budget_spent:
                        logger.warning(
                            "Points layer (seed %d) exhausted %d mask retries, "
                            "accepting remaining candidates unconditionally",
                            self.config.seed, cte.MAX_POINT_ATTEMPTS,
                        )
                        budget_spent = True
                    break
                attempts += 1
            points.append(Point(x, y, rng.random_sample()))
        return points

    def render(self, width, height):
        """
        Draw every splat into a fresh opaque black buffer.

        Returns:
            numpy.ndarray: uint8 buffer of shape (height, width, 4)
        """
        buffer = new_canvas(width, height)
        for point in self.place_points(width, height):
            color = interpolate_between(self.config.far_color, self.config.close_color,
                                        point.distance)
            paint_splat(buffer, point.x, point.y, self.config.point_size, color)
        return buffer

    def apply(self, canvas):
        width, height = canvas_size(canvas)
        buffer = self.render(width, height)
        blend_into(canvas, from_canvas(buffer), self.config.src_factor, self.config.dst_factor)
        logger.debug("Points layer (seed %d) scattered %d points", self.config.seed,
                     self.config.count)
