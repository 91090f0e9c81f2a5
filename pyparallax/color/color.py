"""
RGBA colour type for PyParallax.

Colours hold four normalised float channels in [0, 1]. The same domain
is used for every blend computation; canvases store bytes and are
converted at the blend boundary (see ``canvas``).
"""

import string
from dataclasses import dataclass

import numpy as np

from .. import constants as cte
from ..errors import ConfigError


@dataclass(frozen=True)
class Color:
    """Immutable RGBA colour with normalised channels."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def from_hex(cls, text):
        """
        Parse a hex colour string.

        Accepted forms are ``#RGB``, ``#RGBA``, ``#RRGGBB`` and ``#RRGGBBAA``.
        The leading ``#`` is optional.

        Args:
            text: Hex-encoded colour

        Returns:
            Color: Parsed colour, fully opaque unless an alpha digit pair is given

        Raises:
            ConfigError: If the string is not a valid hex colour
        """
        if not isinstance(text, str):
            raise ConfigError(f"Colour must be a hex string, got {text!r}")
        digits = text[1:] if text.startswith("#") else text
        if len(digits) in (3, 4):
            digits = "".join(c * 2 for c in digits)
        if len(digits) not in (6, 8) or not all(c in string.hexdigits for c in digits):
            raise ConfigError(f"Invalid hex colour '{text}'")
        channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        if len(channels) == 3:
            channels.append(cte.CHANNEL_MAX)
        return cls(*(c / cte.CHANNEL_MAX for c in channels))

    def with_alpha(self, alpha):
        return Color(self.r, self.g, self.b, float(alpha))

    def to_array(self):
        """Return the channels as a float array of shape (4,)."""
        return np.array([self.r, self.g, self.b, self.a], dtype=cte.FLOAT_TYPE_NP)

    def to_bytes(self):
        """Quantise to a tuple of four 0-255 integers."""
        return tuple(int(v) for v in quantize(self.to_array()))

    def to_hex(self):
        return "#" + "".join(f"{v:02X}" for v in self.to_bytes())


WHITE = Color(1.0, 1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0, 1.0)


def interpolate_between(start, end, weight):
    """
    Linear interpolation between two colours, alpha included.

    Args:
        start: Colour returned for ``weight == 0``
        end: Colour returned for ``weight == 1``
        weight: Interpolation factor

    Returns:
        Color: ``start + (end - start) * weight`` per channel
    """
    a = start.to_array()
    b = end.to_array()
    return Color(*(float(v) for v in a + (b - a) * weight))


def lerp_colors(start, end, weights):
    """
    Vectorised colour interpolation.

    Args:
        start: Colour for weight 0
        end: Colour for weight 1
        weights: Array of interpolation factors, any shape

    Returns:
        numpy.ndarray: Float array of shape ``weights.shape + (4,)``
    """
    a = start.to_array()
    b = end.to_array()
    w = np.asarray(weights, dtype=cte.FLOAT_TYPE_NP)[..., None]
    return a + (b - a) * w


def quantize(values):
    """
    Convert normalised channel values to bytes.

    Values are clamped to [0, 1] and rounded half up.

    Args:
        values: Float array, any shape

    Returns:
        numpy.ndarray: uint8 array of the same shape
    """
    v = np.clip(np.asarray(values, dtype=cte.FLOAT_TYPE_NP), 0.0, 1.0)
    return np.floor(v * cte.CHANNEL_MAX + 0.5).astype(cte.CHANNEL_TYPE_NP)


def normalize(channels):
    """Convert byte channels to normalised floats."""
    return np.asarray(channels, dtype=cte.FLOAT_TYPE_NP) / cte.CHANNEL_MAX
