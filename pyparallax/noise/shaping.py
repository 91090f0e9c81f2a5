"""
Threshold and power shaping of raw noise values.

Used by noise layers to turn noise into a colour weight and by masked
points layers to turn noise into an acceptance probability.
"""

import numpy as np

from .. import constants as cte
from ..errors import ParameterError


def validate_shaping(threshold, power):
    """
    Reject shaping parameters that would divide by zero.

    Raises:
        ParameterError: If ``power <= 0`` or ``threshold >= 1``
    """
    if power <= 0:
        raise ParameterError(f"power must be > 0, got {power}")
    if threshold >= 1:
        raise ParameterError(f"threshold must be < 1, got {threshold}")


def shape_noise(values, threshold=cte.DEFAULT_THRESHOLD, power=cte.DEFAULT_POWER):
    """
    Map noise in [-1, 1] to a shaped weight.

    1. raw = clamp((value + 1) / 2, 0, 1)
    2. thresholded = max(0, raw - threshold) / (1 - threshold)
    3. shaped = thresholded ** (1 / power)

    Args:
        values: Noise values, scalar or array
        threshold: Values below this fraction map to zero (must be < 1)
        power: Shaping exponent (must be > 0)

    Returns:
        numpy.ndarray: Shaped values, same shape as ``values``
    """
    validate_shaping(threshold, power)
    raw = np.clip((np.asarray(values, dtype=cte.FLOAT_TYPE_NP) + 1.0) / 2.0, 0.0, 1.0)
    thresholded = np.maximum(0.0, raw - threshold) * (1.0 / (1.0 - threshold))
    return np.power(thresholded, 1.0 / power)
