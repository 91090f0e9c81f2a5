"""
Seamless fractal noise sampler for PyParallax.

Wraps the torus-mapped Perlin kernel with a coordinate transform that maps
``[0, period_x) x [0, period_y)`` onto one turn of each torus circle. Any
coordinate is first reduced modulo its period, so ``sample(x, y)`` and
``sample(x + period_x, y)`` are evaluated from identical inputs and are
bit-for-bit equal. With the periods set to the canvas dimensions the
resulting image tiles without seams.

Two noise kinds are supported:
- fbm: octaves summed with amplitude ``persistence**i`` and frequency
  ``frequency * lacunarity**i``
- ridged: same accumulation of ``1 - |noise|`` per octave, rescaled to [-1, 1]
"""

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

import numpy as np

from .. import constants as cte
from ..backend import init_taichi
from ..errors import ConfigError, ParameterError
from .perlin_noise import GRADIENTS_4D, fisher_yates_permutation, tiled_noise_kernel


class NoiseType(Enum):
    FBM = "fbm"
    RIDGED = "ridged"

    @classmethod
    def parse(cls, name):
        """
        Look a noise kind up by its configuration name.

        Raises:
            ConfigError: If ``name`` is neither "fbm" nor "ridged"
        """
        if isinstance(name, cls):
            return name
        for member in cls:
            if member.value == name:
                return member
        raise ConfigError(f"Unknown noise type {name!r}, expected 'fbm' or 'ridged'")


@dataclass(frozen=True)
class NoiseParameters:
    """
    Parameters of a fractal noise sampler.

    The periods are left unset in parsed configurations and bound to the
    canvas size right before sampling (see ``with_period``).
    """

    seed: int = cte.DEFAULT_SEED
    noise_type: NoiseType = NoiseType.FBM
    frequency: float = cte.DEFAULT_FREQUENCY
    persistence: float = cte.DEFAULT_PERSISTENCE
    lacunarity: float = cte.DEFAULT_LACUNARITY
    octaves: int = cte.DEFAULT_OCTAVES
    period_x: Optional[float] = None
    period_y: Optional[float] = None

    def __post_init__(self):
        if self.octaves < 1:
            raise ParameterError(f"octaves must be >= 1, got {self.octaves}")
        if self.octaves > cte.MAX_OCTAVES:
            raise ParameterError(f"octaves must be <= {cte.MAX_OCTAVES}, got {self.octaves}")
        if not self.frequency > 0:
            raise ParameterError(f"frequency must be > 0, got {self.frequency}")
        if not self.lacunarity > 0:
            raise ParameterError(f"lacunarity must be > 0, got {self.lacunarity}")
        # Highest octave frequency, compared in log space so huge stacks cannot overflow
        peak = math.log(self.frequency) + (self.octaves - 1) * max(0.0, math.log(self.lacunarity))
        if peak > math.log(cte.MAX_OCTAVE_FREQUENCY):
            raise ParameterError(
                f"frequency * lacunarity**(octaves - 1) must be <= {cte.MAX_OCTAVE_FREQUENCY:g}, "
                f"got frequency={self.frequency}, lacunarity={self.lacunarity}, "
                f"octaves={self.octaves}"
            )
        if not np.all(np.isfinite(self.octave_amplitudes())):
            raise ParameterError(
                f"persistence {self.persistence} overflows over {self.octaves} octaves"
            )
        for name in ("period_x", "period_y"):
            period = getattr(self, name)
            if period is not None and period <= 0:
                raise ParameterError(f"{name} must be > 0, got {period}")

    def with_period(self, period_x, period_y):
        return replace(self, period_x=period_x, period_y=period_y)

    def octave_frequencies(self):
        """Frequency of each octave: ``frequency * lacunarity**i``."""
        return self.frequency * np.power(
            self.lacunarity, np.arange(self.octaves, dtype=cte.FLOAT_TYPE_NP)
        )

    def octave_amplitudes(self):
        """Octave amplitudes normalised by the sum of their magnitudes."""
        with np.errstate(over="ignore", invalid="ignore"):
            amplitudes = np.power(
                cte.FLOAT_TYPE_NP(self.persistence),
                np.arange(self.octaves, dtype=cte.FLOAT_TYPE_NP),
            )
            total = np.sum(np.abs(amplitudes))
            return amplitudes / total


class TiledNoise:
    """
    Deterministic, seamless noise sampler.

    Args:
        params: NoiseParameters with both periods set

    Example:
        noise = TiledNoise(NoiseParameters(seed=7).with_period(256, 128))
        value = noise.sample(10, 20)        # scalar in [-1, 1]
        grid = noise.grid()                 # array of shape (128, 256)
    """

    def __init__(self, params):
        if params.period_x is None or params.period_y is None:
            raise ValueError("TiledNoise requires period_x and period_y to be set")
        self.params = params
        self._perm = fisher_yates_permutation(params.seed)
        self._frequencies = params.octave_frequencies()
        self._amplitudes = params.octave_amplitudes()

    def sample(self, x, y):
        """
        Sample noise at pixel coordinates.

        Args:
            x: Horizontal coordinate(s), scalar or array
            y: Vertical coordinate(s), broadcastable against ``x``

        Returns:
            float or numpy.ndarray: Noise values in [-1, 1], shaped like the
            broadcast of ``x`` and ``y``
        """
        xs, ys = np.broadcast_arrays(
            np.asarray(x, dtype=cte.FLOAT_TYPE_NP), np.asarray(y, dtype=cte.FLOAT_TYPE_NP)
        )
        values = self._evaluate(xs.ravel(), ys.ravel()).reshape(xs.shape)
        if values.ndim == 0:
            return float(values)
        return values

    def grid(self, width=None, height=None):
        """
        Sample every integer pixel coordinate of a width x height area.

        Defaults to one full period.

        Returns:
            numpy.ndarray: Noise values of shape (height, width)
        """
        width = int(self.params.period_x) if width is None else width
        height = int(self.params.period_y) if height is None else height
        ys, xs = np.mgrid[0:height, 0:width]
        return self.sample(xs, ys)

    def _evaluate(self, xs, ys):
        init_taichi()
        us = np.ascontiguousarray(np.mod(xs, self.params.period_x) / self.params.period_x)
        vs = np.ascontiguousarray(np.mod(ys, self.params.period_y) / self.params.period_y)
        out = np.zeros(us.shape, dtype=cte.FLOAT_TYPE_NP)
        if out.size == 0:
            return out
        ridged = 1 if self.params.noise_type is NoiseType.RIDGED else 0
        tiled_noise_kernel(us, vs, out, self._frequencies, self._amplitudes, ridged,
                           self._perm, GRADIENTS_4D)
        return out
