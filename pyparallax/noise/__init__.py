"""
Noise engine for PyParallax.

Seeded, seamless fractal noise (fBm and ridged) evaluated with a Taichi
kernel on the CPU, plus the threshold/power shaping shared by noise
layers and points masks.

Usage:
    import pyparallax as ppx

    params = ppx.noise.NoiseParameters(seed=42, octaves=5).with_period(512, 512)
    noise = ppx.noise.TiledNoise(params)
    values = noise.grid()                       # (512, 512) in [-1, 1]
    weights = ppx.noise.shape_noise(values, threshold=0.3, power=2.0)
"""

from .perlin_noise import fisher_yates_permutation, tiled_noise_kernel
from .tiled_noise import NoiseParameters, NoiseType, TiledNoise
from .shaping import shape_noise, validate_shaping

__all__ = [
    "NoiseParameters", "NoiseType", "TiledNoise",
    "shape_noise", "validate_shaping",
    "fisher_yates_permutation", "tiled_noise_kernel",
]
