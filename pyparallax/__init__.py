"""
PyParallax: procedural, seamless parallax backgrounds.

Composites an ordered list of generated layers (tiled fractal noise and
scattered point splats) onto an RGBA canvas using graphics-pipeline blend
factors. Noise evaluation runs in Taichi kernels on the CPU.

Usage:
    import pyparallax as ppx

    config = ppx.generator.load_config("space.toml")
    canvas = ppx.generate_parallax(config, (1920, 1080))
    ppx.misc.save_canvas(canvas, "space.png")
"""

__version__ = "0.1.0"

from . import color, constants, errors, generator, layers, misc, noise
from .errors import ConfigError, ParallaxError, ParameterError
from .generator import ParallaxGenerator, generate_parallax, load_config

__all__ = [
    "__version__",
    "color", "constants", "errors", "generator", "layers", "misc", "noise",
    "ConfigError", "ParallaxError", "ParameterError",
    "ParallaxGenerator", "generate_parallax", "load_config",
]
