"""
Generator orchestration for PyParallax.

- generate_parallax: config + size -> composited canvas
- ParallaxGenerator: parsed, reusable layer stack
- load_config / load_config_string: TOML configuration readers
"""

from .config import (
    get_or_default,
    load_config,
    load_config_string,
    parse_layer,
    parse_layers,
)
from .parallax import ParallaxGenerator, generate_parallax

__all__ = [
    "generate_parallax", "ParallaxGenerator",
    "load_config", "load_config_string",
    "parse_layer", "parse_layers", "get_or_default",
]
