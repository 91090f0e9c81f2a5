"""
Layer variants for PyParallax.

The set of layer kinds is closed; ``LAYER_TYPES`` maps the configuration
``type`` field to the layer class.
"""

from .base import Layer
from .noise_layer import NoiseLayer, NoiseLayerConfig
from .points_layer import Point, PointsLayer, PointsLayerConfig, PointsMaskConfig, paint_splat

LAYER_TYPES = {
    NoiseLayer.type_name: NoiseLayer,
    PointsLayer.type_name: PointsLayer,
}

__all__ = [
    "Layer", "LAYER_TYPES",
    "NoiseLayer", "NoiseLayerConfig",
    "PointsLayer", "PointsLayerConfig", "PointsMaskConfig", "Point", "paint_splat",
]
