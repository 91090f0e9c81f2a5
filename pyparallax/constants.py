"""
Shared constants for PyParallax.

Numeric precision used by the Taichi kernels and numpy helpers, plus the
documented default values of every layer field.
"""

import math

import numpy as np
import taichi as ti

# Precision of the noise kernels and of the blend math
FLOAT_TYPE_TI = ti.f64
FLOAT_TYPE_NP = np.float64

# Canvas channel storage
CHANNEL_TYPE_NP = np.uint8
CHANNEL_MAX = 255

# Field defaults shared by noise layers and point masks
DEFAULT_SEED = 1234
DEFAULT_PERSISTENCE = 0.5
DEFAULT_LACUNARITY = math.pi * 2 / 3
DEFAULT_FREQUENCY = 1.0
DEFAULT_OCTAVES = 3
DEFAULT_THRESHOLD = 0.0
DEFAULT_POWER = 1.0

# Points layer defaults
DEFAULT_POINT_COUNT = 100
DEFAULT_POINT_SIZE = 1

# Upper bounds on the octave stack; lattice coordinates must stay well inside int32
MAX_OCTAVES = 64
MAX_OCTAVE_FREQUENCY = 1.0e6

# Global rejection budget of a masked points layer
MAX_POINT_ATTEMPTS = 9999
