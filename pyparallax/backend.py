"""
Taichi backend initialisation for PyParallax.

Generation only ever runs on the CPU backend. Float64 is the default
precision and fast-math is off so that kernel output is reproducible
bit-for-bit between runs.
"""

import logging

import taichi as ti

from . import constants as cte

logger = logging.getLogger(__name__)

_initialized = False


def init_taichi(**kwargs):
    """
    Initialise Taichi once per process.

    Later calls are no-ops, so every public entry point can call this
    without resetting state a previous call already set up.

    Args:
        **kwargs: Extra keyword arguments forwarded to ``ti.init``.
    """
    global _initialized
    if _initialized:
        return
    options = dict(arch=ti.cpu, default_fp=cte.FLOAT_TYPE_TI, fast_math=False, offline_cache=False)
    options.update(kwargs)
    ti.init(**options)
    _initialized = True
    logger.debug("Taichi initialised on the CPU backend")
