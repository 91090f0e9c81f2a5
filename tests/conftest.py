"""
Pytest configuration and fixtures for PyParallax test suite.

Shared fixtures for layer tables, canvases and the Taichi backend.
"""
import os
import sys

import numpy as np
import pytest


def pytest_configure(config):
    """Configure pytest with custom settings."""
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers."""
    for item in items:
        if "taichi_backend" in getattr(item, "fixturenames", ()):
            item.add_marker("slow")

        if "import" in item.name.lower() or "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


@pytest.fixture(scope="session")
def taichi_backend():
    """Initialise Taichi on the CPU once for the whole session."""
    from pyparallax.backend import init_taichi

    init_taichi()
    return True


@pytest.fixture
def noise_table():
    """Grayscale noise layer table with explicit fields."""
    return {
        "type": "noise",
        "innercolor": "#FFFFFF",
        "outercolor": "#000000",
        "seed": 1,
        "threshold": 0.2,
        "power": 1,
    }


@pytest.fixture
def points_table():
    """Unmasked points layer table."""
    return {
        "type": "points",
        "seed": 42,
        "count": 25,
        "pointsize": 1,
        "closecolor": "#FFFFFF",
        "farcolor": "#000000",
    }


@pytest.fixture
def gray_canvas():
    """Small canvas filled with opaque mid gray."""
    from pyparallax.color import Color, new_canvas

    return new_canvas(16, 12, Color.from_hex("#808080"))


class CanvasChecks:
    """Assertion helpers for canvases."""

    @staticmethod
    def is_grayscale(canvas):
        return bool(np.all(canvas[..., 0] == canvas[..., 1]) and np.all(canvas[..., 1] == canvas[..., 2]))

    @staticmethod
    def painted_mask(canvas):
        """Pixels whose RGB differs from black."""
        return np.any(canvas[..., :3] != 0, axis=-1)


@pytest.fixture
def canvas_checks():
    return CanvasChecks()
