"""
Import tests for all PyParallax modules and submodules.

These tests ensure that all modules can be imported without errors,
which is crucial for detecting import-related issues early.
"""
import pytest


class TestMainPackageImports:
    """Test imports for the main pyparallax package."""

    @pytest.mark.importtest
    def test_main_package_import(self):
        import pyparallax
        assert hasattr(pyparallax, '__version__')
        assert hasattr(pyparallax, 'generate_parallax')

    @pytest.mark.importtest
    def test_constants_import(self):
        import pyparallax.constants
        assert pyparallax.constants.MAX_POINT_ATTEMPTS == 9999

    @pytest.mark.importtest
    def test_errors_import(self):
        from pyparallax.errors import ConfigError, ParameterError, ParallaxError
        assert issubclass(ConfigError, ParallaxError)
        assert issubclass(ParameterError, ValueError)


class TestSubpackageImports:
    """Test imports of the subpackages and their public API."""

    @pytest.mark.importtest
    def test_color_import(self):
        import pyparallax.color
        assert hasattr(pyparallax.color, 'Color')
        assert hasattr(pyparallax.color, 'BlendFactor')
        assert hasattr(pyparallax.color, 'new_canvas')

    @pytest.mark.importtest
    def test_noise_import(self):
        import pyparallax.noise
        assert hasattr(pyparallax.noise, 'TiledNoise')
        assert hasattr(pyparallax.noise, 'shape_noise')

    @pytest.mark.importtest
    def test_layers_import(self):
        import pyparallax.layers
        assert set(pyparallax.layers.LAYER_TYPES) == {"noise", "points"}

    @pytest.mark.importtest
    def test_generator_import(self):
        import pyparallax.generator
        assert hasattr(pyparallax.generator, 'ParallaxGenerator')
        assert hasattr(pyparallax.generator, 'load_config')

    @pytest.mark.importtest
    def test_misc_import(self):
        import pyparallax.misc
        assert hasattr(pyparallax.misc, 'save_canvas')

    @pytest.mark.importtest
    def test_logging_config_import(self):
        from pyparallax.logging_config import setup_logging
        assert callable(setup_logging)


class TestCLIImports:
    """Test imports for CLI modules."""

    @pytest.mark.importtest
    def test_cli_init_import(self):
        import pyparallax.cli
        assert 'generate' in pyparallax.cli.__all__

    @pytest.mark.importtest
    def test_cli_lazy_attribute(self):
        import pyparallax.cli
        from pyparallax.cli.generate_commands import generate
        assert pyparallax.cli.generate is generate
