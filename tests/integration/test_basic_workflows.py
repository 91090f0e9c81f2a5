"""
Integration tests for basic PyParallax workflows.

These tests run complete generations from configuration to canvas and
check the properties callers rely on: determinism, ordering, seamless
tiling and output encoding.
"""
import numpy as np
import pytest

GRAYSCALE_CONFIG = {
    "layers": [
        {
            "type": "noise",
            "innercolor": "#FFFFFF",
            "outercolor": "#000000",
            "seed": 1,
            "threshold": 0.2,
            "power": 1,
        }
    ]
}


class TestGenerationWorkflow:
    """End-to-end generation from configuration."""

    @pytest.mark.integration
    def test_grayscale_noise_scenario(self, taichi_backend, canvas_checks):
        import pyparallax as ppx

        canvas = ppx.generate_parallax(GRAYSCALE_CONFIG, (64, 64))
        assert canvas.shape == (64, 64, 4)
        assert canvas.dtype == np.uint8
        assert canvas_checks.is_grayscale(canvas)

        # Every pixel is exactly the shaped noise value, clipped at the threshold floor
        noise = ppx.noise.TiledNoise(ppx.noise.NoiseParameters(seed=1).with_period(64, 64))
        raw = np.clip((noise.grid() + 1.0) / 2.0, 0.0, 1.0)
        expected = ppx.color.quantize(np.maximum(0.0, raw - 0.2) / 0.8)
        np.testing.assert_array_equal(canvas[..., 0], expected)
        assert np.all(canvas[..., 0][raw <= 0.2] == 0)

    @pytest.mark.integration
    def test_generation_is_deterministic(self, taichi_backend):
        import pyparallax as ppx

        config = {
            "layers": [
                {"type": "noise", "seed": 5, "noise_type": "ridged", "innercolor": "#3060A0"},
                {"type": "points", "seed": 9, "count": 30, "pointsize": 2, "mask": True},
                {"type": "noise", "seed": 6, "sourcefactor": "SrcAlpha",
                 "destfactor": "OneMinusSrcAlpha", "threshold": "0.5"},
            ]
        }
        first = ppx.generate_parallax(config, (48, 32))
        second = ppx.generate_parallax(config, (48, 32))
        assert first.tobytes() == second.tobytes()

        generator = ppx.ParallaxGenerator.from_config(config)
        assert generator.generate((48, 32)).tobytes() == first.tobytes()
        assert generator.generate((48, 32)).tobytes() == first.tobytes()

    @pytest.mark.integration
    def test_layer_order_matters(self, taichi_backend):
        import pyparallax as ppx

        red_noise = {"type": "noise", "seed": 1, "innercolor": "#FF0000",
                     "sourcefactor": "SrcAlpha", "destfactor": "OneMinusSrcAlpha"}
        blue_points = {"type": "points", "seed": 2, "count": 200, "pointsize": 2,
                       "closecolor": "#0000FF", "sourcefactor": "One", "destfactor": "Zero"}

        forward = ppx.generate_parallax({"layers": [red_noise, blue_points]}, (32, 32))
        backward = ppx.generate_parallax({"layers": [blue_points, red_noise]}, (32, 32))
        assert not np.array_equal(forward, backward)

    @pytest.mark.integration
    def test_overwrite_layers_last_one_wins(self, taichi_backend):
        import pyparallax as ppx

        a = {"type": "noise", "seed": 1, "sourcefactor": "One", "destfactor": "Zero"}
        b = {"type": "noise", "seed": 2, "sourcefactor": "One", "destfactor": "Zero"}
        ab = ppx.generate_parallax({"layers": [a, b]}, (32, 32))
        ba = ppx.generate_parallax({"layers": [b, a]}, (32, 32))
        only_b = ppx.generate_parallax({"layers": [b]}, (32, 32))
        np.testing.assert_array_equal(ab, only_b)
        assert not np.array_equal(ab, ba)

    @pytest.mark.integration
    def test_empty_layer_list_gives_opaque_black(self):
        import pyparallax as ppx

        canvas = ppx.generate_parallax({"layers": []}, (10, 5))
        assert canvas.shape == (5, 10, 4)
        assert np.all(canvas[..., :3] == 0)
        assert np.all(canvas[..., 3] == 255)

    @pytest.mark.integration
    def test_noise_layers_tile_seamlessly(self, taichi_backend):
        """A canvas rendered at twice the period equals two copies of one period."""
        import pyparallax as ppx

        params = ppx.noise.NoiseParameters(seed=11, frequency=2, octaves=4).with_period(40, 30)
        noise = ppx.noise.TiledNoise(params)
        single = noise.grid(40, 30)
        double = noise.grid(80, 60)
        np.testing.assert_array_equal(double, np.tile(single, (2, 2)))


class TestOutputWorkflow:
    """Canvas encoding through Pillow."""

    @pytest.mark.integration
    def test_save_and_reload_png(self, tmp_path, taichi_backend):
        from PIL import Image

        import pyparallax as ppx

        canvas = ppx.generate_parallax(GRAYSCALE_CONFIG, (20, 10))
        path = tmp_path / "gray.png"
        ppx.misc.save_canvas(canvas, path)
        with Image.open(path) as image:
            np.testing.assert_array_equal(np.asarray(image), canvas)

    @pytest.mark.integration
    def test_canvas_to_image_validates_shape(self):
        import pyparallax as ppx

        with pytest.raises(ValueError):
            ppx.misc.canvas_to_image(np.zeros((4, 4, 3), dtype=np.uint8))
