"""Unit tests for the colour type and canvas helpers."""

import numpy as np
import pytest

from pyparallax.color import (
    BLACK,
    WHITE,
    Color,
    interpolate_between,
    lerp_colors,
    new_canvas,
    quantize,
    validate_size,
)
from pyparallax.errors import ConfigError


class TestHexParsing:

    @pytest.mark.unit
    def test_six_digit_hex_is_opaque(self):
        color = Color.from_hex("#FF8000")
        assert color.to_bytes() == (255, 128, 0, 255)

    @pytest.mark.unit
    def test_eight_digit_hex_carries_alpha(self):
        assert Color.from_hex("#00000080").to_bytes() == (0, 0, 0, 128)

    @pytest.mark.unit
    def test_short_forms_expand(self):
        assert Color.from_hex("#F80") == Color.from_hex("#FF8800")
        assert Color.from_hex("#F80C") == Color.from_hex("#FF8800CC")

    @pytest.mark.unit
    def test_hash_is_optional_and_case_insensitive(self):
        assert Color.from_hex("abcdef") == Color.from_hex("#ABCDEF")

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["#GGGGGG", "#12345", "", "#", "red"])
    def test_invalid_hex_raises(self, text):
        with pytest.raises(ConfigError):
            Color.from_hex(text)

    @pytest.mark.unit
    def test_non_string_raises(self):
        with pytest.raises(ConfigError):
            Color.from_hex(0xFFFFFF)

    @pytest.mark.unit
    def test_to_hex_round_trip(self):
        assert Color.from_hex("#12AB34CD").to_hex() == "#12AB34CD"


class TestInterpolation:

    @pytest.mark.unit
    def test_endpoints(self):
        assert interpolate_between(BLACK, WHITE, 0.0) == BLACK
        assert interpolate_between(BLACK, WHITE, 1.0) == WHITE

    @pytest.mark.unit
    def test_midpoint_includes_alpha(self):
        start = Color(0.0, 0.2, 0.4, 0.0)
        end = Color(1.0, 0.6, 0.4, 1.0)
        mid = interpolate_between(start, end, 0.5)
        assert mid.r == pytest.approx(0.5)
        assert mid.g == pytest.approx(0.4)
        assert mid.b == pytest.approx(0.4)
        assert mid.a == pytest.approx(0.5)

    @pytest.mark.unit
    def test_lerp_colors_matches_scalar(self):
        weights = np.array([[0.0, 0.25], [0.5, 1.0]])
        start = Color.from_hex("#102030")
        end = Color.from_hex("#F0E0D0")
        out = lerp_colors(start, end, weights)
        assert out.shape == (2, 2, 4)
        for idx in np.ndindex(weights.shape):
            expected = interpolate_between(start, end, weights[idx]).to_array()
            np.testing.assert_allclose(out[idx], expected)

    @pytest.mark.unit
    def test_with_alpha(self):
        assert WHITE.with_alpha(0.25).a == 0.25
        assert WHITE.with_alpha(0.25).r == 1.0


class TestQuantize:

    @pytest.mark.unit
    def test_rounds_half_up_and_clamps(self):
        values = np.array([-0.5, 0.0, 0.4 / 255, 0.6 / 255, 1.0, 2.0])
        np.testing.assert_array_equal(quantize(values), [0, 0, 0, 1, 255, 255])

    @pytest.mark.unit
    def test_byte_round_trip_is_exact(self):
        channels = np.arange(256)
        np.testing.assert_array_equal(quantize(channels / 255.0), channels)


class TestCanvas:

    @pytest.mark.unit
    def test_new_canvas_is_opaque_black(self):
        canvas = new_canvas(5, 3)
        assert canvas.shape == (3, 5, 4)
        assert canvas.dtype == np.uint8
        assert np.all(canvas[..., :3] == 0)
        assert np.all(canvas[..., 3] == 255)

    @pytest.mark.unit
    def test_new_canvas_fill_color(self):
        canvas = new_canvas(2, 2, Color.from_hex("#11223344"))
        assert np.all(canvas == np.array([0x11, 0x22, 0x33, 0x44], dtype=np.uint8))

    @pytest.mark.unit
    @pytest.mark.parametrize("size", [(0, 10), (10, -1), (1.5, 2), (True, 4), "64x64", (64,)])
    def test_invalid_size(self, size):
        with pytest.raises(ValueError):
            validate_size(size)

    @pytest.mark.unit
    def test_integral_floats_accepted(self):
        assert validate_size((64.0, 32)) == (64, 32)
