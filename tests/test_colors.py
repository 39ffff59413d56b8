"""Tests for color formatting."""

import re

import pytest

from varsheet.colors import format_color, has_rgb_channels, rgb_to_hex, rgb_to_rgba
from varsheet.exceptions import InvalidColorError, VarsheetError
from varsheet.models import Color


HEX_RE = re.compile(r"^#[0-9a-f]{6}$")
RGBA_RE = re.compile(r"^rgba\(\d+, \d+, \d+, \d+\.\d{2}\)$")


class TestRgbToHex:
    """Tests for hex notation."""

    def test_basic(self):
        assert rgb_to_hex({"r": 0.2, "g": 0.4, "b": 1.0}) == "#3366ff"

    def test_zero_padding(self):
        """Single hex digits are left-padded with zero."""
        assert rgb_to_hex({"r": 0, "g": 1 / 255, "b": 15 / 255}) == "#00010f"

    def test_lowercase(self):
        assert rgb_to_hex({"r": 1, "g": 1, "b": 1}) == "#ffffff"

    def test_half_rounds_up(self):
        """0.5 * 255 = 127.5 rounds up to 128 (0x80)."""
        assert rgb_to_hex({"r": 0.5, "g": 0.5, "b": 0.5}) == "#808080"

    def test_ignores_alpha(self):
        assert rgb_to_hex({"r": 0, "g": 0, "b": 0, "a": 0.3}) == "#000000"

    def test_accepts_color_dataclass(self):
        assert rgb_to_hex(Color(r=1, g=0, b=0)) == "#ff0000"

    def test_missing_channel(self):
        with pytest.raises(InvalidColorError) as exc_info:
            rgb_to_hex({"r": 0.5, "g": 0.5})

        assert "'b'" in str(exc_info.value)

    def test_non_numeric_channel(self):
        with pytest.raises(InvalidColorError):
            rgb_to_hex({"r": "0.5", "g": 0.5, "b": 0.5})

    def test_boolean_channel_is_not_numeric(self):
        with pytest.raises(InvalidColorError):
            rgb_to_hex({"r": True, "g": 0, "b": 0})

    def test_not_a_mapping(self):
        with pytest.raises(InvalidColorError):
            rgb_to_hex("#ff0000")


class TestRgbToRgba:
    """Tests for functional notation."""

    def test_basic(self):
        assert rgb_to_rgba({"r": 0, "g": 0, "b": 0, "a": 0.5}) == "rgba(0, 0, 0, 0.50)"

    def test_alpha_always_two_decimals(self):
        assert rgb_to_rgba({"r": 1, "g": 1, "b": 1, "a": 0}).endswith(", 0.00)")
        assert rgb_to_rgba({"r": 1, "g": 1, "b": 1, "a": 0.1}).endswith(", 0.10)")
        assert rgb_to_rgba({"r": 1, "g": 1, "b": 1, "a": 0.256}).endswith(", 0.26)")

    @pytest.mark.parametrize("alpha,expected", [
        (0.125, "0.13"),
        (0.625, "0.63"),
        (0.375, "0.38"),
    ])
    def test_alpha_ties_round_up(self, alpha, expected):
        """Exact binary ties round up, matching the design tool's toFixed."""
        assert format_color({"r": 0, "g": 0, "b": 0, "a": alpha}) == f"rgba(0, 0, 0, {expected})"

    def test_alpha_inexact_tie_uses_binary_value(self):
        # 0.615 is stored just below the tie
        assert rgb_to_rgba({"r": 0, "g": 0, "b": 0, "a": 0.615}).endswith(", 0.61)")

    def test_channels_scaled(self):
        assert rgb_to_rgba({"r": 0.2, "g": 0.4, "b": 0.8, "a": 0.25}) == "rgba(51, 102, 204, 0.25)"

    def test_missing_alpha(self):
        with pytest.raises(InvalidColorError) as exc_info:
            rgb_to_rgba({"r": 0, "g": 0, "b": 0})

        assert "'a'" in str(exc_info.value)

    def test_missing_rgb(self):
        with pytest.raises(InvalidColorError):
            rgb_to_rgba({"g": 0, "b": 0, "a": 0.5})


class TestFormatColor:
    """Tests for notation selection."""

    @pytest.mark.parametrize("color", [
        {"r": 0.1, "g": 0.2, "b": 0.3},
        {"r": 0.1, "g": 0.2, "b": 0.3, "a": 1},
        {"r": 0.1, "g": 0.2, "b": 0.3, "a": 1.0},
        {"r": 0, "g": 0, "b": 0},
        {"r": 1, "g": 1, "b": 1, "a": None},
    ])
    def test_opaque_colors_use_hex(self, color):
        assert HEX_RE.match(format_color(color))

    @pytest.mark.parametrize("alpha", [0, 0.01, 0.5, 0.75, 0.999])
    def test_translucent_colors_use_rgba(self, alpha):
        result = format_color({"r": 0.3, "g": 0.6, "b": 0.9, "a": alpha})
        assert RGBA_RE.match(result)

    def test_half_alpha_literal(self):
        """Alpha 0.5 renders as the literal two-decimal string."""
        assert format_color({"r": 0, "g": 0, "b": 0, "a": 0.5}) == "rgba(0, 0, 0, 0.50)"

    def test_non_numeric_alpha_rejected(self):
        with pytest.raises(InvalidColorError):
            format_color({"r": 0, "g": 0, "b": 0, "a": "half"})

    def test_invalid_color_is_varsheet_error(self):
        with pytest.raises(VarsheetError):
            format_color({})


class TestHasRgbChannels:
    """Tests for the channel presence check."""

    def test_complete(self):
        assert has_rgb_channels({"r": 0, "g": 0, "b": 0}) is True

    def test_partial(self):
        assert has_rgb_channels({"r": 0, "g": 0}) is False

    def test_non_mapping(self):
        assert has_rgb_channels(16) is False
        assert has_rgb_channels(None) is False

    def test_color_dataclass(self):
        assert has_rgb_channels(Color(0, 0, 0)) is True
