"""
Unit tests for color_models module.

Tests packed color conversion, color normalization and hex parsing.
"""

import pytest

from PC_Libs.ColorizeLib.color_models import (
    format_hex_color,
    normalize_color,
    pack_argb,
    parse_hex_color,
    unpack_argb,
)


class TestPackedColors:
    """Tests for pack_argb and unpack_argb."""

    def test_unpacks_opaque_red(self):
        """0xFFFF0000 is opaque red."""
        assert unpack_argb(0xFFFF0000) == (255, 0, 0, 255)

    def test_unpacks_channels_in_argb_order(self):
        assert unpack_argb(0x80112233) == (0x11, 0x22, 0x33, 0x80)

    def test_packs_channels_in_argb_order(self):
        assert pack_argb((0x11, 0x22, 0x33, 0x80)) == 0x80112233

    def test_pack_and_unpack_agree(self, sample_rgba_colors):
        for color in sample_rgba_colors:
            assert unpack_argb(pack_argb(color)) == color

    def test_alpha_difference_makes_colors_unequal(self):
        assert pack_argb((1, 2, 3, 255)) != pack_argb((1, 2, 3, 0))


class TestNormalizeColor:
    """Tests for normalize_color."""

    def test_packed_integer(self):
        assert normalize_color(0xFF0000FF) == (0, 0, 255, 255)

    def test_rgb_triplet_is_opaque(self):
        assert normalize_color((10, 20, 30)) == (10, 20, 30, 255)

    def test_rgba_list(self):
        assert normalize_color([10, 20, 30, 40]) == (10, 20, 30, 40)

    def test_wrong_channel_count(self):
        with pytest.raises(ValueError):
            normalize_color((1, 2))


class TestHexColors:
    """Tests for parse_hex_color and format_hex_color."""

    def test_short_form(self):
        assert parse_hex_color("#0f0") == (0, 255, 0, 255)

    def test_without_hash(self):
        assert parse_hex_color("ff8800") == (255, 136, 0, 255)

    def test_with_alpha(self):
        assert parse_hex_color("#11223344") == (0x11, 0x22, 0x33, 0x44)

    def test_surrounding_whitespace(self):
        assert parse_hex_color("  #000000 ") == (0, 0, 0, 255)

    @pytest.mark.parametrize("text", ["", "zz", "#12345g", "#12345", "#1234567890"])
    def test_rejects_malformed(self, text):
        with pytest.raises(ValueError):
            parse_hex_color(text)

    def test_format_includes_alpha(self):
        assert format_hex_color((255, 0, 16, 128)) == "#ff001080"

    def test_format_then_parse(self):
        assert parse_hex_color(format_hex_color((1, 2, 3, 4))) == (1, 2, 3, 4)
