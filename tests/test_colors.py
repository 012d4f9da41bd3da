"""Tests for wordhunt.ui.colors – palette, color blending and button styles."""

from __future__ import annotations

import pytest

from wordhunt.ui.colors import Palette, blend_hex, button_style


# ===========================================================================
# Palette – constants exist
# ===========================================================================

class TestPalette:
    @pytest.mark.parametrize("name", ["BG", "CARD_BG", "GREEN", "BLUE", "RED", "DEV_PURPLE"])
    def test_solid_colors_are_hex(self, name):
        value = getattr(Palette, name)
        assert value.startswith("#")
        assert len(value) == 7

    def test_scrim_is_rgba(self):
        assert Palette.SCRIM.startswith("rgba(")


# ===========================================================================
# blend_hex – happy paths
# ===========================================================================

class TestBlendHexHappy:
    def test_t_zero_returns_a(self):
        assert blend_hex("#FF0000", "#0000FF", 0.0) == "#FF0000"

    def test_t_one_returns_b(self):
        assert blend_hex("#FF0000", "#0000FF", 1.0) == "#0000FF"

    def test_midpoint(self):
        result = blend_hex("#000000", "#FFFFFF", 0.5)
        r = int(result[1:3], 16)
        assert 126 <= r <= 128

    def test_same_color(self):
        assert blend_hex("#ABCDEF", "#ABCDEF", 0.5) == "#ABCDEF"

    def test_quarter_blend(self):
        result = blend_hex("#000000", "#FF0000", 0.25)
        # 0 + (255 - 0) * 0.25 = 63.75 -> 63
        assert int(result[1:3], 16) == 63


# ===========================================================================
# blend_hex – clamping and invalid inputs
# ===========================================================================

class TestBlendHexEdges:
    def test_t_negative_clamped_to_zero(self):
        assert blend_hex("#FF0000", "#0000FF", -1.0) == "#FF0000"

    def test_t_greater_than_one_clamped(self):
        assert blend_hex("#FF0000", "#0000FF", 2.0) == "#0000FF"

    def test_a_missing_hash(self):
        assert blend_hex("FF0000", "#0000FF", 0.5) == "FF0000"

    def test_b_wrong_length(self):
        assert blend_hex("#FF0000", "#FFF", 0.5) == "#FF0000"

    def test_invalid_hex_chars(self):
        assert blend_hex("#GGHHII", "#000000", 0.5) == "#GGHHII"

    def test_whitespace_padding(self):
        assert blend_hex("  #FF0000  ", "  #0000FF  ", 0.0) == "#FF0000"


# ===========================================================================
# button_style
# ===========================================================================

class TestButtonStyle:
    def test_uses_base_color(self):
        assert "background: #4CAF50;" in button_style(Palette.GREEN)

    def test_has_hover_and_disabled_states(self):
        css = button_style(Palette.RED)
        assert "QPushButton:hover" in css
        assert "QPushButton:disabled" in css

    def test_radius_and_font_size(self):
        css = button_style(Palette.BLUE, radius=10, font_size=20)
        assert "border-radius: 10px;" in css
        assert "font-size: 20px;" in css
