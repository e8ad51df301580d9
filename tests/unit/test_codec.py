"""Tests for the value codec: colors, font weights, line height, letter spacing."""

from __future__ import annotations

import pytest

from styletokens.core.codec import (
    FONT_WEIGHTS,
    font_weight_from_style_name,
    format_number,
    letter_spacing_value,
    line_height_value,
    rgb_to_hex,
    rgba_to_hex,
)
from styletokens.core.ir.styles import LetterSpacing, LineHeight

# =============================================================================
# Colors
# =============================================================================


class TestRgbToHex:
    def test_primaries(self):
        assert rgb_to_hex(1, 0, 0) == "#FF0000"
        assert rgb_to_hex(0, 1, 0) == "#00FF00"
        assert rgb_to_hex(0, 0, 1) == "#0000FF"

    def test_black_and_white(self):
        assert rgb_to_hex(0, 0, 0) == "#000000"
        assert rgb_to_hex(1, 1, 1) == "#FFFFFF"

    def test_uppercase_seven_chars(self):
        result = rgb_to_hex(0.0975, 0.4627, 0.8235)
        assert result == "#1976D2"
        assert len(result) == 7
        assert result == result.upper()

    def test_rounds_half_up(self):
        # 0.5 * 255 = 127.5 -> 128
        assert rgb_to_hex(0.5, 0.5, 0.5) == "#808080"

    def test_rounds_to_nearest(self):
        # 0.098 * 255 = 24.99 -> 25
        assert rgb_to_hex(0.098, 0, 0) == "#190000"


class TestRgbaToHex:
    def test_half_alpha_rounds_up(self):
        assert rgba_to_hex(1, 0, 0, 0.5) == "#FF000080"

    def test_quarter_alpha(self):
        # 0.25 * 255 = 63.75 -> 64
        assert rgba_to_hex(0, 0, 0, 0.25) == "#00000040"

    def test_zero_alpha_keeps_fourth_byte(self):
        assert rgba_to_hex(1, 1, 1, 0) == "#FFFFFF00"

    @pytest.mark.parametrize(
        "rgb",
        [(0, 0, 0), (1, 1, 1), (0.0975, 0.4627, 0.8235), (0.5, 0.25, 0.75)],
    )
    def test_opaque_matches_rgb(self, rgb):
        assert rgba_to_hex(*rgb, 1) == rgb_to_hex(*rgb)
        assert len(rgba_to_hex(*rgb, 1)) == 7


# =============================================================================
# Numbers
# =============================================================================


class TestFormatNumber:
    def test_integral_float_drops_fraction(self):
        assert format_number(16.0) == "16"
        assert format_number(0.0) == "0"
        assert format_number(-2.0) == "-2"

    def test_fraction_kept(self):
        assert format_number(0.5) == "0.5"
        assert format_number(1.2) == "1.2"
        assert format_number(-0.25) == "-0.25"

    def test_ints_pass_through(self):
        assert format_number(32) == "32"


# =============================================================================
# Font weight
# =============================================================================


class TestFontWeight:
    @pytest.mark.parametrize(
        "name,weight",
        [
            ("Thin", 100),
            ("Extra Light", 200),
            ("ExtraLight", 200),
            ("Light", 300),
            ("Regular", 400),
            ("Medium", 500),
            ("Semi Bold", 600),
            ("SemiBold", 600),
            ("Bold", 700),
            ("Extra Bold", 800),
            ("ExtraBold", 800),
            ("Black", 900),
        ],
    )
    def test_table(self, name, weight):
        assert font_weight_from_style_name(name) == weight

    def test_unknown_falls_back_to_regular(self):
        assert font_weight_from_style_name("Condensed Heavy") == 400
        assert font_weight_from_style_name("") == 400

    def test_missing_style_is_regular(self):
        assert font_weight_from_style_name(None) == 400

    def test_match_is_exact(self):
        assert font_weight_from_style_name("bold") == 400
        assert font_weight_from_style_name("Bold Italic") == 400

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            FONT_WEIGHTS["Heavy"] = 900  # type: ignore[index]


# =============================================================================
# Line height / letter spacing
# =============================================================================


class TestLineHeight:
    def test_percent_becomes_ratio(self):
        assert line_height_value(LineHeight(unit="PERCENT", value=150)) == "1.5"
        assert line_height_value(LineHeight(unit="PERCENT", value=120)) == "1.2"
        assert line_height_value(LineHeight(unit="PERCENT", value=100)) == "1"

    def test_pixels_keep_suffix(self):
        assert line_height_value(LineHeight(unit="PIXELS", value=24)) == "24px"
        assert line_height_value(LineHeight(unit="PIXELS", value=22.5)) == "22.5px"

    def test_auto_falls_back(self):
        assert line_height_value(LineHeight(unit="AUTO")) == "1.5"

    def test_unknown_unit_falls_back(self):
        assert line_height_value(LineHeight(unit="EM", value=2)) == "1.5"

    def test_percent_without_value_falls_back(self):
        assert line_height_value(LineHeight(unit="PERCENT")) == "1.5"


class TestLetterSpacing:
    def test_percent(self):
        assert letter_spacing_value(LetterSpacing(unit="PERCENT", value=-2)) == "-2%"

    def test_pixels(self):
        assert letter_spacing_value(LetterSpacing(unit="PIXELS", value=0.5)) == "0.5px"

    def test_other_units_are_pixels(self):
        assert letter_spacing_value(LetterSpacing(unit="POINTS", value=1)) == "1px"

    def test_missing_value_raises(self):
        with pytest.raises(ValueError):
            letter_spacing_value(LetterSpacing(unit="PIXELS"))
