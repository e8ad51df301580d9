"""
Value codec: design-tool value records to final token values.

Colors arrive as fractional RGB(A) channels, font weights as style names
("Semi Bold"), and line height / letter spacing as ``{unit, value}``
records. Everything here is pure and table-driven.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from types import MappingProxyType

from .ir.styles import LetterSpacing, LineHeight

DEFAULT_FONT_WEIGHT = 400
DEFAULT_LINE_HEIGHT = "1.5"

# Closed table; unknown style names normalize to Regular.
FONT_WEIGHTS: Mapping[str, int] = MappingProxyType(
    {
        "Thin": 100,
        "Extra Light": 200,
        "ExtraLight": 200,
        "Light": 300,
        "Regular": 400,
        "Medium": 500,
        "Semi Bold": 600,
        "SemiBold": 600,
        "Bold": 700,
        "Extra Bold": 800,
        "ExtraBold": 800,
        "Black": 900,
    }
)


# =============================================================================
# Numbers
# =============================================================================


def format_number(value: float) -> str:
    """Render a number the way the design tool's script runtime prints it.

    Integral values lose their fractional part (``16.0`` -> ``"16"``),
    everything else uses the shortest round-trip form (``1.2``).
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _channel_to_byte(value: float) -> int:
    # Half-up, so 0.5 * 255 = 127.5 -> 128.
    return math.floor(value * 255 + 0.5)


def _hex_byte(value: float) -> str:
    return f"{_channel_to_byte(value):02X}"


# =============================================================================
# Colors
# =============================================================================


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert fractional RGB channels to ``#RRGGBB``.

    Args:
        r: Red channel in [0, 1].
        g: Green channel in [0, 1].
        b: Blue channel in [0, 1].

    Returns:
        Uppercase 7-character hex string.
    """
    return f"#{_hex_byte(r)}{_hex_byte(g)}{_hex_byte(b)}"


def rgba_to_hex(r: float, g: float, b: float, a: float) -> str:
    """Convert fractional RGBA channels to hex.

    Fully opaque colors (``a == 1``) use the 3-byte ``#RRGGBB`` form; any
    other alpha appends a fourth byte (``#RRGGBBAA``).
    """
    if a == 1:
        return rgb_to_hex(r, g, b)
    return f"{rgb_to_hex(r, g, b)}{_hex_byte(a)}"


# =============================================================================
# Typography
# =============================================================================


def font_weight_from_style_name(name: str | None) -> int:
    """Map a font style name ("Bold", "Semi Bold") to a numeric weight."""
    if name is None:
        return DEFAULT_FONT_WEIGHT
    return FONT_WEIGHTS.get(name, DEFAULT_FONT_WEIGHT)


def line_height_value(line_height: LineHeight) -> str:
    """Normalize a structured line height.

    PERCENT becomes a unitless ratio (150 -> ``"1.5"``), PIXELS keeps a
    ``px`` suffix, anything else (AUTO, missing value) falls back to 1.5.
    """
    if line_height.value is not None:
        if line_height.unit == "PERCENT":
            return format_number(line_height.value / 100)
        if line_height.unit == "PIXELS":
            return f"{format_number(line_height.value)}px"
    return DEFAULT_LINE_HEIGHT


def letter_spacing_value(letter_spacing: LetterSpacing) -> str:
    if letter_spacing.value is None:
        raise ValueError("letter spacing has no value")
    suffix = "%" if letter_spacing.unit == "PERCENT" else "px"
    return f"{format_number(letter_spacing.value)}{suffix}"
