"""
Fixed spacing and border-radius scales.

These never read the document: every export carries the same scales, and
customization happens after export.
"""

from __future__ import annotations

from .ir.tokens import Token, TokenMap, TokenType

# =============================================================================
# Spacing
# =============================================================================

SPACING_SCALE_PX: tuple[int, ...] = (4, 8, 12, 16, 20, 24, 32, 40, 48, 56, 64, 80, 96, 112, 128)


def generate_spacing_tokens() -> TokenMap:
    """Generate the spacing scale, named by 1-based step ("1" = 4px)."""
    tokens: TokenMap = {}

    for step, px in enumerate(SPACING_SCALE_PX, start=1):
        tokens[str(step)] = Token(
            value=f"{px}px",
            type=TokenType.SPACING,
            description=f"Spacing scale step {step}",
        )

    return tokens


# =============================================================================
# Border radius
# =============================================================================

BORDER_RADIUS_SCALE_PX: tuple[int, ...] = (0, 2, 4, 6, 8, 12, 16, 20, 24, 32)


def generate_border_radius_tokens() -> TokenMap:
    """Generate the radius scale, named by 0-based position; 0px is "none"."""
    tokens: TokenMap = {}

    for index, px in enumerate(BORDER_RADIUS_SCALE_PX):
        name = "none" if px == 0 else str(index)
        tokens[name] = Token(
            value=f"{px}px",
            type=TokenType.DIMENSION,
            description=f"Border radius {px}px",
        )

    return tokens
