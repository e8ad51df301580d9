"""
Category extractors: local styles to raw token mappings.

Each extractor reads one kind of style record and returns token-name ->
Token mappings. Extraction is fail-soft per record: a style lacking the
data for a category is skipped for that category only.

When two styles sanitize to the same name, the later one wins. Pass a
``collisions`` list to have every overwrite recorded.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import NamedTuple

from .codec import (
    font_weight_from_style_name,
    format_number,
    letter_spacing_value,
    line_height_value,
    rgba_to_hex,
)
from .ir.styles import Effect, EffectStyle, EffectType, PaintStyle, TextStyle
from .ir.tokens import NameCollision, Token, TokenMap, TokenType
from .naming import sanitize_name

logger = logging.getLogger(__name__)


class TypographyTokens(NamedTuple):
    font_size: TokenMap
    font_family: TokenMap
    font_weight: TokenMap
    line_height: TokenMap
    letter_spacing: TokenMap


class EffectTokens(NamedTuple):
    box_shadow: TokenMap
    # Reserved; nothing populates opacity tokens yet.
    opacity: TokenMap


def _store(
    tokens: TokenMap,
    category: str,
    name: str,
    token: Token,
    collisions: list[NameCollision] | None,
) -> None:
    """Insert a token, noting when it replaces one from another style."""
    previous = tokens.get(name)
    if previous is not None and previous.original != token.original:
        logger.debug(
            "Token name collision in %s: %r from %s replaces %s",
            category,
            name,
            token.original,
            previous.original,
        )
        if collisions is not None:
            collisions.append(
                NameCollision(
                    category=category,
                    name=name,
                    original=token.original,
                    replaced=previous.original,
                )
            )
    tokens[name] = token


# =============================================================================
# Color
# =============================================================================


def extract_color_tokens(
    styles: Sequence[PaintStyle],
    collisions: list[NameCollision] | None = None,
) -> TokenMap:
    """Build color tokens from the first paint of each paint style.

    Styles whose first paint is not a solid fill (gradients, images) are
    skipped.
    """
    tokens: TokenMap = {}

    for style in styles:
        paint = style.paints[0] if style.paints else None
        if paint is None or not paint.is_solid or paint.color is None:
            logger.debug("Skipping paint style %r: first paint is not solid", style.name)
            continue

        opacity = paint.opacity if paint.opacity is not None else 1
        color = paint.color
        _store(
            tokens,
            "color",
            sanitize_name(style.name),
            Token(
                value=rgba_to_hex(color.r, color.g, color.b, opacity),
                type=TokenType.COLOR,
                description=style.description or f"Color token from {style.name}",
                original=style.id,
            ),
            collisions,
        )

    return tokens


# =============================================================================
# Typography
# =============================================================================


def extract_typography_tokens(
    styles: Sequence[TextStyle],
    collisions: list[NameCollision] | None = None,
) -> TypographyTokens:
    """Split each text style into up to five single-property tokens.

    All tokens from one style share its sanitized name, so ``fontSize.h1``
    and ``fontWeight.h1`` can be looked up together.
    """
    result = TypographyTokens({}, {}, {}, {}, {})

    for style in styles:
        name = sanitize_name(style.name)

        if style.font_size is not None:
            _store(
                result.font_size,
                "fontSize",
                name,
                Token(
                    value=f"{format_number(style.font_size)}px",
                    type=TokenType.DIMENSION,
                    description=f"Font size from {style.name}",
                    original=style.id,
                ),
                collisions,
            )

        if style.font_name is not None:
            _store(
                result.font_family,
                "fontFamily",
                name,
                Token(
                    value=style.font_name.family,
                    type=TokenType.FONT_FAMILY,
                    description=f"Font family from {style.name}",
                    original=style.id,
                ),
                collisions,
            )
            _store(
                result.font_weight,
                "fontWeight",
                name,
                Token(
                    value=font_weight_from_style_name(style.font_name.style),
                    type=TokenType.FONT_WEIGHT,
                    description=f"Font weight from {style.name}",
                    original=style.id,
                ),
                collisions,
            )

        if style.line_height is not None and style.line_height.unit is not None:
            _store(
                result.line_height,
                "lineHeight",
                name,
                Token(
                    value=line_height_value(style.line_height),
                    type=TokenType.LINE_HEIGHT,
                    description=f"Line height from {style.name}",
                    original=style.id,
                ),
                collisions,
            )

        if style.letter_spacing is not None and style.letter_spacing.value is not None:
            _store(
                result.letter_spacing,
                "letterSpacing",
                name,
                Token(
                    value=letter_spacing_value(style.letter_spacing),
                    type=TokenType.LETTER_SPACING,
                    description=f"Letter spacing from {style.name}",
                    original=style.id,
                ),
                collisions,
            )

    return result


# =============================================================================
# Effects
# =============================================================================


def shadow_value(effect: Effect) -> str:
    """Format a shadow effect as a CSS box-shadow value."""
    if effect.color is None or effect.offset is None:
        raise ValueError(f"{effect.type} effect has no color or offset")

    color = effect.color
    alpha = color.a if color.a is not None else 1
    parts = [
        f"{format_number(effect.offset.x)}px",
        f"{format_number(effect.offset.y)}px",
        f"{format_number(effect.radius)}px",
        f"{format_number(effect.spread or 0)}px",
        rgba_to_hex(color.r, color.g, color.b, alpha),
    ]
    value = " ".join(parts)
    if effect.type == EffectType.INNER_SHADOW:
        return f"inset {value}"
    return value


def extract_effect_tokens(
    styles: Sequence[EffectStyle],
    collisions: list[NameCollision] | None = None,
) -> EffectTokens:
    """Build box-shadow tokens from drop and inner shadows.

    The first shadow of a style takes the bare style name. Later shadows
    append ``-<index>``, where index is the position in the full effect
    list, so ``[blur, shadow, shadow]`` yields ``name`` and ``name-2``.
    """
    result = EffectTokens({}, {})

    for style in styles:
        base_name = sanitize_name(style.name)
        named_first = False

        for index, effect in enumerate(style.effects):
            if not effect.is_shadow:
                continue

            name = f"{base_name}-{index}" if named_first else base_name
            named_first = True
            _store(
                result.box_shadow,
                "boxShadow",
                name,
                Token(
                    value=shadow_value(effect),
                    type=TokenType.BOX_SHADOW,
                    description=f"Shadow from {style.name}",
                    original=style.id,
                ),
                collisions,
            )

    return result
