"""
styletokens Intermediate Representation (IR) types.

Style records (what the design tool hands over) live in ``styles``;
tokens and the exported document live in ``tokens``.

All types are re-exported from this package.
"""

# Style records
from .styles import (
    SHADOW_EFFECT_TYPES,
    BaseStyle,
    Color,
    Effect,
    EffectStyle,
    EffectType,
    FontName,
    LetterSpacing,
    LineHeight,
    Paint,
    PaintStyle,
    PaintType,
    StyleRecord,
    StyleSnapshot,
    TextStyle,
    Vector,
)

# Tokens
from .tokens import (
    DOCUMENT_VERSION,
    UNKNOWN_SOURCE,
    ExportResult,
    NameCollision,
    RawTokenSet,
    Token,
    TokenDocument,
    TokenMap,
    TokenMeta,
    TokenStats,
    TokenType,
)

__all__ = [
    # Style records
    "SHADOW_EFFECT_TYPES",
    "BaseStyle",
    "Color",
    "Effect",
    "EffectStyle",
    "EffectType",
    "FontName",
    "LetterSpacing",
    "LineHeight",
    "Paint",
    "PaintStyle",
    "PaintType",
    "StyleRecord",
    "StyleSnapshot",
    "TextStyle",
    "Vector",
    # Tokens
    "DOCUMENT_VERSION",
    "UNKNOWN_SOURCE",
    "ExportResult",
    "NameCollision",
    "RawTokenSet",
    "Token",
    "TokenDocument",
    "TokenMap",
    "TokenMeta",
    "TokenStats",
    "TokenType",
]
