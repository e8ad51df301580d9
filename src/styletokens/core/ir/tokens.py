"""
Token document IR types.

A token document has two tiers: ``raw`` holds concrete primitive values
grouped into ten categories, ``semantic`` holds usage-level aliases that
point back into ``raw`` with ``{raw.<category>.<name>}`` strings.
"""

from __future__ import annotations

import json
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DOCUMENT_VERSION = "1.0.0"
UNKNOWN_SOURCE = "unknown"


class TokenType(StrEnum):
    """Type tag carried by every raw token."""

    COLOR = "color"
    DIMENSION = "dimension"
    FONT_FAMILY = "fontFamily"
    FONT_WEIGHT = "fontWeight"
    LINE_HEIGHT = "lineHeight"
    LETTER_SPACING = "letterSpacing"
    BOX_SHADOW = "boxShadow"
    SPACING = "spacing"


class _TokenModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Token(_TokenModel):
    """A named, normalized design value.

    ``value`` is always final and unit-resolved (``"16px"``, ``"#1976D2"``,
    ``700``). ``original`` is the source style's identifier and is kept for
    traceability only.
    """

    value: str | int | float
    type: TokenType
    description: str | None = None
    original: str | None = None


TokenMap = dict[str, Token]


class RawTokenSet(_TokenModel):
    """The ten raw token categories, keyed by sanitized token name."""

    color: TokenMap = Field(default_factory=dict)
    font_size: TokenMap = Field(default_factory=dict)
    spacing: TokenMap = Field(default_factory=dict)
    font_family: TokenMap = Field(default_factory=dict)
    font_weight: TokenMap = Field(default_factory=dict)
    line_height: TokenMap = Field(default_factory=dict)
    letter_spacing: TokenMap = Field(default_factory=dict)
    border_radius: TokenMap = Field(default_factory=dict)
    box_shadow: TokenMap = Field(default_factory=dict)
    opacity: TokenMap = Field(default_factory=dict)

    def category(self, name: str) -> TokenMap:
        """Look up a category by its document key (``fontSize``) or field name."""
        for field_name, info in type(self).model_fields.items():
            if name in (field_name, info.alias):
                mapping: TokenMap = getattr(self, field_name)
                return mapping
        raise KeyError(name)


class TokenMeta(_TokenModel):
    version: str = DOCUMENT_VERSION
    source: str = UNKNOWN_SOURCE
    generated_at: str


class TokenDocument(_TokenModel):
    """The exported artifact: meta, raw tier, semantic tier."""

    meta: TokenMeta
    raw: RawTokenSet
    semantic: dict[str, Any] = Field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Dump with the document's camelCase keys, omitting absent token fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


# =============================================================================
# Reporting
# =============================================================================


class TokenStats(_TokenModel):
    """Counts shown to the host UI for progress reporting."""

    colors: int = 0
    typography: int = 0
    effects: int = 0
    total: int = 0

    @classmethod
    def from_counts(cls, colors: int, typography: int, effects: int) -> TokenStats:
        return cls(
            colors=colors,
            typography=typography,
            effects=effects,
            total=colors + typography + effects,
        )

    @classmethod
    def from_raw(cls, raw: RawTokenSet) -> TokenStats:
        """Derive export counts from the raw tier's key counts."""
        return cls.from_counts(len(raw.color), len(raw.font_size), len(raw.box_shadow))


class NameCollision(_TokenModel):
    """A token overwritten by a later style that sanitized to the same name."""

    category: str
    name: str
    original: str | None = None
    replaced: str | None = None

    def describe(self) -> str:
        return (
            f"{self.category}.{self.name}: {self.replaced or '?'} "
            f"overwritten by {self.original or '?'}"
        )


class ExportResult(_TokenModel):
    """A token document together with what the host UI reports beside it."""

    document: TokenDocument
    stats: TokenStats
    collisions: list[NameCollision] = Field(default_factory=list)
