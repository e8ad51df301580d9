"""
Style record IR types.

Local styles as a design-tool plugin hands them over: paint, text, and
effect styles. Records accept the tool's camelCase keys (``fontSize``,
``fontName``) as well as snake_case, and are validated once here so the
extractors never re-check shape.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

# =============================================================================
# Enums
# =============================================================================


class PaintType(StrEnum):
    """Paint layer types. Only SOLID produces tokens."""

    SOLID = "SOLID"
    GRADIENT_LINEAR = "GRADIENT_LINEAR"
    GRADIENT_RADIAL = "GRADIENT_RADIAL"
    GRADIENT_ANGULAR = "GRADIENT_ANGULAR"
    GRADIENT_DIAMOND = "GRADIENT_DIAMOND"
    IMAGE = "IMAGE"
    VIDEO = "VIDEO"


class EffectType(StrEnum):
    """Effect types. Only the two shadow kinds produce tokens."""

    DROP_SHADOW = "DROP_SHADOW"
    INNER_SHADOW = "INNER_SHADOW"
    LAYER_BLUR = "LAYER_BLUR"
    BACKGROUND_BLUR = "BACKGROUND_BLUR"


SHADOW_EFFECT_TYPES: frozenset[str] = frozenset(
    {EffectType.DROP_SHADOW, EffectType.INNER_SHADOW}
)


class _StyleModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# =============================================================================
# Value records
# =============================================================================


class Color(_StyleModel):
    """Fractional RGB(A) color, channels in [0, 1]."""

    r: float = Field(ge=0.0, le=1.0)
    g: float = Field(ge=0.0, le=1.0)
    b: float = Field(ge=0.0, le=1.0)
    a: float | None = Field(default=None, ge=0.0, le=1.0)


class Vector(_StyleModel):
    x: float = 0.0
    y: float = 0.0


class Paint(_StyleModel):
    """One paint layer of a paint style."""

    # Kept as a plain string so unknown paint kinds still load and get skipped.
    type: str
    color: Color | None = None
    opacity: float | None = Field(default=None, ge=0.0, le=1.0)

    @property
    def is_solid(self) -> bool:
        return self.type == PaintType.SOLID and self.color is not None


class FontName(_StyleModel):
    family: str
    style: str | None = None


class LineHeight(_StyleModel):
    """Structured line height. ``value`` is absent for AUTO."""

    unit: str | None = None
    value: float | None = None


class LetterSpacing(_StyleModel):
    unit: str | None = None
    value: float | None = None


class Effect(_StyleModel):
    """One entry of an effect style's ordered effect list."""

    type: str
    color: Color | None = None
    offset: Vector | None = None
    radius: float = 0.0
    spread: float | None = None

    @property
    def is_shadow(self) -> bool:
        return self.type in SHADOW_EFFECT_TYPES

    @model_validator(mode="after")
    def _shadow_has_geometry(self) -> Effect:
        if self.is_shadow and (self.color is None or self.offset is None):
            raise ValueError(f"{self.type} effect requires color and offset")
        return self


# =============================================================================
# Style records
# =============================================================================


class BaseStyle(_StyleModel):
    """Fields shared by every local style."""

    id: str = Field(min_length=1)
    name: str
    description: str | None = None


class PaintStyle(BaseStyle):
    kind: Literal["PAINT"] = "PAINT"
    paints: list[Paint] = Field(default_factory=list)


class TextStyle(BaseStyle):
    kind: Literal["TEXT"] = "TEXT"
    font_size: float | None = None
    font_name: FontName | None = None
    line_height: LineHeight | None = None
    letter_spacing: LetterSpacing | None = None


class EffectStyle(BaseStyle):
    kind: Literal["EFFECT"] = "EFFECT"
    effects: list[Effect] = Field(default_factory=list)


StyleRecord = Annotated[PaintStyle | TextStyle | EffectStyle, Field(discriminator="kind")]


# =============================================================================
# Snapshot
# =============================================================================


class StyleSnapshot(_StyleModel):
    """Every local style of one document, captured at a single point in time.

    Satisfies the ``StyleSource`` protocol so it can be handed straight to
    the assembler or the message bridge.
    """

    file_key: str | None = None
    paint_styles: list[PaintStyle] = Field(default_factory=list)
    text_styles: list[TextStyle] = Field(default_factory=list)
    effect_styles: list[EffectStyle] = Field(default_factory=list)

    def get_local_paint_styles(self) -> list[PaintStyle]:
        return list(self.paint_styles)

    def get_local_text_styles(self) -> list[TextStyle]:
        return list(self.text_styles)

    def get_local_effect_styles(self) -> list[EffectStyle]:
        return list(self.effect_styles)
