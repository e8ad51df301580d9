"""
Token document assembly.

Runs the extractors and scale generators in a fixed order, merges their
output into the raw tier, synthesizes the semantic tier and stamps the
metadata. Output is deterministic apart from ``meta.generatedAt``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING

from .errors import ExportError
from .extractors import extract_color_tokens, extract_effect_tokens, extract_typography_tokens
from .ir.styles import EffectStyle, PaintStyle, TextStyle
from .ir.tokens import (
    DOCUMENT_VERSION,
    UNKNOWN_SOURCE,
    ExportResult,
    NameCollision,
    RawTokenSet,
    TokenDocument,
    TokenMeta,
    TokenStats,
)
from .scales import generate_border_radius_tokens, generate_spacing_tokens
from .semantic import generate_semantic_tokens

if TYPE_CHECKING:
    from .snapshot_loader import StyleSource

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a ``Z`` suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    moment = moment.astimezone(UTC)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_raw_tokens(
    paint_styles: Sequence[PaintStyle],
    text_styles: Sequence[TextStyle],
    effect_styles: Sequence[EffectStyle],
    collisions: list[NameCollision] | None = None,
) -> RawTokenSet:
    """Run every extractor and generator and merge into the raw tier."""
    colors = extract_color_tokens(paint_styles, collisions)
    typography = extract_typography_tokens(text_styles, collisions)
    effects = extract_effect_tokens(effect_styles, collisions)
    spacing = generate_spacing_tokens()
    border_radius = generate_border_radius_tokens()

    return RawTokenSet(
        color=colors,
        font_size=typography.font_size,
        spacing=spacing,
        font_family=typography.font_family,
        font_weight=typography.font_weight,
        line_height=typography.line_height,
        letter_spacing=typography.letter_spacing,
        border_radius=border_radius,
        box_shadow=effects.box_shadow,
        opacity=effects.opacity,
    )


def build_token_document(
    paint_styles: Sequence[PaintStyle],
    text_styles: Sequence[TextStyle],
    effect_styles: Sequence[EffectStyle],
    *,
    source: str | None = None,
    clock: Clock = utc_now,
) -> ExportResult:
    """Assemble a token document from three lists of style records.

    Args:
        paint_styles: Local paint styles.
        text_styles: Local text styles.
        effect_styles: Local effect styles.
        source: Identifier of the originating document; "unknown" if absent.
        clock: Returns the export time; override to pin ``generatedAt``.

    Returns:
        ExportResult with the document, its summary counts and any token
        name collisions.
    """
    collisions: list[NameCollision] = []
    raw = build_raw_tokens(paint_styles, text_styles, effect_styles, collisions)
    semantic = generate_semantic_tokens(raw)

    document = TokenDocument(
        meta=TokenMeta(
            version=DOCUMENT_VERSION,
            source=source or UNKNOWN_SOURCE,
            generated_at=format_timestamp(clock()),
        ),
        raw=raw,
        semantic=semantic,
    )
    stats = TokenStats.from_raw(raw)

    logger.debug(
        "Built token document: %d colors, %d typography, %d effects",
        stats.colors,
        stats.typography,
        stats.effects,
    )
    if collisions:
        logger.debug("%d token name collision(s) while exporting", len(collisions))

    return ExportResult(document=document, stats=stats, collisions=collisions)


def export_tokens(source: StyleSource, *, clock: Clock = utc_now) -> ExportResult:
    """Enumerate a style source and assemble its token document."""
    return build_token_document(
        source.get_local_paint_styles(),
        source.get_local_text_styles(),
        source.get_local_effect_styles(),
        source=source.file_key,
        clock=clock,
    )


def write_document(document: TokenDocument, output_path: Path, *, indent: int = 2) -> Path:
    """Serialize a token document to a JSON file.

    Args:
        document: Document to write.
        output_path: Destination; parent directories are created.
        indent: JSON indent width.

    Returns:
        Path to the written file.

    Raises:
        ExportError: If the file cannot be written.
    """
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(document.to_json(indent=indent) + "\n", encoding="utf-8")
    except OSError as e:
        raise ExportError(f"Cannot write token document: {e}", output_path) from e

    logger.info(f"Wrote token document to {output_path}")
    return output_path
