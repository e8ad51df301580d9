"""
Style snapshot loading.

A style snapshot is the plugin-side dump of every local style in a
document, saved as JSON or YAML::

    fileKey: abc123
    paintStyles:
      - id: "S:1"
        name: Blue 500
        paints: [{type: SOLID, color: {r: 0.1, g: 0.46, b: 0.82}, opacity: 1}]
    textStyles: [...]
    effectStyles: [...]

Records are validated here, once, so the extractors can trust their shape.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import yaml
from pydantic import ValidationError

from .errors import SnapshotError
from .ir.styles import EffectStyle, PaintStyle, StyleSnapshot, TextStyle
from .ir.tokens import TokenStats

logger = logging.getLogger(__name__)

YAML_SUFFIXES = frozenset({".yaml", ".yml"})


@runtime_checkable
class StyleSource(Protocol):
    """Anything that can enumerate a document's local styles."""

    @property
    def file_key(self) -> str | None: ...

    def get_local_paint_styles(self) -> list[PaintStyle]: ...

    def get_local_text_styles(self) -> list[TextStyle]: ...

    def get_local_effect_styles(self) -> list[EffectStyle]: ...


# =============================================================================
# Loading
# =============================================================================


def parse_snapshot(data: dict[str, Any]) -> StyleSnapshot:
    """Validate raw snapshot data.

    Raises:
        SnapshotError: If the data does not describe a style snapshot.
    """
    if not isinstance(data, dict):
        raise SnapshotError(f"Expected a mapping at the top level, got {type(data).__name__}")
    try:
        return StyleSnapshot.model_validate(data)
    except ValidationError as e:
        raise SnapshotError(f"Invalid style snapshot: {e}") from e


def load_snapshot(path: Path) -> StyleSnapshot:
    """Load a style snapshot from a JSON or YAML file.

    Args:
        path: Snapshot file; ``.yaml``/``.yml`` parse as YAML, anything
            else as JSON.

    Returns:
        Validated StyleSnapshot.

    Raises:
        SnapshotError: If the file is missing, unparsable or invalid.
    """
    if not path.exists():
        raise SnapshotError("Style snapshot not found", path)

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SnapshotError(f"Cannot read style snapshot: {e}", path) from e

    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(content)
        else:
            data = json.loads(content)
    except yaml.YAMLError as e:
        raise SnapshotError(f"Invalid YAML: {e}", path) from e
    except json.JSONDecodeError as e:
        raise SnapshotError(f"Invalid JSON: {e}", path) from e

    if data is None:
        raise SnapshotError("Empty style snapshot", path)

    try:
        snapshot = parse_snapshot(data)
    except SnapshotError as e:
        raise SnapshotError(e.message, path) from e

    logger.debug(
        f"Loaded {len(snapshot.paint_styles)} paint, {len(snapshot.text_styles)} text "
        f"and {len(snapshot.effect_styles)} effect styles from {path}"
    )
    return snapshot


# =============================================================================
# Scanning
# =============================================================================


def scan_summary(source: StyleSource) -> TokenStats:
    """Count local styles per kind, before any extraction."""
    return TokenStats.from_counts(
        colors=len(source.get_local_paint_styles()),
        typography=len(source.get_local_text_styles()),
        effects=len(source.get_local_effect_styles()),
    )
