"""Core styletokens functionality: IR, value codec, extractors and document assembly."""

from . import ir
from .bridge import handle_message
from .codec import (
    font_weight_from_style_name,
    letter_spacing_value,
    line_height_value,
    rgb_to_hex,
    rgba_to_hex,
)
from .config import ExportConfig, StyleTokensConfig, load_config
from .document import build_raw_tokens, build_token_document, export_tokens, write_document
from .errors import ConfigError, ExportError, SnapshotError, StyleTokensError
from .extractors import extract_color_tokens, extract_effect_tokens, extract_typography_tokens
from .naming import sanitize_name
from .scales import generate_border_radius_tokens, generate_spacing_tokens
from .semantic import generate_semantic_tokens
from .snapshot_loader import StyleSource, load_snapshot, parse_snapshot, scan_summary

__all__ = [
    "ir",
    # Errors
    "StyleTokensError",
    "SnapshotError",
    "ConfigError",
    "ExportError",
    # Codec
    "rgb_to_hex",
    "rgba_to_hex",
    "font_weight_from_style_name",
    "line_height_value",
    "letter_spacing_value",
    "sanitize_name",
    # Pipeline
    "extract_color_tokens",
    "extract_typography_tokens",
    "extract_effect_tokens",
    "generate_spacing_tokens",
    "generate_border_radius_tokens",
    "generate_semantic_tokens",
    "build_raw_tokens",
    "build_token_document",
    "export_tokens",
    "write_document",
    # Host boundary
    "StyleSource",
    "load_snapshot",
    "parse_snapshot",
    "scan_summary",
    "handle_message",
    # Configuration
    "ExportConfig",
    "StyleTokensConfig",
    "load_config",
]
