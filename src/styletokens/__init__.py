"""
styletokens - design tokens from a design tool's local styles.

Converts paint, text and effect styles into a two-tier token document:
raw primitive values plus semantic aliases that reference them.
"""

from __future__ import annotations

from ._version import get_version

# Re-export commonly used types for convenience
from .core import ir
from .core.document import build_token_document, export_tokens
from .core.errors import ConfigError, ExportError, SnapshotError, StyleTokensError
from .core.snapshot_loader import load_snapshot

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "build_token_document",
    "export_tokens",
    "load_snapshot",
    "StyleTokensError",
    "SnapshotError",
    "ConfigError",
    "ExportError",
]
