"""
Error types for style snapshot loading, configuration, and token export.
"""

from __future__ import annotations

from pathlib import Path


class StyleTokensError(Exception):
    """Base exception for all styletokens errors."""

    def __init__(self, message: str, path: Path | None = None):
        self.message = message
        self.path = path
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with the offending file if known."""
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message


class SnapshotError(StyleTokensError):
    """
    Raised when a style snapshot cannot be read or validated.

    Examples:
    - Snapshot file does not exist
    - Invalid JSON or YAML
    - Style record missing its name or identifier
    - Shadow effect without a color or offset
    """

    pass


class ConfigError(StyleTokensError):
    """
    Raised when styletokens.toml cannot be parsed.

    Examples:
    - Invalid TOML syntax
    - Negative indent
    - Wrong value type for a known key
    """

    pass


class ExportError(StyleTokensError):
    """
    Raised when a token document cannot be assembled or written.

    Examples:
    - Output directory cannot be created
    - Output file is not writable
    """

    pass
