"""
Project configuration.

Parses the ``[export]`` table of ``styletokens.toml``::

    [export]
    output = "design/tokens.json"
    indent = 2
    report_collisions = true

A missing file or table means defaults. ``STYLETOKENS_LOG_LEVEL`` sets the
log level for the command-line interface.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError

CONFIG_FILE = "styletokens.toml"
LOG_LEVEL_ENV_VAR = "STYLETOKENS_LOG_LEVEL"


class ExportConfig(BaseModel):
    """Export configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    output: str = "tokens.json"
    indent: int = Field(default=2, ge=0, le=8)
    report_collisions: bool = True

    def get_output_path(self, project_root: Path) -> Path:
        """Get absolute output file path."""
        output = Path(self.output)
        if output.is_absolute():
            return output
        return project_root / output


class StyleTokensConfig(BaseModel):
    """Complete project configuration."""

    model_config = ConfigDict(frozen=True)

    export: ExportConfig = Field(default_factory=ExportConfig)


def get_config_path(project_root: Path) -> Path:
    return project_root / CONFIG_FILE


def load_config(project_root: Path) -> StyleTokensConfig:
    """
    Load configuration from styletokens.toml.

    Args:
        project_root: Directory containing styletokens.toml

    Returns:
        StyleTokensConfig with parsed values or defaults

    Raises:
        ConfigError: If the file exists but is not valid
    """
    toml_path = get_config_path(project_root)

    if not toml_path.exists():
        return StyleTokensConfig()

    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML: {e}", toml_path) from e

    export_data = data.get("export", {})
    if not export_data:
        return StyleTokensConfig()

    try:
        return StyleTokensConfig(export=ExportConfig(**export_data))
    except (ValidationError, TypeError) as e:
        raise ConfigError(f"Invalid [export] configuration: {e}", toml_path) from e


def get_log_level(default: int = logging.WARNING) -> int:
    """Read the log level from STYLETOKENS_LOG_LEVEL, falling back to ``default``."""
    value = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not value:
        return default

    level = logging.getLevelName(value)
    if isinstance(level, int):
        return level

    logging.getLogger(__name__).warning(
        "Unknown %s value '%s'. Using %s.",
        LOG_LEVEL_ENV_VAR,
        value,
        logging.getLevelName(default),
    )
    return default
