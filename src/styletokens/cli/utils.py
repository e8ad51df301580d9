"""
styletokens CLI utilities.

Shared helpers used across CLI modules.
"""

from __future__ import annotations

import logging
import platform

import typer

from styletokens._version import get_version
from styletokens.core.config import get_log_level


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"styletokens {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; ``--verbose`` wins over STYLETOKENS_LOG_LEVEL."""
    level = logging.DEBUG if verbose else get_log_level()
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("styletokens").setLevel(level)
