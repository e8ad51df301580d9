"""
styletokens CLI package.

- tokens.py: scan and export commands
- utils.py: version and logging helpers
"""

from __future__ import annotations

import typer

from styletokens.cli.tokens import export_command, scan_command
from styletokens.cli.utils import configure_logging, version_callback

app = typer.Typer(
    help="Turn a design tool's local styles into a design tokens document.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose)


app.command("scan")(scan_command)
app.command("export")(export_command)


def main() -> None:
    app()


__all__ = ["app", "main"]
