"""
Token CLI commands.

Commands:
- scan: Count the local styles in a snapshot
- export: Write the token document for a snapshot
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from styletokens.core.config import load_config
from styletokens.core.document import export_tokens, write_document
from styletokens.core.errors import StyleTokensError
from styletokens.core.ir.tokens import TokenStats
from styletokens.core.snapshot_loader import load_snapshot, scan_summary

console = Console()


def _stats_table(title: str, stats: TokenStats) -> Table:
    table = Table(title=title)
    table.add_column("Category", style="cyan")
    table.add_column("Count", justify="right")
    table.add_row("Colors", str(stats.colors))
    table.add_row("Typography", str(stats.typography))
    table.add_row("Effects", str(stats.effects))
    table.add_row("Total", f"[bold]{stats.total}[/bold]")
    return table


def scan_command(
    snapshot: Path = typer.Argument(..., help="Style snapshot (.json, .yaml, .yml)"),
) -> None:
    """Count the local paint, text and effect styles in a snapshot."""
    try:
        source = load_snapshot(snapshot)
    except StyleTokensError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    console.print(_stats_table("Local styles", scan_summary(source)))


def export_command(
    snapshot: Path = typer.Argument(..., help="Style snapshot (.json, .yaml, .yml)"),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Output file (default: [export].output or tokens.json)"
    ),
    indent: int | None = typer.Option(None, "--indent", help="JSON indent width"),
    stdout: bool = typer.Option(
        False, "--stdout", help="Print the document to stdout instead of writing a file"
    ),
    project: Path = typer.Option(
        Path("."), "--project", "-p", help="Directory holding styletokens.toml"
    ),
) -> None:
    """Export the token document for a style snapshot."""
    try:
        config = load_config(project)
        source = load_snapshot(snapshot)
        result = export_tokens(source)
    except StyleTokensError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    export_config = config.export
    width = indent if indent is not None else export_config.indent
    warnings = (
        [collision.describe() for collision in result.collisions]
        if export_config.report_collisions
        else []
    )

    if stdout:
        typer.echo(result.document.to_json(indent=width))
        for warning in warnings:
            typer.echo(f"warning: token name collision {warning}", err=True)
        return

    output_path = output or export_config.get_output_path(project)
    try:
        write_document(result.document, output_path, indent=width)
    except StyleTokensError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    console.print(f"[green]✓[/green] Wrote {output_path}")
    console.print(_stats_table("Exported tokens", result.stats))
    for warning in warnings:
        console.print(f"[yellow]Token name collision:[/yellow] {warning}")
