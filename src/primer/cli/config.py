"""
CLI: ``primer config`` - configuration inspection.
"""

from __future__ import annotations

import typer
from rich.markup import escape
from rich.table import Table

from primer.cli.utils import console, fail, print_json
from primer.core.errors import PrimerError
from primer.core.settings import get_settings

app = typer.Typer(no_args_is_help=True)

_FORMATS = ("table", "json", "env")


@app.command("show")
def show_config(
    format: str = typer.Option("table", "--format", "-f", help="Output format: table, json, env"),
) -> None:
    """Show the effective configuration."""
    if format not in _FORMATS:
        fail("VALIDATION_FAILED", f"Unknown format {format!r}; choose from {', '.join(_FORMATS)}")

    try:
        settings = get_settings()
    except PrimerError as exc:
        fail("CONFIG_INVALID", exc.message)

    values = settings.model_dump(mode="json")

    if format == "json":
        print_json(values)
        return

    if format == "env":
        for key, value in sorted(values.items()):
            typer.echo(f"PRIMER_{key.upper()}={'' if value is None else value}")
        return

    table = Table(title="Settings")
    table.add_column("Setting")
    table.add_column("Value")
    for key, value in sorted(values.items()):
        table.add_row(key, "[dim]unset[/dim]" if value is None else escape(str(value)))
    console.print(table)
