"""
CLI utility helpers: output formatting and operation context.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from enum import Enum
from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from primer.core.errors import PrimerError
from primer.core.settings import get_settings
from primer.ops.context import OperationContext
from primer.ops.result import OperationResult, PagedResult

console = Console()
err_console = Console(stderr=True)


# ── Context helper ───────────────────────────────────────────────────────


def make_context() -> OperationContext:
    """Create an ``OperationContext`` for CLI commands."""
    try:
        settings = get_settings()
    except PrimerError as exc:
        fail("CONFIG_INVALID", exc.message)
    return OperationContext(settings=settings, caller="cli")


def fail(code: str, message: str) -> NoReturn:
    """Print an error line to stderr and exit with status 1."""
    err_console.print(f"[bold red]Error[/bold red] ({code}): {escape(message)}")
    raise typer.Exit(code=1)


# ── Output helpers ───────────────────────────────────────────────────────


def _to_dict(obj: Any) -> dict[str, Any]:
    """Convert dataclass / pydantic model / dict to plain dict."""
    if hasattr(obj, "model_dump"):
        return obj.model_dump()
    if hasattr(obj, "__dataclass_fields__"):
        return asdict(obj)
    if isinstance(obj, dict):
        return obj
    return {"value": str(obj)}


def _json_default(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return str(value)


def print_json(payload: Any) -> None:
    """Write ``payload`` as indented JSON, unstyled, to stdout."""
    typer.echo(json.dumps(payload, indent=2, default=_json_default))


def output_result(
    result: OperationResult,
    *,
    as_json: bool = False,
    title: str = "",
) -> None:
    """Render an ``OperationResult`` to the terminal."""
    if not result.success:
        err = result.error
        fail(err.code if err else "ERROR", err.message if err else "Unknown error")

    data = result.data

    if as_json:
        payload = _to_dict(data) if not isinstance(data, list | tuple) else [_to_dict(d) for d in data]
        print_json(payload)
        return

    if isinstance(data, list):
        if not data:
            console.print("[dim]No items.[/dim]")
            return
        _print_table(data, title=title)
    else:
        _print_dict(_to_dict(data), title=title)
    _print_warnings(result.warnings)


def output_paged(
    result: PagedResult,
    *,
    as_json: bool = False,
    title: str = "",
) -> None:
    """Render a ``PagedResult`` to the terminal with pagination info."""
    if not result.success:
        err = result.error
        fail(err.code if err else "ERROR", err.message if err else "Unknown error")

    items = result.data or []

    if as_json:
        print_json(
            {
                "items": [_to_dict(d) for d in items],
                "total": result.total,
                "limit": result.limit,
                "offset": result.offset,
                "has_more": result.has_more,
            }
        )
        return

    if not items:
        console.print("[dim]No items.[/dim]")
        return

    _print_table(items, title=title)
    console.print(
        f"\n[dim]Showing {len(items)} of {result.total}"
        f" (offset {result.offset})[/dim]"
    )


# ── Private helpers ──────────────────────────────────────────────────────


def _print_table(items: list, *, title: str = "") -> None:
    """Render a list of dataclasses/dicts as a Rich table."""
    first = _to_dict(items[0])
    table = Table(title=title or None, show_lines=False, pad_edge=False)
    for col in first:
        table.add_column(col, overflow="fold")
    for item in items:
        d = _to_dict(item)
        table.add_row(*(escape(str(v)) for v in d.values()))
    console.print(table)


def _print_dict(data: dict[str, Any], *, title: str = "") -> None:
    """Render a single dict as key-value pairs."""
    if title:
        console.print(f"[bold]{escape(title)}[/bold]")
    for k, v in data.items():
        console.print(f"  [cyan]{k}[/cyan]: {escape(str(v))}")


def _print_warnings(warnings: list[str]) -> None:
    for warning in warnings:
        err_console.print(f"[yellow]Warning:[/yellow] {escape(warning)}")
