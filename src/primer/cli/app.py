"""
Root Typer application for the primer CLI.
"""

from __future__ import annotations

import typer
from typer import Typer

from primer.cli.utils import fail, make_context, output_result
from primer.core.errors import PrimerError
from primer.core.logging import configure_logging
from primer.core.settings import get_settings
from primer.ops import list_topics

app = Typer(
    name="primer",
    help="primer: runnable lessons covering the basics of Python.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from importlib.metadata import PackageNotFoundError
        from importlib.metadata import version as pkg_version

        from primer import __version__

        try:
            v = pkg_version("python-primer")
        except PackageNotFoundError:
            v = __version__
        typer.echo(f"primer {v}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Override PRIMER_LOG_LEVEL for this invocation."
    ),
    json_logs: bool | None = typer.Option(
        None, "--json-logs/--console-logs", help="Force JSON or console log rendering."
    ),
) -> None:
    """primer CLI: browse, read, run and verify Python lessons."""
    try:
        settings = get_settings()
        configure_logging(
            level=log_level or settings.log_level,
            json_format=settings.json_logs if json_logs is None else json_logs,
            service=settings.service_name,
        )
    except PrimerError as exc:
        fail("CONFIG_INVALID", exc.message)


@app.command("topics")
def topics_cmd(
    json_out: bool = typer.Option(False, "--json", help="Output as JSON."),
) -> None:
    """List the tutorial topics in reading order."""
    output_result(list_topics(make_context()), as_json=json_out, title="Topics")


# ── Sub-command registration ─────────────────────────────────────────────

from primer.cli.config import app as config_app  # noqa: E402
from primer.cli.lessons import app as lessons_app  # noqa: E402
from primer.cli.lessons import verify_cmd  # noqa: E402

app.add_typer(lessons_app, name="lessons", help="List, show and run lessons.")
app.add_typer(config_app, name="config", help="Configuration inspection.")
app.command("verify")(verify_cmd)
