"""
CLI: ``primer lessons`` and ``primer verify``.
"""

from __future__ import annotations

import typer
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from primer.cli.utils import (
    _to_dict,
    console,
    err_console,
    fail,
    make_context,
    output_paged,
    output_result,
    print_json,
)
from primer.ops import get_lesson, list_lessons, run_lesson, verify_lessons
from primer.ops.requests import (
    GetLessonRequest,
    ListLessonsRequest,
    RunLessonRequest,
    VerifyLessonsRequest,
)
from primer.runner import LessonRun

app = typer.Typer(no_args_is_help=True)


def _render_mismatches(run: LessonRun) -> None:
    if run.error:
        err_console.print(f"  [red]raised[/red] {escape(run.error)}")
    for m in run.mismatches:
        want = "<no line>" if m.expected is None else repr(m.expected)
        got = "<no line>" if m.actual is None else repr(m.actual)
        err_console.print(f"  line {m.line_no}: expected {escape(want)}, got {escape(got)}")


@app.command("list")
def list_cmd(
    topic: str | None = typer.Option(None, "--topic", "-t", help="Only lessons in this topic."),
    limit: int = typer.Option(50, "--limit", "-n", help="Max lessons to show."),
    offset: int = typer.Option(0, "--offset", help="Lessons to skip."),
    json_out: bool = typer.Option(False, "--json", help="Output as JSON."),
) -> None:
    """List lessons in reading order."""
    request = ListLessonsRequest(topic=topic, limit=limit, offset=offset)
    output_paged(list_lessons(make_context(), request), as_json=json_out, title="Lessons")


@app.command("show")
def show_cmd(
    name: str = typer.Argument(..., help="Lesson name, e.g. classes/person."),
    json_out: bool = typer.Option(False, "--json", help="Output as JSON."),
) -> None:
    """Show a lesson's explanation, source and documented output."""
    result = get_lesson(make_context(), GetLessonRequest(name=name))
    if json_out or not result.success:
        output_result(result, as_json=json_out)
        return

    detail = result.data
    console.print(f"[bold]{escape(detail.name)}[/bold]  {escape(detail.title)}")
    body = detail.description.partition("\n")[2].strip()
    if body:
        console.print(escape(body))
    if detail.source:
        console.print()
        console.print(Syntax(detail.source, "python", line_numbers=False))
    console.print("[bold]Output:[/bold]")
    for line in detail.expected:
        console.print(f"  {escape(line)}", highlight=False)


@app.command("run")
def run_cmd(
    name: str = typer.Argument(..., help="Lesson name, e.g. classes/person."),
    json_out: bool = typer.Option(False, "--json", help="Output as JSON."),
) -> None:
    """Run a lesson and check its output against the documentation.

    Lesson output goes to stdout; the verdict goes to stderr.
    """
    result = run_lesson(make_context(), RunLessonRequest(name=name))
    if not result.success:
        output_result(result)

    run = result.data
    if json_out:
        print_json(_to_dict(run))
    else:
        for line in run.output:
            typer.echo(line)
        if run.passed:
            err_console.print(
                f"[green]PASS[/green] {escape(run.lesson)} ({run.duration_ms:.1f} ms)"
            )
        else:
            err_console.print(f"[red]FAIL[/red] {escape(run.lesson)}")
            _render_mismatches(run)

    if not run.passed:
        raise typer.Exit(code=1)


def verify_cmd(
    topic: str | None = typer.Option(None, "--topic", "-t", help="Only verify this topic."),
    fail_fast: bool = typer.Option(False, "--fail-fast", "-x", help="Stop at the first failure."),
    json_out: bool = typer.Option(False, "--json", help="Output as JSON."),
) -> None:
    """Run every lesson and check each one's output against its documentation."""
    result = verify_lessons(make_context(), VerifyLessonsRequest(topic=topic, fail_fast=fail_fast))
    if not result.success:
        err = result.error
        fail(err.code, err.message)

    report = result.data
    if json_out:
        payload = _to_dict(report)
        payload["ok"] = report.ok
        print_json(payload)
    else:
        table = Table(title="Verification")
        table.add_column("Lesson", overflow="fold")
        table.add_column("Status")
        table.add_column("ms", justify="right")
        for run in report.runs:
            status = "[green]pass[/green]" if run.passed else "[red]FAIL[/red]"
            table.add_row(escape(run.lesson), status, f"{run.duration_ms:.1f}")
        console.print(table)
        console.print(
            f"{report.passed} passed, {report.failed} failed, {report.skipped} skipped"
            f" of {report.total}"
        )
        for run in report.runs:
            if not run.passed:
                err_console.print(f"[red]FAIL[/red] {escape(run.lesson)}")
                _render_mismatches(run)

    if not report.ok:
        raise typer.Exit(code=1)
