"""Run lessons and verify their printed output.

A lesson passes when it runs without raising and every line it prints
matches the line its documentation promises. An expected line may contain
``...``, which matches any run of characters (doctest's ELLIPSIS rule), for
values such as elapsed time or today's date.

Usage::

    from primer.registry import get_lesson
    from primer.runner import run_lesson, scratch_context

    with scratch_context() as ctx:
        run = run_lesson(get_lesson("classes/person"), ctx)
    print(run.passed, run.output)
"""

from __future__ import annotations

import io
import re
import tempfile
import time
from collections.abc import Iterator, Sequence
from contextlib import contextmanager, redirect_stdout
from dataclasses import dataclass, field
from pathlib import Path

from primer.core.context import LessonContext
from primer.core.errors import LessonExecutionError
from primer.core.logging import LogContext, get_logger
from primer.core.settings import PrimerSettings, get_settings
from primer.registry import Lesson

logger = get_logger(__name__)

ELLIPSIS = "..."


# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class LineMismatch:
    """One line where printed output and documented output disagree.

    ``expected`` or ``actual`` is ``None`` when one side ran out of lines.
    """

    line_no: int
    expected: str | None
    actual: str | None


@dataclass
class LessonRun:
    """Outcome of running a single lesson.

    Attributes:
        lesson: Lesson name (``"<topic>/<slug>"``).
        passed: ``True`` when the demo did not raise and all lines matched.
        output: Captured stdout, one entry per line.
        expected: The documented output lines.
        mismatches: Lines that did not match, in order.
        error: ``"<ExceptionType>: <message>"`` if the demo raised.
        duration_ms: Wall-clock duration of the demo.
        run_id: Identifier of the :class:`LessonContext` used.
    """

    lesson: str
    passed: bool
    output: list[str] = field(default_factory=list)
    expected: list[str] = field(default_factory=list)
    mismatches: list[LineMismatch] = field(default_factory=list)
    error: str | None = None
    duration_ms: float = 0.0
    run_id: str | None = None


# ---------------------------------------------------------------------------
# Matching
# ---------------------------------------------------------------------------


def match_line(expected: str, actual: str) -> bool:
    """Compare one line, treating ``...`` in ``expected`` as a wildcard."""
    if ELLIPSIS not in expected:
        return expected == actual
    pattern = ".*".join(re.escape(part) for part in expected.split(ELLIPSIS))
    return re.fullmatch(pattern, actual, flags=re.DOTALL) is not None


def compare_output(expected: Sequence[str], actual: Sequence[str]) -> list[LineMismatch]:
    """Return every line where ``actual`` departs from ``expected``."""
    mismatches = []
    for index in range(max(len(expected), len(actual))):
        want = expected[index] if index < len(expected) else None
        got = actual[index] if index < len(actual) else None
        if want is None or got is None or not match_line(want, got):
            mismatches.append(LineMismatch(line_no=index + 1, expected=want, actual=got))
    return mismatches


# ---------------------------------------------------------------------------
# Running
# ---------------------------------------------------------------------------


def run_lesson(lesson: Lesson, ctx: LessonContext) -> LessonRun:
    """Run ``lesson`` with stdout captured and check what it printed.

    Exceptions raised by the demo are logged and recorded on the returned
    :class:`LessonRun`; output printed before the exception is kept.
    """
    buffer = io.StringIO()
    error: str | None = None

    with LogContext(run_id=ctx.run_id, lesson=lesson.name):
        logger.debug("lesson_run_started", topic=lesson.topic.value)
        t0 = time.perf_counter()
        try:
            with redirect_stdout(buffer):
                lesson.demo(ctx)
        except Exception as exc:
            error = f"{type(exc).__name__}: {exc}"
            failure = LessonExecutionError(error, cause=exc).with_context(topic=lesson.topic.value)
            logger.warning("lesson_run_failed", exc_info=True, **failure.to_dict())
        duration_ms = (time.perf_counter() - t0) * 1000

        output = [line.rstrip() for line in buffer.getvalue().splitlines()]
        mismatches = compare_output(lesson.expected, output)
        passed = error is None and not mismatches

        logger.info(
            "lesson_run_finished",
            passed=passed,
            mismatches=len(mismatches),
            duration_ms=round(duration_ms, 3),
        )

    return LessonRun(
        lesson=lesson.name,
        passed=passed,
        output=output,
        expected=list(lesson.expected),
        mismatches=mismatches,
        error=error,
        duration_ms=duration_ms,
        run_id=ctx.run_id,
    )


@contextmanager
def scratch_context(settings: PrimerSettings | None = None) -> Iterator[LessonContext]:
    """Yield a :class:`LessonContext` with a fresh scratch directory.

    Without ``settings.workdir`` the directory is temporary and removed on
    exit; otherwise it is created under ``workdir`` and kept for inspection.
    """
    settings = settings or get_settings()

    if settings.workdir is not None:
        settings.workdir.mkdir(parents=True, exist_ok=True)
        workdir = Path(tempfile.mkdtemp(prefix="primer-", dir=settings.workdir))
        logger.debug("scratch_dir_created", path=str(workdir), kept=True)
        yield LessonContext(workdir=workdir, seed=settings.seed)
        return

    with tempfile.TemporaryDirectory(prefix="primer-") as tmp:
        logger.debug("scratch_dir_created", path=tmp, kept=False)
        yield LessonContext(workdir=Path(tmp), seed=settings.seed)


__all__ = [
    "ELLIPSIS",
    "LineMismatch",
    "LessonRun",
    "match_line",
    "compare_output",
    "run_lesson",
    "scratch_context",
]
