"""
Lesson operations.

List, inspect, run and verify registered lessons. Every function takes an
:class:`OperationContext` and a typed request and returns an
:class:`OperationResult`; registry errors become ``NOT_FOUND`` or
``VALIDATION_FAILED`` failures instead of exceptions.

A lesson whose output does not match its documentation is *not* an
operation failure: :func:`run_lesson` still succeeds, with
``LessonRun.passed`` set to ``False`` and a warning attached.
"""

from __future__ import annotations

import inspect

from primer import registry
from primer.core.errors import ErrorCategory, LessonNotFoundError, ValidationError
from primer.core.logging import get_logger
from primer.ops.context import OperationContext
from primer.ops.requests import (
    GetLessonRequest,
    ListLessonsRequest,
    RunLessonRequest,
    VerifyLessonsRequest,
)
from primer.ops.responses import LessonDetail, LessonSummary, TopicSummary, VerifyReport
from primer.ops.result import OperationResult, PagedResult, start_timer
from primer.registry import Lesson
from primer.runner import LessonRun, run_lesson as _run, scratch_context

logger = get_logger(__name__)


def _summary(lesson: Lesson) -> LessonSummary:
    return LessonSummary(
        name=lesson.name,
        topic=lesson.topic.value,
        title=lesson.title,
        order=lesson.order,
    )


def _failure_warning(run: LessonRun) -> str:
    if run.error:
        return f"{run.lesson} raised {run.error}"
    return f"{run.lesson} output differs from its documentation on {len(run.mismatches)} line(s)"


def list_topics(ctx: OperationContext) -> OperationResult[list[TopicSummary]]:
    """Topics with their lesson counts, in tutorial order."""
    timer = start_timer()
    topics = [
        TopicSummary(
            topic=topic.value,
            title=topic.heading,
            order=topic.order,
            lessons=len(registry.list_lessons(topic)),
        )
        for topic in registry.list_topics()
    ]
    return OperationResult.ok(topics, elapsed_ms=timer.elapsed_ms)


def list_lessons(
    ctx: OperationContext,
    request: ListLessonsRequest,
) -> PagedResult[LessonSummary]:
    """List lessons in tutorial order, optionally for a single topic."""
    timer = start_timer()

    if request.limit < 1 or request.offset < 0:
        return PagedResult.fail(
            "VALIDATION_FAILED",
            "limit must be positive and offset non-negative",
            category=ErrorCategory.VALIDATION,
            elapsed_ms=timer.elapsed_ms,
        )

    try:
        lessons = registry.list_lessons(request.topic)
    except ValidationError as exc:
        return PagedResult.from_error(exc, elapsed_ms=timer.elapsed_ms)

    return PagedResult.paginate(
        [_summary(lesson) for lesson in lessons],
        limit=request.limit,
        offset=request.offset,
        elapsed_ms=timer.elapsed_ms,
    )


def get_lesson(
    ctx: OperationContext,
    request: GetLessonRequest,
) -> OperationResult[LessonDetail]:
    """Return full detail for a single lesson, including its source."""
    timer = start_timer()

    if not request.name:
        return OperationResult.fail(
            "VALIDATION_FAILED",
            "lesson name is required",
            category=ErrorCategory.VALIDATION,
            elapsed_ms=timer.elapsed_ms,
        )

    try:
        lesson = registry.get_lesson(request.name)
    except LessonNotFoundError as exc:
        return OperationResult.from_error(exc, elapsed_ms=timer.elapsed_ms)

    try:
        source = inspect.getsource(lesson.demo)
    except (OSError, TypeError):
        source = ""

    detail = LessonDetail(
        name=lesson.name,
        topic=lesson.topic.value,
        title=lesson.title,
        description=lesson.description,
        order=lesson.order,
        expected=list(lesson.expected),
        source=source,
    )
    return OperationResult.ok(detail, elapsed_ms=timer.elapsed_ms)


def run_lesson(
    ctx: OperationContext,
    request: RunLessonRequest,
) -> OperationResult[LessonRun]:
    """Run one lesson in a fresh scratch directory and verify its output."""
    timer = start_timer()

    if not request.name:
        return OperationResult.fail(
            "VALIDATION_FAILED",
            "lesson name is required",
            category=ErrorCategory.VALIDATION,
            elapsed_ms=timer.elapsed_ms,
        )

    try:
        lesson = registry.get_lesson(request.name)
    except LessonNotFoundError as exc:
        return OperationResult.from_error(exc, elapsed_ms=timer.elapsed_ms)

    with scratch_context(ctx.settings) as lesson_ctx:
        run = _run(lesson, lesson_ctx)

    warnings = [] if run.passed else [_failure_warning(run)]
    return OperationResult.ok(
        run,
        warnings=warnings,
        elapsed_ms=timer.elapsed_ms,
        metadata={"request_id": ctx.request_id},
    )


def verify_lessons(
    ctx: OperationContext,
    request: VerifyLessonsRequest,
) -> OperationResult[VerifyReport]:
    """Run every selected lesson and report which ones match their documentation."""
    timer = start_timer()

    try:
        lessons = registry.list_lessons(request.topic)
    except ValidationError as exc:
        return OperationResult.from_error(exc, elapsed_ms=timer.elapsed_ms)

    report = VerifyReport(total=len(lessons))
    warnings: list[str] = []

    with scratch_context(ctx.settings) as root_ctx:
        for lesson in lessons:
            run = _run(lesson, root_ctx.child())
            report.runs.append(run)
            if run.passed:
                report.passed += 1
                continue
            report.failed += 1
            warnings.append(_failure_warning(run))
            if request.fail_fast:
                break

    report.skipped = report.total - len(report.runs)
    logger.info(
        "lessons_verified",
        total=report.total,
        passed=report.passed,
        failed=report.failed,
        skipped=report.skipped,
    )
    return OperationResult.ok(report, warnings=warnings, elapsed_ms=timer.elapsed_ms)
