"""
Typed request objects for operations.

Each dataclass represents the *input* contract for a single operation
function. Requests carry only transport-agnostic data, no typer params.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ListLessonsRequest:
    """Request for :func:`primer.ops.lessons.list_lessons`.

    Attributes:
        topic: Restrict to one topic (``None`` lists every topic).
        limit: Maximum number of lessons to return.
        offset: Number of lessons to skip.
    """

    topic: str | None = None
    limit: int = 50
    offset: int = 0


@dataclass(frozen=True, slots=True)
class GetLessonRequest:
    """Request for :func:`primer.ops.lessons.get_lesson`."""

    name: str = ""


@dataclass(frozen=True, slots=True)
class RunLessonRequest:
    """Request for :func:`primer.ops.lessons.run_lesson`."""

    name: str = ""


@dataclass(frozen=True, slots=True)
class VerifyLessonsRequest:
    """Request for :func:`primer.ops.lessons.verify_lessons`.

    Attributes:
        topic: Restrict verification to one topic.
        fail_fast: Stop at the first lesson that fails.
    """

    topic: str | None = None
    fail_fast: bool = False
