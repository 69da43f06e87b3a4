"""
Typed response objects for operations.

Each dataclass represents the *output* of a single operation beyond the
generic :class:`OperationResult` envelope. Responses carry only domain data,
no CLI formatting.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from primer.runner import LessonRun


@dataclass(frozen=True, slots=True)
class TopicSummary:
    """One row of :func:`primer.ops.lessons.list_topics`."""

    topic: str
    title: str
    order: int
    lessons: int


@dataclass(frozen=True, slots=True)
class LessonSummary:
    """One row of :func:`primer.ops.lessons.list_lessons`."""

    name: str
    topic: str
    title: str
    order: int


@dataclass(frozen=True, slots=True)
class LessonDetail:
    """Full view of a lesson for :func:`primer.ops.lessons.get_lesson`."""

    name: str
    topic: str
    title: str
    description: str
    order: int
    expected: list[str] = field(default_factory=list)
    source: str = ""


@dataclass(slots=True)
class VerifyReport:
    """Result payload for :func:`primer.ops.lessons.verify_lessons`.

    ``total`` counts lessons selected for verification; with ``fail_fast``
    fewer than ``total`` may have run (see ``skipped``).
    """

    total: int = 0
    passed: int = 0
    failed: int = 0
    skipped: int = 0
    runs: list[LessonRun] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.failed == 0
