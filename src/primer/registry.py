"""Lesson registry for registering and discovering tutorial lessons.

Lessons are plain functions in the topic modules under
:mod:`primer.lessons`, declared with :func:`register_lesson`::

    @register_lesson(Topic.CLASSES, "person", expected=[
        "Hello, my name is Alice and I am 30 years old.",
    ])
    def demo_person(ctx: LessonContext) -> None:
        \"\"\"A class bundles data with the functions that use it.\"\"\"
        print(Person("Alice", 30).greet())

Discovery rules:

1. Topic modules are imported lazily on the first lookup.
2. Within a topic, lessons are ordered by declaration.
3. Title and description come from the demo's docstring (or the slug).

Manifesto:
    A central registry lets the runner, the ops layer and the CLI find
    lessons by name or topic without importing every topic module up front.

Tags:
    primer, registry, lesson-discovery, lookup
"""

from __future__ import annotations

import importlib
import inspect
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from types import ModuleType
from typing import TYPE_CHECKING

from primer.core.errors import (
    DuplicateLessonError,
    ErrorContext,
    LessonDefinitionError,
    LessonNotFoundError,
    ValidationError,
)
from primer.core.logging import get_logger

if TYPE_CHECKING:
    from primer.core.context import LessonContext

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------


class Topic(str, Enum):
    """Tutorial sections, declared in reading order."""

    VARIABLES = "variables"
    CONTROL_FLOW = "control_flow"
    DATA_STRUCTURES = "data_structures"
    FUNCTIONS = "functions"
    MODULES = "modules"
    FILE_IO = "file_io"
    ERROR_HANDLING = "error_handling"
    CLASSES = "classes"
    LIBRARIES = "libraries"
    COMPREHENSIONS = "comprehensions"
    DECORATORS = "decorators"
    CONTEXT_MANAGERS = "context_managers"
    TYPE_HINTS = "type_hints"

    @property
    def order(self) -> int:
        """1-based position of the topic in the tutorial."""
        return list(Topic).index(self) + 1

    @property
    def heading(self) -> str:
        return _TOPIC_TITLES.get(self, self.value.replace("_", " ").title())

    @classmethod
    def parse(cls, value: str | Topic) -> Topic:
        """Coerce a topic name, raising :class:`ValidationError` if unknown."""
        if isinstance(value, Topic):
            return value
        try:
            return cls(value.strip().lower().replace("-", "_"))
        except ValueError:
            raise ValidationError(
                f"Unknown topic: {value!r}",
                field="topic",
                value=value,
                context=ErrorContext(metadata={"available": [t.value for t in cls]}),
            ) from None


_TOPIC_TITLES = {
    Topic.FILE_IO: "File I/O",
    Topic.COMPREHENSIONS: "Comprehensions & Generators",
}


@dataclass(frozen=True, slots=True)
class Lesson:
    """Metadata and callable for a single lesson.

    Attributes:
        name: ``"<topic>/<slug>"``, e.g. ``"classes/person"``.
        topic: The :class:`Topic` the lesson belongs to.
        slug: Identifier within the topic.
        title: First line of the demo docstring (or the slug humanised).
        description: Full demo docstring (stripped).
        order: 1-based declaration order within the topic.
        demo: The snippet itself; prints the lines in ``expected``.
        expected: Documented output, one entry per printed line.
    """

    name: str
    topic: Topic
    slug: str
    title: str
    description: str
    order: int
    demo: Callable[[LessonContext], None]
    expected: tuple[str, ...]

    @property
    def sort_key(self) -> tuple[int, int]:
        return (self.topic.order, self.order)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

_SLUG = re.compile(r"^[a-z0-9_]+$")
_LESSON_ATTR = "__primer_lesson__"

_registry: dict[str, Lesson] = {}
_loaded: bool = False


def register_lesson(
    topic: Topic | str,
    slug: str,
    *,
    expected: Iterable[str],
) -> Callable[[Callable[[LessonContext], None]], Callable[[LessonContext], None]]:
    """Decorator to register a lesson demo.

    The decorated function is returned unchanged apart from a marker
    attribute, so it can still be called directly.

    Raises:
        LessonDefinitionError: for an unknown topic, a malformed slug or an
            empty ``expected`` list.
        DuplicateLessonError: if the lesson name is already registered.
    """
    try:
        resolved = Topic.parse(topic)
    except ValidationError as exc:
        raise LessonDefinitionError(exc.message, cause=exc) from exc
    if not _SLUG.match(slug):
        raise LessonDefinitionError(
            f"Invalid lesson slug {slug!r}: use lowercase letters, digits and underscores",
            context=ErrorContext(topic=resolved.value),
        )
    lines = tuple(expected)
    if not lines:
        raise LessonDefinitionError(
            f"Lesson '{resolved.value}/{slug}' declares no expected output",
            context=ErrorContext(topic=resolved.value, lesson=f"{resolved.value}/{slug}"),
        )

    def decorator(func: Callable[[LessonContext], None]) -> Callable[[LessonContext], None]:
        _add(resolved, slug, lines, func)
        setattr(func, _LESSON_ATTR, (resolved, slug, lines))
        return func

    return decorator


def _add(
    topic: Topic,
    slug: str,
    expected: tuple[str, ...],
    func: Callable[[LessonContext], None],
) -> Lesson:
    name = f"{topic.value}/{slug}"
    if name in _registry:
        raise DuplicateLessonError(name)

    doc = inspect.getdoc(func) or ""
    title = doc.split("\n")[0].strip() if doc else slug.replace("_", " ").capitalize()
    order = 1 + sum(1 for lesson in _registry.values() if lesson.topic is topic)

    lesson = Lesson(
        name=name,
        topic=topic,
        slug=slug,
        title=title,
        description=doc,
        order=order,
        demo=func,
        expected=expected,
    )
    _registry[name] = lesson
    logger.debug("lesson_registered", name=name, topic=topic.value, order=order)
    return lesson


def _ensure_loaded() -> None:
    """Ensure topic modules are imported (lazy initialization)."""
    global _loaded
    if not _loaded:
        _load_lessons()
        _loaded = True


def _load_lessons() -> None:
    """
    Import every topic module and register any lesson not yet known.

    Modules imported before a :func:`clear_registry` are not re-executed;
    their marked demo functions are re-registered instead, in source order.
    """
    from primer.lessons import LESSON_MODULES

    for module_name in LESSON_MODULES:
        module = importlib.import_module(f"primer.lessons.{module_name}")
        for topic, slug, expected, func in _marked_demos(module):
            if f"{topic.value}/{slug}" not in _registry:
                _add(topic, slug, expected, func)
    logger.debug("lesson_registry_loaded", registered=len(_registry))


def _marked_demos(module: ModuleType) -> list[tuple[Topic, str, tuple[str, ...], Callable]]:
    found = []
    for value in vars(module).values():
        marker = getattr(value, _LESSON_ATTR, None)
        if marker is not None and getattr(value, "__module__", None) == module.__name__:
            found.append((*marker, value))
    found.sort(key=lambda item: item[3].__code__.co_firstlineno)
    return found


def get_lesson(name: str) -> Lesson:
    """Get a lesson by its ``"<topic>/<slug>"`` name."""
    _ensure_loaded()
    if name not in _registry:
        raise LessonNotFoundError(name, available=sorted(_registry))
    return _registry[name]


def list_lessons(topic: Topic | str | None = None) -> list[Lesson]:
    """List registered lessons in tutorial order, optionally for one topic."""
    _ensure_loaded()
    lessons = sorted(_registry.values(), key=lambda lesson: lesson.sort_key)
    if topic is None:
        return lessons
    resolved = Topic.parse(topic)
    return [lesson for lesson in lessons if lesson.topic is resolved]


def list_topics() -> list[Topic]:
    """Topics that have at least one lesson, in tutorial order."""
    _ensure_loaded()
    present = {lesson.topic for lesson in _registry.values()}
    return [topic for topic in Topic if topic in present]


def clear_registry() -> None:
    """Clear registry (for testing)."""
    global _loaded
    _registry.clear()
    _loaded = False


__all__ = [
    "Topic",
    "Lesson",
    "register_lesson",
    "get_lesson",
    "list_lessons",
    "list_topics",
    "clear_registry",
]
