"""Context Managers.

The ``with`` statement calls ``__enter__`` on the way in and ``__exit__``
on the way out, whether the block finished normally or raised. That makes
it the right tool for anything that must be released: files, locks,
connections. ``__exit__`` returning a true value suppresses the exception.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager, suppress
from types import TracebackType

from primer.core.context import LessonContext
from primer.registry import Topic, register_lesson


class ManagedResource:
    """Report acquisition and release of a named resource."""

    def __init__(self, name: str):
        self.name = name

    def __enter__(self) -> ManagedResource:
        print(f"Acquiring {self.name}")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if exc_type is None:
            print(f"Releasing {self.name}")
        else:
            print(f"Releasing {self.name} after {exc_type.__name__}")
        return False


@contextmanager
def tag(name: str) -> Iterator[None]:
    print(f"<{name}>")
    try:
        yield
    finally:
        print(f"</{name}>")


@register_lesson(Topic.CONTEXT_MANAGERS, "class_based", expected=[
    "Acquiring database",
    "Using database",
    "Releasing database",
    "Acquiring network",
    "Releasing network after RuntimeError",
    "error propagated to caller",
])
def demo_class_based(ctx: LessonContext) -> None:
    """Implement ``__enter__`` and ``__exit__`` to control setup and teardown."""
    with ManagedResource("database") as resource:
        print(f"Using {resource.name}")

    try:
        with ManagedResource("network"):
            raise RuntimeError("connection lost")
    except RuntimeError:
        print("error propagated to caller")


@register_lesson(Topic.CONTEXT_MANAGERS, "contextmanager_decorator", expected=[
    "<p>",
    "hello",
    "</p>",
])
def demo_contextmanager_decorator(ctx: LessonContext) -> None:
    """``@contextmanager`` turns a generator with one ``yield`` into a context manager."""
    with tag("p"):
        print("hello")


@register_lesson(Topic.CONTEXT_MANAGERS, "suppress", expected=[
    "no error raised",
    "missing key ignored",
])
def demo_suppress(ctx: LessonContext) -> None:
    """``contextlib.suppress`` swallows the named exceptions, and only those."""
    with suppress(FileNotFoundError):
        os.remove(ctx.path("does-not-exist.txt"))
    print("no error raised")

    with suppress(KeyError):
        {}["missing"]
    print("missing key ignored")


@register_lesson(Topic.CONTEXT_MANAGERS, "with_open", expected=[
    "False",
    "True",
    "HELLO FROM SOURCE",
])
def demo_with_open(ctx: LessonContext) -> None:
    """Files are the canonical context manager; one ``with`` can open several."""
    source = ctx.path("source.txt")
    target = ctx.path("target.txt")

    with open(source, "w", encoding="utf-8") as f:
        f.write("hello from source\n")
        print(f.closed)
    print(f.closed)

    with open(source, encoding="utf-8") as src, open(target, "w", encoding="utf-8") as dst:
        dst.write(src.read().upper())
    print(target.read_text(encoding="utf-8").strip())
