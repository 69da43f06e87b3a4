"""Decorators.

A decorator is a function that takes a function and returns a replacement,
usually a wrapper that adds behaviour around the original call::

    @timer
    def slow_sum(n): ...

    # is the same as
    slow_sum = timer(slow_sum)

``functools.wraps`` copies the original's name and docstring onto the
wrapper. A decorator that takes arguments is a function returning a
decorator. Stacked decorators apply bottom-up.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any

from primer.core.context import LessonContext
from primer.registry import Topic, register_lesson


def timer(func: Callable[..., Any]) -> Callable[..., Any]:
    """Print how long each call of ``func`` took."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        start = time.perf_counter()
        result = func(*args, **kwargs)
        elapsed = time.perf_counter() - start
        print(f"{func.__name__} took {elapsed:.4f} seconds")
        return result

    return wrapper


def repeat(times: int) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Call the decorated function ``times`` times, returning the last result."""
    if times < 1:
        raise ValueError("times must be at least 1")

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            result = None
            for _ in range(times):
                result = func(*args, **kwargs)
            return result

        return wrapper

    return decorator


def bold(func: Callable[..., str]) -> Callable[..., str]:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> str:
        return f"<b>{func(*args, **kwargs)}</b>"

    return wrapper


def italic(func: Callable[..., str]) -> Callable[..., str]:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> str:
        return f"<i>{func(*args, **kwargs)}</i>"

    return wrapper


def log_calls(func: Callable[..., Any]) -> Callable[..., Any]:
    """Print each call's arguments and its return value."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        arguments = [repr(a) for a in args] + [f"{k}={v!r}" for k, v in kwargs.items()]
        print(f"Calling {func.__name__}({', '.join(arguments)})")
        result = func(*args, **kwargs)
        print(f"{func.__name__} returned {result!r}")
        return result

    return wrapper


@timer
def slow_sum(n: int) -> int:
    """Add up the integers below n."""
    return sum(range(n))


@repeat(3)
def say_hello(name: str) -> None:
    print(f"Hello, {name}!")


@bold
@italic
def format_greeting(name: str) -> str:
    return f"Hi {name}"


@log_calls
def add(a: int, b: int = 0) -> int:
    return a + b


@register_lesson(Topic.DECORATORS, "timer", expected=[
    "slow_sum took ... seconds",
    "499500",
    "slow_sum",
    "Add up the integers below n.",
])
def demo_timer(ctx: LessonContext) -> None:
    """Wrap a function to measure how long it runs."""
    print(slow_sum(1000))
    print(slow_sum.__name__)
    print(slow_sum.__doc__)


@register_lesson(Topic.DECORATORS, "decorator_with_arguments", expected=[
    "Hello, Alice!",
    "Hello, Alice!",
    "Hello, Alice!",
])
def demo_decorator_with_arguments(ctx: LessonContext) -> None:
    """A decorator factory takes arguments and returns the actual decorator."""
    say_hello("Alice")


@register_lesson(Topic.DECORATORS, "stacked_decorators", expected=[
    "<b><i>Hi Ann</i></b>",
])
def demo_stacked_decorators(ctx: LessonContext) -> None:
    """Decorators stack; the one nearest the function is applied first."""
    print(format_greeting("Ann"))


@register_lesson(Topic.DECORATORS, "logging_decorator", expected=[
    "Calling add(2, b=3)",
    "add returned 5",
    "5",
])
def demo_logging_decorator(ctx: LessonContext) -> None:
    """A decorator can report every call without touching the function body."""
    print(add(2, b=3))


@register_lesson(Topic.DECORATORS, "stateful_decorator", expected=[
    "ping",
    "ping",
    "ping was called 2 times",
])
def demo_stateful_decorator(ctx: LessonContext) -> None:
    """The wrapper is an object, so it can carry state such as a call count."""

    def count_calls(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            wrapper.calls += 1
            return func(*args, **kwargs)

        wrapper.calls = 0
        return wrapper

    @count_calls
    def ping():
        print("ping")

    ping()
    ping()
    print(f"{ping.__name__} was called {ping.calls} times")
