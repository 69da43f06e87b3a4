"""Error Handling: try, except, else, finally, and custom exceptions.

================================================================================
HOW THE BLOCKS FIT TOGETHER
================================================================================

::

    try:
        risky()                # code that may raise
    except ValueError as exc:  # runs only for a matching exception
        recover(exc)
    else:                      # runs only if nothing was raised
        celebrate()
    finally:                   # always runs, even after return
        clean_up()

Catch the narrowest exception you can handle. ``except Exception`` hides
bugs; a bare ``except:`` also swallows ``KeyboardInterrupt``.


================================================================================
CUSTOM EXCEPTIONS
================================================================================

Subclass ``Exception`` to give a failure a name callers can catch, and attach
the data they need to react. ``raise NewError(...) from exc`` keeps the
original exception on ``__cause__`` so the traceback shows both.
"""

from __future__ import annotations

from primer.core.context import LessonContext
from primer.registry import Topic, register_lesson


class InsufficientFundsError(Exception):
    """Raised when a withdrawal exceeds the available balance."""

    def __init__(self, balance: float, amount: float):
        super().__init__(f"Cannot withdraw {amount}; balance is {balance}")
        self.balance = balance
        self.amount = amount


class ConfigParseError(Exception):
    """Raised when a configuration value cannot be parsed."""


def to_int(text: str) -> int | None:
    try:
        return int(text)
    except ValueError:
        print(f"Cannot convert {text!r} to int")
        return None


def safe_divide(a: float, b: float) -> float | None:
    try:
        result = a / b
    except ZeroDivisionError:
        print("Cannot divide by zero")
        return None
    else:
        print("Division succeeded")
        return result
    finally:
        print("Division attempted")


def withdraw(balance: float, amount: float) -> float:
    if amount > balance:
        raise InsufficientFundsError(balance, amount)
    return balance - amount


def parse_port(text: str) -> int:
    try:
        return int(text)
    except ValueError as exc:
        raise ConfigParseError(f"invalid port: {text!r}") from exc


@register_lesson(Topic.ERROR_HANDLING, "value_error", expected=[
    "42",
    "Cannot convert 'abc' to int",
    "None",
])
def demo_value_error(ctx: LessonContext) -> None:
    """Catch the ``ValueError`` raised by a failed conversion."""
    print(to_int("42"))
    print(to_int("abc"))


@register_lesson(Topic.ERROR_HANDLING, "zero_division", expected=[
    "Division succeeded",
    "Division attempted",
    "5.0",
    "Cannot divide by zero",
    "Division attempted",
    "None",
])
def demo_zero_division(ctx: LessonContext) -> None:
    """``else`` runs on success, ``finally`` runs no matter what."""
    print(safe_divide(10, 2))
    print(safe_divide(1, 0))


@register_lesson(Topic.ERROR_HANDLING, "multiple_exceptions", expected=[
    "TypeError",
    "ValueError",
])
def demo_multiple_exceptions(ctx: LessonContext) -> None:
    """One ``except`` clause can name a tuple of exception types."""
    for value in ["10", None, "x"]:
        try:
            int(value)  # type: ignore[arg-type]
        except (ValueError, TypeError) as exc:
            print(type(exc).__name__)


@register_lesson(Topic.ERROR_HANDLING, "custom_exception", expected=[
    "70",
    "Error: Cannot withdraw 80; balance is 50",
    "short by 30",
])
def demo_custom_exception(ctx: LessonContext) -> None:
    """Raise your own exception type and carry data on it."""
    print(withdraw(100, 30))
    try:
        withdraw(50, 80)
    except InsufficientFundsError as exc:
        print("Error:", exc)
        print("short by", exc.amount - exc.balance)


@register_lesson(Topic.ERROR_HANDLING, "exception_chaining", expected=[
    "invalid port: 'eighty'",
    "caused by ValueError",
])
def demo_exception_chaining(ctx: LessonContext) -> None:
    """``raise ... from`` keeps the original exception as ``__cause__``."""
    try:
        parse_port("eighty")
    except ConfigParseError as exc:
        print(exc)
        print("caused by", type(exc.__cause__).__name__)
