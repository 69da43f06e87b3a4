"""Variables and Data Types.

A variable is a name bound to a value. Python infers the type from the value,
and the same name can later be rebound to a value of another type::

    name = "Alice"      # str
    age = 30            # int
    height = 5.6        # float
    is_student = True   # bool
"""

from __future__ import annotations

from primer.core.context import LessonContext
from primer.registry import Topic, register_lesson


@register_lesson(Topic.VARIABLES, "basic_types", expected=[
    "Alice is 30 years old and 5.6 ft tall",
    "<class 'str'> <class 'int'> <class 'float'> <class 'bool'>",
    "is_student: True",
])
def demo_basic_types(ctx: LessonContext) -> None:
    """Variables hold values of any type; ``type()`` tells you which."""
    name = "Alice"
    age = 30
    height = 5.6
    is_student = True

    print(f"{name} is {age} years old and {height} ft tall")
    print(type(name), type(age), type(height), type(is_student))
    print("is_student:", is_student)


@register_lesson(Topic.VARIABLES, "strings", expected=[
    "HELLO, WORLD",
    "hello, world",
    "Hello, Python",
    "['Hello', 'World']",
    "12",
    "H d World",
    "Hello, World!!!",
])
def demo_strings(ctx: LessonContext) -> None:
    """Strings are immutable sequences of characters with many helper methods."""
    text = "Hello, World"

    print(text.upper())
    print(text.lower())
    print(text.replace("World", "Python"))
    print(text.split(", "))
    print(len(text))
    print(text[0], text[-1], text[7:])
    print(text + "!" * 3)


@register_lesson(Topic.VARIABLES, "f_strings", expected=[
    "Total: 58.50",
    "left    |   right|",
    "1,234,567",
    "name='Alice'",
])
def demo_f_strings(ctx: LessonContext) -> None:
    """f-strings embed expressions and format specifications inside a literal."""
    price = 19.5
    name = "Alice"

    print(f"Total: {price * 3:.2f}")
    print(f"{'left':<8}|{'right':>8}|")
    print(f"{1234567:,}")
    print(f"{name=}")


@register_lesson(Topic.VARIABLES, "type_conversion", expected=[
    "43",
    "0.5",
    "3.5!",
    "7",
    "False True",
    "3.14",
])
def demo_type_conversion(ctx: LessonContext) -> None:
    """Convert between types explicitly with ``int()``, ``float()``, ``str()`` and ``bool()``."""
    print(int("42") + 1)
    print(float("2") / 4)
    print(str(3.5) + "!")
    print(int(7.9))  # truncates toward zero
    print(bool(""), bool("no"))
    print(round(3.14159, 2))


@register_lesson(Topic.VARIABLES, "multiple_assignment", expected=[
    "1 2 3",
    "2 1",
    "0 0",
    "10 [20, 30]",
])
def demo_multiple_assignment(ctx: LessonContext) -> None:
    """Assign several names at once, swap without a temporary, unpack with ``*``."""
    x, y, z = 1, 2, 3
    print(x, y, z)

    x, y = y, x
    print(x, y)

    a = b = 0
    print(a, b)

    first, *rest = [10, 20, 30]
    print(first, rest)
