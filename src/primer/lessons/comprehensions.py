"""Comprehensions and Generators.

================================================================================
COMPREHENSIONS
================================================================================

A comprehension builds a collection from an iterable in one expression::

    [expr for item in iterable if condition]     # list
    {key: value for item in iterable}            # dict
    {expr for item in iterable}                  # set

Nested ``for`` clauses read left to right, exactly like nested loops.


================================================================================
GENERATORS
================================================================================

A generator produces values lazily, one per ``next()`` call, and keeps its
local state between calls. Write one as a generator expression
``(expr for item in iterable)`` or as a function containing ``yield``.
A generator can be consumed only once.

::

    count_up_to(3)  ──next()──► 1 ──next()──► 2 ──next()──► 3 ──next()──► StopIteration
"""

from __future__ import annotations

from collections.abc import Iterator
from itertools import islice

from primer.core.context import LessonContext
from primer.registry import Topic, register_lesson


def count_up_to(limit: int) -> Iterator[int]:
    """Yield 1, 2, ... up to and including ``limit``."""
    count = 1
    while count <= limit:
        yield count
        count += 1


def fibonacci() -> Iterator[int]:
    """Yield the Fibonacci sequence forever."""
    a, b = 0, 1
    while True:
        yield a
        a, b = b, a + b


def traced_count_up_to(limit: int) -> Iterator[int]:
    for n in count_up_to(limit):
        print(f"producing {n}")
        yield n


@register_lesson(Topic.COMPREHENSIONS, "list_comprehensions", expected=[
    "[0, 1, 4, 9, 16, 25, 36, 49, 64, 81]",
    "[0, 2, 4, 6, 8]",
    "['even', 'odd', 'even', 'odd']",
])
def demo_list_comprehensions(ctx: LessonContext) -> None:
    """Build a list from a loop and an optional filter in a single expression."""
    squares = [x**2 for x in range(10)]
    print(squares)

    evens = [x for x in range(10) if x % 2 == 0]
    print(evens)

    labels = ["even" if x % 2 == 0 else "odd" for x in range(4)]
    print(labels)


@register_lesson(Topic.COMPREHENSIONS, "dict_and_set_comprehensions", expected=[
    "{'apple': 5, 'banana': 6, 'cherry': 6}",
    "{5, 6}",
    "{1: 'a', 2: 'b'}",
])
def demo_dict_and_set_comprehensions(ctx: LessonContext) -> None:
    """Curly braces give dict and set comprehensions."""
    words = ["apple", "banana", "cherry"]
    print({word: len(word) for word in words})
    print({len(word) for word in words})
    print({value: key for key, value in {"a": 1, "b": 2}.items()})


@register_lesson(Topic.COMPREHENSIONS, "nested_comprehensions", expected=[
    "[[1, 4], [2, 5], [3, 6]]",
    "[1, 2, 3, 4, 5, 6]",
    "[(0, 'a'), (0, 'b'), (1, 'a'), (1, 'b')]",
])
def demo_nested_comprehensions(ctx: LessonContext) -> None:
    """Nest comprehensions to transpose a matrix or flatten a list of lists."""
    matrix = [[1, 2, 3], [4, 5, 6]]
    print([[row[i] for row in matrix] for i in range(3)])
    print([n for row in matrix for n in row])
    print([(x, y) for x in range(2) for y in "ab"])


@register_lesson(Topic.COMPREHENSIONS, "generator_expressions", expected=[
    "14",
    "generator",
    "[0, 2, 4]",
    "[]",
])
def demo_generator_expressions(ctx: LessonContext) -> None:
    """Parentheses give a lazy generator instead of a list."""
    print(sum(x * x for x in range(1, 4)))

    doubled = (x * 2 for x in range(3))
    print(type(doubled).__name__)
    print(list(doubled))
    print(list(doubled))  # already exhausted


@register_lesson(Topic.COMPREHENSIONS, "generator_functions", expected=[
    "1",
    "2",
    "3",
    "[1, 2, 3, 4, 5]",
    "[0, 1, 1, 2, 3, 5, 8, 13]",
])
def demo_generator_functions(ctx: LessonContext) -> None:
    """A function with ``yield`` returns a generator."""
    for number in count_up_to(3):
        print(number)
    print(list(count_up_to(5)))
    print(list(islice(fibonacci(), 8)))


@register_lesson(Topic.COMPREHENSIONS, "lazy_evaluation", expected=[
    "generator created",
    "producing 1",
    "1",
    "producing 2",
    "2",
    "done",
])
def demo_lazy_evaluation(ctx: LessonContext) -> None:
    """Nothing runs until ``next()`` asks for the next value."""
    numbers = traced_count_up_to(2)
    print("generator created")
    print(next(numbers))
    print(next(numbers))
    print(next(numbers, "done"))
