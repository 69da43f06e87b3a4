"""Data Structures.

================================================================================
THE FOUR BUILT-IN COLLECTIONS
================================================================================

::

    list   [1, 2, 3]          ordered, mutable, duplicates allowed
    tuple  (1, 2, 3)          ordered, immutable
    dict   {"a": 1, "b": 2}   key -> value, insertion ordered, mutable
    set    {1, 2, 3}          unordered, unique members, mutable

Lists and dicts are the workhorses. Reach for a tuple when the value should
not change (a coordinate, a record returned from a function) and for a set
when membership and uniqueness are what matter.
"""

from __future__ import annotations

from primer.core.context import LessonContext
from primer.registry import Topic, register_lesson


@register_lesson(Topic.DATA_STRUCTURES, "lists", expected=[
    "['apple', 'blueberry', 'banana', 'cherry', 'date']",
    "date ['apple', 'blueberry', 'cherry']",
    "apple cherry ['blueberry', 'cherry']",
    "[1, 1, 3, 4, 5] 5 14",
])
def demo_lists(ctx: LessonContext) -> None:
    """Lists grow and shrink in place and support indexing and slicing."""
    fruits = ["apple", "banana", "cherry"]
    fruits.append("date")
    fruits.insert(1, "blueberry")
    print(fruits)

    fruits.remove("banana")
    last = fruits.pop()
    print(last, fruits)

    print(fruits[0], fruits[-1], fruits[1:])

    numbers = [3, 1, 4, 1, 5]
    print(sorted(numbers), len(numbers), sum(numbers))


@register_lesson(Topic.DATA_STRUCTURES, "tuples", expected=[
    "3 4",
    "1 1",
    "tuples are immutable: 'tuple' object does not support item assignment",
])
def demo_tuples(ctx: LessonContext) -> None:
    """Tuples are fixed once created; unpack them into names."""
    point = (3, 4)
    x, y = point
    print(x, y)
    print(point.count(3), point.index(4))

    try:
        point[0] = 10  # type: ignore[index]
    except TypeError as exc:
        print("tuples are immutable:", exc)


@register_lesson(Topic.DATA_STRUCTURES, "dictionaries", expected=[
    "Alice",
    "n/a",
    "name: Alice",
    "age: 31",
    "city: Paris",
    "email: alice@example.com",
    "False",
])
def demo_dictionaries(ctx: LessonContext) -> None:
    """Dictionaries map keys to values; ``.get`` supplies a default for missing keys."""
    person = {"name": "Alice", "age": 30, "city": "Paris"}
    print(person["name"])
    print(person.get("email", "n/a"))

    person["age"] = 31
    person["email"] = "alice@example.com"
    for key, value in person.items():
        print(f"{key}: {value}")

    del person["city"]
    print("city" in person)


@register_lesson(Topic.DATA_STRUCTURES, "sets", expected=[
    "{1, 2, 3, 4, 5}",
    "{3, 4}",
    "{1, 2}",
    "{1, 2, 5}",
    "{1, 2, 3}",
])
def demo_sets(ctx: LessonContext) -> None:
    """Sets keep unique members and support union, intersection and difference."""
    a = {1, 2, 3, 4}
    b = {3, 4, 5}
    print(a | b)
    print(a & b)
    print(a - b)
    print(a ^ b)

    print(set([1, 2, 2, 3]))
