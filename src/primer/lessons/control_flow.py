"""Control Flow.

``if``/``elif``/``else`` choose a branch, ``for`` walks any iterable and
``while`` repeats until its condition turns false. ``break`` leaves a loop,
``continue`` skips to the next iteration, and a loop's ``else`` block runs only
when the loop finished without ``break``.
"""

from __future__ import annotations

from primer.core.context import LessonContext
from primer.registry import Topic, register_lesson


def grade(score: int) -> str:
    """Map a numeric score to a letter grade."""
    if score >= 90:
        return "A"
    elif score >= 80:
        return "B"
    elif score >= 70:
        return "C"
    else:
        return "F"


def find_first_even(numbers: list[int]) -> int | None:
    """Return the first even number, or ``None`` when there is none."""
    for n in numbers:
        if n % 2 == 0:
            return n
    return None


@register_lesson(Topic.CONTROL_FLOW, "if_elif_else", expected=[
    "95 -> A",
    "85 -> B",
    "72 -> C",
    "40 -> F",
    "adult",
])
def demo_if_elif_else(ctx: LessonContext) -> None:
    """Branch on conditions; the first true branch wins."""
    for score in (95, 85, 72, 40):
        print(f"{score} -> {grade(score)}")

    age = 20
    status = "adult" if age >= 18 else "minor"
    print(status)


@register_lesson(Topic.CONTROL_FLOW, "for_loops", expected=[
    "Iteration 0",
    "Iteration 1",
    "Iteration 2",
    "[2, 5, 8]",
    "1 apple",
    "2 banana",
    "3 cherry",
])
def demo_for_loops(ctx: LessonContext) -> None:
    """``for`` iterates over ranges, lists and anything else iterable."""
    for i in range(3):
        print("Iteration", i)

    print(list(range(2, 10, 3)))

    fruits = ["apple", "banana", "cherry"]
    for index, fruit in enumerate(fruits, start=1):
        print(index, fruit)


@register_lesson(Topic.CONTROL_FLOW, "while_loops", expected=[
    "count is 1",
    "count is 3",
    "stopped at 4",
])
def demo_while_loops(ctx: LessonContext) -> None:
    """``while`` repeats; ``continue`` skips an iteration and ``break`` exits."""
    count = 0
    while count < 5:
        count += 1
        if count == 2:
            continue
        if count == 4:
            break
        print("count is", count)
    print("stopped at", count)


@register_lesson(Topic.CONTROL_FLOW, "loop_else", expected=[
    "no even number found",
    "4",
    "None",
])
def demo_loop_else(ctx: LessonContext) -> None:
    """A loop's ``else`` block runs only if the loop was not broken out of."""
    for n in [1, 3, 5]:
        if n % 2 == 0:
            print("found", n)
            break
    else:
        print("no even number found")

    print(find_first_even([1, 3, 4, 6]))
    print(find_first_even([7, 9]))
