"""Functions.

``def`` binds a name to a function object. Parameters may have defaults,
``*args`` collects extra positional arguments into a tuple and ``**kwargs``
collects extra keyword arguments into a dict. A function that returns
several values really returns one tuple.
"""

from __future__ import annotations

from collections.abc import Callable

from primer.core.context import LessonContext
from primer.registry import Topic, register_lesson


def greet(name: str, greeting: str = "Hello") -> str:
    return f"{greeting}, {name}!"


def total(*args: float) -> float:
    return sum(args)


def describe(**kwargs: object) -> str:
    return ", ".join(f"{key}={value}" for key, value in kwargs.items())


def min_max(numbers: list[int]) -> tuple[int, int]:
    return min(numbers), max(numbers)


def factorial(n: int) -> int:
    """Return ``n!`` computed recursively."""
    if n < 0:
        raise ValueError("factorial() not defined for negative values")
    return 1 if n <= 1 else n * factorial(n - 1)


def make_multiplier(factor: int) -> Callable[[int], int]:
    def multiply(x: int) -> int:
        return x * factor

    return multiply


def make_counter() -> Callable[[], int]:
    """Return a function that counts how many times it has been called."""
    count = 0

    def counter() -> int:
        nonlocal count
        count += 1
        return count

    return counter


@register_lesson(Topic.FUNCTIONS, "default_arguments", expected=[
    "Hello, Alice!",
    "Hi, Bob!",
    "Hey, Cara!",
])
def demo_default_arguments(ctx: LessonContext) -> None:
    """Parameters with defaults may be omitted; keyword arguments may come in any order."""
    print(greet("Alice"))
    print(greet("Bob", "Hi"))
    print(greet(greeting="Hey", name="Cara"))


@register_lesson(Topic.FUNCTIONS, "args_kwargs", expected=[
    "10",
    "name=Alice, age=30",
    "1 (2, 3) {'mode': 'fast'}",
])
def demo_args_kwargs(ctx: LessonContext) -> None:
    """``*args`` and ``**kwargs`` accept any number of arguments."""
    print(total(1, 2, 3, 4))
    print(describe(name="Alice", age=30))

    def show_all(first, *args, **kwargs):
        print(first, args, kwargs)

    show_all(1, 2, 3, mode="fast")


@register_lesson(Topic.FUNCTIONS, "multiple_returns", expected=[
    "4 42",
    "(3, 3)",
    "3 2",
])
def demo_multiple_returns(ctx: LessonContext) -> None:
    """Return a tuple and unpack it at the call site."""
    low, high = min_max([4, 8, 15, 16, 23, 42])
    print(low, high)
    print(min_max([3]))

    quotient, remainder = divmod(17, 5)
    print(quotient, remainder)


@register_lesson(Topic.FUNCTIONS, "lambdas", expected=[
    "25",
    "['kiwi', 'apple', 'banana']",
    "[2, 4, 6]",
    "[0, 2, 4, 6, 8]",
])
def demo_lambdas(ctx: LessonContext) -> None:
    """``lambda`` writes a small anonymous function inline."""
    square = lambda x: x**2  # noqa: E731
    print(square(5))

    words = ["banana", "kiwi", "apple"]
    print(sorted(words, key=len))
    print(list(map(lambda n: n * 2, [1, 2, 3])))
    print(list(filter(lambda n: n % 2 == 0, range(10))))


@register_lesson(Topic.FUNCTIONS, "recursion", expected=[
    "120",
    "[1, 1, 2, 6, 24, 120]",
])
def demo_recursion(ctx: LessonContext) -> None:
    """A recursive function calls itself on a smaller problem until a base case."""
    print(factorial(5))
    print([factorial(n) for n in range(6)])


@register_lesson(Topic.FUNCTIONS, "closures_and_scope", expected=[
    "10 15",
    "3",
    "outer",
])
def demo_closures_and_scope(ctx: LessonContext) -> None:
    """Inner functions remember the variables of the scope that created them."""
    double = make_multiplier(2)
    triple = make_multiplier(3)
    print(double(5), triple(5))

    counter = make_counter()
    counter()
    counter()
    print(counter())

    label = "outer"

    def shadow():
        label = "inner"  # local to shadow(); the outer name is untouched
        return label

    shadow()
    print(label)
