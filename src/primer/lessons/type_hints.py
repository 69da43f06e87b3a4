"""Type Hints.

Annotations document what a function expects and returns. Tools such as
mypy check them statically; the interpreter stores them on
``__annotations__`` and otherwise ignores them.

This module deliberately evaluates its annotations eagerly so the lessons
can show the real objects ``typing.get_type_hints`` returns.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, fields
from typing import Optional, TypedDict, TypeVar, get_type_hints

from primer.core.context import LessonContext
from primer.registry import Topic, register_lesson

T = TypeVar("T")


def add(a: int, b: int) -> int:
    return a + b


def find_user(user_id: int, users: dict[int, str]) -> Optional[str]:
    return users.get(user_id)


def average(values: list[float]) -> float:
    return sum(values) / len(values)


def apply_twice(func: Callable[[int], int], value: int) -> int:
    return func(func(value))


def first(items: Sequence[T]) -> T:
    return items[0]


@dataclass
class Product:
    name: str
    price: float
    tags: list[str] = field(default_factory=list)


class Movie(TypedDict):
    title: str
    year: int


@register_lesson(Topic.TYPE_HINTS, "annotated_functions", expected=[
    "5",
    "{'a': <class 'int'>, 'b': <class 'int'>, 'return': <class 'int'>}",
    "ab",
])
def demo_annotated_functions(ctx: LessonContext) -> None:
    """Annotate parameters and return values; Python does not enforce them."""
    print(add(2, 3))
    print(add.__annotations__)
    print(add("a", "b"))  # type: ignore[arg-type]


@register_lesson(Topic.TYPE_HINTS, "optional_and_collections", expected=[
    "alice None",
    "2.0",
    "dict[int, str]",
    "int",
])
def demo_optional_and_collections(ctx: LessonContext) -> None:
    """``Optional[X]`` allows ``None``; built-in collections take type parameters."""
    users = {1: "alice", 2: "bob"}
    print(find_user(1, users), find_user(3, users))
    print(average([1.0, 2.0, 3.0]))

    hints = get_type_hints(find_user)
    print(hints["users"])
    print(hints["user_id"].__name__)


@register_lesson(Topic.TYPE_HINTS, "dataclasses_and_typeddict", expected=[
    "Product(name='Pen', price=1.5, tags=[])",
    "['name', 'price', 'tags']",
    "Alien 1979",
    "['title', 'year']",
])
def demo_dataclasses_and_typeddict(ctx: LessonContext) -> None:
    """Class-level annotations drive ``@dataclass`` and describe ``TypedDict`` shapes."""
    product = Product("Pen", 1.5)
    print(product)
    print([f.name for f in fields(Product)])

    movie: Movie = {"title": "Alien", "year": 1979}
    print(movie["title"], movie["year"])
    print(sorted(Movie.__required_keys__))


@register_lesson(Topic.TYPE_HINTS, "callables_and_generics", expected=[
    "16",
    "x",
    "1",
])
def demo_callables_and_generics(ctx: LessonContext) -> None:
    """``Callable`` describes function parameters; ``TypeVar`` links input and output types."""
    print(apply_twice(lambda x: x + 3, 10))
    print(first("xyz"))
    print(first([1, 2, 3]))
