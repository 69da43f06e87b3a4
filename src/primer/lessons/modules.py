"""Modules and Imports.

Any ``.py`` file is a module. ``import math`` binds the module object,
``from math import sqrt`` binds one name out of it and ``import x as y``
picks a local alias. A module's ``__name__`` is ``"__main__"`` only when it
is run as a script, which is what the ``if __name__ == "__main__":`` guard
checks.
"""

from __future__ import annotations

from primer.core.context import LessonContext
from primer.registry import Topic, register_lesson


def main() -> str:
    return "running as a script"


@register_lesson(Topic.MODULES, "import_module", expected=[
    "4.0",
    "3.141592653589793",
    "3 4",
    "True",
])
def demo_import_module(ctx: LessonContext) -> None:
    """``import`` binds a whole module; reach its contents with dot access."""
    import math

    print(math.sqrt(16))
    print(math.pi)
    print(math.floor(3.7), math.ceil(3.2))
    print("sqrt" in dir(math))


@register_lesson(Topic.MODULES, "from_import", expected=[
    "24 6",
    "2024-01-15",
    "[1, 2]",
])
def demo_from_import(ctx: LessonContext) -> None:
    """``from ... import`` pulls names in directly; ``as`` renames them."""
    import datetime as dt
    import importlib
    from math import factorial, gcd

    print(factorial(4), gcd(12, 18))
    print(dt.date(2024, 1, 15).isoformat())

    json_module = importlib.import_module("json")
    print(json_module.dumps([1, 2]))


@register_lesson(Topic.MODULES, "main_guard", expected=[
    "imported as primer.lessons.modules",
    "math",
])
def demo_main_guard(ctx: LessonContext) -> None:
    """``__name__`` tells a module whether it was imported or run directly."""
    import math

    if __name__ == "__main__":
        print(main())
    else:
        print(f"imported as {__name__}")
    print(math.__name__)


if __name__ == "__main__":
    print(main())
