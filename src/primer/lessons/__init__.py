"""
Tutorial lessons, one module per topic.

Each module keeps the tutorial's illustrative code importable (``Person``,
``timer``, ``count_up_to`` ...) next to the ``demo_*`` functions that print
what the tutorial promises. Modules are imported by the registry on first
lookup; nothing here imports them eagerly.
"""

LESSON_MODULES: tuple[str, ...] = (
    "variables",
    "control_flow",
    "data_structures",
    "functions",
    "modules",
    "file_io",
    "error_handling",
    "classes",
    "libraries",
    "comprehensions",
    "decorators",
    "context_managers",
    "type_hints",
)

__all__ = ["LESSON_MODULES"]
