"""
Structured error types for the primer package.

Provides a small hierarchy of typed errors carrying a category and a
structured context, so that the registry, the runner and the ops layer can
report failures with the same shape.

Manifesto:
    - **Typed Error Hierarchy:** One subclass per failure domain
    - **Rich Context:** Errors carry topic, lesson and run metadata
    - **Error Chaining:** Preserve original exceptions while adding context

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────────┐
        │                        PrimerError                            │
        │              (category, context, cause)                       │
        ├──────────────────────────────────────────────────────────────┤
        │                                                               │
        │  RegistryError          LessonExecutionError   ConfigError    │
        │  (REGISTRY)             (EXECUTION)            (CONFIG)       │
        │       │                                                       │
        │  LessonNotFoundError    ValidationError                       │
        │  DuplicateLessonError   (VALIDATION)                          │
        │  LessonDefinitionError                                        │
        └──────────────────────────────────────────────────────────────┘

Examples:
    >>> error = LessonNotFoundError("classes/nope")
    >>> error.category
    <ErrorCategory.REGISTRY: 'REGISTRY'>
    >>> error.context.lesson
    'classes/nope'

    >>> try:
    ...     raise ZeroDivisionError("division by zero")
    ... except ZeroDivisionError as e:
    ...     err = LessonExecutionError("demo crashed", cause=e)
    >>> err.cause
    ZeroDivisionError('division by zero')

Tags:
    error-handling, exception-hierarchy, error-context, primer
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Standard error categories for classification.

    Attributes:
        LESSON: A lesson definition or its content is wrong
        REGISTRY: Lookup or registration in the lesson registry failed
        VALIDATION: A request or an input value is invalid
        CONFIG: Missing or invalid settings
        EXECUTION: A lesson raised while running
        INTERNAL: Bugs, unexpected state
        UNKNOWN: Uncategorized errors
    """

    LESSON = "LESSON"
    REGISTRY = "REGISTRY"
    VALIDATION = "VALIDATION"
    CONFIG = "CONFIG"
    EXECUTION = "EXECUTION"
    INTERNAL = "INTERNAL"
    UNKNOWN = "UNKNOWN"


@dataclass
class ErrorContext:
    """
    Structured metadata context for errors.

    Anything without a dedicated field goes into ``metadata``. ``to_dict()``
    drops unset fields so the result can go straight into a log event.

    Examples:
        >>> ctx = ErrorContext(topic="classes", lesson="classes/person")
        >>> ctx.to_dict()
        {'topic': 'classes', 'lesson': 'classes/person'}

    Attributes:
        topic: Tutorial topic the error relates to
        lesson: Fully-qualified lesson name (``"<topic>/<slug>"``)
        run_id: Identifier of the lesson run, if any
        metadata: Additional key-value pairs
    """

    topic: str | None = None
    lesson: str | None = None
    run_id: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["topic", "lesson", "run_id"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class PrimerError(Exception):
    """
    Base exception for all primer errors.

    Subclasses set ``default_category`` so callers rarely pass a category
    explicitly.

    Examples:
        >>> error = PrimerError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>

        >>> error = PrimerError("Bad lesson").with_context(topic="functions", hint="x")
        >>> error.context.topic
        'functions'
        >>> error.context.metadata
        {'hint': 'x'}

        >>> PrimerError("Test", category=ErrorCategory.VALIDATION).to_dict()["category"]
        'VALIDATION'
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> PrimerError:
        """
        Add context to this error (fluent API).

        Usage:
            raise LessonExecutionError("Failed").with_context(
                lesson="file_io/write_and_read",
                path="file.txt",
            )
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# REGISTRY ERRORS
# =============================================================================


class RegistryError(PrimerError):
    """Lesson registry error."""

    default_category = ErrorCategory.REGISTRY


class LessonNotFoundError(RegistryError):
    """Lesson not found in registry."""

    def __init__(self, name: str, available: list[str] | None = None):
        self.lesson_name = name
        super().__init__(f"Lesson not found: {name}", context=ErrorContext(lesson=name))
        if available is not None:
            self.context.metadata["available"] = available


class DuplicateLessonError(RegistryError):
    """A lesson with the same name is already registered."""

    def __init__(self, name: str):
        self.lesson_name = name
        super().__init__(
            f"Lesson '{name}' is already registered",
            context=ErrorContext(lesson=name),
        )


class LessonDefinitionError(RegistryError):
    """A lesson was declared with invalid metadata."""

    default_category = ErrorCategory.LESSON


# =============================================================================
# EXECUTION ERRORS
# =============================================================================


class LessonExecutionError(PrimerError):
    """A lesson demo raised while running."""

    default_category = ErrorCategory.EXECUTION


# =============================================================================
# VALIDATION / CONFIGURATION ERRORS
# =============================================================================


class ValidationError(PrimerError):
    """
    Request or input validation error.
    """

    default_category = ErrorCategory.VALIDATION

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: Any = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        if self.value is not None:
            result["value"] = repr(self.value)
        return result


class ConfigError(PrimerError):
    """Configuration error."""

    default_category = ErrorCategory.CONFIG


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "PrimerError",
    "RegistryError",
    "LessonNotFoundError",
    "DuplicateLessonError",
    "LessonDefinitionError",
    "LessonExecutionError",
    "ValidationError",
    "ConfigError",
]
