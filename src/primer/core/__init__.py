"""
Primer core primitives: errors, logging, settings and the lesson context.
"""

from primer.core.context import LessonContext
from primer.core.errors import (
    ConfigError,
    DuplicateLessonError,
    ErrorCategory,
    ErrorContext,
    LessonDefinitionError,
    LessonExecutionError,
    LessonNotFoundError,
    PrimerError,
    RegistryError,
    ValidationError,
)
from primer.core.logging import LogContext, configure_logging, get_logger

__all__ = [
    "LessonContext",
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
    "LogContext",
    "configure_logging",
    "get_logger",
]
