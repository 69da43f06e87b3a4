"""
Primer Logging - structured logging for the lesson registry, runner and CLI.

Manifesto:
    Lesson output is the product: it is what gets printed, captured and
    verified. Diagnostics therefore never share a stream with it.

    - **Structures:** structlog events with key/value fields
    - **Separates:** logs go to stderr, lesson output owns stdout
    - **Correlates:** run_id and lesson are bound for the duration of a run
    - **Flexes:** console output for a terminal, JSON otherwise

Architecture:
    ::

        configure_logging(level="INFO", json_format=None, service="primer")
            │
            ▼
        structlog processor chain:
          1. TimeStamper(iso)
          2. merge_contextvars
          3. add_log_level
          4. logger_name -> logger
          5. StackInfoRenderer / set_exc_info
          6. add_service_metadata
          7. JSONRenderer (or ConsoleRenderer for a tty)

    Until configure_logging() runs, importing this module installs a plain
    console chain on stderr that drops anything below WARNING.

Examples:
    >>> from primer.core.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG", json_format=True)
    >>> logger = get_logger(__name__)
    >>> logger.info("lesson_registered", name="classes/person")

Tags:
    logging, structlog, observability, primer
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

# Store service name for metadata
_SERVICE_NAME = "primer"


def _add_service_metadata(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service-level metadata to all logs."""
    event_dict.setdefault("service", _SERVICE_NAME)
    return event_dict


def _logger_name_field(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Rename the ``logger_name`` bound by :func:`get_logger` to ``logger``."""
    name = event_dict.pop("logger_name", None)
    if name is not None:
        event_dict.setdefault("logger", name)
    return event_dict


def _stderr_logger_factory(*args: Any) -> structlog.PrintLogger:
    """Resolve ``sys.stderr`` per logger, so swapped streams are honoured."""
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(
    level: str = "WARNING",
    json_format: bool | None = None,
    service: str = "primer",
    add_timestamp: bool = True,
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: True for JSON, False for console, None for auto (JSON if not tty)
        service: Service name to include in logs
        add_timestamp: Include ISO timestamp in logs
    """
    global _SERVICE_NAME
    _SERVICE_NAME = service

    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        from primer.core.errors import ConfigError

        raise ConfigError(f"Unknown log level: {level!r}").with_context(setting="log_level")

    if json_format is None:
        json_format = not sys.stderr.isatty()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        _logger_name_field,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        _add_service_metadata,
    ]

    if add_timestamp:
        shared_processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_format:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=numeric_level,
    )


def _configure_defaults() -> None:
    """Stderr, WARNING and above, until :func:`configure_logging` is called."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            _logger_name_field,
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        context_class=dict,
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )


_configure_defaults()


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger.

    Args:
        name: Logger name (usually __name__), bound as the ``logger`` field
    """
    if name:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()


def bind_context(**kwargs: Any) -> None:
    """Bind context to include in all subsequent logs."""
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Remove specific keys from logging context."""
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    """Clear all bound context."""
    structlog.contextvars.clear_contextvars()


class LogContext:
    """Context manager for scoped logging context.

    Example:
        with LogContext(run_id=ctx.run_id, lesson=lesson.name):
            logger.info("lesson_run_started")
        # Context cleared here
    """

    def __init__(self, **kwargs: Any):
        self._context = kwargs

    def __enter__(self) -> LogContext:
        bind_context(**self._context)
        return self

    def __exit__(self, *args: Any) -> None:
        unbind_context(*self._context.keys())


__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "unbind_context",
    "clear_context",
    "LogContext",
]
