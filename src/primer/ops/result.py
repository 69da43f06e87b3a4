"""
Operation result envelope.

Every operation returns an :class:`OperationResult` instead of raising, so
the CLI (or any other caller) renders success, failure and warnings the same
way. Failures carry a short machine-readable ``code``:

* ``NOT_FOUND``: the named lesson does not exist
* ``VALIDATION_FAILED``: a request field is invalid (topic, paging)
* ``CONFIG_INVALID``: settings could not be loaded
* ``INTERNAL``: anything else
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from primer.core.errors import (
    ConfigError,
    ErrorCategory,
    LessonNotFoundError,
    PrimerError,
    ValidationError,
)

T = TypeVar("T")

# Most specific class first.
_ERROR_CODES: tuple[tuple[type[PrimerError], str], ...] = (
    (LessonNotFoundError, "NOT_FOUND"),
    (ValidationError, "VALIDATION_FAILED"),
    (ConfigError, "CONFIG_INVALID"),
)


def error_code(error: PrimerError) -> str:
    """Map an exception to the operation error code the CLI reports."""
    for error_type, code in _ERROR_CODES:
        if isinstance(error, error_type):
            return code
    return "INTERNAL"


@dataclass(frozen=True, slots=True)
class OperationError:
    """Why an operation failed.

    ``details`` holds the error's context, e.g. the names that *are*
    available when a lesson lookup misses.
    """

    code: str
    message: str
    category: ErrorCategory | None = None
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.category is not None:
            d["category"] = self.category.value
        if self.details:
            d["details"] = self.details
        return d


@dataclass
class OperationResult(Generic[T]):
    """Success or failure of one operation, plus what happened along the way.

    Build instances with :meth:`ok`, :meth:`fail` or :meth:`from_error`.

    Attributes:
        success: ``True`` when the operation completed.
        data: The payload; ``None`` on failure.
        error: Set on failure only.
        warnings: Non-fatal findings, such as a lesson that failed verification.
        elapsed_ms: Wall-clock time the operation took.
        metadata: Correlation values such as ``request_id``.
    """

    success: bool
    data: T | None = None
    error: OperationError | None = None
    warnings: list[str] = field(default_factory=list)
    elapsed_ms: float = 0.0
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(
        cls,
        data: T,
        *,
        warnings: list[str] | None = None,
        elapsed_ms: float = 0.0,
        metadata: dict[str, Any] | None = None,
    ) -> OperationResult[T]:
        return cls(
            success=True,
            data=data,
            warnings=list(warnings or ()),
            elapsed_ms=elapsed_ms,
            metadata=dict(metadata or {}),
        )

    @classmethod
    def fail(
        cls,
        code: str,
        message: str,
        *,
        category: ErrorCategory | None = None,
        details: dict[str, Any] | None = None,
        elapsed_ms: float = 0.0,
    ) -> OperationResult[T]:
        error = OperationError(code, message, category, dict(details or {}))
        return cls(success=False, error=error, elapsed_ms=elapsed_ms)

    @classmethod
    def from_error(
        cls,
        error: PrimerError,
        *,
        code: str | None = None,
        elapsed_ms: float = 0.0,
    ) -> OperationResult[T]:
        """Turn a :class:`PrimerError` into a failed result.

        The code is derived from the error type unless given explicitly.
        """
        return cls.fail(
            code or error_code(error),
            error.message,
            category=error.category,
            details=error.context.to_dict(),
            elapsed_ms=elapsed_ms,
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form; empty optional parts are left out."""
        d: dict[str, Any] = {"success": self.success}
        if self.data is not None:
            d["data"] = self.data
        if self.error is not None:
            d["error"] = self.error.to_dict()
        if self.warnings:
            d["warnings"] = self.warnings
        if self.elapsed_ms:
            d["elapsed_ms"] = round(self.elapsed_ms, 2)
        if self.metadata:
            d["metadata"] = self.metadata
        return d


@dataclass
class PagedResult(OperationResult[list[T]]):
    """One page of a longer, ordered listing."""

    total: int = 0
    limit: int = 50
    offset: int = 0

    @property
    def has_more(self) -> bool:
        return self.offset + self.limit < self.total

    @classmethod
    def paginate(
        cls,
        items: list[T],
        *,
        limit: int,
        offset: int,
        elapsed_ms: float = 0.0,
    ) -> PagedResult[T]:
        """Slice ``items`` to the requested page.

        ``total`` is the length of the full listing, not of the page.
        """
        return cls(
            success=True,
            data=items[offset : offset + limit],
            total=len(items),
            limit=limit,
            offset=offset,
            elapsed_ms=elapsed_ms,
        )

    def to_dict(self) -> dict[str, Any]:
        d = super().to_dict()
        d.update(total=self.total, limit=self.limit, offset=self.offset, has_more=self.has_more)
        return d


@dataclass(slots=True)
class Stopwatch:
    """Started on creation; read :attr:`elapsed_ms` as often as needed."""

    started: float = field(default_factory=time.perf_counter)

    @property
    def elapsed_ms(self) -> float:
        return (time.perf_counter() - self.started) * 1000


def start_timer() -> Stopwatch:
    return Stopwatch()

