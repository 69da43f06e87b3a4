"""
Operations layer: typed requests in, :class:`OperationResult` envelopes out.

The CLI calls only these functions; they never print.
"""

from primer.ops.context import OperationContext
from primer.ops.lessons import get_lesson, list_lessons, list_topics, run_lesson, verify_lessons
from primer.ops.result import OperationError, OperationResult, PagedResult

__all__ = [
    "OperationContext",
    "OperationError",
    "OperationResult",
    "PagedResult",
    "get_lesson",
    "list_lessons",
    "list_topics",
    "run_lesson",
    "verify_lessons",
]
