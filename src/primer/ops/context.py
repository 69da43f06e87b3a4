"""
Request-scoped context for operations.

Every operation function receives an :class:`OperationContext` as its first
argument. It is not the same as :class:`primer.core.context.LessonContext`,
which is what a single lesson demo sees while it runs.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any

from primer.core.settings import PrimerSettings, get_settings


@dataclass
class OperationContext:
    """Context passed to every operation function.

    Attributes:
        settings: Resolved :class:`PrimerSettings` (loaded lazily when omitted).
        request_id: Unique ID for this operation invocation (auto-generated).
        caller: Origin of the request, ``"cli"`` or ``"sdk"``.
        metadata: Arbitrary key/value pairs forwarded to logging.
    """

    settings: PrimerSettings = field(default_factory=get_settings)
    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    caller: str = "sdk"
    metadata: dict[str, Any] = field(default_factory=dict)
