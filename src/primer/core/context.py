"""
Lesson context handed to every demo.

Every lesson run gets a unique ``run_id`` for log correlation, a scratch
``workdir`` for the file-handling lessons and a ``seed`` for lessons that
draw random numbers, so their printed output stays reproducible.

Examples:
    >>> from pathlib import Path
    >>> ctx = LessonContext(workdir=Path("/tmp/primer"))
    >>> len(ctx.run_id)
    36
    >>> child = ctx.child()
    >>> child.parent_run_id == ctx.run_id
    True
    >>> child.workdir == ctx.workdir
    True

Tags:
    lesson-context, run-id, primer
"""

import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path


@dataclass
class LessonContext:
    """
    Context passed into each lesson demo.

    Treat it as read-only; use :meth:`child` to derive a context for a
    nested run (``verify`` derives one child per lesson).

    Attributes:
        workdir: Directory lessons may write scratch files into
        seed: Seed for ``random.Random`` in lessons that need it
        run_id: Unique ID for this run (UUID string)
        parent_run_id: ID of the run that spawned this one
        started_at: When this run began (UTC datetime)
    """

    workdir: Path
    seed: int = 42
    run_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    parent_run_id: str | None = None
    started_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def child(self) -> "LessonContext":
        """Create a context for a nested run sharing workdir and seed."""
        return LessonContext(
            workdir=self.workdir,
            seed=self.seed,
            parent_run_id=self.run_id,
        )

    def path(self, filename: str) -> Path:
        """Resolve a scratch file name inside :attr:`workdir`."""
        return self.workdir / filename
