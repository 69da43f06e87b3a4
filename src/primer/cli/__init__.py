"""
CLI layer: a thin Typer front end over :mod:`primer.ops`.

Commands parse arguments, build a request, call one operation and render
the :class:`~primer.ops.result.OperationResult` with Rich. They never touch
the registry or runner directly.
"""

from primer.cli.app import app

__all__ = ["app"]
