"""
Shared pytest fixtures and configuration for primer tests.

This module provides:
- Registry and settings cleanup fixtures for test isolation
- A scratch ``LessonContext`` backed by pytest's ``tmp_path``
- Quiet, deterministic logging (JSON to stderr, WARNING and above)
"""

import sys
from pathlib import Path

import pytest

# Ensure primer package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from primer.core.context import LessonContext
from primer.core.logging import clear_context, configure_logging
from primer.core.settings import clear_settings_cache
from primer.registry import clear_registry


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        test_path = Path(item.path).relative_to(Path(__file__).parent)

        if test_path.parts[0] == "cli":
            item.add_marker(pytest.mark.integration)

        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "integration", "slow"}):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _quiet_logging():
    """Render logs as JSON on stderr so they never reach captured stdout."""
    configure_logging(level="WARNING", json_format=True)
    yield
    clear_context()


@pytest.fixture(autouse=True)
def clean_registry():
    """Start and finish every test with an empty, unloaded lesson registry."""
    clear_registry()
    yield
    clear_registry()


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Drop cached settings and any PRIMER_* variables from the environment."""
    import os

    for key in list(os.environ):
        if key.startswith("PRIMER_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(Path(__file__).parent)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def lesson_ctx(tmp_path) -> LessonContext:
    """A lesson context whose scratch directory is a pytest tmp dir."""
    return LessonContext(workdir=tmp_path, seed=42)
