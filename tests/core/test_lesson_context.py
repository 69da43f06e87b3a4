"""Tests for primer.core.context."""

from datetime import UTC
from pathlib import Path

from primer.core.context import LessonContext


def test_defaults(tmp_path):
    ctx = LessonContext(workdir=tmp_path)
    assert ctx.seed == 42
    assert len(ctx.run_id) == 36
    assert ctx.parent_run_id is None
    assert ctx.started_at.tzinfo is UTC


def test_run_ids_are_unique(tmp_path):
    assert LessonContext(workdir=tmp_path).run_id != LessonContext(workdir=tmp_path).run_id


def test_child_shares_workdir_and_seed(tmp_path):
    parent = LessonContext(workdir=tmp_path, seed=3)
    child = parent.child()
    assert child.workdir == parent.workdir
    assert child.seed == 3
    assert child.parent_run_id == parent.run_id
    assert child.run_id != parent.run_id


def test_path_resolves_inside_workdir():
    ctx = LessonContext(workdir=Path("/scratch"))
    assert ctx.path("data.csv") == Path("/scratch/data.csv")
