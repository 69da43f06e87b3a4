"""Tests for primer.runner: output capture and verification."""

import pytest

from primer.registry import Lesson, Topic
from primer.runner import (
    LineMismatch,
    compare_output,
    match_line,
    run_lesson,
    scratch_context,
)
from primer.core.settings import PrimerSettings


def make_lesson(demo, expected, slug="sample"):
    return Lesson(
        name=f"variables/{slug}",
        topic=Topic.VARIABLES,
        slug=slug,
        title="Probe",
        description="Probe",
        order=1,
        demo=demo,
        expected=tuple(expected),
    )


class TestMatchLine:
    @pytest.mark.parametrize(
        ("expected", "actual", "matches"),
        [
            ("hello", "hello", True),
            ("hello", "hello!", False),
            ("took ... seconds", "took 0.0012 seconds", True),
            ("took ... seconds", "took seconds", False),
            ("took ...seconds", "took seconds", True),
            ("today: ...", "today: 2026-10-18", True),
            ("a.b", "axb", False),
            ("...", "", True),
            ("[1, 2] ...", "[1, 2] (3)", True),
        ],
    )
    def test_ellipsis_rule(self, expected, actual, matches):
        assert match_line(expected, actual) is matches


class TestCompareOutput:
    def test_identical(self):
        assert compare_output(["a", "b"], ["a", "b"]) == []

    def test_changed_line(self):
        assert compare_output(["a", "b"], ["a", "c"]) == [LineMismatch(2, "b", "c")]

    def test_missing_and_extra_lines(self):
        assert compare_output(["a", "b"], ["a"]) == [LineMismatch(2, "b", None)]
        assert compare_output(["a"], ["a", "z"]) == [LineMismatch(2, None, "z")]


class TestRunLesson:
    def test_passing_lesson(self, lesson_ctx):
        run = run_lesson(make_lesson(lambda ctx: print("hi  "), ["hi"]), lesson_ctx)
        assert run.passed
        assert run.output == ["hi"]
        assert run.error is None
        assert run.run_id == lesson_ctx.run_id
        assert run.duration_ms >= 0

    def test_output_mismatch_fails(self, lesson_ctx):
        run = run_lesson(make_lesson(lambda ctx: print("bye"), ["hi"]), lesson_ctx)
        assert not run.passed
        assert run.mismatches == [LineMismatch(1, "hi", "bye")]

    def test_exception_is_recorded_not_raised(self, lesson_ctx, capsys):
        def demo(ctx):
            print("before")
            raise RuntimeError("kaboom")

        run = run_lesson(make_lesson(demo, ["before"]), lesson_ctx)
        assert not run.passed
        assert run.error == "RuntimeError: kaboom"
        assert run.output == ["before"]
        assert run.mismatches == []
        err = capsys.readouterr().err
        assert "lesson_run_failed" in err
        assert "LessonExecutionError" in err

    def test_stdout_restored(self, lesson_ctx, capsys):
        run_lesson(make_lesson(lambda ctx: print("captured"), ["captured"]), lesson_ctx)
        print("after")
        assert capsys.readouterr().out == "after\n"

    def test_demo_receives_context(self, lesson_ctx):
        seen = []
        run_lesson(make_lesson(lambda ctx: seen.append(ctx) or print("x"), ["x"]), lesson_ctx)
        assert seen == [lesson_ctx]


class TestScratchContext:
    def test_temporary_directory_removed(self):
        settings = PrimerSettings(seed=9)
        with scratch_context(settings) as ctx:
            assert ctx.workdir.is_dir()
            assert ctx.seed == 9
            workdir = ctx.workdir
        assert not workdir.exists()

    def test_configured_workdir_kept(self, tmp_path):
        settings = PrimerSettings(workdir=tmp_path / "runs")
        with scratch_context(settings) as ctx:
            ctx.path("file.txt").write_text("x", encoding="utf-8")
        assert ctx.workdir.parent == tmp_path / "runs"
        assert (ctx.workdir / "file.txt").exists()
