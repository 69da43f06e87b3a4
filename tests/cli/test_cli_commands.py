"""Tests for primer.cli: command smoke tests via CliRunner.

Commands run against the real lesson registry; only configuration is
steered through ``PRIMER_*`` environment variables.
"""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from primer.cli.app import app
from primer.registry import Topic, register_lesson

runner = CliRunner()


@pytest.fixture(autouse=True)
def scratch_workdir(monkeypatch, tmp_path):
    monkeypatch.setenv("PRIMER_WORKDIR", str(tmp_path / "runs"))


@pytest.fixture
def broken_lesson():
    register_lesson(Topic.TYPE_HINTS, "broken_demo", expected=["documented"])(
        lambda ctx: print("actual")
    )
    return "type_hints/broken_demo"


# ─── Root ────────────────────────────────────────────────────────────────


class TestRoot:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert result.output.startswith("primer ")

    def test_invalid_settings(self):
        result = runner.invoke(app, ["topics"], env={"PRIMER_LOG_LEVEL": "LOUD"})
        assert result.exit_code == 1
        assert "Error (CONFIG_INVALID)" in result.output

    def test_invalid_log_level_flag(self):
        result = runner.invoke(app, ["--log-level", "chatty", "topics"])
        assert result.exit_code == 1
        assert "Unknown log level" in result.output

    def test_topics_json(self):
        result = runner.invoke(app, ["topics", "--json"])
        assert result.exit_code == 0
        topics = json.loads(result.stdout)
        assert [t["topic"] for t in topics] == [t.value for t in Topic]

    def test_topics_table(self):
        result = runner.invoke(app, ["topics"])
        assert result.exit_code == 0
        assert "Topics" in result.output


# ─── Lessons ─────────────────────────────────────────────────────────────


class TestLessonsList:
    def test_json_paging(self):
        result = runner.invoke(app, ["lessons", "list", "--limit", "2", "--json"])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert [i["name"] for i in payload["items"]] == ["variables/basic_types", "variables/strings"]
        assert payload["has_more"] is True

    def test_table(self):
        result = runner.invoke(app, ["lessons", "list", "--topic", "modules"])
        assert result.exit_code == 0
        assert "Showing 3 of 3" in result.output

    def test_unknown_topic(self):
        result = runner.invoke(app, ["lessons", "list", "--topic", "cooking"])
        assert result.exit_code == 1
        assert "Error (VALIDATION_FAILED)" in result.output


class TestLessonsShow:
    def test_show(self):
        result = runner.invoke(app, ["lessons", "show", "classes/person"])
        assert result.exit_code == 0
        assert "classes/person" in result.stdout
        assert "Hello, my name is Alice and I am 30 years old." in result.stdout

    def test_show_json(self):
        result = runner.invoke(app, ["lessons", "show", "classes/person", "--json"])
        detail = json.loads(result.stdout)
        assert detail["expected"][-1] == "31"
        assert "def demo_person" in detail["source"]

    def test_show_missing(self):
        result = runner.invoke(app, ["lessons", "show", "classes/ghost"])
        assert result.exit_code == 1
        assert "Error (NOT_FOUND)" in result.output


class TestLessonsRun:
    def test_run_prints_lesson_output(self):
        result = runner.invoke(app, ["lessons", "run", "functions/recursion"])
        assert result.exit_code == 0
        assert result.output.splitlines()[:2] == ["120", "[1, 1, 2, 6, 24, 120]"]

    def test_run_json(self):
        result = runner.invoke(app, ["lessons", "run", "data_structures/sets", "--json"])
        assert result.exit_code == 0
        run = json.loads(result.stdout)
        assert run["passed"] is True
        assert run["lesson"] == "data_structures/sets"
        assert run["mismatches"] == []

    def test_run_failing_lesson_exits_1(self, broken_lesson):
        result = runner.invoke(app, ["lessons", "run", broken_lesson])
        assert result.exit_code == 1
        assert result.output.splitlines()[0] == "actual"
        assert "FAIL" in result.output

    def test_run_missing(self):
        result = runner.invoke(app, ["lessons", "run", "nope/nope"])
        assert result.exit_code == 1
        assert "Error (NOT_FOUND)" in result.output


# ─── Logging flags ───────────────────────────────────────────────────────


def _json_lines(text: str) -> list[dict]:
    return [json.loads(line) for line in text.splitlines() if line.startswith("{")]


class TestLogFlags:
    def test_debug_json_logs_stay_on_stderr(self):
        result = runner.invoke(
            app, ["--log-level", "debug", "--json-logs", "lessons", "run", "functions/recursion"]
        )
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["120", "[1, 1, 2, 6, 24, 120]"]

        events = _json_lines(result.stderr)
        by_name = {e["event"]: e for e in events}
        assert "lesson_run_started" in by_name
        finished = by_name["lesson_run_finished"]
        assert finished["logger"] == "primer.runner"
        assert finished["lesson"] == "functions/recursion"
        assert finished["passed"] is True
        assert "PASS functions/recursion" in result.stderr

    def test_console_logs_are_not_json(self):
        result = runner.invoke(
            app, ["--log-level", "info", "--console-logs", "lessons", "run", "functions/recursion"]
        )
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["120", "[1, 1, 2, 6, 24, 120]"]
        assert "lesson_run_finished" in result.stderr
        assert "primer.runner" in result.stderr
        assert _json_lines(result.stderr) == []

    def test_default_level_hides_info_events(self):
        result = runner.invoke(app, ["--json-logs", "lessons", "run", "functions/recursion"])
        assert result.exit_code == 0
        assert _json_lines(result.stderr) == []
        assert "lesson_run_finished" not in result.output


# ─── Verify ──────────────────────────────────────────────────────────────


class TestVerify:
    def test_topic_passes(self):
        result = runner.invoke(app, ["verify", "--topic", "decorators", "--json"])
        assert result.exit_code == 0
        report = json.loads(result.stdout)
        assert report["ok"] is True
        assert report["passed"] == report["total"] == 5

    def test_table_summary(self):
        result = runner.invoke(app, ["verify", "--topic", "modules"])
        assert result.exit_code == 0
        assert "3 passed, 0 failed, 0 skipped of 3" in result.output

    def test_failure_exits_1(self, broken_lesson):
        result = runner.invoke(app, ["verify", "--topic", "type_hints", "--fail-fast"])
        assert result.exit_code == 1
        assert "1 failed" in result.output

    def test_unknown_topic(self):
        result = runner.invoke(app, ["verify", "--topic", "cooking"])
        assert result.exit_code == 1
        assert "Error (VALIDATION_FAILED)" in result.output


# ─── Config ──────────────────────────────────────────────────────────────


class TestConfigShow:
    def test_json(self):
        result = runner.invoke(app, ["config", "show", "--format", "json"], env={"PRIMER_SEED": "7"})
        assert result.exit_code == 0
        assert json.loads(result.stdout)["seed"] == 7

    def test_env(self):
        result = runner.invoke(app, ["config", "show", "--format", "env"])
        assert result.exit_code == 0
        assert "PRIMER_SEED=42" in result.stdout.splitlines()
        assert "PRIMER_LOG_LEVEL=WARNING" in result.stdout.splitlines()

    def test_table(self):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "service_name" in result.output

    def test_unknown_format(self):
        result = runner.invoke(app, ["config", "show", "--format", "yaml"])
        assert result.exit_code == 1
        assert "Error (VALIDATION_FAILED)" in result.output
