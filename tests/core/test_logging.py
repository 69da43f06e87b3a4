"""Tests for primer.core.logging."""

import json

import pytest

from primer.core.errors import ConfigError
from primer.core.logging import (
    LogContext,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)


def _events(captured: str) -> list[dict]:
    return [json.loads(line) for line in captured.splitlines() if line.strip()]


class TestConfigureLogging:
    def test_json_events_go_to_stderr(self, capsys):
        configure_logging(level="INFO", json_format=True, service="primer-test")
        get_logger("tests.logging").info("lesson_registered", name="classes/person")

        captured = capsys.readouterr()
        assert captured.out == ""
        (event,) = _events(captured.err)
        assert event["event"] == "lesson_registered"
        assert event["name"] == "classes/person"
        assert event["level"] == "info"
        assert event["logger"] == "tests.logging"
        assert event["service"] == "primer-test"
        assert "timestamp" in event

    def test_level_filters_events(self, capsys):
        configure_logging(level="WARNING", json_format=True)
        logger = get_logger(__name__)
        logger.info("hidden")
        logger.warning("shown")

        events = _events(capsys.readouterr().err)
        assert [e["event"] for e in events] == ["shown"]

    def test_timestamp_optional(self, capsys):
        configure_logging(level="INFO", json_format=True, add_timestamp=False)
        get_logger().info("no_clock")
        (event,) = _events(capsys.readouterr().err)
        assert "timestamp" not in event

    def test_unknown_level_raises_config_error(self):
        with pytest.raises(ConfigError) as exc_info:
            configure_logging(level="CHATTY")
        assert exc_info.value.context.metadata["setting"] == "log_level"

    def test_exception_info_rendered_in_json(self, capsys):
        configure_logging(level="INFO", json_format=True)
        try:
            raise ValueError("broken demo")
        except ValueError:
            get_logger().warning("lesson_run_failed", exc_info=True)
        (event,) = _events(capsys.readouterr().err)
        assert "ValueError: broken demo" in event["exception"]


class TestContextBinding:
    def test_bind_and_unbind(self, capsys):
        configure_logging(level="INFO", json_format=True)
        bind_context(run_id="r-1", lesson="a/b")
        get_logger().info("first")
        unbind_context("lesson")
        get_logger().info("second")
        clear_context()
        get_logger().info("third")

        first, second, third = _events(capsys.readouterr().err)
        assert first["run_id"] == "r-1" and first["lesson"] == "a/b"
        assert second["run_id"] == "r-1" and "lesson" not in second
        assert "run_id" not in third

    def test_log_context_is_scoped(self, capsys):
        configure_logging(level="INFO", json_format=True)
        with LogContext(run_id="r-2"):
            get_logger().info("inside")
        get_logger().info("outside")

        inside, outside = _events(capsys.readouterr().err)
        assert inside["run_id"] == "r-2"
        assert "run_id" not in outside


class TestLoggerName:
    def test_name_rendered_as_logger_field(self, capsys):
        configure_logging(level="INFO", json_format=True)
        get_logger("primer.runner").info("lesson_run_finished")
        (event,) = _events(capsys.readouterr().err)
        assert event["logger"] == "primer.runner"
        assert "logger_name" not in event

    def test_unnamed_logger_has_no_logger_field(self, capsys):
        configure_logging(level="INFO", json_format=True)
        get_logger().info("anonymous")
        (event,) = _events(capsys.readouterr().err)
        assert "logger" not in event

    def test_console_format_shows_name(self, capsys):
        configure_logging(level="INFO", json_format=False)
        get_logger("primer.registry").info("lesson_registry_loaded", registered=3)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "lesson_registry_loaded" in captured.err
        assert "primer.registry" in captured.err
        assert "logger_name" not in captured.err
