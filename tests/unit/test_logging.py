"""Tests for configure_logging."""

from __future__ import annotations

import json

import structlog

from okfail import LoggingExecutionContext, Ok
from okfail.config import LoggingSettings
from okfail.logging import configure_logging


class TestConfigureLogging:
    def test_console_renderer_by_default(self):
        configure_logging(LoggingSettings(log_level="INFO"))
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_json_renderer_when_requested(self):
        configure_logging(LoggingSettings(json_logs=True))
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_json_lines_output(self, capsys):
        configure_logging(LoggingSettings(json_logs=True))
        structlog.get_logger().warning("okfail.test", answer=42)
        line = capsys.readouterr().out.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "okfail.test"
        assert payload["answer"] == 42
        assert payload["level"] == "warning"
        assert "timestamp" in payload

    def test_filters_below_configured_level(self, capsys):
        configure_logging(LoggingSettings(log_level="WARNING", json_logs=True))
        log = structlog.get_logger()
        log.info("okfail.hidden")
        log.warning("okfail.shown")
        out = capsys.readouterr().out
        assert "okfail.hidden" not in out
        assert "okfail.shown" in out

    def test_loads_settings_from_env_when_omitted(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("OKFAIL_JSON_LOGS", "1")
        configure_logging()
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_reconfiguring_reaches_execution_logs(self, capsys):
        ctx = LoggingExecutionContext(operation="reconfigured")

        configure_logging(LoggingSettings(log_level="WARNING", json_logs=True))
        ctx.execute(lambda: Ok(1))
        assert "execution.started" not in capsys.readouterr().out

        configure_logging(LoggingSettings(log_level="INFO", json_logs=True))
        ctx.execute(lambda: Ok(1))
        events = [json.loads(line)["event"] for line in capsys.readouterr().out.strip().splitlines()]
        assert events == ["execution.started", "execution.completed"]
