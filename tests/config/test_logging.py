"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from formbind.binding.generic import GenericBinder
from formbind.config.logging import configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("formbind").level == logging.DEBUG

    def test_root_logger_untouched(self) -> None:
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        handler = configure_logging()
        assert root.handlers == handlers
        assert root.level == level
        fb = logging.getLogger("formbind")
        assert fb.handlers == [handler]
        assert fb.propagate is False

    def test_reconfigure_replaces_handler(self) -> None:
        configure_logging()
        handler = configure_logging(log_json=True)
        assert logging.getLogger("formbind").handlers == [handler]

    def test_quiet_by_default(self) -> None:
        configure_logging()
        assert logging.getLogger("formbind").level == logging.WARNING

    def test_json_lines(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("formbind.test").warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "formbind.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_is_structured(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("formbind.formatting.registry").warning("plain %s", "message")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "plain message"

    def test_bind_emits_debug_event(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        GenericBinder({}).bind_mapping({"name": "Ada"})
        events = [json.loads(line) for line in capfd.readouterr().err.splitlines() if line]
        complete = [e for e in events if e["event"] == "bind.complete"]
        assert complete and complete[0]["bound"] == 1
