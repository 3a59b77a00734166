"""Shared pytest fixtures for formbind tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
import structlog
from click.testing import CliRunner

from formbind.formatting.registry import FormatterRegistry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def registry() -> FormatterRegistry:
    """Fresh registry with the built-in formatters and marker factories."""
    return FormatterRegistry.with_defaults()


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer env vars from leaking into settings-driven tests."""
    for name in ("FORMBIND_CONFIG", "FORMBIND_BINDER__STRICT", "FORMBIND_JSON_OUTPUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo handlers that CLI invocations attach to the formbind logger."""
    fb = logging.getLogger("formbind")
    handlers, level, propagate = fb.handlers[:], fb.level, fb.propagate
    yield
    fb.handlers[:] = handlers
    fb.setLevel(level)
    fb.propagate = propagate
    structlog.reset_defaults()
