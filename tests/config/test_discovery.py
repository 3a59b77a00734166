"""Tests for formbind.toml discovery."""

from pathlib import Path

import pytest

from formbind.config.discovery import CONFIG_FILENAME, find_config


def test_finds_in_start_dir(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("")
    assert find_config(tmp_path) == (tmp_path / CONFIG_FILENAME).resolve()


def test_walks_up(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("")
    deep = tmp_path / "x" / "y" / "z"
    deep.mkdir(parents=True)
    assert find_config(deep) == (tmp_path / CONFIG_FILENAME).resolve()


def test_env_var_wins(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("")
    other = tmp_path / "other.toml"
    other.write_text("")
    monkeypatch.setenv("FORMBIND_CONFIG", str(other))
    assert find_config(tmp_path) == other


def test_env_var_pointing_nowhere(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("")
    monkeypatch.setenv("FORMBIND_CONFIG", str(tmp_path / "missing.toml"))
    assert find_config(tmp_path) is None
