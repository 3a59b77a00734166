"""Tests for the ``formbind formatters`` command."""

import json

from click.testing import CliRunner

from formbind.cli import cli


def test_lists_builtins_and_plugins(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["formatters"])
    assert result.exit_code == 0, result.output
    assert "Formatters" in result.output
    assert "Marker factories" in result.output
    assert "datetime.date" in result.output
    assert "datetime.timedelta" in result.output


def test_json(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--json", "formatters"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert "builtins.int" in payload["formatters"]
    assert "datetime.timedelta" in payload["formatters"]
    factories = payload["factories"]
    assert factories["formbind.formatting.annotations.DateFormat"] == "DateFormatFactory"
