"""Tests for the bundled extras plugin formatters."""

import ipaddress
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path

import pytest

from formbind.binding.generic import GenericBinder
from formbind.formatting.registry import FormatterRegistry
from formbind.plugins.builtins.extras import (
    DurationFormatter,
    ExtrasPlugin,
    IPv4Formatter,
    IPv6Formatter,
    PathFormatter,
)
from formbind.plugins.manager import PluginManager


@dataclass
class Server:
    root: Path | None = None
    address: ipaddress.IPv4Address | None = None
    timeout: timedelta = timedelta(seconds=30)


class TestFormatters:
    def test_path_expands_user(self) -> None:
        assert PathFormatter().parse("~/data") == Path("~/data").expanduser()

    def test_empty_path_rejected(self) -> None:
        with pytest.raises(ValueError):
            PathFormatter().parse("  ")

    def test_ipv4(self) -> None:
        assert IPv4Formatter().parse(" 10.0.0.1 ") == ipaddress.IPv4Address("10.0.0.1")
        with pytest.raises(ValueError):
            IPv4Formatter().parse("300.1.1.1")

    def test_ipv6(self) -> None:
        assert IPv6Formatter().format(IPv6Formatter().parse("::1")) == "::1"

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("90", timedelta(seconds=90)),
            ("1:30", timedelta(minutes=1, seconds=30)),
            ("2:05:00", timedelta(hours=2, minutes=5)),
        ],
    )
    def test_duration_parse(self, text: str, expected: timedelta) -> None:
        assert DurationFormatter().parse(text) == expected

    def test_duration_format(self) -> None:
        assert DurationFormatter().format(timedelta(hours=1, seconds=5)) == "1:00:05"

    @pytest.mark.parametrize(
        ("value", "text"),
        [
            (timedelta(seconds=-30), "-0:00:30"),
            (timedelta(seconds=90.25), "0:01:30.25"),
            (timedelta(hours=-1, minutes=-2, microseconds=-500), "-1:02:00.0005"),
            (timedelta(days=1, seconds=5), "24:00:05"),
        ],
    )
    def test_duration_format_keeps_sign_and_fraction(self, value: timedelta, text: str) -> None:
        formatter = DurationFormatter()
        assert formatter.format(value) == text
        assert formatter.parse(text) == value

    def test_duration_negative_seconds(self) -> None:
        assert DurationFormatter().parse("-90") == timedelta(seconds=-90)

    def test_duration_garbage(self) -> None:
        with pytest.raises(ValueError):
            DurationFormatter().parse("soon")


def test_plugin_extends_binder_registry() -> None:
    pm = PluginManager()
    pm.register_plugin(ExtrasPlugin(), name="extras")
    registry = FormatterRegistry.with_defaults()
    pm.install_into(registry)

    server = Server()
    results = GenericBinder(server, registry=registry).bind_mapping(
        {"root": "/srv/www", "address": "192.168.1.2", "timeout": "1:00"}
    )
    assert not results.has_failures
    assert server.root == Path("/srv/www")
    assert server.address == ipaddress.IPv4Address("192.168.1.2")
    assert server.timeout == timedelta(minutes=1)
