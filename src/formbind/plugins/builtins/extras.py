"""Extras plugin: formatters for paths, IP addresses, and durations.

Registered through the ``formbind.plugins`` entry point, so it is loaded by
``PluginManager.discover_and_load()`` like any third-party plugin.
"""

from __future__ import annotations

import ipaddress
import re
from datetime import timedelta
from pathlib import Path
from typing import Any

from formbind.formatting.base import Formatter
from formbind.plugins.hookspecs import hookimpl

_DURATION = re.compile(r"^(?:(?P<h>\d+):)?(?P<m>\d{1,2}):(?P<s>\d{1,2}(?:\.\d+)?)$")


class PathFormatter(Formatter[Path]):
    def parse(self, text: str) -> Path:
        text = text.strip()
        if not text:
            raise ValueError("path is empty")
        return Path(text).expanduser()

    def format(self, value: Path) -> str:
        return str(value)


class IPv4Formatter(Formatter[ipaddress.IPv4Address]):
    def parse(self, text: str) -> ipaddress.IPv4Address:
        return ipaddress.IPv4Address(text.strip())

    def format(self, value: ipaddress.IPv4Address) -> str:
        return str(value)


class IPv6Formatter(Formatter[ipaddress.IPv6Address]):
    def parse(self, text: str) -> ipaddress.IPv6Address:
        return ipaddress.IPv6Address(text.strip())

    def format(self, value: ipaddress.IPv6Address) -> str:
        return str(value)


class DurationFormatter(Formatter[timedelta]):
    """Durations as ``[-][H:]MM:SS[.ffffff]`` or a plain number of seconds."""

    def parse(self, text: str) -> timedelta:
        text = text.strip()
        negative = text.startswith("-")
        match = _DURATION.match(text[1:] if negative else text)
        if match is None:
            return timedelta(seconds=float(text))
        value = timedelta(
            hours=int(match.group("h") or 0),
            minutes=int(match.group("m")),
            seconds=float(match.group("s")),
        )
        return -value if negative else value

    def format(self, value: timedelta) -> str:
        sign = "-" if value < timedelta(0) else ""
        value = abs(value)
        hours, rest = divmod(value.days * 86400 + value.seconds, 3600)
        minutes, seconds = divmod(rest, 60)
        text = f"{sign}{hours}:{minutes:02d}:{seconds:02d}"
        if value.microseconds:
            text += f".{value.microseconds:06d}".rstrip("0")
        return text


class ExtrasPlugin:
    """Formatters for stdlib types not covered by the default registry."""

    @hookimpl
    def register_formatters(self) -> dict[type, Formatter[Any]]:
        return {
            Path: PathFormatter(),
            ipaddress.IPv4Address: IPv4Formatter(),
            ipaddress.IPv6Address: IPv6Formatter(),
            timedelta: DurationFormatter(),
        }
