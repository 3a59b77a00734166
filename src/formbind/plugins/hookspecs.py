"""Pluggy hook specifications for formbind formatter plugins.

Plugins contribute formatters for extra types and marker factories.
Both hooks are collected at registry setup time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pluggy

if TYPE_CHECKING:
    from formbind.formatting.base import AnnotationFormatterFactory, Formatter

hookspec = pluggy.HookspecMarker("formbind")
hookimpl = pluggy.HookimplMarker("formbind")


class FormbindHookSpec:
    """Hook specifications for the formbind plugin system."""

    @hookspec
    def register_formatters(self) -> dict[type, Formatter[Any]] | None:
        """Return type -> Formatter mappings to add to a registry."""

    @hookspec
    def register_formatter_factories(self) -> list[AnnotationFormatterFactory[Any]] | None:
        """Return marker factories to add to a registry."""
