"""Subcommand modules for formbind.

Provides register_commands() which uses deferred imports to keep
``formbind --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from formbind.commands.bind import bind
    from formbind.commands.formatters import formatters

    cli.add_command(bind)
    cli.add_command(formatters)
