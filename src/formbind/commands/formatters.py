"""Command: list registered formatters and marker factories."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from formbind.commands._base import FormbindCommand

if TYPE_CHECKING:
    from formbind.commands._context import AppContext


@click.command(
    cls=FormbindCommand,
    examples="""\
  formbind formatters
  formbind --json formatters""",
)
@click.pass_obj
def formatters(app: AppContext) -> None:
    """List the types and markers the binder can format, including plugins."""
    registry = app.registry
    if app.settings.json_output:
        payload = {
            "formatters": {
                f"{t.__module__}.{t.__qualname__}": repr(f)
                for t, f in registry.formatters().items()
            },
            "factories": {
                f"{m.__module__}.{m.__qualname__}": type(f).__name__
                for m, f in registry.factories().items()
            },
        }
        click.echo(json.dumps(payload, indent=2))
    else:
        from formbind.output.renderers import render_registry

        click.echo(render_registry(registry))
    for warning in app.plugin_warnings:
        click.echo(f"WARNING: {warning}", err=True)
