"""Root CLI group for formbind with global flags and command registration."""

from __future__ import annotations

import click

from formbind import __version__
from formbind.commands import register_commands
from formbind.commands._context import AppContext
from formbind.config.settings import BinderSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="formbind")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """Try form bindings against your model classes."""
    ctx.ensure_object(dict)
    flags = {
        name: value
        for name, value in (
            ("json_output", json_output),
            ("verbose", verbose),
            ("log_json", log_json),
        )
        if value
    }
    settings = BinderSettings.load(config_path=config_path, **flags)
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
