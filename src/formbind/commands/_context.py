"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy registry construction (built-ins plus
plugins) and centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from formbind.output.formatters import format_results

if TYPE_CHECKING:
    from formbind.binding.results import BindingResults
    from formbind.config.settings import BinderSettings
    from formbind.formatting.registry import FormatterRegistry


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The registry is built on first use so ``--help`` and ``--version``
    never trigger plugin discovery.
    """

    def __init__(self, settings: BinderSettings) -> None:
        self.settings = settings
        self._registry: FormatterRegistry | None = None
        self.plugin_warnings: list[str] = []

        from formbind.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def registry(self) -> FormatterRegistry:
        """Default registry from settings, extended by installed plugins."""
        if self._registry is None:
            from formbind.formatting.registry import FormatterRegistry
            from formbind.plugins.manager import PluginManager

            registry = FormatterRegistry.with_defaults(self.settings.format)
            manager = PluginManager()
            manager.discover_and_load()
            self.plugin_warnings = manager.install_into(registry)
            self._registry = registry
        return self._registry

    def emit(self, results: BindingResults, *, model: Any = None) -> None:
        """Format and output BindingResults with correct exit semantics.

        * All fields bound: writes to stdout, returns normally.
        * Any failure: writes to stderr, exits with code 1.
        """
        output = format_results(
            results,
            model=model,
            json_output=self.settings.json_output,
            verbose=self.settings.verbose,
        )
        if not self.settings.json_output:
            for warning in self.plugin_warnings:
                click.echo(f"WARNING: {warning}", err=True)
        if results.has_failures:
            click.echo(output, err=True)
            raise SystemExit(1)
        click.echo(output)
