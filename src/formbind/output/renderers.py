"""Rich renderers for BindingResults and registry listings.

Each renderer writes to a Rich Console (backed by StringIO). The caller
gets plain text back; Rich drops ANSI codes when no terminal is attached.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from formbind.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from formbind.binding.results import BindingResults
    from formbind.formatting.registry import FormatterRegistry


def model_state(model: Any) -> dict[str, Any]:
    """Best-effort snapshot of a model's public state for display."""
    if isinstance(model, Mapping):
        return dict(model)
    dump = getattr(model, "model_dump", None)
    if callable(dump):
        return dump()
    if dataclasses.is_dataclass(model) and not isinstance(model, type):
        return dataclasses.asdict(model)
    return {k: v for k, v in getattr(model, "__dict__", {}).items() if not k.startswith("_")}


def render_results(
    results: BindingResults,
    *,
    model: Any = None,
    verbose: bool = False,
) -> str:
    """Render a results table, followed by the model state when given."""
    console = create_console()

    if results.has_failures:
        status = Text("FAILED", style="fb.error")
    else:
        status = Text("OK", style="fb.ok")
    summary = Text(
        f"  bound {len(results.successes())} of {len(results)} field(s)", style="fb.key"
    )
    console.print(status, summary)

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Property", style="fb.property")
    table.add_column("Result")
    table.add_column("Submitted", style="fb.raw")
    table.add_column("Value / message")
    if verbose:
        table.add_column("Cause", style="fb.key")

    for result in results:
        kind = str(result.kind)
        detail = repr(result.value) if result.ok else result.message
        # Plain Text cells: paths like "attrs[color]" must not parse as markup.
        row = [
            Text(result.property),
            Text(kind, style=style_for_kind(kind)),
            Text(repr(result.user_value)),
            Text(detail),
        ]
        if verbose:
            row.append(Text(result.cause or ""))
        table.add_row(*row)
    console.print(table)

    if model is not None:
        console.print(Text("Model", style="bold"))
        for key, value in model_state(model).items():
            console.print(Text(f"  {key}: ", style="fb.key"), Text(repr(value)), sep="")

    return get_output(console).rstrip("\n")


def render_registry(registry: FormatterRegistry) -> str:
    """Render the registered types and marker factories."""
    console = create_console()

    types_table = Table(title="Formatters", show_header=True, header_style="bold", box=None)
    types_table.add_column("Type", style="fb.type")
    types_table.add_column("Formatter")
    for property_type, formatter in sorted(
        registry.formatters().items(), key=lambda item: item[0].__name__
    ):
        types_table.add_row(Text(_qualname(property_type)), Text(repr(formatter)))
    console.print(types_table)

    factory_table = Table(
        title="Marker factories", show_header=True, header_style="bold", box=None
    )
    factory_table.add_column("Marker", style="fb.type")
    factory_table.add_column("Factory")
    for marker_type, factory in sorted(
        registry.factories().items(), key=lambda item: item[0].__name__
    ):
        factory_table.add_row(Text(_qualname(marker_type)), Text(type(factory).__name__))
    console.print(factory_table)

    return get_output(console).rstrip("\n")


def _qualname(cls: type) -> str:
    module = cls.__module__
    if module == "builtins":
        return cls.__qualname__
    return f"{module}.{cls.__qualname__}"
