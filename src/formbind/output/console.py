"""Rich Console factory and theme for formbind output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_results() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

FORMBIND_THEME = Theme(
    {
        "fb.ok": "bold green",
        "fb.error": "bold red",
        "fb.warning": "bold yellow",
        "fb.property": "bold cyan",
        "fb.key": "dim",
        "fb.raw": "magenta",
        "fb.type": "blue",
    }
)

_KIND_STYLES: dict[str, str] = {
    "success": "fb.ok",
    "UnboundPropertyError": "fb.warning",
    "ConversionError": "fb.error",
    "PropertyAccessError": "fb.error",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=FORMBIND_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str) -> str:
    """Return the Rich style name for a binding result kind."""
    return _KIND_STYLES.get(kind, "")
