"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, formbind.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from formbind.formatting.builtins import DEFAULT_FALSE_VALUES, DEFAULT_TRUE_VALUES


class BinderConfig(BaseModel):
    """[binder] section."""

    model_config = {"frozen": True}

    strict: bool = False
    field_marker_prefix: str = "_"
    field_default_prefix: str = "!"
    auto_grow: bool = True


class FormatConfig(BaseModel):
    """[format] section.

    Patterns use ``strftime`` syntax; None means ISO-8601.
    """

    model_config = {"frozen": True}

    date_pattern: str | None = None
    datetime_pattern: str | None = None
    time_pattern: str | None = None
    true_values: tuple[str, ...] = DEFAULT_TRUE_VALUES
    false_values: tuple[str, ...] = DEFAULT_FALSE_VALUES
    grouping_separator: str | None = ","
    currency_symbol: str = "$"
    currency_places: int = Field(default=2, ge=0)
