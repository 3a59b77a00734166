"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs - CLI flags or explicit library arguments
  2. Env vars - ``FORMBIND_*`` prefix, ``__`` for nested sections
  3. TOML file - ``formbind.toml`` discovered via walk-up
  4. Code defaults - baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from formbind.config.discovery import find_config
from formbind.config.models import BinderConfig, FormatConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``formbind.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class BinderSettings(BaseSettings):
    """Settings shared by the library and the ``formbind`` CLI.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        binder: Strictness, field-marker prefixes, auto-grow.
        format: Default patterns and words used by the built-in formatters.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "FORMBIND_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    binder: BinderConfig = Field(default_factory=BinderConfig)
    format: FormatConfig = Field(default_factory=FormatConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> BinderSettings:
        """Construct settings, discovering ``formbind.toml`` when no path is given.

        *start* is the directory the walk-up begins from (default: cwd).
        *overrides* take priority over every other source.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None
