"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``BINPARSE_*`` prefix
  3. TOML file    — ``binparse.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`binparse.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from binparse.config.discovery import find_config
from binparse.config.models import OutputConfig, ParseConfig, SelfTestConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``binparse.toml`` file discovered via walk-up."""

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


class BinparseSettings(BaseSettings):
    """Unified settings for the binparse CLI and services.

    Merges CLI flags, environment variables, TOML config sections,
    and code-baked defaults into a single frozen object.  Stored on the
    Click context object at the CLI root level.

    Attributes:
        config_path: The TOML file that was loaded, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "BINPARSE_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    parsing: ParseConfig = Field(default_factory=ParseConfig)
    selftest: SelfTestConfig = Field(default_factory=SelfTestConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

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
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> BinparseSettings:
        """Construct settings from a CLI invocation.

        Uses the explicit *config_path*, otherwise ``BINPARSE_CONFIG`` or the
        nearest ``binparse.toml`` above *start* (or CWD).  A named file that
        does not exist is an error rather than a silent fallback.
        CLI flags are merged as highest-priority overrides.  Flags left at
        their off value (False or None) are dropped so env vars and TOML can
        still set them.
        """
        toml_path = Path(config_path) if config_path else find_config(start)
        if toml_path is not None and not toml_path.is_file():
            import click

            msg = f"Config file not found: {toml_path}"
            raise click.ClickException(msg)

        _tls.toml_path = toml_path
        try:
            overrides = {
                k: v for k, v in cli_flags.items() if v is not None and v is not False
            }
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None
