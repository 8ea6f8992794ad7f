"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs, CLI flags passed by Click
  2. Env vars, ``RIT_*`` prefix, ``__`` for nesting
  3. TOML file, only when given via ``--config`` or ``RIT_CONFIG``
  4. Code defaults, baked into the section models

There is no walk-up discovery of config files.
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from rit.config.models import LauncherConfig

CONFIG_ENV_VAR = "RIT_CONFIG"


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from an explicitly named TOML file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class RitSettings(BaseSettings):
    """Settings for the rit CLI, frozen after construction.

    Attributes:
        config_path: TOML file the settings were read from, if any.
        launcher: Base command and blacklist for the default launcher chain.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "RIT_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    launcher: LauncherConfig = Field(default_factory=LauncherConfig)

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
        base_command: str | None = None,
        **cli_flags: Any,
    ) -> RitSettings:
        """Construct settings from a CLI invocation.

        *config_path* falls back to ``RIT_CONFIG``. Flags left at their
        falsy default do not override env vars or the TOML file.
        """
        raw_path = config_path or os.environ.get(CONFIG_ENV_VAR)
        toml_path: Path | None = None
        if raw_path:
            p = Path(raw_path)
            if p.is_file():
                toml_path = p

        overrides: dict[str, Any] = {k: v for k, v in cli_flags.items() if v}
        if base_command:
            overrides["launcher"] = {"base_command": base_command}

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            )
            raise click.ClickException(f"Invalid settings: {problems}") from exc
        finally:
            _tls.toml_path = None
