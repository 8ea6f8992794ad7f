"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, a rit.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator


class LauncherConfig(BaseModel):
    """[launcher] section."""

    model_config = {"frozen": True}

    base_command: str = "git"
    blacklist: tuple[str, ...] = ("help",)

    @field_validator("base_command")
    @classmethod
    def _base_command_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("base_command must not be empty")
        return value
