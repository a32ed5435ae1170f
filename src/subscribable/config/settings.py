"""Channel settings and environment helpers.

This module provides:
1. ``ChannelSettings``, the validated options a channel is built from
2. YAML persistence for those settings
3. Environment lookups for the settings file and log level
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from . import loaders

DEFAULT_LOGGER_NAME: str = "subscribable.channel"
CONFIG_FILE_ENV: str = "SUBSCRIBABLE_CONFIG_FILE"
LOG_LEVEL_ENV: str = "SUBSCRIBABLE_LOG_LEVEL"


class ChannelSettings(BaseModel):
    """Options controlling how a channel reports rejected broadcasts."""

    warn_on_nested: bool = Field(
        True,
        description="Emit a warning diagnostic when a nested broadcast is ignored",
    )
    trace_on_nested: bool = Field(
        True,
        description="Emit a trace diagnostic with the call site of an ignored broadcast",
    )
    logger_name: str = Field(
        DEFAULT_LOGGER_NAME,
        description="Logger used by the default logging diagnostics",
    )
    trace_depth: Optional[int] = Field(
        None,
        description="Maximum number of stack frames in trace diagnostics; unlimited when unset",
        gt=0,
    )

    @field_validator("logger_name")
    @classmethod
    def validate_logger_name(cls, v: str) -> str:
        """Reject blank logger names, which would silently log to the root logger."""
        v = v.strip()
        if not v:
            raise ValueError("logger_name must not be empty")
        return v

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> "ChannelSettings":
        return cls(**(data or {}))

    @classmethod
    def load(cls, path: str | Path) -> "ChannelSettings":
        """Load settings from a YAML file.

        Args:
            path: Path to YAML settings file

        Returns:
            Loaded ChannelSettings instance

        Raises:
            FileNotFoundError: If the settings file doesn't exist
            ValueError: If the YAML is empty or not a mapping
        """
        settings_path = Path(path)

        if not settings_path.exists():
            raise FileNotFoundError(f"Settings file not found: {settings_path}")

        data = loaders.read_yaml(settings_path)

        if not data:
            raise ValueError(f"Empty or invalid YAML in {settings_path}")

        return cls(**data)

    def save(self, path: str | Path) -> None:
        loaders.write_yaml(Path(path), self.to_dict())

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()


def load_settings_from_env(env_var: str = CONFIG_FILE_ENV) -> ChannelSettings:
    """Load settings from the file named by ``env_var``.

    Defaults are returned when the variable is unset or names a missing file.
    """
    config_path = os.getenv(env_var)
    if not config_path:
        return ChannelSettings()

    data = loaders.read_settings(config_path)
    if data is None:
        return ChannelSettings()
    return ChannelSettings.from_dict(data)


def log_level() -> str:
    return os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
