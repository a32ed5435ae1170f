"""YAML reading and writing helpers for channel settings."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


def read_yaml(path: str | Path) -> dict[str, Any] | None:
    with open(path, "r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    if data is not None and not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {path}, got {type(data).__name__}")
    return data


def write_yaml(path: str | Path, payload: dict[str, Any]) -> None:
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(path, "w", encoding="utf-8") as handle:
        yaml.safe_dump(payload, handle, default_flow_style=False, sort_keys=False)


def read_settings(path: str | Path) -> dict[str, Any] | None:
    if not os.path.exists(path):
        logger.warning("⚠️ Settings file %s not found; defaults will be used", path)
        return None
    return read_yaml(path)

