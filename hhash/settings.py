#!/usr/bin/env python3
"""
Settings
========
Application defaults from ``configs/app.yaml``.

Set HHASH_CONFIG to point at another YAML file with the same layout.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any
import os

import yaml

from .exceptions import ConfigError

PACKAGE_ROOT = Path(__file__).resolve().parent
CONFIG_DIR = PACKAGE_ROOT / "configs"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"

# Top-level sections that must be mappings when present
SECTIONS = ("hash", "words")


def app_config_path() -> Path:
    override = os.environ.get("HHASH_CONFIG")
    return Path(override).expanduser() if override else APP_CONFIG_PATH


@lru_cache(maxsize=4)
def _load(path: Path) -> dict:
    if not path.exists():
        raise FileNotFoundError(f"Missing app config: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid app config {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping")
    for section in SECTIONS:
        if not isinstance(data.get(section, {}), dict):
            raise ConfigError(f"{path}: '{section}' must be a mapping")
    return data


def load_app_config() -> dict:
    return _load(app_config_path())


def get_setting(path: str, default: Any = None) -> Any:
    """Get nested setting by dotted path, e.g. ``hash.pattern``."""
    current: Any = load_app_config()
    for part in path.split('.'):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def resolve_path(value: str, base: Path | None = None) -> Path:
    """Resolve a path relative to ``base`` (default: the package directory)."""
    if value is None:
        raise ValueError("path value is required")
    path = Path(os.path.expanduser(str(value)))
    if not path.is_absolute():
        path = ((base or PACKAGE_ROOT) / path).resolve()
    return path


__all__ = [
    "load_app_config",
    "get_setting",
    "resolve_path",
    "app_config_path",
    "PACKAGE_ROOT",
    "APP_CONFIG_PATH",
]
