#!/usr/bin/env python3
"""
Configuration Management
========================
Resolves hashing options from explicit arguments, the environment
(optionally a .env file) and configs/app.yaml, in that order of precedence.

Environment variables:
    HHASH_PATTERN                 pattern string
    HHASH_ALLOW_REPEATS           true/false
    HHASH_REPORT_COLLISION_RATE   true/false
    HHASH_STRICT                  true/false
    HHASH_WORDS                   path to a word list YAML
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .exceptions import ConfigError
from .pattern import DEFAULT_PATTERN
from .settings import get_setting, resolve_path
from .words import WordBank, get_word_bank, DEFAULT_WORDS_PATH

ENV_PREFIX = 'HHASH_'

_TRUE = {'1', 'true', 'yes', 'on'}
_FALSE = {'0', 'false', 'no', 'off', ''}


# =============================================================================
# Application Configuration
# =============================================================================

@dataclass
class HHashConfig:
    """Options for an HHash engine."""
    pattern: str = DEFAULT_PATTERN
    allow_repeats: bool = False
    report_collision_rate: bool = False
    strict: bool = False
    words_path: Optional[Path] = None

    @property
    def uses_default_words(self) -> bool:
        return self.words_path is None or Path(self.words_path).resolve() == DEFAULT_WORDS_PATH

    def word_bank(self) -> WordBank:
        """Load the configured word bank."""
        if self.uses_default_words:
            return get_word_bank()
        return get_word_bank(self.words_path)


def parse_bool(value: Any, name: str = 'value') -> bool:
    """Parse a boolean from a config or environment value."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ConfigError(f"Invalid boolean for {name}: {value!r}")


def load_env(env_path: Path = None) -> dict:
    """
    Read the HHASH_* assignments of a .env file (default: ./.env).

    Other keys, comments and lines without ``=`` are skipped, and one
    pair of matching quotes around a value is removed. The result is
    returned, never written into ``os.environ``.
    """
    path = Path(env_path) if env_path is not None else Path.cwd() / '.env'
    if not path.is_file():
        return {}

    found = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        key, sep, value = raw.strip().partition('=')
        key = key.strip()
        if not sep or not key.startswith(ENV_PREFIX):
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in '"\'':
            value = value[1:-1]
        found[key] = value
    return found


def _lookup(env: dict, key: str, setting: str, default: Any) -> Any:
    if key in env:
        return env[key]
    if key in os.environ:
        return os.environ[key]
    return get_setting(setting, default)


def get_config(env_path: Path = None, pattern: Optional[str] = None,
               allow_repeats: Optional[bool] = None,
               report_collision_rate: Optional[bool] = None,
               strict: Optional[bool] = None,
               words_path: Optional[str] = None,
               pattern_setting: str = 'hash.pattern') -> HHashConfig:
    """
    Get configuration.

    Explicit (non-None) arguments win over the environment, which wins
    over app.yaml. ``pattern_setting`` names the app.yaml key used for
    the pattern when neither an argument nor the environment sets one.
    """
    env = load_env(env_path)

    if pattern is None:
        pattern = _lookup(env, 'HHASH_PATTERN', pattern_setting, DEFAULT_PATTERN)
    if allow_repeats is None:
        allow_repeats = parse_bool(
            _lookup(env, 'HHASH_ALLOW_REPEATS', 'hash.allow_repeats', False),
            'allow_repeats')
    if report_collision_rate is None:
        report_collision_rate = parse_bool(
            _lookup(env, 'HHASH_REPORT_COLLISION_RATE', 'hash.report_collision_rate', False),
            'report_collision_rate')
    if strict is None:
        strict = parse_bool(_lookup(env, 'HHASH_STRICT', 'hash.strict', False), 'strict')
    if words_path is None:
        words_path = env.get('HHASH_WORDS') or os.environ.get('HHASH_WORDS')
    if words_path:
        # user-supplied paths are relative to the working directory
        resolved = resolve_path(words_path, base=Path.cwd())
    else:
        setting = get_setting('words.path')
        resolved = resolve_path(setting) if setting else None

    return HHashConfig(
        pattern=str(pattern),
        allow_repeats=allow_repeats,
        report_collision_rate=report_collision_rate,
        strict=strict,
        words_path=resolved,
    )


__all__ = ['HHashConfig', 'parse_bool', 'load_env', 'get_config']
