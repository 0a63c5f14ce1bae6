#!/usr/bin/env python3
"""
hhash - Human-Readable Hashing
==============================

Turns strings, bytes or line streams into deterministic word hashes
such as ``QuicklyRunningFox``, laid out by a pattern of word tokens.

Quick Start
-----------
    from hhash import HHash

    hasher = HHash("%A%V{G}%N")
    hasher.hash_string("pumba & mumble")

    # One-off hashes with the default pattern
    from hhash import hash_string
    hash_string("hello")

Modules
-------
    hhash.pattern   - Pattern compiler (tokens and literal text)
    hhash.chain     - xxHash64 seeds and the repeat-avoiding hash chain
    hhash.render    - Pattern rendering
    hhash.collision - Theoretical collision odds
    hhash.words     - Word categories and word banks
    hhash.config    - Configuration (.env, environment, app.yaml)

CLI Usage
---------
    python -m hhash -s "hello world"
    python -m hhash -p "%A%V{G}%N" -v
    cat notes.txt | python -m hhash
"""

__version__ = "0.2.0"
__author__ = "hhash"

# =============================================================================
# Core Imports
# =============================================================================

from .exceptions import (
    HHashError,
    PatternError,
    UnknownTokenError,
    EmptyWordListError,
    HashChainError,
    ConfigError,
    ConflictingInputError,
)
from .words import (
    WordCategory,
    WordBank,
    default_word_bank,
    load_word_bank,
)
from .pattern import (
    Case,
    Token,
    Literal,
    TokenRef,
    CompiledPattern,
    DEFAULT_PATTERN,
    compile_pattern,
)
from .chain import (
    HashChain,
    mix,
    seed_from_string,
    seed_from_bytes,
    random_seed,
)
from .render import render, render_with_stats
from .collision import CollisionReport, estimate_collision
from .config import HHashConfig, get_config
from .engine import HHash, hash_string, hash_bytes, random_hash

__all__ = [
    '__version__',
    # Engine
    'HHash',
    'hash_string',
    'hash_bytes',
    'random_hash',
    # Pattern
    'Case',
    'Token',
    'Literal',
    'TokenRef',
    'CompiledPattern',
    'DEFAULT_PATTERN',
    'compile_pattern',
    # Chain
    'HashChain',
    'mix',
    'seed_from_string',
    'seed_from_bytes',
    'random_seed',
    # Rendering
    'render',
    'render_with_stats',
    'CollisionReport',
    'estimate_collision',
    # Words
    'WordCategory',
    'WordBank',
    'default_word_bank',
    'load_word_bank',
    # Config
    'HHashConfig',
    'get_config',
    # Errors
    'HHashError',
    'PatternError',
    'UnknownTokenError',
    'EmptyWordListError',
    'HashChainError',
    'ConfigError',
    'ConflictingInputError',
]
