#!/usr/bin/env python3
"""
HHash Engine
============
Human-readable hashes of strings, bytes and line streams.

Quick Start
-----------
    from hhash import HHash

    hasher = HHash()                     # pattern %A%V{G}%N
    hasher.hash_string("hello")          # e.g. 'SoftlyGlidingOtter'

    hasher = HHash("%j-%n-%v{p}", allow_repeats=True)
    hasher.hash_bytes(b"\\x00\\x01")

    hasher.collision_report().odds       # '1 in <combinations>'
"""

import logging
from functools import lru_cache
from typing import Iterable, Optional

from .chain import HashChain, random_seed, seed_from_bytes, seed_from_string
from .collision import CollisionReport, estimate_collision
from .config import HHashConfig
from .pattern import CompiledPattern, DEFAULT_PATTERN, compile_pattern
from .render import render, render_with_stats
from .words import WordBank, default_word_bank

logger = logging.getLogger(__name__)


class HHash:
    """
    Hashing engine bound to one pattern and one word bank.

    Args:
        pattern: Pattern string (default: %A%V{G}%N)
        word_bank: Word lists (default: the bundled bank)
        allow_repeats: Allow consecutive tokens to produce the same word
        report_collision_rate: Log the collision odds after the first hash
        strict: Raise on unknown tokens instead of passing them through
        chain: Hash chain (default: xxHash64)

    The compiled pattern and word bank are read-only after construction,
    so one instance can serve concurrent hash calls.
    """

    def __init__(self, pattern: str = DEFAULT_PATTERN, word_bank: Optional[WordBank] = None,
                 allow_repeats: bool = False, report_collision_rate: bool = False,
                 strict: bool = False, chain: Optional[HashChain] = None):
        self.word_bank = word_bank if word_bank is not None else default_word_bank()
        self.allow_repeats = allow_repeats
        self.report_collision_rate = report_collision_rate
        self.strict = strict
        self.chain = chain or HashChain()
        self._compiled: Optional[CompiledPattern] = None
        self._collision_logged = False
        self.init_pattern(pattern)

    @classmethod
    def from_config(cls, config: HHashConfig, chain: Optional[HashChain] = None) -> 'HHash':
        """Create an engine from an HHashConfig."""
        return cls(
            pattern=config.pattern,
            word_bank=config.word_bank(),
            allow_repeats=config.allow_repeats,
            report_collision_rate=config.report_collision_rate,
            strict=config.strict,
            chain=chain,
        )

    # -------------------------------------------------------------------------
    # Pattern
    # -------------------------------------------------------------------------

    def init_pattern(self, pattern: str) -> CompiledPattern:
        """
        Compile and switch to a new pattern.

        Raises:
            UnknownTokenError: Unknown token in strict mode
            EmptyWordListError: The pattern uses an empty word list
        """
        compiled = compile_pattern(pattern, word_bank=self.word_bank, strict=self.strict)
        logger.info("using pattern: %s", pattern)
        self._compiled = compiled
        self._collision_logged = False
        return compiled

    @property
    def pattern(self) -> str:
        return self._compiled.pattern

    @property
    def compiled(self) -> CompiledPattern:
        return self._compiled

    # -------------------------------------------------------------------------
    # Hashing
    # -------------------------------------------------------------------------

    def hash_uint(self, seed: int) -> str:
        """Human-readable hash for a 64-bit seed."""
        if self.report_collision_rate and not self._collision_logged:
            hashed, report = render_with_stats(
                self._compiled, seed, self.word_bank, self.allow_repeats, self.chain)
            self._collision_logged = True
            logger.info(report.describe())
            return hashed

        return render(self._compiled, seed, self.word_bank, self.allow_repeats, self.chain)

    def hash_string(self, text: str) -> str:
        """Human-readable hash for a string (UTF-8 encoded)."""
        return self.hash_uint(seed_from_string(text, self.chain.mixer))

    def hash_bytes(self, data: bytes) -> str:
        """Human-readable hash for a byte sequence."""
        return self.hash_uint(seed_from_bytes(data, self.chain.mixer))

    def random(self) -> str:
        """Human-readable hash of a random UUID."""
        return self.hash_uint(random_seed(self.chain.mixer))

    def hash_lines(self, lines: Iterable[str]) -> str:
        """
        Hash a stream of lines, chaining each output into the next input.

        Line N is hashed as ``hash_string(output_of_line_N-1 + line_N)``;
        the result is the hash of the last line ("" for an empty stream).
        """
        last_hash = ''
        for line in lines:
            last_hash = self.hash_string(last_hash + line)
        return last_hash

    # -------------------------------------------------------------------------
    # Diagnostics
    # -------------------------------------------------------------------------

    def collision_report(self) -> CollisionReport:
        """
        Theoretical collision odds of the current pattern.

        Upper-bound estimate assuming repeats are allowed.
        """
        return estimate_collision(
            self.word_bank.size(category) for category in self._compiled.categories()
        )

    def __repr__(self) -> str:
        return (f"HHash(pattern={self.pattern!r}, allow_repeats={self.allow_repeats}, "
                f"strict={self.strict})")


# =============================================================================
# Convenience Functions
# =============================================================================

@lru_cache(maxsize=32)
def _engine_for(pattern: str) -> HHash:
    return HHash(pattern)


def hash_string(text: str, pattern: str = DEFAULT_PATTERN) -> str:
    """Hash a string with the default word bank."""
    return _engine_for(pattern).hash_string(text)


def hash_bytes(data: bytes, pattern: str = DEFAULT_PATTERN) -> str:
    """Hash bytes with the default word bank."""
    return _engine_for(pattern).hash_bytes(data)


def random_hash(pattern: str = DEFAULT_PATTERN) -> str:
    """Random hash with the default word bank."""
    return _engine_for(pattern).random()


__all__ = ['HHash', 'hash_string', 'hash_bytes', 'random_hash']
