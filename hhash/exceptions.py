#!/usr/bin/env python3
"""
Exceptions
==========
Error types raised by the hashing engine and the CLI layer.

All errors derive from HHashError, which is a ValueError: callers that
already guard against bad input with ``except ValueError`` keep working.
"""

from typing import Optional


class HHashError(ValueError):
    """Base class for all hhash errors."""


# =============================================================================
# Pattern Errors
# =============================================================================

class PatternError(HHashError):
    """A pattern could not be compiled or rendered."""


class UnknownTokenError(PatternError):
    """A token letter maps to no word category."""

    def __init__(self, token: str, position: int):
        self.token = token
        self.position = position
        super().__init__(
            f"unable to determine word type for token [{token}] at position {position}"
        )


class EmptyWordListError(PatternError):
    """A word category resolved to a zero-length list."""

    def __init__(self, category, detail: Optional[str] = None):
        self.category = category
        name = getattr(category, 'value', category)
        message = f"word list for category '{name}' is empty"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


# =============================================================================
# Hash Chain Errors
# =============================================================================

class HashChainError(HHashError):
    """Repeat avoidance failed to find a distinct index."""


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigError(HHashError):
    """Invalid or contradictory configuration."""


class ConflictingInputError(ConfigError):
    """An explicit string was given together with piped input."""

    def __init__(self, message: str = "-s must not be set when piping to hhash"):
        super().__init__(message)


__all__ = [
    'HHashError',
    'PatternError',
    'UnknownTokenError',
    'EmptyWordListError',
    'HashChainError',
    'ConfigError',
    'ConflictingInputError',
]
