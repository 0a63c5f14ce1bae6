#!/usr/bin/env python3
"""
Pattern Compiler
================
Parses a hash pattern into literal text and word tokens.

Pattern syntax:
    %<L>          token, L is one of a (adverb), j (adjective), n (noun), v (verb)
    %<L>{<P>}     token with parameter; for verbs P selects the tense:
                  p = past, g = gerund (present participle)
    anything else literal text, copied to the output as-is

An uppercase letter yields a title-cased word, a lowercase letter a
lowercased word:

    %A%V{G}%N   ->  QuicklyRunningFox
    %j_%n       ->  quick_fox
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple, Union

from .exceptions import UnknownTokenError
from .words import WordBank, WordCategory

logger = logging.getLogger(__name__)

TOKEN_MARKER = '%'
PARAM_OPEN = '{'
PARAM_CLOSE = '}'

DEFAULT_PATTERN = '%A%V{G}%N'


# =============================================================================
# Data Classes
# =============================================================================

class Case(Enum):
    """How a generated word is cased."""
    TITLE = 'title'
    LOWER = 'lower'


@dataclass(frozen=True)
class Token:
    """A resolved word slot."""
    category: WordCategory
    case: Case
    parameter: Optional[str] = None
    source: str = ''


@dataclass(frozen=True)
class Literal:
    """Literal text copied verbatim."""
    text: str


@dataclass(frozen=True)
class TokenRef:
    """A token occurrence in the pattern."""
    token: Token


PatternSegment = Union[Literal, TokenRef]


@dataclass(frozen=True)
class CompiledPattern:
    """
    Immutable, compiled form of a pattern string.

    Holds no per-render state and can be shared between renders and threads.
    """
    pattern: str
    segments: Tuple[PatternSegment, ...]

    @property
    def tokens(self) -> Tuple[Token, ...]:
        return tuple(s.token for s in self.segments if isinstance(s, TokenRef))

    def categories(self) -> List[WordCategory]:
        """Word categories of all tokens, in pattern order."""
        return [t.category for t in self.tokens]

    def __iter__(self) -> Iterator[PatternSegment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)


# =============================================================================
# Token Resolution
# =============================================================================

_CATEGORY_CODES = {
    'a': WordCategory.ADVERB,
    'j': WordCategory.ADJECTIVE,
    'n': WordCategory.NOUN,
    'v': WordCategory.VERB,
}

_VERB_TENSES = {
    'p': WordCategory.VERB_PAST,
    'g': WordCategory.VERB_GERUND,
}


def resolve_token(code: str, parameter: Optional[str] = None) -> Optional[Tuple[WordCategory, Case]]:
    """
    Map a token letter and optional parameter to (category, case).

    Returns None when the letter matches no category.
    """
    lower_code = code.lower()
    category = _CATEGORY_CODES.get(lower_code)
    if category is None:
        return None

    case = Case.LOWER if code == lower_code else Case.TITLE

    if category is WordCategory.VERB and parameter:
        category = _VERB_TENSES.get(parameter.lower(), WordCategory.VERB)

    return category, case


# =============================================================================
# Scanner
# =============================================================================

def _is_token_code(ch: str) -> bool:
    return (ch.isascii() and ch.isalpha()) or ch == TOKEN_MARKER


def _scan_parameter(pattern: str, start: int) -> Tuple[Optional[str], int]:
    """
    Scan ``{param}`` beginning at ``start``.

    Returns (parameter, end) where end is the index after the closing
    brace, or (None, start) if no well-formed parameter begins there.
    """
    if start >= len(pattern) or pattern[start] != PARAM_OPEN:
        return None, start

    i = start + 1
    while i < len(pattern) and pattern[i].isascii() and pattern[i].isalnum():
        i += 1

    if i == start + 1 or i >= len(pattern) or pattern[i] != PARAM_CLOSE:
        return None, start

    return pattern[start + 1:i], i + 1


def compile_pattern(pattern: str, word_bank: Optional[WordBank] = None,
                    strict: bool = False) -> CompiledPattern:
    """
    Compile a pattern string into segments.

    Args:
        pattern: Pattern string (see module docstring)
        word_bank: If given, every category used by the pattern must have
            a non-empty word list in this bank
        strict: Raise on unknown tokens instead of keeping them as literal text

    Returns:
        CompiledPattern

    Raises:
        UnknownTokenError: Unknown token letter and strict is set
        EmptyWordListError: A used category is empty in word_bank
    """
    logger.debug("using pattern: %s", pattern)

    segments: List[PatternSegment] = []
    literal: List[str] = []

    def flush_literal():
        if literal:
            segments.append(Literal(''.join(literal)))
            literal.clear()

    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch != TOKEN_MARKER or i + 1 >= n or not _is_token_code(pattern[i + 1]):
            literal.append(ch)
            i += 1
            continue

        code = pattern[i + 1]
        parameter, end = _scan_parameter(pattern, i + 2)
        source = pattern[i:end]

        resolved = resolve_token(code, parameter)
        if resolved is None:
            if strict:
                raise UnknownTokenError(source, i)
            logger.warning(
                "unable to determine word type for word code [%s] and parameter [%s]",
                code, parameter or '')
            literal.append(source)
        else:
            category, case = resolved
            flush_literal()
            segments.append(TokenRef(Token(category, case, parameter, source)))
        i = end

    flush_literal()
    compiled = CompiledPattern(pattern, tuple(segments))

    if word_bank is not None:
        for category in dict.fromkeys(compiled.categories()):
            word_bank.require(category)

    return compiled


__all__ = [
    'Case',
    'Token',
    'Literal',
    'TokenRef',
    'PatternSegment',
    'CompiledPattern',
    'DEFAULT_PATTERN',
    'resolve_token',
    'compile_pattern',
]
