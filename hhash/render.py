#!/usr/bin/env python3
"""
Renderer
========
Turns a compiled pattern and a seed into the word hash.

Each token pulls the next hash from the chain, picks ``hash % len(words)``
from its category's list and applies the token's case. Literal text is
copied through. The running hash is local to the call, so renders are
pure functions of (pattern, seed, bank, allow_repeats).
"""

import re
from typing import List, Optional, Tuple

from .chain import HashChain
from .collision import CollisionReport, estimate_collision
from .pattern import Case, CompiledPattern, Literal
from .words import WordBank

_WORD_START = re.compile(r'(^|\s)(\S)')

_default_chain = HashChain()


def apply_case(word: str, case: Case) -> str:
    """Lowercase the word, or uppercase the first letter of each part."""
    if case is Case.LOWER:
        return word.lower()
    return _WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), word)


def _render(compiled: CompiledPattern, seed: int, word_bank: WordBank,
            allow_repeats: bool, chain: HashChain,
            sizes: Optional[List[int]]) -> str:
    parts = []
    current = seed
    for segment in compiled.segments:
        if isinstance(segment, Literal):
            parts.append(segment.text)
            continue

        token = segment.token
        words = word_bank.require(token.category)
        current = chain.next_hash(current, len(words), allow_repeats)
        parts.append(apply_case(words[current % len(words)], token.case))

        if sizes is not None:
            sizes.append(len(words))

    return ''.join(parts)


def render(compiled: CompiledPattern, seed: int, word_bank: WordBank,
           allow_repeats: bool = False, chain: Optional[HashChain] = None) -> str:
    """
    Render a word hash.

    Args:
        compiled: Compiled pattern
        seed: 64-bit seed (see hhash.chain.seed_from_string)
        word_bank: Word lists to draw from
        allow_repeats: Allow consecutive tokens to produce the same word
        chain: Hash chain to use (default: xxHash64)

    Raises:
        EmptyWordListError: A token's category has no words
    """
    return _render(compiled, seed, word_bank, allow_repeats, chain or _default_chain, None)


def render_with_stats(compiled: CompiledPattern, seed: int, word_bank: WordBank,
                      allow_repeats: bool = False,
                      chain: Optional[HashChain] = None) -> Tuple[str, CollisionReport]:
    """Render a word hash and report the collision odds of the pattern."""
    sizes: List[int] = []
    output = _render(compiled, seed, word_bank, allow_repeats, chain or _default_chain, sizes)
    return output, estimate_collision(sizes)


__all__ = ['apply_case', 'render', 'render_with_stats']
