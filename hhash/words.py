#!/usr/bin/env python3
"""
Word Bank
=========
Word categories and the per-category word lists that tokens resolve to.

The default bank ships as YAML (``hhash/data/words.yaml``) and is loaded
once per process. Any YAML file with the same six keys can replace it.

Usage:
    from hhash.words import WordCategory, default_word_bank, load_word_bank

    bank = default_word_bank()
    nouns = bank.words(WordCategory.NOUN)

    custom = load_word_bank("my_words.yaml")
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterator, Mapping, Optional, Sequence, Tuple, Union

import yaml

from .exceptions import ConfigError, EmptyWordListError


# =============================================================================
# Configuration Path
# =============================================================================

DATA_DIR = Path(__file__).resolve().parent / 'data'
DEFAULT_WORDS_PATH = DATA_DIR / 'words.yaml'


# =============================================================================
# Word Categories
# =============================================================================

class WordCategory(Enum):
    """Semantic type of the word a token generates."""
    ADJECTIVE = 'adjective'
    ADVERB = 'adverb'
    NOUN = 'noun'
    VERB = 'verb'
    VERB_PAST = 'verb_past'
    VERB_GERUND = 'verb_gerund'


# YAML key for each category
CATEGORY_KEYS = {
    WordCategory.ADJECTIVE: 'adjectives',
    WordCategory.ADVERB: 'adverbs',
    WordCategory.NOUN: 'nouns',
    WordCategory.VERB: 'verbs',
    WordCategory.VERB_PAST: 'verbs_past',
    WordCategory.VERB_GERUND: 'verbs_gerund',
}


# =============================================================================
# Word Bank
# =============================================================================

class WordBank:
    """
    Read-only mapping from WordCategory to an ordered tuple of words.

    Order matters: a word is selected by ``hash % len(words)``, so the
    same bank must keep its lists in the same order across runs for
    hashes to stay stable.

    Empty lists are representable so a host can supply partial banks;
    they are rejected when a pattern touching that category is compiled
    against the bank or rendered with it.
    """

    def __init__(self, lists: Mapping[WordCategory, Sequence[str]]):
        self._lists: Dict[WordCategory, Tuple[str, ...]] = {}
        for category in WordCategory:
            words = lists.get(category, ())
            self._lists[category] = tuple(str(w) for w in words)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Sequence[str]]) -> 'WordBank':
        """
        Build a bank from a dict keyed by the YAML category keys.

        Raises:
            ConfigError: Unknown category keys, or a value that is not a list
        """
        unknown = set(raw) - set(CATEGORY_KEYS.values())
        if unknown:
            raise ConfigError(f"Unknown word categories: {', '.join(sorted(unknown))}")
        for key, words in raw.items():
            if words is not None and not isinstance(words, (list, tuple)):
                raise ConfigError(f"Word list '{key}' must be a list, got {type(words).__name__}")
        return cls({
            category: raw.get(key) or ()
            for category, key in CATEGORY_KEYS.items()
        })

    def words(self, category: WordCategory) -> Tuple[str, ...]:
        """Get the word list for a category (may be empty)."""
        return self._lists[category]

    def size(self, category: WordCategory) -> int:
        return len(self._lists[category])

    def require(self, category: WordCategory) -> Tuple[str, ...]:
        """Get the word list for a category, rejecting empty lists."""
        words = self._lists[category]
        if not words:
            raise EmptyWordListError(category)
        return words

    def to_dict(self) -> Dict[str, list]:
        return {
            CATEGORY_KEYS[category]: list(words)
            for category, words in self._lists.items()
        }

    def __iter__(self) -> Iterator[WordCategory]:
        return iter(self._lists)

    def __eq__(self, other) -> bool:
        if not isinstance(other, WordBank):
            return NotImplemented
        return self._lists == other._lists

    def __hash__(self) -> int:
        return hash(tuple(self._lists.items()))

    def __repr__(self) -> str:
        sizes = ', '.join(f"{c.value}={len(w)}" for c, w in self._lists.items())
        return f"WordBank({sizes})"


# =============================================================================
# Loader Functions
# =============================================================================

def _load_yaml(filepath: Path) -> Dict:
    """Load a word list YAML file."""
    if not filepath.exists():
        raise FileNotFoundError(f"Word list not found: {filepath}")

    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid word list {filepath}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Word list {filepath} must contain a mapping of categories")
    return data


def load_word_bank(path: Union[str, Path]) -> WordBank:
    """Load a word bank from a YAML file."""
    return WordBank.from_dict(_load_yaml(Path(path)))


@lru_cache(maxsize=1)
def default_word_bank() -> WordBank:
    """Load the word bank shipped with the package."""
    return load_word_bank(DEFAULT_WORDS_PATH)


def get_word_bank(path: Optional[Union[str, Path]] = None) -> WordBank:
    """Get the bank at ``path``, or the default bank when no path is given."""
    if path is None:
        return default_word_bank()
    return load_word_bank(path)


__all__ = [
    'WordCategory',
    'WordBank',
    'CATEGORY_KEYS',
    'DEFAULT_WORDS_PATH',
    'load_word_bank',
    'default_word_bank',
    'get_word_bank',
]
