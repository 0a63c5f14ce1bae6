#!/usr/bin/env python3
"""
Hash Chain
==========
Seed derivation and the per-token hash chain.

Every token gets its own 64-bit hash, derived by re-hashing the hash of
the previous token (the first token re-hashes the seed). Unless repeats
are allowed, a candidate that maps to the same word index as its
predecessor is re-hashed until the indices differ, so ``%N%N`` never
renders the same noun twice in a row.

The mixing function is xxHash64 (seed 0): fast and well distributed,
but not cryptographic.
"""

import logging
import struct
import uuid
from typing import Callable, Optional

import xxhash

from .exceptions import EmptyWordListError, HashChainError

logger = logging.getLogger(__name__)

UINT64_MASK = 0xFFFFFFFFFFFFFFFF

# Re-hash attempts before giving up on finding a distinct index
MAX_REHASHES = 1000

Mixer = Callable[[bytes], int]


# =============================================================================
# Mixing Function
# =============================================================================

def mix(data: bytes) -> int:
    """xxHash64 of ``data`` as an unsigned 64-bit integer."""
    return xxhash.xxh64_intdigest(data)


def to_bytes(value: int) -> bytes:
    """8-byte little-endian encoding of a 64-bit value."""
    return struct.pack('<Q', value & UINT64_MASK)


# =============================================================================
# Seed Derivation
# =============================================================================

def seed_from_bytes(data: bytes, mixer: Mixer = mix) -> int:
    return mixer(bytes(data)) & UINT64_MASK


def seed_from_string(text: str, mixer: Mixer = mix) -> int:
    return seed_from_bytes(text.encode('utf-8'), mixer)


def random_seed(mixer: Mixer = mix) -> int:
    """Seed from a random UUID. The only non-deterministic entry point."""
    return seed_from_bytes(uuid.uuid4().bytes, mixer)


# =============================================================================
# Chain
# =============================================================================

class HashChain:
    """
    Derives per-token hashes from a previous hash.

    Args:
        mixer: Function mapping bytes to an unsigned 64-bit integer
            (default: xxHash64)
        max_rehashes: Upper bound on repeat-avoidance retries
    """

    def __init__(self, mixer: Optional[Mixer] = None, max_rehashes: int = MAX_REHASHES):
        self.mixer = mixer or mix
        self.max_rehashes = max_rehashes

    def rehash(self, value: int) -> int:
        return self.mixer(to_bytes(value)) & UINT64_MASK

    def next_hash(self, previous_hash: int, word_count: int, allow_repeats: bool = False) -> int:
        """
        Hash for the next token.

        Args:
            previous_hash: Hash of the previous token, or the seed for the first one
            word_count: Length of the word list the next token draws from
            allow_repeats: Skip repeat avoidance

        Returns:
            New 64-bit hash

        Raises:
            EmptyWordListError: word_count < 1
            HashChainError: No distinct index within max_rehashes retries
        """
        if word_count < 1:
            raise EmptyWordListError('unknown', f"cannot index a list of {word_count} words")

        new_hash = self.rehash(previous_hash)
        if allow_repeats or word_count == 1:
            return new_hash

        current_index = new_hash % word_count
        previous_index = previous_hash % word_count
        times_repeated = 0
        while current_index == previous_index:
            times_repeated += 1
            if times_repeated > self.max_rehashes:
                raise HashChainError(
                    f"no distinct index after {self.max_rehashes} re-hashes "
                    f"(list of {word_count} words)")
            if times_repeated > 1:
                # all three generations of the seed on the same index is rare
                logger.debug(
                    "previous hash (%d) and new hash (%d) map to the same index (%d) "
                    "for the %d-th time. re-hashing...",
                    previous_hash, new_hash, current_index, times_repeated)
            new_hash = self.rehash(new_hash)
            previous_index = current_index
            current_index = new_hash % word_count

        return new_hash


_default_chain = HashChain()


def next_hash(previous_hash: int, word_count: int, allow_repeats: bool = False) -> int:
    """next_hash on the default xxHash64 chain."""
    return _default_chain.next_hash(previous_hash, word_count, allow_repeats)


__all__ = [
    'UINT64_MASK',
    'MAX_REHASHES',
    'Mixer',
    'mix',
    'to_bytes',
    'seed_from_bytes',
    'seed_from_string',
    'random_seed',
    'HashChain',
    'next_hash',
]
