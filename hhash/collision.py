#!/usr/bin/env python3
"""
Collision Estimate
==================
Theoretical collision odds for a pattern, from the sizes of the word
lists its tokens draw from.

The estimate assumes independent tokens and repeats allowed. Repeat
avoidance removes some combinations, so the real odds are slightly
worse than reported: treat the figure as an approximation, not an
exact count.
"""

from dataclasses import dataclass
from math import prod
from typing import Iterable, Tuple


@dataclass(frozen=True)
class CollisionReport:
    """Collision odds of one pattern against one word bank."""
    sizes: Tuple[int, ...]
    combinations: int

    @property
    def probability(self) -> float:
        """Chance that two inputs render the same output (0 to 1)."""
        return 1.0 / self.combinations

    @property
    def percentage(self) -> float:
        return 100.0 / self.combinations

    @property
    def odds(self) -> str:
        return f"1 in {self.combinations}"

    def describe(self) -> str:
        return (
            f"there is {self.odds} chance ({self.percentage:.16f}%) of hash collision "
            f"given the current pattern (if allowing repeats)"
        )

    def to_dict(self) -> dict:
        return {
            'sizes': list(self.sizes),
            'combinations': self.combinations,
            'odds': self.odds,
            'percentage': self.percentage,
        }


def estimate_collision(sizes: Iterable[int]) -> CollisionReport:
    """
    Build a collision report from word list sizes.

    A pattern without tokens has a single possible output, so its
    combinations are 1 (every input collides).
    """
    sizes = tuple(int(s) for s in sizes)
    if any(s < 1 for s in sizes):
        raise ValueError(f"Word list sizes must be positive: {list(sizes)}")
    return CollisionReport(sizes=sizes, combinations=prod(sizes))


__all__ = ['CollisionReport', 'estimate_collision']
