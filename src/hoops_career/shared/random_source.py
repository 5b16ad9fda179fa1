"""
Random source helpers

Every stochastic function in the engine takes an explicit ``rng`` argument
(any object with a ``random()`` method returning floats in [0, 1), normally a
``random.Random``). The helpers below build integer, choice and shuffle
draws from ``rng.random()`` alone, so a test can drive the whole engine from
a fixed stream of uniform draws.
"""

import math
import random
from typing import List, Optional, Protocol, Sequence, TypeVar

T = TypeVar('T')


class RandomSource(Protocol):
    """Minimal interface the engine needs from a random number generator."""

    def random(self) -> float:
        ...


def create_random_source(seed: Optional[int] = None) -> random.Random:
    """Seeded ``random.Random``; ``None`` seeds from system entropy."""
    return random.Random(seed)


def random_int(rng: RandomSource, low: int, high: int) -> int:
    """Uniform integer in [low, high] (both inclusive) from one draw."""
    if high < low:
        raise ValueError(f"Invalid range: [{low}, {high}]")
    return low + int(math.floor(rng.random() * (high - low + 1)))


def choose(rng: RandomSource, options: Sequence[T]) -> T:
    """Pick one element with a single draw."""
    if not options:
        raise ValueError("Cannot choose from an empty sequence")
    return options[int(math.floor(rng.random() * len(options)))]


def chance(rng: RandomSource, probability: float) -> bool:
    """True with the given probability; consumes exactly one draw."""
    return rng.random() < probability


def shuffle_in_place(rng: RandomSource, items: List[T]) -> List[T]:
    """Fisher-Yates shuffle, last index first. Returns the same list."""
    for i in range(len(items) - 1, 0, -1):
        j = int(math.floor(rng.random() * (i + 1)))
        items[i], items[j] = items[j], items[i]
    return items
