"""
Shared helpers used across the career engine.
"""

from .random_source import (
    RandomSource, create_random_source,
    random_int, choose, chance, shuffle_in_place
)

__all__ = [
    'RandomSource',
    'create_random_source',
    'random_int',
    'choose',
    'chance',
    'shuffle_in_place',
]
