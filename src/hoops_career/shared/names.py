"""
Name pools for generated players, coaches and teams.
"""

from typing import Tuple

from .random_source import RandomSource, choose

FIRST_NAMES: Tuple[str, ...] = (
    'Alex', 'Jordan', 'Chris', 'Taylor', 'Morgan', 'Casey', 'Jamie', 'Devon',
    'Riley', 'Quinn', 'Avery', 'Cameron', 'Dakota', 'Reese', 'Skyler', 'Emerson',
)

LAST_NAMES: Tuple[str, ...] = (
    'Smith', 'Jones', 'Williams', 'Brown', 'Davis', 'Miller', 'Wilson', 'Moore',
    'Carter', 'Hayes', 'Brooks', 'Reed', 'Foster', 'Bennett', 'Coleman', 'Ellis',
)


def random_name(rng: RandomSource) -> str:
    """First and last name; two draws."""
    return f"{choose(rng, FIRST_NAMES)} {choose(rng, LAST_NAMES)}"
