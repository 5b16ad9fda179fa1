"""
Stat bounds for the player model.

Skill and career stats share [MIN_STAT_VALUE, MAX_STAT_VALUE]; energy and
morale are resources bounded by [0, 100]. Skill points are a meta-currency
and are not clamped.
"""

from typing import Dict, Tuple

MAX_STAT_VALUE = 99
MIN_STAT_VALUE = 10
MAX_ENERGY = 100
MAX_MORALE = 100
MIN_RESOURCE_VALUE = 0

SKILL_STATS: Tuple[str, ...] = ('shooting', 'athleticism', 'basketball_iq')
CAREER_STATS: Tuple[str, ...] = ('charisma', 'professionalism')
RESOURCE_STATS: Tuple[str, ...] = ('energy', 'morale')
UNBOUNDED_STATS: Tuple[str, ...] = ('skill_points',)

# stat name -> (min, max)
STAT_BOUNDS: Dict[str, Tuple[int, int]] = {
    **{name: (MIN_STAT_VALUE, MAX_STAT_VALUE) for name in SKILL_STATS},
    **{name: (MIN_STAT_VALUE, MAX_STAT_VALUE) for name in CAREER_STATS},
    'energy': (MIN_RESOURCE_VALUE, MAX_ENERGY),
    'morale': (MIN_RESOURCE_VALUE, MAX_MORALE),
}

BOUNDED_STATS: Tuple[str, ...] = tuple(STAT_BOUNDS.keys())
ALL_STATS: Tuple[str, ...] = BOUNDED_STATS + UNBOUNDED_STATS

# Human-readable labels used in outcome messages
STAT_LABELS: Dict[str, str] = {
    'shooting': 'Shooting',
    'athleticism': 'Athleticism',
    'basketball_iq': 'Basketball IQ',
    'charisma': 'Charisma',
    'professionalism': 'Professionalism',
    'energy': 'Energy',
    'morale': 'Morale',
    'skill_points': 'Skill Points',
}
