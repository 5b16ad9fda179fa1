"""
Constants package for the basketball career simulation

Game modes, role ladders and stat bounds shared across the engine.
"""

from .game_modes import (
    GameMode, GAME_MODE_ORDER, ROLES_BY_MODE,
    HIGH_SCHOOL_ROLES, COLLEGE_ROLES, PROFESSIONAL_ROLES,
    HIGH_SCHOOL_MAX_SEASONS, COLLEGE_MAX_SEASONS, COLLEGE_GRADUATION_AGE,
    STARTING_AGE, POSITIONS,
    get_roles_for_mode, get_entry_role, get_role_index
)
from .stat_limits import (
    MAX_STAT_VALUE, MIN_STAT_VALUE, MAX_ENERGY, MAX_MORALE,
    SKILL_STATS, CAREER_STATS, RESOURCE_STATS, BOUNDED_STATS, ALL_STATS,
    STAT_BOUNDS, STAT_LABELS
)

__all__ = [
    'GameMode',
    'GAME_MODE_ORDER',
    'ROLES_BY_MODE',
    'HIGH_SCHOOL_ROLES',
    'COLLEGE_ROLES',
    'PROFESSIONAL_ROLES',
    'HIGH_SCHOOL_MAX_SEASONS',
    'COLLEGE_MAX_SEASONS',
    'COLLEGE_GRADUATION_AGE',
    'STARTING_AGE',
    'POSITIONS',
    'get_roles_for_mode',
    'get_entry_role',
    'get_role_index',
    'MAX_STAT_VALUE',
    'MIN_STAT_VALUE',
    'MAX_ENERGY',
    'MAX_MORALE',
    'SKILL_STATS',
    'CAREER_STATS',
    'RESOURCE_STATS',
    'BOUNDED_STATS',
    'ALL_STATS',
    'STAT_BOUNDS',
    'STAT_LABELS',
]
