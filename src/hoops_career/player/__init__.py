"""
Player model, stat growth rules, traits and player creation.
"""

from .player import Player, PlayerStats
from .stat_model import (
    clamp, clamp_stat, apply_stat_delta, roll_stat_gain, grow_stat, GROWTH_BANDS
)
from .traits import (
    TraitCategory, TraitDefinition, TraitLevel, TRAIT_DEFINITIONS,
    get_performance_multipliers, get_win_chance_bonus, grant_trait
)
from .player_factory import create_initial_player, assign_random_team

__all__ = [
    'Player',
    'PlayerStats',
    'clamp',
    'clamp_stat',
    'apply_stat_delta',
    'roll_stat_gain',
    'grow_stat',
    'GROWTH_BANDS',
    'TraitCategory',
    'TraitDefinition',
    'TraitLevel',
    'TRAIT_DEFINITIONS',
    'get_performance_multipliers',
    'get_win_chance_bonus',
    'grant_trait',
    'create_initial_player',
    'assign_random_team',
]
