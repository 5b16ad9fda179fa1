"""
Game engine: box score and result generation for game days.
"""

from .performance_generator import (
    generate_game_performance, calculate_minutes, calculate_win_chance,
    get_role_multiplier, get_position_factors, MAX_GAME_MINUTES
)

__all__ = [
    'generate_game_performance',
    'calculate_minutes',
    'calculate_win_chance',
    'get_role_multiplier',
    'get_position_factors',
    'MAX_GAME_MINUTES',
]
