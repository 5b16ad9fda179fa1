"""
Role progression and retirement.
"""

from .role_progression import (
    ProgressionResult, PROMOTION_THRESHOLDS, calculate_performance_score,
    evaluate_player_progress, should_graduate
)
from .retirement import (
    RetirementResult, check_career_end, end_career, process_player_retirement,
    calculate_meta_points_earned, age_retirement_chance, career_over_message,
    BURNOUT_REASON, VOLUNTARY_REASON
)

__all__ = [
    'ProgressionResult',
    'PROMOTION_THRESHOLDS',
    'calculate_performance_score',
    'evaluate_player_progress',
    'should_graduate',
    'RetirementResult',
    'check_career_end',
    'end_career',
    'process_player_retirement',
    'calculate_meta_points_earned',
    'age_retirement_chance',
    'career_over_message',
    'BURNOUT_REASON',
    'VOLUNTARY_REASON',
]
