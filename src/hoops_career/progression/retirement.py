"""
Retirement and Legacy Points

Terminal-condition rolls and the end-of-career payout that seeds the next
run.

Payout:
    new_total = meta_at_run_start + floor(total_weeks_played x 2.5)
                + final shooting + final athleticism
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from ..config import SimulationSettings
from ..shared.random_source import RandomSource

if TYPE_CHECKING:
    from ..player.player import Player


logger = logging.getLogger(__name__)


CAREER_OVER_PREFIX = 'CAREER OVER: '
BURNOUT_REASON = 'Forced retirement due to burnout.'
VOLUNTARY_REASON = 'You have chosen to retire.'


def age_retirement_reason(age: int) -> str:
    return f"Your body can no longer keep up. Retired at age {age}."


def career_over_message(reason: str) -> str:
    return f"{CAREER_OVER_PREFIX}{reason}"


@dataclass(frozen=True)
class RetirementResult:
    final_player: 'Player'
    points_earned: int
    new_total_meta_skill_points: int


def age_retirement_chance(age: int) -> float:
    """(age - 38) x 10% past the threshold, 0 before it."""
    years_over = age - SimulationSettings.RETIREMENT_AGE_THRESHOLD
    if years_over <= 0:
        return 0.0
    return min(1.0, years_over * SimulationSettings.RETIREMENT_CHANCE_PER_YEAR)


def check_career_end(player: 'Player', rng: RandomSource) -> Optional[str]:
    """
    Roll the terminal conditions for this turn.

    Burnout (energy at 0) and age (past 38) roll independently: one draw
    each, only when the condition applies.

    Returns:
        The retirement reason, or None if the career continues
    """
    reason = None
    if player.stats.energy <= 0:
        if rng.random() < SimulationSettings.BURNOUT_RETIREMENT_CHANCE:
            reason = BURNOUT_REASON

    chance = age_retirement_chance(player.age)
    if chance > 0:
        if rng.random() < chance and reason is None:
            reason = age_retirement_reason(player.age)

    return reason


def end_career(player: 'Player', reason: str) -> None:
    """Mark the career over and write the terminal log entry (in place)."""
    player.career_over = True
    player.log(career_over_message(reason))
    logger.info(f"Career over for {player.name}: {reason}")


def calculate_meta_points_earned(player: 'Player') -> int:
    return (
        math.floor(player.total_weeks_played * SimulationSettings.META_POINTS_PER_WEEK)
        + player.stats.shooting
        + player.stats.athleticism
    )


def process_player_retirement(player: 'Player', meta_skill_points_at_run_start: int) -> RetirementResult:
    """
    Finalize a finished (or retiring) career.

    The only step allowed to touch a player after ``career_over``: it sets
    ``skill_points`` to the new cumulative legacy total.

    Returns:
        RetirementResult with a finalized copy of the player
    """
    final_player = player.copy()
    if not final_player.career_over:
        end_career(final_player, VOLUNTARY_REASON)

    earned = calculate_meta_points_earned(final_player)
    new_total = meta_skill_points_at_run_start + earned
    final_player.stats.skill_points = new_total

    logger.info(
        f"{final_player.name} retired after {final_player.total_days_played} days: "
        f"+{earned} legacy points (total {new_total})"
    )
    return RetirementResult(
        final_player=final_player,
        points_earned=earned,
        new_total_meta_skill_points=new_total,
    )
