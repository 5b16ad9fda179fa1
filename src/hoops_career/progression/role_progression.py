"""
Role Progression Evaluator

Maps a player's stats to graduation, promotion and demotion decisions.

Rules:
- Graduation is checked first: High School -> College after the fourth High
  School season; College -> Professional after the fourth College season or
  at age 22. Graduation puts the player on the new tier's entry role.
- Promotion jumps straight to the highest role whose threshold the
  performance score beats, skipping intermediate roles.
- Demotion only happens at season end, only without a promotion, and moves
  down exactly one role when the score is below 70 + 10 x current role index.

The evaluator never mutates the player; the caller applies the result.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple, TYPE_CHECKING

from ..constants import (
    COLLEGE_GRADUATION_AGE, COLLEGE_MAX_SEASONS, GameMode, HIGH_SCHOOL_MAX_SEASONS,
    get_entry_role, get_role_index, get_roles_for_mode
)

if TYPE_CHECKING:
    from ..player.player import Player, PlayerStats


DEMOTION_BASE_THRESHOLD = 70
DEMOTION_THRESHOLD_PER_TIER = 10

# (score must exceed, role) from best to worst
PROMOTION_THRESHOLDS: Dict[GameMode, Tuple[Tuple[int, str], ...]] = {
    GameMode.HIGH_SCHOOL: (
        (200, 'All-American Prospect'),
        (170, 'District Star'),
        (140, 'Varsity Starter'),
        (110, 'Varsity Rotation'),
    ),
    GameMode.COLLEGE: (
        (280, 'Top Draft Prospect'),
        (250, 'All-American Candidate'),
        (220, 'Conference Star'),
        (190, 'Starter'),
        (160, 'Key Substitute (6th Man)'),
    ),
    GameMode.PROFESSIONAL: (
        (320, 'MVP Candidate'),
        (300, 'All-League Performer'),
        (280, 'All-Star Level Player'),
        (260, 'Established Star'),
        (240, 'Starting Caliber Player'),
        (220, 'Valuable Sixth Man'),
        (200, 'Rotation Contributor'),
    ),
}


@dataclass
class ProgressionResult:
    new_role: str
    new_mode: GameMode
    log_messages: List[str] = field(default_factory=list)
    graduated: bool = False
    promoted: bool = False
    demoted: bool = False

    @property
    def changed(self) -> bool:
        return self.graduated or self.promoted or self.demoted


def calculate_performance_score(stats: 'PlayerStats') -> int:
    """round(1.2 shooting + 1.1 athleticism + 1.0 IQ + 0.5 professionalism + 0.2 charisma)"""
    return round(
        1.2 * stats.shooting
        + 1.1 * stats.athleticism
        + 1.0 * stats.basketball_iq
        + 0.5 * stats.professionalism
        + 0.2 * stats.charisma
    )


def should_graduate(player: 'Player') -> bool:
    if player.game_mode is GameMode.HIGH_SCHOOL:
        return player.current_season_in_mode >= HIGH_SCHOOL_MAX_SEASONS
    if player.game_mode is GameMode.COLLEGE:
        return (
            player.current_season_in_mode >= COLLEGE_MAX_SEASONS
            or player.age >= COLLEGE_GRADUATION_AGE
        )
    return False


def graduation_message(new_mode: GameMode, new_role: str) -> str:
    if new_mode is GameMode.COLLEGE:
        return f"--- You've graduated High School and are now entering College as a {new_role}! ---"
    return f"--- Your College career ends. You're taking your talents to the pros as an {new_role}! ---"


def target_role_index(game_mode: GameMode, score: int) -> int:
    """Index of the best role the score qualifies for, or -1 if none."""
    roles = get_roles_for_mode(game_mode)
    for threshold, role in PROMOTION_THRESHOLDS[game_mode]:
        if score > threshold:
            return roles.index(role)
    return -1


def evaluate_player_progress(player: 'Player', check_graduation: bool = True) -> ProgressionResult:
    """
    Evaluate graduation, promotion and demotion for ``player``.

    Args:
        player: Snapshot to evaluate
        check_graduation: False for mid-season reviews, which may promote
            or demote but never move the player to another tier

    Returns:
        ProgressionResult; log messages are for the caller to append
    """
    score = calculate_performance_score(player.stats)
    result = ProgressionResult(new_role=player.current_role, new_mode=player.game_mode)

    if check_graduation and should_graduate(player):
        result.new_mode = player.game_mode.next_mode()
        result.new_role = get_entry_role(result.new_mode)
        result.graduated = True
        result.log_messages.append(graduation_message(result.new_mode, result.new_role))

    roles = get_roles_for_mode(result.new_mode)
    current_index = get_role_index(result.new_mode, result.new_role)

    best_index = target_role_index(result.new_mode, score)
    if best_index > current_index:
        result.new_role = roles[best_index]
        result.promoted = True
        result.log_messages.append(f"Your performance has earned you a new role: {result.new_role}!")
        return result

    season_over = player.schedule is not None and player.current_day_in_season > player.season_length
    demotion_threshold = DEMOTION_BASE_THRESHOLD + current_index * DEMOTION_THRESHOLD_PER_TIER
    if not result.graduated and season_over and score < demotion_threshold and current_index > 0:
        result.new_role = roles[current_index - 1]
        result.demoted = True
        result.log_messages.append(f"A tough season. Your role has been adjusted to: {result.new_role}.")

    return result
