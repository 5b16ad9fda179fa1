"""
Game Performance Generator

Simulates the player's box score for a game day and rolls the team result.

Random draws happen in a fixed order so a seeded source reproduces a game
exactly: minutes jitter, then points, rebounds and assists jitters (only
when the player got minutes), then the single win draw.
"""

import logging
import math
from typing import Dict

from ..constants import GameMode
from ..player.player import Player
from ..player.stat_model import clamp
from ..player.traits import get_performance_multipliers, get_win_chance_bonus
from ..shared.game_result import GameResult, GameStatLine
from ..shared.random_source import RandomSource


logger = logging.getLogger(__name__)


DEFAULT_BASE_MINUTES = 12

BASE_MINUTES: Dict[GameMode, Dict[str, int]] = {
    GameMode.HIGH_SCHOOL: {
        'Junior Varsity Player': 14,
        'Varsity Rotation': 18,
        'Varsity Starter': 24,
        'Team Captain': 26,
        'District Star': 28,
        'All-State Contender': 30,
        'All-American Prospect': 32,
    },
    GameMode.COLLEGE: {
        'Walk-On Hopeful': 5,
        'Practice Squad Player': 0,
        'Bench Warmer': 8,
        'End of Bench Specialist': 10,
        'Rotation Player': 18,
        'Key Substitute (6th Man)': 24,
        'Starter': 28,
        'Conference Star': 32,
        'All-American Candidate': 34,
        'Top Draft Prospect': 30,
    },
    GameMode.PROFESSIONAL: {
        'Undrafted Free Agent': 4,
        'G-League Assignee': 30,
        'Two-Way Contract Player': 8,
        'End of Bench Pro': 10,
        'Rotation Contributor': 18,
        'Valuable Sixth Man': 26,
        'Starting Caliber Player': 30,
        'Established Star': 34,
        'All-Star Level Player': 35,
        'All-League Performer': 36,
        'MVP Candidate': 37,
    },
}

MAX_GAME_MINUTES: Dict[GameMode, int] = {
    GameMode.HIGH_SCHOOL: 32,
    GameMode.COLLEGE: 40,
    GameMode.PROFESSIONAL: 48,
}

# Average of shooting/athleticism/IQ a tier expects before extra minutes are earned
ATTRIBUTE_BASELINE: Dict[GameMode, int] = {
    GameMode.HIGH_SCHOOL: 45,
    GameMode.COLLEGE: 60,
    GameMode.PROFESSIONAL: 75,
}

MAX_ATTRIBUTE_MINUTE_BONUS: Dict[GameMode, int] = {
    GameMode.HIGH_SCHOOL: 8,
    GameMode.COLLEGE: 10,
    GameMode.PROFESSIONAL: 10,
}

MAX_SKILL_POINT_MINUTE_BONUS: Dict[GameMode, int] = {
    GameMode.HIGH_SCHOOL: 4,
    GameMode.COLLEGE: 6,
    GameMode.PROFESSIONAL: 8,
}
SKILL_POINTS_PER_MINUTE = 150

MODE_STAT_SCALE: Dict[GameMode, float] = {
    GameMode.HIGH_SCHOOL: 0.7,
    GameMode.COLLEGE: 0.8,
    GameMode.PROFESSIONAL: 1.0,
}

PLAYED_HARD_MINUTES_MULTIPLIER = 1.1
MIN_ENERGY_FACTOR = 0.3

POINTS_PER_MINUTE = 0.4
REBOUNDS_PER_MINUTE = 0.25
ASSISTS_PER_MINUTE = 0.15

MAX_POINTS = 70
MAX_REBOUNDS = 30
MAX_ASSISTS = 25

BASE_WIN_CHANCE = 0.45
MIN_WIN_CHANCE = 0.05
MAX_WIN_CHANCE = 0.95


def get_role_multiplier(role: str) -> float:
    """Production multiplier from the role name: stars 1.4x down to 0.65x for fringe roles."""
    words = role.replace('(', ' ').replace(')', ' ').split()
    star_tags = ('All-Star', 'All-American', 'MVP', 'All-League', 'Top Draft Prospect')
    if 'Star' in words or any(tag in role for tag in star_tags):
        return 1.4
    if any(tag in role for tag in ('Starter', 'Captain', 'Starting')):
        return 1.15
    if any(tag in role for tag in ('Rotation', 'Sixth Man', '6th Man', 'Substitute')):
        return 1.0
    if 'Bench' in role or 'Practice Squad' in role:
        return 0.75
    return 0.65


def get_position_factors(position: str) -> Dict[str, float]:
    """Guards score and pass more, centers rebound more."""
    if 'Guard' in position:
        points = 1.1
    elif 'Center' in position:
        points = 0.9
    else:
        points = 1.0

    if 'Center' in position:
        rebounds = 1.2
    elif 'Guard' in position:
        rebounds = 0.8
    else:
        rebounds = 1.0

    if 'Point Guard' in position:
        assists = 1.3
    elif 'Guard' in position:
        assists = 1.1
    else:
        assists = 0.9

    return {'points': points, 'rebounds': rebounds, 'assists': assists}


def energy_factor(energy: int) -> float:
    return max(MIN_ENERGY_FACTOR, energy / 100)


def calculate_minutes(player: Player, played_hard: bool, rng: RandomSource) -> int:
    """Minutes played; consumes one draw (the ±10% jitter)."""
    mode = player.game_mode
    stats = player.stats

    base = BASE_MINUTES[mode].get(player.current_role, DEFAULT_BASE_MINUTES)

    attribute_difference = stats.average_skill - ATTRIBUTE_BASELINE[mode]
    base += int(clamp(math.floor(attribute_difference / 4), 0, MAX_ATTRIBUTE_MINUTE_BONUS[mode]))
    base += min(MAX_SKILL_POINT_MINUTE_BONUS[mode], max(0, stats.skill_points) // SKILL_POINTS_PER_MINUTE)

    if played_hard:
        base *= PLAYED_HARD_MINUTES_MULTIPLIER

    jitter = 0.9 + rng.random() * 0.2
    minutes = math.floor(base * energy_factor(stats.energy) * jitter)
    return int(clamp(minutes, 0, MAX_GAME_MINUTES[mode]))


def calculate_win_chance(player: Player, stat_line: GameStatLine, played_hard: bool) -> float:
    stats = player.stats
    win_chance = (
        BASE_WIN_CHANCE
        + stats.basketball_iq / 500
        + stats.professionalism / 600
        + stat_line.impact_score / 200
        + get_win_chance_bonus(player.traits)
    )
    if played_hard and stat_line.points > 15:
        win_chance += 0.05
    if stats.energy < 20:
        win_chance -= 0.15
    return clamp(win_chance, MIN_WIN_CHANCE, MAX_WIN_CHANCE)


def generate_game_performance(player: Player, played_hard: bool, rng: RandomSource) -> GameResult:
    """
    Simulate one game for ``player``.

    Args:
        player: Snapshot to read from; not mutated
        played_hard: Whether the player went all out (more minutes)
        rng: Random source

    Returns:
        GameResult with a stat line inside the tier's caps and the team result
    """
    mode = player.game_mode
    stats = player.stats
    minutes = calculate_minutes(player, played_hard, rng)

    points = rebounds = assists = 0
    if minutes > 0:
        scale = MODE_STAT_SCALE[mode]
        role_multiplier = get_role_multiplier(player.current_role)
        position = get_position_factors(player.position)
        traits = get_performance_multipliers(player.traits)
        fatigue = energy_factor(stats.energy)

        def produce(per_minute: float, stat: str, skill: float) -> int:
            return math.floor(
                minutes
                * per_minute * scale
                * position[stat]
                * skill
                * role_multiplier
                * fatigue
                * traits[stat]
                * (0.7 + rng.random() * 0.6)
            )

        points = produce(POINTS_PER_MINUTE, 'points', stats.shooting / 50)
        rebounds = produce(REBOUNDS_PER_MINUTE, 'rebounds', stats.athleticism / 55)
        assists = produce(ASSISTS_PER_MINUTE, 'assists', stats.basketball_iq / 60)

    stat_line = GameStatLine(
        minutes=minutes,
        points=int(clamp(points, 0, MAX_POINTS)),
        rebounds=int(clamp(rebounds, 0, MAX_REBOUNDS)),
        assists=int(clamp(assists, 0, MAX_ASSISTS)),
    )

    win_chance = calculate_win_chance(player, stat_line, played_hard)
    team_won = rng.random() < win_chance

    logger.debug(
        f"{player.name} game: {stat_line.to_dict()} win_chance={win_chance:.3f} won={team_won}"
    )
    return GameResult(player_stats=stat_line, team_won=team_won)
