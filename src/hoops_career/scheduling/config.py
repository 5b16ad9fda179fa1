"""
Configuration for the Season Schedule Generator

Per-tier season shape: season length, regular-season game count, the
opening practice block, the alternating gap between games and the playoff
rounds with their (increasing) gaps.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..constants import GameMode


@dataclass(frozen=True)
class ScheduleConfig:
    """Season shape for one tier."""
    game_mode: GameMode
    season_length: int
    regular_season_games: int
    first_game_day: int = 8               # after a week of practice
    game_gaps: Tuple[int, ...] = (3, 4)   # cycled between consecutive games
    playoff_rounds: Tuple[str, ...] = ()
    playoff_gaps: Tuple[int, ...] = ()    # gap before each round

    def regular_season_days(self) -> List[int]:
        days = []
        day = self.first_game_day
        for index in range(self.regular_season_games):
            days.append(day)
            day += self.game_gaps[index % len(self.game_gaps)]
        return days

    def playoff_days(self) -> List[int]:
        regular = self.regular_season_days()
        day = regular[-1] if regular else self.first_game_day
        days = []
        for gap in self.playoff_gaps:
            day += gap
            days.append(day)
        return days

    def validate(self) -> bool:
        """Validate that every game fits inside the season without back-to-backs"""
        if self.season_length < 1 or self.regular_season_games < 0:
            return False
        if self.first_game_day < 1:
            return False
        if not self.game_gaps or min(self.game_gaps) < 2:
            return False
        if len(self.playoff_rounds) != len(self.playoff_gaps):
            return False
        if any(later <= earlier for earlier, later in zip(self.playoff_gaps, self.playoff_gaps[1:])):
            return False
        if self.playoff_gaps and min(self.playoff_gaps) < 2:
            return False

        all_days = self.regular_season_days() + self.playoff_days()
        return all(1 <= day <= self.season_length for day in all_days)


HIGH_SCHOOL_SCHEDULE = ScheduleConfig(
    game_mode=GameMode.HIGH_SCHOOL,
    season_length=90,
    regular_season_games=18,
    game_gaps=(3, 4),
    playoff_rounds=('District Championship', 'Regional Semi-Final', 'State Championship'),
    playoff_gaps=(5, 6, 7),
)

COLLEGE_SCHEDULE = ScheduleConfig(
    game_mode=GameMode.COLLEGE,
    season_length=120,
    regular_season_games=26,
    game_gaps=(3, 4),
    playoff_rounds=(
        'Conference Tournament Final',
        'Tournament Round of 64',
        'Sweet Sixteen',
        'National Championship',
    ),
    playoff_gaps=(4, 5, 6, 7),
)

PROFESSIONAL_SCHEDULE = ScheduleConfig(
    game_mode=GameMode.PROFESSIONAL,
    season_length=160,
    regular_season_games=50,
    game_gaps=(2, 3),
    playoff_rounds=(
        'Play-In Tournament',
        'First Round',
        'Conference Semifinals',
        'Conference Finals',
        'League Finals',
    ),
    playoff_gaps=(4, 5, 6, 7, 8),
)

SCHEDULE_CONFIGS: Dict[GameMode, ScheduleConfig] = {
    GameMode.HIGH_SCHOOL: HIGH_SCHOOL_SCHEDULE,
    GameMode.COLLEGE: COLLEGE_SCHEDULE,
    GameMode.PROFESSIONAL: PROFESSIONAL_SCHEDULE,
}


def get_schedule_config(game_mode: GameMode) -> ScheduleConfig:
    return SCHEDULE_CONFIGS[game_mode]
