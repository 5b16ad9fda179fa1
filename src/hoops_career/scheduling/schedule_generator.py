"""
Season Schedule Generator

Builds one day-by-day schedule per season for the player's team:

- Every day 1..season_length gets exactly one slot
- Regular-season games start after the opening practice block and are
  spaced by the tier's alternating gaps (never back-to-back)
- Group opponents (district, conference or division) are played home and
  away; the remaining games are filled from the rest of the tier
- Game order is shuffled with the injected random source
- Playoff rounds follow the last regular-season game with increasing gaps,
  the final round being the championship
- All other days are practice
"""

import logging
from typing import List, Optional, Tuple

from ..shared.random_source import RandomSource, shuffle_in_place
from ..simulation.simulation_exceptions import ScheduleGenerationException
from ..team_management.teams import LeagueWorld, Team
from .config import ScheduleConfig, get_schedule_config
from .schedule_models import ScheduleSlot, SeasonSchedule, SlotType


class SeasonScheduleGenerator:
    """
    Generates season schedules for a team in a league world.

    Raises ``ScheduleGenerationException`` instead of returning a partial
    schedule when the team or its league metadata is missing.
    """

    def __init__(self, world: LeagueWorld, logger: Optional[logging.Logger] = None):
        """
        Initialize schedule generator.

        Args:
            world: League world holding every tier's teams
            logger: Optional logger for tracking generation
        """
        self.world = world
        self.logger = logger or logging.getLogger(__name__)

    def generate(
        self,
        season: int,
        team_id: Optional[str],
        rng: RandomSource,
        config: Optional[ScheduleConfig] = None
    ) -> SeasonSchedule:
        """
        Generate a full season schedule.

        Args:
            season: Season number recorded on the schedule
            team_id: The player's team
            rng: Random source for opponent order
            config: Override for the tier's default schedule shape

        Returns:
            SeasonSchedule with exactly one slot per day of the season
        """
        team = self.world.find_team(team_id)
        if team is None:
            raise ScheduleGenerationException(
                f"Team '{team_id}' not found in league",
                team_id=team_id,
            )
        if not team.has_league_metadata():
            raise ScheduleGenerationException(
                f"Team '{team.name}' is missing league metadata for {team.game_mode.value}",
                team_id=team_id,
                context={"league": dict(team.league)},
            )

        config = config or get_schedule_config(team.game_mode)
        if config.game_mode is not team.game_mode:
            raise ScheduleGenerationException(
                f"Schedule config for {config.game_mode.value} cannot be used "
                f"for a {team.game_mode.value} team",
                team_id=team_id,
            )
        if not config.validate():
            raise ScheduleGenerationException(
                f"Schedule config for {config.game_mode.value} does not fit the season",
                team_id=team_id,
            )

        games = self._build_regular_season_games(team, config, rng)
        slots_by_day = {}
        for day, (opponent_name, opponent_id) in zip(config.regular_season_days(), games):
            slots_by_day[day] = ScheduleSlot(
                day=day,
                slot_type=SlotType.GAME,
                opponent=opponent_name,
                opponent_id=opponent_id,
            )

        playoff_days = config.playoff_days()
        for index, (day, round_name) in enumerate(zip(playoff_days, config.playoff_rounds)):
            is_final = index == len(playoff_days) - 1
            slots_by_day[day] = ScheduleSlot(
                day=day,
                slot_type=SlotType.CHAMPIONSHIP if is_final else SlotType.PLAYOFFS,
                opponent=round_name,
            )

        slots = [
            slots_by_day.get(day) or ScheduleSlot(day=day, slot_type=SlotType.PRACTICE)
            for day in range(1, config.season_length + 1)
        ]

        schedule = SeasonSchedule(
            season=season,
            game_mode=team.game_mode,
            team_id=team.team_id,
            slots=slots,
        )
        self.logger.debug(
            f"Generated {team.game_mode.value} schedule for {team.name} season {season}: "
            f"{len(games)} games, {len(playoff_days)} playoff rounds, {len(slots)} days"
        )
        return schedule

    def _build_regular_season_games(
        self,
        team: Team,
        config: ScheduleConfig,
        rng: RandomSource
    ) -> List[Tuple[str, str]]:
        """(opponent label, opponent id) pairs in shuffled play order."""
        group = [
            other for other in self.world.group_members(team)
            if other.team_id != team.team_id
        ]
        group_ids = {other.team_id for other in group}
        outside = [
            other for other in self.world.teams_for_mode(team.game_mode)
            if other.team_id != team.team_id and other.team_id not in group_ids
        ]

        games: List[Tuple[str, str]] = []
        for opponent in group:
            games.append((opponent.name, opponent.team_id))
            games.append((f"{opponent.name} (Away)", opponent.team_id))

        remaining = config.regular_season_games - len(games)
        if remaining > 0 and outside:
            shuffle_in_place(rng, outside)
            for index in range(remaining):
                opponent = outside[index % len(outside)]
                label = opponent.name if index % 2 == 0 else f"{opponent.name} (Away)"
                games.append((label, opponent.team_id))

        shuffle_in_place(rng, games)
        return games[:config.regular_season_games]

