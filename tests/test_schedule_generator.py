"""
Tests for the Season Schedule Generator

Validates:
- One slot for every day of the season
- No back-to-back games
- Playoff rounds follow the regular season with increasing gaps
- Reproducibility under a seed
- Hard failures instead of partial schedules
"""

import pytest

from hoops_career.constants import GameMode
from hoops_career.scheduling import (
    HIGH_SCHOOL_SCHEDULE, PROFESSIONAL_SCHEDULE, SCHEDULE_CONFIGS, ScheduleConfig,
    SeasonScheduleGenerator, SlotType
)
from hoops_career.shared.game_result import GameResult, GameStatLine
from hoops_career.shared.random_source import create_random_source
from hoops_career.simulation import ScheduleGenerationException
from hoops_career.team_management import LeagueWorld, Team


@pytest.fixture
def generator(league_world):
    return SeasonScheduleGenerator(league_world)


def first_team(world: LeagueWorld, mode: GameMode) -> Team:
    return world.teams_for_mode(mode)[0]


class TestScheduleShape:
    """Structural guarantees of a generated schedule"""

    @pytest.mark.parametrize('mode', list(GameMode))
    def test_every_day_has_one_slot(self, generator, league_world, mode):
        team = first_team(league_world, mode)
        schedule = generator.generate(1, team.team_id, create_random_source(1))

        config = SCHEDULE_CONFIGS[mode]
        assert schedule.season_length == config.season_length
        assert [slot.day for slot in schedule.slots] == list(range(1, config.season_length + 1))

    @pytest.mark.parametrize('mode', list(GameMode))
    def test_no_back_to_back_games(self, generator, league_world, mode):
        team = first_team(league_world, mode)
        schedule = generator.generate(1, team.team_id, create_random_source(2))

        game_days = [slot.day for slot in schedule.game_slots()]
        assert all(later - earlier >= 2 for earlier, later in zip(game_days, game_days[1:]))

    @pytest.mark.parametrize('mode', list(GameMode))
    def test_regular_season_game_count(self, generator, league_world, mode):
        team = first_team(league_world, mode)
        schedule = generator.generate(1, team.team_id, create_random_source(3))
        assert len(schedule.regular_season_slots()) == SCHEDULE_CONFIGS[mode].regular_season_games

    @pytest.mark.parametrize('mode', list(GameMode))
    def test_playoffs_follow_regular_season(self, generator, league_world, mode):
        team = first_team(league_world, mode)
        schedule = generator.generate(1, team.team_id, create_random_source(4))

        regular_days = [slot.day for slot in schedule.regular_season_slots()]
        playoff_slots = [slot for slot in schedule.slots if slot.slot_type.is_postseason]
        playoff_days = [slot.day for slot in playoff_slots]

        assert min(playoff_days) > max(regular_days)
        gaps = [later - earlier for earlier, later in zip([max(regular_days)] + playoff_days, playoff_days)]
        assert gaps == sorted(gaps) and len(set(gaps)) == len(gaps), "Playoff gaps must increase"
        assert playoff_slots[-1].slot_type is SlotType.CHAMPIONSHIP
        assert all(slot.slot_type is SlotType.PLAYOFFS for slot in playoff_slots[:-1])

    def test_high_school_calendar(self, generator, league_world):
        team = first_team(league_world, GameMode.HIGH_SCHOOL)
        schedule = generator.generate(1, team.team_id, create_random_source(5))

        regular_days = [slot.day for slot in schedule.regular_season_slots()]
        assert regular_days[0] == 8
        assert regular_days[-1] == 67
        assert [slot.day for slot in schedule.slots if slot.slot_type.is_postseason] == [72, 78, 85]
        assert schedule.last_practice_day() == 90
        assert schedule.first_postseason_day() == 72

    def test_opponents_are_other_tier_teams(self, generator, league_world):
        team = first_team(league_world, GameMode.COLLEGE)
        schedule = generator.generate(1, team.team_id, create_random_source(6))

        college_ids = {other.team_id for other in league_world.teams_for_mode(GameMode.COLLEGE)}
        for slot in schedule.regular_season_slots():
            assert slot.opponent_id in college_ids
            assert slot.opponent_id != team.team_id

    def test_group_opponents_played_home_and_away(self, generator, league_world):
        team = first_team(league_world, GameMode.PROFESSIONAL)
        schedule = generator.generate(1, team.team_id, create_random_source(7))

        for rival in league_world.group_members(team):
            if rival.team_id == team.team_id:
                continue
            labels = [slot.opponent for slot in schedule.regular_season_slots()
                      if slot.opponent_id == rival.team_id]
            assert rival.name in labels
            assert f"{rival.name} (Away)" in labels


class TestReproducibility:
    def test_same_seed_same_schedule(self, generator, league_world):
        team = first_team(league_world, GameMode.HIGH_SCHOOL)
        first = generator.generate(1, team.team_id, create_random_source(99))
        second = generator.generate(1, team.team_id, create_random_source(99))
        assert first.to_dict() == second.to_dict()

    def test_round_trip_through_dict(self, generator, league_world):
        team = first_team(league_world, GameMode.HIGH_SCHOOL)
        schedule = generator.generate(2, team.team_id, create_random_source(8))
        game_day = schedule.regular_season_slots()[0].day
        schedule.record_game_result(game_day, GameResult(GameStatLine(20, 10, 4, 3), team_won=True))

        restored = type(schedule).from_dict(schedule.to_dict())
        assert restored.to_dict() == schedule.to_dict()
        assert restored.record == '1-0'


class TestRecordingResults:
    def test_postseason_loss_eliminates(self, generator, league_world):
        team = first_team(league_world, GameMode.HIGH_SCHOOL)
        schedule = generator.generate(1, team.team_id, create_random_source(9))

        schedule.record_game_result(72, GameResult(GameStatLine(), team_won=False))
        assert schedule.playoff_eliminated is True

    def test_practice_day_rejects_result(self, generator, league_world):
        team = first_team(league_world, GameMode.HIGH_SCHOOL)
        schedule = generator.generate(1, team.team_id, create_random_source(10))

        with pytest.raises(ValueError):
            schedule.record_game_result(1, GameResult(GameStatLine(), team_won=True))


class TestFailures:
    """Generation fails loudly instead of returning a partial schedule"""

    def test_unknown_team(self, generator):
        with pytest.raises(ScheduleGenerationException):
            generator.generate(1, 'no-such-team', create_random_source(1))

    def test_missing_team_id(self, generator):
        with pytest.raises(ScheduleGenerationException):
            generator.generate(1, None, create_random_source(1))

    def test_missing_league_metadata(self):
        bare = Team(team_id='bare', name='Bare Team', game_mode=GameMode.COLLEGE, league={})
        world = LeagueWorld(teams=[bare])
        with pytest.raises(ScheduleGenerationException):
            SeasonScheduleGenerator(world).generate(1, 'bare', create_random_source(1))

    def test_mismatched_config(self, generator, league_world):
        team = first_team(league_world, GameMode.HIGH_SCHOOL)
        with pytest.raises(ScheduleGenerationException):
            generator.generate(1, team.team_id, create_random_source(1), config=PROFESSIONAL_SCHEDULE)


class TestScheduleConfig:
    def test_default_configs_are_valid(self):
        assert all(config.validate() for config in SCHEDULE_CONFIGS.values())

    def test_games_past_season_end_are_invalid(self):
        config = ScheduleConfig(
            game_mode=GameMode.HIGH_SCHOOL,
            season_length=30,
            regular_season_games=18,
        )
        assert config.validate() is False

    def test_back_to_back_gap_is_invalid(self):
        config = ScheduleConfig(
            game_mode=GameMode.HIGH_SCHOOL,
            season_length=HIGH_SCHOOL_SCHEDULE.season_length,
            regular_season_games=10,
            game_gaps=(1, 3),
        )
        assert config.validate() is False

    def test_non_increasing_playoff_gaps_are_invalid(self):
        config = ScheduleConfig(
            game_mode=GameMode.HIGH_SCHOOL,
            season_length=120,
            regular_season_games=10,
            playoff_rounds=('Semi-Final', 'Final'),
            playoff_gaps=(6, 6),
        )
        assert config.validate() is False
