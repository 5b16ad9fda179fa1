"""
Tests for the generated league world and standings.
"""

import pytest

from hoops_career.constants import GameMode
from hoops_career.shared.random_source import create_random_source
from hoops_career.team_management import (
    LeagueWorld, StandingsEntry, Team, TeamRecord, build_standings, format_standings,
    simulate_team_season, win_probability
)

from tests.mocks import ConstantRandom


class TestLeagueWorld:
    def test_team_counts_per_tier(self, league_world):
        assert len(league_world.teams_for_mode(GameMode.HIGH_SCHOOL)) == 64
        assert len(league_world.teams_for_mode(GameMode.COLLEGE)) == 32
        assert len(league_world.teams_for_mode(GameMode.PROFESSIONAL)) == 30

    def test_every_team_has_league_metadata(self, league_world):
        assert all(team.has_league_metadata() for team in league_world.teams)

    def test_team_ids_and_names_are_unique(self, league_world):
        ids = [team.team_id for team in league_world.teams]
        assert len(ids) == len(set(ids))
        for mode in GameMode:
            names = [team.name for team in league_world.teams_for_mode(mode)]
            assert len(names) == len(set(names))

    def test_same_seed_same_world(self, league_world):
        rebuilt = LeagueWorld.from_seed(league_world.seed)
        assert [t.name for t in rebuilt.teams] == [t.name for t in league_world.teams]
        assert [t.offense_rating for t in rebuilt.teams] == [t.offense_rating for t in league_world.teams]

    @pytest.mark.parametrize('mode, group_size', [
        (GameMode.HIGH_SCHOOL, 8),
        (GameMode.COLLEGE, 8),
        (GameMode.PROFESSIONAL, 5),
    ])
    def test_group_sizes(self, league_world, mode, group_size):
        team = league_world.teams_for_mode(mode)[0]
        members = league_world.group_members(team)
        assert len(members) == group_size
        assert team in members

    def test_college_teams_have_academics(self, league_world):
        for team in league_world.teams_for_mode(GameMode.COLLEGE):
            assert 30 <= team.academic_strength <= 95

    def test_find_team(self, league_world):
        team = league_world.teams[3]
        assert league_world.find_team(team.team_id) is team
        assert league_world.find_team('missing') is None
        assert league_world.find_team(None) is None

    def test_team_without_metadata_is_its_own_group(self):
        bare = Team(team_id='bare', name='Bare', game_mode=GameMode.PROFESSIONAL)
        world = LeagueWorld(teams=[bare])
        assert bare.group_key is None
        assert world.group_members(bare) == [bare]


def make_team(team_id: str, rating: int, mode: GameMode = GameMode.COLLEGE) -> Team:
    return Team(
        team_id=team_id,
        name=team_id.title(),
        game_mode=mode,
        league={'division': 'D1', 'conference': 'Test'},
        offense_rating=rating,
        defense_rating=rating,
    )


class TestStandings:
    def test_win_probability_is_clamped(self):
        strong = make_team('strong', 99)
        weak = make_team('weak', 1)
        assert win_probability(strong, weak) == pytest.approx(0.95)
        assert win_probability(weak, strong) == pytest.approx(0.05)
        assert win_probability(strong, strong) == pytest.approx(0.5)

    def test_team_without_opponents_loses_everything(self):
        lonely = make_team('lonely', 80)
        record = simulate_team_season(lonely, [lonely], 10, create_random_source(1))
        assert record == TeamRecord(wins=0, losses=10)

    def test_simulated_record_sums_to_games(self):
        teams = [make_team('a', 60), make_team('b', 50), make_team('c', 40)]
        record = simulate_team_season(teams[0], teams, 26, create_random_source(2))
        assert record.games == 26

    def test_constant_low_draw_wins_every_game(self):
        teams = [make_team('a', 60), make_team('b', 50)]
        record = simulate_team_season(teams[0], teams, 5, ConstantRandom(0.0))
        assert record.wins == 5

    def test_player_team_keeps_real_record(self, league_world):
        team = league_world.teams_for_mode(GameMode.HIGH_SCHOOL)[0]
        record = TeamRecord(wins=17, losses=1)

        entries = build_standings(league_world, team.team_id, record, 18, create_random_source(3))

        player_entries = [entry for entry in entries if entry.is_player_team]
        assert len(player_entries) == 1
        assert player_entries[0].record == record
        assert len(entries) == 8
        wins = [entry.record.wins for entry in entries]
        assert wins == sorted(wins, reverse=True)

    def test_unknown_team_has_no_standings(self, league_world):
        assert build_standings(league_world, 'missing', TeamRecord(0, 0), 10, create_random_source(1)) == []

    def test_format_marks_player_team(self):
        entries = [
            StandingsEntry('a', 'Alpha', TeamRecord(10, 2)),
            StandingsEntry('b', 'Beta', TeamRecord(8, 4), is_player_team=True),
        ]
        assert format_standings(entries, title='Final standings') == (
            'Final standings: 1. Alpha (10-2), 2. *Beta* (8-4)'
        )
