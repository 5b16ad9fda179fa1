"""
Unit Tests for the Game Performance Generator

Caps, draw order and the multipliers that feed the box score.
"""

import pytest

from hoops_career.constants import GameMode
from hoops_career.game_engine.performance_generator import (
    MAX_ASSISTS, MAX_GAME_MINUTES, MAX_POINTS, MAX_REBOUNDS, MAX_WIN_CHANCE, MIN_WIN_CHANCE,
    calculate_win_chance, energy_factor, generate_game_performance, get_position_factors,
    get_role_multiplier
)
from hoops_career.player.player import Player, PlayerStats
from hoops_career.shared.game_result import GameStatLine
from hoops_career.shared.random_source import create_random_source

from tests.mocks import SequenceRandom


def make_player(mode: GameMode, role: str, position: str = 'Point Guard', **stats) -> Player:
    return Player(
        name='Box Score',
        position=position,
        game_mode=mode,
        current_role=role,
        stats=PlayerStats(**stats),
    )


def elite_stats() -> dict:
    return dict(
        shooting=99, athleticism=99, basketball_iq=99, charisma=99, professionalism=99,
        energy=100, morale=100, skill_points=1_000_000,
    )


class TestMinutes:
    """Minutes respect the tier's game length"""

    def test_pro_minutes_capped_at_48(self):
        player = make_player(GameMode.PROFESSIONAL, 'MVP Candidate', **elite_stats())
        result = generate_game_performance(player, True, SequenceRandom([], fill=0.5))
        assert result.player_stats.minutes == MAX_GAME_MINUTES[GameMode.PROFESSIONAL] == 48

    def test_high_school_minutes_capped_at_32(self):
        player = make_player(GameMode.HIGH_SCHOOL, 'All-American Prospect', **elite_stats())
        result = generate_game_performance(player, True, SequenceRandom([], fill=0.5))
        assert result.player_stats.minutes == 32

    def test_minutes_never_exceed_cap_over_many_games(self):
        rng = create_random_source(11)
        for mode, role in [
            (GameMode.HIGH_SCHOOL, 'All-American Prospect'),
            (GameMode.COLLEGE, 'Top Draft Prospect'),
            (GameMode.PROFESSIONAL, 'MVP Candidate'),
        ]:
            player = make_player(mode, role, **elite_stats())
            for _ in range(200):
                minutes = generate_game_performance(player, True, rng).player_stats.minutes
                assert 0 <= minutes <= MAX_GAME_MINUTES[mode]


class TestStatCaps:
    """Box score numbers stay inside their hard caps"""

    def test_huge_performance_is_capped(self):
        player = make_player(GameMode.PROFESSIONAL, 'MVP Candidate', **elite_stats())
        rng = SequenceRandom([0.5, 0.999, 0.999, 0.999, 0.0])

        result = generate_game_performance(player, True, rng)

        assert result.player_stats.points == MAX_POINTS
        assert result.player_stats.rebounds == MAX_REBOUNDS
        assert result.player_stats.assists == MAX_ASSISTS
        assert result.team_won is True
        assert rng.draws_used == 5

    def test_zero_minutes_produces_zero_stats(self):
        player = make_player(GameMode.COLLEGE, 'Practice Squad Player')
        rng = SequenceRandom([0.5, 0.99])

        result = generate_game_performance(player, False, rng)

        assert result.player_stats == GameStatLine()
        assert result.team_won is False
        assert rng.draws_used == 2, "Only the minutes and win draws happen without minutes"

    def test_same_seed_same_game(self):
        player = make_player(GameMode.COLLEGE, 'Starter', shooting=70, athleticism=65, basketball_iq=60)
        first = generate_game_performance(player, False, create_random_source(3))
        second = generate_game_performance(player, False, create_random_source(3))
        assert first == second


class TestMultipliers:
    """Role, position and energy factors"""

    @pytest.mark.parametrize('role, expected', [
        ('MVP Candidate', 1.4),
        ('Established Star', 1.4),
        ('All-Star Level Player', 1.4),
        ('Conference Star', 1.4),
        ('Starter', 1.15),
        ('Starting Caliber Player', 1.15),
        ('Team Captain', 1.15),
        ('Rotation Player', 1.0),
        ('Key Substitute (6th Man)', 1.0),
        ('Bench Warmer', 0.75),
        ('Practice Squad Player', 0.75),
        ('Walk-On Hopeful', 0.65),
    ])
    def test_role_multiplier(self, role, expected):
        assert get_role_multiplier(role) == pytest.approx(expected)

    def test_energy_factor_has_floor(self):
        assert energy_factor(100) == pytest.approx(1.0)
        assert energy_factor(50) == pytest.approx(0.5)
        assert energy_factor(0) == pytest.approx(0.3)

    def test_centers_rebound_guards_pass(self):
        center = get_position_factors('Center')
        point_guard = get_position_factors('Point Guard')
        assert center['rebounds'] > point_guard['rebounds']
        assert point_guard['assists'] > center['assists']

    def test_win_chance_is_bounded(self):
        weak = make_player(GameMode.HIGH_SCHOOL, 'Freshman Newcomer', basketball_iq=10,
                           professionalism=10, energy=0)
        strong = make_player(GameMode.PROFESSIONAL, 'MVP Candidate', **elite_stats())
        huge_line = GameStatLine(minutes=48, points=70, rebounds=30, assists=25)

        assert calculate_win_chance(weak, GameStatLine(), False) >= MIN_WIN_CHANCE
        assert calculate_win_chance(strong, huge_line, True) == pytest.approx(MAX_WIN_CHANCE)
