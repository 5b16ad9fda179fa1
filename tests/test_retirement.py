"""
Unit Tests for Retirement and Legacy Points

Terminal-condition rolls and the end-of-career payout arithmetic.
"""

import pytest

from hoops_career.config import SimulationSettings
from hoops_career.player.player import Player, PlayerStats
from hoops_career.progression import (
    BURNOUT_REASON, VOLUNTARY_REASON, age_retirement_chance, calculate_meta_points_earned,
    check_career_end, end_career, process_player_retirement
)

from tests.mocks import SequenceRandom


def make_player(energy: int = 80, age: int = 25, **kwargs) -> Player:
    return Player(
        name='Veteran',
        position='Center',
        age=age,
        stats=PlayerStats(energy=energy),
        **kwargs,
    )


class TestPayout:
    """Legacy point arithmetic"""

    def test_week_based_payout(self):
        player = make_player(total_weeks_played=40)
        player.stats.shooting = 60
        player.stats.athleticism = 55

        result = process_player_retirement(player, meta_skill_points_at_run_start=100)

        assert result.points_earned == 215
        assert result.new_total_meta_skill_points == 315
        assert result.final_player.stats.skill_points == 315

    def test_partial_weeks_round_down(self):
        player = make_player(total_weeks_played=3)
        player.stats.shooting = 10
        player.stats.athleticism = 10
        # floor(7.5) + 20
        assert calculate_meta_points_earned(player) == 27

    def test_voluntary_retirement_ends_career_on_copy(self):
        player = make_player()

        result = process_player_retirement(player, 0)

        assert player.career_over is False, "Input snapshot must stay untouched"
        assert result.final_player.career_over is True
        assert result.final_player.career_log[-1] == f"CAREER OVER: {VOLUNTARY_REASON}"

    def test_finished_career_keeps_its_reason(self):
        player = make_player()
        end_career(player, BURNOUT_REASON)

        result = process_player_retirement(player, 0)

        over_lines = [line for line in result.final_player.career_log if line.startswith('CAREER OVER')]
        assert over_lines == [f"CAREER OVER: {BURNOUT_REASON}"]


class TestTerminalRolls:
    """Burnout and age rolls"""

    def test_healthy_young_player_draws_nothing(self):
        rng = SequenceRandom([])
        assert check_career_end(make_player(), rng) is None
        assert rng.draws_used == 0

    def test_burnout_hit(self):
        rng = SequenceRandom([0.1])
        reason = check_career_end(make_player(energy=0), rng)
        assert reason == BURNOUT_REASON
        assert 'burnout' in reason

    def test_burnout_miss(self):
        assert check_career_end(make_player(energy=0), SequenceRandom([0.5])) is None

    def test_age_retirement(self):
        rng = SequenceRandom([0.05])
        reason = check_career_end(make_player(age=40), rng)
        assert reason is not None and 'age 40' in reason
        assert rng.draws_used == 1

    def test_both_conditions_roll_independently(self):
        rng = SequenceRandom([0.1, 0.0])
        reason = check_career_end(make_player(energy=0, age=45), rng)
        assert reason == BURNOUT_REASON
        assert rng.draws_used == 2

    @pytest.mark.parametrize('age, expected', [
        (30, 0.0),
        (38, 0.0),
        (39, 0.1),
        (43, 0.5),
        (60, 1.0),
    ])
    def test_age_retirement_chance(self, age, expected):
        assert age_retirement_chance(age) == pytest.approx(expected)

    def test_burnout_rate(self, rng):
        player = make_player(energy=0)
        hits = sum(1 for _ in range(2000) if check_career_end(player, rng) == BURNOUT_REASON)
        assert abs(hits / 2000 - SimulationSettings.BURNOUT_RETIREMENT_CHANCE) < 0.04
