"""
Unit Tests for Role Progression

Graduation between tiers, multi-tier promotion and one-step demotion.
"""

import pytest

from hoops_career.constants import GameMode
from hoops_career.player.player import Player, PlayerStats
from hoops_career.progression import (
    calculate_performance_score, evaluate_player_progress, should_graduate
)
from hoops_career.scheduling import ScheduleSlot, SeasonSchedule


def flat_stats(value: int) -> PlayerStats:
    return PlayerStats(
        shooting=value, athleticism=value, basketball_iq=value,
        charisma=value, professionalism=value,
    )


def make_schedule(mode: GameMode, length: int = 90) -> SeasonSchedule:
    return SeasonSchedule(
        season=1,
        game_mode=mode,
        slots=[ScheduleSlot(day=day) for day in range(1, length + 1)],
    )


def make_player(mode: GameMode, role: str, stats: PlayerStats, season_in_mode: int = 1,
                day: int = 10, age: int = 15) -> Player:
    return Player(
        name='Progress Check',
        position='Small Forward',
        age=age,
        game_mode=mode,
        current_role=role,
        current_season_in_mode=season_in_mode,
        current_day_in_season=day,
        stats=stats,
        schedule=make_schedule(mode),
    )


class TestPerformanceScore:
    def test_weighted_score(self):
        stats = PlayerStats(shooting=50, athleticism=40, basketball_iq=30, charisma=20, professionalism=60)
        # 60 + 44 + 30 + 30 + 4
        assert calculate_performance_score(stats) == 168


class TestGraduation:
    """Tier changes at the end of a tier's final season"""

    def test_high_school_senior_graduates_even_with_low_stats(self):
        player = make_player(GameMode.HIGH_SCHOOL, 'Sophomore Contender', flat_stats(20),
                             season_in_mode=4, day=91, age=17)

        result = evaluate_player_progress(player)

        assert result.graduated is True
        assert result.new_mode is GameMode.COLLEGE
        assert result.new_role == 'Walk-On Hopeful'
        assert result.demoted is False
        assert result.log_messages == [
            "--- You've graduated High School and are now entering College as a Walk-On Hopeful! ---"
        ]

    def test_college_graduates_at_age_22(self):
        player = make_player(GameMode.COLLEGE, 'Rotation Player', flat_stats(30),
                             season_in_mode=2, day=121, age=22)

        assert should_graduate(player) is True
        result = evaluate_player_progress(player)
        assert result.new_mode is GameMode.PROFESSIONAL
        assert result.new_role == 'Undrafted Free Agent'
        assert 'pros as an Undrafted Free Agent' in result.log_messages[0]

    def test_professional_never_graduates(self):
        player = make_player(GameMode.PROFESSIONAL, 'Rotation Contributor', flat_stats(40),
                             season_in_mode=12, age=34)
        assert should_graduate(player) is False

    def test_mid_season_review_skips_graduation(self):
        player = make_player(GameMode.HIGH_SCHOOL, 'Freshman Newcomer', flat_stats(20),
                             season_in_mode=4, day=30, age=17)

        result = evaluate_player_progress(player, check_graduation=False)
        assert result.graduated is False
        assert result.new_mode is GameMode.HIGH_SCHOOL

    def test_graduate_can_be_promoted_in_new_tier(self):
        player = make_player(GameMode.HIGH_SCHOOL, 'All-American Prospect', flat_stats(50),
                             season_in_mode=4, day=91, age=17)

        result = evaluate_player_progress(player)
        assert result.graduated and result.promoted
        assert result.new_mode is GameMode.COLLEGE
        assert result.new_role == 'Starter'
        assert len(result.log_messages) == 2


class TestPromotion:
    def test_promotion_skips_intermediate_roles(self):
        player = make_player(GameMode.HIGH_SCHOOL, 'Freshman Newcomer', flat_stats(70))

        result = evaluate_player_progress(player)

        assert result.promoted is True
        assert result.new_role == 'All-American Prospect'
        assert result.log_messages == ['Your performance has earned you a new role: All-American Prospect!']

    def test_no_change_when_already_at_target(self):
        player = make_player(GameMode.HIGH_SCHOOL, 'All-American Prospect', flat_stats(70))

        result = evaluate_player_progress(player)
        assert result.changed is False
        assert result.log_messages == []

    @pytest.mark.parametrize('score_stats, expected_role', [
        (flat_stats(56), 'Valuable Sixth Man'),
        (flat_stats(66), 'Established Star'),
        (flat_stats(99), 'MVP Candidate'),
    ])
    def test_professional_ladder(self, score_stats, expected_role):
        player = make_player(GameMode.PROFESSIONAL, 'Undrafted Free Agent', score_stats, age=25)
        assert evaluate_player_progress(player).new_role == expected_role


class TestDemotion:
    def test_demotion_at_season_end_drops_one_role(self):
        player = make_player(GameMode.HIGH_SCHOOL, 'Varsity Starter', flat_stats(20),
                             season_in_mode=2, day=91)

        result = evaluate_player_progress(player)

        assert result.demoted is True
        assert result.new_role == 'Varsity Rotation'
        assert result.log_messages == ['A tough season. Your role has been adjusted to: Varsity Rotation.']

    def test_no_demotion_mid_season(self):
        player = make_player(GameMode.HIGH_SCHOOL, 'Varsity Starter', flat_stats(20),
                             season_in_mode=2, day=30)

        result = evaluate_player_progress(player, check_graduation=False)
        assert result.demoted is False
        assert result.new_role == 'Varsity Starter'

    def test_entry_role_cannot_be_demoted(self):
        player = make_player(GameMode.HIGH_SCHOOL, 'Freshman Newcomer', flat_stats(10), day=91)
        assert evaluate_player_progress(player).demoted is False

    def test_evaluation_does_not_mutate_player(self):
        player = make_player(GameMode.HIGH_SCHOOL, 'Freshman Newcomer', flat_stats(70))
        before = player.to_dict()
        evaluate_player_progress(player)
        assert player.to_dict() == before
