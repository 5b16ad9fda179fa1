"""
Unit Tests for the Stat Model

Covers the clamping primitive and the diminishing-returns growth roll,
including behaviour at the stat ceiling.
"""

import pytest

from hoops_career.constants import MAX_STAT_VALUE
from hoops_career.player.player import PlayerStats
from hoops_career.player.stat_model import (
    GROWTH_BANDS, apply_stat_delta, clamp, clamp_stat, grow_stat, growth_band_for,
    roll_stat_gain, upgrade_chance
)
from hoops_career.shared.random_source import create_random_source

from tests.mocks import SequenceRandom


class TestClamping:
    """Bounded stats never leave their declared range"""

    def test_clamp_bounds_value(self):
        assert clamp(120, 0, 100) == 100
        assert clamp(-5, 0, 100) == 0
        assert clamp(42, 0, 100) == 42

    def test_clamp_stat_uses_declared_bounds(self):
        assert clamp_stat('shooting', 150) == MAX_STAT_VALUE
        assert clamp_stat('shooting', 1) == 10
        assert clamp_stat('energy', -20) == 0
        assert clamp_stat('morale', 130) == 100

    def test_skill_points_are_not_clamped(self):
        assert clamp_stat('skill_points', 5000) == 5000

    def test_apply_delta_returns_applied_change(self):
        stats = PlayerStats(shooting=98, energy=10)

        assert apply_stat_delta(stats, 'shooting', 5) == 1
        assert stats.shooting == MAX_STAT_VALUE

        assert apply_stat_delta(stats, 'energy', -30) == -10
        assert stats.energy == 0

    def test_apply_delta_rejects_non_integer(self):
        stats = PlayerStats()
        with pytest.raises(TypeError):
            apply_stat_delta(stats, 'shooting', 1.5)
        assert stats.shooting == 30, "Rejected delta must not change the stat"

    def test_unknown_stat_raises(self):
        with pytest.raises(KeyError):
            apply_stat_delta(PlayerStats(), 'durability', 1)


class TestGrowthRoll:
    """Diminishing-returns growth draws"""

    def test_gain_chance_shrinks_with_value(self):
        chances = [band.gain_chance for band in GROWTH_BANDS]
        assert chances == sorted(chances, reverse=True)
        assert growth_band_for(MAX_STAT_VALUE).gain_chance == pytest.approx(0.15)

    def test_upgrade_chance_scales_with_professionalism(self):
        assert upgrade_chance(10) == pytest.approx(0.05)
        assert upgrade_chance(99) == pytest.approx(0.25)
        assert upgrade_chance(50) > upgrade_chance(30)

    def test_zero_gain_stays_zero(self):
        rng = SequenceRandom([0.99])
        assert roll_stat_gain(30, 50, rng) == 0
        assert rng.draws_used == 1, "A miss must not draw for the upgrade"

    def test_gain_of_one_without_upgrade(self):
        rng = SequenceRandom([0.10, 0.99])
        assert roll_stat_gain(30, 50, rng) == 1
        assert rng.draws_used == 2

    def test_upgrade_to_two(self):
        rng = SequenceRandom([0.10, 0.0])
        assert roll_stat_gain(30, 99, rng) == 2

    def test_ceiling_band_never_upgrades(self):
        rng = SequenceRandom([0.01])
        assert roll_stat_gain(MAX_STAT_VALUE, 99, rng) == 1
        assert rng.draws_used == 1

    def test_grow_stat_at_ceiling_applies_nothing(self):
        stats = PlayerStats(shooting=MAX_STAT_VALUE)
        assert grow_stat(stats, 'shooting', SequenceRandom([0.01])) == 0
        assert stats.shooting == MAX_STAT_VALUE


class TestGrowthAtCeiling:
    """A maxed-out shooter practising for 1000 days"""

    def test_growth_rate_matches_lowest_band(self):
        rng = create_random_source(2024)
        gains = [roll_stat_gain(MAX_STAT_VALUE, 80, rng) for _ in range(1000)]

        ones = gains.count(1) / len(gains)
        assert 0.10 <= ones <= 0.20, f"Expected ~15% growth events, got {ones:.1%}"
        assert gains.count(2) == 0, "No +2 gains at the ceiling"

    def test_stat_never_exceeds_ceiling(self):
        rng = create_random_source(99)
        stats = PlayerStats(shooting=MAX_STAT_VALUE, professionalism=99)
        for _ in range(1000):
            grow_stat(stats, 'shooting', rng)
            assert stats.shooting <= MAX_STAT_VALUE
        assert stats.shooting == MAX_STAT_VALUE

    def test_growth_flattens_near_ceiling(self):
        rng = create_random_source(5)
        low = sum(roll_stat_gain(30, 50, rng) for _ in range(2000))
        high = sum(roll_stat_gain(95, 50, rng) for _ in range(2000))
        assert low > high * 3
