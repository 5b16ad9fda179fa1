"""
Tests for the trait catalog and trait effects.
"""

import pytest

from hoops_career.player import Player, PlayerStats
from hoops_career.player.traits import (
    TRAIT_DEFINITIONS, get_performance_multipliers, get_trait_definition, get_win_chance_bonus,
    grant_trait
)


def make_player(**stats) -> Player:
    return Player(name='Trait Holder', position='Power Forward', stats=PlayerStats(**stats))


class TestCatalog:
    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            TRAIT_DEFINITIONS['New Trait'] = None

    def test_unknown_trait(self):
        with pytest.raises(KeyError):
            get_trait_definition('Telekinesis')

    def test_levels_are_capped(self):
        sniper = get_trait_definition('Sniper')
        assert sniper.max_level == 3
        assert sniper.level_definition(10).level == 3
        with pytest.raises(ValueError):
            sniper.level_definition(0)


class TestGrantTrait:
    def test_stat_boost_applied_once(self):
        player = make_player(basketball_iq=40)

        assert grant_trait(player, "Coach's Son") is True
        assert player.stats.basketball_iq == 50

        assert grant_trait(player, "Coach's Son") is False
        assert player.stats.basketball_iq == 50

    def test_stat_boost_is_clamped(self):
        player = make_player(shooting=95)
        grant_trait(player, 'Glass Cannon')
        assert player.stats.shooting == 99

    def test_level_up_does_not_reapply_boost(self):
        player = make_player()
        grant_trait(player, 'Sniper', level=1)
        assert grant_trait(player, 'Sniper', level=2) is True
        assert player.traits['Sniper'] == 2

    def test_granted_level_is_capped(self):
        player = make_player()
        grant_trait(player, 'Rim Runner', level=9)
        assert player.traits['Rim Runner'] == 2

    def test_energy_traits(self):
        player = make_player(energy=80)
        grant_trait(player, 'Iron Man')
        assert player.stats.energy == 95


class TestTraitEffects:
    def test_no_traits_is_neutral(self):
        assert get_performance_multipliers({}) == {'points': 1.0, 'rebounds': 1.0, 'assists': 1.0}
        assert get_win_chance_bonus({}) == 0.0

    def test_multipliers_combine(self):
        multipliers = get_performance_multipliers({'Sniper': 1, 'Microwave': 1})
        assert multipliers['points'] == pytest.approx(1.08 * 1.05)
        assert multipliers['rebounds'] == pytest.approx(1.0)

    def test_win_bonus_sums(self):
        assert get_win_chance_bonus({'Clutch Gene': 1, 'Gym Rat': 3}) == pytest.approx(0.11)

    def test_unknown_traits_are_ignored(self):
        assert get_performance_multipliers({'Telekinesis': 1})['points'] == 1.0
