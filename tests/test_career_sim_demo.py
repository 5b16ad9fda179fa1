"""
Tests for the automated career demo policy.
"""

import pytest

from hoops_career.events import Choice, ChoiceOutcome, EventCategory, GameEvent, StatCost
from hoops_career.shared.random_source import create_random_source
from hoops_career.simulation.career_session import CareerSession, GamePhase

import career_sim_demo
from tests.conftest import TEST_WORLD_SEED


def keep_going(player, rng):
    return ChoiceOutcome(updated_player=player, outcome_message='Done.')


def workout_invite() -> GameEvent:
    return GameEvent(
        event_id='workout_invite',
        title='Workout Invite',
        description='Needs energy.',
        choices=(Choice('attend', 'Attend', action=keep_going, cost=StatCost('energy', 15)),),
        category=EventCategory.CONTEXTUAL,
    )


class TestPickChoice:
    def test_nothing_affordable(self, new_player):
        new_player.stats.energy = 10
        assert career_sim_demo.pick_choice(workout_invite(), new_player) is None

    def test_affordable_choice(self, new_player):
        new_player.stats.energy = 80
        assert career_sim_demo.pick_choice(workout_invite(), new_player) == 'attend'

    def test_rests_when_tired(self, engine, new_player):
        new_player.stats.energy = 20
        event = engine.catalog.daily_choice_event(new_player)
        assert career_sim_demo.pick_choice(event, new_player) == 'rest'


class TestPlayCareer:
    @pytest.mark.slow
    def test_career_runs_to_the_end(self, capsys):
        session = CareerSession(rng=create_random_source(3), world_seed=TEST_WORLD_SEED)

        career_sim_demo.play_career(session, quiet=True)

        assert session.phase is GamePhase.GAME_OVER
        assert session.meta_skill_points > 0
        assert 'Legacy points' in capsys.readouterr().out
