"""
Tests for the Event Catalog

Contextual anti-repeat, scheduled one-shot events, core event choices and
content integrity of the default catalog.
"""

import pytest

from hoops_career.constants import GameMode
from hoops_career.events import (
    SCHEDULED_EVENTS, Choice, ChoiceOutcome, ContextualPool, EventCatalog, EventCategory,
    GameEvent, ScheduledEventDefinition, contextual_marker, default_catalog,
    last_contextual_title
)
from hoops_career.player.player import Player, PlayerStats
from hoops_career.shared.random_source import create_random_source

from tests.mocks import SequenceRandom


def _noop(player, rng):
    return ChoiceOutcome(updated_player=player, outcome_message='Nothing happened.')


def make_event(event_id: str, title: str) -> GameEvent:
    return GameEvent(
        event_id=event_id,
        title=title,
        description='Test event.',
        choices=(Choice('ok', 'Okay', action=_noop),),
        category=EventCategory.CONTEXTUAL,
    )


def make_pool(*events: GameEvent) -> ContextualPool:
    return ContextualPool('test_pool', GameMode.HIGH_SCHOOL, tuple(events), lambda p: True)


def make_player(**kwargs) -> Player:
    return Player(name='Catalog Reader', position='Shooting Guard', **kwargs)


class TestContextualMarkers:
    def test_marker_round_trip(self):
        log = ['Your career begins!', contextual_marker('Locker Room Prank'), 'You laughed it off.']
        assert last_contextual_title(log) == 'Locker Room Prank'

    def test_latest_marker_wins(self):
        log = [contextual_marker('First'), 'x', contextual_marker('Second')]
        assert last_contextual_title(log) == 'Second'

    def test_no_marker(self):
        assert last_contextual_title(['Your career begins!']) is None


class TestAntiRepeat:
    """The same contextual event never surfaces twice in a row when avoidable"""

    def test_excludes_last_title(self):
        catalog = EventCatalog(contextual_pools=[make_pool(make_event('a', 'Alpha'), make_event('b', 'Beta'))])
        player = make_player(career_log=[contextual_marker('Alpha')])

        for draw in (0.0, 0.49, 0.51, 0.99):
            event = catalog.pick_contextual_event(player, SequenceRandom([draw]))
            assert event.title == 'Beta'

    def test_single_event_pool_falls_back(self):
        catalog = EventCatalog(contextual_pools=[make_pool(make_event('a', 'Alpha'))])
        player = make_player(career_log=[contextual_marker('Alpha')])

        event = catalog.pick_contextual_event(player, SequenceRandom([0.5]))
        assert event.title == 'Alpha'

    def test_no_eligible_pool_returns_none_without_drawing(self):
        pool = ContextualPool('college_only', GameMode.COLLEGE, (make_event('a', 'Alpha'),), lambda p: True)
        catalog = EventCatalog(contextual_pools=[pool])
        rng = SequenceRandom([])

        assert catalog.pick_contextual_event(make_player(), rng) is None
        assert rng.draws_used == 0

    def test_default_catalog_never_repeats(self):
        catalog = default_catalog()
        player = make_player(current_season_in_mode=1)
        rng = create_random_source(8)

        previous = None
        for _ in range(200):
            event = catalog.pick_contextual_event(player, rng)
            assert event.title != previous
            player.log(contextual_marker(event.title))
            previous = event.title


class TestScheduledEvents:
    def test_keys_are_unique(self):
        keys = [definition.key for definition in SCHEDULED_EVENTS]
        assert len(keys) == len(set(keys))

    def test_duplicate_keys_rejected(self):
        definition = ScheduledEventDefinition('dup', make_event('a', 'Alpha'), lambda p: True)
        with pytest.raises(ValueError):
            EventCatalog(scheduled_events=[definition, definition])

    def test_fires_once_per_career(self):
        player = make_player(game_mode=GameMode.COLLEGE, current_role='Walk-On Hopeful')
        catalog = default_catalog()

        definition = catalog.find_scheduled_event(player)
        assert definition is not None
        assert definition.key == 'college_freshman_orientation'

        player.fired_scheduled_events.append(definition.key)
        assert catalog.find_scheduled_event(player) is None

    def test_scheduled_events_are_tagged(self):
        for definition in SCHEDULED_EVENTS:
            assert definition.event.category is EventCategory.SCHEDULED


class TestCoreEvents:
    def test_daily_choice_costs_gate_choices(self):
        player = make_player(stats=PlayerStats(energy=12))
        event = default_catalog().daily_choice_event(player)

        available = {choice.choice_id for choice in event.available_choices(player)}
        assert available == {'study_film', 'rest'}
        assert event.is_mandatory is False

    def test_game_day_is_mandatory(self):
        event = default_catalog().game_day_event(make_player())
        assert event.is_mandatory is True
        assert {choice.choice_id for choice in event.choices} == {'play_your_game', 'conserve_energy'}

    def test_agent_meeting_mentions_agent(self):
        player = make_player(traits={'Media Darling': 1})
        event = default_catalog().agent_meeting_event(player)
        assert 'Sarah Chen' in event.description

    def test_every_catalog_choice_has_an_action(self):
        catalog = default_catalog()
        events = [definition.event for definition in catalog.scheduled_events.values()]
        for pool in catalog.contextual_pools:
            events.extend(pool.events)

        for event in events:
            assert event.choices, f"{event.event_id} has no choices"
            for choice in event.choices:
                assert callable(choice.action), f"{event.event_id}.{choice.choice_id} has no action"

    def test_contextual_event_ids_are_unique(self):
        ids = [event.event_id for pool in default_catalog().contextual_pools for event in pool.events]
        assert len(ids) == len(set(ids))
