"""
Scheduled Events

Narrative events tied to a specific moment of a career rather than a random
roll. Each definition fires at most once per career: the turn engine records
its key on the player when it is surfaced.
"""

from dataclasses import dataclass
from typing import Callable, Tuple, TYPE_CHECKING

from ..constants import GameMode, HIGH_SCHOOL_MAX_SEASONS
from ..shared.random_source import RandomSource
from .base_event import Choice, ChoiceOutcome, EventCategory, GameEvent
from .effects import apply_changes

if TYPE_CHECKING:
    from ..player.player import Player


@dataclass(frozen=True)
class ScheduledEventDefinition:
    key: str
    event: GameEvent
    condition: Callable[['Player'], bool]

    def matches(self, player: 'Player') -> bool:
        return self.key not in player.fired_scheduled_events and self.condition(player)


def _thank_coach(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('morale', 10)])
    return ChoiceOutcome(
        updated_player=player,
        outcome_message=(
            "It's an emotional moment. You feel immense gratitude for your team and coaches. "
            f"{summary}"
        ),
    )


def _is_last_senior_practice(player: 'Player') -> bool:
    if player.game_mode is not GameMode.HIGH_SCHOOL:
        return False
    if player.current_season_in_mode != HIGH_SCHOOL_MAX_SEASONS or player.schedule is None:
        return False
    last_practice_day = player.schedule.last_practice_day()
    return last_practice_day is not None and player.current_day_in_season == last_practice_day


LAST_PRACTICE_EVENT = GameEvent(
    event_id='hs_senior_last_practice',
    title='The Last Practice',
    description=(
        "The coach calls the team together after your final practice ever. He gives a speech "
        "about the journey and the bonds you've all formed."
    ),
    choices=(
        Choice('thank_coach', 'Thank the coach for everything.', action=_thank_coach),
    ),
    category=EventCategory.SCHEDULED,
)


def _introduce_yourself(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('charisma', 2), ('morale', 5)])
    return ChoiceOutcome(
        updated_player=player,
        outcome_message=f"You made a point of meeting everyone on the roster. {summary}",
    )


def _head_to_the_gym(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('professionalism', 2), ('energy', -10)])
    return ChoiceOutcome(
        updated_player=player,
        outcome_message=f"You skipped the mixer and found the practice gym. {summary}",
    )


FRESHMAN_ORIENTATION_EVENT = GameEvent(
    event_id='college_freshman_orientation',
    title='Freshman Orientation',
    description='Your first day on campus. The team is hosting a welcome mixer for the new recruits.',
    choices=(
        Choice('introduce_yourself', 'Introduce yourself around.', action=_introduce_yourself),
        Choice('head_to_gym', 'Head straight to the gym.', action=_head_to_the_gym),
    ),
    category=EventCategory.SCHEDULED,
)


def _celebrate_draft(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('morale', 15), ('charisma', 1)])
    return ChoiceOutcome(
        updated_player=player,
        outcome_message=f"You hugged your family and soaked in the moment. {summary}",
    )


def _chip_on_shoulder(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('professionalism', 3), ('morale', -3)])
    return ChoiceOutcome(
        updated_player=player,
        outcome_message=f"You wrote down the name of every team that passed on you. {summary}",
    )


DRAFT_NIGHT_EVENT = GameEvent(
    event_id='pro_draft_night',
    title='Draft Night',
    description='The commissioner steps to the podium. Your professional career starts tonight.',
    choices=(
        Choice('celebrate_draft', 'Celebrate with your family.', action=_celebrate_draft),
        Choice('chip_on_shoulder', 'Remember who passed on you.', action=_chip_on_shoulder),
    ),
    category=EventCategory.SCHEDULED,
)


def _first_day_of(game_mode: GameMode) -> Callable[['Player'], bool]:
    def condition(player: 'Player') -> bool:
        return (
            player.game_mode is game_mode
            and player.current_season_in_mode == 1
            and player.current_day_in_season == 1
        )
    return condition


SCHEDULED_EVENTS: Tuple[ScheduledEventDefinition, ...] = (
    ScheduledEventDefinition('hs_senior_last_practice', LAST_PRACTICE_EVENT, _is_last_senior_practice),
    ScheduledEventDefinition('college_freshman_orientation', FRESHMAN_ORIENTATION_EVENT,
                             _first_day_of(GameMode.COLLEGE)),
    ScheduledEventDefinition('pro_draft_night', DRAFT_NIGHT_EVENT, _first_day_of(GameMode.PROFESSIONAL)),
)
