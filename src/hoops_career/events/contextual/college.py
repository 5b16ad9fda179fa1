"""
College contextual events: bench players fighting for minutes and starters
under the spotlight.
"""

from typing import TYPE_CHECKING

from ...constants import GameMode, get_role_index, COLLEGE_ROLES
from ...shared.random_source import RandomSource, random_int
from ..base_event import Choice, ChoiceOutcome, ContextualPool, EventCategory, GameEvent, StatCost
from ..effects import apply_changes

if TYPE_CHECKING:
    from ...player.player import Player


STARTER_ROLE_INDEX = COLLEGE_ROLES.index('Starter')
ROTATION_ROLE_INDEX = COLLEGE_ROLES.index('Rotation Player')


def _outcome(player: 'Player', message: str) -> ChoiceOutcome:
    return ChoiceOutcome(updated_player=player, outcome_message=message)


# ============================================================
# BENCH
# ============================================================

def _extra_reps(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    if rng.random() < 0.6:
        summary = apply_changes(player, [('shooting', 1), ('professionalism', 1), ('energy', -15)])
        return _outcome(player, f"The coaches noticed you staying late after practice. {summary}")
    summary = apply_changes(player, [('energy', -15)])
    return _outcome(player, f"Nobody was watching, but the work still counts. {summary}")


def _vent_to_teammate(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('morale', random_int(rng, 2, 5)), ('professionalism', -1)])
    return _outcome(player, f"Getting it off your chest helped, though word got around. {summary}")


def _film_with_assistant(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('basketball_iq', random_int(rng, 1, 2)), ('energy', -5)])
    return _outcome(player, f"The assistant coach walked you through the scouting report. {summary}")


def _skip_film(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('energy', 10), ('professionalism', -1)])
    return _outcome(player, f"You caught up on sleep instead. {summary}")


BENCH_EVENTS = (
    GameEvent(
        event_id='college_bench_dnp',
        title='Did Not Play',
        description="Another game, another DNP. You watched the whole thing from the end of the bench.",
        choices=(
            Choice('extra_reps', 'Stay after practice for extra reps.', action=_extra_reps,
                   cost=StatCost('energy', 15)),
            Choice('vent_to_teammate', 'Vent to a teammate about playing time.', action=_vent_to_teammate),
        ),
        category=EventCategory.CONTEXTUAL,
    ),
    GameEvent(
        event_id='college_bench_film_session',
        title='Optional Film Session',
        description='An assistant coach offers a late-night film session to anyone who wants it.',
        choices=(
            Choice('attend_film', 'Show up with a notebook.', action=_film_with_assistant),
            Choice('skip_film', "It's optional. Get some sleep.", action=_skip_film),
        ),
        category=EventCategory.CONTEXTUAL,
    ),
)


# ============================================================
# STARTER
# ============================================================

def _focus_on_game(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('professionalism', 1)])
    return _outcome(player, f"You decide to stick to your preparation. {summary}")


def _impress_scout(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    if player.stats.basketball_iq > 65 and rng.random() < 0.6:
        summary = apply_changes(player, [('morale', 5)])
        return _outcome(player, f"You tried to put on a show. You played well under pressure! {summary}")
    summary = apply_changes(player, [('morale', -7), ('shooting', -1)])
    return _outcome(player, f"You tried to put on a show. You forced things a bit too much. {summary}")


def _embrace_media(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    if player.stats.charisma > 55 or rng.random() < 0.4:
        summary = apply_changes(player, [('charisma', 2), ('morale', 4)])
        return _outcome(player, f"The campus paper loved you. {summary}")
    summary = apply_changes(player, [('morale', -4)])
    return _outcome(player, f"You fumbled a couple of answers and the clip went around campus. {summary}")


def _decline_media(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('professionalism', 1)])
    return _outcome(player, f"You let your game do the talking. {summary}")


STARTER_EVENTS = (
    GameEvent(
        event_id='college_starter_scout_visit',
        title='Scout in the Stands',
        description="You hear a pro scout might be attending tonight's game. The pressure is on!",
        choices=(
            Choice('focus_on_game', 'Focus on your game plan', action=_focus_on_game),
            Choice('try_to_impress', 'Try to impress the scout (Risky)', action=_impress_scout),
        ),
        category=EventCategory.CONTEXTUAL,
    ),
    GameEvent(
        event_id='college_starter_media_day',
        title='Media Day',
        description='The athletic department wants you front and center for media day.',
        choices=(
            Choice('embrace_media', 'Own the spotlight.', action=_embrace_media),
            Choice('decline_media', 'Keep it short and professional.', action=_decline_media),
        ),
        category=EventCategory.CONTEXTUAL,
    ),
)


COLLEGE_POOLS = (
    ContextualPool('college_bench', GameMode.COLLEGE, BENCH_EVENTS,
                   lambda p: get_role_index(GameMode.COLLEGE, p.current_role) < ROTATION_ROLE_INDEX),
    ContextualPool('college_starter', GameMode.COLLEGE, STARTER_EVENTS,
                   lambda p: get_role_index(GameMode.COLLEGE, p.current_role) >= STARTER_ROLE_INDEX),
)
