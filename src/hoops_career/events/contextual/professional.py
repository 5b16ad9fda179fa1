"""
Professional contextual events: fringe and rotation players grinding for a
spot, and established stars managing fame.
"""

from typing import TYPE_CHECKING

from ...constants import GameMode, get_role_index, PROFESSIONAL_ROLES
from ...shared.random_source import RandomSource, random_int
from ..base_event import Choice, ChoiceOutcome, ContextualPool, EventCategory, GameEvent, StatCost
from ..effects import apply_changes

if TYPE_CHECKING:
    from ...player.player import Player


STAR_ROLE_INDEX = PROFESSIONAL_ROLES.index('Established Star')


def _outcome(player: 'Player', message: str) -> ChoiceOutcome:
    return ChoiceOutcome(updated_player=player, outcome_message=message)


def _accept_assignment(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('professionalism', 2), ('morale', -random_int(rng, 2, 5))])
    return _outcome(player, f"You packed a bag without complaint. The front office noticed. {summary}")


def _ask_for_trade(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('professionalism', -2), ('morale', random_int(rng, 1, 4))])
    return _outcome(player, f"Your agent made some calls. Nothing came of it yet. {summary}")


def _veteran_advice(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('basketball_iq', random_int(rng, 1, 2)), ('professionalism', 1)])
    return _outcome(player, f"The veteran showed you how to survive a long season. {summary}")


def _do_your_own_thing(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('energy', 10)])
    return _outcome(player, f"You kept to your own routine. {summary}")


ROTATION_EVENTS = (
    GameEvent(
        event_id='pro_rotation_assignment',
        title='Sent Down',
        description='The team wants you to spend a week with the affiliate to get more reps.',
        choices=(
            Choice('accept_assignment', 'Accept the assignment.', action=_accept_assignment),
            Choice('ask_for_trade', 'Tell your agent you want out.', action=_ask_for_trade),
        ),
        category=EventCategory.CONTEXTUAL,
    ),
    GameEvent(
        event_id='pro_rotation_veteran',
        title='Veteran Mentor',
        description='A fifteen-year veteran offers to show you his pre-game routine.',
        choices=(
            Choice('veteran_advice', 'Follow him around for a week.', action=_veteran_advice),
            Choice('own_routine', 'Thanks, but you have your own thing.', action=_do_your_own_thing),
        ),
        category=EventCategory.CONTEXTUAL,
    ),
)


def _sign_shoe_deal(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('charisma', 3), ('morale', 10), ('energy', -10)])
    return _outcome(player, f"Your signature shoe is on its way. The commercial shoot was exhausting. {summary}")


def _focus_on_basketball(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('professionalism', 2)])
    return _outcome(player, f"You turned it down for now. Winning comes first. {summary}")


def _call_out_teammates(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    if player.stats.charisma > 65 and rng.random() < 0.7:
        summary = apply_changes(player, [('morale', 6), ('charisma', 1)])
        return _outcome(player, f"The locker room responded. Practice was sharp the next day. {summary}")
    summary = apply_changes(player, [('morale', -6), ('charisma', -2)])
    return _outcome(player, f"It came off wrong and leaked to the press. {summary}")


def _lead_by_example(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('professionalism', 1), ('energy', -10)])
    return _outcome(player, f"First one in, last one out. {summary}")


STAR_EVENTS = (
    GameEvent(
        event_id='pro_star_shoe_deal',
        title='Signature Shoe Offer',
        description='A major brand wants to build a signature shoe around you.',
        choices=(
            Choice('sign_shoe_deal', 'Sign the deal.', action=_sign_shoe_deal,
                   cost=StatCost('energy', 10)),
            Choice('focus_on_basketball', 'Not now. Focus on the season.', action=_focus_on_basketball),
        ),
        category=EventCategory.CONTEXTUAL,
    ),
    GameEvent(
        event_id='pro_star_losing_streak',
        title='Losing Streak',
        description='The team has dropped five straight and the media wants to hear from its star.',
        choices=(
            Choice('call_out_teammates', 'Call out the effort publicly.', action=_call_out_teammates),
            Choice('lead_by_example', 'Say nothing. Lead by example.', action=_lead_by_example),
        ),
        category=EventCategory.CONTEXTUAL,
    ),
)


PROFESSIONAL_POOLS = (
    ContextualPool('pro_rotation', GameMode.PROFESSIONAL, ROTATION_EVENTS,
                   lambda p: get_role_index(GameMode.PROFESSIONAL, p.current_role) < STAR_ROLE_INDEX),
    ContextualPool('pro_star', GameMode.PROFESSIONAL, STAR_EVENTS,
                   lambda p: get_role_index(GameMode.PROFESSIONAL, p.current_role) >= STAR_ROLE_INDEX),
)
