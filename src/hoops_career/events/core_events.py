"""
Core Events

Events every career can see regardless of tier: the interactive daily
choice, the minor injury, game day and the agent meeting.
"""

from typing import Optional, TYPE_CHECKING

from ..config import SimulationSettings
from ..game_engine.performance_generator import generate_game_performance
from ..scheduling.schedule_models import ScheduleSlot
from ..shared.random_source import RandomSource, choose, random_int
from ..player.stat_model import apply_stat_delta
from .base_event import Choice, ChoiceOutcome, EventCategory, GameEvent, StatCost
from .effects import apply_changes, format_change, join_message, train_stat

if TYPE_CHECKING:
    from ..player.player import Player


# ============================================================
# DAILY CHOICE
# ============================================================

def _training_action(stat: str, energy_cost: int, intro: str, good: str, great: str):
    def action(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
        gain = train_stat(player, stat, rng)
        if stat == 'basketball_iq' and player.has_trait('Student of the Game'):
            gain += train_stat(player, stat, rng)
        apply_stat_delta(player.stats, 'energy', -energy_cost)

        if gain >= 2:
            verdict = great
        elif gain == 1:
            verdict = good
        else:
            verdict = "No visible progress today."
        changes = [format_change(stat, gain)] if gain else []
        changes.append(format_change('energy', -energy_cost))
        return ChoiceOutcome(
            updated_player=player,
            outcome_message=join_message(intro, verdict, f"{', '.join(changes)}."),
        )
    return action


def _rest(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    energy = random_int(rng, 30, 40)
    morale = random_int(rng, 5, 10)
    summary = apply_changes(player, [('energy', energy), ('morale', morale)])
    return ChoiceOutcome(
        updated_player=player,
        outcome_message=f"Took a much-needed rest day. Feeling refreshed. {summary}",
    )


def _social_event(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    apply_stat_delta(player.stats, 'energy', -15)
    roll = rng.random()
    if roll < 0.3:
        result = "It was a bit awkward. " + apply_changes(player, [('charisma', -2), ('morale', -5)])
    elif roll < 0.7:
        result = "Made a few connections. " + apply_changes(player, [('charisma', 1)])
    else:
        result = "It was a great time! " + apply_changes(player, [('charisma', 3), ('morale', 10)])
    return ChoiceOutcome(
        updated_player=player,
        outcome_message=f"Attended a social event. {result} Energy -15.",
    )


def create_daily_choice_event(player: 'Player') -> GameEvent:
    """Interactive day: pick one thing to focus on."""
    choices = (
        Choice(
            choice_id='train_shooting',
            text='Train Shooting',
            description='Hit the gym to work on your jumper.',
            cost=StatCost('energy', 20),
            action=_training_action(
                'shooting', 20, 'Focused on shooting.', 'Good session.', 'Felt a real improvement!'
            ),
        ),
        Choice(
            choice_id='train_athleticism',
            text='Train Athleticism',
            description='Conditioning and strength training.',
            cost=StatCost('energy', 25),
            action=_training_action(
                'athleticism', 25, 'Pushed hard on athleticism.', 'Solid workout.', 'Feeling stronger!'
            ),
        ),
        Choice(
            choice_id='study_film',
            text='Study Film',
            description='Analyze game footage to improve your basketball IQ.',
            cost=StatCost('energy', 10),
            action=_training_action(
                'basketball_iq', 10, 'Spent time studying film.', 'Learned a few things.', 'Key insights gained!'
            ),
        ),
        Choice(
            choice_id='rest',
            text='Rest & Recover',
            description='Take a day off to recover energy and morale.',
            action=_rest,
        ),
        Choice(
            choice_id='social_event',
            text='Attend Social Event',
            description='Hang out with teammates or attend a public function.',
            cost=StatCost('energy', 15),
            action=_social_event,
        ),
    )
    return GameEvent(
        event_id='daily_choices',
        title=f"Season {player.current_season_in_mode}, Day {player.current_day_in_season} ({player.age} y.o.)",
        description='What will you focus on today?',
        choices=choices,
        category=EventCategory.DAILY,
    )


# ============================================================
# INJURY
# ============================================================

def _acknowledge_injury(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    stat = choose(rng, ('athleticism', 'shooting'))
    reduction = random_int(rng, 1, 3)
    summary = apply_changes(player, [(stat, -reduction), ('energy', -10), ('morale', -5)])
    return ChoiceOutcome(
        updated_player=player,
        outcome_message=f"The injury set you back a bit. {summary}",
    )


MINOR_INJURY_EVENT = GameEvent(
    event_id='minor_injury',
    title='Minor Injury!',
    description='You tweaked something during a light workout. Aches and pains are part of the game.',
    choices=(
        Choice(
            choice_id='acknowledge_injury',
            text='Okay, I need to be careful.',
            action=_acknowledge_injury,
        ),
    ),
    category=EventCategory.INJURY,
    is_mandatory=True,
)


# ============================================================
# GAME DAY
# ============================================================

def _play_your_game(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    played_hard = player.stats.energy > SimulationSettings.PLAYED_HARD_ENERGY_THRESHOLD
    result = generate_game_performance(player, played_hard, rng)

    if played_hard:
        energy_cost = random_int(rng, 30, 39)
        intro = 'You played hard!'
    else:
        energy_cost = 20
        intro = 'You were running on fumes but gave what you had.'

    changes = [('energy', -energy_cost)]
    changes.append(('morale', 5 if result.team_won else -3))
    if result.player_stats.points >= 20:
        intro = join_message(intro, 'Stellar performance, you led the team.')
        changes.append(('morale', 5))
    apply_changes(player, changes)
    return ChoiceOutcome(updated_player=player, outcome_message=intro, game_performance=result)


def _conserve_energy(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    result = generate_game_performance(player, False, rng)
    apply_changes(player, [('energy', -10), ('morale', 2 if result.team_won else -5)])
    return ChoiceOutcome(
        updated_player=player,
        outcome_message='You played within yourself to save your legs.',
        game_performance=result,
    )


def create_game_day_event(player: 'Player', slot: Optional[ScheduleSlot] = None) -> GameEvent:
    opponent = f" vs {slot.opponent}" if slot is not None and slot.opponent else ''
    label = slot.slot_type.value if slot is not None else 'Game'
    return GameEvent(
        event_id='game_day',
        title=(
            f"{label} Day!{opponent} "
            f"(Season {player.current_season_in_mode}, Day {player.current_day_in_season})"
        ),
        description="It's time to hit the court. How will you approach this game?",
        choices=(
            Choice(
                choice_id='play_your_game',
                text='Play your game',
                description='Go all out if you have the legs for it.',
                action=_play_your_game,
            ),
            Choice(
                choice_id='conserve_energy',
                text='Conserve energy',
                description='Fewer minutes at full speed, less wear and tear.',
                action=_conserve_energy,
            ),
        ),
        category=EventCategory.GAME_DAY,
        is_mandatory=True,
    )


# ============================================================
# AGENT MEETING
# ============================================================

def _agent_name(player: 'Player') -> str:
    if player.has_trait('Media Darling'):
        return 'the reliable Sarah Chen,'
    return 'the somewhat shady Vinny "The Shark" Gambino,'


def _discuss_contract(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    message = 'You discussed your contract.'
    if player.stats.charisma > 60 or player.has_trait('Media Darling'):
        summary = apply_changes(player, [('morale', 5)])
        message = join_message(message, 'Your agent seems confident they can get you a good deal soon.', summary)
    else:
        summary = apply_changes(player, [('morale', -3)])
        message = join_message(message, 'The conversation was a bit tense. No clear path forward yet.', summary)
    return ChoiceOutcome(updated_player=player, outcome_message=message)


def _seek_endorsement(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    message = 'Your agent will look into endorsement deals.'
    stats = player.stats
    if stats.charisma > 70 and stats.shooting + stats.athleticism > 120:
        summary = apply_changes(player, [('morale', 10)])
        message = join_message(message, 'A local shoe store offers you a small deal!', summary)
    elif player.has_trait('Media Darling'):
        message = join_message(message, 'Sarah thinks she can find something if you keep performing well.')
    else:
        message = join_message(message, "Vinny says 'Leave it to me, kid!' but you're not so sure.")
    return ChoiceOutcome(updated_player=player, outcome_message=message)


def _decline_agent(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    return ChoiceOutcome(
        updated_player=player,
        outcome_message="You told your agent you're focused on the game right now.",
    )


def create_agent_meeting_event(player: 'Player') -> GameEvent:
    return GameEvent(
        event_id='agent_meeting',
        title='Agent Meeting',
        description=f"Your agent, {_agent_name(player)} wants to discuss your future.",
        choices=(
            Choice(choice_id='discuss_contract', text='Discuss Contract Situation', action=_discuss_contract),
            Choice(choice_id='seek_endorsement', text='Seek Endorsement Opportunities', action=_seek_endorsement),
            Choice(choice_id='ignore_agent', text='Politely Decline for Now', action=_decline_agent),
        ),
        category=EventCategory.AGENT,
        is_mandatory=True,
    )
