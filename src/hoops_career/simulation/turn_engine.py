"""
Career Turn Engine

Advances a career one turn at a time: resolves the chosen action, moves the
calendar, rolls seasons over, picks the next event and checks whether the
career is over.

Turn model:
    Every turn works on a private deep copy of the player. The copy replaces
    the caller's player only when the whole turn (action, calendar, event
    selection, terminal check) succeeded. A failure anywhere discards the
    copy and raises TurnExecutionException, so a half-applied turn is never
    visible.

Event selection priority (first match wins):
    1. Scheduled one-off event whose condition matches
    2. Minor injury (10%, only while energy < 30)
    3. Game day from the season schedule (7-day cadence when the day has no slot)
    4. Agent meeting every 30th day (never in High School, College from season 3)
    5. Contextual event for the player's tier and role
    6. Automated practice, or the interactive daily choice when practice
       automation is off
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..config import SimulationSettings
from ..constants import GameMode, MAX_ENERGY, SKILL_STATS
from ..events.base_event import Choice, ChoiceOutcome, EventCategory, GameEvent
from ..events.effects import format_change, join_message
from ..events.event_catalog import EventCatalog, contextual_marker, default_catalog
from ..player.player import Player
from ..player.player_factory import assign_random_team
from ..player.stat_model import apply_stat_delta, grow_stat
from ..progression.retirement import check_career_end, end_career
from ..progression.role_progression import evaluate_player_progress
from ..scheduling.schedule_generator import SeasonScheduleGenerator
from ..scheduling.schedule_models import SeasonSchedule
from ..shared.random_source import RandomSource, chance, choose, random_int
from ..team_management.standings import TeamRecord, build_standings, format_standings
from ..team_management.teams import LeagueWorld
from .simulation_exceptions import (
    CareerOverException, InvalidChoiceException, TurnExecutionException
)


@dataclass
class TurnOutcome:
    """
    Result of one engine operation.

    Attributes:
        player: Committed player snapshot after the turn
        next_event: Event awaiting a choice, or None (quiet day or career over)
        messages: Career log lines written this turn, in order
        game_over: True once the career has ended
        retirement_reason: Why the career ended, when it ended this turn
        days_advanced: Calendar days consumed
    """
    player: Player
    next_event: Optional[GameEvent] = None
    messages: List[str] = field(default_factory=list)
    game_over: bool = False
    retirement_reason: Optional[str] = None
    days_advanced: int = 0


def _continue_new_season(player: Player, rng: RandomSource) -> ChoiceOutcome:
    return ChoiceOutcome(
        updated_player=player,
        outcome_message='A new season of challenges and opportunities awaits.',
    )


NEW_SEASON_EVENT = GameEvent(
    event_id='new_season_started',
    title='Welcome to a New Season!',
    description='A new year begins. Records are reset, and hope springs eternal.',
    choices=(
        Choice('continue', "Let's get to it.", action=_continue_new_season),
    ),
    category=EventCategory.SCHEDULED,
    is_mandatory=True,
)


class CareerTurnEngine:
    """
    Stateless turn processor for any number of careers.

    The engine holds only read-only collaborators (league, catalog); all
    career state lives on the Player passed in and returned out.

    Args:
        world: League the careers play in
        catalog: Event content (default catalog if omitted)
        logger: Optional logger override
    """

    def __init__(
        self,
        world: LeagueWorld,
        catalog: Optional[EventCatalog] = None,
        logger: Optional[logging.Logger] = None
    ):
        self.world = world
        self.catalog = catalog or default_catalog()
        self.logger = logger or logging.getLogger(self.__class__.__name__)
        self.schedule_generator = SeasonScheduleGenerator(world, logger=self.logger)

    # ==================== Public API ====================

    def process_choice(
        self,
        player: Player,
        event: GameEvent,
        choice_id: str,
        rng: RandomSource
    ) -> TurnOutcome:
        """
        Resolve ``choice_id`` on ``event`` and finish the turn.

        The choice is validated before anything runs. After the action, the
        calendar advances unless the action returned an immediate follow-up
        event, in which case that event is shown first.

        Raises:
            CareerOverException: The career has already ended
            InvalidChoiceException: Unknown, unaffordable or disabled choice
            TurnExecutionException: The turn failed and was discarded
        """
        if player.career_over:
            raise CareerOverException(player.name, operation='process_choice')

        choice = self._validate_choice(player, event, choice_id)
        self.logger.debug(f"{player.name}: resolving '{choice_id}' on '{event.event_id}'")

        stage = 'choice_action'
        try:
            working = player.copy()
            working.pending_event_key = None
            outcome = choice.action(working, rng)
            updated = outcome.updated_player
            messages: List[str] = []
            self._record(updated, self._outcome_message(updated, outcome), messages)

            if outcome.immediate_event is not None:
                next_event = outcome.immediate_event
                days_advanced = 0
            else:
                stage = 'advance_day'
                next_event = self._advance_one_day(updated, rng, messages)
                days_advanced = 1

            stage = 'terminal_check'
            return self._finish_turn(updated, next_event, messages, rng, days_advanced)
        except Exception as e:
            raise self._turn_failure(player, stage, e) from e

    def advance_day(self, player: Player, rng: RandomSource) -> TurnOutcome:
        """
        Advance one calendar day without a choice.

        A finished career is returned untouched.

        Raises:
            TurnExecutionException: The turn failed and was discarded
        """
        if player.career_over:
            return TurnOutcome(player=player, game_over=True)

        try:
            working = player.copy()
            messages: List[str] = []
            next_event = self._advance_one_day(working, rng, messages)
            return self._finish_turn(working, next_event, messages, rng, days_advanced=1)
        except Exception as e:
            raise self._turn_failure(player, 'advance_day', e) from e

    def simulate_days(self, player: Player, rng: RandomSource, max_days: int = 1) -> TurnOutcome:
        """
        Advance day by day until an event needs a choice, the career ends or
        ``max_days`` have passed.
        """
        outcome = TurnOutcome(player=player, game_over=player.career_over)
        messages: List[str] = []
        days = 0
        while days < max_days and not outcome.game_over:
            outcome = self.advance_day(outcome.player, rng)
            messages.extend(outcome.messages)
            days += outcome.days_advanced
            if outcome.next_event is not None:
                break

        outcome.messages = messages
        outcome.days_advanced = days
        return outcome

    def regenerate_current_event(self, player: Player, rng: RandomSource) -> Optional[GameEvent]:
        """
        Rebuild the event for the player's current day, e.g. after loading a
        save. An unanswered scheduled or new-season event is shown again;
        otherwise selection runs on a throwaway copy and never resolves a
        quiet day, so the player is not changed.
        """
        if player.career_over:
            return None
        if player.pending_event_key == NEW_SEASON_EVENT.event_id:
            return NEW_SEASON_EVENT
        if player.pending_event_key is not None:
            definition = self.catalog.scheduled_events.get(player.pending_event_key)
            if definition is not None:
                return definition.event
            self.logger.warning(f"Unknown pending event '{player.pending_event_key}' for {player.name}")
        scratch = player.copy()
        return self.select_next_event(scratch, rng, [], resolve_quiet_day=False)

    # ==================== Event Selection ====================

    def select_next_event(
        self,
        player: Player,
        rng: RandomSource,
        messages: List[str],
        season_started: bool = False,
        resolve_quiet_day: bool = True
    ) -> Optional[GameEvent]:
        """
        Pick today's event for ``player`` (mutated in place).

        Returns:
            The event to present, or None when the day resolved on its own
            as automated practice
        """
        scheduled = self.catalog.find_scheduled_event(player)
        if scheduled is not None:
            player.fired_scheduled_events.append(scheduled.key)
            player.pending_event_key = scheduled.key
            self.logger.debug(f"Scheduled event '{scheduled.key}' fired for {player.name}")
            return scheduled.event

        if season_started:
            player.pending_event_key = NEW_SEASON_EVENT.event_id
            return NEW_SEASON_EVENT

        if player.stats.energy < SimulationSettings.INJURY_ENERGY_THRESHOLD:
            if chance(rng, SimulationSettings.INJURY_CHANCE):
                return self.catalog.injury_event(player)

        game_event = self._game_day_event(player, messages)
        if game_event is not None:
            return game_event

        if self._agent_meeting_due(player):
            return self.catalog.agent_meeting_event(player)

        if chance(rng, SimulationSettings.CONTEXTUAL_EVENT_CHANCE):
            contextual = self.catalog.pick_contextual_event(player, rng)
            if contextual is not None:
                self._record(player, contextual_marker(contextual.title), messages)
                return contextual

        if not SimulationSettings.AUTOMATE_PRACTICE_DAYS:
            return self.catalog.daily_choice_event(player)
        if resolve_quiet_day:
            self._record(player, run_automated_practice(player, rng), messages)
        return None

    def _game_day_event(self, player: Player, messages: List[str]) -> Optional[GameEvent]:
        schedule = player.schedule
        slot = schedule.slot_for_day(player.current_day_in_season) if schedule else None
        if slot is None:
            if player.total_days_played % SimulationSettings.GAME_DAY_INTERVAL == 0:
                return self.catalog.game_day_event(player)
            return None

        if slot.slot_type.is_postseason and player.current_day_in_season == schedule.first_postseason_day():
            if not schedule.playoff_eliminated and schedule.wins < schedule.losses:
                schedule.playoff_eliminated = True
                self._record(
                    player,
                    f"With a {schedule.record} record, your team missed the playoffs. The season is over.",
                    messages,
                )

        if slot.is_game_day and not slot.is_completed and not schedule.playoff_eliminated:
            return self.catalog.game_day_event(player, slot)
        return None

    def _agent_meeting_due(self, player: Player) -> bool:
        if player.total_days_played % SimulationSettings.AGENT_MEETING_INTERVAL != 0:
            return False
        if player.game_mode is GameMode.HIGH_SCHOOL:
            return False
        if player.game_mode is GameMode.COLLEGE:
            return player.current_season_in_mode >= SimulationSettings.AGENT_MIN_COLLEGE_SEASON
        return True

    # ==================== Calendar ====================

    def _advance_one_day(self, player: Player, rng: RandomSource, messages: List[str]) -> Optional[GameEvent]:
        if player.schedule is None:
            player.schedule = self.schedule_generator.generate(player.current_season, player.team_id, rng)

        player.pending_event_key = None
        player.total_days_played += 1
        player.total_weeks_played = player.total_days_played // SimulationSettings.DAYS_PER_WEEK
        player.current_day_in_season += 1

        season_started = False
        if player.current_day_in_season > player.season_length:
            self._roll_over_season(player, rng, messages)
            season_started = True
        elif player.current_day_in_season % SimulationSettings.MID_SEASON_REVIEW_INTERVAL == 0:
            self._mid_season_review(player, messages)

        return self.select_next_event(player, rng, messages, season_started=season_started)

    def _roll_over_season(self, player: Player, rng: RandomSource, messages: List[str]) -> None:
        """
        End the season: age up, evaluate graduation and role, post standings,
        move to the next season and generate its schedule.
        """
        previous_mode = player.game_mode
        previous_schedule = player.schedule
        previous_team_id = player.team_id

        player.age += 1
        progress = evaluate_player_progress(player, check_graduation=True)
        player.game_mode = progress.new_mode
        player.current_role = progress.new_role
        for message in progress.log_messages:
            self._record(player, message, messages)

        if player.game_mode is not previous_mode:
            player.current_season_in_mode = 1
        else:
            player.current_season_in_mode += 1
        player.current_day_in_season = 1
        player.current_season += 1

        standings_line = self._standings_line(previous_team_id, previous_schedule, rng)
        if standings_line:
            self._record(player, standings_line, messages)

        if player.game_mode is not previous_mode:
            team = assign_random_team(player, self.world, rng)
            self._record(player, f"You've joined the {team.name}.", messages)
            self.logger.info(f"{player.name} moved up to {player.game_mode.value} with {team.name}")

        player.schedule = self.schedule_generator.generate(player.current_season, player.team_id, rng)
        self._record(
            player,
            f"--- Season {player.current_season} begins: {player.game_mode.value} year "
            f"{player.current_season_in_mode}, age {player.age}, {player.current_role} ---",
            messages,
        )
        self.logger.info(f"Season rollover for {player.name}: {player.describe()}")

    def _standings_line(
        self,
        team_id: Optional[str],
        schedule: Optional[SeasonSchedule],
        rng: RandomSource
    ) -> Optional[str]:
        if team_id is None or schedule is None:
            return None
        team = self.world.find_team(team_id)
        if team is None or not team.has_league_metadata():
            return None

        games = len(schedule.regular_season_slots())
        regular_wins = sum(
            1 for slot in schedule.regular_season_slots()
            if slot.game_result is not None and slot.game_result.team_won
        )
        played = sum(1 for slot in schedule.regular_season_slots() if slot.game_result is not None)
        record = TeamRecord(wins=regular_wins, losses=played - regular_wins)
        entries = build_standings(self.world, team_id, record, games, rng)
        if not entries:
            return None
        return format_standings(entries, title=f"Final {team.group_label} standings")

    def _mid_season_review(self, player: Player, messages: List[str]) -> None:
        progress = evaluate_player_progress(player, check_graduation=False)
        if progress.changed:
            player.current_role = progress.new_role
            for message in progress.log_messages:
                self._record(player, message, messages)

    # ==================== Turn Plumbing ====================

    def _validate_choice(self, player: Player, event: GameEvent, choice_id: str) -> Choice:
        choice = event.get_choice(choice_id)
        if choice is None:
            self.logger.warning(f"Rejected unknown choice '{choice_id}' for event '{event.event_id}'")
            raise InvalidChoiceException(
                choice_id,
                f"not an option for '{event.title}'",
                context={"event_id": event.event_id},
            )

        reason = choice.unavailable_reason(player)
        if reason is not None:
            self.logger.warning(f"Rejected choice '{choice_id}': {reason}")
            raise InvalidChoiceException(choice_id, reason, context={"event_id": event.event_id})
        return choice

    def _outcome_message(self, player: Player, outcome: ChoiceOutcome) -> str:
        result = outcome.game_performance
        if result is None:
            return outcome.outcome_message

        schedule = player.schedule
        slot = schedule.slot_for_day(player.current_day_in_season) if schedule else None
        if slot is not None and slot.is_game_day:
            schedule.record_game_result(player.current_day_in_season, result)
        return join_message(outcome.outcome_message, result.player_stats.summary(), result.result_label)

    def _finish_turn(
        self,
        player: Player,
        next_event: Optional[GameEvent],
        messages: List[str],
        rng: RandomSource,
        days_advanced: int
    ) -> TurnOutcome:
        reason = check_career_end(player, rng)
        if reason is not None:
            end_career(player, reason)
            messages.append(player.career_log[-1])
            return TurnOutcome(
                player=player,
                messages=messages,
                game_over=True,
                retirement_reason=reason,
                days_advanced=days_advanced,
            )
        return TurnOutcome(
            player=player,
            next_event=next_event,
            messages=messages,
            days_advanced=days_advanced,
        )

    def _turn_failure(self, player: Player, stage: str, error: Exception) -> TurnExecutionException:
        return TurnExecutionException(
            f"Turn failed during {stage}: {error}",
            stage=stage,
            context={
                "player": player.name,
                "game_mode": player.game_mode.value,
                "season": player.current_season,
                "day": player.current_day_in_season,
            },
            original_exception=error,
        )

    @staticmethod
    def _record(player: Player, message: str, messages: List[str]) -> None:
        player.log(message)
        messages.append(message)


def run_automated_practice(player: Player, rng: RandomSource) -> str:
    """
    Resolve a quiet day as practice (in place): one growth roll on a random
    skill, an energy cost of 15-24, then recovery of a share of the energy
    still missing. Practice drains a rested player and settles around 70.

    Returns:
        Career log line for the day
    """
    stat = choose(rng, SKILL_STATS)
    gain = grow_stat(player.stats, stat, rng)

    cost = random_int(rng, *SimulationSettings.PRACTICE_ENERGY_COST)
    apply_stat_delta(player.stats, 'energy', -cost)

    deficit = MAX_ENERGY - player.stats.energy
    recovery = int(round(deficit * SimulationSettings.PRACTICE_RECOVERY_RATE))
    if player.stats.professionalism > SimulationSettings.PROFESSIONALISM_RECOVERY_THRESHOLD:
        recovery += SimulationSettings.PROFESSIONALISM_RECOVERY_BONUS
    recovery = apply_stat_delta(player.stats, 'energy', recovery)

    verdict = format_change(stat, gain) + '.' if gain else 'No visible progress.'
    return f"Practice day. {verdict} Energy -{cost}, recovered +{recovery}."
