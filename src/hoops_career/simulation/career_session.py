"""
Career Session

Explicit context object for one player profile: the active run, the game
phase, the legacy point totals and the collaborators (league world, event
catalog, random source, optional persistence).

Phases:
    MENU -> PLAYING -> GAME_OVER, and back to MENU on a new game, a cleared
    save or an unrecoverable turn failure.

Error handling:
    The session is the single place that turns engine exceptions into
    user-facing results:
    - InvalidChoiceException / CareerOverException: non-blocking
      notification, nothing changes
    - PersistenceException: non-blocking notification, play continues in
      memory
    - TurnExecutionException: blocking error, run discarded, back to MENU
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..events.base_event import GameEvent
from ..events.event_catalog import EventCatalog, default_catalog
from ..logging_config import log_exception
from ..persistence.game_state_store import GameStateStore, SavedGameState
from ..player.player import Player
from ..player.player_factory import create_initial_player
from ..progression.retirement import process_player_retirement
from ..shared.random_source import RandomSource, create_random_source, random_int
from ..team_management.teams import LeagueWorld
from .simulation_exceptions import (
    CareerOverException, CareerSimException, InvalidChoiceException, PersistenceException,
    TurnExecutionException
)
from .turn_engine import CareerTurnEngine, TurnOutcome


MAX_WORLD_SEED = 2 ** 31 - 1
DEFAULT_SIM_DAYS = 365
TURN_FAILURE_MESSAGE = 'Something went wrong during that turn. The run was discarded and you are back at the menu.'


class GamePhase(Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "gameOver"


@dataclass
class TurnResult:
    """
    What the presentation layer receives after every operation.

    Attributes:
        player: Copy of the current player (None at the menu)
        next_event: Event awaiting a choice, if any
        game_over: True when the career has ended
        messages: Outcome and trigger messages in display order
        notification: Non-blocking notice (rejected choice, save problem)
        error: Blocking error the user must acknowledge
    """
    player: Optional[Player]
    next_event: Optional[GameEvent] = None
    game_over: bool = False
    messages: List[str] = field(default_factory=list)
    notification: Optional[str] = None
    error: Optional[str] = None


class CareerSession:
    """
    Single-player career state machine.

    Args:
        rng: Random source for every draw the run makes
        store: Optional persistence collaborator
        catalog: Event content shared with the engine
        world_seed: Fixed league seed (random when omitted)
        auto_save: Save after every state change when a store is present
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        store: Optional[GameStateStore] = None,
        catalog: Optional[EventCatalog] = None,
        world_seed: Optional[int] = None,
        auto_save: bool = True
    ):
        self.rng = rng or create_random_source()
        self.store = store
        self.catalog = catalog or default_catalog()
        self.world_seed = world_seed
        self.auto_save = auto_save
        self.logger = logging.getLogger(self.__class__.__name__)

        self.phase = GamePhase.MENU
        self.player: Optional[Player] = None
        self.current_event: Optional[GameEvent] = None
        self.world: Optional[LeagueWorld] = None
        self.engine: Optional[CareerTurnEngine] = None
        self.meta_skill_points = 0
        self.meta_skill_points_at_run_start = 0

        if self.store is not None:
            try:
                self.meta_skill_points = self.store.load_meta_skill_points()
            except PersistenceException as e:
                self.logger.warning(f"Could not read legacy points, starting from 0: {e.message}")

    # ==================== Run Lifecycle ====================

    def start_game(self, name: Optional[str] = None, position: Optional[str] = None) -> TurnResult:
        """Begin a new run seeded by the current legacy point total."""
        seed = self.world_seed if self.world_seed is not None else random_int(self.rng, 0, MAX_WORLD_SEED)
        try:
            self._attach_world(seed)
            player = create_initial_player(
                self.meta_skill_points, self.world, self.rng,
                name=name, position=position, world_seed=seed,
            )
            self.current_event = self.engine.regenerate_current_event(player, self.rng)
        except CareerSimException as e:
            log_exception(self.logger, e, context={"operation": "start_game"})
            self._reset_to_menu()
            return TurnResult(player=None, error=f"Could not start a new career: {e.message}")

        self.player = player
        self.phase = GamePhase.PLAYING
        self.meta_skill_points_at_run_start = self.meta_skill_points
        self.logger.info(f"New career started: {player.describe()}")
        return self._result(messages=list(player.career_log), notification=self._auto_save())

    def handle_choice(self, choice_id: str) -> TurnResult:
        """Resolve a choice on the current event and advance the turn."""
        if self.phase is GamePhase.GAME_OVER and self.player is not None:
            error = CareerOverException(self.player.name, operation='handle_choice')
            self.logger.warning(error.message)
            return self._result(notification=error.message)
        if self.phase is not GamePhase.PLAYING or self.player is None:
            return self._result(notification='No career in progress.')
        if self.current_event is None:
            return self._result(notification='There is no decision to make right now.')

        try:
            outcome = self.engine.process_choice(self.player, self.current_event, choice_id, self.rng)
        except (InvalidChoiceException, CareerOverException) as e:
            return self._result(notification=e.message)
        except TurnExecutionException as e:
            return self._discard_run(e, 'handle_choice')

        return self._apply_outcome(outcome)

    def sim_day(self) -> TurnResult:
        return self._simulate(1)

    def sim_to_next_event(self, max_days: int = DEFAULT_SIM_DAYS) -> TurnResult:
        return self._simulate(max_days)

    def retire(self) -> TurnResult:
        """Voluntary retirement of the active career."""
        if self.phase is not GamePhase.PLAYING or self.player is None:
            return self._result(notification='No career in progress.')
        return self._conclude_career([])

    # ==================== Persistence ====================

    def save(self) -> TurnResult:
        if self.store is None:
            return self._result(notification='Saving is not available.')
        notification = self._write_snapshot()
        return self._result(notification=notification or 'Game saved.')

    def load(self) -> TurnResult:
        """
        Restore the saved run. The current event is rebuilt from the
        restored player rather than read from storage.
        """
        if self.store is None:
            return self._result(notification='Saving is not available.')
        try:
            state = self.store.load_state()
        except PersistenceException as e:
            self.logger.warning(f"Load failed, keeping current state: {e.message}")
            return self._result(notification='Could not load the saved game.')

        if state is None:
            return self._result(notification='No saved game found.')

        try:
            phase = GamePhase(state.game_phase)
            if state.player is not None:
                self._attach_world(state.player.world_seed)
        except (ValueError, CareerSimException) as e:
            self.logger.warning(f"Saved game could not be restored: {e}")
            return self._result(notification='The saved game could not be restored.')

        self.player = state.player
        self.phase = phase if self.player is not None else GamePhase.MENU
        self.meta_skill_points = state.meta_skill_points
        self.meta_skill_points_at_run_start = state.meta_skill_points_at_run_start
        self.current_event = None
        if self.phase is GamePhase.PLAYING:
            self.current_event = self.engine.regenerate_current_event(self.player, self.rng)

        self.logger.info(f"Loaded saved game (phase={self.phase.value})")
        return self._result(messages=list(self.player.career_log) if self.player else [])

    def clear_saved_game(self) -> TurnResult:
        """Delete the save and the legacy points, and return to the menu."""
        notification = None
        if self.store is not None:
            try:
                self.store.clear_state()
                self.store.reset_meta_skill_points()
            except PersistenceException as e:
                self.logger.warning(f"Could not clear saved data: {e.message}")
                notification = 'Saved data could not be cleared.'

        self._reset_to_menu()
        self.meta_skill_points = 0
        self.meta_skill_points_at_run_start = 0
        return self._result(notification=notification)

    # ==================== Internals ====================

    def _attach_world(self, seed: int) -> None:
        if self.world is None or self.world.seed != seed:
            self.world = LeagueWorld.from_seed(seed)
        self.engine = CareerTurnEngine(self.world, self.catalog)

    def _simulate(self, max_days: int) -> TurnResult:
        if self.phase is not GamePhase.PLAYING or self.player is None:
            return self._result(notification='No career in progress.')
        if self.current_event is not None and self.current_event.is_mandatory:
            return self._result(notification=f"'{self.current_event.title}' needs a decision first.")

        try:
            outcome = self.engine.simulate_days(self.player, self.rng, max_days)
        except TurnExecutionException as e:
            return self._discard_run(e, 'simulate_days')
        return self._apply_outcome(outcome)

    def _apply_outcome(self, outcome: TurnOutcome) -> TurnResult:
        self.player = outcome.player
        self.current_event = outcome.next_event
        if outcome.game_over:
            return self._conclude_career(outcome.messages)
        return self._result(messages=outcome.messages, notification=self._auto_save())

    def _conclude_career(self, messages: List[str]) -> TurnResult:
        """Pay out legacy points, archive the career and enter GAME_OVER."""
        log_length = len(self.player.career_log)
        result = process_player_retirement(self.player, self.meta_skill_points_at_run_start)
        messages = messages + result.final_player.career_log[log_length:]

        self.player = result.final_player
        self.current_event = None
        self.phase = GamePhase.GAME_OVER
        self.meta_skill_points = result.new_total_meta_skill_points
        messages.append(
            f"You earned {result.points_earned} legacy points "
            f"({result.new_total_meta_skill_points} total)."
        )

        notification = None
        if self.store is not None:
            try:
                self.store.archive_career(self.player)
            except PersistenceException as e:
                self.logger.warning(f"Career could not be archived: {e.message}")
                notification = 'Your career could not be archived.'
        notification = self._auto_save() or notification
        return self._result(messages=messages, notification=notification)

    def _discard_run(self, error: TurnExecutionException, operation: str) -> TurnResult:
        log_exception(
            self.logger, error,
            context={"operation": operation, "player": self.player.name if self.player else None},
        )
        self._reset_to_menu()
        return TurnResult(player=None, error=TURN_FAILURE_MESSAGE)

    def _reset_to_menu(self) -> None:
        self.phase = GamePhase.MENU
        self.player = None
        self.current_event = None

    def _auto_save(self) -> Optional[str]:
        if self.store is None or not self.auto_save:
            return None
        return self._write_snapshot()

    def _write_snapshot(self) -> Optional[str]:
        """Returns a notification on failure, None on success."""
        state = SavedGameState(
            player=self.player,
            game_phase=self.phase.value,
            meta_skill_points=self.meta_skill_points,
            meta_skill_points_at_run_start=self.meta_skill_points_at_run_start,
        )
        try:
            self.store.save_state(state)
        except PersistenceException as e:
            self.logger.warning(f"Save failed, continuing in memory: {e.message}")
            return 'Progress could not be saved; playing on without saving.'
        return None

    def _result(
        self,
        messages: Optional[List[str]] = None,
        notification: Optional[str] = None
    ) -> TurnResult:
        return TurnResult(
            player=self.player.copy() if self.player else None,
            next_event=self.current_event,
            game_over=self.phase is GamePhase.GAME_OVER,
            messages=list(messages or []),
            notification=notification,
        )
