"""
Base Event Types

Transient event and choice definitions. Nothing here is persisted: the
current event is rebuilt from the player snapshot on load.

A choice's ``action`` is the only way player state changes during a turn.
The engine hands every action a private working copy of the player and
commits the returned snapshot only if the whole turn succeeds, so an action
may mutate the copy it receives but must not touch anything else.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Tuple, TYPE_CHECKING

from ..constants import GameMode, STAT_LABELS
from ..shared.game_result import GameResult
from ..shared.random_source import RandomSource

if TYPE_CHECKING:
    from ..player.player import Player


class EventCategory(Enum):
    """Catalog tag; used for filtering, never for engine branching."""
    DAILY = "daily"
    GAME_DAY = "gameDay"
    INJURY = "injury"
    AGENT = "agent"
    CONTEXTUAL = "contextual"
    SCHEDULED = "scheduled"


@dataclass(frozen=True)
class StatCost:
    """Gate that disables a choice while ``stat`` is below ``amount``."""
    stat: str
    amount: int

    def is_affordable(self, player: 'Player') -> bool:
        return player.stats.get(self.stat) >= self.amount

    def describe(self) -> str:
        return f"{STAT_LABELS.get(self.stat, self.stat)} {self.amount}"


@dataclass
class ChoiceOutcome:
    """
    Result of a choice action.

    Attributes:
        updated_player: The resulting player snapshot
        outcome_message: Career log line describing what happened
        immediate_event: Follow-up event shown before the calendar advances
        game_performance: Resolved game attached to today's schedule slot
    """
    updated_player: 'Player'
    outcome_message: str
    immediate_event: Optional['GameEvent'] = None
    game_performance: Optional[GameResult] = None


ChoiceAction = Callable[['Player', RandomSource], ChoiceOutcome]


@dataclass(frozen=True)
class Choice:
    choice_id: str
    text: str
    action: Optional[ChoiceAction] = None
    description: str = ''
    cost: Optional[StatCost] = None
    disabled: Optional[Callable[['Player'], bool]] = None

    def unavailable_reason(self, player: 'Player') -> Optional[str]:
        """Why the choice cannot be taken right now, or None if it can."""
        if self.action is None or not callable(self.action):
            return "choice has no action"
        if self.cost is not None and not self.cost.is_affordable(player):
            return f"requires {self.cost.describe()}"
        if self.disabled is not None and self.disabled(player):
            return "choice is disabled"
        return None

    def is_available(self, player: 'Player') -> bool:
        return self.unavailable_reason(player) is None


@dataclass(frozen=True)
class GameEvent:
    event_id: str
    title: str
    description: str
    choices: Tuple[Choice, ...] = field(default_factory=tuple)
    category: EventCategory = EventCategory.DAILY
    is_mandatory: bool = False

    def get_choice(self, choice_id: str) -> Optional[Choice]:
        for choice in self.choices:
            if choice.choice_id == choice_id:
                return choice
        return None

    def available_choices(self, player: 'Player') -> Tuple[Choice, ...]:
        return tuple(choice for choice in self.choices if choice.is_available(player))


@dataclass(frozen=True)
class ContextualPool:
    """
    Contextual events eligible for one tier when ``condition`` holds
    (typically a season-in-mode or role check).
    """
    name: str
    game_mode: GameMode
    events: Tuple[GameEvent, ...]
    condition: Callable[['Player'], bool]

    def is_eligible(self, player: 'Player') -> bool:
        return player.game_mode is self.game_mode and self.condition(player)
