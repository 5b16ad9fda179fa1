"""
Event Catalog

Read-only reference data injected into the turn engine: contextual pools,
scheduled event definitions and the factories for the core events. One
catalog can be shared by any number of careers.

Anti-repeat: when a contextual event is surfaced the engine appends a
``--- Contextual Event: <title> ---`` marker to the career log. The next
contextual pick excludes the title of the latest marker, falling back to
the unfiltered pool when the exclusion would leave nothing.
"""

import logging
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Tuple, TYPE_CHECKING

from ..scheduling.schedule_models import ScheduleSlot
from ..shared.random_source import RandomSource, choose
from .base_event import ContextualPool, GameEvent
from .contextual import ALL_CONTEXTUAL_POOLS
from .core_events import (
    MINOR_INJURY_EVENT, create_agent_meeting_event, create_daily_choice_event,
    create_game_day_event
)
from .scheduled_events import SCHEDULED_EVENTS, ScheduledEventDefinition

if TYPE_CHECKING:
    from ..player.player import Player


logger = logging.getLogger(__name__)


CONTEXTUAL_MARKER_PREFIX = '--- Contextual Event: '
CONTEXTUAL_MARKER_SUFFIX = ' ---'


def contextual_marker(title: str) -> str:
    return f"{CONTEXTUAL_MARKER_PREFIX}{title}{CONTEXTUAL_MARKER_SUFFIX}"


def last_contextual_title(career_log: Sequence[str]) -> Optional[str]:
    """Title from the most recent contextual marker in the log, if any."""
    for entry in reversed(career_log):
        if entry.startswith(CONTEXTUAL_MARKER_PREFIX):
            return entry[len(CONTEXTUAL_MARKER_PREFIX):].split(CONTEXTUAL_MARKER_SUFFIX)[0]
    return None


class EventCatalog:
    """
    Immutable collection of event content.

    Args:
        contextual_pools: Tier/role-gated contextual pools
        scheduled_events: One-off scheduled event definitions (keys unique)
    """

    def __init__(
        self,
        contextual_pools: Sequence[ContextualPool] = ALL_CONTEXTUAL_POOLS,
        scheduled_events: Sequence[ScheduledEventDefinition] = SCHEDULED_EVENTS
    ):
        keys = [definition.key for definition in scheduled_events]
        if len(keys) != len(set(keys)):
            raise ValueError("Scheduled event keys must be unique")

        self._contextual_pools: Tuple[ContextualPool, ...] = tuple(contextual_pools)
        self._scheduled: Mapping[str, ScheduledEventDefinition] = MappingProxyType(
            {definition.key: definition for definition in scheduled_events}
        )

    @property
    def contextual_pools(self) -> Tuple[ContextualPool, ...]:
        return self._contextual_pools

    @property
    def scheduled_events(self) -> Mapping[str, ScheduledEventDefinition]:
        return self._scheduled

    # ==================== Scheduled ====================

    def find_scheduled_event(self, player: 'Player') -> Optional[ScheduledEventDefinition]:
        """First scheduled definition whose condition matches and has not fired yet."""
        for definition in self._scheduled.values():
            if definition.matches(player):
                return definition
        return None

    # ==================== Contextual ====================

    def contextual_pool_for(self, player: 'Player') -> List[GameEvent]:
        events: List[GameEvent] = []
        for pool in self._contextual_pools:
            if pool.is_eligible(player):
                events.extend(pool.events)
        return events

    def pick_contextual_event(self, player: 'Player', rng: RandomSource) -> Optional[GameEvent]:
        """
        Random eligible contextual event, never repeating the last one when
        an alternative exists. Consumes one draw when the pool is non-empty.
        """
        pool = self.contextual_pool_for(player)
        if not pool:
            return None

        previous_title = last_contextual_title(player.career_log)
        available = [event for event in pool if event.title != previous_title]
        if not available:
            logger.debug(f"Anti-repeat emptied pool for '{previous_title}', using full pool")
            available = pool
        return choose(rng, available)

    # ==================== Core ====================

    def daily_choice_event(self, player: 'Player') -> GameEvent:
        return create_daily_choice_event(player)

    def injury_event(self, player: 'Player') -> GameEvent:
        return MINOR_INJURY_EVENT

    def game_day_event(self, player: 'Player', slot: Optional[ScheduleSlot] = None) -> GameEvent:
        return create_game_day_event(player, slot)

    def agent_meeting_event(self, player: 'Player') -> GameEvent:
        return create_agent_meeting_event(player)


def default_catalog() -> EventCatalog:
    return EventCatalog()
