"""
Event definitions and the read-only event catalog.
"""

from .base_event import (
    EventCategory, StatCost, Choice, ChoiceOutcome, ChoiceAction, GameEvent, ContextualPool
)
from .scheduled_events import ScheduledEventDefinition, SCHEDULED_EVENTS
from .event_catalog import (
    EventCatalog, default_catalog, contextual_marker, last_contextual_title
)

__all__ = [
    'EventCategory',
    'StatCost',
    'Choice',
    'ChoiceOutcome',
    'ChoiceAction',
    'GameEvent',
    'ContextualPool',
    'ScheduledEventDefinition',
    'SCHEDULED_EVENTS',
    'EventCatalog',
    'default_catalog',
    'contextual_marker',
    'last_contextual_title',
]
