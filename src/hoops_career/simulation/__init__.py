"""
Career simulation: turn engine, session state machine and the exception
hierarchy.

Only the exceptions are re-exported here; import the engine and session
from their modules (or from the top-level ``hoops_career`` package).
"""

from .simulation_exceptions import (
    CareerSimException,
    InvalidChoiceException,
    TurnExecutionException,
    CareerOverException,
    PersistenceException,
    ScheduleGenerationException,
)

__all__ = [
    'CareerSimException',
    'InvalidChoiceException',
    'TurnExecutionException',
    'CareerOverException',
    'PersistenceException',
    'ScheduleGenerationException',
]
