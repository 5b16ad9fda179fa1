"""
Career Simulation Exception Hierarchy

This module defines exceptions for the career engine: choice validation,
turn execution, terminal-state violations, persistence and schedule
generation.

Exception Hierarchy:
    CareerSimException (base)
    ├── InvalidChoiceException
    ├── TurnExecutionException
    ├── CareerOverException
    ├── PersistenceException
    └── ScheduleGenerationException

All exceptions track:
- Career context (player name, game mode, season, day)
- Operation that failed
- Recovery strategy
"""

from typing import Any, Dict, Optional
from datetime import datetime


class CareerSimException(Exception):
    """
    Base exception for all career simulation errors.

    Attributes:
        message: Human-readable error message
        error_code: Unique error code
        context: Career information (player, mode, season, day)
        operation: What operation was being performed
        recovery_strategy: How the caller should recover
        original_exception: Wrapped exception if from try/except
    """

    def __init__(
        self,
        message: str,
        error_code: str = "SIM_000",
        context: Optional[Dict[str, Any]] = None,
        operation: Optional[str] = None,
        recovery_strategy: str = "abort",
        original_exception: Optional[Exception] = None
    ):
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        self.operation = operation
        self.recovery_strategy = recovery_strategy
        self.original_exception = original_exception
        self.timestamp = datetime.now().isoformat()

        full_message = self._build_error_message()
        super().__init__(full_message)

    def _build_error_message(self) -> str:
        """Build comprehensive error message with all context"""
        lines = [f"[{self.error_code}] {self.message}"]

        if self.operation:
            lines.append(f"Operation: {self.operation}")

        if self.context:
            lines.append("Career Context:")
            for key, value in self.context.items():
                lines.append(f"  {key}: {value}")

        if self.recovery_strategy:
            lines.append(f"Recovery: {self.recovery_strategy}")

        if self.original_exception:
            lines.append(
                f"Original Error: {type(self.original_exception).__name__}: "
                f"{str(self.original_exception)}"
            )

        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "operation": self.operation,
            "context": self.context,
            "recovery_strategy": self.recovery_strategy,
            "timestamp": self.timestamp,
            "original_error": str(self.original_exception) if self.original_exception else None
        }


class InvalidChoiceException(CareerSimException):
    """
    Raised when a submitted choice cannot be executed.

    Raised before any mutation, so the player is untouched and the caller
    can re-prompt.

    Examples:
    - Choice id not part of the current event
    - Cost stat below the required amount
    - Disabled predicate returns True
    - Choice has no action
    """

    def __init__(
        self,
        choice_id: str,
        reason: str,
        **kwargs
    ):
        context = {
            "choice_id": choice_id,
            "reason": reason,
            **kwargs.get('context', {})
        }

        super().__init__(
            message=kwargs.get('message') or f"Choice '{choice_id}' is not available: {reason}",
            error_code="SIM_CHOICE_001",
            context=context,
            operation=kwargs.get('operation', 'validate_choice'),
            recovery_strategy="reprompt",
            original_exception=kwargs.get('original_exception')
        )

        self.choice_id = choice_id
        self.reason = reason


class TurnExecutionException(CareerSimException):
    """
    Raised when a turn fails while executing a choice action or computing
    downstream turn effects.

    The in-progress turn is discarded in full; the caller must not reuse the
    working snapshot and should return the session to the menu.
    """

    def __init__(
        self,
        message: str,
        stage: str,
        **kwargs
    ):
        context = {
            "stage": stage,  # e.g. "choice_action", "advance_day"
            **kwargs.get('context', {})
        }

        super().__init__(
            message=message,
            error_code="SIM_TURN_002",
            context=context,
            operation=kwargs.get('operation', 'process_turn'),
            recovery_strategy="reset_to_menu",
            original_exception=kwargs.get('original_exception')
        )

        self.stage = stage


class CareerOverException(CareerSimException):
    """
    Raised when an operation that mutates the career is attempted after the
    career has ended.
    """

    def __init__(
        self,
        player_name: str,
        **kwargs
    ):
        context = {
            "player_name": player_name,
            **kwargs.get('context', {})
        }

        super().__init__(
            message=kwargs.get('message') or f"Career for {player_name} is already over",
            error_code="SIM_TERMINAL_003",
            context=context,
            operation=kwargs.get('operation', 'process_turn'),
            recovery_strategy="abort",
        )

        self.player_name = player_name


class PersistenceException(CareerSimException):
    """
    Raised when saved state cannot be read or written.

    Always recoverable: the session keeps running on in-memory state and a
    corrupted save is discarded.

    Examples:
    - Database file unavailable or locked
    - Stored payload is not valid JSON
    - Stored payload is missing required fields
    """

    def __init__(
        self,
        message: str,
        storage_operation: str,
        **kwargs
    ):
        context = {
            "storage_operation": storage_operation,  # e.g. "save_state", "load_state"
            **kwargs.get('context', {})
        }

        super().__init__(
            message=message,
            error_code="SIM_PERSIST_004",
            context=context,
            operation=storage_operation,
            recovery_strategy="in_memory",
            original_exception=kwargs.get('original_exception')
        )

        self.storage_operation = storage_operation


class ScheduleGenerationException(CareerSimException):
    """
    Raised when a season schedule cannot be generated.

    No partial schedule is ever returned alongside this exception.

    Examples:
    - Team id not found in the league
    - Team missing its league metadata (district, conference, division)
    - Schedule configuration does not fit the season length
    """

    def __init__(
        self,
        message: str,
        team_id: Optional[str] = None,
        **kwargs
    ):
        context = {
            "team_id": team_id,
            **kwargs.get('context', {})
        }

        super().__init__(
            message=message,
            error_code="SIM_SCHEDULE_005",
            context=context,
            operation=kwargs.get('operation', 'generate_schedule'),
            recovery_strategy="abort",
            original_exception=kwargs.get('original_exception')
        )

        self.team_id = team_id
