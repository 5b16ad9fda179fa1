"""
Season schedule data models.

A ``SeasonSchedule`` is an ordered list of one slot per day of the season.
Its length is fixed once generated; a slot only changes when the game on
that day resolves and its result is attached.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..constants import GameMode
from ..shared.game_result import GameResult


class SlotType(Enum):
    """What happens on a given day of the season."""
    PRACTICE = "Practice"
    GAME = "Game"
    PLAYOFFS = "Playoffs"
    CHAMPIONSHIP = "Championship"

    @property
    def is_game(self) -> bool:
        return self is not SlotType.PRACTICE

    @property
    def is_postseason(self) -> bool:
        return self in (SlotType.PLAYOFFS, SlotType.CHAMPIONSHIP)


@dataclass
class ScheduleSlot:
    """One day of the season."""
    day: int
    slot_type: SlotType = SlotType.PRACTICE
    opponent: Optional[str] = None
    opponent_id: Optional[str] = None
    is_completed: bool = False
    game_result: Optional[GameResult] = None

    @property
    def is_game_day(self) -> bool:
        return self.slot_type.is_game

    def to_dict(self) -> Dict[str, Any]:
        return {
            'day': self.day,
            'type': self.slot_type.value,
            'opponent': self.opponent,
            'opponent_id': self.opponent_id,
            'is_completed': self.is_completed,
            'game_result': self.game_result.to_dict() if self.game_result else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ScheduleSlot':
        result = data.get('game_result')
        return cls(
            day=int(data['day']),
            slot_type=SlotType(data['type']),
            opponent=data.get('opponent'),
            opponent_id=data.get('opponent_id'),
            is_completed=bool(data.get('is_completed', False)),
            game_result=GameResult.from_dict(result) if result else None,
        )


@dataclass
class SeasonSchedule:
    """
    Full schedule for one season.

    Wins and losses are derived from resolved slots rather than stored, so
    they can never drift from the attached game results.
    """
    season: int
    game_mode: GameMode
    team_id: Optional[str] = None
    slots: List[ScheduleSlot] = field(default_factory=list)
    playoff_eliminated: bool = False

    @property
    def season_length(self) -> int:
        return len(self.slots)

    @property
    def wins(self) -> int:
        return sum(1 for slot in self.slots if slot.game_result and slot.game_result.team_won)

    @property
    def losses(self) -> int:
        return sum(1 for slot in self.slots if slot.game_result and not slot.game_result.team_won)

    @property
    def record(self) -> str:
        return f"{self.wins}-{self.losses}"

    def slot_for_day(self, day: int) -> Optional[ScheduleSlot]:
        """Slot at 1-based ``day``, or None when out of range."""
        if 1 <= day <= len(self.slots):
            slot = self.slots[day - 1]
            if slot.day == day:
                return slot
        for slot in self.slots:
            if slot.day == day:
                return slot
        return None

    def game_slots(self) -> List[ScheduleSlot]:
        return [slot for slot in self.slots if slot.is_game_day]

    def regular_season_slots(self) -> List[ScheduleSlot]:
        return [slot for slot in self.slots if slot.slot_type is SlotType.GAME]

    def last_practice_day(self) -> Optional[int]:
        for slot in reversed(self.slots):
            if slot.slot_type is SlotType.PRACTICE:
                return slot.day
        return None

    def first_postseason_day(self) -> Optional[int]:
        for slot in self.slots:
            if slot.slot_type.is_postseason:
                return slot.day
        return None

    def record_game_result(self, day: int, result: GameResult) -> ScheduleSlot:
        """
        Attach a resolved game to the slot for ``day``.

        A postseason loss marks the team as eliminated.

        Raises:
            ValueError: If the day has no slot or the slot is not a game
        """
        slot = self.slot_for_day(day)
        if slot is None:
            raise ValueError(f"No schedule slot for day {day}")
        if not slot.is_game_day:
            raise ValueError(f"Day {day} is a {slot.slot_type.value} day, not a game")

        slot.game_result = result
        slot.is_completed = True
        if not result.team_won and slot.slot_type.is_postseason:
            self.playoff_eliminated = True
        return slot

    def to_dict(self) -> Dict[str, Any]:
        return {
            'season': self.season,
            'game_mode': self.game_mode.value,
            'team_id': self.team_id,
            'schedule': [slot.to_dict() for slot in self.slots],
            'wins': self.wins,
            'losses': self.losses,
            'playoff_eliminated': self.playoff_eliminated,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SeasonSchedule':
        return cls(
            season=int(data['season']),
            game_mode=GameMode(data['game_mode']),
            team_id=data.get('team_id'),
            slots=[ScheduleSlot.from_dict(item) for item in data['schedule']],
            playoff_eliminated=bool(data.get('playoff_eliminated', False)),
        )
