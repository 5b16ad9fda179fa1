"""
Player model

The mutable subject of the simulation: identity, career progression,
stats, traits, the append-only career log and the current season schedule.

The model does not self-heal out-of-range stats; every mutation site
clamps through ``stat_model``.
"""

import copy
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..constants import ALL_STATS, GameMode, STARTING_AGE
from ..scheduling.schedule_models import SeasonSchedule


DAYS_PER_WEEK = 7


@dataclass
class PlayerStats:
    """Numeric attributes of a player."""
    shooting: int = 30
    athleticism: int = 30
    basketball_iq: int = 30
    charisma: int = 30
    professionalism: int = 30
    energy: int = 80
    morale: int = 70
    skill_points: int = 0

    def get(self, stat: str) -> int:
        if stat not in ALL_STATS:
            raise KeyError(f"Unknown stat: {stat}")
        return getattr(self, stat)

    def set(self, stat: str, value: int) -> None:
        if stat not in ALL_STATS:
            raise KeyError(f"Unknown stat: {stat}")
        setattr(self, stat, int(value))

    @property
    def average_skill(self) -> float:
        return (self.shooting + self.athleticism + self.basketball_iq) / 3

    def to_dict(self) -> Dict[str, int]:
        return {stat: self.get(stat) for stat in ALL_STATS}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PlayerStats':
        return cls(**{stat: int(data[stat]) for stat in ALL_STATS})


@dataclass
class Player:
    """
    A single career.

    Calendar fields:
        current_season: Overall season counter across the whole career
        current_season_in_mode: Season within the current tier, resets to 1 on graduation
        current_day_in_season: 1-based day, bounded by the schedule length
        total_days_played / total_weeks_played: Monotonic career totals

    pending_event_key names a scheduled (or new-season) event that has been
    shown but not yet answered, so a reloaded save can show it again.
    """
    name: str
    position: str
    age: int = STARTING_AGE
    game_mode: GameMode = GameMode.HIGH_SCHOOL
    current_role: str = 'Freshman Newcomer'
    current_season: int = 1
    current_season_in_mode: int = 1
    current_day_in_season: int = 1
    total_days_played: int = 0
    total_weeks_played: int = 0
    stats: PlayerStats = field(default_factory=PlayerStats)
    traits: Dict[str, int] = field(default_factory=dict)
    career_log: List[str] = field(default_factory=list)
    career_over: bool = False
    schedule: Optional[SeasonSchedule] = None
    team_id: Optional[str] = None
    team_name: Optional[str] = None
    world_seed: int = 0
    fired_scheduled_events: List[str] = field(default_factory=list)
    pending_event_key: Optional[str] = None

    @property
    def current_week(self) -> int:
        return max(1, math.ceil(self.current_day_in_season / DAYS_PER_WEEK))

    @property
    def season_length(self) -> int:
        return self.schedule.season_length if self.schedule else 0

    def has_trait(self, trait_name: str) -> bool:
        return trait_name in self.traits

    def trait_level(self, trait_name: str) -> int:
        return self.traits.get(trait_name, 0)

    def log(self, message: str) -> None:
        """Append to the career log. The log is never reordered or truncated."""
        self.career_log.append(message)

    def copy(self) -> 'Player':
        """Independent deep copy, used as the working snapshot for a turn."""
        return copy.deepcopy(self)

    def describe(self) -> str:
        return (
            f"{self.name} ({self.position}, {self.age} y.o.) - "
            f"{self.game_mode.value} {self.current_role}, "
            f"Season {self.current_season_in_mode} Day {self.current_day_in_season}"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'position': self.position,
            'age': self.age,
            'game_mode': self.game_mode.value,
            'current_role': self.current_role,
            'current_season': self.current_season,
            'current_season_in_mode': self.current_season_in_mode,
            'current_day_in_season': self.current_day_in_season,
            'total_days_played': self.total_days_played,
            'total_weeks_played': self.total_weeks_played,
            'stats': self.stats.to_dict(),
            'traits': dict(self.traits),
            'career_log': list(self.career_log),
            'career_over': self.career_over,
            'schedule': self.schedule.to_dict() if self.schedule else None,
            'team_id': self.team_id,
            'team_name': self.team_name,
            'world_seed': self.world_seed,
            'fired_scheduled_events': list(self.fired_scheduled_events),
            'pending_event_key': self.pending_event_key,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Player':
        """
        Rebuild a player from ``to_dict`` output.

        Raises:
            KeyError / ValueError / TypeError: If the payload is malformed
        """
        schedule = data.get('schedule')
        return cls(
            name=data['name'],
            position=data['position'],
            age=int(data['age']),
            game_mode=GameMode(data['game_mode']),
            current_role=data['current_role'],
            current_season=int(data['current_season']),
            current_season_in_mode=int(data['current_season_in_mode']),
            current_day_in_season=int(data['current_day_in_season']),
            total_days_played=int(data['total_days_played']),
            total_weeks_played=int(data.get('total_weeks_played', 0)),
            stats=PlayerStats.from_dict(data['stats']),
            traits={str(k): int(v) for k, v in data.get('traits', {}).items()},
            career_log=list(data.get('career_log', [])),
            career_over=bool(data.get('career_over', False)),
            schedule=SeasonSchedule.from_dict(schedule) if schedule else None,
            team_id=data.get('team_id'),
            team_name=data.get('team_name'),
            world_seed=int(data.get('world_seed', 0)),
            fired_scheduled_events=list(data.get('fired_scheduled_events', [])),
            pending_event_key=data.get('pending_event_key'),
        )
