"""
Shared Game Result Classes

Box score value objects that can be imported by the schedule model, the
performance generator and the event catalog without circular imports.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class GameStatLine:
    """One player's box score for a resolved game."""
    minutes: int = 0
    points: int = 0
    rebounds: int = 0
    assists: int = 0

    @property
    def impact_score(self) -> float:
        """Weighted composite of the box score used by the win model."""
        return (
            self.points * 1.0
            + self.rebounds * 1.2
            + self.assists * 1.5
            + self.minutes / 2
        ) / 4

    def summary(self) -> str:
        return (
            f"In {self.minutes}m, you had {self.points} PTS, "
            f"{self.rebounds} REB, {self.assists} AST."
        )

    def to_dict(self) -> Dict[str, int]:
        return {
            'minutes': self.minutes,
            'points': self.points,
            'rebounds': self.rebounds,
            'assists': self.assists,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GameStatLine':
        return cls(
            minutes=int(data['minutes']),
            points=int(data['points']),
            rebounds=int(data['rebounds']),
            assists=int(data['assists']),
        )


@dataclass(frozen=True)
class GameResult:
    """Outcome of a game day: the player's stat line and whether the team won."""
    player_stats: GameStatLine
    team_won: bool

    @property
    def result_label(self) -> str:
        return 'Your team WON!' if self.team_won else 'Your team LOST.'

    def to_dict(self) -> Dict[str, Any]:
        return {
            'player_stats': self.player_stats.to_dict(),
            'team_won': self.team_won,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GameResult':
        return cls(
            player_stats=GameStatLine.from_dict(data['player_stats']),
            team_won=bool(data['team_won']),
        )
