"""
League Standings

AI teams are not simulated game by game; their records come from aggregate
win-probability rolls against random opponents of the same tier.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..shared.random_source import RandomSource, choose
from .teams import LeagueWorld, Team


MIN_WIN_PROBABILITY = 0.05
MAX_WIN_PROBABILITY = 0.95


@dataclass(frozen=True)
class TeamRecord:
    wins: int
    losses: int

    @property
    def games(self) -> int:
        return self.wins + self.losses

    @property
    def win_percentage(self) -> float:
        return self.wins / self.games if self.games else 0.0


@dataclass(frozen=True)
class StandingsEntry:
    team_id: str
    team_name: str
    record: TeamRecord
    is_player_team: bool = False


def win_probability(team_a: Team, team_b: Team) -> float:
    """Probability that ``team_a`` beats ``team_b``: 0.5 + power difference / 100, clamped."""
    probability = 0.5 + (team_a.power_rating - team_b.power_rating) / 100
    return max(MIN_WIN_PROBABILITY, min(MAX_WIN_PROBABILITY, probability))


def simulate_team_season(
    team: Team,
    teams: Sequence[Team],
    games: int,
    rng: RandomSource
) -> TeamRecord:
    """
    Roll a season record for an AI team.

    Two draws per game: opponent pick, then the win roll. A team with no
    same-tier opponents loses every game.
    """
    opponents = [
        other for other in teams
        if other.team_id != team.team_id and other.game_mode is team.game_mode
    ]
    if not opponents:
        return TeamRecord(wins=0, losses=games)

    wins = 0
    for _ in range(games):
        opponent = choose(rng, opponents)
        if rng.random() < win_probability(team, opponent):
            wins += 1
    return TeamRecord(wins=wins, losses=games - wins)


def build_standings(
    world: LeagueWorld,
    player_team_id: str,
    player_record: TeamRecord,
    games: int,
    rng: RandomSource
) -> List[StandingsEntry]:
    """
    Standings for the player's grouping, best record first.

    The player's team keeps its real record; every other team in the
    grouping gets a simulated one.
    """
    player_team = world.find_team(player_team_id)
    if player_team is None:
        return []

    tier_teams = world.teams_for_mode(player_team.game_mode)
    entries = []
    for team in world.group_members(player_team):
        if team.team_id == player_team.team_id:
            record = player_record
        else:
            record = simulate_team_season(team, tier_teams, games, rng)
        entries.append(StandingsEntry(
            team_id=team.team_id,
            team_name=team.name,
            record=record,
            is_player_team=team.team_id == player_team.team_id,
        ))

    entries.sort(key=lambda entry: (-entry.record.wins, entry.team_name))
    return entries


def format_standings(entries: Sequence[StandingsEntry], title: Optional[str] = None) -> str:
    """Single log entry: '1. Name (12-6), 2. ...' with the player's team starred."""
    parts = []
    for rank, entry in enumerate(entries, start=1):
        marker = '*' if entry.is_player_team else ''
        parts.append(f"{rank}. {marker}{entry.team_name}{marker} ({entry.record.wins}-{entry.record.losses})")
    body = ', '.join(parts)
    return f"{title}: {body}" if title else body
