"""
Team management: generated league world and standings.
"""

from .teams import (
    Coach, Team, LeagueWorld, REQUIRED_LEAGUE_FIELDS,
    generate_world, generate_high_school_teams, generate_college_teams,
    generate_professional_teams
)
from .standings import (
    TeamRecord, StandingsEntry, win_probability, simulate_team_season,
    build_standings, format_standings
)

__all__ = [
    'Coach',
    'Team',
    'LeagueWorld',
    'REQUIRED_LEAGUE_FIELDS',
    'generate_world',
    'generate_high_school_teams',
    'generate_college_teams',
    'generate_professional_teams',
    'TeamRecord',
    'StandingsEntry',
    'win_probability',
    'simulate_team_season',
    'build_standings',
    'format_standings',
]
