"""
Hoops Career

Single-player basketball career simulation: a player grows from High School
through College into the Professional ranks, one day at a time, until
retirement turns the career into legacy points for the next run.

Main entry points:
    CareerSession      - state machine for a player profile (menu, playing, game over)
    CareerTurnEngine   - stateless turn processor used by the session
    GameStateStore     - SQLite persistence for saves, legacy points and archived careers
"""

from .simulation.simulation_exceptions import (
    CareerSimException, InvalidChoiceException, TurnExecutionException,
    CareerOverException, PersistenceException, ScheduleGenerationException
)
from .simulation.turn_engine import CareerTurnEngine, TurnOutcome
from .simulation.career_session import CareerSession, GamePhase, TurnResult
from .persistence.game_state_store import GameStateStore, SavedGameState
from .player.player import Player, PlayerStats
from .player.player_factory import create_initial_player
from .team_management.teams import LeagueWorld, generate_world
from .events.event_catalog import EventCatalog, default_catalog
from .shared.random_source import create_random_source

__version__ = "0.1.0"

__all__ = [
    'CareerSimException',
    'InvalidChoiceException',
    'TurnExecutionException',
    'CareerOverException',
    'PersistenceException',
    'ScheduleGenerationException',
    'CareerTurnEngine',
    'TurnOutcome',
    'CareerSession',
    'GamePhase',
    'TurnResult',
    'GameStateStore',
    'SavedGameState',
    'Player',
    'PlayerStats',
    'create_initial_player',
    'LeagueWorld',
    'generate_world',
    'EventCatalog',
    'default_catalog',
    'create_random_source',
]
