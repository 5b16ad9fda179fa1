"""
Persistence Module

Saves and restores the in-progress run, the legacy point total and the
archive of finished careers.
"""

from .game_state_store import GameStateStore, SavedGameState, SNAPSHOT_VERSION

__all__ = ['GameStateStore', 'SavedGameState', 'SNAPSHOT_VERSION']
