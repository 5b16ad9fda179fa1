"""
Game State Store

Save/load API for careers. Wraps DatabaseConnection and converts every
storage failure into PersistenceException, so callers can fall back to
in-memory state.

Snapshot payload (JSON):
    {
        "version": 1,
        "player": Player.to_dict(),
        "game_phase": "menu" | "playing" | "gameOver",
        "meta_skill_points": int,
        "meta_skill_points_at_run_start": int
    }

The current event is not stored; it is rebuilt from the player on load.
"""

import json
import logging
import sqlite3
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..database.connection import DatabaseConnection
from ..player.player import Player
from ..simulation.simulation_exceptions import PersistenceException


SNAPSHOT_VERSION = 1
DEFAULT_SLOT = 'current'
DEFAULT_PROFILE = 'default'


@dataclass
class SavedGameState:
    """A restored snapshot of a run."""
    player: Optional[Player]
    game_phase: str
    meta_skill_points: int
    meta_skill_points_at_run_start: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'version': SNAPSHOT_VERSION,
            'player': self.player.to_dict() if self.player else None,
            'game_phase': self.game_phase,
            'meta_skill_points': self.meta_skill_points,
            'meta_skill_points_at_run_start': self.meta_skill_points_at_run_start,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SavedGameState':
        """
        Raises:
            KeyError / ValueError / TypeError: If the payload is malformed
        """
        player_data = data['player']
        return cls(
            player=Player.from_dict(player_data) if player_data else None,
            game_phase=str(data['game_phase']),
            meta_skill_points=int(data['meta_skill_points']),
            meta_skill_points_at_run_start=int(data['meta_skill_points_at_run_start']),
        )


class GameStateStore:
    """
    Persistence collaborator for a single player profile.

    Args:
        db_path: Path to the SQLite database file
        slot: Save slot for the in-progress run
        profile: Key for the legacy point total
    """

    def __init__(
        self,
        db_path: str = "data/database/hoops_career.db",
        slot: str = DEFAULT_SLOT,
        profile: str = DEFAULT_PROFILE
    ):
        self.db_path = db_path
        self.slot = slot
        self.profile = profile
        self.logger = logging.getLogger(self.__class__.__name__)
        try:
            self.db = DatabaseConnection(db_path)
        except OSError as e:
            raise PersistenceException(
                f"Cannot open save database at {db_path}",
                storage_operation="open",
                original_exception=e,
            ) from e

    # ==================== Active Run ====================

    def save_state(self, state: SavedGameState) -> None:
        """
        Write the snapshot for this slot, replacing any previous one.

        Raises:
            PersistenceException: If the snapshot cannot be written
        """
        try:
            payload = json.dumps(state.to_dict())
            self.db.execute_update(
                '''
                INSERT OR REPLACE INTO game_state (slot, payload, saved_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ''',
                (self.slot, payload),
            )
            self.save_meta_skill_points(state.meta_skill_points)
        except (sqlite3.Error, TypeError, ValueError, OSError) as e:
            raise PersistenceException(
                f"Failed to save game state: {e}",
                storage_operation="save_state",
                context={"slot": self.slot},
                original_exception=e,
            ) from e
        self.logger.debug(f"Saved game state to slot '{self.slot}' (phase={state.game_phase})")

    def load_state(self) -> Optional[SavedGameState]:
        """
        Read the snapshot for this slot.

        A corrupt snapshot is deleted and treated as missing.

        Returns:
            SavedGameState, or None when there is nothing usable

        Raises:
            PersistenceException: If the database cannot be read
        """
        try:
            rows = self.db.execute_query(
                "SELECT payload FROM game_state WHERE slot = ?",
                (self.slot,),
            )
        except (sqlite3.Error, OSError) as e:
            raise PersistenceException(
                f"Failed to read game state: {e}",
                storage_operation="load_state",
                context={"slot": self.slot},
                original_exception=e,
            ) from e

        if not rows:
            return None

        try:
            return SavedGameState.from_dict(json.loads(rows[0]['payload']))
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            self.logger.warning(f"Discarding corrupt save in slot '{self.slot}': {e}")
            self.clear_state()
            return None

    def clear_state(self) -> None:
        """
        Raises:
            PersistenceException: If the row cannot be deleted
        """
        try:
            self.db.execute_update("DELETE FROM game_state WHERE slot = ?", (self.slot,))
        except (sqlite3.Error, OSError) as e:
            raise PersistenceException(
                f"Failed to clear game state: {e}",
                storage_operation="clear_state",
                context={"slot": self.slot},
                original_exception=e,
            ) from e

    # ==================== Legacy Points ====================

    def save_meta_skill_points(self, meta_skill_points: int) -> None:
        try:
            self.db.execute_update(
                '''
                INSERT OR REPLACE INTO meta_progress (profile, meta_skill_points, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ''',
                (self.profile, int(meta_skill_points)),
            )
        except (sqlite3.Error, OSError) as e:
            raise PersistenceException(
                f"Failed to save legacy points: {e}",
                storage_operation="save_meta_skill_points",
                context={"profile": self.profile},
                original_exception=e,
            ) from e

    def load_meta_skill_points(self) -> int:
        """Legacy point total for this profile, 0 if never saved."""
        try:
            rows = self.db.execute_query(
                "SELECT meta_skill_points FROM meta_progress WHERE profile = ?",
                (self.profile,),
            )
        except (sqlite3.Error, OSError) as e:
            raise PersistenceException(
                f"Failed to read legacy points: {e}",
                storage_operation="load_meta_skill_points",
                context={"profile": self.profile},
                original_exception=e,
            ) from e
        return int(rows[0]['meta_skill_points']) if rows else 0

    def reset_meta_skill_points(self) -> None:
        try:
            self.db.execute_update("DELETE FROM meta_progress WHERE profile = ?", (self.profile,))
        except (sqlite3.Error, OSError) as e:
            raise PersistenceException(
                f"Failed to reset legacy points: {e}",
                storage_operation="reset_meta_skill_points",
                context={"profile": self.profile},
                original_exception=e,
            ) from e

    # ==================== Career Archive ====================

    def archive_career(self, player: Player) -> int:
        """
        Store a finished career.

        Returns:
            career_id of the archived record

        Raises:
            PersistenceException: If the career cannot be written
        """
        try:
            career_id = self.db.execute_insert(
                '''
                INSERT INTO careers (player_name, final_role, game_mode, total_days_played, payload)
                VALUES (?, ?, ?, ?, ?)
                ''',
                (
                    player.name,
                    player.current_role,
                    player.game_mode.value,
                    player.total_days_played,
                    json.dumps(player.to_dict()),
                ),
            )
        except (sqlite3.Error, TypeError, ValueError, OSError) as e:
            raise PersistenceException(
                f"Failed to archive career: {e}",
                storage_operation="archive_career",
                context={"player": player.name},
                original_exception=e,
            ) from e
        self.logger.info(f"Archived career of {player.name} as #{career_id}")
        return career_id

    def list_archived_careers(self) -> List[Dict[str, Any]]:
        """Summaries of archived careers, newest first."""
        try:
            rows = self.db.execute_query(
                '''
                SELECT career_id, player_name, final_role, game_mode, total_days_played, archived_at
                FROM careers
                ORDER BY career_id DESC
                '''
            )
        except (sqlite3.Error, OSError) as e:
            raise PersistenceException(
                f"Failed to list archived careers: {e}",
                storage_operation="list_archived_careers",
                original_exception=e,
            ) from e
        return [dict(zip(row.keys(), row)) for row in rows]

    def load_archived_career(self, career_id: int) -> Optional[Player]:
        """Full player snapshot of an archived career, or None if absent or unreadable."""
        try:
            rows = self.db.execute_query(
                "SELECT payload FROM careers WHERE career_id = ?",
                (career_id,),
            )
        except (sqlite3.Error, OSError) as e:
            raise PersistenceException(
                f"Failed to read archived career: {e}",
                storage_operation="load_archived_career",
                context={"career_id": career_id},
                original_exception=e,
            ) from e
        if not rows:
            return None
        try:
            return Player.from_dict(json.loads(rows[0]['payload']))
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            self.logger.warning(f"Archived career #{career_id} is unreadable: {e}")
            return None
