"""
Database Connection Module

Manages the SQLite database that holds saved careers.

Tables:
- game_state: one JSON snapshot per save slot (the in-progress run)
- careers: archive of finished careers
- meta_progress: legacy points carried between runs
"""

import sqlite3
from pathlib import Path
from typing import Optional
import logging


class DatabaseConnection:
    """
    Manages SQLite database connection and operations.

    Features:
    - WAL mode for better concurrency
    - Automatic, idempotent schema creation
    - Rows accessible by column name (sqlite3.Row)
    """

    def __init__(self, db_path: str = "data/database/hoops_career.db"):
        """
        Initialize database connection.

        Args:
            db_path: Path to the SQLite database file
        """
        self.db_path = db_path
        self.logger = logging.getLogger(__name__)
        self._wal_enabled = False

        # Ensure directory exists
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    def _create_tables(self, conn: sqlite3.Connection) -> None:
        """Create all database tables."""

        # Active run snapshot, keyed by save slot
        conn.execute('''
            CREATE TABLE IF NOT EXISTS game_state (
                slot TEXT PRIMARY KEY,
                payload TEXT NOT NULL,
                saved_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        ''')

        # Finished careers
        conn.execute('''
            CREATE TABLE IF NOT EXISTS careers (
                career_id INTEGER PRIMARY KEY AUTOINCREMENT,
                player_name TEXT NOT NULL,
                final_role TEXT,
                game_mode TEXT,
                total_days_played INTEGER DEFAULT 0,
                payload TEXT NOT NULL,
                archived_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        ''')

        # Legacy points, one row per profile
        conn.execute('''
            CREATE TABLE IF NOT EXISTS meta_progress (
                profile TEXT PRIMARY KEY,
                meta_skill_points INTEGER NOT NULL DEFAULT 0,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        ''')

        conn.execute('''
            CREATE INDEX IF NOT EXISTS idx_careers_archived_at
            ON careers(archived_at)
        ''')

    def get_connection(self) -> sqlite3.Connection:
        """
        Get a database connection with schema initialized.

        Returns:
            SQLite connection object with tables created
        """
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row  # Enable column access by name

        # journal_mode persists in the file; synchronous is per connection
        if not self._wal_enabled:
            conn.execute("PRAGMA journal_mode=WAL")
            self._wal_enabled = True
            self.logger.debug(f"WAL mode enabled for {self.db_path}")
        conn.execute("PRAGMA synchronous=NORMAL")

        # Ensure tables exist (idempotent - safe to call multiple times)
        self._create_tables(conn)

        return conn

    def execute_query(self, query: str, params: Optional[tuple] = None) -> list:
        """
        Execute a SELECT query and return results.

        Args:
            query: SQL query to execute
            params: Query parameters

        Returns:
            List of sqlite3.Row results
        """
        conn = self.get_connection()
        cursor = conn.cursor()

        try:
            if params:
                cursor.execute(query, params)
            else:
                cursor.execute(query)

            return cursor.fetchall()

        finally:
            conn.close()

    def execute_update(self, query: str, params: Optional[tuple] = None) -> int:
        """
        Execute an INSERT/UPDATE/DELETE query.

        Args:
            query: SQL query to execute
            params: Query parameters

        Returns:
            Number of affected rows
        """
        conn = self.get_connection()
        cursor = conn.cursor()

        try:
            if params:
                cursor.execute(query, params)
            else:
                cursor.execute(query)

            conn.commit()
            return cursor.rowcount

        except Exception as e:
            conn.rollback()
            self.logger.error(f"Error executing update: {e}")
            raise
        finally:
            conn.close()

    def execute_insert(self, query: str, params: Optional[tuple] = None) -> int:
        """
        Execute an INSERT and return the new row id.

        Args:
            query: SQL INSERT to execute
            params: Query parameters

        Returns:
            lastrowid of the inserted row
        """
        conn = self.get_connection()
        cursor = conn.cursor()

        try:
            cursor.execute(query, params or ())
            conn.commit()
            return cursor.lastrowid

        except Exception as e:
            conn.rollback()
            self.logger.error(f"Error executing insert: {e}")
            raise
        finally:
            conn.close()
