"""SQLite database manager: schema creation, connections, health and stats."""

from __future__ import annotations

import logging
import os
import sqlite3
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from wbcalc.persistence.errors import DatabaseNotReadyError

logger = logging.getLogger(__name__)

MEMORY = ":memory:"
DEFAULT_DB_PATH = "wbcalc.db"

_SCHEMA = """
    CREATE TABLE IF NOT EXISTS aircraft_profiles (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        description TEXT,
        mac_formula TEXT NOT NULL,
        mac_min REAL NOT NULL,
        mac_max REAL NOT NULL,
        stations_data TEXT NOT NULL,
        unit TEXT NOT NULL DEFAULT 'imperial',
        user_id TEXT,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL
    );

    -- aircraft_profile_id is a plain back-reference: no FK enforcement,
    -- deleting a profile never touches its calculations.
    CREATE TABLE IF NOT EXISTS calculations (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        aircraft_profile_id INTEGER,
        calculation_data TEXT NOT NULL,
        user_id TEXT,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL
    );

    CREATE INDEX IF NOT EXISTS idx_aircraft_profiles_user_id ON aircraft_profiles(user_id);
    CREATE INDEX IF NOT EXISTS idx_calculations_user_id ON calculations(user_id);
    CREATE INDEX IF NOT EXISTS idx_calculations_profile_id ON calculations(aircraft_profile_id);
"""


class Database:
    """Owns the SQLite file (or in-memory store) behind the repositories.

    - File databases: every ``connection()`` opens a fresh connection.
    - ``:memory:``: one shared connection, serialized by a lock, since each
      new in-memory connection would be a separate empty database.
    """

    def __init__(self, path: str | Path = MEMORY):
        self._path = str(path)
        self._lock = threading.Lock()
        self._shared: sqlite3.Connection | None = None
        self._initialized = False

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def path(self) -> str:
        return self._path

    @property
    def is_memory(self) -> bool:
        return self._path == MEMORY

    @property
    def is_ready(self) -> bool:
        return self._initialized

    # ------------------------------------------------------------------
    # Connection
    # ------------------------------------------------------------------

    def _open(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """Yield a connection; commit on success, roll back on error."""
        if self.is_memory:
            with self._lock:
                if self._shared is None:
                    self._shared = self._open()
                with self._shared:
                    yield self._shared
            return

        conn = self._open()
        try:
            with conn:
                yield conn
        finally:
            conn.close()

    def close(self) -> None:
        if self._shared is not None:
            self._shared.close()
            self._shared = None
        self._initialized = False

    # ------------------------------------------------------------------
    # Schema
    # ------------------------------------------------------------------

    def init(self) -> None:
        """Create tables and indexes if they do not exist."""
        with self.connection() as conn:
            conn.executescript(_SCHEMA)
        self._initialized = True
        logger.info("Database initialized: %s", self._path)

    def require_ready(self) -> None:
        if not self._initialized:
            raise DatabaseNotReadyError(
                "Database schema not created. Call init() first."
            )

    # ------------------------------------------------------------------
    # Utility
    # ------------------------------------------------------------------

    def health_check(self) -> bool:
        try:
            with self.connection() as conn:
                conn.execute("SELECT 1").fetchone()
            return True
        except sqlite3.Error as exc:
            logger.error("Database health check failed: %s", exc)
            return False

    def get_stats(self) -> dict[str, int]:
        self.require_ready()
        with self.connection() as conn:
            profiles = conn.execute("SELECT COUNT(*) FROM aircraft_profiles").fetchone()[0]
            calculations = conn.execute("SELECT COUNT(*) FROM calculations").fetchone()[0]
        return {"profiles": profiles, "calculations": calculations}


# ------------------------------------------------------------------
# Process-wide instance
# ------------------------------------------------------------------

_database: Database | None = None


def get_database() -> Database:
    """Return the lazily created database at ``WBCALC_DB_PATH``."""
    global _database
    if _database is None:
        path = os.environ.get("WBCALC_DB_PATH", DEFAULT_DB_PATH)
        _database = Database(path)
        logger.info("Using SQLite database at %s", path)
    return _database


def _reset_database() -> None:
    """Reset the singleton (for testing only)."""
    global _database
    if _database is not None:
        _database.close()
    _database = None
