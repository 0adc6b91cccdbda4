"""Generic SQLite repository for user-scoped tables."""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from typing import Generic, TypeVar

from wbcalc.contracts.common import RecordModel
from wbcalc.persistence.database import Database

T = TypeVar("T", bound=RecordModel)


def utc_now() -> str:
    return datetime.now(tz=timezone.utc).isoformat()


class BaseRepository(Generic[T]):
    """Read and delete operations shared by every table.

    Rows owned by a user are visible to that user; rows with a NULL
    ``user_id`` are shared and visible to everyone. Subclasses map rows
    to contracts in ``_from_row()`` and implement their own writes.
    """

    def __init__(self, db: Database, table: str):
        self._db = db
        self._table = table

    @property
    def table(self) -> str:
        return self._table

    def _from_row(self, row: sqlite3.Row) -> T:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get(self, record_id: int) -> T | None:
        """Fetch a single row by ID. Returns *None* if missing."""
        with self._db.connection() as conn:
            row = conn.execute(
                f"SELECT * FROM {self._table} WHERE id = ?", (record_id,)
            ).fetchone()
        return self._from_row(row) if row is not None else None

    def list_all(self, user_id: str | None = None, limit: int | None = None) -> list[T]:
        """Rows owned by *user_id* plus shared rows, newest first.

        Without a user only shared rows are returned.
        """
        if user_id:
            sql = f"SELECT * FROM {self._table} WHERE user_id = ? OR user_id IS NULL"
            params: list = [user_id]
        else:
            sql = f"SELECT * FROM {self._table} WHERE user_id IS NULL"
            params = []
        sql += " ORDER BY created_at DESC, id DESC"
        if limit is not None:
            sql += " LIMIT ?"
            params.append(limit)

        with self._db.connection() as conn:
            rows = conn.execute(sql, params).fetchall()
        return [self._from_row(row) for row in rows]

    def count(self) -> int:
        with self._db.connection() as conn:
            return conn.execute(f"SELECT COUNT(*) FROM {self._table}").fetchone()[0]

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def delete(self, record_id: int) -> bool:
        """Delete a row. Returns *False* if it did not exist."""
        with self._db.connection() as conn:
            cursor = conn.execute(f"DELETE FROM {self._table} WHERE id = ?", (record_id,))
        return cursor.rowcount > 0
