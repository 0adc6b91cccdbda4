"""Repository for saved calculations."""

from __future__ import annotations

import json
import sqlite3

from wbcalc.contracts.calculation import Calculation
from wbcalc.persistence.database import Database
from wbcalc.persistence.repositories.base import BaseRepository, utc_now

DEFAULT_LIST_LIMIT = 50

# Stored in their own columns, not in the JSON snapshot
_COLUMN_FIELDS = ("id", "aircraftProfileId", "timestamp", "userId")


class CalculationRepository(BaseRepository[Calculation]):
    """``calculations``: the whole snapshot as JSON text in ``calculation_data``.

    No update method: calculations are immutable once saved.
    """

    def __init__(self, db: Database):
        super().__init__(db, "calculations")

    def _from_row(self, row: sqlite3.Row) -> Calculation:
        data = json.loads(row["calculation_data"])
        data.update(
            id=row["id"],
            aircraftProfileId=row["aircraft_profile_id"],
            timestamp=row["created_at"],
            userId=row["user_id"],
        )
        return Calculation.from_record(data)

    def list_all(
        self, user_id: str | None = None, limit: int | None = DEFAULT_LIST_LIMIT
    ) -> list[Calculation]:
        return super().list_all(user_id, limit)

    def create(self, calculation: Calculation, user_id: str | None = None) -> Calculation:
        data = calculation.to_record()
        for key in _COLUMN_FIELDS:
            data.pop(key, None)

        now = utc_now()
        with self._db.connection() as conn:
            cursor = conn.execute(
                """
                INSERT INTO calculations
                    (name, aircraft_profile_id, calculation_data, user_id, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    calculation.name,
                    calculation.aircraft_profile_id,
                    json.dumps(data),
                    user_id or calculation.user_id,
                    now,
                    now,
                ),
            )
            record_id = cursor.lastrowid
        return self.get(record_id)

    def list_for_profile(self, profile_id: int) -> list[Calculation]:
        with self._db.connection() as conn:
            rows = conn.execute(
                "SELECT * FROM calculations WHERE aircraft_profile_id = ? "
                "ORDER BY created_at DESC, id DESC",
                (profile_id,),
            ).fetchall()
        return [self._from_row(row) for row in rows]
