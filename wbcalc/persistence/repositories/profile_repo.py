"""Repository for aircraft profiles."""

from __future__ import annotations

import json
import sqlite3

from wbcalc.contracts.aircraft import AircraftProfile, AircraftProfileUpdate, MacConfig, Station
from wbcalc.contracts.enums import UnitSystem
from wbcalc.persistence.database import Database
from wbcalc.persistence.errors import RecordNotFoundError
from wbcalc.persistence.repositories.base import BaseRepository, utc_now


def _dump_stations(stations: list[Station]) -> str:
    return json.dumps([s.to_record() for s in stations])


class ProfileRepository(BaseRepository[AircraftProfile]):
    """``aircraft_profiles``: MAC config in scalar columns, stations as JSON text."""

    def __init__(self, db: Database):
        super().__init__(db, "aircraft_profiles")

    def _from_row(self, row: sqlite3.Row) -> AircraftProfile:
        return AircraftProfile(
            id=row["id"],
            name=row["name"],
            description=row["description"] or "",
            mac_config=MacConfig(
                formula=row["mac_formula"],
                mac_min=row["mac_min"],
                mac_max=row["mac_max"],
            ),
            stations=json.loads(row["stations_data"]),
            unit=row["unit"],
            timestamp=row["created_at"],
            user_id=row["user_id"],
        )

    def create(self, profile: AircraftProfile, user_id: str | None = None) -> AircraftProfile:
        """Insert *profile* and return it as stored (with id and timestamp).

        *user_id* wins over ``profile.user_id``; both empty means shared.
        """
        now = utc_now()
        with self._db.connection() as conn:
            cursor = conn.execute(
                """
                INSERT INTO aircraft_profiles
                    (name, description, mac_formula, mac_min, mac_max,
                     stations_data, unit, user_id, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    profile.name,
                    profile.description,
                    profile.mac_config.formula,
                    profile.mac_config.mac_min,
                    profile.mac_config.mac_max,
                    _dump_stations(profile.stations),
                    UnitSystem(profile.unit).value,
                    user_id or profile.user_id,
                    now,
                    now,
                ),
            )
            record_id = cursor.lastrowid
        return self.get(record_id)

    def update(self, record_id: int, changes: AircraftProfileUpdate) -> AircraftProfile:
        """Apply the fields set on *changes*; raise if the profile is missing."""
        columns: dict[str, object] = {}
        if changes.name is not None:
            columns["name"] = changes.name
        if changes.description is not None:
            columns["description"] = changes.description
        if changes.mac_config is not None:
            columns["mac_formula"] = changes.mac_config.formula
            columns["mac_min"] = changes.mac_config.mac_min
            columns["mac_max"] = changes.mac_config.mac_max
        if changes.stations is not None:
            columns["stations_data"] = _dump_stations(changes.stations)
        if changes.unit is not None:
            columns["unit"] = UnitSystem(changes.unit).value
        columns["updated_at"] = utc_now()

        assignments = ", ".join(f"{name} = ?" for name in columns)
        with self._db.connection() as conn:
            cursor = conn.execute(
                f"UPDATE aircraft_profiles SET {assignments} WHERE id = ?",
                [*columns.values(), record_id],
            )
        if cursor.rowcount == 0:
            raise RecordNotFoundError(self._table, record_id)
        return self.get(record_id)
