"""FastAPI dependency injection wiring."""

from __future__ import annotations

from fastapi import Depends, HTTPException, Query

from wbcalc.persistence import database
from wbcalc.persistence.database import Database
from wbcalc.persistence.repositories.calculation_repo import CalculationRepository
from wbcalc.persistence.repositories.profile_repo import ProfileRepository


# ------------------------------------------------------------------
# Current user
# ------------------------------------------------------------------


def get_user_id(
    user_id: str | None = Query(None, alias="userId", description="Owning user, if any"),
) -> str | None:
    """Return the requesting user ID; ``None`` means shared records only."""
    return user_id or None


# ------------------------------------------------------------------
# Database and repositories (stateless, new instance per request)
# ------------------------------------------------------------------


def get_db() -> Database:
    return database.get_database()


def get_profile_repo(db: Database = Depends(get_db)) -> ProfileRepository:
    return ProfileRepository(db)


def get_calculation_repo(db: Database = Depends(get_db)) -> CalculationRepository:
    return CalculationRepository(db)


# ------------------------------------------------------------------
# Path helpers
# ------------------------------------------------------------------


def parse_record_id(raw: str, label: str) -> int:
    """Parse a numeric path ID, answering 400 when it is not one."""
    try:
        record_id = int(raw)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid {label} ID") from None
    if record_id <= 0:
        raise HTTPException(status_code=400, detail=f"Invalid {label} ID")
    return record_id
