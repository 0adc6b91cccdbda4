"""Database initialization and health endpoints."""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends

from wbcalc.api.deps import get_db
from wbcalc.contracts.result import ApiResponse
from wbcalc.persistence.database import Database
from wbcalc.persistence.seed import initialize

router = APIRouter(tags=["system"])


@router.post("/init")
async def init_database(db: Database = Depends(get_db)) -> dict:
    """Create tables, seed the templates into an empty database, return counts."""
    stats = await asyncio.to_thread(initialize, db)
    return ApiResponse.ok(stats, message="Database initialized successfully").to_json()


@router.get("/health")
async def health(db: Database = Depends(get_db)) -> dict:
    healthy = await asyncio.to_thread(db.health_check)
    result: dict = {"status": "ok" if healthy else "degraded", "database": healthy}
    if healthy and db.is_ready:
        result.update(await asyncio.to_thread(db.get_stats))
    return ApiResponse.ok(result).to_json()
