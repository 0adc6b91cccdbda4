"""Saved calculation endpoints (create, list, get, delete; no update)."""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import Field

from wbcalc.api.deps import get_calculation_repo, get_user_id, parse_record_id
from wbcalc.contracts.aircraft import AircraftProfile, MacConfig, Station
from wbcalc.contracts.calculation import CalculationSummary
from wbcalc.contracts.common import RecordModel
from wbcalc.contracts.enums import UnitSystem
from wbcalc.contracts.result import ApiResponse
from wbcalc.persistence.repositories.calculation_repo import (
    DEFAULT_LIST_LIMIT,
    CalculationRepository,
)
from wbcalc.services.export import build_calculation

router = APIRouter(prefix="/calculations", tags=["calculations"])


class CalculationCreate(RecordModel):
    """A calculation to save; the summary is computed when omitted.

    Only stations carrying weight are kept in the snapshot.
    """

    name: str = Field(..., min_length=1)
    aircraft_profile_id: int | None = None
    stations: list[Station]
    mac_config: MacConfig
    unit: UnitSystem = UnitSystem.IMPERIAL
    summary: CalculationSummary | None = None


@router.get("")
async def list_calculations(
    limit: int = Query(DEFAULT_LIST_LIMIT, ge=1, le=500),
    user_id: str | None = Depends(get_user_id),
    repo: CalculationRepository = Depends(get_calculation_repo),
) -> dict:
    items = await asyncio.to_thread(repo.list_all, user_id, limit)
    return ApiResponse.ok([c.to_record() for c in items]).to_json()


@router.post("", status_code=201)
async def create_calculation(
    request: CalculationCreate,
    user_id: str | None = Depends(get_user_id),
    repo: CalculationRepository = Depends(get_calculation_repo),
) -> dict:
    loading = AircraftProfile(
        id=request.aircraft_profile_id,
        name=request.name,
        mac_config=request.mac_config,
        stations=request.stations,
        unit=request.unit,
    )
    calculation = build_calculation(loading, name=request.name)
    if request.summary is not None:
        calculation.summary = request.summary
    created = await asyncio.to_thread(repo.create, calculation, user_id)
    return ApiResponse.ok(created.to_record()).to_json()


@router.get("/{calculation_id}")
async def get_calculation(
    calculation_id: str,
    repo: CalculationRepository = Depends(get_calculation_repo),
) -> dict:
    record_id = parse_record_id(calculation_id, "calculation")
    item = await asyncio.to_thread(repo.get, record_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Calculation not found")
    return ApiResponse.ok(item.to_record()).to_json()


@router.delete("/{calculation_id}")
async def delete_calculation(
    calculation_id: str,
    repo: CalculationRepository = Depends(get_calculation_repo),
) -> dict:
    record_id = parse_record_id(calculation_id, "calculation")
    deleted = await asyncio.to_thread(repo.delete, record_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Calculation not found")
    return ApiResponse.ok(message="Calculation deleted successfully").to_json()
