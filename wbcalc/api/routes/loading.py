"""Station list edits: cargo, renames and removals.

Stateless like the engine endpoints: the client sends its current
stations and gets the edited list back.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException
from pydantic import Field

from wbcalc.contracts.aircraft import CargoItem, Station
from wbcalc.contracts.common import RecordModel
from wbcalc.contracts.result import ApiResponse
from wbcalc.services.loading import (
    add_cargo_station,
    clear_cargo,
    distribute_cargo,
    remove_station,
    rename_station,
)

router = APIRouter(prefix="/loading", tags=["loading"])


class StationsRequest(RecordModel):
    stations: list[Station] = Field(default_factory=list)


class AddCargoRequest(StationsRequest):
    description: str
    weight: float
    arm: float


class DistributeCargoRequest(StationsRequest):
    items: list[CargoItem]


class RenameRequest(StationsRequest):
    description: str


def _stations_response(stations: list[Station]) -> dict:
    return ApiResponse.ok([s.to_record() for s in stations]).to_json()


@router.post("/cargo")
async def add_cargo(request: AddCargoRequest) -> dict:
    try:
        stations = add_cargo_station(
            request.stations, request.description, request.weight, request.arm
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from None
    return _stations_response(stations)


@router.post("/cargo/distribute")
async def distribute(request: DistributeCargoRequest) -> dict:
    try:
        stations = distribute_cargo(request.stations, request.items)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from None
    return _stations_response(stations)


@router.post("/cargo/clear")
async def clear(request: StationsRequest) -> dict:
    return _stations_response(clear_cargo(request.stations))


@router.post("/stations/{station_id}/rename")
async def rename(station_id: int, request: RenameRequest) -> dict:
    if station_id not in {s.id for s in request.stations}:
        raise HTTPException(status_code=404, detail="Station not found")
    try:
        stations = rename_station(request.stations, station_id, request.description)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from None
    return _stations_response(stations)


@router.post("/stations/{station_id}/remove")
async def remove(station_id: int, request: StationsRequest) -> dict:
    if station_id not in {s.id for s in request.stations}:
        raise HTTPException(status_code=404, detail="Station not found")
    return _stations_response(remove_station(request.stations, station_id))
