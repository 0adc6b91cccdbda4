"""Calculation endpoints: envelope, formula checks, fuel sequence, export, templates.

Stateless: every request carries the stations and MAC configuration it
needs; nothing is read from or written to the database.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, HTTPException
from pydantic import Field

from wbcalc.contracts.aircraft import MacConfig, Station
from wbcalc.contracts.common import RecordModel
from wbcalc.contracts.enums import UnitSystem
from wbcalc.contracts.fuel import FuelStep, FuelTank
from wbcalc.contracts.result import ApiResponse
from wbcalc.services.envelope import calculate_envelope_data, calculate_summaries
from wbcalc.services.export import build_export_document, export_filename
from wbcalc.services.formula import solve_cg_from_mac, validate_formula
from wbcalc.services.fuel_sequence import fuel_tanks_from_stations, simulate_fuel_sequence
from wbcalc.services.limits import validate_limits
from wbcalc.services.loading import apply_fuel_step, reset_fuel
from wbcalc.services.templates import AIRCRAFT_TEMPLATES

router = APIRouter(tags=["engine"])


class LoadingRequest(RecordModel):
    stations: list[Station] = Field(default_factory=list)
    mac_config: MacConfig
    unit: UnitSystem = UnitSystem.IMPERIAL

    @property
    def is_metric(self) -> bool:
        return self.unit == UnitSystem.METRIC


class FormulaRequest(RecordModel):
    formula: str


class SolveRequest(RecordModel):
    mac_percent: float
    mac_config: MacConfig


class FuelSequenceRequest(LoadingRequest):
    """Fuel burn simulation input.

    ``priorities`` maps station id -> priority (1 burns first); stations
    not listed keep their order among the fuel stations.
    """

    flight_time_hours: float = Field(..., ge=0, le=24)
    burn_rate_per_hour: float = Field(..., ge=0)
    priorities: dict[int, Annotated[int, Field(ge=1)]] | None = None


class FuelStepRequest(RecordModel):
    stations: list[Station]
    step: FuelStep


class FuelResetRequest(RecordModel):
    stations: list[Station]
    tanks: list[FuelTank]


class ExportRequest(LoadingRequest):
    profile_name: str = Field(..., min_length=1)


@router.get("/templates")
async def list_templates() -> dict:
    return ApiResponse.ok(
        {key: template.to_record() for key, template in AIRCRAFT_TEMPLATES.items()}
    ).to_json()


@router.post("/envelope")
async def compute_envelope(request: LoadingRequest) -> dict:
    """Summaries, CG / %MAC envelope and limit validation for a loading."""
    envelope = calculate_envelope_data(request.stations, request.mac_config, request.is_metric)
    validation = validate_limits(envelope, request.mac_config)
    return ApiResponse.ok({
        "summaries": calculate_summaries(request.stations).to_record(),
        "envelopeData": envelope.to_record(),
        "validation": validation.to_record(),
    }).to_json()


@router.post("/formula/validate")
async def check_formula(request: FormulaRequest) -> dict:
    return ApiResponse.ok(validate_formula(request.formula).to_record()).to_json()


@router.post("/formula/solve")
async def solve_formula(request: SolveRequest) -> dict:
    """CG for a target %MAC; ``cg`` is null when the formula cannot be inverted."""
    cg = solve_cg_from_mac(request.mac_percent, request.mac_config)
    return ApiResponse.ok({"cg": cg}).to_json()


@router.post("/fuel-sequence")
async def fuel_sequence(request: FuelSequenceRequest) -> dict:
    tanks = fuel_tanks_from_stations(request.stations, request.priorities)
    if not tanks:
        raise HTTPException(status_code=400, detail="No fuel tanks configured")
    sequence = simulate_fuel_sequence(
        request.stations,
        tanks,
        request.flight_time_hours,
        request.burn_rate_per_hour,
        request.mac_config,
        request.is_metric,
    )
    return ApiResponse.ok(sequence.to_record()).to_json()


@router.post("/fuel-sequence/apply")
async def apply_step(request: FuelStepRequest) -> dict:
    """Stations with the fuel quantities of a simulated step loaded."""
    stations = apply_fuel_step(request.stations, request.step)
    return ApiResponse.ok([s.to_record() for s in stations]).to_json()


@router.post("/fuel-sequence/reset")
async def reset_tanks(request: FuelResetRequest) -> dict:
    """Stations with every tank back to its initial fuel."""
    stations = reset_fuel(request.stations, request.tanks)
    return ApiResponse.ok([s.to_record() for s in stations]).to_json()


@router.post("/export")
async def export_json(request: ExportRequest) -> dict:
    document = build_export_document(
        request.profile_name, request.stations, request.mac_config, request.unit
    )
    return ApiResponse.ok({
        "filename": export_filename(request.profile_name, document.timestamp),
        "document": document.to_record(),
    }).to_json()
