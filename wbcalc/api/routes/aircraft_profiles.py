"""Aircraft profile CRUD endpoints."""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends, HTTPException

from wbcalc.api.deps import get_calculation_repo, get_profile_repo, get_user_id, parse_record_id
from wbcalc.contracts.aircraft import AircraftProfile, AircraftProfileUpdate
from wbcalc.contracts.result import ApiResponse
from wbcalc.persistence.errors import RecordNotFoundError
from wbcalc.persistence.repositories.calculation_repo import CalculationRepository
from wbcalc.persistence.repositories.profile_repo import ProfileRepository
from wbcalc.services.formula import validate_formula
from wbcalc.services.limits import validate_stations

router = APIRouter(prefix="/aircraft-profiles", tags=["aircraft-profiles"])


def _check_profile_inputs(profile: AircraftProfile | AircraftProfileUpdate) -> None:
    if profile.mac_config is not None:
        check = validate_formula(profile.mac_config.formula)
        if not check.is_valid:
            raise HTTPException(status_code=400, detail=f"Invalid MAC formula: {check.error}")
    if profile.stations is not None:
        check = validate_stations(profile.stations)
        if not check.is_valid:
            raise HTTPException(status_code=400, detail="; ".join(check.errors))


@router.get("")
async def list_profiles(
    user_id: str | None = Depends(get_user_id),
    repo: ProfileRepository = Depends(get_profile_repo),
) -> dict:
    items = await asyncio.to_thread(repo.list_all, user_id)
    return ApiResponse.ok([p.to_record() for p in items]).to_json()


@router.post("", status_code=201)
async def create_profile(
    profile: AircraftProfile,
    user_id: str | None = Depends(get_user_id),
    repo: ProfileRepository = Depends(get_profile_repo),
) -> dict:
    _check_profile_inputs(profile)
    created = await asyncio.to_thread(repo.create, profile, user_id)
    return ApiResponse.ok(created.to_record()).to_json()


@router.get("/{profile_id}")
async def get_profile(
    profile_id: str,
    repo: ProfileRepository = Depends(get_profile_repo),
) -> dict:
    record_id = parse_record_id(profile_id, "profile")
    item = await asyncio.to_thread(repo.get, record_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Aircraft profile not found")
    return ApiResponse.ok(item.to_record()).to_json()


@router.get("/{profile_id}/calculations")
async def list_profile_calculations(
    profile_id: str,
    repo: CalculationRepository = Depends(get_calculation_repo),
) -> dict:
    """Calculations saved from a profile, newest first.

    Still answers after the profile itself was deleted.
    """
    record_id = parse_record_id(profile_id, "profile")
    items = await asyncio.to_thread(repo.list_for_profile, record_id)
    return ApiResponse.ok([c.to_record() for c in items]).to_json()


@router.put("/{profile_id}")
async def update_profile(
    profile_id: str,
    changes: AircraftProfileUpdate,
    repo: ProfileRepository = Depends(get_profile_repo),
) -> dict:
    record_id = parse_record_id(profile_id, "profile")
    _check_profile_inputs(changes)
    try:
        updated = await asyncio.to_thread(repo.update, record_id, changes)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Aircraft profile not found") from None
    return ApiResponse.ok(updated.to_record()).to_json()


@router.delete("/{profile_id}")
async def delete_profile(
    profile_id: str,
    repo: ProfileRepository = Depends(get_profile_repo),
) -> dict:
    record_id = parse_record_id(profile_id, "profile")
    deleted = await asyncio.to_thread(repo.delete, record_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Aircraft profile not found")
    return ApiResponse.ok(message="Aircraft profile deleted successfully").to_json()
