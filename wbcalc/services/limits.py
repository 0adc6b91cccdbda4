"""Limit checks: %MAC envelope limits and station input validation."""

from __future__ import annotations

from wbcalc.contracts.aircraft import MacConfig, Station
from wbcalc.contracts.envelope import EnvelopeData, EnvelopePoint, InputCheck, LimitValidation

DEFAULT_MAX_STATION_WEIGHT = 20000


def _in_limits(point: EnvelopePoint, mac_config: MacConfig) -> bool:
    return mac_config.mac_min <= point.mac <= mac_config.mac_max


def validate_limits(envelope: EnvelopeData, mac_config: MacConfig) -> LimitValidation:
    """Check each configuration's %MAC against ``[mac_min, mac_max]`` (inclusive)."""
    zfw = _in_limits(envelope.zfw, mac_config)
    tow = _in_limits(envelope.tow, mac_config)
    ldw = _in_limits(envelope.ldw, mac_config)
    return LimitValidation(zfw=zfw, tow=tow, ldw=ldw, all_in_limits=zfw and tow and ldw)


def validate_weight(weight: float, max_weight: float = DEFAULT_MAX_STATION_WEIGHT) -> InputCheck:
    if weight < 0:
        return InputCheck(is_valid=False, errors=["Weight cannot be negative"])
    if weight > max_weight:
        return InputCheck(
            is_valid=False, errors=[f"Weight exceeds maximum allowed ({max_weight})"]
        )
    return InputCheck(is_valid=True)


def validate_stations(stations: list[Station]) -> InputCheck:
    """Check every station has a description and a unique id.

    Errors are numbered by position (1-based), not by station id.
    """
    errors: list[str] = []
    seen_ids: set[int] = set()
    for index, station in enumerate(stations, start=1):
        if not station.description.strip():
            errors.append(f"Station {index}: Description is required")
        if station.id in seen_ids:
            errors.append(f"Station {index}: Duplicate station id {station.id}")
        seen_ids.add(station.id)
    return InputCheck(is_valid=not errors, errors=errors)
