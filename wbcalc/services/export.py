"""Export document and saved-calculation construction."""

from __future__ import annotations

import re
from datetime import datetime, timezone

from wbcalc.contracts.aircraft import AircraftProfile, MacConfig, Station
from wbcalc.contracts.calculation import (
    Calculation,
    CalculationSummary,
    ExportDocument,
    SummaryData,
)
from wbcalc.contracts.enums import UnitSystem
from wbcalc.contracts.envelope import EnvelopeData, EnvelopePoint, MassSummary
from wbcalc.services.envelope import calculate_envelope_data, calculate_summaries
from wbcalc.services.limits import validate_limits
from wbcalc.services.units import format_length, format_weight


def loaded_stations(stations: list[Station]) -> list[Station]:
    return [s for s in stations if s.weight > 0]


def build_export_document(
    profile_name: str,
    stations: list[Station],
    mac_config: MacConfig,
    unit: UnitSystem | str = UnitSystem.IMPERIAL,
    now: datetime | None = None,
) -> ExportDocument:
    """Run the full pipeline and package it for download.

    Summaries and envelope are computed on all stations; only stations
    carrying weight are listed.
    """
    unit = UnitSystem(unit)
    envelope = calculate_envelope_data(stations, mac_config, unit == UnitSystem.METRIC)
    return ExportDocument(
        profile_name=profile_name,
        timestamp=now or datetime.now(tz=timezone.utc),
        unit=unit,
        mac_config=mac_config,
        stations=loaded_stations(stations),
        summaries=calculate_summaries(stations),
        envelope_data=envelope,
        validation=validate_limits(envelope, mac_config),
    )


def export_filename(profile_name: str, now: datetime | None = None) -> str:
    """e.g. ``weight-balance-Cessna-172N-2026-03-15.json``"""
    now = now or datetime.now(tz=timezone.utc)
    slug = re.sub(r"\s+", "-", profile_name)
    return f"weight-balance-{slug}-{now.date().isoformat()}.json"


def _summary_data(mass: MassSummary, point: EnvelopePoint, unit: UnitSystem) -> SummaryData:
    return SummaryData(weight=format_weight(mass.weight, unit), cg=format_length(point.cg, unit))


def summarize(
    stations: list[Station],
    envelope: EnvelopeData,
    unit: UnitSystem | str,
) -> CalculationSummary:
    unit = UnitSystem(unit)
    summaries = calculate_summaries(stations)
    return CalculationSummary(
        zfw=_summary_data(summaries.zfw, envelope.zfw, unit),
        tow=_summary_data(summaries.tow, envelope.tow, unit),
        ldw=_summary_data(summaries.ldw, envelope.ldw, unit),
    )


def build_calculation(
    profile: AircraftProfile,
    name: str | None = None,
    now: datetime | None = None,
) -> Calculation:
    """Snapshot *profile*'s current loading as a ``Calculation``.

    The default name is the profile name plus the date.
    """
    now = now or datetime.now(tz=timezone.utc)
    envelope = calculate_envelope_data(profile.stations, profile.mac_config, profile.is_metric)
    return Calculation(
        name=name or f"{profile.name} - {now.date().isoformat()}",
        aircraft_profile_id=profile.id,
        stations=loaded_stations(profile.stations),
        mac_config=profile.mac_config,
        unit=profile.unit,
        summary=summarize(profile.stations, envelope, profile.unit),
        timestamp=now,
        user_id=profile.user_id,
    )
