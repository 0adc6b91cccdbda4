"""Saved calculation: a snapshot of station weights and the resulting summary.

Stored in the ``calculations`` table as JSON text in ``calculation_data``.
Immutable once created; only deletion is supported. ``ExportDocument``
is the downloadable JSON form and is never stored.

``aircraft_profile_id`` is a weak back-reference: deleting the profile
leaves the calculation in place.
"""

from datetime import datetime

from pydantic import Field

from wbcalc.contracts.aircraft import MacConfig, Station
from wbcalc.contracts.common import RecordModel
from wbcalc.contracts.enums import UnitSystem
from wbcalc.contracts.envelope import EnvelopeData, LimitValidation, Summaries


class SummaryData(RecordModel):
    """Display-formatted weight and CG of one configuration."""

    weight: str = Field(..., description="e.g. '1500.0 lb'")
    cg: str = Field(..., description="e.g. '39.000 in'")


class CalculationSummary(RecordModel):
    zfw: SummaryData
    tow: SummaryData
    ldw: SummaryData


class Calculation(RecordModel):
    id: int | None = None
    name: str = Field(..., min_length=1)
    aircraft_profile_id: int | None = None
    stations: list[Station]
    mac_config: MacConfig
    unit: UnitSystem = UnitSystem.IMPERIAL
    summary: CalculationSummary
    timestamp: datetime | None = None
    user_id: str | None = None


class ExportDocument(RecordModel):
    """JSON export of a calculation, loaded stations only."""

    profile_name: str
    timestamp: datetime
    unit: UnitSystem
    mac_config: MacConfig
    stations: list[Station]
    summaries: Summaries
    envelope_data: EnvelopeData
    validation: LimitValidation
