"""Weight & balance data contracts - Pydantic v2 models.

Data authority
--------------

**SQLite** (source of truth for user-owned data):
- ``AircraftProfile`` - ``aircraft_profiles`` table, stations as JSON text
- ``Calculation`` - ``calculations`` table, snapshot as JSON text

**Static seed data**:
- Built-in aircraft templates (Cessna 172N, Piper PA-28, Airbus A319)

Calculated (never persisted)
----------------------------
- ``Summaries`` - ZFW / TOW / LDW weight and moment aggregates
- ``EnvelopeData`` - CG and %MAC per configuration
- ``LimitValidation`` - %MAC limit check results
- ``FuelSequence`` - simulated fuel burn trajectory
"""

from wbcalc.contracts.enums import MeasureType, StationType, UnitSystem
from wbcalc.contracts.common import RecordModel
from wbcalc.contracts.result import ApiResponse
from wbcalc.contracts.aircraft import (
    AircraftProfile,
    AircraftProfileUpdate,
    CargoItem,
    MacConfig,
    Station,
)
from wbcalc.contracts.envelope import (
    EnvelopeData,
    EnvelopePoint,
    FormulaCheck,
    InputCheck,
    LimitValidation,
    MassSummary,
    Summaries,
    Totals,
)
from wbcalc.contracts.fuel import FuelSequence, FuelStep, FuelTank
from wbcalc.contracts.calculation import (
    Calculation,
    CalculationSummary,
    ExportDocument,
    SummaryData,
)

__all__ = [
    # Enums
    "MeasureType",
    "StationType",
    "UnitSystem",
    # Common
    "RecordModel",
    # Result
    "ApiResponse",
    # Domain models
    "AircraftProfile",
    "AircraftProfileUpdate",
    "CargoItem",
    "MacConfig",
    "Station",
    "Calculation",
    "CalculationSummary",
    "ExportDocument",
    "SummaryData",
    # Calculated
    "EnvelopeData",
    "EnvelopePoint",
    "FormulaCheck",
    "InputCheck",
    "LimitValidation",
    "MassSummary",
    "Summaries",
    "Totals",
    "FuelSequence",
    "FuelStep",
    "FuelTank",
]
