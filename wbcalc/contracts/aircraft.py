"""Aircraft profile: loading stations and %MAC configuration.

Stored in the ``aircraft_profiles`` table; stations are kept as JSON text
in ``stations_data`` and the MAC configuration in scalar columns.
"""

from datetime import datetime

from pydantic import Field, field_validator

from wbcalc.contracts.common import RecordModel
from wbcalc.contracts.enums import StationType, UnitSystem


class Station(RecordModel):
    """A weight-bearing position on the aircraft with a fixed arm.

    ``weight`` is the only field expected to change during interactive use.
    """

    id: int = Field(..., gt=0, description="Stable identifier within a profile")
    description: str = Field(default="", description="e.g. 'Pilot', 'Fuel Tank InBoard'")
    arm: float = Field(..., allow_inf_nan=False, description="Distance from datum")
    type: StationType = StationType.BASIC
    weight: float = Field(default=0.0, ge=0, allow_inf_nan=False)

    @field_validator("weight", mode="before")
    @classmethod
    def _missing_weight_is_zero(cls, value):
        return 0.0 if value is None else value

    @property
    def moment(self) -> float:
        return self.weight * self.arm


class MacConfig(RecordModel):
    """%MAC derivation contract: formula in ``CG`` plus the allowed interval."""

    formula: str = Field(..., min_length=1, description="e.g. '((CG - 35.0) / 14.9) * 100'")
    mac_min: float = Field(..., allow_inf_nan=False)
    mac_max: float = Field(..., allow_inf_nan=False)


class AircraftProfile(RecordModel):
    """Named bundle of stations, MAC configuration and unit system."""

    id: int | None = None
    name: str = Field(..., min_length=1, description="e.g. 'Cessna 172N'")
    description: str = ""
    mac_config: MacConfig
    stations: list[Station] = Field(default_factory=list)
    unit: UnitSystem = UnitSystem.IMPERIAL
    timestamp: datetime | None = None
    user_id: str | None = None

    @property
    def is_metric(self) -> bool:
        return self.unit == UnitSystem.METRIC


class AircraftProfileUpdate(RecordModel):
    """Partial update: only the fields present are changed."""

    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    mac_config: MacConfig | None = None
    stations: list[Station] | None = None
    unit: UnitSystem | None = None


class CargoItem(RecordModel):
    """A piece of cargo to spread over the free stations."""

    description: str = ""
    weight: float = Field(..., gt=0, allow_inf_nan=False)
    arm: float = Field(..., allow_inf_nan=False)
