"""Fuel burn sequencing: tanks, time steps and the simulated sequence.

Calculated only; a sequence is never persisted.
"""

from pydantic import Field, computed_field

from wbcalc.contracts.common import RecordModel


class FuelTank(RecordModel):
    """A ``fuel`` station seen as a tank with a burn priority.

    Priority 1 is consumed first. Priorities are chosen by the user,
    not derived from the aircraft's fuel system.
    """

    station_id: int = Field(..., gt=0)
    name: str = ""
    total_fuel: float = Field(..., ge=0, description="Fuel on board at t=0")
    priority: int = Field(..., ge=1)


class FuelStep(RecordModel):
    """State of the aircraft at one point of the simulated flight."""

    time: float = Field(..., ge=0, description="Hours since departure")
    tanks: dict[int, float] = Field(
        default_factory=dict, description="Station id -> remaining fuel weight"
    )
    total_weight: float
    cg: float
    mac: float


class FuelSequence(RecordModel):
    """Time-ordered TOW trajectory over a flight.

    ``unburned_fuel`` is the part of the requested burn that could not be
    taken from the tanks because they ran dry.
    """

    steps: list[FuelStep] = Field(default_factory=list)
    requested_burn: float = 0.0
    unburned_fuel: float = 0.0

    @computed_field(alias="fuelShortfall")
    @property
    def fuel_shortfall(self) -> bool:
        return self.unburned_fuel > 0
