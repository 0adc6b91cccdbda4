"""Station list edits: cargo items, renames and fuel states.

Every function returns a new station list; the input list is untouched.
"""

from __future__ import annotations

from wbcalc.contracts.aircraft import CargoItem, Station
from wbcalc.contracts.enums import StationType
from wbcalc.contracts.fuel import FuelStep, FuelTank
from wbcalc.services.limits import validate_weight


def next_station_id(stations: list[Station]) -> int:
    return max((s.id for s in stations), default=0) + 1


def add_cargo_station(
    stations: list[Station], description: str, weight: float, arm: float
) -> list[Station]:
    """Append a ``cargo`` station with the next free id.

    Raises ``ValueError`` for an empty description, a non-positive arm or
    an invalid weight.
    """
    if not description.strip():
        raise ValueError("Cargo description is required")
    if weight <= 0:
        raise ValueError("Cargo weight must be positive")
    if arm <= 0:
        raise ValueError("Cargo arm must be positive")
    check = validate_weight(weight)
    if not check.is_valid:
        raise ValueError(check.errors[0])

    station = Station(
        id=next_station_id(stations),
        description=description,
        arm=arm,
        type=StationType.CARGO,
        weight=weight,
    )
    return [*stations, station]


def remove_station(stations: list[Station], station_id: int) -> list[Station]:
    return [s for s in stations if s.id != station_id]


def rename_station(stations: list[Station], station_id: int, description: str) -> list[Station]:
    if not description.strip():
        raise ValueError("Station name cannot be empty")
    return [
        s.model_copy(update={"description": description}) if s.id == station_id else s
        for s in stations
    ]


def clear_cargo(stations: list[Station]) -> list[Station]:
    """Unload every cargo station and turn it back into an empty ``basic`` one."""
    return [
        s.model_copy(update={"type": StationType.BASIC, "weight": 0.0})
        if s.type == StationType.CARGO
        else s
        for s in stations
    ]


def distribute_cargo(stations: list[Station], items: list[CargoItem]) -> list[Station]:
    """Spread the total weight of *items* evenly over free stations.

    Free stations are empty ``basic`` or ``cargo`` stations, taken in order,
    one per item at most. Each receives an equal share and becomes ``cargo``.
    Raises ``ValueError`` when there is nothing to distribute or nowhere to
    put it.
    """
    if not items:
        raise ValueError("No cargo items to distribute")

    free = [
        s.id for s in stations
        if s.type in (StationType.BASIC, StationType.CARGO) and s.weight == 0
    ][: len(items)]
    if not free:
        raise ValueError("No cargo stations available")

    share = sum(item.weight for item in items) / len(free)
    return [
        s.model_copy(update={"weight": share, "type": StationType.CARGO}) if s.id in free else s
        for s in stations
    ]


def apply_fuel_step(stations: list[Station], step: FuelStep) -> list[Station]:
    """Load the fuel quantities of a simulated step back onto the stations."""
    return [
        s.model_copy(update={"weight": step.tanks[s.id]})
        if s.type == StationType.FUEL and s.id in step.tanks
        else s
        for s in stations
    ]


def reset_fuel(stations: list[Station], fuel_tanks: list[FuelTank]) -> list[Station]:
    """Restore each tank's initial (full) fuel on its station."""
    full = {tank.station_id: tank.total_fuel for tank in fuel_tanks}
    return [
        s.model_copy(update={"weight": full[s.id]}) if s.id in full else s
        for s in stations
    ]
