"""Fuel burn sequencing: TOW CG / %MAC trajectory over a flight.

Fuel is burned at a constant rate, tank by tank in ascending priority
order (each tank drained before the next). Every 15 minutes the station
list is re-snapshotted with the tanks' remaining fuel and run through the
envelope engine.
"""

from __future__ import annotations

import logging
import math

from wbcalc.contracts.aircraft import MacConfig, Station
from wbcalc.contracts.enums import StationType
from wbcalc.contracts.fuel import FuelSequence, FuelStep, FuelTank
from wbcalc.services.envelope import calculate_envelope_data

logger = logging.getLogger(__name__)

TIME_STEP_HOURS = 0.25
_EPSILON = 1e-9


def fuel_tanks_from_stations(
    stations: list[Station],
    priorities: dict[int, int] | None = None,
) -> list[FuelTank]:
    """One tank per ``fuel`` station, loaded with the station's weight.

    Priorities default to the stations' order (1, 2, ...); *priorities*
    overrides them by station id.
    """
    priorities = priorities or {}
    fuel_stations = [s for s in stations if s.type == StationType.FUEL]
    return [
        FuelTank(
            station_id=station.id,
            name=station.description,
            total_fuel=station.weight,
            priority=priorities.get(station.id, index),
        )
        for index, station in enumerate(fuel_stations, start=1)
    ]


def step_times(flight_time_hours: float) -> list[float]:
    """0, 0.25, 0.5, ... up to *flight_time_hours*.

    A flight time that is not a multiple of the step gets a final,
    shorter interval ending exactly at *flight_time_hours*.
    """
    full_steps = int(math.floor(flight_time_hours / TIME_STEP_HOURS + _EPSILON))
    times = [i * TIME_STEP_HOURS for i in range(full_steps + 1)]
    if flight_time_hours - times[-1] > _EPSILON:
        times.append(flight_time_hours)
    return times


def _drain(remaining: list[float], amount: float) -> None:
    """Take *amount* from the tanks in order, each emptied before the next."""
    for i, fuel in enumerate(remaining):
        if amount <= 0:
            break
        burned = min(fuel, amount)
        remaining[i] = fuel - burned
        amount -= burned


def simulate_fuel_sequence(
    stations: list[Station],
    fuel_tanks: list[FuelTank],
    flight_time_hours: float,
    burn_rate_per_hour: float,
    mac_config: MacConfig,
    is_metric: bool = False,
) -> FuelSequence:
    """Simulate the flight and return one step per interval.

    The t=0 step is the full-fuel state. The sequence stops early once the
    requested burn (``flight_time_hours * burn_rate_per_hour``) has been
    taken or every tank is empty; in the latter case the missing fuel is
    reported as ``unburned_fuel``.
    """
    if flight_time_hours < 0 or burn_rate_per_hour < 0:
        raise ValueError("Flight time and burn rate must be non-negative")

    ordered = sorted(fuel_tanks, key=lambda tank: tank.priority)
    remaining = [tank.total_fuel for tank in ordered]
    requested_burn = flight_time_hours * burn_rate_per_hour
    remaining_to_burn = requested_burn

    steps: list[FuelStep] = []
    previous_time = 0.0
    for time in step_times(flight_time_hours):
        burn_this_step = min(remaining_to_burn, burn_rate_per_hour * (time - previous_time))
        previous_time = time
        _drain(remaining, burn_this_step)
        remaining_to_burn -= burn_this_step

        levels = {tank.station_id: fuel for tank, fuel in zip(ordered, remaining)}
        snapshot = [
            s.model_copy(update={"weight": levels[s.id]})
            if s.type == StationType.FUEL and s.id in levels
            else s
            for s in stations
        ]
        envelope = calculate_envelope_data(snapshot, mac_config, is_metric)
        steps.append(FuelStep(
            time=time,
            tanks=levels,
            total_weight=envelope.tow.weight,
            cg=envelope.tow.cg,
            mac=envelope.tow.mac,
        ))

        if remaining_to_burn <= _EPSILON or not any(fuel > 0 for fuel in remaining):
            break

    burned = sum(tank.total_fuel for tank in ordered) - sum(remaining)
    unburned = requested_burn - burned
    if unburned <= _EPSILON:
        unburned = 0.0
    else:
        logger.warning(
            "Fuel shortfall: %.1f requested, %.1f available in tanks",
            requested_burn, burned,
        )

    return FuelSequence(steps=steps, requested_burn=requested_burn, unburned_fuel=unburned)
