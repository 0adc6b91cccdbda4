"""Unit conversion and display formatting (imperial lb/in <-> metric kg/m)."""

from __future__ import annotations

from wbcalc.contracts.aircraft import Station
from wbcalc.contracts.enums import MeasureType, UnitSystem

IN_TO_M = 0.0254
LB_TO_KG = 0.45359237
MOMENT_DIVISOR = 100  # Moments are displayed in hundreds (lb-in / 100)

_UNIT_LABELS = {
    UnitSystem.IMPERIAL: ("lb", "in"),
    UnitSystem.METRIC: ("kg", "m"),
}


def convert_units(
    value: float,
    from_unit: UnitSystem | str,
    to_unit: UnitSystem | str,
    measure: MeasureType | str,
) -> float:
    """Convert *value* between unit systems.

    Moments convert with the product of the weight and length factors.
    """
    from_unit = UnitSystem(from_unit)
    to_unit = UnitSystem(to_unit)
    measure = MeasureType(measure)
    if from_unit == to_unit:
        return value

    to_metric = from_unit == UnitSystem.IMPERIAL
    if measure == MeasureType.WEIGHT:
        factor = LB_TO_KG
    elif measure == MeasureType.LENGTH:
        factor = IN_TO_M
    else:
        factor = LB_TO_KG * IN_TO_M
    return value * factor if to_metric else value / factor


def convert_stations(
    stations: list[Station],
    from_unit: UnitSystem | str,
    to_unit: UnitSystem | str,
) -> list[Station]:
    """Return copies of *stations* with arms and weights in *to_unit*."""
    return [
        s.model_copy(update={
            "arm": convert_units(s.arm, from_unit, to_unit, MeasureType.LENGTH),
            "weight": convert_units(s.weight, from_unit, to_unit, MeasureType.WEIGHT),
        })
        for s in stations
    ]


def inches_from(length: float, unit: UnitSystem | str) -> float:
    """Express a length of the given unit system in inches."""
    return convert_units(length, unit, UnitSystem.IMPERIAL, MeasureType.LENGTH)


def format_weight(weight: float, unit: UnitSystem | str) -> str:
    label = _UNIT_LABELS[UnitSystem(unit)][0]
    return f"{weight:.1f} {label}"


def format_length(length: float, unit: UnitSystem | str) -> str:
    unit = UnitSystem(unit)
    label = _UNIT_LABELS[unit][1]
    decimals = 3 if unit == UnitSystem.IMPERIAL else 4
    return f"{length:.{decimals}f} {label}"


def format_moment(moment: float) -> str:
    return f"{moment / MOMENT_DIVISOR:.2f}"
