"""Enumerations shared across all weight & balance contracts."""

from enum import Enum


class StationType(str, Enum):
    """Which aggregate configuration(s) a station's weight feeds."""
    BASIC = "basic"
    FUEL = "fuel"
    LANDING_FUEL = "landing_fuel"  # Estimate for LDW, not loaded weight
    CARGO = "cargo"


class UnitSystem(str, Enum):
    IMPERIAL = "imperial"
    METRIC = "metric"


class MeasureType(str, Enum):
    """Physical quantity handled by unit conversion."""
    WEIGHT = "weight"
    LENGTH = "length"
    MOMENT = "moment"
