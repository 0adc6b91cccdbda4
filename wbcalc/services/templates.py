"""Built-in aircraft templates, seeded into an empty database.

Arms in inches, weights in pounds; MAC formulas in inches.
"""

from __future__ import annotations

from wbcalc.contracts.aircraft import AircraftProfile, MacConfig, Station
from wbcalc.contracts.enums import StationType, UnitSystem

B = StationType.BASIC
F = StationType.FUEL
C = StationType.CARGO
LF = StationType.LANDING_FUEL


def _stations(rows: list[tuple[str, float, StationType, float]]) -> list[Station]:
    return [
        Station(id=i, description=desc, arm=arm, type=kind, weight=weight)
        for i, (desc, arm, kind, weight) in enumerate(rows, start=1)
    ]


AIRCRAFT_TEMPLATES: dict[str, AircraftProfile] = {
    "cessna172": AircraftProfile(
        name="Cessna 172N",
        description="Standard Cessna 172N configuration",
        mac_config=MacConfig(formula="((CG - 35.0) / 14.9) * 100", mac_min=15, mac_max=38),
        stations=_stations([
            ("Empty Weight", 39.0, B, 1500),
            ("Pilot", 37.0, B, 0),
            ("Passenger", 37.0, B, 0),
            ("Rear Passenger", 73.0, B, 0),
            ("Baggage Area 1", 95.0, B, 0),
            ("Baggage Area 2", 123.0, B, 0),
            ("Fuel", 48.0, F, 0),
            ("Oil", 32.0, B, 0),
        ]),
        unit=UnitSystem.IMPERIAL,
    ),
    "piper28": AircraftProfile(
        name="Piper PA-28",
        description="Standard Piper PA-28 Cherokee configuration",
        mac_config=MacConfig(formula="((CG - 86.0) / 13.2) * 100", mac_min=17, mac_max=35),
        stations=_stations([
            ("Empty Weight", 88.8, B, 1340),
            ("Front Seats", 85.5, B, 0),
            ("Rear Seats", 118.1, B, 0),
            ("Baggage", 142.8, B, 0),
            ("Fuel", 95.0, F, 0),
            ("Oil", 75.0, B, 0),
        ]),
        unit=UnitSystem.IMPERIAL,
    ),
    "airbus319": AircraftProfile(
        name="Airbus A319",
        description="Standard Airbus A319 configuration",
        mac_config=MacConfig(formula="20 + ((CG - 232.28) / 86.22) * 100", mac_min=16, mac_max=30),
        stations=_stations([
            ("Basic Aircraft", 236.6, B, 0),
            ("Crew (2)", 80.7, B, 0),
            ("Crew's Baggage", 140.0, B, 0),
            ("Steward's Equipment", 140.0, B, 0),
            ("Emergency Equipment", 150.0, B, 0),
            ("Extra Equipment", 150.0, B, 0),
            ("Potable Water", 240.0, B, 0),
            ("Cargo", 460.0, C, 0),
            ("Other", 0.0, B, 0),
            ("Other", 0.0, B, 0),
            ("Fuel Tank InBoard", 246.5, F, 0),
            ("Fuel Tank OutBoard", 246.5, F, 0),
            ("Landing Fuel (Est.)", 246.5, LF, 0),
        ]),
        unit=UnitSystem.IMPERIAL,
    ),
}


def get_template(key: str) -> AircraftProfile | None:
    """Return a fresh copy of a template (callers may modify it)."""
    template = AIRCRAFT_TEMPLATES.get(key)
    return template.model_copy(deep=True) if template is not None else None
