"""Shared fixtures: an in-memory database and the Cessna 172N loading."""

from __future__ import annotations

import pytest

from wbcalc.contracts.aircraft import MacConfig, Station
from wbcalc.persistence.database import Database


@pytest.fixture
def db():
    """Fresh in-memory SQLite database with the schema created."""
    database = Database()
    database.init()
    yield database
    database.close()


@pytest.fixture
def cessna_mac() -> MacConfig:
    return MacConfig(formula="((CG - 35.0) / 14.9) * 100", mac_min=15, mac_max=38)


@pytest.fixture
def cessna_stations() -> list[Station]:
    """Cessna 172N with 1500 lb empty weight and 300 lb of fuel."""
    return [
        Station(id=1, description="Empty Weight", arm=39.0, type="basic", weight=1500),
        Station(id=2, description="Pilot", arm=37.0, type="basic"),
        Station(id=3, description="Passenger", arm=37.0, type="basic"),
        Station(id=4, description="Rear Passenger", arm=73.0, type="basic"),
        Station(id=5, description="Baggage Area 1", arm=95.0, type="basic"),
        Station(id=6, description="Baggage Area 2", arm=123.0, type="basic"),
        Station(id=7, description="Fuel", arm=48.0, type="fuel", weight=300),
        Station(id=8, description="Oil", arm=32.0, type="basic"),
    ]
