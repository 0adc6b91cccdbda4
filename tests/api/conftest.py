"""Shared fixtures for API tests."""

from __future__ import annotations

import httpx
import pytest

from wbcalc.api.app import app
from wbcalc.api.deps import get_db

CESSNA_MAC = {"formula": "((CG - 35.0) / 14.9) * 100", "macMin": 15, "macMax": 38}


@pytest.fixture
def test_app(db):
    """FastAPI app bound to the in-memory test database."""
    app.dependency_overrides[get_db] = lambda: db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(test_app):
    """httpx AsyncClient wired to the test app."""
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def cessna_payload():
    return {
        "name": "Cessna 172N",
        "description": "Club aircraft",
        "macConfig": CESSNA_MAC,
        "stations": [
            {"id": 1, "description": "Empty Weight", "arm": 39.0, "type": "basic", "weight": 1500},
            {"id": 2, "description": "Pilot", "arm": 37.0, "type": "basic", "weight": 0},
            {"id": 7, "description": "Fuel", "arm": 48.0, "type": "fuel", "weight": 300},
        ],
        "unit": "imperial",
    }
