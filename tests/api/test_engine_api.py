"""Tests for the stateless calculation endpoints."""

from __future__ import annotations

import pytest

CESSNA_MAC = {"formula": "((CG - 35.0) / 14.9) * 100", "macMin": 15, "macMax": 38}
A319_MAC = {"formula": "20 + ((CG - 232.28) / 86.22) * 100", "macMin": 16, "macMax": 30}


class TestTemplatesAPI:
    async def test_list(self, client):
        resp = await client.get("/api/templates")
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert set(data) == {"cessna172", "piper28", "airbus319"}
        assert data["cessna172"]["macConfig"]["macMin"] == 15


class TestEnvelopeAPI:
    async def test_cessna(self, client, cessna_payload):
        resp = await client.post(
            "/api/envelope",
            json={"stations": cessna_payload["stations"], "macConfig": CESSNA_MAC},
        )
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["summaries"]["zfw"] == {"weight": 1500, "moment": 58500}
        assert data["summaries"]["tow"]["weight"] == 1800
        assert data["envelopeData"]["tow"]["cg"] == pytest.approx(40.5)
        assert data["envelopeData"]["zfw"]["mac"] == pytest.approx(26.8456, abs=1e-4)
        assert data["validation"]["allInLimits"] is True

    async def test_out_of_limits(self, client):
        stations = [
            {"id": 1, "description": "Empty Weight", "arm": 39.0, "weight": 1500},
            {"id": 2, "description": "Baggage", "arm": 123.0, "weight": 120},
        ]
        resp = await client.post("/api/envelope", json={"stations": stations, "macConfig": CESSNA_MAC})
        validation = resp.json()["data"]["validation"]
        assert validation["zfw"] is False
        assert validation["allInLimits"] is False

    async def test_invalid_station_type(self, client):
        stations = [{"id": 1, "description": "X", "arm": 1.0, "type": "ballast"}]
        resp = await client.post("/api/envelope", json={"stations": stations, "macConfig": CESSNA_MAC})
        assert resp.status_code == 400
        assert resp.json()["success"] is False


class TestFormulaAPI:
    async def test_validate_ok(self, client):
        resp = await client.post("/api/formula/validate", json={"formula": CESSNA_MAC["formula"]})
        assert resp.json()["data"] == {"isValid": True}

    async def test_validate_bad(self, client):
        resp = await client.post("/api/formula/validate", json={"formula": "CG; rm -rf"})
        data = resp.json()["data"]
        assert data["isValid"] is False
        assert "invalid characters" in data["error"]

    async def test_solve(self, client):
        resp = await client.post("/api/formula/solve", json={"macPercent": 25, "macConfig": A319_MAC})
        assert resp.json()["data"]["cg"] == pytest.approx(236.591)

    async def test_solve_unsupported_shape(self, client):
        resp = await client.post("/api/formula/solve", json={"macPercent": 25, "macConfig": CESSNA_MAC})
        assert resp.status_code == 200
        assert resp.json()["data"].get("cg") is None


class TestFuelSequenceAPI:
    async def test_sequence(self, client):
        stations = [
            {"id": 1, "description": "Empty Weight", "arm": 39.0, "weight": 1500},
            {"id": 2, "description": "Fuel", "arm": 48.0, "type": "fuel", "weight": 100},
        ]
        resp = await client.post("/api/fuel-sequence", json={
            "stations": stations,
            "macConfig": CESSNA_MAC,
            "flightTimeHours": 1.0,
            "burnRatePerHour": 100,
        })
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert [s["time"] for s in data["steps"]] == [0.0, 0.25, 0.5, 0.75, 1.0]
        assert data["steps"][-1]["tanks"] == {"2": 0.0}
        assert data["fuelShortfall"] is False

    async def test_shortfall(self, client):
        stations = [
            {"id": 1, "description": "Empty Weight", "arm": 39.0, "weight": 1500},
            {"id": 2, "description": "Fuel", "arm": 48.0, "type": "fuel", "weight": 10},
        ]
        resp = await client.post("/api/fuel-sequence", json={
            "stations": stations,
            "macConfig": CESSNA_MAC,
            "flightTimeHours": 1.0,
            "burnRatePerHour": 100,
        })
        data = resp.json()["data"]
        assert data["fuelShortfall"] is True
        assert data["unburnedFuel"] == pytest.approx(90)

    async def test_no_tanks(self, client):
        stations = [{"id": 1, "description": "Empty Weight", "arm": 39.0, "weight": 1500}]
        resp = await client.post("/api/fuel-sequence", json={
            "stations": stations,
            "macConfig": CESSNA_MAC,
            "flightTimeHours": 1.0,
            "burnRatePerHour": 100,
        })
        assert resp.status_code == 400
        assert resp.json()["error"] == "No fuel tanks configured"

    @pytest.mark.parametrize("priority", [0, -1])
    async def test_priority_below_one_rejected(self, client, priority):
        stations = [
            {"id": 1, "description": "Empty Weight", "arm": 39.0, "weight": 1500},
            {"id": 2, "description": "Fuel", "arm": 48.0, "type": "fuel", "weight": 100},
        ]
        resp = await client.post("/api/fuel-sequence", json={
            "stations": stations,
            "macConfig": CESSNA_MAC,
            "flightTimeHours": 1.0,
            "burnRatePerHour": 100,
            "priorities": {"2": priority},
        })
        assert resp.status_code == 400
        body = resp.json()
        assert body["success"] is False
        assert "priorities" in body["error"]

    async def test_apply_step_and_reset(self, client, cessna_payload):
        stations = cessna_payload["stations"]
        step = {"time": 1.0, "tanks": {"7": 120.0}, "totalWeight": 1620, "cg": 39.6, "mac": 31.0}
        resp = await client.post("/api/fuel-sequence/apply", json={"stations": stations, "step": step})
        assert resp.status_code == 200
        burned = resp.json()["data"]
        assert [s["weight"] for s in burned] == [1500, 0, 120]

        tanks = [{"stationId": 7, "name": "Fuel", "totalFuel": 300, "priority": 1}]
        resp = await client.post("/api/fuel-sequence/reset", json={"stations": burned, "tanks": tanks})
        assert [s["weight"] for s in resp.json()["data"]] == [1500, 0, 300]

    async def test_flight_time_bounds(self, client, cessna_payload):
        resp = await client.post("/api/fuel-sequence", json={
            "stations": cessna_payload["stations"],
            "macConfig": CESSNA_MAC,
            "flightTimeHours": 30,
            "burnRatePerHour": 100,
        })
        assert resp.status_code == 400


class TestExportAPI:
    async def test_export(self, client, cessna_payload):
        resp = await client.post("/api/export", json={
            "profileName": "Cessna 172N",
            "stations": cessna_payload["stations"],
            "macConfig": CESSNA_MAC,
        })
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["filename"].startswith("weight-balance-Cessna-172N-")
        assert data["filename"].endswith(".json")
        document = data["document"]
        assert document["profileName"] == "Cessna 172N"
        assert [s["id"] for s in document["stations"]] == [1, 7]
        assert document["validation"]["allInLimits"] is True
