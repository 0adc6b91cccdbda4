"""Tests for database init and health endpoints."""

from __future__ import annotations

from wbcalc.api.app import app
from wbcalc.api.deps import get_db
from wbcalc.persistence.database import Database


class TestSystemAPI:
    async def test_init_seeds_templates(self, client):
        resp = await client.post("/api/init")
        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "Database initialized successfully"
        assert body["data"] == {"profiles": 3, "calculations": 0}

        resp = await client.get("/api/aircraft-profiles")
        assert len(resp.json()["data"]) == 3

    async def test_init_twice(self, client):
        await client.post("/api/init")
        resp = await client.post("/api/init")
        assert resp.json()["data"]["profiles"] == 3

    async def test_health(self, client):
        resp = await client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json()["data"] == {
            "status": "ok",
            "database": True,
            "profiles": 0,
            "calculations": 0,
        }

    async def test_health_before_init(self, client):
        fresh = Database()
        app.dependency_overrides[get_db] = lambda: fresh
        try:
            resp = await client.get("/api/health")
        finally:
            fresh.close()
        assert resp.json()["data"] == {"status": "ok", "database": True}
