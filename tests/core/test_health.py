"""
Tests for content_catalog.core.health — health router factory.
"""

from __future__ import annotations

import asyncio

from fastapi import FastAPI
from fastapi.testclient import TestClient

from content_catalog.core.health import CheckResult, HealthCheck, create_health_router, overall_status


async def _records() -> dict:
    return {"records": 3}


async def _fail() -> dict:
    raise ConnectionError("backend down")


async def _slow() -> dict:
    await asyncio.sleep(1)
    return {}


async def _nothing() -> None:
    return None


def _client(checks: list[HealthCheck] | None = None) -> TestClient:
    app = FastAPI()
    app.include_router(create_health_router("content-catalog", "0.1.0", checks=checks or ()))
    return TestClient(app)


class TestHealthRouter:
    def test_no_checks_healthy(self):
        resp = _client().get("/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "healthy"
        assert body["service"] == "content-catalog"
        assert body["version"] == "0.1.0"

    def test_check_details_reported(self):
        resp = _client([HealthCheck("store", _records)]).get("/health")
        assert resp.status_code == 200
        store = resp.json()["checks"]["store"]
        assert store["status"] == "healthy"
        assert store["details"] == {"records": 3}
        assert store["latency_ms"] >= 0

    def test_empty_details(self):
        resp = _client([HealthCheck("cache", _nothing)]).get("/health")
        assert resp.json()["checks"]["cache"]["details"] == {}

    def test_required_failure_unhealthy(self):
        resp = _client([HealthCheck("store", _fail)]).get("/health")
        assert resp.status_code == 503
        body = resp.json()
        assert body["status"] == "unhealthy"
        assert "backend down" in body["checks"]["store"]["error"]

    def test_optional_failure_degraded(self):
        client = _client([HealthCheck("store", _records), HealthCheck("cache", _fail, required=False)])
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "degraded"

    def test_ready_fails_on_degraded(self):
        client = _client([HealthCheck("cache", _fail, required=False)])
        assert client.get("/health/ready").status_code == 503

    def test_ready_ok_when_healthy(self):
        assert _client([HealthCheck("store", _records)]).get("/health/ready").status_code == 200

    def test_timeout(self):
        resp = _client([HealthCheck("store", _slow, timeout_s=0.05)]).get("/health")
        assert resp.status_code == 503
        assert resp.json()["checks"]["store"]["error"] == "timed out after 0.05s"

    def test_live_always_ok(self):
        resp = _client([HealthCheck("store", _fail)]).get("/health/live")
        assert resp.status_code == 200
        assert resp.json()["status"] == "alive"


class TestOverallStatus:
    def test_required_outweighs_optional(self):
        checks = [HealthCheck("store", _fail), HealthCheck("cache", _fail, required=False)]
        results = {
            "store": CheckResult(status="unhealthy"),
            "cache": CheckResult(status="unhealthy"),
        }
        assert overall_status(checks, results) == "unhealthy"

    def test_all_healthy(self):
        checks = [HealthCheck("store", _records)]
        assert overall_status(checks, {"store": CheckResult(status="healthy")}) == "healthy"
