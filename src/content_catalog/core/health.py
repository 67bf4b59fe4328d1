"""Health reporting for the content catalog.

Each dependency (the slow store, the cache) is described by a
:class:`HealthCheck` whose ``inspect`` callable returns a small dict of facts about that
dependency: how many records the store holds, which cache backend is wired
and how full it is. :func:`create_health_router` turns a list of checks into
three endpoints::

    GET /health        200 healthy/degraded, 503 when a required check fails
    GET /health/ready  503 unless every check passes
    GET /health/live   200 while the process runs

A failing ``required`` check makes the service ``unhealthy``; a failing
optional one only ``degraded``. The cache is optional because every read
falls back to the store.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Response
from pydantic import BaseModel, Field

Status = Literal["healthy", "degraded", "unhealthy"]
Inspector = Callable[[], Awaitable[dict[str, Any]]]

_STARTED_AT = time.monotonic()


def _uptime_s() -> float:
    return round(time.monotonic() - _STARTED_AT, 1)


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class CheckResult(BaseModel):
    """Outcome of one check; ``details`` carries what the dependency reported."""

    status: Status
    latency_ms: float | None = None
    error: str | None = None
    details: dict[str, Any] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    """Body of ``GET /health`` and ``GET /health/ready``."""

    status: Status
    service: str
    version: str
    uptime_s: float = Field(default_factory=_uptime_s)
    timestamp: str = Field(default_factory=lambda: datetime.now(UTC).isoformat())
    checks: dict[str, CheckResult] = Field(default_factory=dict)


class LivenessResponse(BaseModel):
    status: str = "alive"
    uptime_s: float = Field(default_factory=_uptime_s)


@dataclass(frozen=True)
class HealthCheck:
    """A named dependency check.

    ``inspect`` returns a dict of details when the dependency answers and
    raises otherwise. An inspection slower than ``timeout_s`` counts as failed.
    """

    name: str
    inspect: Inspector
    required: bool = True
    timeout_s: float = 5.0

    async def run(self) -> CheckResult:
        started = time.perf_counter()
        try:
            details = await asyncio.wait_for(self.inspect(), timeout=self.timeout_s)
        except TimeoutError:
            return CheckResult(status="unhealthy", error=f"timed out after {self.timeout_s}s")
        except Exception as exc:  # noqa: BLE001
            return CheckResult(
                status="unhealthy",
                latency_ms=_elapsed_ms(started),
                error=str(exc)[:200],
            )
        return CheckResult(status="healthy", latency_ms=_elapsed_ms(started), details=details or {})


async def run_checks(checks: Sequence[HealthCheck]) -> dict[str, CheckResult]:
    """Run every check concurrently."""
    results = await asyncio.gather(*(check.run() for check in checks))
    return {check.name: result for check, result in zip(checks, results, strict=True)}


def overall_status(checks: Sequence[HealthCheck], results: dict[str, CheckResult]) -> Status:
    failing = [check for check in checks if results[check.name].status != "healthy"]
    if any(check.required for check in failing):
        return "unhealthy"
    return "degraded" if failing else "healthy"


def create_health_router(
    service_name: str,
    version: str,
    checks: Sequence[HealthCheck] = (),
    prefix: str = "/health",
) -> APIRouter:
    """Build the health, readiness and liveness endpoints for ``checks``."""
    router = APIRouter(prefix=prefix, tags=["health"])
    checks = tuple(checks)

    async def report() -> HealthResponse:
        results = await run_checks(checks)
        return HealthResponse(
            status=overall_status(checks, results),
            service=service_name,
            version=version,
            checks=results,
        )

    @router.get("", response_model=HealthResponse)
    async def health(response: Response) -> HealthResponse:
        body = await report()
        if body.status == "unhealthy":
            response.status_code = 503
        return body

    @router.get("/ready", response_model=HealthResponse)
    async def readiness(response: Response) -> HealthResponse:
        body = await report()
        if body.status != "healthy":
            response.status_code = 503
        return body

    @router.get("/live", response_model=LivenessResponse)
    async def liveness() -> LivenessResponse:
        return LivenessResponse()

    return router
