"""Timing middleware.

Every response carries ``X-Process-Time-Ms``, which makes a cache hit and a
store round-trip easy to tell apart from any client. Requests slower than
``slow_request_ms`` are also logged as ``slow_request`` with the method,
path and status, so a store that stops meeting its latency shows up in the
logs before it shows up in timeouts.
"""

from __future__ import annotations

import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from content_catalog.core.logging import get_logger

logger = get_logger(__name__)


class TimingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, slow_request_ms: float | None = None) -> None:
        super().__init__(app)
        self.slow_request_ms = slow_request_ms

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - start) * 1000, 2)
        response.headers["X-Process-Time-Ms"] = str(elapsed_ms)
        if self.slow_request_ms is not None and elapsed_ms >= self.slow_request_ms:
            logger.warning(
                "slow_request",
                method=request.method,
                path=request.url.path,
                status=response.status_code,
                elapsed_ms=elapsed_ms,
            )
        return response
