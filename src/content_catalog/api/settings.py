"""
API-specific settings.

Extends :class:`~content_catalog.core.settings.CatalogBaseSettings` with the
parameters that govern the REST transport and the backends the service is
wired to.

All values can be overridden via environment variables prefixed with
``CATALOG_`` (``CATALOG_CACHE_BACKEND=redis``, ``CATALOG_STORE_LATENCY_MS=0``).
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from content_catalog.core.settings import CatalogBaseSettings


class CatalogAPISettings(CatalogBaseSettings):
    """Settings for the content catalog REST API.

    Order of precedence (highest → lowest):
        1. Environment variables (``CATALOG_API_PREFIX``, etc.)
        2. ``.env`` file
        3. Defaults below
    """

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    # ── API ──────────────────────────────────────────────────────────────
    api_prefix: str = Field(default="/api/v1", description="URL prefix for all endpoints")
    api_title: str = Field(default="content-catalog API", description="OpenAPI title")
    api_version: str = Field(default="0.1.0", description="OpenAPI version string")

    # ── CORS ─────────────────────────────────────────────────────────────
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")

    # ── Logging ──────────────────────────────────────────────────────────
    slow_request_ms: float | None = Field(
        default=1000.0,
        gt=0,
        description="Log requests slower than this as slow_request (None → never)",
    )

    # ── Cache ────────────────────────────────────────────────────────────
    cache_backend: Literal["memory", "redis"] = Field(
        default="memory",
        description="Content cache implementation",
    )
    redis_url: str = Field(default="redis://localhost:6379/0", description="Redis URL for the redis cache")
    cache_ttl_seconds: int | None = Field(
        default=None,
        ge=1,
        description="Expiry for redis cache entries (None → no expiry)",
    )

    # ── Store ────────────────────────────────────────────────────────────
    store_latency_ms: int = Field(
        default=200,
        ge=0,
        description="Simulated latency of every slow store call",
    )
    store_timeout_ms: int | None = Field(
        default=None,
        ge=1,
        description="Per-call budget of the slow store; slower calls fail as unavailable",
    )
    seed_data: bool = Field(default=True, description="Load the sample catalog at startup")
