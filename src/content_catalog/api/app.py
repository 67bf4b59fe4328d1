"""
FastAPI application factory.

``create_app()`` wires middleware, routers, error handlers, and
lifespan events into a single ``FastAPI`` instance.

Manifesto:
    The app factory is the single composition root — the store, the cache
    and the service wrapping them are built here once, parked on
    ``app.state`` and handed to routers through dependency injection, so
    no module ever holds a global cache.

Tags:
    content-catalog, api, app-factory, composition-root, FastAPI

Doc-Types:
    api-reference
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from content_catalog.api.deps import get_settings
from content_catalog.api.middleware.errors import unhandled_exception_handler, validation_exception_handler
from content_catalog.api.middleware.request_id import RequestIDMiddleware
from content_catalog.api.middleware.timing import TimingMiddleware
from content_catalog.api.settings import CatalogAPISettings
from content_catalog.core.cache import ContentCache, InMemoryContentCache, RedisContentCache
from content_catalog.core.errors import CacheUnavailableError
from content_catalog.core.health import HealthCheck, create_health_router
from content_catalog.core.logging import configure_logging, get_logger
from content_catalog.core.seed import mock_contents
from content_catalog.core.store import SlowContentStore
from content_catalog.ops.contents import ContentService


def build_content_cache(settings: CatalogAPISettings) -> ContentCache:
    """Instantiate the cache backend named by ``settings.cache_backend``."""
    if settings.cache_backend == "redis":
        return RedisContentCache(settings.redis_url, ttl_seconds=settings.cache_ttl_seconds)
    return InMemoryContentCache()


def build_content_service(settings: CatalogAPISettings) -> ContentService:
    """Build the store, the cache and the service that orchestrates them."""
    store = SlowContentStore(
        latency_ms=settings.store_latency_ms,
        timeout_ms=settings.store_timeout_ms,
        seed=mock_contents() if settings.seed_data else (),
    )
    return ContentService(store, build_content_cache(settings))


def _health_checks(service: ContentService) -> list[HealthCheck]:
    async def store_records() -> dict[str, Any]:
        records = await asyncio.to_thread(service.store.list)
        return {"records": sum(1 for record in records if record is not None)}

    async def cache_backend() -> dict[str, Any]:
        cache = service.cache
        if isinstance(cache, RedisContentCache):
            if not await asyncio.to_thread(cache.ping):
                raise CacheUnavailableError("Redis did not answer PING")
            return {"backend": "redis"}
        if isinstance(cache, InMemoryContentCache):
            return {"backend": "memory", "entries": cache.size()}
        return {"backend": type(cache).__name__}

    return [
        HealthCheck("store", store_records),
        HealthCheck("cache", cache_backend, required=False),
    ]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan — startup / shutdown hooks."""
    settings: CatalogAPISettings = app.state.settings
    configure_logging(settings.log_level, json_format=False if settings.debug else None)

    log = get_logger("content_catalog.api")
    log.info(
        "content-catalog API starting",
        version=app.version,
        cache_backend=settings.cache_backend,
        store_latency_ms=settings.store_latency_ms,
    )
    yield
    log.info("content-catalog API shutting down")


def create_app(
    settings: CatalogAPISettings | None = None,
    *,
    service: ContentService | None = None,
) -> FastAPI:
    """Build and return a fully-configured FastAPI application.

    Parameters
    ----------
    settings : CatalogAPISettings | None
        Override settings (useful for testing).  When ``None`` the cached
        singleton from :func:`get_settings` is used.
    service : ContentService | None
        Pre-built service (useful for testing with fakes or spies).  When
        ``None`` one is built from *settings*.
    """

    settings = settings or get_settings()
    service = service or build_content_service(settings)

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        lifespan=lifespan,
        docs_url=f"{settings.api_prefix}/docs",
        redoc_url=f"{settings.api_prefix}/redoc",
        openapi_url=f"{settings.api_prefix}/openapi.json",
    )

    # Stash settings and the service on app state for middleware and DI
    app.state.settings = settings
    app.state.content_service = service

    # Override DI so endpoints use the provided settings
    app.dependency_overrides[get_settings] = lambda: settings

    # ── Middleware (outermost → innermost) ────────────────────────────
    app.add_middleware(TimingMiddleware, slow_request_ms=settings.slow_request_ms)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Exception handlers ───────────────────────────────────────────
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # ── Routers ──────────────────────────────────────────────────────
    from content_catalog.api.routers import contents

    # Health endpoints at root level (no prefix) for container healthchecks
    app.include_router(
        create_health_router(
            "content-catalog",
            version=settings.api_version,
            checks=_health_checks(service),
        ),
    )
    app.include_router(contents.router, prefix=settings.api_prefix, tags=["contents"])

    return app
