"""
FastAPI dependency injection — shared singletons.

Usage in routers::

    from content_catalog.api.deps import Contents

    @router.get("/contents/{content_id}")
    def get_content(content_id: str, service: Contents):
        ...

The :class:`~content_catalog.ops.contents.ContentService` is built once by
:func:`~content_catalog.api.app.create_app` and parked on ``app.state``;
handlers only ever receive that one instance, so the cache it wraps lives
exactly as long as the application.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request

from content_catalog.api.settings import CatalogAPISettings
from content_catalog.ops.contents import ContentService

# ── Settings (singleton) ─────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_settings() -> CatalogAPISettings:
    """Cached settings — loaded once per process."""
    return CatalogAPISettings()


# ── Content service (app-scoped) ─────────────────────────────────────────


def get_content_service(request: Request) -> ContentService:
    """Return the service wired into the running application."""
    return request.app.state.content_service


# ── Convenience type aliases ─────────────────────────────────────────────

Contents = Annotated[ContentService, Depends(get_content_service)]
