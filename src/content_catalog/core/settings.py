"""Shared base settings for the content catalog.

``CatalogBaseSettings`` holds the knobs every entry point needs (bind address,
log level, debug mode). The API layer extends it with transport and backend
configuration in :mod:`content_catalog.api.settings`.

Examples:
    >>> from content_catalog.core.settings import CatalogBaseSettings
    >>> class WorkerSettings(CatalogBaseSettings):
    ...     model_config = {"env_prefix": "CATALOG_WORKER_"}
    ...     batch_size: int = 100

Tags:
    settings, configuration, pydantic, environment, content-catalog
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogBaseSettings(BaseSettings):
    """Common settings shared by every content catalog entry point.

    Fields
    ──────
    host         : Bind address for the HTTP transport
    port         : Bind port for the HTTP transport
    debug        : Enable debug mode (detailed 500 bodies, console logs)
    log_level    : Structlog log level
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Network ──────────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 8000

    # ── Observability ────────────────────────────────────────────
    debug: bool = False
    log_level: str = "INFO"
