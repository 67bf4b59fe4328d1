"""
Shared pytest fixtures and configuration for content-catalog tests.

This module provides:
- Automatic ``unit`` / ``integration`` markers based on test location
- A zero-latency store, an in-memory cache and the service wrapping them
- Spy variants (``MagicMock(wraps=...)``) for asserting store/cache traffic
- A ``TestClient`` over a fully wired application

Usage:
    Fixtures are auto-discovered by pytest. Simply use them as function
    arguments (pytest injects them automatically).
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from content_catalog.api.app import create_app
from content_catalog.api.settings import CatalogAPISettings
from content_catalog.core.cache import InMemoryContentCache
from content_catalog.core.models import ContentDraft
from content_catalog.core.seed import mock_contents
from content_catalog.core.store import SlowContentStore
from content_catalog.ops.contents import ContentService

FIXED_NOW = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        test_path = Path(item.fspath).relative_to(Path(__file__).parent)

        # The API tests drive the whole stack through HTTP
        if test_path.parts and test_path.parts[0] == "api":
            item.add_marker(pytest.mark.integration)

        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "integration"}):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Core fixtures
# =============================================================================


@pytest.fixture()
def sample_draft() -> ContentDraft:
    return ContentDraft(
        title="Sample",
        sub_title="Sub",
        description="A sample record",
        image_url="sample-image-url",
        duration=45,
        start_time=FIXED_NOW,
        end_time=FIXED_NOW,
        genre_list=("Genre1", "Genre2"),
    )


@pytest.fixture()
def store() -> SlowContentStore:
    """Empty store with no simulated latency."""
    return SlowContentStore()


@pytest.fixture()
def seeded_store() -> SlowContentStore:
    """Store holding the two sample records."""
    return SlowContentStore(seed=mock_contents(FIXED_NOW))


@pytest.fixture()
def cache() -> InMemoryContentCache:
    return InMemoryContentCache()


@pytest.fixture()
def service(store: SlowContentStore, cache: InMemoryContentCache) -> ContentService:
    return ContentService(store, cache)


@pytest.fixture()
def spied_service(store: SlowContentStore, cache: InMemoryContentCache) -> ContentService:
    """Service whose store and cache record every call while behaving normally."""
    return ContentService(MagicMock(wraps=store), MagicMock(wraps=cache))


# =============================================================================
# API fixtures
# =============================================================================


@pytest.fixture()
def api_settings() -> CatalogAPISettings:
    return CatalogAPISettings(store_latency_ms=0, seed_data=False)


@pytest.fixture()
def client(api_settings: CatalogAPISettings) -> Iterator[TestClient]:
    """Client over an application with an empty catalog."""
    with TestClient(create_app(settings=api_settings)) as test_client:
        yield test_client


@pytest.fixture()
def seeded_client() -> Iterator[TestClient]:
    """Client over an application holding the two sample records."""
    settings = CatalogAPISettings(store_latency_ms=0, seed_data=True)
    with TestClient(create_app(settings=settings)) as test_client:
        yield test_client
