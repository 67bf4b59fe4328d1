"""
Core primitives for the content catalog.

Record types, the genre set algorithm, the cache and store capabilities,
and the ambient error/logging/settings layer. Nothing in this package knows
about HTTP.
"""

from content_catalog.core.cache import ContentCache, InMemoryContentCache, RedisContentCache
from content_catalog.core.errors import (
    CacheError,
    CatalogError,
    CreationFailedError,
    ErrorCategory,
    StoreError,
    StoreUnavailableError,
)
from content_catalog.core.models import Content, ContentDraft
from content_catalog.core.store import ContentStore, SlowContentStore

__all__ = [
    "CacheError",
    "CatalogError",
    "Content",
    "ContentCache",
    "ContentDraft",
    "ContentStore",
    "CreationFailedError",
    "ErrorCategory",
    "InMemoryContentCache",
    "RedisContentCache",
    "SlowContentStore",
    "StoreError",
    "StoreUnavailableError",
]
