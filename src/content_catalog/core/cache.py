"""
Content cache capability with in-memory and Redis implementations.

The service treats the cache as a disposable copy of store records keyed by
content id. It may lose any entry at any time: a miss simply sends the read
to the store, which then re-warms the cache.

Manifesto:
    The cache speeds up point reads against a slow store and nothing else.
    It is never the source of truth, so implementations are free to evict,
    expire or restart empty without breaking the service.

    - **Protocol-based:** ContentCache defines the contract
    - **Injected:** built once at startup and shared by reference
    - **Last write wins:** set() overwrites unconditionally

Architecture:
    ::

        ContentCache (Protocol)
        ├── InMemoryContentCache  — single process, unbounded, lock-guarded
        └── RedisContentCache     — shared across workers, optional TTL

        API: get(content_id) → Content | None
             set(content_id, content)
             remove(content_id)

Examples:
    >>> from content_catalog.core.cache import InMemoryContentCache
    >>> from content_catalog.core.models import Content
    >>> cache = InMemoryContentCache()
    >>> cache.set("abc", Content(id="abc", title="Sample"))
    >>> cache.get("abc").title
    'Sample'
    >>> cache.remove("abc")
    >>> cache.get("abc") is None
    True

Guardrails:
    ❌ DON'T: Use InMemoryContentCache across several worker processes
    ✅ DO: Use RedisContentCache when the API runs with more than one worker

    ❌ DON'T: Read from the cache to decide what the store holds
    ✅ DO: Treat every cache value as possibly stale

Tags:
    cache, cache-aside, redis, in-memory, content-catalog, protocol

Doc-Types:
    - API Reference
    - Infrastructure Guide
"""

from __future__ import annotations

import json
import threading
from typing import Protocol

from content_catalog.core.errors import CacheUnavailableError
from content_catalog.core.models import Content


class ContentCache(Protocol):
    """Protocol for content cache implementations.

    Single-key operations must be atomic; the service does no locking of
    its own.
    """

    def get(self, content_id: str) -> Content | None:
        """Return the cached record, or ``None`` on a miss."""
        ...

    def set(self, content_id: str, content: Content) -> None:
        """Store ``content`` under ``content_id``, replacing any previous value."""
        ...

    def remove(self, content_id: str) -> None:
        """Drop the entry for ``content_id``. No-op if absent."""
        ...


# ------------------------------------------------------------------ #
# In-Memory Cache
# ------------------------------------------------------------------ #


class InMemoryContentCache:
    """Unbounded in-memory cache without expiry.

    Thread-safe: every operation holds an internal lock, so concurrent
    request handlers see atomic get/set/remove.

    Example:
        cache = InMemoryContentCache()
        cache.set(content.id, content)
        hit = cache.get(content.id)
    """

    def __init__(self) -> None:
        self._entries: dict[str, Content] = {}
        self._lock = threading.Lock()

    def get(self, content_id: str) -> Content | None:
        """Return the cached record, or ``None`` on a miss."""
        with self._lock:
            return self._entries.get(content_id)

    def set(self, content_id: str, content: Content) -> None:
        """Store a record, replacing any previous value."""
        with self._lock:
            self._entries[content_id] = content

    def remove(self, content_id: str) -> None:
        """Drop an entry."""
        with self._lock:
            self._entries.pop(content_id, None)

    def clear(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._entries.clear()

    def size(self) -> int:
        """Return current number of cached records."""
        with self._lock:
            return len(self._entries)


# ------------------------------------------------------------------ #
# Redis Cache (optional)
# ------------------------------------------------------------------ #


class RedisContentCache:
    """Redis-backed content cache.

    Requires the ``redis`` package (install via ``pip install content-catalog[redis]``).
    Records are stored as JSON under ``{key_prefix}{content_id}``. Redis may
    evict or expire keys at will; the service recovers through the store.

    Attributes:
        url: Redis connection URL (``redis://host:port/db``).
        ttl_seconds: Expiry applied on every set (``None`` → no expiry).

    Raises:
        ImportError: If ``redis`` package is not installed.
        CacheUnavailableError: If a Redis call fails.
    """

    def __init__(
        self,
        url: str = "redis://localhost:6379/0",
        *,
        ttl_seconds: int | None = None,
        key_prefix: str = "content:",
    ):
        try:
            import redis
        except ImportError as exc:
            msg = (
                "Redis backend requires 'redis' package. "
                "Install with: pip install content-catalog[redis]"
            )
            raise ImportError(msg) from exc

        self._client = redis.from_url(url, decode_responses=False)
        self._redis_error = redis.RedisError
        self._ttl = ttl_seconds
        self._prefix = key_prefix

    def _key(self, content_id: str) -> str:
        return f"{self._prefix}{content_id}"

    def get(self, content_id: str) -> Content | None:
        """Return the cached record, or ``None`` on a miss."""
        try:
            raw = self._client.get(self._key(content_id))
        except self._redis_error as exc:
            raise CacheUnavailableError("Redis get failed", cause=exc).with_context(
                content_id=content_id
            ) from exc

        if raw is None:
            return None
        return Content.from_dict(json.loads(raw))

    def set(self, content_id: str, content: Content) -> None:
        """Store a record as JSON, with the configured TTL if any."""
        serialized = json.dumps(content.to_dict())
        try:
            if self._ttl:
                self._client.setex(self._key(content_id), self._ttl, serialized)
            else:
                self._client.set(self._key(content_id), serialized)
        except self._redis_error as exc:
            raise CacheUnavailableError("Redis set failed", cause=exc).with_context(
                content_id=content_id
            ) from exc

    def remove(self, content_id: str) -> None:
        """Drop an entry."""
        try:
            self._client.delete(self._key(content_id))
        except self._redis_error as exc:
            raise CacheUnavailableError("Redis delete failed", cause=exc).with_context(
                content_id=content_id
            ) from exc

    def ping(self) -> bool:
        """Round-trip to Redis; used by the readiness check."""
        try:
            return bool(self._client.ping())
        except self._redis_error as exc:
            raise CacheUnavailableError("Redis ping failed", cause=exc) from exc


__all__ = [
    "ContentCache",
    "InMemoryContentCache",
    "RedisContentCache",
]
