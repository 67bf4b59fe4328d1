"""
Content store capability and the slow in-memory reference store.

The store is the authority for every content record. The service reads it
on cache misses and writes it on every mutation; whatever the store returns
is what the cache mirrors.

Architecture:
    ::

        ContentStore (Protocol)
        └── SlowContentStore — in-memory dict, uuid4 ids, simulated latency

        API: get(content_id)            → Content | None
             list()                     → list[Content]
             create(draft)              → Content | None
             update(content_id, draft)  → Content | None
             delete(content_id)         → str | None

    A ``None`` return always means "no such identifier" (or, for
    ``create``, "nothing was created"). Infrastructure failures are raised
    as :class:`~content_catalog.core.errors.StoreError` subclasses:
    ``StoreUnavailableError`` when a call blows its ``timeout_ms`` budget,
    ``CreationFailedError`` when ``create`` cannot allocate an identifier.

Examples:
    >>> store = SlowContentStore(latency_ms=0)
    >>> created = store.create(ContentDraft(title="Sample"))
    >>> store.get(created.id).title
    'Sample'
    >>> store.delete(created.id) == created.id
    True
    >>> store.get(created.id) is None
    True

Tags:
    store, repository, persistence, slow-database, content-catalog

Doc-Types:
    - API Reference
"""

from __future__ import annotations

import threading
import time
import uuid
from collections.abc import Iterable
from typing import Protocol

from content_catalog.core.errors import CreationFailedError, StoreUnavailableError
from content_catalog.core.logging import get_logger
from content_catalog.core.models import Content, ContentDraft

logger = get_logger(__name__)


class ContentStore(Protocol):
    """Protocol for durable content storage.

    Implementations are expected to be thread-safe and to bound their own
    call duration; the service adds no timeout on top.
    """

    def get(self, content_id: str) -> Content | None:
        """Return the record for ``content_id``, or ``None``."""
        ...

    def list(self) -> list[Content | None]:
        """Return every record."""
        ...

    def create(self, draft: ContentDraft) -> Content | None:
        """Persist a new record and return it with its assigned id."""
        ...

    def update(self, content_id: str, draft: ContentDraft) -> Content | None:
        """Replace every field of ``content_id``; ``None`` if it does not exist."""
        ...

    def delete(self, content_id: str) -> str | None:
        """Remove ``content_id`` and return it; ``None`` if it did not exist."""
        ...


class SlowContentStore:
    """In-memory store that sleeps on every call to mimic a remote database.

    Attributes:
        latency_ms: Milliseconds slept before each operation (``0`` disables).
        timeout_ms: Call budget. A call whose latency exceeds it waits out the
            budget and raises :class:`StoreUnavailableError` (``None`` → no budget).

    Example:
        store = SlowContentStore(latency_ms=250, timeout_ms=1000, seed=mock_contents())
    """

    _ID_ATTEMPTS = 3

    def __init__(
        self,
        *,
        latency_ms: int = 0,
        timeout_ms: int | None = None,
        seed: Iterable[ContentDraft] = (),
    ) -> None:
        self.latency_ms = latency_ms
        self.timeout_ms = timeout_ms
        self._records: dict[str, Content] = {}
        self._lock = threading.Lock()

        for draft in seed:
            content_id = self._new_id()
            self._records[content_id] = Content.from_draft(content_id, draft)

        if self._records:
            logger.debug("store_seeded", count=len(self._records))

    @staticmethod
    def _new_id() -> str:
        return str(uuid.uuid4())

    def _wait(self, operation: str, content_id: str | None = None) -> None:
        if self.timeout_ms is not None and self.latency_ms > self.timeout_ms:
            time.sleep(self.timeout_ms / 1000)
            raise StoreUnavailableError(
                f"Store call exceeded {self.timeout_ms}ms"
            ).with_context(operation=operation, content_id=content_id)
        if self.latency_ms > 0:
            time.sleep(self.latency_ms / 1000)

    def get(self, content_id: str) -> Content | None:
        self._wait("get", content_id)
        with self._lock:
            return self._records.get(content_id)

    def list(self) -> list[Content | None]:
        self._wait("list")
        with self._lock:
            return list(self._records.values())

    def create(self, draft: ContentDraft) -> Content | None:
        """Insert a record under a fresh uuid4.

        Raises:
            CreationFailedError: No unused identifier after a few attempts.
        """
        self._wait("create")
        with self._lock:
            for _ in range(self._ID_ATTEMPTS):
                content_id = self._new_id()
                if content_id not in self._records:
                    break
            else:
                raise CreationFailedError("No free content identifier").with_context(
                    operation="create",
                    attempts=self._ID_ATTEMPTS,
                )
            content = Content.from_draft(content_id, draft)
            self._records[content_id] = content
        return content

    def update(self, content_id: str, draft: ContentDraft) -> Content | None:
        self._wait("update", content_id)
        with self._lock:
            if content_id not in self._records:
                return None
            content = Content.from_draft(content_id, draft)
            self._records[content_id] = content
        return content

    def delete(self, content_id: str) -> str | None:
        self._wait("delete", content_id)
        with self._lock:
            if self._records.pop(content_id, None) is None:
                return None
        return content_id

    def count(self) -> int:
        """Return the number of stored records (no simulated latency)."""
        with self._lock:
            return len(self._records)


__all__ = ["ContentStore", "SlowContentStore"]
