"""
Content operations.

:class:`ContentService` orchestrates the slow :class:`ContentStore` and the
:class:`ContentCache` for every catalog operation.

Read path (cache-aside)::

    get ──► cache.get ──hit──► return
                │
               miss
                ▼
            store.get ──None──► NOT_FOUND (nothing cached)
                │
               hit ──► cache.set ──► return

Write path (write-through)::

    create / update / add_genres / remove_genres
        store.<write> ──None──► NOT_FOUND / CREATION_FAILED (cache untouched)
              │
             ok ──► cache.set ──► return

    delete
        cache.remove ──► store.delete ──None──► NOT_FOUND
                               │
                              ok ──► return id

The cache entry is removed *before* the store delete. A reader racing the
delete can still re-warm the cache between the two calls; that window is
accepted rather than closed with per-id locking.

No operation retries. Unexpected store/cache exceptions are logged with the
traceback and returned as ``INTERNAL`` failures; the expected outcomes
(``NOT_FOUND``, ``DUPLICATE_GENRES``, ``NO_GENRES_REMOVED``) are logged at
info/warning level.
"""

from __future__ import annotations

from content_catalog.core import genres as genre_set
from content_catalog.core.cache import ContentCache
from content_catalog.core.errors import (
    CatalogError,
    CreationFailedError,
    ErrorCategory,
    categorize_error,
    is_retryable,
)
from content_catalog.core.logging import get_logger
from content_catalog.core.models import Content, ContentDraft
from content_catalog.core.store import ContentStore
from content_catalog.ops.requests import GenresRequest, SearchContentsRequest
from content_catalog.ops.result import OperationResult, Timer, start_timer

logger = get_logger(__name__)


def _format_genres(genres: list[str]) -> str:
    return ", ".join(f"'{genre}'" for genre in genres)


class ContentService:
    """Cache-aside orchestration of the content store and cache.

    Built once at startup and shared by every request handler. Holds no
    per-request state; ``store`` and ``cache`` must each be thread-safe.

    Example:
        service = ContentService(SlowContentStore(), InMemoryContentCache())
        created = service.create_content(ContentDraft(title="Sample"))
        assert service.get_content(created.data.id).data == created.data
    """

    def __init__(self, store: ContentStore, cache: ContentCache) -> None:
        self.store = store
        self.cache = cache

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    def _internal(
        self,
        operation: str,
        exc: Exception,
        timer: Timer,
        *,
        code: str = "INTERNAL",
        message: str | None = None,
        content_id: str | None = None,
    ) -> OperationResult:
        logger.exception(
            "op_failed",
            operation=operation,
            content_id=content_id,
            error=exc.to_dict() if isinstance(exc, CatalogError) else str(exc),
        )
        return OperationResult.fail(
            code,
            message or f"An error occurred during {operation}.",
            category=categorize_error(exc),
            retryable=is_retryable(exc),
            elapsed_ms=timer.elapsed_ms,
        )

    def _not_found(self, operation: str, content_id: str, timer: Timer) -> OperationResult:
        logger.info("content_not_found", operation=operation, content_id=content_id)
        return OperationResult.fail(
            "NOT_FOUND",
            f"Content '{content_id}' not found",
            details={"content_id": content_id},
            elapsed_ms=timer.elapsed_ms,
        )

    def _warm(self, contents: list[Content]) -> None:
        for content in contents:
            self.cache.set(content.id, content)

    def _resolve(self, content_id: str) -> Content | None:
        """Current record for a genre mutation: cache first, store fallback."""
        content = self.cache.get(content_id)
        if content is not None:
            return content
        return self.store.get(content_id)

    def _write_through(
        self,
        operation: str,
        content_id: str,
        draft: ContentDraft,
        timer: Timer,
    ) -> OperationResult[Content]:
        updated = self.store.update(content_id, draft)
        if updated is None:
            return self._not_found(operation, content_id, timer)

        self.cache.set(content_id, updated)
        return OperationResult.ok(updated, elapsed_ms=timer.elapsed_ms)

    # ------------------------------------------------------------------ #
    # Reads
    # ------------------------------------------------------------------ #

    def list_contents(self) -> OperationResult[list[Content]]:
        """Fetch the whole catalog from the store and warm the cache with it.

        An empty catalog is a successful empty list.
        """
        timer = start_timer()

        try:
            contents = [c for c in self.store.list() if c is not None]
        except Exception as exc:
            return self._internal(
                "list_contents",
                exc,
                timer,
                code="STORE_UNAVAILABLE",
                message="Failed to fetch contents from the store.",
            )

        try:
            self._warm(contents)
        except Exception as exc:
            return self._internal("list_contents", exc, timer)

        logger.info("contents_listed", count=len(contents))
        return OperationResult.ok(contents, elapsed_ms=timer.elapsed_ms)

    def search_contents(self, request: SearchContentsRequest) -> OperationResult[list[Content]]:
        """Filter the full catalog by title substring and exact genre.

        Both filters are optional and AND-composed. Title matching is
        case-sensitive containment and skips records without a title; genre
        matching is case-sensitive membership. Survivors warm the cache.
        """
        timer = start_timer()

        try:
            contents = [c for c in self.store.list() if c is not None]
        except Exception as exc:
            return self._internal(
                "search_contents",
                exc,
                timer,
                code="STORE_UNAVAILABLE",
                message="Failed to fetch contents from the store.",
            )

        if request.title:
            contents = [c for c in contents if c.title is not None and request.title in c.title]
        if request.genre:
            contents = [c for c in contents if request.genre in c.genre_list]

        try:
            self._warm(contents)
        except Exception as exc:
            return self._internal("search_contents", exc, timer)

        logger.info(
            "contents_searched",
            title=request.title,
            genre=request.genre,
            count=len(contents),
        )
        return OperationResult.ok(contents, elapsed_ms=timer.elapsed_ms)

    def get_content(self, content_id: str) -> OperationResult[Content]:
        """Return one record, from the cache when possible."""
        timer = start_timer()

        try:
            content = self.cache.get(content_id)
            if content is not None:
                logger.debug("content_cache_hit", content_id=content_id)
                return OperationResult.ok(content, elapsed_ms=timer.elapsed_ms)

            content = self.store.get(content_id)
            if content is None:
                return self._not_found("get_content", content_id, timer)

            self.cache.set(content_id, content)
            logger.debug("content_cache_filled", content_id=content_id)
            return OperationResult.ok(content, elapsed_ms=timer.elapsed_ms)
        except Exception as exc:
            return self._internal("get_content", exc, timer, content_id=content_id)

    # ------------------------------------------------------------------ #
    # Writes
    # ------------------------------------------------------------------ #

    def create_content(self, draft: ContentDraft) -> OperationResult[Content]:
        """Persist a new record; the store assigns its identifier."""
        timer = start_timer()

        try:
            content = self.store.create(draft)
            if content is None:
                raise CreationFailedError("Store returned no record").with_context(
                    operation="create_content"
                )
        except Exception as exc:
            return self._internal(
                "create_content",
                exc,
                timer,
                code="CREATION_FAILED",
                message="Failed to create content.",
            )

        try:
            self.cache.set(content.id, content)
        except Exception as exc:
            return self._internal("create_content", exc, timer, content_id=content.id)

        logger.info("content_created", content_id=content.id)
        return OperationResult.ok(content, elapsed_ms=timer.elapsed_ms)

    def update_content(self, content_id: str, draft: ContentDraft) -> OperationResult[Content]:
        """Replace every field of a record in the store, then mirror it to the cache."""
        timer = start_timer()

        try:
            result = self._write_through("update_content", content_id, draft, timer)
        except Exception as exc:
            return self._internal("update_content", exc, timer, content_id=content_id)

        if result.success:
            logger.info("content_updated", content_id=content_id)
        return result

    def delete_content(self, content_id: str) -> OperationResult[str]:
        """Drop a record from the cache, then from the store."""
        timer = start_timer()

        try:
            self.cache.remove(content_id)
            deleted_id = self.store.delete(content_id)
        except Exception as exc:
            return self._internal("delete_content", exc, timer, content_id=content_id)

        if deleted_id is None:
            return self._not_found("delete_content", content_id, timer)

        logger.info("content_deleted", content_id=content_id)
        return OperationResult.ok(deleted_id, elapsed_ms=timer.elapsed_ms)

    # ------------------------------------------------------------------ #
    # Genres
    # ------------------------------------------------------------------ #

    def add_genres(self, content_id: str, request: GenresRequest) -> OperationResult[Content]:
        """Append new genres to a record, rejecting the whole call on any duplicate.

        Duplicates are detected case-insensitively against the current list.
        When any are found nothing is written and ``details["duplicates"]``
        lists every one. A tag given twice in the request is added once; each
        dropped repeat is reported in ``warnings``.
        """
        timer = start_timer()

        try:
            content = self._resolve(content_id)
            if content is None:
                return self._not_found("add_genres", content_id, timer)

            additions, duplicates, repeated = genre_set.partition(content.genre_list, request.genres)
            if duplicates:
                message = f"Genres: [{_format_genres(duplicates)}] already exist"
                logger.warning(
                    "genres_already_exist",
                    content_id=content_id,
                    duplicates=duplicates,
                )
                return OperationResult.fail(
                    "DUPLICATE_GENRES",
                    message,
                    category=ErrorCategory.VALIDATION,
                    details={"duplicates": duplicates},
                    elapsed_ms=timer.elapsed_ms,
                )

            draft = content.to_draft().with_genres([*content.genre_list, *additions])
            result = self._write_through("add_genres", content_id, draft, timer)
        except Exception as exc:
            return self._internal("add_genres", exc, timer, content_id=content_id)

        if result.success:
            logger.info("genres_added", content_id=content_id, added=additions, repeated=repeated)
            result.warnings.extend(f"Genre '{genre}' repeated in request; added once" for genre in repeated)
        return result

    def remove_genres(self, content_id: str, request: GenresRequest) -> OperationResult[Content]:
        """Remove every case-insensitive match of the requested genres.

        A request that matches nothing is a client error
        (``NO_GENRES_REMOVED``), not a silent no-op.
        """
        timer = start_timer()

        try:
            content = self._resolve(content_id)
            if content is None:
                return self._not_found("remove_genres", content_id, timer)

            matched = genre_set.intersect(content.genre_list, request.genres)
            if not matched:
                logger.info("no_genres_to_remove", content_id=content_id)
                return OperationResult.fail(
                    "NO_GENRES_REMOVED",
                    "No genres to remove.",
                    category=ErrorCategory.VALIDATION,
                    details={"requested": list(request.genres)},
                    elapsed_ms=timer.elapsed_ms,
                )

            draft = content.to_draft().with_genres(genre_set.remove(content.genre_list, matched))
            result = self._write_through("remove_genres", content_id, draft, timer)
        except Exception as exc:
            return self._internal("remove_genres", exc, timer, content_id=content_id)

        if result.success:
            logger.info("genres_removed", content_id=content_id, removed=matched)
        return result


__all__ = ["ContentService"]
