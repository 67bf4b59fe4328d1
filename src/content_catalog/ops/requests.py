"""
Typed request objects for content operations.

Each dataclass is the transport-agnostic input of one service operation.
Create and update take a :class:`~content_catalog.core.models.ContentDraft`
directly; only search and the genre operations need their own shapes.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SearchContentsRequest:
    """Request for :meth:`ContentService.search_contents`.

    Attributes:
        title: Case-sensitive substring the title must contain.
        genre: Genre the record must carry, compared exactly as stored.

    Empty strings are treated like ``None``: no filter.
    """

    title: str | None = None
    genre: str | None = None


@dataclass(frozen=True, slots=True)
class GenresRequest:
    """Request for :meth:`ContentService.add_genres` and :meth:`ContentService.remove_genres`."""

    genres: tuple[str, ...] = ()

    @classmethod
    def of(cls, *genres: str) -> GenresRequest:
        return cls(genres=tuple(genres))
