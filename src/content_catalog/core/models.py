"""
Content record types.

:class:`Content` is the catalog record as the store holds it;
:class:`ContentDraft` is the full desired field set a caller hands to
``create`` or ``update``. Both are frozen: a mutation is always a full
replacement produced by the store, never an in-place edit.

Architecture Decision:
    ``genre_list`` is a tuple so that a record shared by reference between
    the cache and a caller cannot be altered behind either one's back.
    Membership is compared case-insensitively by
    :mod:`content_catalog.core.genres`; the stored spelling is kept as given.

Example:
    >>> draft = ContentDraft(title="Sample Content 1", genre_list=("Genre1",))
    >>> content = Content.from_draft("abc", draft)
    >>> content.to_draft().with_genres(["Genre1", "Genre2"]).genre_list
    ('Genre1', 'Genre2')
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import asdict, dataclass, replace
from datetime import datetime
from typing import Any


def _parse_dt(value: Any) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)


@dataclass(frozen=True, slots=True)
class ContentDraft:
    """All content fields except the identifier."""

    title: str | None = None
    sub_title: str | None = None
    description: str | None = None
    image_url: str | None = None
    duration: int = 0
    start_time: datetime | None = None
    end_time: datetime | None = None
    genre_list: tuple[str, ...] = ()

    def with_genres(self, genres: Iterable[str]) -> ContentDraft:
        """Return a copy carrying ``genres`` as its genre list."""
        return replace(self, genre_list=tuple(genres))

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON/storage."""
        data = asdict(self)
        data["genre_list"] = list(self.genre_list)
        for key in ("start_time", "end_time"):
            if data[key] is not None:
                data[key] = data[key].isoformat()
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ContentDraft:
        """Deserialize from dict."""
        return cls(
            title=data.get("title"),
            sub_title=data.get("sub_title"),
            description=data.get("description"),
            image_url=data.get("image_url"),
            duration=data.get("duration", 0),
            start_time=_parse_dt(data.get("start_time")),
            end_time=_parse_dt(data.get("end_time")),
            genre_list=tuple(data.get("genre_list") or ()),
        )


@dataclass(frozen=True, slots=True)
class Content:
    """A catalog record. ``id`` is assigned by the store and never changes."""

    id: str
    title: str | None = None
    sub_title: str | None = None
    description: str | None = None
    image_url: str | None = None
    duration: int = 0
    start_time: datetime | None = None
    end_time: datetime | None = None
    genre_list: tuple[str, ...] = ()

    @classmethod
    def from_draft(cls, content_id: str, draft: ContentDraft) -> Content:
        """Build a record from a draft and the identifier the store chose."""
        return cls(
            id=content_id,
            title=draft.title,
            sub_title=draft.sub_title,
            description=draft.description,
            image_url=draft.image_url,
            duration=draft.duration,
            start_time=draft.start_time,
            end_time=draft.end_time,
            genre_list=tuple(draft.genre_list),
        )

    def to_draft(self) -> ContentDraft:
        """Return the full field set of this record, without the identifier."""
        return ContentDraft(
            title=self.title,
            sub_title=self.sub_title,
            description=self.description,
            image_url=self.image_url,
            duration=self.duration,
            start_time=self.start_time,
            end_time=self.end_time,
            genre_list=self.genre_list,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON/storage."""
        return {"id": self.id, **self.to_draft().to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Content:
        """Deserialize from dict."""
        return cls.from_draft(data["id"], ContentDraft.from_dict(data))


__all__ = ["Content", "ContentDraft"]
