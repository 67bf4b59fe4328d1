"""
Content API schemas.

``ContentInput`` is the request body of create and update (every field but
the id); ``ContentSchema`` is the record returned by every content endpoint.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from content_catalog.core.models import Content, ContentDraft


class ContentInput(BaseModel):
    """Request body for creating or fully replacing a content record."""

    title: str | None = Field(default=None, description="Display title")
    sub_title: str | None = Field(default=None, description="Secondary title")
    description: str | None = Field(default=None, description="Free-text synopsis")
    image_url: str | None = Field(default=None, description="Artwork location")
    duration: int = Field(default=0, ge=0, description="Running time, opaque unit")
    start_time: datetime | None = Field(default=None, description="Start of the airing window")
    end_time: datetime | None = Field(default=None, description="End of the airing window")
    genre_list: list[str] = Field(default_factory=list, description="Genre tags, in display order")

    def to_draft(self) -> ContentDraft:
        return ContentDraft(
            title=self.title,
            sub_title=self.sub_title,
            description=self.description,
            image_url=self.image_url,
            duration=self.duration,
            start_time=self.start_time,
            end_time=self.end_time,
            genre_list=tuple(self.genre_list),
        )


class ContentSchema(BaseModel):
    """Content record representation."""

    id: str
    title: str | None = None
    sub_title: str | None = None
    description: str | None = None
    image_url: str | None = None
    duration: int = 0
    start_time: datetime | None = None
    end_time: datetime | None = None
    genre_list: list[str] = []

    @classmethod
    def from_content(cls, content: Content) -> ContentSchema:
        return cls(
            id=content.id,
            title=content.title,
            sub_title=content.sub_title,
            description=content.description,
            image_url=content.image_url,
            duration=content.duration,
            start_time=content.start_time,
            end_time=content.end_time,
            genre_list=list(content.genre_list),
        )
