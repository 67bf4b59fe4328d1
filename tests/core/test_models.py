"""
Tests for content_catalog.core.models — Content / ContentDraft records.
"""

from __future__ import annotations

import dataclasses
from datetime import UTC, datetime

import pytest

from content_catalog.core.models import Content, ContentDraft


class TestContentDraft:
    def test_defaults(self):
        draft = ContentDraft()
        assert draft.title is None
        assert draft.duration == 0
        assert draft.genre_list == ()

    def test_frozen(self):
        draft = ContentDraft(title="x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            draft.title = "y"  # type: ignore[misc]

    def test_with_genres_returns_copy(self):
        draft = ContentDraft(title="x", genre_list=("a",))
        updated = draft.with_genres(["a", "b"])
        assert updated.genre_list == ("a", "b")
        assert draft.genre_list == ("a",)
        assert updated.title == "x"

    def test_to_dict_serialises_datetimes(self):
        when = datetime(2024, 1, 1, tzinfo=UTC)
        data = ContentDraft(start_time=when, genre_list=("a",)).to_dict()
        assert data["start_time"] == "2024-01-01T00:00:00+00:00"
        assert data["end_time"] is None
        assert data["genre_list"] == ["a"]

    def test_from_dict_parses_datetimes(self):
        draft = ContentDraft.from_dict({"title": "x", "start_time": "2024-01-01T00:00:00+00:00"})
        assert draft.start_time == datetime(2024, 1, 1, tzinfo=UTC)
        assert draft.genre_list == ()


class TestContent:
    def test_from_draft_keeps_fields(self, sample_draft):
        content = Content.from_draft("abc", sample_draft)
        assert content.id == "abc"
        assert content.title == sample_draft.title
        assert content.genre_list == sample_draft.genre_list

    def test_to_draft_drops_id(self, sample_draft):
        content = Content.from_draft("abc", sample_draft)
        assert content.to_draft() == sample_draft

    def test_dict_round_trip(self, sample_draft):
        content = Content.from_draft("abc", sample_draft)
        data = content.to_dict()
        assert data["id"] == "abc"
        assert Content.from_dict(data) == content

    def test_equality_is_by_value(self):
        assert Content(id="a", title="t") == Content(id="a", title="t")
