"""Sample catalog loaded into the slow store when ``seed_data`` is enabled."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from content_catalog.core.models import ContentDraft


def mock_contents(now: datetime | None = None) -> list[ContentDraft]:
    """Return the sample catalog, with airing windows starting at ``now``."""
    now = now or datetime.now(UTC)
    return [
        ContentDraft(
            title="Sample Content 1",
            sub_title="Sample Subtitle 1",
            description="Sample Description 1",
            image_url="sample-image-url-1",
            duration=60,
            start_time=now,
            end_time=now + timedelta(hours=1),
            genre_list=("Genre1", "Genre2"),
        ),
        ContentDraft(
            title="Sample Content 2",
            sub_title="Sample Subtitle 2",
            description="Sample Description 2",
            image_url="sample-image-url-2",
            duration=90,
            start_time=now,
            end_time=now + timedelta(hours=2),
            genre_list=("Genre3", "Genre4"),
        ),
    ]
