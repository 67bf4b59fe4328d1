"""Tests for ``content_catalog.core.cache.RedisContentCache``.

Requires ``redis`` package. Tests are skipped if not installed. The client
is a ``MagicMock`` so no server is needed.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest

from content_catalog.core.errors import CacheUnavailableError
from content_catalog.core.models import Content

redis = pytest.importorskip("redis")


class TestRedisContentCacheInit:
    def test_init_default(self):
        from content_catalog.core.cache import RedisContentCache

        with pytest.MonkeyPatch.context() as mp:
            mock_from_url = MagicMock(return_value=MagicMock())
            mp.setattr(redis, "from_url", mock_from_url)

            RedisContentCache()
            mock_from_url.assert_called_once_with("redis://localhost:6379/0", decode_responses=False)

    def test_init_custom_url(self):
        from content_catalog.core.cache import RedisContentCache

        with pytest.MonkeyPatch.context() as mp:
            mock_from_url = MagicMock(return_value=MagicMock())
            mp.setattr(redis, "from_url", mock_from_url)

            RedisContentCache("redis://custom:6380/1", ttl_seconds=600)
            mock_from_url.assert_called_once_with("redis://custom:6380/1", decode_responses=False)


class TestRedisContentCacheOperations:
    @pytest.fixture
    def content(self):
        return Content(
            id="abc",
            title="Sample",
            start_time=datetime(2024, 1, 1, tzinfo=UTC),
            genre_list=("Genre1",),
        )

    @pytest.fixture
    def cache_and_client(self):
        from content_catalog.core.cache import RedisContentCache

        with pytest.MonkeyPatch.context() as mp:
            client = MagicMock()
            mp.setattr(redis, "from_url", MagicMock(return_value=client))

            cache = RedisContentCache()
            yield cache, client

    def test_get_existing_key(self, cache_and_client, content):
        cache, client = cache_and_client
        client.get.return_value = json.dumps(content.to_dict()).encode()

        assert cache.get("abc") == content
        client.get.assert_called_once_with("content:abc")

    def test_get_missing_key(self, cache_and_client):
        cache, client = cache_and_client
        client.get.return_value = None

        assert cache.get("missing") is None

    def test_set_no_ttl(self, cache_and_client, content):
        cache, client = cache_and_client
        cache.set("abc", content)
        client.set.assert_called_once_with("content:abc", json.dumps(content.to_dict()))
        client.setex.assert_not_called()

    def test_set_with_ttl(self, cache_and_client, content):
        cache, client = cache_and_client
        cache._ttl = 60
        cache.set("abc", content)
        client.setex.assert_called_once_with("content:abc", 60, json.dumps(content.to_dict()))

    def test_remove(self, cache_and_client):
        cache, client = cache_and_client
        cache.remove("abc")
        client.delete.assert_called_once_with("content:abc")

    def test_ping(self, cache_and_client):
        cache, client = cache_and_client
        client.ping.return_value = True
        assert cache.ping() is True

    def test_redis_error_wrapped(self, cache_and_client):
        cache, client = cache_and_client
        client.get.side_effect = redis.ConnectionError("down")

        with pytest.raises(CacheUnavailableError) as exc_info:
            cache.get("abc")

        assert exc_info.value.retryable is True
        assert exc_info.value.context.content_id == "abc"
        assert isinstance(exc_info.value.cause, redis.ConnectionError)
