"""
Tests for content_catalog.core.logging — structlog configuration and context.
"""

from __future__ import annotations

import asyncio

import structlog

from content_catalog.core.logging import (
    LogContext,
    bind_context,
    configure_logging,
    get_logger,
    unbind_context,
)


class TestConfigureLogging:
    def test_json_mode_logs(self):
        configure_logging(level="DEBUG", json_format=True)
        get_logger("tests").info("content_created", content_id="abc")

    def test_console_mode_logs(self):
        configure_logging(level="INFO", json_format=False, add_timestamp=False)
        get_logger("tests").warning("genres_already_exist", duplicates=["Genre1"])


class TestContext:
    def teardown_method(self):
        unbind_context("request_id")

    def test_bind_and_unbind(self):
        bind_context(request_id="r1")
        assert structlog.contextvars.get_contextvars()["request_id"] == "r1"
        unbind_context("request_id")
        assert "request_id" not in structlog.contextvars.get_contextvars()

    def test_log_context_scoped(self):
        with LogContext(request_id="r2"):
            assert structlog.contextvars.get_contextvars()["request_id"] == "r2"
        assert "request_id" not in structlog.contextvars.get_contextvars()

    def test_log_context_async(self):
        async def run() -> dict:
            async with LogContext(request_id="r3"):
                return dict(structlog.contextvars.get_contextvars())

        assert asyncio.run(run())["request_id"] == "r3"
        assert "request_id" not in structlog.contextvars.get_contextvars()
