"""
REST API layer for the content catalog.

Provides a FastAPI application factory whose endpoints delegate to
:class:`~content_catalog.ops.contents.ContentService`. This package handles
only HTTP transport concerns: serialisation, status-code mapping and
request context.

Quick start::

    from content_catalog.api import create_app

    app = create_app()  # ready for uvicorn

Tags:
    content-catalog, api, REST, FastAPI, transport-layer

Doc-Types:
    api-reference
"""

from content_catalog.api.app import create_app

__all__ = ["create_app"]
