"""
content-catalog: a cached content catalog service.

- content_catalog.core: records, genre set algorithm, cache and store
- content_catalog.ops: the cache-aside ``ContentService``
- content_catalog.api: the FastAPI transport
- content_catalog.cli: the ``content-catalog`` command
"""

__version__ = "0.1.0"
