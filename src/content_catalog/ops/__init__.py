"""
Operations layer.

Transport-agnostic service functions shared by the API and CLI. Every
operation returns an :class:`~content_catalog.ops.result.OperationResult`.
"""

from content_catalog.ops.contents import ContentService
from content_catalog.ops.requests import GenresRequest, SearchContentsRequest
from content_catalog.ops.result import OperationError, OperationResult

__all__ = [
    "ContentService",
    "GenresRequest",
    "OperationError",
    "OperationResult",
    "SearchContentsRequest",
]
