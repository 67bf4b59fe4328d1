"""
Structured error types for the content catalog.

Infrastructure failures (a store that cannot be reached, a cache backend that
refuses a write) are raised as :class:`CatalogError` subclasses. Expected
domain outcomes (unknown identifier, duplicate genres, nothing to remove) are
*not* exceptions: they travel back to callers as failed
:class:`~content_catalog.ops.result.OperationResult` values.

Manifesto:
    A failed store call and a missing record are different things. The first
    is an incident, the second is an answer. Keeping them apart lets the
    service log the former at error level and map the latter to precise
    HTTP statuses.

    - **Typed hierarchy:** every infrastructure error extends CatalogError
    - **Explicit retry semantics:** retryable is a property of the error type
    - **Rich context:** operation name and content id travel with the error
    - **Chaining:** the original exception is kept as ``cause``

Architecture:
    ::

        CatalogError
        ├── StoreError
        │   ├── StoreUnavailableError   (retryable)
        │   └── CreationFailedError
        └── CacheError
            └── CacheUnavailableError   (retryable)

Examples:
    >>> error = StoreUnavailableError("store timed out")
    >>> error.retryable
    True
    >>> error.with_context(operation="get_content", content_id="abc").to_dict()["context"]
    {'operation': 'get_content', 'content_id': 'abc'}

Guardrails:
    ❌ DON'T: Raise CatalogError for "not found" or validation outcomes
    ✅ DO: Return OperationResult.fail() with a domain error code

    ❌ DON'T: Swallow the original exception
    ✅ DO: Pass it as cause= when wrapping

Tags:
    error-handling, exception-hierarchy, retry-logic, error-context,
    content-catalog

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Error categories used for logging and alert routing.

    Attributes:
        STORE: Persistent store failures (timeouts, unavailable backend)
        CACHE: Cache backend failures
        VALIDATION: Malformed input reaching the core
        INTERNAL: Bugs, unexpected state
    """

    STORE = "STORE"
    CACHE = "CACHE"
    VALIDATION = "VALIDATION"
    INTERNAL = "INTERNAL"


@dataclass
class ErrorContext:
    """Structured metadata attached to an error.

    Attributes:
        operation: Service operation that was running (``"get_content"`` …)
        content_id: Identifier of the content record involved, if any
        metadata: Additional key/value pairs
    """

    operation: str | None = None
    content_id: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result: dict[str, Any] = {}
        for key in ("operation", "content_id"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class CatalogError(Exception):
    """
    Base exception for all content catalog infrastructure errors.

    Every instance carries a category, a retryable flag, an
    :class:`ErrorContext` and the optional underlying ``cause``. Subclasses set
    ``default_category`` and ``default_retryable`` to give sensible defaults.

    Examples:
        >>> error = CatalogError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>
        >>> error.retryable
        False

        >>> try:
        ...     raise ConnectionError("socket closed")
        ... except ConnectionError as e:
        ...     error = CatalogError("store call failed", cause=e)
        >>> error.cause
        ConnectionError('socket closed')
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL
    default_retryable: bool = False

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        retryable: bool | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.retryable = retryable if retryable is not None else self.default_retryable
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> CatalogError:
        """
        Add context to this error (fluent API).

        Usage:
            raise StoreError("update failed").with_context(
                operation="update_content",
                content_id=content_id,
            )
        """
        for key, value in kwargs.items():
            if key != "metadata" and hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
            "retryable": self.retryable,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# STORE ERRORS
# =============================================================================


class StoreError(CatalogError):
    """Failure inside a :class:`~content_catalog.core.store.ContentStore`."""

    default_category = ErrorCategory.STORE


class StoreUnavailableError(StoreError):
    """The store could not be reached or did not answer in time."""

    default_retryable = True


class CreationFailedError(StoreError):
    """The store accepted a create call but produced no record."""


# =============================================================================
# CACHE ERRORS
# =============================================================================


class CacheError(CatalogError):
    """Failure inside a :class:`~content_catalog.core.cache.ContentCache`."""

    default_category = ErrorCategory.CACHE


class CacheUnavailableError(CacheError):
    """The cache backend could not be reached."""

    default_retryable = True


# =============================================================================
# HELPERS
# =============================================================================


def is_retryable(error: Exception) -> bool:
    """Check whether an error is marked retryable.

    Non-catalog exceptions are never considered retryable: the service has
    no way to know their semantics.
    """
    if isinstance(error, CatalogError):
        return error.retryable
    return False


def categorize_error(error: Exception) -> ErrorCategory:
    """Return the category of an error, ``INTERNAL`` for foreign exceptions."""
    if isinstance(error, CatalogError):
        return error.category
    return ErrorCategory.INTERNAL


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "CatalogError",
    "StoreError",
    "StoreUnavailableError",
    "CreationFailedError",
    "CacheError",
    "CacheUnavailableError",
    "is_retryable",
    "categorize_error",
]
