"""
Operation result envelope.

Provides :class:`OperationResult`, the typed success/failure envelope that
every :class:`~content_catalog.ops.contents.ContentService` operation
returns. Domain outcomes ("not found", "duplicate genres", "nothing to
remove") are failed results with a machine-readable ``code``, never
exceptions; the API layer maps the code to an HTTP status.

Error codes used by the service:

==================== =====================================================
``NOT_FOUND``         identifier absent in the store
``DUPLICATE_GENRES``  add rejected; ``details["duplicates"]`` names them
``NO_GENRES_REMOVED`` none of the requested tags matched
``CREATION_FAILED``   the store did not produce a new record
``STORE_UNAVAILABLE`` the full catalog could not be fetched
``INTERNAL``          any other unexpected store/cache failure
==================== =====================================================
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from content_catalog.core.errors import ErrorCategory

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class OperationError:
    """Structured error detail for failed operations.

    Attributes:
        code: Machine-readable code (``NOT_FOUND``, ``DUPLICATE_GENRES``, …).
        message: Human-readable description of the error.
        category: Optional :class:`ErrorCategory` for routing/alerting.
        details: Extra key/value context (offending genres, ids, …).
        retryable: Whether the caller may retry the operation.
    """

    code: str
    message: str
    category: ErrorCategory | None = None
    details: dict[str, Any] = field(default_factory=dict)
    retryable: bool = False


@dataclass
class OperationResult(Generic[T]):
    """Envelope returned by every service operation.

    Factory methods :meth:`ok` and :meth:`fail` should be used instead of
    the constructor directly.

    Attributes:
        success: ``True`` when the operation completed without error.
        data: The typed payload (``None`` on failure).
        error: Structured error (``None`` on success).
        warnings: Non-fatal messages collected during the operation.
        elapsed_ms: Wall-clock time the operation took.
    """

    success: bool
    data: T | None = None
    error: OperationError | None = None
    warnings: list[str] = field(default_factory=list)
    elapsed_ms: float = 0.0

    # ------------------------------------------------------------------ #
    # Factory helpers
    # ------------------------------------------------------------------ #

    @classmethod
    def ok(
        cls,
        data: T,
        *,
        warnings: list[str] | None = None,
        elapsed_ms: float = 0.0,
    ) -> OperationResult[T]:
        """Create a successful result."""
        return cls(
            success=True,
            data=data,
            warnings=warnings or [],
            elapsed_ms=elapsed_ms,
        )

    @classmethod
    def fail(
        cls,
        code: str,
        message: str,
        *,
        category: ErrorCategory | None = None,
        details: dict[str, Any] | None = None,
        retryable: bool = False,
        elapsed_ms: float = 0.0,
    ) -> OperationResult[T]:
        """Create a failed result."""
        return cls(
            success=False,
            error=OperationError(
                code=code,
                message=message,
                category=category,
                details=details or {},
                retryable=retryable,
            ),
            elapsed_ms=elapsed_ms,
        )

    @property
    def code(self) -> str | None:
        """Error code of a failed result, ``None`` on success."""
        return self.error.code if self.error else None


# ------------------------------------------------------------------ #
# Timing helper
# ------------------------------------------------------------------ #


class Timer:
    """Minimal stopwatch for timing operations."""

    __slots__ = ("_start",)

    def __init__(self) -> None:
        self._start = time.perf_counter()

    @property
    def elapsed_ms(self) -> float:
        return (time.perf_counter() - self._start) * 1000


def start_timer() -> Timer:
    """Return a lightweight timer.  Use ``timer.elapsed_ms`` when done."""
    return Timer()
