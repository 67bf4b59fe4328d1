"""
Error mapping for the HTTP transport.

Three kinds of failure reach a client, and each leaves as an RFC 7807
:class:`~content_catalog.api.schemas.common.ProblemDetail` body:

* a failed ``OperationResult`` from the service, via :func:`problem_from_result`,
  with the status looked up in :data:`ERROR_CODE_TO_STATUS`;
* a request FastAPI could not validate, via :func:`validation_exception_handler`
  (422, one ``VALIDATION_FAILED`` entry per offending field);
* any exception nothing else caught, via :func:`unhandled_exception_handler`.
"""

from __future__ import annotations

from collections.abc import Iterable

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from content_catalog.api.schemas.common import ErrorDetail, ProblemDetail
from content_catalog.core.logging import get_logger
from content_catalog.ops.result import OperationResult

logger = get_logger(__name__)

ERROR_CODE_TO_STATUS: dict[str, int] = {
    "NOT_FOUND": 404,
    "DUPLICATE_GENRES": 400,
    "NO_GENRES_REMOVED": 400,
    "CREATION_FAILED": 500,
    "STORE_UNAVAILABLE": 500,
    "INTERNAL": 500,
}


def status_for_error_code(code: str) -> int:
    """HTTP status for a service error code; unknown codes are 500."""
    return ERROR_CODE_TO_STATUS.get(code, 500)


def problem_response(
    *,
    status: int,
    title: str,
    detail: str = "",
    instance: str = "",
    errors: Iterable[ErrorDetail] = (),
) -> JSONResponse:
    body = ProblemDetail(
        title=title,
        status=status,
        detail=detail,
        instance=instance,
        errors=list(errors),
    )
    return JSONResponse(status_code=status, content=body.model_dump())


def _genre_errors(result: OperationResult) -> list[ErrorDetail]:
    if result.code != "DUPLICATE_GENRES":
        return []
    return [
        ErrorDetail(code="DUPLICATE_GENRE", message=f"Genre '{genre}' already exists", field="genres")
        for genre in result.error.details.get("duplicates", [])
    ]


def problem_from_result(result: OperationResult, instance: str = "") -> JSONResponse:
    """Render a failed service result.

    The error message becomes the problem title, so clients see
    ``Genres: ['Genre1'] already exist`` or ``No genres to remove.`` verbatim.
    """
    if result.error is None:
        return problem_response(status=500, title="Operation failed", instance=instance)
    return problem_response(
        status=status_for_error_code(result.error.code),
        title=result.error.message,
        instance=instance,
        errors=_genre_errors(result),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """422 with one ``VALIDATION_FAILED`` entry per rejected field."""
    errors = [
        ErrorDetail(
            code="VALIDATION_FAILED",
            message=err.get("msg", "invalid value"),
            field=".".join(str(part) for part in err.get("loc", ())) or None,
        )
        for err in exc.errors()
    ]
    logger.info("request_rejected", path=request.url.path, fields=[e.field for e in errors])
    return problem_response(
        status=422,
        title="Request validation failed",
        instance=str(request.url),
        errors=errors,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """500 for anything that escaped the service; the message shows only in debug mode."""
    logger.error("unhandled_exception", path=request.url.path, error=str(exc), exc_info=exc)
    return problem_response(
        status=500,
        title="Internal Server Error",
        detail=str(exc) if request.app.state.settings.debug else "An unexpected error occurred.",
        instance=str(request.url),
    )
