"""
Common API schemas — RFC 7807 error envelope.

Successful content endpoints return the resource itself; every 4xx/5xx
response uses :class:`ProblemDetail`.

Doc-Types: API_REFERENCE
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Structured error detail for field-level or nested errors."""

    code: str = Field(description="Machine-readable error code (e.g., 'DUPLICATE_GENRE')")
    message: str = Field(description="Human-readable error description")
    field: str | None = Field(default=None, description="Field path if error is field-specific")


class ProblemDetail(BaseModel):
    """RFC 7807 «Problem Details for HTTP APIs».

    Used as the canonical error envelope for all non-2xx responses.

    Error Codes:
        - ``NOT_FOUND`` (404): Content does not exist
        - ``DUPLICATE_GENRES`` (400): Some genres are already on the content
        - ``NO_GENRES_REMOVED`` (400): None of the genres were on the content
        - ``CREATION_FAILED`` (500): The store did not create the content
        - ``STORE_UNAVAILABLE`` (500): The catalog could not be fetched
        - ``INTERNAL`` (500): Unexpected server error

    Example:
        {
            "type": "about:blank",
            "title": "Genres: ['Genre1'] already exist",
            "status": 400,
            "detail": "",
            "instance": "/api/v1/contents/3f2b.../genre",
            "errors": [
                {"code": "DUPLICATE_GENRE", "message": "Genre 'Genre1' already exists", "field": "genres"}
            ]
        }
    """

    type: str = Field(default="about:blank", description="Error type URI (usually 'about:blank')")
    title: str = Field(description="Short human-readable error summary")
    status: int = Field(description="HTTP status code (e.g., 400, 404, 500)")
    detail: str = Field(default="", description="Human-readable explanation of the error")
    instance: str = Field(default="", description="URI of the failing request")
    errors: list[ErrorDetail] = Field(
        default_factory=list,
        description="List of field-level or nested error details",
    )
