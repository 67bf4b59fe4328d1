"""
Contents router — catalog CRUD, search and genre editing.

Endpoints:
    GET    /contents                 List the whole catalog (404 when empty)
    GET    /contents/search          Filter by ``title`` substring and ``genre``
    GET    /contents/{id}            Get one record (cache-aside)
    POST   /contents                 Create a record
    PATCH  /contents/{id}            Replace every field of a record
    DELETE /contents/{id}            Delete a record, returns its id
    POST   /contents/{id}/genre      Add genres (400 on any duplicate)
    DELETE /contents/{id}/genre      Remove genres (400 when none match)

Handlers are plain ``def``: the store blocks, so FastAPI runs them in its
threadpool.

Tags:
    content-catalog, api, contents, genres, cache-aside

Doc-Types: API_REFERENCE
"""

from __future__ import annotations

import json

from fastapi import APIRouter, Body, Path, Query, Request, Response

from content_catalog.api.deps import Contents
from content_catalog.api.middleware.errors import problem_from_result, problem_response
from content_catalog.api.schemas.contents import ContentInput, ContentSchema
from content_catalog.ops.requests import GenresRequest, SearchContentsRequest

router = APIRouter(prefix="/contents")


@router.get("", response_model=list[ContentSchema])
def list_contents(request: Request, service: Contents):
    """List every content record."""
    result = service.list_contents()
    if not result.success:
        return problem_from_result(result, str(request.url))
    if not result.data:
        return problem_response(status=404, title="No contents found", instance=str(request.url))
    return [ContentSchema.from_content(c) for c in result.data]


# Declared before /{content_id} so "search" is not captured as an id.
@router.get("/search", response_model=list[ContentSchema])
def search_contents(
    request: Request,
    service: Contents,
    title: str | None = Query(None, description="Substring of the title (case-sensitive)"),
    genre: str | None = Query(None, description="Exact genre tag"),
):
    """Filter the catalog by title and genre. An empty match is still 200."""
    result = service.search_contents(SearchContentsRequest(title=title, genre=genre))
    if not result.success:
        return problem_from_result(result, str(request.url))
    return [ContentSchema.from_content(c) for c in result.data or []]


@router.get("/{content_id}", response_model=ContentSchema)
def get_content(
    request: Request,
    service: Contents,
    content_id: str = Path(..., description="Content ID"),
):
    """Get one content record."""
    result = service.get_content(content_id)
    if not result.success:
        return problem_from_result(result, str(request.url))
    return ContentSchema.from_content(result.data)


@router.post("", response_model=ContentSchema)
def create_content(request: Request, body: ContentInput, service: Contents):
    """Create a content record; the store assigns the id."""
    result = service.create_content(body.to_draft())
    if not result.success:
        return problem_from_result(result, str(request.url))
    return ContentSchema.from_content(result.data)


@router.patch("/{content_id}", response_model=ContentSchema)
def update_content(
    request: Request,
    body: ContentInput,
    service: Contents,
    content_id: str = Path(..., description="Content ID"),
):
    """Replace every field of a content record."""
    result = service.update_content(content_id, body.to_draft())
    if not result.success:
        return problem_from_result(result, str(request.url))
    return ContentSchema.from_content(result.data)


@router.delete("/{content_id}", response_model=str)
def delete_content(
    request: Request,
    service: Contents,
    content_id: str = Path(..., description="Content ID"),
):
    """Delete a content record and return its id."""
    result = service.delete_content(content_id)
    if not result.success:
        return problem_from_result(result, str(request.url))
    return result.data


@router.post("/{content_id}/genre", response_model=ContentSchema)
def add_genres(
    request: Request,
    response: Response,
    service: Contents,
    content_id: str = Path(..., description="Content ID"),
    genres: list[str] = Body(..., description="Genre tags to add"),
):
    """Add genres to a content record. Any duplicate rejects the whole call.

    Tags repeated within the body are added once and listed, as a JSON
    array, in the ``X-Genre-Warnings`` header.
    """
    result = service.add_genres(content_id, GenresRequest(genres=tuple(genres)))
    if not result.success:
        return problem_from_result(result, str(request.url))
    if result.warnings:
        response.headers["X-Genre-Warnings"] = json.dumps(result.warnings)
    return ContentSchema.from_content(result.data)


@router.delete("/{content_id}/genre", response_model=ContentSchema)
def remove_genres(
    request: Request,
    service: Contents,
    content_id: str = Path(..., description="Content ID"),
    genres: list[str] = Body(..., description="Genre tags to remove"),
):
    """Remove genres from a content record, ignoring case."""
    result = service.remove_genres(content_id, GenresRequest(genres=tuple(genres)))
    if not result.success:
        return problem_from_result(result, str(request.url))
    return ContentSchema.from_content(result.data)
