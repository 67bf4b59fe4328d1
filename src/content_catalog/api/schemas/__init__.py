"""API schemas package.

Pydantic schemas define the API contract. Centralising them here keeps
routers and ops decoupled from serialisation details.

Tags:
    content-catalog, api, schemas, pydantic, contract

Doc-Types:
    api-reference
"""

from content_catalog.api.schemas.common import ErrorDetail, ProblemDetail
from content_catalog.api.schemas.contents import ContentInput, ContentSchema

__all__ = [
    "ContentInput",
    "ContentSchema",
    "ErrorDetail",
    "ProblemDetail",
]
