"""Writing JSON:API documents as Starlette responses."""

from __future__ import annotations

from typing import Any, Iterable

from starlette.responses import Response

from jsonapi_core.core.codec import encode_document
from jsonapi_core.core.document import JSONAPIDocumentBuilder
from jsonapi_core.core.errors import write_many, write_single
from jsonapi_core.schemas.error import JSONAPIError
from jsonapi_core.schemas.resource import (
    MEDIA_TYPE,
    DocumentLinks,
    JSONAPIDocument,
    JSONAPIResource,
)


class JSONAPIResponse(Response):
    """Response rendering a :class:`JSONAPIDocument` as ``application/vnd.api+json``."""

    media_type = MEDIA_TYPE

    def render(self, content: Any) -> bytes:
        if content is None:
            return b""
        if isinstance(content, JSONAPIDocument):
            return encode_document(content)
        return super().render(content)


def write_response(status: int, document: JSONAPIDocument | None) -> JSONAPIResponse:
    """Return a response for a document, or an empty one when it is None."""
    return JSONAPIResponse(document, status_code=status)


def write_resource(
    status: int,
    resource: JSONAPIResource,
    links: DocumentLinks | None = None,
    included: Iterable[JSONAPIResource] = (),
) -> JSONAPIResponse:
    document = JSONAPIDocumentBuilder().build_single(resource, included=included, links=links)
    return write_response(status, document)


def write_resources(
    status: int,
    resources: Iterable[JSONAPIResource],
    links: DocumentLinks | None = None,
    included: Iterable[JSONAPIResource] = (),
) -> JSONAPIResponse:
    document = JSONAPIDocumentBuilder().build_collection(
        resources, included=included, links=links
    )
    return write_response(status, document)


def write_error(error: Any) -> JSONAPIResponse:
    """Return an error response, masking values that are not JSON:API errors."""
    status, document = write_single(error)
    return write_response(status, document)


def write_errors(*errors: JSONAPIError) -> JSONAPIResponse:
    """Return an error response whose status is common to all errors."""
    status, document = write_many(*errors)
    return write_response(status, document)
