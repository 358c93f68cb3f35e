"""Helpers for JSON:API content negotiation."""

from __future__ import annotations

from typing import Mapping

from jsonapi_core.core.errors import bad_request, not_acceptable
from jsonapi_core.schemas.error import JSONAPIError
from jsonapi_core.schemas.resource import MEDIA_TYPE

ACCEPTED_MEDIA_TYPES = frozenset({MEDIA_TYPE, "*/*", "application/*", "application/json"})


def get_header(headers: Mapping[str, str], name: str) -> str:
    """Return a header value using a case-insensitive lookup."""
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return ""


def check_content_type(content_type: str) -> JSONAPIError | None:
    """Return an error if a present content type is not the JSON:API media type."""
    if content_type and content_type != MEDIA_TYPE:
        return bad_request("invalid content type header")
    return None


def check_accept(accept: str) -> JSONAPIError | None:
    """Return an error if a present accept header excludes the JSON:API media type."""
    if accept and accept not in ACCEPTED_MEDIA_TYPES:
        return not_acceptable("invalid accept header")
    return None
