"""Pydantic schemas for JSON:API."""

from .error import ErrorLinks, ErrorSource, JSONAPIError, status_text
from .request import Intent, JSONAPIRequest
from .resource import (
    MEDIA_TYPE,
    NULL_LINK,
    DocumentLinks,
    HybridDocument,
    HybridResource,
    JSONAPIDocument,
    JSONAPIResource,
    hybrid_shape,
)

__all__ = [
    "MEDIA_TYPE",
    "NULL_LINK",
    "DocumentLinks",
    "ErrorLinks",
    "ErrorSource",
    "HybridDocument",
    "HybridResource",
    "Intent",
    "JSONAPIDocument",
    "JSONAPIError",
    "JSONAPIRequest",
    "JSONAPIResource",
    "hybrid_shape",
    "status_text",
]
