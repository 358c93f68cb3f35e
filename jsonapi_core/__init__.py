"""JSON:API request resolution and document codec."""

from .core.codec import decode_document, encode_document, load_document, parse_document
from .core.document import JSONAPIDocumentBuilder
from .core.errors import JSONAPIErrorBuilder, JSONAPIException, write_many, write_single
from .core.response import JSONAPIResponse
from .resolver import RequestResolver, ResolverConfig, resolve_request
from .schemas import (
    MEDIA_TYPE,
    NULL_LINK,
    DocumentLinks,
    HybridDocument,
    HybridResource,
    Intent,
    JSONAPIDocument,
    JSONAPIError,
    JSONAPIRequest,
    JSONAPIResource,
)

__all__ = [
    "MEDIA_TYPE",
    "NULL_LINK",
    "DocumentLinks",
    "HybridDocument",
    "HybridResource",
    "Intent",
    "JSONAPIDocument",
    "JSONAPIDocumentBuilder",
    "JSONAPIError",
    "JSONAPIErrorBuilder",
    "JSONAPIException",
    "JSONAPIRequest",
    "JSONAPIResource",
    "JSONAPIResponse",
    "RequestResolver",
    "ResolverConfig",
    "decode_document",
    "encode_document",
    "load_document",
    "parse_document",
    "resolve_request",
    "write_many",
    "write_single",
]
