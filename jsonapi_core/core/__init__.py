"""Core JSON:API codec, document and error helpers."""

from .codec import decode_document, encode_document, load_document, parse_document
from .document import JSONAPIDocumentBuilder
from .errors import (
    JSONAPIErrorBuilder,
    JSONAPIException,
    bad_request,
    bad_request_param,
    error_from_status,
    internal_server_error,
    not_acceptable,
    not_found,
    write_many,
    write_single,
)
from .response import (
    JSONAPIResponse,
    write_error,
    write_errors,
    write_resource,
    write_resources,
    write_response,
)

__all__ = [
    "JSONAPIDocumentBuilder",
    "JSONAPIErrorBuilder",
    "JSONAPIException",
    "JSONAPIResponse",
    "bad_request",
    "bad_request_param",
    "decode_document",
    "encode_document",
    "error_from_status",
    "internal_server_error",
    "load_document",
    "not_acceptable",
    "not_found",
    "parse_document",
    "write_error",
    "write_errors",
    "write_many",
    "write_resource",
    "write_resources",
    "write_response",
    "write_single",
]
