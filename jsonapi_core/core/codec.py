"""Decoding and encoding of JSON:API documents.

Numbers keep their exact value: integers decode to ``int`` and fractional
numbers to :class:`decimal.Decimal`, and both are written back as plain
JSON number literals.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

import simplejson
from pydantic import ValidationError

from jsonapi_core.core.errors import bad_request
from jsonapi_core.schemas.error import ErrorSource, JSONAPIError
from jsonapi_core.schemas.resource import JSONAPIDocument

logger = logging.getLogger(__name__)

# Ints wider than this may exceed the int to str digit limit and are
# written through Decimal, which prints the same digits.
_MAX_INT_BITS = 4096


def _parse_int(text: str) -> int | Decimal:
    try:
        return int(text)
    except ValueError:
        # longer than the interpreter allows for int conversion
        return Decimal(text)


def _exact_numbers(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _exact_numbers(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_exact_numbers(item) for item in value]
    if isinstance(value, int) and not isinstance(value, bool) and value.bit_length() > _MAX_INT_BITS:
        return Decimal(value)
    return value


def _json_pointer(location: tuple) -> str:
    parts: list[str] = []
    for index, part in enumerate(location):
        # hybrid branches are not part of the wire format
        if part in ("one", "many") and index > 0:
            previous = location[index - 1]
            if previous == "data" or (index > 1 and location[index - 2] == "relationships"):
                continue
        parts.append(str(part))
    return "/" + "/".join(parts) if parts else ""


def _validation_error(exc: ValidationError) -> JSONAPIError:
    first = exc.errors()[0]
    cause = first.get("ctx", {}).get("error")
    detail = str(cause) if cause is not None else first["msg"]
    error = bad_request(detail)
    pointer = _json_pointer(tuple(first["loc"]))
    if pointer:
        error.source = ErrorSource(pointer=pointer)
    return error


def load_document(raw: bytes | str) -> JSONAPIDocument | JSONAPIError:
    """Decode a document without interpreting its errors or data."""
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = bytes(raw).decode("utf-8")
        except UnicodeDecodeError:
            logger.debug("Rejected document that is not valid UTF-8")
            return bad_request("invalid document")

    try:
        payload = simplejson.loads(raw, use_decimal=True, parse_int=_parse_int)
    except (ValueError, RecursionError) as exc:
        logger.debug("Rejected malformed document: %s", exc)
        return bad_request("invalid document")

    if not isinstance(payload, dict):
        return bad_request("invalid document")

    try:
        return JSONAPIDocument.model_validate(payload)
    except ValidationError as exc:
        error = _validation_error(exc)
        logger.debug("Rejected invalid document: %s", error.detail)
        return error


def decode_document(raw: bytes | str) -> JSONAPIDocument | JSONAPIError:
    """Decode a document, returning its first error if it carries any.

    Use :func:`load_document` to inspect every error of a document.
    """
    document = load_document(raw)
    if isinstance(document, JSONAPIError):
        return document
    if document.errors:
        return document.errors[0]
    return document


def parse_document(raw: bytes | str) -> JSONAPIDocument | JSONAPIError:
    """Decode a request body, which must carry primary data."""
    document = decode_document(raw)
    if isinstance(document, JSONAPIError):
        return document
    data = document.data
    if data is None or (data.one is None and not data.many):
        return bad_request("missing data")
    return document


def encode_document(document: JSONAPIDocument) -> bytes:
    """Encode a document to its compact JSON representation."""
    return simplejson.dumps(
        _exact_numbers(document.model_dump()),
        use_decimal=True,
        separators=(",", ":"),
    ).encode("utf-8")
