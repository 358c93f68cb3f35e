"""Helpers for JSON:API query parameter parsing."""

from __future__ import annotations

import re
from typing import Any, Iterable, Mapping
from urllib.parse import parse_qsl

from jsonapi_core.core.errors import bad_request_param
from jsonapi_core.schemas.error import JSONAPIError

_INTEGER = re.compile(r"^[+-]?[0-9]+$")

PAGE_PARAMS = {
    "page[number]": "page_number",
    "page[size]": "page_size",
    "page[offset]": "page_offset",
    "page[limit]": "page_limit",
}


def _split_csv(value: str) -> list[str]:
    return [item for item in (part.strip() for part in value.split(",")) if item]


def _family_key(key: str, family: str) -> str | None:
    prefix = f"{family}["
    if key.startswith(prefix) and key.endswith("]"):
        return key[len(prefix) : -1]
    return None


def group_query_string(query: str) -> dict[str, list[str]]:
    """Group a raw query string into keys with their values in order."""
    grouped: dict[str, list[str]] = {}
    for key, value in parse_qsl(query, keep_blank_values=True):
        grouped.setdefault(key, []).append(value)
    return grouped


def _values(value: Any) -> list[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, Iterable):
        return [str(item) for item in value]
    return [str(value)]


def decode_query_params(params: str | Mapping[str, Any]) -> dict[str, Any] | JSONAPIError:
    """Decode JSON:API query parameter families into request fields.

    ``params`` is either a raw query string or a mapping of keys to a value
    or a list of values. Unknown keys are ignored. The result holds the
    ``include``, ``sorting``, ``page_*``, ``fields`` and ``filters`` entries
    of a request.
    """
    if isinstance(params, str):
        params = group_query_string(params)

    decoded: dict[str, Any] = {
        "include": [],
        "sorting": [],
        "fields": {},
        "filters": {},
    }

    for key, raw_value in params.items():
        values = _values(raw_value)

        if key == "include":
            for value in values:
                decoded["include"].extend(_split_csv(value))
            continue

        if key == "sort":
            for value in values:
                decoded["sorting"].extend(_split_csv(value))
            continue

        if key in PAGE_PARAMS:
            if len(values) != 1:
                return bad_request_param("more than one value", key)
            value = values[0].strip()
            if not _INTEGER.match(value):
                return bad_request_param("not a number", key)
            decoded[PAGE_PARAMS[key]] = int(value)
            continue

        resource_type = _family_key(key, "fields")
        if resource_type is not None:
            fields = decoded["fields"].setdefault(resource_type, [])
            for value in values:
                fields.extend(_split_csv(value))
            continue

        resource_type = _family_key(key, "filter")
        if resource_type is not None:
            filters = decoded["filters"].setdefault(resource_type, [])
            for value in values:
                filters.extend(_split_csv(value))

    return decoded
