"""Classification of raw HTTP requests into JSON:API request descriptors."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import BaseModel, Field

from jsonapi_core.core.errors import bad_request, bad_request_param
from jsonapi_core.schemas.error import JSONAPIError
from jsonapi_core.schemas.request import Intent, JSONAPIRequest
from jsonapi_core.utils.content_negotiation import check_accept, check_content_type, get_header
from jsonapi_core.utils.query_params import decode_query_params

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = frozenset({"GET", "POST", "PATCH", "DELETE"})

METHOD_OVERRIDE_HEADER = "X-HTTP-Method-Override"

# (method, level) where the level is 1 for collections, 2 for single
# resources, 3 for related resources and 4 for relationships
INTENTS = {
    ("GET", 1): Intent.LIST_RESOURCES,
    ("GET", 2): Intent.FIND_RESOURCE,
    ("GET", 3): Intent.GET_RELATED_RESOURCES,
    ("GET", 4): Intent.GET_RELATIONSHIP,
    ("POST", 1): Intent.CREATE_RESOURCE,
    ("POST", 4): Intent.APPEND_TO_RELATIONSHIP,
    ("PATCH", 2): Intent.UPDATE_RESOURCE,
    ("PATCH", 4): Intent.SET_RELATIONSHIP,
    ("DELETE", 2): Intent.DELETE_RESOURCE,
    ("DELETE", 4): Intent.REMOVE_FROM_RELATIONSHIP,
}


class ResolverConfig(BaseModel):
    """URL prefix and custom action tables of a JSON:API endpoint.

    Action tables map an action name to the HTTP methods it accepts.
    """

    prefix: str = ""
    collection_actions: dict[str, list[str]] = Field(default_factory=dict)
    resource_actions: dict[str, list[str]] = Field(default_factory=dict)


def _allows(actions: Mapping[str, Any], name: str, method: str) -> bool:
    methods = actions.get(name)
    if methods is None:
        return False
    return method in {allowed.upper() for allowed in methods}


def _check_pagination(params: dict[str, Any]) -> JSONAPIError | None:
    number = params.get("page_number", 0)
    size = params.get("page_size", 0)
    offset = params.get("page_offset", 0)
    limit = params.get("page_limit", 0)

    if number > 0 and size <= 0:
        return bad_request_param("missing page size", "page[number]")
    if size > 0 and number <= 0:
        return bad_request_param("missing page number", "page[size]")
    if offset > 0 and limit <= 0:
        return bad_request_param("missing page limit", "page[limit]")
    if (number > 0 or size > 0) and (offset > 0 or limit > 0):
        return bad_request_param("mixed pagination forms", "page[offset]")
    return None


def resolve_request(
    method: str,
    path: str,
    headers: Mapping[str, str],
    query: str | Mapping[str, Any] = "",
    prefix: str = "",
    collection_actions: Mapping[str, Any] | None = None,
    resource_actions: Mapping[str, Any] | None = None,
) -> JSONAPIRequest | JSONAPIError:
    """Classify a request by method, URL, headers and query parameters.

    Returns the validated request descriptor or the first error found.
    Nothing is raised for invalid input.
    """
    collection_actions = collection_actions or {}
    resource_actions = resource_actions or {}

    override = get_header(headers, METHOD_OVERRIDE_HEADER)
    if override:
        method = override
    method = method.upper()
    if method not in SUPPORTED_METHODS:
        return bad_request("unsupported method")

    prefix = prefix.strip("/")
    path = path.strip("/")
    if prefix:
        if not path.startswith(prefix + "/"):
            return bad_request("invalid URL prefix")
        path = path[len(prefix) + 1 :]

    segments = path.split("/")
    if len(segments) > 4:
        return bad_request("invalid URL segment count")
    if any(segment == "" for segment in segments):
        return bad_request("invalid URL segment")

    location: dict[str, str] = {"prefix": prefix, "resource_type": segments[0]}

    if len(segments) == 2 and _allows(collection_actions, segments[1], method):
        return JSONAPIRequest(
            intent=Intent.COLLECTION_ACTION, collection_action=segments[1], **location
        )

    if len(segments) >= 2:
        location["resource_id"] = segments[1]

    if len(segments) == 3 and _allows(resource_actions, segments[2], method):
        return JSONAPIRequest(
            intent=Intent.RESOURCE_ACTION, resource_action=segments[2], **location
        )

    level = len(segments)
    if len(segments) == 3 and segments[2] != "relationships":
        location["related_resource"] = segments[2]
    elif len(segments) == 4 and segments[2] == "relationships":
        location["relationship"] = segments[3]
    elif len(segments) > 2:
        return bad_request("invalid URL relationship format")

    intent = INTENTS.get((method, level))
    if intent is None:
        return bad_request("the URL and method combination is invalid")

    content_type = get_header(headers, "Content-Type")
    error = check_content_type(content_type) or check_accept(get_header(headers, "Accept"))
    if error is not None:
        return error
    if intent.document_expected() and not content_type:
        return bad_request("missing content type header")

    params = decode_query_params(query)
    if isinstance(params, JSONAPIError):
        return params

    error = _check_pagination(params)
    if error is not None:
        return error

    return JSONAPIRequest(intent=intent, **location, **params)


class RequestResolver:
    """Resolve requests against a fixed :class:`ResolverConfig`."""

    def __init__(self, config: ResolverConfig | None = None) -> None:
        """Store the resolver configuration."""
        self.config = config or ResolverConfig()

    def resolve(
        self,
        method: str,
        path: str,
        headers: Mapping[str, str],
        query: str | Mapping[str, Any] = "",
    ) -> JSONAPIRequest | JSONAPIError:
        """Resolve a request, logging the reason of rejected ones."""
        result = resolve_request(
            method,
            path,
            headers,
            query,
            prefix=self.config.prefix,
            collection_actions=self.config.collection_actions,
            resource_actions=self.config.resource_actions,
        )
        if isinstance(result, JSONAPIError):
            logger.debug("Rejected %s %s: %s", method, path, result.detail)
        return result
