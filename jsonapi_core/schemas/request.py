"""Classified JSON:API request descriptor."""

from __future__ import annotations

from enum import Enum
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field


class Intent(str, Enum):
    """Combination of HTTP method and URL pattern of a request."""

    LIST_RESOURCES = "ListResources"
    FIND_RESOURCE = "FindResource"
    CREATE_RESOURCE = "CreateResource"
    UPDATE_RESOURCE = "UpdateResource"
    DELETE_RESOURCE = "DeleteResource"
    GET_RELATED_RESOURCES = "GetRelatedResources"
    GET_RELATIONSHIP = "GetRelationship"
    SET_RELATIONSHIP = "SetRelationship"
    APPEND_TO_RELATIONSHIP = "AppendToRelationship"
    REMOVE_FROM_RELATIONSHIP = "RemoveFromRelationship"
    COLLECTION_ACTION = "CollectionAction"
    RESOURCE_ACTION = "ResourceAction"

    def document_expected(self) -> bool:
        """Return True if requests with this intent carry a document."""
        return self in _DOCUMENT_INTENTS

    def request_method(self) -> str:
        """Return the HTTP method of the intent, empty for actions."""
        return _METHODS.get(self, "")

    def is_action(self) -> bool:
        """Return True for collection and resource actions."""
        return self in (Intent.COLLECTION_ACTION, Intent.RESOURCE_ACTION)


_DOCUMENT_INTENTS = frozenset(
    {
        Intent.CREATE_RESOURCE,
        Intent.UPDATE_RESOURCE,
        Intent.SET_RELATIONSHIP,
        Intent.APPEND_TO_RELATIONSHIP,
        Intent.REMOVE_FROM_RELATIONSHIP,
    }
)

_METHODS = {
    Intent.LIST_RESOURCES: "GET",
    Intent.FIND_RESOURCE: "GET",
    Intent.GET_RELATED_RESOURCES: "GET",
    Intent.GET_RELATIONSHIP: "GET",
    Intent.CREATE_RESOURCE: "POST",
    Intent.APPEND_TO_RELATIONSHIP: "POST",
    Intent.UPDATE_RESOURCE: "PATCH",
    Intent.SET_RELATIONSHIP: "PATCH",
    Intent.DELETE_RESOURCE: "DELETE",
    Intent.REMOVE_FROM_RELATIONSHIP: "DELETE",
}


class JSONAPIRequest(BaseModel):
    """Validated descriptor of one inbound JSON:API request."""

    model_config = ConfigDict(frozen=True)

    intent: Intent
    prefix: str = ""
    resource_type: str = ""
    resource_id: str = ""
    related_resource: str = ""
    relationship: str = ""
    collection_action: str = ""
    resource_action: str = ""

    include: list[str] = Field(default_factory=list)

    page_number: int = 0
    page_size: int = 0
    page_offset: int = 0
    page_limit: int = 0

    sorting: list[str] = Field(default_factory=list)
    fields: dict[str, list[str]] = Field(default_factory=dict)
    filters: dict[str, list[str]] = Field(default_factory=dict)

    def self_path(self) -> str:
        """Return the URL path that addresses this request."""
        segments = [self.prefix.strip("/"), self.resource_type]
        if self.collection_action:
            segments.append(self.collection_action)
        if self.resource_id:
            segments.append(self.resource_id)
        if self.resource_action:
            segments.append(self.resource_action)
        if self.related_resource:
            segments.append(self.related_resource)
        if self.relationship:
            segments.extend(["relationships", self.relationship])
        return "/" + "/".join(segment for segment in segments if segment)

    def query_params(self) -> list[tuple[str, str]]:
        """Return the query parameters that reproduce this request."""
        params: list[tuple[str, str]] = []
        if self.include:
            params.append(("include", ",".join(self.include)))
        if self.sorting:
            params.append(("sort", ",".join(self.sorting)))
        for key, value in (
            ("page[number]", self.page_number),
            ("page[size]", self.page_size),
            ("page[offset]", self.page_offset),
            ("page[limit]", self.page_limit),
        ):
            if value > 0:
                params.append((key, str(value)))
        for resource_type in sorted(self.fields):
            params.append((f"fields[{resource_type}]", ",".join(self.fields[resource_type])))
        for resource_type in sorted(self.filters):
            params.append((f"filter[{resource_type}]", ",".join(self.filters[resource_type])))
        return params

    def query_string(self) -> str:
        """Return the encoded query string (without a leading ``?``)."""
        return urlencode(self.query_params())
