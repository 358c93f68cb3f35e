"""Pydantic models for JSON:API v1.1 documents and resource objects."""

from __future__ import annotations

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer

from .error import JSONAPIError

MEDIA_TYPE = "application/vnd.api+json"

_WHITESPACE = b" \t\r\n"


class NullLink:
    """Sentinel for a link that is explicitly ``null`` on the wire."""

    _instance: NullLink | None = None

    def __new__(cls) -> NullLink:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NULL_LINK"


NULL_LINK = NullLink()

Link = Union[str, NullLink, None]


def hybrid_shape(value: Any) -> Literal["one", "many"] | None:
    """Detect whether a JSON value holds a single object or a list.

    Raw JSON text is classified by its first significant byte, already
    parsed values by their container type. ``None`` means neither.
    """
    if isinstance(value, str):
        value = value.encode()
    if isinstance(value, (bytes, bytearray)):
        stripped = bytes(value).lstrip(_WHITESPACE)
        if stripped.startswith(b"{"):
            return "one"
        if stripped.startswith(b"["):
            return "many"
        return None
    if isinstance(value, dict):
        return "one"
    if isinstance(value, list):
        return "many"
    return None


def _coerce_hybrid(value: Any) -> Any:
    if value is None or isinstance(value, (HybridResource, HybridDocument)):
        return value
    # parsed JSON strings are values, not raw text to sniff
    shape = None if isinstance(value, (str, bytes, bytearray)) else hybrid_shape(value)
    if shape is None:
        raise ValueError("expected data to be an object or array")
    return {shape: value}


class DocumentLinks(BaseModel):
    """Links related to a document's primary data.

    A link given as ``None`` or ``NULL_LINK`` encodes as JSON ``null``,
    a link that was never set is left out.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True)

    self_: Link = Field(default=None, alias="self")
    related: Link = None
    first: Link = None
    prev: Link = None
    next: Link = None
    last: Link = None

    @field_validator("self_", "related", "first", "prev", "next", "last", mode="before")
    @classmethod
    def _explicit_null(cls, value: Any) -> Any:
        return NULL_LINK if value is None else value

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        links: dict[str, Any] = {}
        for name, key in (
            ("self_", "self"),
            ("related", "related"),
            ("first", "first"),
            ("prev", "prev"),
            ("next", "next"),
            ("last", "last"),
        ):
            value = getattr(self, name)
            if value is NULL_LINK:
                links[key] = None
            elif value is not None:
                links[key] = value
        return links


class JSONAPIResource(BaseModel):
    """Resource object with attributes and relationships.

    ``id`` may stay empty only for resources sent by a client to be created.
    """

    type: str = Field(min_length=1)
    id: str = ""
    attributes: dict[str, Any] = Field(default_factory=dict)
    relationships: dict[str, HybridDocument] = Field(default_factory=dict)
    meta: dict[str, Any] = Field(default_factory=dict)

    @field_validator("relationships", mode="before")
    @classmethod
    def _relationship_shapes(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        return {name: _coerce_hybrid(linkage) for name, linkage in value.items()}

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        resource: dict[str, Any] = {"type": self.type}
        if self.id:
            resource["id"] = self.id
        if self.attributes:
            resource["attributes"] = dict(self.attributes)
        if self.relationships:
            resource["relationships"] = {
                name: linkage.model_dump() for name, linkage in self.relationships.items()
            }
        if self.meta:
            resource["meta"] = dict(self.meta)
        return resource


class HybridResource(BaseModel):
    """Either a single resource or an ordered list of resources."""

    one: Optional[JSONAPIResource] = None
    many: Optional[list[JSONAPIResource]] = None

    @model_serializer
    def _serialize(self) -> Any:
        if self.many is not None:
            return [resource.model_dump() for resource in self.many]
        if self.one is not None:
            return self.one.model_dump()
        return None


class HybridDocument(BaseModel):
    """Either a single embedded document or an ordered list of documents."""

    one: Optional[JSONAPIDocument] = None
    many: Optional[list[JSONAPIDocument]] = None

    @model_serializer
    def _serialize(self) -> Any:
        if self.many is not None:
            return [document.model_dump() for document in self.many]
        if self.one is not None:
            return self.one.model_dump()
        return None


class JSONAPIDocument(BaseModel):
    """Top-level JSON:API document, also used for relationship linkage."""

    data: Optional[HybridResource] = None
    included: list[JSONAPIResource] = Field(default_factory=list)
    links: Optional[DocumentLinks] = None
    errors: list[JSONAPIError] = Field(default_factory=list)
    meta: dict[str, Any] = Field(default_factory=dict)

    @field_validator("data", mode="before")
    @classmethod
    def _data_shape(cls, value: Any) -> Any:
        return _coerce_hybrid(value)

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        document: dict[str, Any] = {}
        if self.data is not None:
            document["data"] = self.data.model_dump()
        if self.included:
            document["included"] = [resource.model_dump() for resource in self.included]
        if self.links is not None:
            links = self.links.model_dump()
            if links:
                document["links"] = links
        if self.errors:
            document["errors"] = [error.model_dump() for error in self.errors]
        if self.meta:
            document["meta"] = dict(self.meta)
        return document


JSONAPIResource.model_rebuild()
HybridResource.model_rebuild()
HybridDocument.model_rebuild()
JSONAPIDocument.model_rebuild()
