"""JSON:API document construction helpers."""

from typing import Any, Iterable, Mapping

from jsonapi_core.schemas.resource import (
    DocumentLinks,
    HybridResource,
    JSONAPIDocument,
    JSONAPIResource,
)


class JSONAPIDocumentBuilder:
    """Build JSON:API v1.1 documents from resources."""

    def build_single(
        self,
        resource: JSONAPIResource | None,
        *,
        included: Iterable[JSONAPIResource] | None = None,
        links: DocumentLinks | None = None,
        meta: Mapping[str, Any] | None = None,
    ) -> JSONAPIDocument:
        """Return a document whose primary data is one resource (or null)."""
        return JSONAPIDocument(
            data=HybridResource(one=resource),
            included=list(included or []),
            links=links,
            meta=dict(meta or {}),
        )

    def build_collection(
        self,
        resources: Iterable[JSONAPIResource],
        *,
        included: Iterable[JSONAPIResource] | None = None,
        links: DocumentLinks | None = None,
        meta: Mapping[str, Any] | None = None,
    ) -> JSONAPIDocument:
        """Return a document for a collection, ``[]`` when it is empty."""
        return JSONAPIDocument(
            data=HybridResource(many=list(resources)),
            included=list(included or []),
            links=links,
            meta=dict(meta or {}),
        )
