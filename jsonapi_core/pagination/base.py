"""Pagination base class for JSON:API links and meta."""

from typing import Any, Sequence

from jsonapi_core.schemas.request import JSONAPIRequest
from jsonapi_core.schemas.resource import DocumentLinks


class PaginationBase:
    """Define pagination API for JSON:API."""

    def paginate(self, items: Sequence[Any], request: JSONAPIRequest) -> list[Any]:
        """Return the slice of items selected by the request."""
        raise NotImplementedError

    def get_links(
        self, *, total: int, request: JSONAPIRequest, base_url: str = ""
    ) -> DocumentLinks:
        """Return JSON:API pagination links."""
        raise NotImplementedError

    def get_meta(self, *, total: int, request: JSONAPIRequest) -> dict[str, Any]:
        """Return JSON:API pagination metadata (total, limit, offset, etc.)."""
        raise NotImplementedError
