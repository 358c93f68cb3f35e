"""Standard JSON:API pagination strategy."""

from __future__ import annotations

from typing import Any, Sequence

from jsonapi_core.schemas.request import JSONAPIRequest
from jsonapi_core.schemas.resource import DocumentLinks

from .base import PaginationBase


class StandardPagination(PaginationBase):
    """Pagination by page[number]/page[size] or page[offset]/page[limit].

    Page numbers start at 1. Requests without pagination parameters select
    every item.
    """

    def window(self, request: JSONAPIRequest) -> tuple[int, int] | None:
        """Return the (offset, limit) selected by the request, if any."""
        if request.page_number > 0 and request.page_size > 0:
            return (request.page_number - 1) * request.page_size, request.page_size
        if request.page_limit > 0:
            return max(request.page_offset, 0), request.page_limit
        return None

    def paginate(self, items: Sequence[Any], request: JSONAPIRequest) -> list[Any]:
        """Slice items according to the request's pagination form."""
        window = self.window(request)
        if window is None:
            return list(items)
        offset, limit = window
        return list(items[offset : offset + limit])

    def get_links(
        self, *, total: int, request: JSONAPIRequest, base_url: str = ""
    ) -> DocumentLinks:
        """Build self, first, last, prev and next links for a request."""
        base = base_url.rstrip("/")

        def build_url(page: JSONAPIRequest) -> str:
            query = page.query_string()
            url = f"{base}{page.self_path()}"
            return f"{url}?{query}" if query else url

        links = DocumentLinks(self_=build_url(request))
        window = self.window(request)
        if window is None:
            return links

        if request.page_number > 0:
            size = request.page_size
            last_page = max(1, -(-total // size))
            links.first = build_url(request.model_copy(update={"page_number": 1}))
            links.last = build_url(request.model_copy(update={"page_number": last_page}))
            if request.page_number > 1:
                links.prev = build_url(
                    request.model_copy(update={"page_number": request.page_number - 1})
                )
            if request.page_number < last_page:
                links.next = build_url(
                    request.model_copy(update={"page_number": request.page_number + 1})
                )
            return links

        offset, limit = window
        last_offset = max(0, (max(total - 1, 0) // limit) * limit)
        links.first = build_url(request.model_copy(update={"page_offset": 0}))
        links.last = build_url(request.model_copy(update={"page_offset": last_offset}))
        if offset > 0:
            links.prev = build_url(
                request.model_copy(update={"page_offset": max(offset - limit, 0)})
            )
        if offset + limit < total:
            links.next = build_url(request.model_copy(update={"page_offset": offset + limit}))
        return links

    def get_meta(self, *, total: int, request: JSONAPIRequest) -> dict[str, Any]:
        """Build pagination metadata with the total and the selected window."""
        meta: dict[str, Any] = {"total": total}
        if request.page_number > 0:
            meta["number"] = request.page_number
            meta["size"] = request.page_size
        elif request.page_limit > 0:
            meta["offset"] = request.page_offset
            meta["limit"] = request.page_limit
        return meta
