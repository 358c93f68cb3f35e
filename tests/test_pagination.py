"""Tests for pagination of resolved requests."""

from urllib.parse import unquote

from jsonapi_core import Intent, JSONAPIRequest, resolve_request
from jsonapi_core.pagination import StandardPagination

ITEMS = ["a", "b", "c", "d", "e"]


def make_request(query: str) -> JSONAPIRequest:
    return resolve_request("GET", "/api/posts", {}, query, prefix="api")


def test_without_pagination():
    paginator = StandardPagination()
    request = make_request("")
    assert paginator.paginate(ITEMS, request) == ITEMS
    links = paginator.get_links(total=5, request=request, base_url="http://example.com")
    assert links.self_ == "http://example.com/api/posts"
    assert links.next is None
    assert paginator.get_meta(total=5, request=request) == {"total": 5}


def test_paged_form():
    paginator = StandardPagination()
    request = make_request("page[number]=2&page[size]=2")
    assert paginator.paginate(ITEMS, request) == ["c", "d"]

    links = paginator.get_links(total=5, request=request, base_url="http://example.com/")
    assert unquote(links.first) == "http://example.com/api/posts?page[number]=1&page[size]=2"
    assert unquote(links.prev) == "http://example.com/api/posts?page[number]=1&page[size]=2"
    assert unquote(links.next) == "http://example.com/api/posts?page[number]=3&page[size]=2"
    assert unquote(links.last) == "http://example.com/api/posts?page[number]=3&page[size]=2"
    assert paginator.get_meta(total=5, request=request) == {"total": 5, "number": 2, "size": 2}


def test_last_page():
    paginator = StandardPagination()
    request = make_request("page[number]=3&page[size]=2")
    assert paginator.paginate(ITEMS, request) == ["e"]
    links = paginator.get_links(total=5, request=request)
    assert links.next is None
    assert unquote(links.prev) == "/api/posts?page[number]=2&page[size]=2"


def test_offset_form():
    paginator = StandardPagination()
    request = make_request("page[offset]=2&page[limit]=2&sort=-id")
    assert paginator.paginate(ITEMS, request) == ["c", "d"]

    links = paginator.get_links(total=5, request=request)
    assert unquote(links.self_) == "/api/posts?sort=-id&page[offset]=2&page[limit]=2"
    assert unquote(links.first) == "/api/posts?sort=-id&page[limit]=2"
    assert unquote(links.prev) == "/api/posts?sort=-id&page[limit]=2"
    assert unquote(links.next) == "/api/posts?sort=-id&page[offset]=4&page[limit]=2"
    assert unquote(links.last) == "/api/posts?sort=-id&page[offset]=4&page[limit]=2"
    assert paginator.get_meta(total=5, request=request) == {"total": 5, "offset": 2, "limit": 2}


def test_offset_beyond_items():
    paginator = StandardPagination()
    request = JSONAPIRequest(
        intent=Intent.LIST_RESOURCES, resource_type="posts", page_offset=10, page_limit=5
    )
    assert paginator.paginate(ITEMS, request) == []


def test_limit_only():
    paginator = StandardPagination()
    request = make_request("page[limit]=3")
    assert paginator.paginate(ITEMS, request) == ["a", "b", "c"]
    links = paginator.get_links(total=5, request=request)
    assert links.prev is None
    assert unquote(links.next) == "/api/posts?page[offset]=3&page[limit]=3"
