"""Tests for writing JSON:API documents as responses."""

import json

from jsonapi_core import MEDIA_TYPE, DocumentLinks, JSONAPIResource
from jsonapi_core.core import (
    JSONAPIDocumentBuilder,
    JSONAPIResponse,
    not_found,
    write_error,
    write_errors,
    write_resource,
    write_resources,
    write_response,
)
from jsonapi_core.schemas import JSONAPIError


def body(response: JSONAPIResponse) -> dict:
    return json.loads(response.body)


def test_write_resource():
    response = write_resource(
        200,
        JSONAPIResource(type="posts", id="1", attributes={"title": "Hello"}),
        links=DocumentLinks(self_="/posts/1"),
        included=[JSONAPIResource(type="users", id="2")],
    )
    assert response.status_code == 200
    assert response.headers["content-type"] == MEDIA_TYPE
    assert body(response) == {
        "data": {"type": "posts", "id": "1", "attributes": {"title": "Hello"}},
        "included": [{"type": "users", "id": "2"}],
        "links": {"self": "/posts/1"},
    }


def test_write_resources_empty():
    response = write_resources(200, [])
    assert body(response) == {"data": []}


def test_write_empty_response():
    response = write_response(204, None)
    assert response.status_code == 204
    assert response.body == b""


def test_write_error():
    response = write_error(not_found("unknown resource"))
    assert response.status_code == 404
    assert response.headers["content-type"] == MEDIA_TYPE
    assert body(response) == {
        "errors": [{"status": "404", "title": "Not Found", "detail": "unknown resource"}]
    }


def test_write_error_masks_exceptions():
    response = write_error(RuntimeError("database password"))
    assert response.status_code == 500
    assert b"database password" not in response.body


def test_write_errors():
    response = write_errors(JSONAPIError(status=401), JSONAPIError(status=403))
    assert response.status_code == 400
    assert [error["status"] for error in body(response)["errors"]] == ["401", "403"]


def test_builder_single_null():
    document = JSONAPIDocumentBuilder().build_single(None, meta={"found": False})
    assert document.model_dump() == {"data": None, "meta": {"found": False}}
