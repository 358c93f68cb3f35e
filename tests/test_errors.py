"""Tests for error generators and the error document composer."""

import pytest

from jsonapi_core.core.errors import (
    JSONAPIErrorBuilder,
    JSONAPIException,
    bad_request,
    bad_request_param,
    common_status,
    error_from_status,
    internal_server_error,
    not_acceptable,
    not_found,
    write_many,
    write_single,
)
from jsonapi_core.schemas import ErrorLinks, JSONAPIError


class TestGenerators:
    def test_error_from_status(self):
        error = error_from_status(404, "unknown resource")
        assert error == JSONAPIError(status=404, title="Not Found", detail="unknown resource")

    def test_unknown_status_has_no_title(self):
        assert error_from_status(799).title == ""

    def test_shortcuts(self):
        assert bad_request("x").status == 400
        assert not_found("x").status == 404
        assert not_acceptable("x").status == 406
        assert internal_server_error().status == 500
        assert internal_server_error().detail == ""

    def test_bad_request_param(self):
        error = bad_request_param("not a number", "page[size]")
        assert error.source.parameter == "page[size]"
        assert error.source.pointer == ""

    def test_string_form(self):
        assert str(bad_request("missing data")) == "Bad Request: missing data"

    def test_status_is_an_int(self):
        assert type(bad_request("x").status) is int


class TestNormalization:
    @pytest.mark.parametrize("status", [0, 42, 799])
    def test_invalid_status_becomes_500(self, status):
        error = JSONAPIError(status=status, title="Odd")
        normalized = error.normalized()
        assert normalized.status == 500
        assert normalized.title == "Odd"
        assert error.status == status

    def test_valid_status_is_kept(self):
        error = JSONAPIError(status=409)
        assert error.normalized().status == 409


class TestWriteSingle:
    def test_error(self):
        status, document = write_single(not_found("unknown resource"))
        assert status == 404
        assert document.errors == [not_found("unknown resource")]
        assert document.data is None

    def test_non_error_value(self, caplog):
        with caplog.at_level("ERROR", logger="jsonapi_core.core.errors"):
            status, document = write_single(ValueError("secret"))
        assert status == 500
        assert document.errors == [JSONAPIError(status=500, title="Internal Server Error")]
        assert "secret" in caplog.text

    def test_status_is_coerced(self):
        original = JSONAPIError(status=0, detail="zero")
        status, document = write_single(original)
        assert status == 500
        assert document.errors[0].status == 500
        assert original.status == 0


class TestWriteMany:
    def test_no_errors(self):
        status, document = write_many()
        assert status == 500
        assert document.errors == [internal_server_error()]

    @pytest.mark.parametrize(
        "statuses, expected",
        [
            ([401, 403], 400),
            ([501, 502], 500),
            ([405, 405], 405),
            ([404], 404),
            ([400, 500, 404], 500),
            ([404, 404, 409], 400),
            ([422, 503], 500),
            ([500, 404], 500),
            ([0, 404], 500),
            ([0, 0], 500),
        ],
    )
    def test_common_status(self, statuses, expected):
        errors = [JSONAPIError(status=status) for status in statuses]
        status, document = write_many(*errors)
        assert status == expected
        assert len(document.errors) == len(statuses)

    def test_errors_keep_their_order(self):
        errors = [JSONAPIError(status=401, code="a"), JSONAPIError(status=403, code="b")]
        _, document = write_many(*errors)
        assert [error.code for error in document.errors] == ["a", "b"]

    def test_non_errors_are_masked(self):
        status, document = write_many(not_found("gone"), RuntimeError("secret"))
        assert status == 500
        assert document.errors == [not_found("gone"), internal_server_error()]

    def test_reduction_helper(self):
        assert common_status([409, 409, 409]) == 409


class TestErrorBuilder:
    def test_error_object(self):
        error = JSONAPIErrorBuilder().error_object(
            status=422, title="Invalid", source={"pointer": "/data/attributes/title"}
        )
        assert error.source.pointer == "/data/attributes/title"

    def test_error_object_requires_a_field(self):
        with pytest.raises(ValueError):
            JSONAPIErrorBuilder().error_object()

    def test_error_document(self):
        document = JSONAPIErrorBuilder().error_document([bad_request("x")])
        assert document.model_dump() == {
            "errors": [{"status": "400", "title": "Bad Request", "detail": "x"}]
        }

    def test_error_links_are_written(self):
        error = JSONAPIError(status=400, links=ErrorLinks(about="https://example.com/e/1"))
        assert error.model_dump() == {
            "links": {"about": "https://example.com/e/1"},
            "status": "400",
        }


def test_exception_carries_errors():
    exc = JSONAPIException(not_found("a"), bad_request("b"))
    assert [error.status for error in exc.errors] == [404, 400]
    assert "Not Found: a" in str(exc)
