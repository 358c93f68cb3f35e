"""Shared fixtures for the jsonapi_core test suite."""

import pytest

from jsonapi_core import MEDIA_TYPE


@pytest.fixture
def jsonapi_headers() -> dict[str, str]:
    """Headers of a request that carries a JSON:API document."""
    return {"Content-Type": MEDIA_TYPE, "Accept": MEDIA_TYPE}


@pytest.fixture
def post_document() -> bytes:
    return (
        b'{"data":{"type":"posts","attributes":{"title":"Hello",'
        b'"rating":4.25,"views":12345678901234567890}}}'
    )
