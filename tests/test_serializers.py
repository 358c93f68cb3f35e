"""Tests for binding resources to pydantic models."""

from decimal import Decimal

import pytest
from pydantic import BaseModel

from jsonapi_core import JSONAPIError, JSONAPIResource, parse_document
from jsonapi_core.serializers import JSONAPISerializer


class Article(BaseModel):
    id: str = ""
    title: str
    price: Decimal
    views: int = 0


class ArticleSerializer(JSONAPISerializer):
    class Meta:
        type_ = "articles"
        model = Article
        fields = ["id", "title", "price", "views"]


def test_to_resource():
    article = Article(id="7", title="Hello", price=Decimal("9.99"), views=3)
    resource = ArticleSerializer().to_resource(article)
    assert resource == JSONAPIResource(
        type="articles",
        id="7",
        attributes={"title": "Hello", "price": Decimal("9.99"), "views": 3},
    )


def test_sparse_fieldset():
    article = Article(id="7", title="Hello", price=Decimal("9.99"))
    resources = ArticleSerializer().to_many([article], fields=["title"])
    assert resources[0].attributes == {"title": "Hello"}


def test_from_resource_converts_exact_numbers():
    document = parse_document(
        b'{"data":{"type":"articles","attributes":{"title":"Hi","price":0.30000000000000000001,"views":2}}}'
    )
    article = ArticleSerializer().from_resource(document.data.one)
    assert article == Article(title="Hi", price=Decimal("0.30000000000000000001"), views=2)


def test_from_resource_type_mismatch():
    error = ArticleSerializer().from_resource(JSONAPIResource(type="users", id="1"))
    assert isinstance(error, JSONAPIError)
    assert error.detail == "resource type mismatch"


def test_from_resource_invalid_attribute():
    resource = JSONAPIResource(
        type="articles", attributes={"title": "Hi", "price": "1", "views": "many"}
    )
    error = ArticleSerializer().from_resource(resource)
    assert isinstance(error, JSONAPIError)
    assert error.status == 400
    assert error.source.pointer == "/data/attributes/views"


def test_from_resource_requires_model():
    class Untyped(JSONAPISerializer):
        class Meta:
            type_ = "things"
            model = None

    with pytest.raises(ValueError):
        Untyped().from_resource(JSONAPIResource(type="things"))
