"""Serializers between pydantic models and JSON:API resources."""

from .base import JSONAPISerializer

__all__ = ["JSONAPISerializer"]
