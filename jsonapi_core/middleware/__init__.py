"""ASGI middleware for JSON:API."""

from .error_handler import ErrorHandlerMiddleware
from .request_resolver import JSONAPIRequestMiddleware

__all__ = ["ErrorHandlerMiddleware", "JSONAPIRequestMiddleware"]
