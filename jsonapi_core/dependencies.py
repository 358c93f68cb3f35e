"""FastAPI dependencies exposing resolved requests and parsed documents."""

from fastapi import FastAPI, Request
from starlette.responses import Response

from jsonapi_core.core.codec import parse_document
from jsonapi_core.core.errors import JSONAPIException
from jsonapi_core.core.response import write_errors
from jsonapi_core.middleware.error_handler import ErrorHandlerMiddleware
from jsonapi_core.middleware.request_resolver import STATE_KEY, JSONAPIRequestMiddleware
from jsonapi_core.resolver import RequestResolver, ResolverConfig
from jsonapi_core.schemas.error import JSONAPIError
from jsonapi_core.schemas.request import JSONAPIRequest
from jsonapi_core.schemas.resource import JSONAPIDocument


class JSONAPIRequestDependency:
    """Dependency returning the :class:`JSONAPIRequest` of the current call.

    Uses the request stored by :class:`JSONAPIRequestMiddleware` and
    resolves it on the spot when the middleware is not installed.

    Examples:
        resolve = JSONAPIRequestDependency(ResolverConfig(prefix="/api"))

        @app.get("/api/articles")
        async def list_articles(jsonapi: JSONAPIRequest = Depends(resolve)) -> Response:
            ...
    """

    def __init__(self, config: ResolverConfig | None = None) -> None:
        self.resolver = RequestResolver(config)

    async def __call__(self, request: Request) -> JSONAPIRequest:
        resolved = getattr(request.state, STATE_KEY, None)
        if resolved is not None:
            return resolved
        result = self.resolver.resolve(
            request.method, request.url.path, request.headers, request.url.query
        )
        if isinstance(result, JSONAPIError):
            raise JSONAPIException(result)
        return result


get_jsonapi_request = JSONAPIRequestDependency()


async def get_document(request: Request) -> JSONAPIDocument:
    """Parse the request body as a JSON:API document carrying primary data."""
    document = parse_document(await request.body())
    if isinstance(document, JSONAPIError):
        raise JSONAPIException(document)
    return document


async def jsonapi_exception_handler(request: Request, exc: Exception) -> Response:
    """Handle JSONAPIException by writing its errors."""
    errors = exc.errors if isinstance(exc, JSONAPIException) else []
    return write_errors(*errors)


def setup_jsonapi(app: FastAPI, config: ResolverConfig | None = None) -> None:
    """Install the JSON:API middleware and exception handler on an app."""
    app.add_middleware(JSONAPIRequestMiddleware, config=config)
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_exception_handler(JSONAPIException, jsonapi_exception_handler)
