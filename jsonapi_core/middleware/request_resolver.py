"""ASGI middleware resolving every HTTP request into a JSON:API request."""

from typing import Any

from starlette.datastructures import Headers

from jsonapi_core.core.response import write_error
from jsonapi_core.resolver import RequestResolver, ResolverConfig
from jsonapi_core.schemas.error import JSONAPIError

STATE_KEY = "jsonapi"


class JSONAPIRequestMiddleware:
    """Reject invalid JSON:API requests before they reach the application.

    Resolved requests are available to endpoints as ``request.state.jsonapi``.
    """

    def __init__(self, app: Any, config: ResolverConfig | None = None) -> None:
        """Store the ASGI app and build the resolver."""
        self.app = app
        self.resolver = RequestResolver(config)

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Resolve the request or answer with its error document."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        result = self.resolver.resolve(
            scope.get("method", ""),
            scope.get("path", ""),
            Headers(scope=scope),
            scope.get("query_string", b"").decode("latin-1"),
        )
        if isinstance(result, JSONAPIError):
            response = write_error(result)
            await response(scope, receive, send)
            return

        scope.setdefault("state", {})[STATE_KEY] = result
        await self.app(scope, receive, send)
