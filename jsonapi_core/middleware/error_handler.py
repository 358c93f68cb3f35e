"""JSON:API error handling middleware."""

import logging
from typing import Any

from jsonapi_core.core.errors import JSONAPIException
from jsonapi_core.core.response import write_error, write_errors

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware:
    """Convert exceptions into JSON:API error documents."""

    def __init__(self, app: Any) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Handle exceptions and serialize JSON:API error documents."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        started = False

        async def send_wrapper(message: dict[str, Any]) -> None:
            nonlocal started
            if message["type"] == "http.response.start":
                started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except JSONAPIException as exc:
            if started:
                raise
            response = write_errors(*exc.errors)
            await response(scope, receive, send)
        except Exception as exc:
            logger.exception("Unhandled exception for %s %s", scope.get("method"), scope.get("path"))
            if started:
                raise
            response = write_error(exc)
            await response(scope, receive, send)
