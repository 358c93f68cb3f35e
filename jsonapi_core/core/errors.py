"""JSON:API error generators and the error document composer."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from jsonapi_core.schemas.error import ErrorSource, JSONAPIError, status_text
from jsonapi_core.schemas.resource import JSONAPIDocument

logger = logging.getLogger(__name__)


class JSONAPIException(Exception):
    """Carry JSON:API errors through framework code that expects exceptions."""

    def __init__(self, *errors: JSONAPIError) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(str(error) for error in self.errors))


def error_from_status(status: int, detail: str = "") -> JSONAPIError:
    """Return an error whose title is the reason phrase of ``status``."""
    return JSONAPIError(status=int(status), title=status_text(status), detail=detail)


def bad_request(detail: str) -> JSONAPIError:
    """Return a 400 Bad Request error."""
    return error_from_status(HTTPStatus.BAD_REQUEST, detail)


def bad_request_param(detail: str, parameter: str) -> JSONAPIError:
    """Return a bad request error pointing at a query parameter."""
    error = bad_request(detail)
    error.source = ErrorSource(parameter=parameter)
    return error


def not_found(detail: str) -> JSONAPIError:
    """Return a 404 Not Found error."""
    return error_from_status(HTTPStatus.NOT_FOUND, detail)


def not_acceptable(detail: str) -> JSONAPIError:
    """Return a 406 Not Acceptable error, used for unsupported Accept headers."""
    return error_from_status(HTTPStatus.NOT_ACCEPTABLE, detail)


def internal_server_error(detail: str = "") -> JSONAPIError:
    """Return a 500 Internal Server Error error."""
    return error_from_status(HTTPStatus.INTERNAL_SERVER_ERROR, detail)


def common_status(statuses: list[int]) -> int:
    """Reduce the statuses of several errors to one response status.

    Equal statuses are kept, any server error turns the result into 500
    and differing client errors collapse to 400.
    """
    result = statuses[0]
    for status in statuses[1:]:
        if status == result or result == HTTPStatus.INTERNAL_SERVER_ERROR:
            continue
        if status >= HTTPStatus.INTERNAL_SERVER_ERROR:
            result = HTTPStatus.INTERNAL_SERVER_ERROR.value
        else:
            result = HTTPStatus.BAD_REQUEST.value
    return int(result)


class JSONAPIErrorBuilder:
    """Build JSON:API error objects and error documents."""

    def error_object(
        self,
        *,
        status: int = 0,
        code: str = "",
        title: str = "",
        detail: str = "",
        source: dict[str, Any] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> JSONAPIError:
        """Return a JSON:API error object."""
        if not any((status, code, title, detail, source, meta)):
            raise ValueError("Error object must include at least one field.")
        return JSONAPIError(
            status=status,
            code=code,
            title=title,
            detail=detail,
            source=ErrorSource(**source) if source else None,
            meta=meta or {},
        )

    def error_document(self, errors: list[JSONAPIError]) -> JSONAPIDocument:
        """Return a JSON:API document with an errors array."""
        return JSONAPIDocument(errors=list(errors))

    def _mask(self, error: Any) -> JSONAPIError:
        if not isinstance(error, JSONAPIError):
            logger.error("Replacing non JSON:API error %r with internal server error", error)
            error = internal_server_error()
        return error.normalized()

    def write_single(self, error: Any) -> tuple[int, JSONAPIDocument]:
        """Return the status and document for a single error.

        Values that are not JSON:API errors are replaced by a generic
        internal server error so that no internals leak to the client.
        """
        error = self._mask(error)
        return error.status, self.error_document([error])

    def write_many(self, *errors: Any) -> tuple[int, JSONAPIDocument]:
        """Return the common status and document for a list of errors.

        Each value is masked the same way as in :meth:`write_single`.
        """
        if not errors:
            return self.write_single(internal_server_error())
        normalized = [self._mask(error) for error in errors]
        status = common_status([error.status for error in normalized])
        return status, self.error_document(normalized)


_builder = JSONAPIErrorBuilder()


def write_single(error: Any) -> tuple[int, JSONAPIDocument]:
    """Module level shortcut for :meth:`JSONAPIErrorBuilder.write_single`."""
    return _builder.write_single(error)


def write_many(*errors: Any) -> tuple[int, JSONAPIDocument]:
    """Module level shortcut for :meth:`JSONAPIErrorBuilder.write_many`."""
    return _builder.write_many(*errors)
