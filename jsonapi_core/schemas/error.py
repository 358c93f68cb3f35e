"""Pydantic models for JSON:API error objects."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_serializer


def status_text(status: int) -> str:
    """Return the registered reason phrase for a status code, or ``""``."""
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return ""


class ErrorLinks(BaseModel):
    """Links that lead to further details about an error occurrence."""

    about: str = ""


class ErrorSource(BaseModel):
    """Query parameter or JSON pointer that caused an error."""

    parameter: str = ""
    pointer: str = ""

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        source: dict[str, Any] = {}
        if self.parameter:
            source["parameter"] = self.parameter
        if self.pointer:
            source["pointer"] = self.pointer
        return source


class JSONAPIError(BaseModel):
    """JSON:API error object.

    The status is kept as an integer and written as a string, as the
    format requires.
    """

    id: str = ""
    links: Optional[ErrorLinks] = None
    status: int = 0
    code: str = ""
    title: str = ""
    detail: str = ""
    source: Optional[ErrorSource] = None
    meta: dict[str, Any] = Field(default_factory=dict)

    @field_validator("status", mode="before")
    @classmethod
    def _parse_status(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return 0
            if not value.isdigit():
                raise ValueError(f"invalid status {value!r}")
            return int(value)
        return value

    def __str__(self) -> str:
        return f"{self.title}: {self.detail}"

    def normalized(self) -> JSONAPIError:
        """Return a copy whose status is a registered HTTP status code."""
        if self.status and status_text(self.status):
            return self
        return self.model_copy(update={"status": HTTPStatus.INTERNAL_SERVER_ERROR.value})

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        error: dict[str, Any] = {}
        if self.id:
            error["id"] = self.id
        if self.links is not None:
            error["links"] = self.links.model_dump()
        if self.status:
            error["status"] = str(self.status)
        if self.code:
            error["code"] = self.code
        if self.title:
            error["title"] = self.title
        if self.detail:
            error["detail"] = self.detail
        if self.source is not None:
            source = self.source.model_dump()
            if source:
                error["source"] = source
        if self.meta:
            error["meta"] = dict(self.meta)
        return error
