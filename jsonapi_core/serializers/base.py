"""Base serializer mapping pydantic models to JSON:API resources."""

from __future__ import annotations

from typing import Any, Iterable

from pydantic import BaseModel, ValidationError

from jsonapi_core.core.errors import bad_request
from jsonapi_core.schemas.error import ErrorSource, JSONAPIError
from jsonapi_core.schemas.resource import JSONAPIResource


class JSONAPISerializer:
    """Serialize pydantic models into JSON:API resource objects and back."""

    class Meta:
        """Serializer metadata (type, model, fields)."""

        type_: str = ""
        model: type[BaseModel] | None = None
        fields: list[str] = []

    def to_resource(
        self,
        instance: BaseModel,
        *,
        fields: list[str] | None = None,
    ) -> JSONAPIResource:
        """Serialize a model instance into a JSON:API resource object."""
        return JSONAPIResource(
            type=self.Meta.type_,
            id=self.get_id(instance),
            attributes=self.get_attributes(instance, fields=fields or None),
        )

    def to_many(
        self,
        instances: Iterable[BaseModel],
        *,
        fields: list[str] | None = None,
    ) -> list[JSONAPIResource]:
        """Serialize a collection of instances."""
        return [self.to_resource(instance, fields=fields) for instance in instances]

    def get_id(self, instance: BaseModel) -> str:
        """Return the resource id as a string."""
        value = getattr(instance, "id", None)
        return "" if value is None else str(value)

    def get_attributes(
        self, instance: BaseModel, *, fields: list[str] | None = None
    ) -> dict[str, Any]:
        """Return attributes restricted to the serializer and sparse fieldset."""
        values = instance.model_dump()
        names = self.Meta.fields or list(values)
        allowed = set(fields) if fields else None
        return {
            name: values[name]
            for name in names
            if name != "id" and name in values and (allowed is None or name in allowed)
        }

    def from_resource(self, resource: JSONAPIResource) -> BaseModel | JSONAPIError:
        """Bind a resource's attributes to the serializer model.

        Exact numbers are converted to the model's field types here and
        nowhere earlier.
        """
        if self.Meta.model is None:
            raise ValueError("Meta.model must be set.")
        if resource.type != self.Meta.type_:
            return bad_request("resource type mismatch")
        values = dict(resource.attributes)
        if resource.id:
            values["id"] = resource.id
        try:
            return self.Meta.model.model_validate(values)
        except ValidationError as exc:
            first = exc.errors()[0]
            error = bad_request(first["msg"])
            name = ".".join(str(part) for part in first["loc"])
            pointer = "/data/id" if name == "id" else f"/data/attributes/{name.replace('.', '/')}"
            error.source = ErrorSource(pointer=pointer)
            return error
