"""Shared Pydantic schemas and helpers for API requests and responses."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, Field, StringConstraints
from pydantic import ValidationError as PydanticValidationError

from portfolio_site.services.exceptions import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

# Stripped text that must not be empty.
RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

AUTH_RESPONSES: dict[int | str, dict[str, Any]] = {
    401: {"description": "Missing session token"},
    403: {"description": "Invalid or expired session token"},
}


class MessageResponse(BaseModel):
    """Confirmation returned by update and delete endpoints."""

    message: str


class CreatedResponse(BaseModel):
    """Returned by create endpoints."""

    id: int
    message: str


class ErrorResponse(BaseModel):
    """Body of 4xx/5xx JSON errors."""

    error: str
    field: str | None = Field(None, description="Offending field for validation errors")


def parse_form(model: type[ModelT], values: Mapping[str, Any]) -> ModelT:
    """Validate submitted form values against an input schema.

    Values that were not submitted (None) are left unset so that
    ``model_dump(exclude_unset=True)`` yields only the supplied fields.

    Raises:
        ValidationError: Naming the first field that failed validation.
    """
    supplied = {key: value for key, value in values.items() if value is not None}
    try:
        return model.model_validate(supplied)
    except PydanticValidationError as exc:
        error = exc.errors()[0]
        field = str(error["loc"][0]) if error["loc"] else "body"
        if error["type"] in {"missing", "string_too_short"}:
            raise ValidationError(field) from exc
        raise ValidationError(field, f"{field}: {error['msg']}") from exc


def multipart_body(model: type[BaseModel], file_field: str) -> dict[str, Any]:
    """OpenAPI ``requestBody`` for a multipart form with one optional file.

    The routes read the form themselves, so FastAPI cannot infer it.
    """
    properties: dict[str, Any] = {name: {"type": "string"} for name in model.model_fields}
    properties[file_field] = {"type": "string", "format": "binary"}
    schema: dict[str, Any] = {"type": "object", "properties": properties}
    required = [name for name, info in model.model_fields.items() if info.is_required()]
    if required:
        schema["required"] = required
    return {
        "requestBody": {
            "required": True,
            "content": {"multipart/form-data": {"schema": schema}},
        }
    }
