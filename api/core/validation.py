"""
Request-body validation against pydantic models.

A route names the model its body must satisfy; the model's fields are the
rule set. `validate_body` flattens pydantic's errors into one `FieldError`
per field, and `request_body_schema` feeds the same model's JSON schema into
the OpenAPI document, so the docs and the checks cannot drift apart.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str
    location: str = "body"

    def as_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message, "location": self.location}


def _schema_type(model: type[BaseModel], field: str) -> str:
    prop = model.model_json_schema().get("properties", {}).get(field, {})
    if "type" in prop:
        return str(prop["type"])
    for option in prop.get("anyOf", []):
        if option.get("type") not in (None, "null"):
            return str(option["type"])
    return "valid value"


def _to_field_error(model: type[BaseModel], error: dict[str, Any]) -> FieldError:
    # Union members add their own suffix to `loc`; report the top-level field.
    field = str(error["loc"][0]) if error["loc"] else "body"
    if error["type"] == "missing" or error.get("input") is None:
        return FieldError(field, f"{field} is required")
    type_name = _schema_type(model, field)
    article = "an" if type_name[:1] in "aeiou" else "a"
    return FieldError(field, f"{field} must be {article} {type_name}")


def validate_body(body: Any, model: type[BaseModel]) -> list[FieldError]:
    """
    Check `body` against `model`.

    Returns one error per offending field, in field declaration order; an
    empty list means the body is acceptable. Anything other than a JSON
    object counts as an empty body.
    """
    data = body if isinstance(body, dict) else {}
    try:
        model.model_validate(data)
    except ValidationError as exc:
        errors: list[FieldError] = []
        seen: set[str] = set()
        for item in exc.errors():
            field_error = _to_field_error(model, item)
            if field_error.field in seen:
                continue
            seen.add(field_error.field)
            errors.append(field_error)
        return errors
    return []


def request_body_schema(model: type[BaseModel]) -> dict[str, Any]:
    """
    OpenAPI `requestBody` fragment for a body model (use with `openapi_extra`).
    """
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }
