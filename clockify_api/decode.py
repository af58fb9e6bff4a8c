"""
Response decoding into typed resources.
"""
import json
from typing import List, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from clockify_api.errors import DecodeError

T = TypeVar("T", bound=BaseModel)

# pydantic error type -> expected wire type
_EXPECTED = {
    "string_type": "str",
    "int_type": "int",
    "int_parsing": "int",
    "int_from_float": "int",
    "float_type": "float",
    "float_parsing": "float",
    "bool_type": "bool",
    "bool_parsing": "bool",
    "list_type": "list",
    "dict_type": "object",
    "model_type": "object",
    "model_attributes_type": "object",
    "datetime_type": "datetime",
    "datetime_parsing": "datetime",
    "datetime_from_date_parsing": "datetime",
}


def _loads(raw: bytes):
    try:
        return json.loads(raw)
    except ValueError as e:
        raise DecodeError(str(e)) from e


def _field_error(exc: ValidationError) -> DecodeError:
    first = exc.errors()[0]
    field = ".".join(str(p) for p in first["loc"]) or "<root>"
    expected = _EXPECTED.get(first["type"], first["type"])
    return DecodeError(
        f"unmarshal field {field} of type {expected}",
        field=field,
        expected=expected,
        stage="",
    )


def decode_one(model: Type[T], raw: bytes) -> T:
    """Decode a single resource object."""
    data = _loads(raw)
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise _field_error(e) from e


def decode_many(model: Type[T], raw: bytes) -> List[T]:
    """Decode a list of resources. An empty or null payload yields []."""
    data = _loads(raw)
    if data is None:
        return []
    try:
        return TypeAdapter(List[model]).validate_python(data)
    except ValidationError as e:
        raise _field_error(e) from e
