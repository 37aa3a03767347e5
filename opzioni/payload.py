"""
Payload Adapter.

Bridges the caller's payload type ``T`` and the plain builtins (dicts,
lists, strings, numbers) the format libraries read and write. Validation
and dumping go through a ``pydantic.TypeAdapter``, so pydantic models,
dataclasses and TypedDicts all work as payload types.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Type, TypeVar

from pydantic import PydanticUserError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from opzioni.errors import SerializationError

T = TypeVar("T")


@lru_cache(maxsize=None)
def payload_adapter(payload_type: Any) -> TypeAdapter:
    """
    Return the cached TypeAdapter for a payload type.

    Raises:
        TypeError: If pydantic cannot build a schema for the type.
    """
    try:
        return TypeAdapter(payload_type)
    except PydanticUserError as e:
        raise TypeError(f"Unsupported payload type {payload_type!r}: {e}") from e


def check_payload_type(payload_type: Any) -> None:
    """
    Fail fast on payload types pydantic cannot handle.

    Raises:
        TypeError: If no schema can be built for the type.
    """
    payload_adapter(payload_type)


def default_value(payload_type: Type[T]) -> T:
    """Build the default instance of a payload type by calling it with no arguments."""
    try:
        return payload_type()
    except (TypeError, ValidationError) as e:
        raise TypeError(
            f"Payload type {payload_type!r} has no default value: {e}"
        ) from e


def to_builtins(value: Any, payload_type: Any) -> Any:
    """
    Dump a payload value to JSON-compatible builtins.

    Raises:
        SerializationError: If the value cannot be serialized.
    """
    try:
        return payload_adapter(payload_type).dump_python(value, mode="json")
    except PydanticSerializationError as e:
        raise SerializationError(str(e)) from e


def from_builtins(data: Any, payload_type: Type[T]) -> T:
    """
    Validate parsed builtins into a payload value.

    Missing fields are only filled in where the payload schema declares a
    default.

    Raises:
        SerializationError: If the data does not match the payload type.
    """
    try:
        return payload_adapter(payload_type).validate_python(data)
    except ValidationError as e:
        raise SerializationError(str(e)) from e
