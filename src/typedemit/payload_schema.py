from functools import lru_cache
from typing import Any

from pydantic import ConfigDict, TypeAdapter


def _check_payload_types(payload_types: Any) -> None:
    if not isinstance(payload_types, tuple):
        msg = "payload_types must be a tuple"
        raise TypeError(msg)


@lru_cache(maxsize=256)
def payload_adapter(payload_types: tuple[Any, ...]) -> TypeAdapter:
    """Build (once per distinct payload shape) the adapter for ``tuple[T1, ..., Tn]``"""
    # plain classes fall back to an isinstance check
    return TypeAdapter(tuple[payload_types], config=ConfigDict(arbitrary_types_allowed=True))


def validate_payload(payload_types: tuple[Any, ...], payload: tuple[Any, ...]) -> None:
    """
    Check a positional payload against its declared types.

    Validation is strict: arity must match exactly and values are not coerced
    (``"1"`` is not an ``int``). The payload itself is left untouched.

    Raises:
        pydantic.ValidationError: if the payload does not fit ``payload_types``
    """
    _check_payload_types(payload_types)
    payload_adapter(payload_types).validate_python(tuple(payload), strict=True)


def payload_to_schema(payload_types: tuple[Any, ...]) -> dict[str, Any]:
    """
    Read a tuple of payload types, which can contain basic types, dataclasses, pydantic models, even nested in lists.
    Output a jsonschema describing the positional payload as a fixed-length array.
    """
    _check_payload_types(payload_types)
    return payload_adapter(payload_types).json_schema()
