from __future__ import annotations

import json
from typing import Any, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from counter_py.errors import ParseError, SerializeError

M = TypeVar("M", bound=BaseModel)


def to_binary(value: Any) -> bytes:
    """
    Serialize a query result to compact JSON bytes.

    Pydantic models use their own JSON encoder; plain JSON-compatible values
    go through the stdlib encoder.
    """
    if isinstance(value, BaseModel):
        return value.model_dump_json().encode("utf-8")
    try:
        return json.dumps(value, separators=(",", ":"), sort_keys=True).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializeError(
            f"cannot serialize {type(value).__name__}",
            context={"py_type": type(value).__name__},
        ) from e


def from_binary(data: Union[bytes, bytearray, str], model: Type[M]) -> M:
    """
    Parse JSON bytes produced by :func:`to_binary` back into `model`.

    Usage in tests (as in the counter lifecycle checks):

        value = from_binary(query(deps, env, {"get_count": {}}), CountResponse)
        assert value.count == 17
    """
    try:
        return model.model_validate_json(data)
    except ValidationError as e:
        raise ParseError(
            f"invalid {model.__name__} payload",
            context={"errors": e.error_count()},
        ) from e


__all__ = ["to_binary", "from_binary"]
