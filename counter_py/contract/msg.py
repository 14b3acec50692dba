"""
Message and response models for the counter contract.

Wire shapes follow the host's JSON conventions: snake_case, externally tagged
variants. Examples:

    {"count": 17}                                   InstantiateMsg
    {"increment": {}}                               ExecuteMsg
    {"reset": {"count": 5}}                         ExecuteMsg
    {"get_count": {}}                               QueryMsg
    {"to_bech32": {"prefix": "juno", "bytes": [..32 ints..]}}
    {"from_bech32": {"bech32": "juno1..."}}

Each variant is its own model (``IncrementMsg``, ``ResetMsg``, ...); the
``ExecuteMsg`` / ``QueryMsg`` unions accept exactly one of them. Unknown keys
are rejected.
"""

from __future__ import annotations

import json
from typing import Annotated, Any, List, Mapping, Union

from pydantic import (BaseModel, ConfigDict, Field, StrictInt, TypeAdapter,
                      ValidationError)

from counter_py.errors import ParseError

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1

I32 = Annotated[StrictInt, Field(ge=I32_MIN, le=I32_MAX)]
U8 = Annotated[StrictInt, Field(ge=0, le=255)]
Bytes32 = Annotated[List[U8], Field(min_length=32, max_length=32)]


class _Msg(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


# -----------------------------------------------------------------------------
# Instantiate
# -----------------------------------------------------------------------------


class InstantiateMsg(_Msg):
    count: I32


# -----------------------------------------------------------------------------
# Execute
# -----------------------------------------------------------------------------


class Increment(_Msg):
    pass


class Reset(_Msg):
    count: I32


class IncrementMsg(_Msg):
    increment: Increment


class ResetMsg(_Msg):
    reset: Reset


ExecuteMsg = Union[IncrementMsg, ResetMsg]


# -----------------------------------------------------------------------------
# Query
# -----------------------------------------------------------------------------


class GetCount(_Msg):
    pass


class ToBech32(_Msg):
    """Convert a 32-byte array to a bech32 address under `prefix`."""

    prefix: str
    bytes: Bytes32


class FromBech32(_Msg):
    """Convert a bech32 address back to its prefix and 32-byte array."""

    bech32: str


class GetCountQuery(_Msg):
    get_count: GetCount


class ToBech32Query(_Msg):
    to_bech32: ToBech32


class FromBech32Query(_Msg):
    from_bech32: FromBech32


QueryMsg = Union[GetCountQuery, ToBech32Query, FromBech32Query]


# -----------------------------------------------------------------------------
# Responses
# -----------------------------------------------------------------------------


class CountResponse(_Msg):
    count: I32


class Bech32AddrResponse(_Msg):
    bech32_addr: str


class BytesAddrResponse(_Msg):
    prefix: str
    bytes: Bytes32


# -----------------------------------------------------------------------------
# Parsing
# -----------------------------------------------------------------------------

EXECUTE_ADAPTER: TypeAdapter[ExecuteMsg] = TypeAdapter(ExecuteMsg)
QUERY_ADAPTER: TypeAdapter[QueryMsg] = TypeAdapter(QueryMsg)


RawMsg = Union[bytes, str, Mapping[str, Any]]


def _parse(adapter: TypeAdapter[Any], raw: RawMsg, what: str) -> Any:
    if isinstance(raw, (bytes, bytearray, str)):
        source: Any = raw
    else:
        try:
            source = dict(raw)
        except (TypeError, ValueError) as e:
            raise ParseError(
                f"invalid {what}: expected a JSON object",
                context={"py_type": type(raw).__name__},
            ) from e

    try:
        if isinstance(source, dict):
            return adapter.validate_python(source)
        return adapter.validate_json(source)
    except ValidationError as e:
        # Inputs are left out: raw bytes need not be valid UTF-8.
        errors = e.json(include_url=False, include_input=False)
        raise ParseError(f"invalid {what}", context={"errors": json.loads(errors)}) from e


def parse_instantiate_msg(raw: RawMsg) -> InstantiateMsg:
    return _parse(TypeAdapter(InstantiateMsg), raw, "InstantiateMsg")


def parse_execute_msg(raw: RawMsg) -> ExecuteMsg:
    return _parse(EXECUTE_ADAPTER, raw, "ExecuteMsg")


def parse_query_msg(raw: RawMsg) -> QueryMsg:
    return _parse(QUERY_ADAPTER, raw, "QueryMsg")


__all__ = [
    "I32_MIN",
    "I32_MAX",
    "RawMsg",
    "InstantiateMsg",
    "Increment",
    "Reset",
    "IncrementMsg",
    "ResetMsg",
    "ExecuteMsg",
    "GetCount",
    "ToBech32",
    "FromBech32",
    "GetCountQuery",
    "ToBech32Query",
    "FromBech32Query",
    "QueryMsg",
    "CountResponse",
    "Bech32AddrResponse",
    "BytesAddrResponse",
    "EXECUTE_ADAPTER",
    "QUERY_ADAPTER",
    "parse_instantiate_msg",
    "parse_execute_msg",
    "parse_query_msg",
]
