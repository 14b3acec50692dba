"""
Counter contract entry points.

    instantiate(deps, env, info, InstantiateMsg)  -> Response
    execute(deps, env, info, ExecuteMsg)          -> Response
    query(deps, env, QueryMsg)                    -> bytes (JSON)

Entry points only dispatch: the store enforces ownership and ranges, the codec
validates tags and addresses, and their errors propagate unchanged. Each
state-changing call runs inside ``deps.transaction()`` so a failure leaves
storage exactly as it was.
"""

from __future__ import annotations

import logging
from typing import Any, Union

from counter_py.codec.address import Address, decode_address, encode_address
from counter_py.errors import ContractError
from counter_py.runtime.abi import to_binary
from counter_py.runtime.context import Deps, Env, MessageInfo
from counter_py.runtime.contract_info import set_contract_version
from counter_py.runtime.response import Response
from counter_py.version import CONTRACT_NAME, CONTRACT_VERSION

from .msg import (Bech32AddrResponse, BytesAddrResponse, CountResponse,
                  ExecuteMsg, FromBech32Query, GetCountQuery, IncrementMsg,
                  InstantiateMsg, QueryMsg, RawMsg, ResetMsg,
                  ToBech32Query, parse_execute_msg, parse_instantiate_msg,
                  parse_query_msg)
from .state import CounterStore

log = logging.getLogger(__name__)


def instantiate(
    deps: Deps, env: Env, info: MessageInfo, msg: Union[InstantiateMsg, RawMsg]
) -> Response:
    if not isinstance(msg, InstantiateMsg):
        msg = parse_instantiate_msg(msg)
    log.debug("instantiate sender=%s count=%d", info.sender, msg.count)

    try:
        with deps.transaction() as tx:
            set_contract_version(tx.storage, CONTRACT_NAME, CONTRACT_VERSION)
            CounterStore(tx.storage).initialize(msg.count, info.sender)
    except ContractError as e:
        log.info("instantiate rejected: %s", e.code)
        raise

    return (
        Response()
        .add_attribute("method", "instantiate")
        .add_attribute("owner", info.sender)
        .add_attribute("count", msg.count)
    )


def execute(
    deps: Deps, env: Env, info: MessageInfo, msg: Union[ExecuteMsg, RawMsg]
) -> Response:
    if not isinstance(msg, (IncrementMsg, ResetMsg)):
        msg = parse_execute_msg(msg)

    try:
        with deps.transaction() as tx:
            if isinstance(msg, IncrementMsg):
                return try_increment(tx)
            return try_reset(tx, info, msg.reset.count)
    except ContractError as e:
        log.info("execute rejected: %s sender=%s", e.code, info.sender)
        raise


def try_increment(deps: Deps) -> Response:
    state = CounterStore(deps.storage).increment()
    log.debug("incremented to %d", state.count)
    return Response().add_attribute("method", "try_increment")


def try_reset(deps: Deps, info: MessageInfo, count: int) -> Response:
    CounterStore(deps.storage).reset(info.sender, count)
    log.debug("reset to %d by %s", count, info.sender)
    return Response().add_attribute("method", "reset")


def query(deps: Deps, env: Env, msg: Union[QueryMsg, RawMsg]) -> bytes:
    if not isinstance(msg, (GetCountQuery, ToBech32Query, FromBech32Query)):
        msg = parse_query_msg(msg)

    if isinstance(msg, GetCountQuery):
        return to_binary(query_count(deps))
    if isinstance(msg, ToBech32Query):
        return to_binary(to_bech32_addr(msg.to_bech32.prefix, msg.to_bech32.bytes))
    return to_binary(from_bech32_addr(msg.from_bech32.bech32))


def query_count(deps: Deps) -> CountResponse:
    state = CounterStore(deps.storage).load()
    return CountResponse(count=state.count)


def to_bech32_addr(prefix: str, raw: Any) -> Bech32AddrResponse:
    addr = raw if isinstance(raw, Address) else Address.from_ints(raw)
    return Bech32AddrResponse(bech32_addr=encode_address(prefix, addr))


def from_bech32_addr(bech32_addr: str) -> BytesAddrResponse:
    prefix, addr = decode_address(bech32_addr)
    return BytesAddrResponse(prefix=prefix, bytes=addr.to_ints())


__all__ = [
    "instantiate",
    "execute",
    "query",
    "try_increment",
    "try_reset",
    "query_count",
    "to_bech32_addr",
    "from_bech32_addr",
]
