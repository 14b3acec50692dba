"""
counter_py.contract — the counter contract: messages, state and entry points.
"""

from __future__ import annotations

from .contract import execute, instantiate, query
from .msg import (Bech32AddrResponse, BytesAddrResponse, CountResponse,
                  ExecuteMsg, FromBech32, FromBech32Query, GetCount,
                  GetCountQuery, Increment, IncrementMsg, InstantiateMsg,
                  QueryMsg, Reset, ResetMsg, ToBech32, ToBech32Query)
from .state import State

__all__ = [
    "instantiate",
    "execute",
    "query",
    "State",
    "InstantiateMsg",
    "ExecuteMsg",
    "Increment",
    "IncrementMsg",
    "Reset",
    "ResetMsg",
    "QueryMsg",
    "GetCount",
    "GetCountQuery",
    "ToBech32",
    "ToBech32Query",
    "FromBech32",
    "FromBech32Query",
    "CountResponse",
    "Bech32AddrResponse",
    "BytesAddrResponse",
]
