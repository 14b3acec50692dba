"""
counter_py — an owner-gated counter contract with a bech32 address codec.

This module exposes a small, stable façade:

- __version__: semantic version string
- encode_address(tag, payload) -> str / decode_address(s) -> (tag, Address)
    Strict 32-byte bech32 conversion (see counter_py.codec).
- instantiate / execute / query
    Contract entry points (see counter_py.contract).

Contract entry points are imported lazily so the codec can be used without
pulling in pydantic.
"""

from __future__ import annotations

import importlib
from typing import Any

from .codec.address import Address, decode_address, encode_address
from .version import __version__ as __version__


def version() -> str:
    """Return the counter_py semantic version string."""
    return __version__


_LAZY = {"instantiate", "execute", "query"}


def __getattr__(name: str) -> Any:
    if name in _LAZY:
        contract = importlib.import_module(".contract.contract", __name__)
        return getattr(contract, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "__version__",
    "version",
    "Address",
    "encode_address",
    "decode_address",
    "instantiate",
    "execute",
    "query",
]
