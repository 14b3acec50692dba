"""
counter_py runtime — host-facing pieces the contract is wired against

This package contains the storage backends, call context types, response
records and JSON binary helpers that the entry points in
:mod:`counter_py.contract` consume.

Convenience re-exports live here so callers can do:

    from counter_py.runtime import Deps, Env, MessageInfo, Response
    from counter_py.runtime import storage  # module namespace

Notes
-----
- Nothing here reads the wall clock or system randomness.
- The host owns the storage backend; the contract only sees ``Deps``.
"""

from __future__ import annotations

from . import storage_api as storage
from .abi import from_binary, to_binary
from .context import BlockInfo, Coin, Deps, Env, MessageInfo
from .response import Attribute, Response

__all__ = [
    "storage",
    "to_binary",
    "from_binary",
    "BlockInfo",
    "Coin",
    "Deps",
    "Env",
    "MessageInfo",
    "Attribute",
    "Response",
]
