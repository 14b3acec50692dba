"""
counter_py.runtime.context — Env / MessageInfo / Deps passed to entry points

These lightweight environments are injected by the host so the contract can
read block and caller metadata deterministically. They contain only pure data
and perform strict validation.

Design notes
------------
- The caller identity (``MessageInfo.sender``) is an opaque string; the
  contract only compares it for equality against the stored owner.
- ``Env`` carries block height/time/chain id. The counter ignores it but
  every entry point accepts it, matching the host calling convention.
- ``Deps`` wraps the host storage backend. ``Deps.transaction()`` opens a
  write buffer that is committed only when the block exits normally.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterator, Tuple

from .storage_api import MemoryBackend, Overlay, StorageBackend

log = logging.getLogger(__name__)


class ContextError(ValueError):
    """Validation failure for Env/MessageInfo."""


def _require_non_negative_int(name: str, v: Any) -> int:
    if not isinstance(v, int) or isinstance(v, bool):
        raise ContextError(f"{name} must be int, got {type(v).__name__}")
    if v < 0:
        raise ContextError(f"{name} must be non-negative, got {v}")
    return v


# ----------------------------- models ------------------------------ #


@dataclass(frozen=True)
class BlockInfo:
    """
    Fields
    ------
    height:    Block height.
    time_ns:   Consensus timestamp in nanoseconds since epoch.
    chain_id:  Chain identifier string.
    """

    height: int
    time_ns: int
    chain_id: str

    def __post_init__(self) -> None:
        _require_non_negative_int("height", self.height)
        _require_non_negative_int("time_ns", self.time_ns)
        if not isinstance(self.chain_id, str) or not self.chain_id:
            raise ContextError("chain_id must be a non-empty str")


@dataclass(frozen=True)
class Env:
    block: BlockInfo
    contract_address: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Coin:
    denom: str
    amount: int

    def __post_init__(self) -> None:
        _require_non_negative_int("amount", self.amount)


@dataclass(frozen=True)
class MessageInfo:
    """Caller identity plus any funds attached to the call."""

    sender: str
    funds: Tuple[Coin, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.sender, str) or not self.sender:
            raise ContextError("sender must be a non-empty str")
        object.__setattr__(self, "funds", tuple(self.funds))


@dataclass
class Deps:
    """Host dependencies visible to the contract: currently just storage."""

    storage: StorageBackend = field(default_factory=MemoryBackend)

    @contextmanager
    def transaction(self) -> Iterator["Deps"]:
        """
        Yield a Deps whose storage buffers writes. On normal exit the writes
        are committed to this Deps' storage; on any exception they are dropped
        and the exception propagates.
        """
        overlay = Overlay(self.storage)
        try:
            yield Deps(storage=overlay)
        except BaseException:
            log.debug("discarding %d staged writes", overlay.pending)
            overlay.discard()
            raise
        overlay.commit()


__all__ = [
    "ContextError",
    "BlockInfo",
    "Env",
    "Coin",
    "MessageInfo",
    "Deps",
]
