"""
Test helpers: ready-made Deps/Env/MessageInfo values for unit tests and local
simulation.

    deps = mock_dependencies()
    instantiate(deps, mock_env(), mock_info("creator"), InstantiateMsg(count=17))
"""

from __future__ import annotations

from typing import Iterable, Tuple

from .context import BlockInfo, Coin, Deps, Env, MessageInfo
from .storage_api import MemoryBackend

MOCK_CONTRACT_ADDR = "cosmos2contract"


def mock_dependencies() -> Deps:
    return Deps(storage=MemoryBackend())


def mock_env(
    height: int = 12_345,
    time_ns: int = 1_571_797_419_879_305_533,
    chain_id: str = "cosmos-testnet-14002",
) -> Env:
    return Env(
        block=BlockInfo(height=height, time_ns=time_ns, chain_id=chain_id),
        contract_address=MOCK_CONTRACT_ADDR,
    )


def coins(amount: int, denom: str) -> Tuple[Coin, ...]:
    return (Coin(denom=denom, amount=amount),)


def mock_info(sender: str, funds: Iterable[Coin] = ()) -> MessageInfo:
    return MessageInfo(sender=sender, funds=tuple(funds))


__all__ = [
    "MOCK_CONTRACT_ADDR",
    "mock_dependencies",
    "mock_env",
    "coins",
    "mock_info",
]
