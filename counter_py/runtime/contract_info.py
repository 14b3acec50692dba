"""
Contract version record.

Written once when the contract is instantiated so that tooling (and future
migrations) can tell which contract and version own a store. The counter
itself never reads it back.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .storage_api import Item, StorageBackend

CONTRACT_INFO_KEY = b"contract_info"


class ContractVersion(BaseModel):
    model_config = ConfigDict(frozen=True)

    contract: str
    version: str


CONTRACT = Item(CONTRACT_INFO_KEY, ContractVersion)


def set_contract_version(store: StorageBackend, name: str, version: str) -> None:
    CONTRACT.save(store, ContractVersion(contract=name, version=version))


def get_contract_version(store: StorageBackend) -> ContractVersion:
    """Raises NotFound if the store was never instantiated."""
    return CONTRACT.load(store)


__all__ = [
    "CONTRACT_INFO_KEY",
    "ContractVersion",
    "set_contract_version",
    "get_contract_version",
]
