"""
counter_py.runtime.storage_api — host key/value storage for the contract.

The contract never touches a database directly; it talks to a tiny backend
interface supplied by the host (see ``Deps`` in :mod:`counter_py.runtime.context`).

Design goals
------------
- Deterministic: pure functions over (key, value) with no wall-clock or I/O
  (the JSON-file backend only touches disk on ``flush``).
- Simple default: in-process memory backend for local runs & tests.
- Pluggable: any object with get/set/delete/exists can serve as the backend.
- Safe: strict byte-length caps read from counter_py.config.
- Transactional per call: ``Overlay`` buffers writes over a backend and
  applies them only on ``commit``; ``discard`` drops them.

Public API
----------
- StorageBackend (Protocol)
- MemoryBackend, JsonFileBackend
- Overlay(parent).commit() / .discard()
- Item(key, model): typed JSON record stored under a fixed key
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import (Callable, Dict, Generic, Optional, Protocol, Type,
                    TypeVar, Union, runtime_checkable)

from pydantic import BaseModel, ValidationError

from counter_py.config import load_config
from counter_py.errors import NotFound, ParseError, StorageError

log = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


# ---------------------------- Backend API ---------------------------- #


@runtime_checkable
class StorageBackend(Protocol):
    """Minimal backend interface for contract storage."""

    def get(self, key: bytes) -> Optional[bytes]: ...
    def set(self, key: bytes, value: bytes) -> None: ...
    def delete(self, key: bytes) -> None: ...
    def exists(self, key: bytes) -> bool: ...


class MemoryBackend:
    """In-memory backend for local runs and tests."""

    def __init__(self, initial: Optional[Dict[bytes, bytes]] = None) -> None:
        self._store: Dict[bytes, bytes] = dict(initial or {})

    def get(self, key: bytes) -> Optional[bytes]:
        return self._store.get(key)

    def set(self, key: bytes, value: bytes) -> None:
        self._store[key] = value

    def delete(self, key: bytes) -> None:
        self._store.pop(key, None)

    def exists(self, key: bytes) -> bool:
        return key in self._store

    def items(self) -> Dict[bytes, bytes]:
        """Snapshot of all stored pairs (test/debug helper)."""
        return dict(self._store)


class JsonFileBackend(MemoryBackend):
    """
    Memory backend persisted to a JSON file of hex-encoded key/value pairs.

    The file is read once on construction and rewritten by ``flush()``; the
    CLI flushes after every successful call.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        initial: Dict[bytes, bytes] = {}
        if self.path.is_file():
            try:
                raw = json.loads(self.path.read_text(encoding="utf-8") or "{}")
                initial = {bytes.fromhex(k): bytes.fromhex(v) for k, v in raw.items()}
            except (ValueError, TypeError, AttributeError) as e:
                raise StorageError(
                    f"state file is not a valid store: {self.path}",
                    context={"path": str(self.path)},
                ) from e
        super().__init__(initial)

    def flush(self) -> None:
        data = {k.hex(): v.hex() for k, v in sorted(self._store.items())}
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, sort_keys=True) + "\n", encoding="utf-8")
        log.debug("flushed %d keys to %s", len(data), self.path)


_DELETED = object()


class Overlay:
    """
    Write buffer over a parent backend.

    Reads consult the buffer first and then the parent. Writes and deletes go
    only to the buffer until ``commit()`` applies them to the parent in order
    of first touch. ``discard()`` drops everything staged.
    """

    def __init__(self, parent: StorageBackend) -> None:
        self._parent = parent
        self._staged: Dict[bytes, object] = {}

    def get(self, key: bytes) -> Optional[bytes]:
        if key in self._staged:
            v = self._staged[key]
            return None if v is _DELETED else v  # type: ignore[return-value]
        return self._parent.get(key)

    def set(self, key: bytes, value: bytes) -> None:
        self._staged[key] = value

    def delete(self, key: bytes) -> None:
        self._staged[key] = _DELETED

    def exists(self, key: bytes) -> bool:
        if key in self._staged:
            return self._staged[key] is not _DELETED
        return self._parent.exists(key)

    @property
    def pending(self) -> int:
        return len(self._staged)

    def commit(self) -> None:
        for key, value in self._staged.items():
            if value is _DELETED:
                self._parent.delete(key)
            else:
                self._parent.set(key, value)  # type: ignore[arg-type]
        self._staged.clear()

    def discard(self) -> None:
        self._staged.clear()


# --------------------------- Validation helpers --------------------------- #


def check_key(key: bytes) -> bytes:
    if not isinstance(key, (bytes, bytearray)):
        raise StorageError("storage key must be bytes")
    if len(key) == 0:
        raise StorageError("storage key must be non-empty")
    max_len = load_config().max_storage_key_bytes
    if len(key) > max_len:
        raise StorageError(f"storage key too long (>{max_len} bytes)")
    return bytes(key)


def check_value(value: bytes) -> bytes:
    if not isinstance(value, (bytes, bytearray)):
        raise StorageError("storage value must be bytes")
    max_len = load_config().max_storage_value_bytes
    if len(value) > max_len:
        raise StorageError(f"storage value too large (>{max_len} bytes)")
    return bytes(value)


# ------------------------------ Typed records ----------------------------- #


class Item(Generic[M]):
    """
    A single pydantic model stored as JSON under a fixed key.

        STATE = Item(b"state", State)
        STATE.save(store, State(count=1, owner="alice"))
        STATE.load(store).count
    """

    def __init__(self, key: Union[str, bytes], model: Type[M]) -> None:
        self.key = check_key(key.encode("utf-8") if isinstance(key, str) else key)
        self.model = model

    def save(self, store: StorageBackend, value: M) -> None:
        raw = value.model_dump_json().encode("utf-8")
        store.set(self.key, check_value(raw))

    def may_load(self, store: StorageBackend) -> Optional[M]:
        raw = store.get(self.key)
        if raw is None:
            return None
        try:
            return self.model.model_validate_json(raw)
        except ValidationError as e:
            raise ParseError(
                f"corrupt {self.model.__name__} record",
                context={"key": self.key.decode("utf-8", "replace")},
            ) from e

    def load(self, store: StorageBackend) -> M:
        value = self.may_load(store)
        if value is None:
            raise NotFound(
                f"{self.model.__name__} not found",
                context={"key": self.key.decode("utf-8", "replace")},
            )
        return value

    def exists(self, store: StorageBackend) -> bool:
        return store.exists(self.key)

    def update(self, store: StorageBackend, action: Callable[[M], M]) -> M:
        """Load, apply `action`, save and return the new value. Errors leave storage untouched."""
        new = action(self.load(store))
        self.save(store, new)
        return new


__all__ = [
    "StorageBackend",
    "MemoryBackend",
    "JsonFileBackend",
    "Overlay",
    "Item",
    "check_key",
    "check_value",
]
