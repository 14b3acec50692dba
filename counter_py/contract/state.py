"""
Counter state and its store.

Lifecycle
---------
    Uninitialized --initialize(count, owner)--> Active

``initialize`` happens once; a second call fails with AlreadyInitialized.
While Active:

    increment()            count += 1, any caller (Overflow past i32 max)
    reset(sender, count)   owner only, else Unauthorized
    load()                 current state

Every mutation goes through ``Item.update`` so the owner check and the range
check run before anything is written.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from counter_py.errors import AlreadyInitialized, Overflow, Unauthorized
from counter_py.runtime.storage_api import Item, StorageBackend

from .msg import I32, I32_MAX, I32_MIN

log = logging.getLogger(__name__)

STATE_KEY = b"state"


class State(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    count: I32
    owner: str


STATE: Item[State] = Item(STATE_KEY, State)


def is_owner(state: State, sender: str) -> bool:
    return sender == state.owner


class CounterStore:
    """State machine over a single storage backend."""

    def __init__(self, storage: StorageBackend) -> None:
        self.storage = storage

    def is_initialized(self) -> bool:
        return STATE.exists(self.storage)

    def initialize(self, count: int, owner: str) -> State:
        if self.is_initialized():
            raise AlreadyInitialized(
                "counter already initialized",
                context={"owner": STATE.load(self.storage).owner},
            )
        state = State(count=count, owner=owner)
        STATE.save(self.storage, state)
        log.debug("initialized count=%d owner=%s", count, owner)
        return state

    def load(self) -> State:
        """Raises NotFound while Uninitialized."""
        return STATE.load(self.storage)

    def increment(self) -> State:
        def _inc(state: State) -> State:
            if state.count >= I32_MAX:
                raise Overflow(
                    "count overflow",
                    context={"count": state.count, "op": "increment"},
                )
            return state.model_copy(update={"count": state.count + 1})

        return STATE.update(self.storage, _inc)

    def reset(self, sender: str, count: int) -> State:
        def _reset(state: State) -> State:
            if not is_owner(state, sender):
                raise Unauthorized(context={"sender": sender})
            if not I32_MIN <= count <= I32_MAX:
                raise Overflow("count out of i32 range", context={"count": count})
            return state.model_copy(update={"count": count})

        return STATE.update(self.storage, _reset)


__all__ = ["STATE_KEY", "State", "STATE", "is_owner", "CounterStore"]
