"""Persistent state container.

``create_store`` wraps an immutable state value and a table of pure
reducers. Dispatching a reducer replaces the state in one assignment and
then writes the full snapshot to durable storage under the store's key.
On creation, a prior snapshot for that key is read back and used as the
initial state when it decodes cleanly.

Storage problems never escape: a missing, unreadable or corrupt snapshot
falls back to the initial state, and a failed write is logged and
dropped.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from typing import Any, Generic, Protocol, TypeVar

from storefront.domain.exceptions import DomainException
from storefront.domain.repository.state_storage import StateStorage

logger = logging.getLogger(__name__)

S = TypeVar("S")

Reducer = Callable[..., S]


class StateCodec(Protocol[S]):
    """Converts a state value to and from a JSON-serializable record."""

    def to_record(self, state: S) -> dict[str, Any]: ...

    def from_record(self, record: dict[str, Any]) -> S: ...


def persisting(reducer: Reducer, write: Callable[[Any], None]) -> Reducer:
    """Compose ``reducer`` with a write of the state it produces.

    The reducer itself stays pure and can be tested without storage.
    """

    def apply(state, *args, **kwargs):
        next_state = reducer(state, *args, **kwargs)
        write(next_state)
        return next_state

    apply.__name__ = getattr(reducer, "__name__", "reducer")
    apply.__doc__ = reducer.__doc__
    return apply


class StoreHandle(Generic[S]):
    """A named, persisted state container. Create it with ``create_store``."""

    def __init__(
        self,
        key: str,
        state: S,
        reducers: Mapping[str, Reducer],
        storage: StateStorage,
        codec: StateCodec[S],
    ) -> None:
        self._key = key
        self._state = state
        self._storage = storage
        self._codec = codec
        self._reducers = {
            name: persisting(reducer, self._write) for name, reducer in reducers.items()
        }

    @property
    def key(self) -> str:
        return self._key

    def get_state(self) -> S:
        return self._state

    def dispatch(self, name: str, *args: Any, **kwargs: Any) -> S:
        """Apply the reducer registered as ``name`` and return the new state.

        Raises KeyError for an unregistered reducer name; that is a wiring
        bug, not a runtime condition.
        """
        reducer = self._reducers[name]
        self._state = reducer(self._state, *args, **kwargs)
        return self._state

    # --- Persistence ----------------------------------------------------------

    def _write(self, state: S) -> None:
        try:
            payload = json.dumps(self._codec.to_record(state), ensure_ascii=False)
            self._storage.write(self._key, payload)
        except (OSError, TypeError, ValueError) as exc:
            logger.warning("Could not persist %s: %s", self._key, exc)


def rehydrate(key: str, initial_state: S, storage: StateStorage, codec: StateCodec[S]) -> S:
    """Read back the snapshot stored under ``key``, or ``initial_state``."""
    try:
        payload = storage.read(key)
    except (OSError, ValueError) as exc:
        logger.warning("Storage unavailable for %s, starting fresh: %s", key, exc)
        return initial_state
    if payload is None:
        return initial_state

    try:
        record = json.loads(payload)
        if not isinstance(record, dict):
            raise ValueError(f"expected an object, got {type(record).__name__}")
        return codec.from_record(record)
    except (ValueError, KeyError, TypeError, AttributeError, DomainException) as exc:
        logger.warning("Discarding corrupt snapshot for %s: %s", key, exc)
        return initial_state


def create_store(
    key: str,
    initial_state: S,
    reducers: Mapping[str, Reducer],
    *,
    storage: StateStorage,
    codec: StateCodec[S],
) -> StoreHandle[S]:
    state = rehydrate(key, initial_state, storage, codec)
    logger.debug("Store %s ready", key)
    return StoreHandle(key, state, reducers, storage, codec)
