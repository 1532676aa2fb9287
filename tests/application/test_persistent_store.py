"""Tests for the persisted state container."""

import json
from dataclasses import dataclass

from storefront.application.persistent_store import create_store, persisting, rehydrate
from tests.fakes import BrokenStateStorage, InMemoryStateStorage


@dataclass(frozen=True)
class Counter:
    value: int = 0


class CounterCodec:

    @staticmethod
    def to_record(state):
        return {"value": state.value}

    @staticmethod
    def from_record(record):
        return Counter(value=int(record["value"]))


def increment(state, by=1):
    return Counter(state.value + by)


REDUCERS = {"increment": increment}


def _store(storage):
    return create_store("counter", Counter(), REDUCERS, storage=storage, codec=CounterCodec())


class TestDispatch:

    def test_state_is_available_synchronously(self):
        store = _store(InMemoryStateStorage())
        returned = store.dispatch("increment", 2)
        assert returned == Counter(2)
        assert store.get_state() == Counter(2)

    def test_every_dispatch_writes_a_snapshot(self):
        storage = InMemoryStateStorage()
        store = _store(storage)
        store.dispatch("increment")
        store.dispatch("increment", 4)
        assert storage.writes == 2
        assert json.loads(storage.data["counter"]) == {"value": 5}

    def test_write_failure_is_swallowed(self):
        store = create_store(
            "counter", Counter(), REDUCERS, storage=BrokenStateStorage(), codec=CounterCodec()
        )
        assert store.dispatch("increment") == Counter(1)


class TestRehydration:

    def test_restores_previous_snapshot(self):
        storage = InMemoryStateStorage()
        _store(storage).dispatch("increment", 3)
        assert _store(storage).get_state() == Counter(3)

    def test_missing_snapshot_uses_initial_state(self):
        assert _store(InMemoryStateStorage()).get_state() == Counter()

    def test_unparseable_snapshot_uses_initial_state(self):
        storage = InMemoryStateStorage({"counter": "{not json"})
        assert _store(storage).get_state() == Counter()

    def test_wrong_shape_uses_initial_state(self):
        storage = InMemoryStateStorage({"counter": json.dumps([1, 2])})
        assert _store(storage).get_state() == Counter()

    def test_codec_rejection_uses_initial_state(self):
        storage = InMemoryStateStorage({"counter": json.dumps({"value": "many"})})
        assert _store(storage).get_state() == Counter()

    def test_unavailable_storage_uses_initial_state(self):
        initial = Counter(7)
        assert rehydrate("counter", initial, BrokenStateStorage(), CounterCodec()) is initial


class TestPersistingWrapper:

    def test_composes_reducer_and_write(self):
        written = []
        wrapped = persisting(increment, written.append)
        assert wrapped(Counter(1), 2) == Counter(3)
        assert written == [Counter(3)]

    def test_underlying_reducer_stays_pure(self):
        assert increment(Counter(1)) == Counter(2)
