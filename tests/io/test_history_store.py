"""Unit tests for HistoryStore."""

import json
from itertools import count

import pytest

from thai_minima.core import TranslationRecord
from thai_minima.io import FileKeyValueStorage, HistoryStore, InMemoryKeyValueStorage


STORAGE_KEY = HistoryStore.DEFAULT_STORAGE_KEY


@pytest.fixture
def storage():
    """Provide a fresh in-memory storage for each test."""
    return InMemoryKeyValueStorage()


@pytest.fixture
def clock():
    """Deterministic clock advancing one second per call."""
    ticks = count(1_700_000_000)
    return lambda: float(next(ticks))


@pytest.fixture
def store(storage, clock):
    return HistoryStore(storage, clock=clock)


class TestHistoryStoreRecord:
    def test_record_appears_first(self, store):
        store.record("Hello", "สวัสดี")
        store.record("Thank you", "ขอบคุณ")

        records = store.all()
        assert [r.original for r in records] == ["Thank you", "Hello"]

    def test_record_returns_created_record(self, store):
        record = store.record("Hello, how are you?", "สวัสดี คุณเป็นอย่างไรบ้าง")

        first = store.all()[0]
        assert first == record
        assert first.original == "Hello, how are you?"
        assert first.translated == "สวัสดี คุณเป็นอย่างไรบ้าง"

    def test_record_uses_clock_in_milliseconds(self, store):
        record = store.record("Hello", "สวัสดี")
        assert record.timestamp == 1_700_000_000_000

    def test_record_keeps_empty_translation(self, store):
        store.record("Hello", "")
        assert store.all()[0].translated == ""

    def test_history_bounded_to_ten(self, store):
        for i in range(25):
            store.record(f"text {i}", f"แปล {i}")
            assert len(store.all()) <= 10

        assert len(store) == 10

    def test_eleventh_record_evicts_oldest(self, store):
        for i in range(10):
            store.record(f"text {i}", f"แปล {i}")
        oldest = store.all()[-1]
        assert oldest.original == "text 0"

        store.record("text 10", "แปล 10")

        records = store.all()
        assert len(records) == 10
        assert records[0].original == "text 10"
        assert oldest not in records
        assert [r.original for r in records] == [f"text {i}" for i in range(10, 0, -1)]

    def test_record_persists_immediately(self, store, storage):
        store.record("Hello", "สวัสดี")

        payload = json.loads(storage.get(STORAGE_KEY))
        assert payload["version"] == HistoryStore.FORMAT_VERSION
        assert payload["records"][0]["original"] == "Hello"
        assert payload["records"][0]["timestamp"] == 1_700_000_000_000

    def test_custom_bound(self, storage, clock):
        store = HistoryStore(storage, max_items=3, clock=clock)
        for i in range(5):
            store.record(str(i), str(i))
        assert [r.original for r in store.all()] == ["4", "3", "2"]

    def test_invalid_bound_rejected(self, storage):
        with pytest.raises(ValueError):
            HistoryStore(storage, max_items=0)


class TestHistoryStoreAll:
    def test_all_empty_initially(self, store):
        assert store.all() == []

    def test_all_returns_copy(self, store):
        store.record("Hello", "สวัสดี")
        snapshot = store.all()
        snapshot.clear()
        assert len(store.all()) == 1


class TestHistoryStoreClear:
    def test_clear_empties_history(self, store):
        store.record("Hello", "สวัสดี")
        store.clear()
        assert store.all() == []

    def test_clear_survives_reload(self, store, storage, clock):
        store.record("Hello", "สวัสดี")
        store.clear()

        reloaded = HistoryStore(storage, clock=clock)
        assert reloaded.load() == []
        assert storage.get(STORAGE_KEY) is not None


class TestHistoryStoreLoad:
    def test_round_trip_preserves_order_and_fields(self, store, storage, clock):
        for i in range(4):
            store.record(f"text {i}", f"แปล {i}")

        reloaded = HistoryStore(storage, clock=clock)
        assert reloaded.load() == store.all()
        assert reloaded.all() == store.all()

    def test_round_trip_through_files(self, tmp_path, clock):
        store = HistoryStore(FileKeyValueStorage(tmp_path), clock=clock)
        store.record("Good morning", "อรุณสวัสดิ์")

        reloaded = HistoryStore(FileKeyValueStorage(tmp_path), clock=clock)
        assert reloaded.load() == store.all()

    def test_missing_slot_returns_empty(self, store):
        assert store.load() == []

    @pytest.mark.parametrize(
        "raw",
        [
            "not json at all",
            "{",
            "42",
            '"a string"',
            '{"version": 1, "records": "nope"}',
            '{"version": 99, "records": []}',
            '[{"id": "1", "original": "Hi"}]',
            '[1, 2, 3]',
            '[{"id": "1", "original": "Hi", "translated": "x", "timestamp": "yesterday"}]',
            '[{"id": "1", "original": "Hi", "translated": "x", "timestamp": 100000000000000000000}]',
        ],
    )
    def test_corrupted_data_returns_empty(self, storage, raw):
        storage.set(STORAGE_KEY, raw)
        store = HistoryStore(storage)
        assert store.load() == []
        assert store.all() == []

    def test_deeply_nested_data_returns_empty(self, storage):
        storage.set(STORAGE_KEY, "[" * 100_000 + "]" * 100_000)
        assert HistoryStore(storage).load() == []

    def test_corrupted_data_replaces_in_memory_state(self, store, storage):
        store.record("Hello", "สวัสดี")
        storage.set(STORAGE_KEY, "garbage")
        assert store.load() == []

    def test_legacy_unversioned_array_loads(self, storage):
        legacy = [
            {"id": "2", "original": "Thanks", "translated": "ขอบคุณ", "timestamp": 2000},
            {"id": "1", "original": "Hello", "translated": "สวัสดี", "timestamp": 1000},
        ]
        storage.set(STORAGE_KEY, json.dumps(legacy, ensure_ascii=False))

        records = HistoryStore(storage).load()
        assert records == [
            TranslationRecord(id="2", original="Thanks", translated="ขอบคุณ", timestamp=2000),
            TranslationRecord(id="1", original="Hello", translated="สวัสดี", timestamp=1000),
        ]

    def test_object_without_version_is_version_zero(self, storage):
        payload = {"records": [{"id": "1", "original": "Hi", "translated": "x", "timestamp": 1}]}
        storage.set(STORAGE_KEY, json.dumps(payload))
        assert len(HistoryStore(storage).load()) == 1

    def test_oversized_history_truncated_on_load(self, storage):
        legacy = [
            {"id": str(i), "original": f"t{i}", "translated": "x", "timestamp": i}
            for i in range(15)
        ]
        storage.set(STORAGE_KEY, json.dumps(legacy))

        records = HistoryStore(storage).load()
        assert [r.id for r in records] == [str(i) for i in range(10)]

    def test_record_after_load_prepends(self, storage, clock):
        HistoryStore(storage, clock=clock).record("first", "หนึ่ง")

        store = HistoryStore(storage, clock=clock)
        store.load()
        store.record("second", "สอง")

        assert [r.original for r in store.all()] == ["second", "first"]
