"""Tests for history_service module."""

import json

import pytest

from binary_tutor.exceptions import StorageError
from binary_tutor.models import Direction
from binary_tutor.services import HistoryLedger, MemoryStore
from binary_tutor.services.history_service import DEFAULT_HISTORY_KEY, HISTORY_LIMIT


def _stored(store):
    return json.loads(store.get(DEFAULT_HISTORY_KEY))


# ---------------------------------------------------------------------------
# TestAppend
# ---------------------------------------------------------------------------


class TestAppend:
    """Tests for HistoryLedger.append."""

    def test_most_recent_first(self, ledger, make_record):
        ledger.append(make_record(id=1, input="1"))
        ledger.append(make_record(id=2, input="10"))
        assert [r.id for r in ledger.entries] == [2, 1]

    def test_cap_is_twenty(self):
        assert HISTORY_LIMIT == 20

    def test_twenty_one_appends_keep_twenty(self, ledger, make_record):
        for i in range(21):
            ledger.append(make_record(id=i))

        ids = [r.id for r in ledger.entries]
        assert len(ids) == 20
        assert ids[0] == 20
        assert 0 not in ids

    def test_each_append_persists(self, ledger, memory_store, make_record):
        ledger.append(make_record(id=7))
        assert _stored(memory_store) == [{"id": 7, "type": "B→D", "input": "1010", "output": "10"}]

    def test_persisted_sequence_respects_cap(self, ledger, memory_store, make_record):
        for i in range(25):
            ledger.append(make_record(id=i))
        assert len(_stored(memory_store)) == 20

    def test_custom_limit(self, memory_store, make_record):
        ledger = HistoryLedger(memory_store, limit=3)
        for i in range(5):
            ledger.append(make_record(id=i))
        assert [r.id for r in ledger.entries] == [4, 3, 2]

    def test_entries_is_a_snapshot(self, ledger, make_record):
        ledger.append(make_record(id=1))
        snapshot = ledger.entries
        ledger.append(make_record(id=2))
        assert len(snapshot) == 1
        assert isinstance(snapshot, tuple)


# ---------------------------------------------------------------------------
# TestClear
# ---------------------------------------------------------------------------


class TestClear:
    """Tests for HistoryLedger.clear."""

    def test_clear_empties(self, ledger, make_record):
        ledger.append(make_record())
        ledger.clear()
        assert ledger.entries == ()

    def test_clear_writes_empty_list(self, ledger, memory_store, make_record):
        ledger.append(make_record())
        ledger.clear()
        assert _stored(memory_store) == []

    def test_clear_then_reload_is_empty(self, memory_store, make_record):
        ledger = HistoryLedger(memory_store)
        ledger.append(make_record())
        ledger.clear()

        restarted = HistoryLedger(memory_store)
        restarted.load()
        assert restarted.entries == ()


# ---------------------------------------------------------------------------
# TestLoad
# ---------------------------------------------------------------------------


class TestLoad:
    """Tests for HistoryLedger.load."""

    def test_missing_key_loads_empty(self, memory_store):
        ledger = HistoryLedger(memory_store)
        ledger.load()
        assert len(ledger) == 0

    def test_loads_persisted_entries(self, memory_store, make_record):
        first = HistoryLedger(memory_store)
        first.append(make_record(id=1, input="1", output="1"))
        first.append(make_record(id=2, direction=Direction.DECIMAL_TO_BINARY, input="2", output="10"))

        second = HistoryLedger(memory_store)
        second.load()
        assert second.entries == first.entries

    def test_load_does_not_save(self):
        class CountingStore(MemoryStore):
            writes = 0

            def set(self, key, value):
                CountingStore.writes += 1
                super().set(key, value)

        store = CountingStore({DEFAULT_HISTORY_KEY: "[]"})
        HistoryLedger(store).load()
        assert CountingStore.writes == 0

    @pytest.mark.parametrize(
        "blob",
        [
            "not valid json",
            '{"key": "value"}',
            '[{"id": 1}]',
            '[{"id": 1, "type": "X→Y", "input": "1", "output": "1"}]',
            '[{"id": 1, "type": "B→D", "input": "", "output": "1"}]',
            '[{"id": "1", "type": "B→D", "input": "1", "output": "1"}]',
            "[1, 2, 3]",
            "[" * 100000,
        ],
    )
    def test_corrupt_history_is_discarded(self, blob):
        store = MemoryStore({DEFAULT_HISTORY_KEY: blob, "theme": "dark"})
        ledger = HistoryLedger(store)
        ledger.load()

        assert ledger.entries == ()
        assert DEFAULT_HISTORY_KEY not in store
        assert store.get("theme") == "dark"

    def test_unreadable_store_loads_empty(self):
        class UnreadableStore(MemoryStore):
            def get(self, key):
                raise StorageError("cannot read")

            def remove(self, key):
                raise StorageError("cannot write")

        ledger = HistoryLedger(UnreadableStore())
        ledger.load()
        assert ledger.entries == ()

    def test_corrupt_history_is_logged(self, caplog):
        store = MemoryStore({DEFAULT_HISTORY_KEY: "{"})
        HistoryLedger(store).load()
        assert "Failed to parse conversion history" in caplog.text

    def test_oversized_history_is_truncated(self, make_record):
        records = [make_record(id=i).to_dict() for i in range(30, 0, -1)]
        store = MemoryStore({DEFAULT_HISTORY_KEY: json.dumps(records)})
        ledger = HistoryLedger(store)
        ledger.load()
        assert len(ledger) == 20
        assert ledger.entries[0].id == 30

    def test_custom_key(self, make_record):
        store = MemoryStore()
        ledger = HistoryLedger(store, key="other")
        ledger.append(make_record())
        assert store.get("other") is not None
        assert store.get(DEFAULT_HISTORY_KEY) is None


# ---------------------------------------------------------------------------
# TestNewRecord
# ---------------------------------------------------------------------------


class TestNewRecord:
    """Tests for HistoryLedger.new_record."""

    def test_builds_record(self, ledger):
        record = ledger.new_record(Direction.DECIMAL_TO_BINARY, "5", "101")
        assert record.direction is Direction.DECIMAL_TO_BINARY
        assert record.input == "5"
        assert record.output == "101"

    def test_ids_increase(self, ledger):
        ids = []
        for _ in range(5):
            record = ledger.new_record(Direction.BINARY_TO_DECIMAL, "1", "1")
            ledger.append(record)
            ids.append(record.id)
        assert ids == sorted(ids)
        assert len(set(ids)) == 5

    def test_id_passes_future_entries(self, ledger, make_record):
        far_future = 10**15
        ledger.append(make_record(id=far_future))
        record = ledger.new_record(Direction.BINARY_TO_DECIMAL, "1", "1")
        assert record.id == far_future + 1
