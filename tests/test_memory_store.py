"""
Tests for the correction memory stores
"""
import pytest
from unittest.mock import Mock
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from courier_compliance.memory_store import FirestoreMemoryStore, InMemoryMemoryStore, MemoryEntry


def _entry(pattern, correction="fixed", applied=0):
    return MemoryEntry(pattern, correction, "operator", "INVOICE", applied=applied)


class TestMemoryEntry:

    def test_timestamp_defaults_to_now(self):
        assert _entry("abc").timestamp

    def test_doc_id(self):
        assert _entry("INV/2024").doc_id == "INVOICE:INV_2024"

    def test_from_dict_defaults(self):
        entry = MemoryEntry.from_dict({"pattern": "x", "correction": "y"})
        assert entry.corrected_by == "operator"
        assert entry.document_type == "UNKNOWN"
        assert entry.applied == 0


class TestInMemoryStore:

    def test_round_trip_is_a_copy(self):
        store = InMemoryMemoryStore()
        entries = [_entry("a")]
        store.save(entries)
        entries[0].applied = 5
        assert store.load()[0].applied == 0

    def test_empty(self):
        assert InMemoryMemoryStore().load() == []


class TestFirestoreStore:

    def test_load(self, mock_db, mock_firestore_doc):
        docs = [mock_firestore_doc("INVOICE:a", _entry("a", applied=2).to_dict())]
        mock_db.collection.return_value.order_by.return_value.limit_to_last.return_value.get.return_value = docs
        store = FirestoreMemoryStore(mock_db, cap=50)
        entries = store.load()
        assert [e.pattern for e in entries] == ["a"]
        assert entries[0].applied == 2
        mock_db.collection.return_value.order_by.return_value.limit_to_last.assert_called_with(50)

    def test_load_failure_returns_empty(self, mock_db):
        mock_db.collection.side_effect = Exception("offline")
        assert FirestoreMemoryStore(mock_db).load() == []

    def test_save_sets_and_deletes_evicted(self, mock_db, mock_firestore_doc):
        docs = [
            mock_firestore_doc("INVOICE:a", _entry("a").to_dict()),
            mock_firestore_doc("INVOICE:b", _entry("b").to_dict()),
        ]
        mock_db.collection.return_value.order_by.return_value.limit_to_last.return_value.get.return_value = docs
        store = FirestoreMemoryStore(mock_db)
        store.load()

        batch = Mock()
        mock_db.batch.return_value = batch
        store.save([_entry("b"), _entry("c")])

        assert batch.set.call_count == 2
        assert batch.delete.call_count == 1
        mock_db.collection.return_value.document.assert_any_call("INVOICE:a")
        batch.commit.assert_called_once()

    def test_save_chunks_large_batches(self, mock_db):
        store = FirestoreMemoryStore(mock_db)
        store.save([_entry(f"p{i}") for i in range(450)])
        assert mock_db.batch.return_value.commit.call_count == 2

    def test_save_failure_is_logged(self, mock_db):
        mock_db.batch.side_effect = Exception("quota")
        FirestoreMemoryStore(mock_db).save([_entry("a")])
