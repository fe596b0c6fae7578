"""
Tests for the precedent stores (Firestore, HTTP, null)
"""
import pytest
import requests
from unittest.mock import Mock, patch
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from courier_compliance.precedent_store import (
    FirestorePrecedentStore,
    HttpPrecedentStore,
    NullPrecedentStore,
    Precedent,
    get_firestore_client,
)


ROUTER_ROW = {
    "country_code": "CR",
    "ruling_id": "MH-DGA-RES-2023-045",
    "ruling_type": "clasificacion",
    "authority": "Dirección General de Aduanas (DGA)",
    "hs_code": "8517.62.00",
    "description_keywords": ["router", "wifi"],
    "legal_rationale": "GRI 1 por texto de partida.",
    "effective_date": "2023-07-01",
    "activo": True,
}


def _response(status_code=200, payload=None, json_error=None):
    resp = Mock()
    resp.status_code = status_code
    resp.text = "error body"
    if json_error:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    return resp


class TestPrecedentRecord:

    def test_from_record(self):
        p = Precedent.from_record(ROUTER_ROW, "doc-1")
        assert p.id == "doc-1"
        assert p.region == "CR"
        assert p.keywords == ["router", "wifi"]
        assert p.active
        assert p.gri_applied is None

    def test_to_dict_uses_store_columns(self):
        data = Precedent.from_record(ROUTER_ROW).to_dict()
        assert data["country_code"] == "CR"
        assert data["description_keywords"] == ["router", "wifi"]
        assert data["activo"] is True


class TestNullStore:

    def test_empty(self):
        lookup = NullPrecedentStore().fetch("PA")
        assert lookup.ok
        assert lookup.precedents == []
        assert lookup.source == "none"


class TestFirestoreStore:

    def test_fetch(self, mock_db, mock_firestore_doc):
        query = mock_db.collection.return_value.where.return_value.where.return_value
        query.stream.return_value = [mock_firestore_doc("abc", ROUTER_ROW)]
        lookup = FirestorePrecedentStore(mock_db).fetch("CR")
        assert lookup.ok
        assert lookup.precedents[0].id == "abc"
        mock_db.collection.assert_called_with("customs_precedents")
        mock_db.collection.return_value.where.assert_called_with("country_code", "==", "CR")

    def test_failure_falls_back_to_cache(self, mock_db):
        mock_db.collection.side_effect = Exception("permission denied")
        lookup = FirestorePrecedentStore(mock_db).fetch("CR")
        assert not lookup.ok
        assert lookup.error.kind == "store"
        assert lookup.source == "cache"


class TestHttpStore:

    def _store(self, *responses, **kwargs):
        session = Mock()
        session.get.side_effect = list(responses)
        kwargs.setdefault("backoff", 0)
        return HttpPrecedentStore("https://rulings.example.com/api/precedents/", session, **kwargs), session

    def test_list_payload(self):
        store, session = self._store(_response(200, [ROUTER_ROW]))
        lookup = store.fetch("CR")
        assert lookup.ok
        assert lookup.precedents[0].ruling_id == "MH-DGA-RES-2023-045"
        session.get.assert_called_once_with(
            "https://rulings.example.com/api/precedents",
            params={"country_code": "CR", "activo": "true"},
            timeout=5,
        )

    def test_data_envelope(self):
        store, _ = self._store(_response(200, {"data": [ROUTER_ROW]}))
        assert len(store.fetch("CR").precedents) == 1

    def test_timeout_retries_then_succeeds(self):
        store, session = self._store(requests.exceptions.Timeout(), _response(200, [ROUTER_ROW]))
        lookup = store.fetch("CR")
        assert lookup.ok
        assert session.get.call_count == 2

    def test_timeout_exhausted(self):
        store, session = self._store(requests.exceptions.Timeout(), requests.exceptions.Timeout())
        lookup = store.fetch("CR")
        assert lookup.error.kind == "timeout"
        assert lookup.source == "cache"
        assert session.get.call_count == 2

    def test_connection_error(self):
        error = requests.exceptions.ConnectionError("refused")
        store, _ = self._store(error, error)
        assert store.fetch("CR").error.kind == "connection"

    def test_server_error_is_retried(self):
        store, session = self._store(_response(503), _response(503))
        lookup = store.fetch("CR")
        assert lookup.error.kind == "http"
        assert session.get.call_count == 2

    def test_client_error_is_not_retried(self):
        store, session = self._store(_response(404), _response(200, []))
        lookup = store.fetch("CR")
        assert lookup.error.kind == "http"
        assert session.get.call_count == 1

    def test_invalid_json(self):
        store, _ = self._store(_response(200, json_error=ValueError("bad json")))
        assert store.fetch("CR").error.kind == "invalid_response"

    def test_non_list_payload(self):
        store, _ = self._store(_response(200, {"rows": []}))
        assert store.fetch("CR").error.kind == "invalid_response"

    def test_backoff_schedule(self):
        store, _ = self._store(
            requests.exceptions.Timeout(), requests.exceptions.Timeout(), requests.exceptions.Timeout(),
            max_attempts=3, backoff=0.5,
        )
        with patch("courier_compliance.precedent_store.time.sleep") as sleep:
            store.fetch("PA")
        assert [c.args[0] for c in sleep.call_args_list] == [0.5, 1.0]


class TestFirestoreClient:

    def test_initializes_app_once(self):
        with patch("firebase_admin._apps", {}), \
                patch("firebase_admin.initialize_app") as init, \
                patch("firebase_admin.firestore.client") as client:
            db = get_firestore_client()
        init.assert_called_once()
        assert db is client.return_value

    def test_reuses_existing_app(self):
        with patch("firebase_admin._apps", {"[DEFAULT]": Mock()}), \
                patch("firebase_admin.initialize_app") as init, \
                patch("firebase_admin.firestore.client"):
            get_firestore_client()
        init.assert_not_called()
