from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from jsoncards.card_extractor import card_id_for_path
from jsoncards.documents.repository import InMemoryDocumentRepository
from jsoncards.documents.service import JsonDocumentService, set_document_service
from jsoncards.server import create_app

BASE = "/api/json-files"

DOC = {"user": {"userId": 7, "firstName": "Ada"}, "items": [1, 2, 3], "note": None}


@pytest.fixture
def client():
    set_document_service(JsonDocumentService(repository=InMemoryDocumentRepository()))
    return TestClient(create_app())


def _create(client, content=DOC, name="doc.json"):
    resp = client.post(BASE, json={"name": name, "content": content})
    assert resp.status_code == 201
    return resp.json()


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_create_and_fetch(client):
    body = _create(client)
    assert body["name"] == "doc.json"
    assert body["size"] > 0
    assert "lastModified" in body
    root = body["cards"][0]
    assert root["path"] == "$"
    assert root["isValid"] is True
    assert root["warnings"] == ["Contains null values"]

    resp = client.get(f"{BASE}/{body['id']}")
    assert resp.status_code == 200
    assert resp.json()["content"] == DOC

    resp = client.get(BASE)
    assert [d["id"] for d in resp.json()] == [body["id"]]


def test_create_keeps_client_cards(client):
    card = {
        "id": "abc",
        "title": "Custom",
        "description": "Hand made",
        "path": "$",
        "content": {"a": 1},
        "type": "object",
        "isValid": True,
    }
    resp = client.post(BASE, json={"name": "c.json", "content": {"a": 1}, "size": 8, "cards": [card]})
    assert resp.status_code == 201
    body = resp.json()
    assert body["size"] == 8
    assert body["cards"][0]["id"] == "abc"
    assert body["cards"][0]["warnings"] == []


def test_create_rejects_missing_name(client):
    resp = client.post(BASE, json={"content": {}})
    assert resp.status_code == 422


def test_import_text(client):
    resp = client.post(f"{BASE}/import", json={"name": "x.json", "text": '{"a": {"b": 1}}'})
    assert resp.status_code == 201
    assert [c["path"] for c in resp.json()["cards"]] == ["$", "$.a"]


def test_import_invalid_text(client):
    resp = client.post(f"{BASE}/import", json={"name": "x.json", "text": "{oops"})
    assert resp.status_code == 400
    assert resp.json()["detail"]["error"]["code"] == "json_file.invalid"


def test_missing_document_envelope(client):
    resp = client.get(f"{BASE}/missing")
    assert resp.status_code == 404
    error = resp.json()["detail"]["error"]
    assert error["code"] == "json_file.not_found"
    assert error["resource_kind"] == "json_file"


def test_patch_and_delete(client):
    body = _create(client)
    resp = client.patch(f"{BASE}/{body['id']}", json={"content": {"only": [1]}})
    assert resp.status_code == 200
    assert [c["path"] for c in resp.json()["cards"]] == ["$", "$.only"]

    resp = client.delete(f"{BASE}/{body['id']}")
    assert resp.status_code == 204
    assert client.get(f"{BASE}/{body['id']}").status_code == 404
    assert client.delete(f"{BASE}/{body['id']}").status_code == 404


def test_list_cards_with_search(client):
    body = _create(client)
    resp = client.get(f"{BASE}/{body['id']}/cards", params={"q": "items"})
    assert resp.status_code == 200
    payload = resp.json()
    assert [c["path"] for c in payload["cards"]] == ["$.items"]
    assert payload["total_warnings"] == 1


def test_preview(client):
    body = _create(client)
    card_id = card_id_for_path("$.user")
    resp = client.get(f"{BASE}/{body['id']}/cards/{card_id}/preview", params={"max_lines": 5})
    assert resp.status_code == 200
    payload = resp.json()
    assert payload["cardId"] == card_id
    assert payload["maxLines"] == 5
    assert "User ID: 7" in payload["preview"]
    assert len(payload["preview"].split("\n")) <= 5


def test_preview_unknown_card(client):
    body = _create(client)
    resp = client.get(f"{BASE}/{body['id']}/cards/nope/preview")
    assert resp.status_code == 404
    assert resp.json()["detail"]["error"]["code"] == "card.not_found"


def test_update_card_merges(client):
    body = _create(client)
    card_id = card_id_for_path("$.user")
    resp = client.put(f"{BASE}/{body['id']}/cards/{card_id}", json={"content": {"userId": 8}})
    assert resp.status_code == 200
    assert resp.json()["content"]["user"] == {"userId": 8}
    assert resp.json()["content"]["items"] == [1, 2, 3]


def test_export_card_and_document(client):
    body = _create(client)
    resp = client.post(f"{BASE}/{body['id']}/export-card", json={"cardId": card_id_for_path("$.items")})
    assert resp.status_code == 200
    assert resp.json() == {"content": [1, 2, 3], "filename": "items.json"}

    resp = client.post(f"{BASE}/{body['id']}/export-card", json={"cardId": "nope"})
    assert resp.status_code == 404

    resp = client.get(f"{BASE}/{body['id']}/export")
    assert resp.json() == {"content": DOC, "filename": "doc.json"}


def test_preview_expanded_uses_configured_budget(client, monkeypatch):
    monkeypatch.setenv("JSON_CARDS_EXPANDED_LINES", "30")
    body = _create(client, content={"numbers": list(range(40))})
    card_id = card_id_for_path("$.numbers")
    resp = client.get(f"{BASE}/{body['id']}/cards/{card_id}/preview", params={"expanded": "true"})
    payload = resp.json()
    assert payload["maxLines"] == 30
    lines = payload["preview"].split("\n")
    assert lines[-1] == "   (and 20 more items...)"


def _raw(client, method, url, body):
    return client.request(method, url, content=body, headers={"Content-Type": "application/json"})


def test_create_rejects_nan_body(client):
    resp = _raw(client, "POST", BASE, '{"name": "n.json", "content": {"a": NaN}}')
    assert resp.status_code == 400
    assert resp.json()["detail"]["error"]["code"] == "json_file.invalid"
    assert client.get(BASE).json() == []


def test_patch_rejects_nan_body(client):
    body = _create(client)
    resp = _raw(client, "PATCH", f"{BASE}/{body['id']}", '{"content": {"a": Infinity}}')
    assert resp.status_code == 400
    assert client.get(f"{BASE}/{body['id']}").json()["content"] == DOC


def test_card_update_rejects_nan_body(client):
    body = _create(client)
    card_id = card_id_for_path("$.user")
    resp = _raw(client, "PUT", f"{BASE}/{body['id']}/cards/{card_id}", '{"content": {"userId": NaN}}')
    assert resp.status_code == 400
    assert resp.json()["detail"]["error"]["code"] == "card.invalid_content"
