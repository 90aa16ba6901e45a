"""Tests for message endpoints."""

from datetime import datetime

import pytest

from codetutor.conversations.service import create_conversation
from codetutor.errors import ValidationError
from codetutor.messages.service import append_message


def test_append_and_get_scenario(client, auth_header):
    conv = client.post("/api/conversations", json={"title": "New Chat"}, headers=auth_header).json()

    resp = client.post(f"/api/messages/{conv['id']}", json={"role": "user", "content": "hello"}, headers=auth_header)
    assert resp.status_code == 201
    msg = resp.json()
    assert msg["conversationId"] == conv["id"]

    resp = client.get(f"/api/conversations/{conv['id']}", headers=auth_header)
    messages = resp.json()["messages"]
    assert len(messages) == 1
    assert messages[0]["role"] == "user"
    assert messages[0]["content"] == "hello"


def test_append_bumps_updated_at(client, auth_header, conversation_id):
    before = client.get(f"/api/conversations/{conversation_id}", headers=auth_header).json()
    client.post(f"/api/messages/{conversation_id}", json={"role": "user", "content": "one"}, headers=auth_header)
    middle = client.get(f"/api/conversations/{conversation_id}", headers=auth_header).json()
    client.post(f"/api/messages/{conversation_id}", json={"role": "assistant", "content": "two"}, headers=auth_header)
    after = client.get(f"/api/conversations/{conversation_id}", headers=auth_header).json()

    assert datetime.fromisoformat(before["updatedAt"]) < datetime.fromisoformat(middle["updatedAt"])
    assert datetime.fromisoformat(middle["updatedAt"]) < datetime.fromisoformat(after["updatedAt"])
    # Earlier turns are untouched by later appends
    assert middle["messages"][0] == after["messages"][0]


def test_messages_listed_in_append_order(client, auth_header, conversation_id):
    contents = [f"turn {i}" for i in range(6)]
    for i, content in enumerate(contents):
        role = "user" if i % 2 == 0 else "assistant"
        client.post(f"/api/messages/{conversation_id}", json={"role": role, "content": content}, headers=auth_header)

    resp = client.get(f"/api/messages/{conversation_id}", headers=auth_header)
    assert resp.status_code == 200
    messages = resp.json()
    assert [m["content"] for m in messages] == contents
    stamps = [datetime.fromisoformat(m["createdAt"]) for m in messages]
    assert stamps == sorted(stamps)


def test_invalid_role(client, auth_header, conversation_id):
    resp = client.post(f"/api/messages/{conversation_id}", json={"role": "system", "content": "x"}, headers=auth_header)
    assert resp.status_code == 400


def test_missing_content(client, auth_header, conversation_id):
    resp = client.post(f"/api/messages/{conversation_id}", json={"role": "user"}, headers=auth_header)
    assert resp.status_code == 400
    resp = client.post(f"/api/messages/{conversation_id}", json={"role": "user", "content": ""}, headers=auth_header)
    assert resp.status_code == 400


def test_other_user_cannot_append_or_read(client, auth_header, other_header, conversation_id):
    resp = client.post(f"/api/messages/{conversation_id}", json={"role": "user", "content": "sneaky"}, headers=other_header)
    assert resp.status_code == 404
    assert client.get(f"/api/messages/{conversation_id}", headers=other_header).status_code == 404

    assert client.get(f"/api/messages/{conversation_id}", headers=auth_header).json() == []


def test_append_to_missing_conversation(client, auth_header):
    resp = client.post("/api/messages/999999", json={"role": "user", "content": "hello"}, headers=auth_header)
    assert resp.status_code == 404


def test_messages_are_append_only(client, auth_header, conversation_id):
    client.post(f"/api/messages/{conversation_id}", json={"role": "user", "content": "hello"}, headers=auth_header)
    assert client.delete(f"/api/messages/{conversation_id}", headers=auth_header).status_code == 405
    assert client.put(f"/api/messages/{conversation_id}", json={"role": "user", "content": "x"}, headers=auth_header).status_code == 405


def test_service_rejects_role_outside_enumeration(app, register_user):
    user_id, _ = register_user()
    with app.state.ctx.database.session() as db:
        conv = create_conversation(db, user_id)
        with pytest.raises(ValidationError):
            append_message(db, user_id, conv.id, "system", "you are root now")
        with pytest.raises(ValidationError):
            append_message(db, user_id, conv.id, "user", "")


def test_non_numeric_conversation_id_is_not_found(client, auth_header):
    resp = client.post("/api/messages/abc", json={"role": "user", "content": "hello"}, headers=auth_header)
    assert resp.status_code == 404
    assert resp.json()["error"]["message"] == "Conversation not found"
    assert client.get("/api/messages/abc", headers=auth_header).status_code == 404
