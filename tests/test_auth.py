"""Tests for auth endpoints and token validation."""

import uuid

import pydantic
import pytest

from codetutor.auth.jwt import create_access_token
from codetutor.config.settings import Settings


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "dbReady": True}


def test_register_login_scenario(client):
    resp = client.post("/api/auth/register", json={"email": "alice@x.com", "password": "pw123456"})
    assert resp.status_code == 201
    data = resp.json()
    assert data["email"] == "alice@x.com"
    assert data["token"]
    user_id = data["userId"]

    resp = client.post("/api/auth/login", json={"email": "alice@x.com", "password": "pw123456"})
    assert resp.status_code == 200
    assert resp.json()["userId"] == user_id

    resp = client.post("/api/auth/login", json={"email": "alice@x.com", "password": "wrong-password"})
    assert resp.status_code == 401


def test_register_duplicate(client, register_user):
    email = f"dup_{uuid.uuid4().hex[:8]}@example.com"
    register_user(email)
    resp = client.post("/api/auth/register", json={"email": email, "password": "another"})
    assert resp.status_code == 400
    assert resp.json()["error"]["message"] == "Email already registered"


def test_register_missing_fields(client):
    resp = client.post("/api/auth/register", json={"email": "bob@example.com"})
    assert resp.status_code == 400
    assert resp.json()["error"]["type"] == "validation_error"

    resp = client.post("/api/auth/register", json={"email": "bob@example.com", "password": ""})
    assert resp.status_code == 400


def test_login_does_not_reveal_unknown_email(client, register_user):
    email = f"known_{uuid.uuid4().hex[:8]}@example.com"
    register_user(email)

    wrong_password = client.post("/api/auth/login", json={"email": email, "password": "nope"})
    unknown_email = client.post("/api/auth/login", json={"email": "nobody@example.com", "password": "nope"})
    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json()["error"]["message"] == unknown_email.json()["error"]["message"]


def test_me(client, register_user):
    email = f"me_{uuid.uuid4().hex[:8]}@example.com"
    user_id, header = register_user(email)
    resp = client.get("/api/auth/me", headers=header)
    assert resp.status_code == 200
    body = resp.json()
    assert body["id"] == user_id
    assert body["email"] == email
    assert "createdAt" in body


def test_missing_auth(client):
    resp = client.get("/api/conversations")
    assert resp.status_code == 401
    assert resp.json()["error"]["type"] == "authentication_error"


def test_malformed_token(client):
    resp = client.get("/api/conversations", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401


def test_token_signed_with_other_secret(client):
    forged = create_access_token(1, Settings(JWT_SECRET="someone-else", _env_file=None))
    resp = client.get("/api/conversations", headers={"Authorization": f"Bearer {forged}"})
    assert resp.status_code == 401


def test_expired_token(client, settings):
    expired = create_access_token(1, settings.model_copy(update={"JWT_EXPIRE_DAYS": -1}))
    resp = client.get("/api/auth/me", headers={"Authorization": f"Bearer {expired}"})
    assert resp.status_code == 401


def test_production_requires_secret():
    with pytest.raises(pydantic.ValidationError):
        Settings(ENVIRONMENT="production", _env_file=None)


def test_request_id_header(client):
    resp = client.get("/health", headers={"X-Request-ID": "abc123"})
    assert resp.headers["X-Request-ID"] == "abc123"
