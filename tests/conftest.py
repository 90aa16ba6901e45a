"""Shared test fixtures."""

import uuid

import pytest
from fastapi.testclient import TestClient

from codetutor.config.settings import Settings
from codetutor.llm.client import CompletionProvider, ModelParams
from codetutor.main import create_app

TEST_PASSWORD = "pw123456"


class ScriptedProvider(CompletionProvider):
    """Completion provider that records calls and replies with canned text or an error."""

    def __init__(self, reply: str = "Think about how many sides a square has."):
        self.reply = reply
        self.error: Exception | None = None
        self.calls: list[tuple[list[dict], ModelParams]] = []

    async def complete(self, messages: list[dict], params: ModelParams) -> str:
        self.calls.append((messages, params))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATABASE_PATH=str(tmp_path / "data" / "test.db"),
        JWT_SECRET="test-secret",
        GROQ_API_KEY="",
        _env_file=None,
    )


@pytest.fixture
def provider():
    return ScriptedProvider()


@pytest.fixture
def app(settings, provider):
    return create_app(settings, provider=provider)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


def register(client, email: str | None = None, password: str = TEST_PASSWORD) -> tuple[int, dict]:
    email = email or f"test_{uuid.uuid4().hex[:8]}@example.com"
    resp = client.post("/api/auth/register", json={"email": email, "password": password})
    assert resp.status_code == 201
    data = resp.json()
    return data["userId"], {"Authorization": f"Bearer {data['token']}"}


@pytest.fixture
def register_user(client):
    def _register(email: str | None = None, password: str = TEST_PASSWORD) -> tuple[int, dict]:
        return register(client, email, password)

    return _register


@pytest.fixture
def auth_header(client):
    _, header = register(client)
    return header


@pytest.fixture
def other_header(client):
    _, header = register(client)
    return header


@pytest.fixture
def conversation_id(client, auth_header):
    resp = client.post("/api/conversations", json={}, headers=auth_header)
    assert resp.status_code == 201
    return resp.json()["id"]
