"""Shared fixtures: a clean environment and a mocked upstream behind the app."""
from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from querybridge.api.deps import build_http_client, get_http_client
from querybridge.config import Settings
from querybridge.main import app

CREDENTIAL_VARS = [
    "GOOGLE_API_KEY",
    "GOOGLE_CSE_ID",
    "CHATGPT_API_KEY",
    "DEEPSEEK_API_KEY",
    "GEMINI_API_KEY",
    "MISTRAL_API_KEY",
]


class FakeUpstream:
    """Records outbound requests and answers them with `responder`."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json={})
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    def reply(self, status_code: int = 200, **kwargs):
        self.responder = lambda request: httpx.Response(status_code, **kwargs)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)
    for var in CREDENTIAL_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def client(upstream):
    async def _mock_client():
        transport = httpx.MockTransport(upstream.handler)
        async with build_http_client(Settings(), transport=transport) as c:
            yield c

    app.dependency_overrides[get_http_client] = _mock_client
    with TestClient(app) as tc:
        yield tc
    app.dependency_overrides.clear()
