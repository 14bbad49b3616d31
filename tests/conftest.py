"""Shared test fixtures for the nestor test suite.

The _isolate_nestor_config fixture (autouse) prevents NestorConfig from
reading the user's real ~/.nestor/config.json or NESTOR_ environment
variables during tests.
"""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest

from nestor.client import NestorClient
from nestor.config.schema import NestorConfig
from nestor.models import Robot, TextMessage, User


@pytest.fixture(autouse=True)
def _isolate_nestor_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point NestorConfig's json_file at an empty temp file and clear NESTOR_ env vars."""
    empty_config = tmp_path / "nestor_test_config.json"
    empty_config.write_text("{}", encoding="utf-8")
    monkeypatch.setitem(NestorConfig.model_config, "json_file", empty_config)
    for var in ("NESTOR_AUTH_TOKEN", "NESTOR_API_BASE", "NESTOR_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)


class RecordingHandler:
    """httpx.MockTransport handler that records requests and answers with a fixed status."""

    def __init__(self, status_code: int = 202, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def bodies(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def user() -> User:
    return User("UDEADBEEF1", room="CDEADBEEF1", name="nestorbottester")


@pytest.fixture
def robot() -> Robot:
    return Robot("TDEADBEEF", "UNESTORBOT1", debug_mode=False)


@pytest.fixture
def message(user: User) -> TextMessage:
    return TextMessage(user, "message123")


@pytest.fixture
def config() -> NestorConfig:
    return NestorConfig(auth_token="authToken")


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def http_client(handler: RecordingHandler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture
def nestor_client(config: NestorConfig, http_client: httpx.AsyncClient) -> NestorClient:
    return NestorClient(config, http_client=http_client)
