from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest

from discogs_client.auth.header import build_auth_header
from discogs_client.transport.http import HTTPClient


@dataclass
class RecordedCall:
    url: str
    params: dict[str, str]
    headers: dict[str, str]


@dataclass
class FakeDiscogs:
    """Answers every request with the queued payload and records what was asked."""

    payload: Any = None
    status: int = 200
    calls: list[RecordedCall] = field(default_factory=list)

    def __call__(self, method: str, url: str, headers: dict[str, str], params: dict[str, str]) -> httpx.Response:
        assert method == "GET"
        self.calls.append(RecordedCall(url, params, headers))
        return httpx.Response(self.status, json=self.payload)

    @property
    def last(self) -> RecordedCall:
        return self.calls[-1]


@pytest.fixture
def fake_discogs() -> FakeDiscogs:
    return FakeDiscogs()


@pytest.fixture
def http_client(monkeypatch: pytest.MonkeyPatch, fake_discogs: FakeDiscogs) -> HTTPClient:
    client = HTTPClient(build_auth_header("TestAgent/1.0", token="abc123"))
    monkeypatch.setattr(client, "_make_http_request", fake_discogs)
    return client
