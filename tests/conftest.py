"""Shared pytest fixtures.

``fake_backend`` points the settings at a fake Legal Assistant RAG API and
routes every HTTP call made through ``backend.create_client`` into an
``httpx.MockTransport``.
"""

from __future__ import annotations

import json
from collections.abc import AsyncIterator, Callable, Iterable
from typing import Any, Optional

import httpx
import pytest

from lar_mcp.config.settings import settings
from lar_mcp.core import backend

API_URL = "http://lar.test"
TOKEN = "jwt-test-token"
USER_ID = "user-42"


class ChunkedStream(httpx.AsyncByteStream):
    """Response body delivered as separate chunks, like a live SSE stream."""

    def __init__(self, chunks: Iterable[bytes]):
        self.chunks = list(chunks)

    async def __aiter__(self) -> AsyncIterator[bytes]:
        for chunk in self.chunks:
            yield chunk


Handler = Callable[[httpx.Request], httpx.Response]


class FakeBackend:
    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Handler] = {}
        self.requests: list[httpx.Request] = []
        self.add("POST", "/api/auth/login", json={"token": TOKEN, "expiration": "2030-01-01T00:00:00Z"})
        self.add("GET", "/api/auth/user-id", json={"userId": USER_ID})

    def add(
        self,
        method: str,
        path: str,
        status: int = 200,
        *,
        json: Any = None,
        text: Optional[str] = None,
        content: Optional[bytes] = None,
        headers: Optional[dict[str, str]] = None,
        chunks: Optional[list[bytes]] = None,
        exc: Optional[Exception] = None,
    ) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if exc is not None:
                raise exc
            if chunks is not None:
                return httpx.Response(status, headers=headers, stream=ChunkedStream(chunks))
            if json is not None:
                return httpx.Response(status, headers=headers, json=json)
            if content is not None:
                return httpx.Response(status, headers=headers, content=content)
            return httpx.Response(status, headers=headers, text=text or "")

        self.routes[(method, path)] = handler

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(599, text=f"no route for {request.method} {request.url.path}")
        return handler(request)

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    def last_json(self, method: str, path: str) -> Any:
        return json.loads(self.calls(method, path)[-1].content)


@pytest.fixture
def fake_backend(monkeypatch: pytest.MonkeyPatch) -> FakeBackend:
    fake = FakeBackend()
    transport = httpx.MockTransport(fake.handle)

    monkeypatch.setattr(settings, "api_url", API_URL)
    monkeypatch.setattr(settings, "api_email", "abogado@example.com")
    monkeypatch.setattr(settings, "api_password", "secret")
    monkeypatch.setattr(settings, "ask_timeout", None)
    monkeypatch.setattr(
        backend,
        "create_client",
        lambda: httpx.AsyncClient(transport=transport, follow_redirects=True),
    )
    return fake


@pytest.fixture
def unconfigured_backend(fake_backend: FakeBackend, monkeypatch: pytest.MonkeyPatch) -> FakeBackend:
    """Fake backend reachable, but API_EMAIL / API_PASSWORD missing."""
    monkeypatch.setattr(settings, "api_email", "")
    monkeypatch.setattr(settings, "api_password", "")
    return fake_backend
