"""Shared fixtures: a fake Gamma API behind httpx.MockTransport."""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from src.mcp.server import PolymarketMCPServer
from src.polymarket import gamma


class FakeGamma:
    """Routes Gamma paths to canned (status, body) pairs or transport errors; records requests."""

    def __init__(self) -> None:
        self.routes: dict[str, tuple[int, Any]] = {}
        self.failures: dict[str, Exception] = {}
        self.requests: list[httpx.Request] = []

    def add(self, path: str, body: Any, status: int = 200) -> None:
        self.routes[path] = (status, body)

    def fail(self, path: str, exc: Exception) -> None:
        self.failures[path] = exc

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path in self.failures:
            raise self.failures[request.url.path]
        status, body = self.routes.get(request.url.path, (404, "Not Found"))
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def gamma_api(monkeypatch: pytest.MonkeyPatch) -> FakeGamma:
    fake = FakeGamma()
    client = httpx.AsyncClient(
        transport=httpx.MockTransport(fake.handler),
        headers=gamma.HEADERS,
    )
    monkeypatch.setattr(gamma, "_client", client)
    return fake


@pytest.fixture
def server() -> PolymarketMCPServer:
    return PolymarketMCPServer()
