"""Shared pytest fixtures for autofixture-mcp test suite."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from autofixture_mcp import github_client


@pytest.fixture(autouse=True)
def no_network(monkeypatch):
    """Fail any test that reaches the real network through the fetcher.

    Tests that need HTTP install a handler with the ``github_transport``
    fixture instead.
    """

    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("network disabled in tests", request=request)

    _install(monkeypatch, refuse)


@pytest.fixture
def github_transport(monkeypatch) -> Callable[[Callable[[httpx.Request], httpx.Response]], None]:
    """Route github_client requests through an httpx.MockTransport handler."""

    def install(handler: Callable[[httpx.Request], httpx.Response]) -> None:
        _install(monkeypatch, handler)

    return install


def _install(monkeypatch, handler: Callable[[httpx.Request], httpx.Response]) -> None:
    def fake_make_client() -> httpx.AsyncClient:
        return _REAL_MAKE_CLIENT(transport=httpx.MockTransport(handler))

    monkeypatch.setattr(github_client, "_make_client", fake_make_client)


_REAL_MAKE_CLIENT = github_client._make_client
