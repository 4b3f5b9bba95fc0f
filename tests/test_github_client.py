"""Unit tests for the GitHub document fetcher (mocked via httpx.MockTransport)."""

from __future__ import annotations

import httpx
import pytest

from autofixture_mcp import github_client

# ── resolve_document ───────────────────────────────────────────


class TestResolveDocument:
    @pytest.mark.parametrize(
        ("topic", "expected"),
        [
            (None, "README.md"),
            ("", "README.md"),
            ("README", "README.md"),
            ("cheatsheet", "CHEATSHEET.md"),
            ("Cheat Sheet", "CHEATSHEET.md"),
            ("FAQ", "FAQ.md"),
            ("something else", "README.md"),
        ],
    )
    def test_topic_mapping(self, topic, expected) -> None:
        assert github_client.resolve_document(topic) == expected

    def test_readme_wins_over_other_keywords(self) -> None:
        assert github_client.resolve_document("faq cheat readme") == "README.md"

    def test_cheat_wins_over_faq(self) -> None:
        assert github_client.resolve_document("faq-cheatsheet") == "CHEATSHEET.md"


# ── fetch_document ─────────────────────────────────────────────


class TestFetchDocument:
    @pytest.mark.asyncio
    async def test_returns_body_verbatim(self, github_transport) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="# AutoFixture\n\nraw *markdown*")

        github_transport(handler)

        result = await github_client.fetch_document("faq")
        assert result.ok
        assert result.document == "FAQ.md"
        assert result.text == "# AutoFixture\n\nraw *markdown*"
        assert len(seen) == 1
        assert str(seen[0].url) == (
            "https://raw.githubusercontent.com/AutoFixture/AutoFixture/master/FAQ.md"
        )
        assert seen[0].headers["User-Agent"] == "AutoFixture-MCP-Server/1.0"

    @pytest.mark.asyncio
    async def test_follows_redirects(self, github_transport) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path.endswith("/master/README.md"):
                return httpx.Response(
                    301,
                    headers={"Location": "https://raw.githubusercontent.com/moved/README.md"},
                )
            return httpx.Response(200, text="moved readme")

        github_transport(handler)

        result = await github_client.fetch_document("readme")
        assert result.ok
        assert result.text == "moved readme"

    @pytest.mark.asyncio
    async def test_http_error_status(self, github_transport) -> None:
        github_transport(lambda request: httpx.Response(404, text="404: Not Found"))

        result = await github_client.fetch_document("cheatsheet")
        assert not result.ok
        assert result.text is None
        assert "404" in (result.error or "")

    @pytest.mark.asyncio
    async def test_transport_error_is_not_retried(self, github_transport) -> None:
        calls = {"n": 0}

        def handler(request: httpx.Request) -> httpx.Response:
            calls["n"] += 1
            raise httpx.ReadTimeout("timed out", request=request)

        github_transport(handler)

        result = await github_client.fetch_document()
        assert not result.ok
        assert result.error == "timed out"
        assert calls["n"] == 1

    @pytest.mark.asyncio
    async def test_empty_error_message_uses_exception_name(self, github_transport) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("", request=request)

        github_transport(handler)

        result = await github_client.fetch_document("readme")
        assert result.error == "ConnectError"


# ── configuration ──────────────────────────────────────────────


class TestConfig:
    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("AUTOFIXTURE_DOCS_BASE_URL", raising=False)
        monkeypatch.delenv("AUTOFIXTURE_DOCS_TIMEOUT", raising=False)
        assert github_client._base_url().endswith("/AutoFixture/AutoFixture/master/")
        assert github_client._timeout() == 10.0

    def test_env_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("AUTOFIXTURE_DOCS_BASE_URL", "http://mirror.local/docs")
        monkeypatch.setenv("AUTOFIXTURE_DOCS_TIMEOUT", "2.5")
        assert github_client._base_url() == "http://mirror.local/docs/"
        assert github_client._timeout() == 2.5

    @pytest.mark.asyncio
    async def test_base_url_override_is_used(self, monkeypatch, github_transport) -> None:
        monkeypatch.setenv("AUTOFIXTURE_DOCS_BASE_URL", "http://mirror.local/docs")
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, text="ok")

        github_transport(handler)

        await github_client.fetch_document("readme")
        assert seen == ["http://mirror.local/docs/README.md"]
