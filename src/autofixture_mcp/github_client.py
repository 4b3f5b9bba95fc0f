"""Async fetcher for raw AutoFixture documents hosted on GitHub.

Features:
- One GET per call, no retries
- Configurable base URL and timeout via environment variables
- Fixed User-Agent header
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

import httpx

_DEFAULT_BASE_URL = "https://raw.githubusercontent.com/AutoFixture/AutoFixture/master/"
_DEFAULT_TIMEOUT = 10.0  # seconds
USER_AGENT = "AutoFixture-MCP-Server/1.0"

README = "README.md"
CHEATSHEET = "CHEATSHEET.md"
FAQ = "FAQ.md"

log = logging.getLogger("autofixture-mcp")


@dataclass(frozen=True, slots=True)
class FetchResult:
    """Outcome of a remote fetch: either ``text`` or ``error`` is set."""

    document: str
    text: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _base_url() -> str:
    url = os.environ.get("AUTOFIXTURE_DOCS_BASE_URL", _DEFAULT_BASE_URL)
    return url if url.endswith("/") else url + "/"


def _timeout() -> float:
    return float(os.environ.get("AUTOFIXTURE_DOCS_TIMEOUT", str(_DEFAULT_TIMEOUT)))


def _make_client(transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    """Create a short-lived AsyncClient (caller manages lifecycle).

    Redirects from the raw host are followed.
    """
    return httpx.AsyncClient(
        base_url=_base_url(),
        headers={"User-Agent": USER_AGENT},
        timeout=_timeout(),
        follow_redirects=True,
        transport=transport,
    )


def resolve_document(topic: str | None) -> str:
    """Map a free-text topic to a document name.

    Checks run in order: "readme", "cheat", "faq". Anything else,
    including an empty topic, falls back to the README.
    """
    lowered = (topic or "readme").lower()
    if "readme" in lowered:
        return README
    if "cheat" in lowered:
        return CHEATSHEET
    if "faq" in lowered:
        return FAQ
    return README


async def fetch_document(topic: str | None = None) -> FetchResult:
    """Fetch the raw document for *topic*.

    Transport errors, timeouts and non-2xx statuses are reported through
    ``FetchResult.error`` instead of being raised.
    """
    document = resolve_document(topic)
    try:
        async with _make_client() as client:
            resp = await client.get(document)
            resp.raise_for_status()
            return FetchResult(document=document, text=resp.text)
    except (httpx.HTTPError, OSError) as exc:
        log.warning("Failed to fetch %s: %s", document, exc)
        return FetchResult(document=document, error=str(exc) or type(exc).__name__)
