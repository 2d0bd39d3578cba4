"""
Gamma API client for Polymarket market lookup.

Endpoints used (all public, no auth):
  GET /markets                   -- list markets (closed, limit, offset)
  GET /markets/{id}              -- single market by ID or slug
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

GAMMA_BASE = "https://gamma-api.polymarket.com"
TIMEOUT = 30.0

HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class GammaAPIError(Exception):
    """Non-2xx response from the Gamma API."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Polymarket API error: {status_code} - {body}")


_client: httpx.AsyncClient | None = None

async def _get_client() -> httpx.AsyncClient:
    """Get or create shared HTTP client."""
    global _client
    if _client is None:
        _client = httpx.AsyncClient(timeout=TIMEOUT, headers=HEADERS)
    return _client


async def close_client() -> None:
    """Close the shared HTTP client, if one was created."""
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


async def _get(path: str, params: dict[str, Any] | None = None) -> Any:
    """Issue a GET to the Gamma API and return parsed JSON."""
    client = await _get_client()
    url = f"{GAMMA_BASE}{path}"
    query = [
        (key, _query_value(value))
        for key, value in (params or {}).items()
        if value is not None
    ]
    logger.debug("GET %s params=%s", url, query)
    resp = await client.get(url, params=query or None)
    if not resp.is_success:
        logger.error("Gamma API error %s for %s", resp.status_code, url)
        raise GammaAPIError(resp.status_code, resp.text)
    return resp.json()


# ── Markets ──────────────────────────────────────────────────────────

async def get_market(market_id: str) -> Any:
    """Fetch a single market by ID or slug."""
    return await _get(f"/markets/{market_id}")


async def list_markets(
    *,
    closed: bool | None = None,
    limit: int | None = None,
    offset: int | None = None,
) -> Any:
    """List markets. Filters left as ``None`` are not sent."""
    return await _get("/markets", params={
        "closed": closed,
        "limit": limit,
        "offset": offset,
    })
