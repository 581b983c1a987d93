"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts and headers for every outbound HTTP request.
- Eases testing: a `transport` can be injected (e.g. `httpx.MockTransport`).
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings
from core.errors import EndpointUnreachableError, describe_exception

logger = logging.getLogger(__name__)

# MCP endpoints commonly answer a bare GET with 400 (missing session/accept headers).
_PRESENT_STATUS_CODES = frozenset({400})


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with safe defaults.

    Why a builder:
    - Centralizes timeouts/headers so every request behaves the same.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json, text/event-stream",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def endpoint_is_present(status_code: int) -> bool:
    """2xx, or exactly 400, means something is listening at the endpoint."""

    return 200 <= status_code < 300 or status_code in _PRESENT_STATUS_CODES


async def probe_endpoint(
    url: str,
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> None:
    """Issue one lightweight GET against `url`.

    Raises `EndpointUnreachableError` on transport errors and on any status
    other than 2xx/400.
    """

    try:
        async with build_async_client(settings, transport=transport) as client:
            response = await client.get(url)
    except httpx.HTTPError as exc:
        raise EndpointUnreachableError(url, describe_exception(exc)) from exc

    logger.debug("Probe %s -> HTTP %s", url, response.status_code)
    if not endpoint_is_present(response.status_code):
        raise EndpointUnreachableError(url, f"HTTP {response.status_code}")
