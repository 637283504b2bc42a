"""httpx wrapper.

- Standardizes base URL, timeouts and headers for every upstream call.
- Makes testing easy: pass `transport=httpx.MockTransport(...)` to replace the
  network.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` bound to the upstream catalog.

    The client-wide timeout is the only timeout page 1 and lookups get; the
    aggregator adds its own per-page timeout on top for later pages.
    """

    settings = settings or AppSettings()
    return httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers={"User-Agent": settings.user_agent, "Accept": "application/json"},
        transport=transport,
    )
