"""httpx transport construction.

Connections in an ``httpx.AsyncClient`` pool are bound to the event loop
that opened them, so a pool must not outlive its owner.  ``APODClient``
opens a throwaway transport per call unless it is handed one; long-running
owners (the FastAPI app) build a transport with ``new_http_client`` and
close it themselves.
"""

from __future__ import annotations

from typing import Optional

import httpx

from apod.core.config import Settings, settings as default_settings

USER_AGENT = "apod-async-client/1.0"


def new_http_client(settings: Optional[Settings] = None) -> httpx.AsyncClient:
    """Build an AsyncClient configured from *settings*.

    The caller owns the result and must ``aclose()`` it (or use it as an
    async context manager).
    """
    settings = settings or default_settings
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout),
        follow_redirects=True,
        verify=settings.http_verify_ssl,
        headers={"User-Agent": USER_AGENT},
    )
