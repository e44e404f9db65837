"""Asynchronous client for NASA's "Astronomy Picture of the Day" API.

Example::

    client = APODClient("DEMO_KEY")
    metadata, rate_limit = await client.get_picture(TODAY, hd=True)

Each ``get_picture`` call performs exactly one GET request.  Nothing is
retried or cached, and the client keeps no state between calls, so one
instance can be shared by any number of concurrent tasks.  Without an
injected ``http_client`` every call opens and closes its own transport,
which also makes calls from separate event loops (``asyncio.run``) safe.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from apod.client.errors import (
    DecodeError,
    InvalidURLError,
    RateLimitError,
    RequestIOError,
    RequestStatusError,
)
from apod.client.headers import get_rate_limit_info
from apod.client.http import new_http_client
from apod.core.config import DEFAULT_BASE_URL, Settings
from apod.models.date import TODAY, Date
from apod.models.metadata import APODMetadata, RateLimitInfo

logger = logging.getLogger(__name__)


class APODClient:
    """Client bound to one base URL and API key."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._http_client = http_client
        self._transport_settings: Optional[Settings] = None

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def config(
        cls,
        base_url: str,
        api_key: str,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> APODClient:
        """Build a client that talks to *base_url* instead of the NASA server."""
        return cls(api_key, base_url=base_url, http_client=http_client)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> APODClient:
        client = cls(settings.api_key, base_url=settings.base_url, http_client=http_client)
        client._transport_settings = settings
        return client

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    def build_url(self, date: Date = TODAY, hd: bool = False) -> httpx.URL:
        """Return the request URL for *date* and *hd*.

        Query parameters are always ``api_key``, ``hd`` and, for an explicit
        date only, ``date``, in that order.

        Raises:
            InvalidURLError: the base URL is not an absolute URL.
        """
        try:
            base = httpx.URL(self._base_url)
        except httpx.InvalidURL as exc:
            raise InvalidURLError(self._base_url) from exc
        if not base.scheme or not base.host:
            raise InvalidURLError(self._base_url)

        params = [("api_key", self._api_key), ("hd", "true" if hd else "false")]
        date_param = date.as_param()
        if date_param is not None:
            params.append(("date", date_param))
        # QueryParams groups repeated keys, so an existing query is kept as raw
        # text in front of the client's own parameters.
        query = str(httpx.QueryParams(params))
        if base.query:
            query = f"{base.query.decode('ascii')}&{query}"
        return base.copy_with(query=query.encode("ascii"))

    async def get_picture(
        self, date: Date = TODAY, hd: bool = False
    ) -> tuple[APODMetadata, RateLimitInfo]:
        """Fetch the picture metadata for *date*.

        Returns the metadata together with the rate-limit counters reported
        by the server.

        Raises:
            InvalidURLError: the base URL cannot be parsed.
            RequestIOError: the server could not be reached.
            RateLimitError: the server reports zero remaining requests.  This
                is checked before the status code.
            RequestStatusError: the server answered with a non-success status.
            DecodeError: the body does not match ``APODMetadata``.
        """
        url = self.build_url(date, hd)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("GET %s", url.copy_set_param("api_key", "***"))

        if self._http_client is not None:
            response = await self._send(self._http_client, url)
        else:
            async with new_http_client(self._transport_settings) as client:
                response = await self._send(client, url)

        rate_limit = get_rate_limit_info(response.headers)
        if rate_limit.remaining == 0:
            logger.warning("APOD rate limit exhausted (limit=%d).", rate_limit.limit)
            raise RateLimitError()

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning("APOD request returned status %d.", response.status_code)
            raise RequestStatusError(response.status_code) from exc

        try:
            metadata = APODMetadata.model_validate_json(response.content)
        except ValidationError as exc:
            logger.warning("APOD response could not be decoded: %s", exc)
            raise DecodeError() from exc

        return metadata, rate_limit

    @staticmethod
    async def _send(client: httpx.AsyncClient, url: httpx.URL) -> httpx.Response:
        try:
            return await client.get(url)
        except httpx.RequestError as exc:
            logger.warning("APOD request failed: %s", exc)
            raise RequestIOError() from exc
