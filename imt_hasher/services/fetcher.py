"""
fetcher.py — Remote Resource Fetcher
======================================
Downloads the raw bytes of a remote resource over HTTP.
An optional throttle delays handing the body back to the caller;
it never changes the bytes.
"""

import asyncio
import logging
from typing import Optional

import httpx

from imt_hasher.config import settings

logger = logging.getLogger(__name__)


class FetchError(RuntimeError):
    """Raised when a resource could not be downloaded."""


class ResourceFetcher:
    """
    Async HTTP client returning the body of a GET request as bytes.
    """

    def __init__(
        self,
        timeout: float = settings.FETCH_TIMEOUT,
        follow_redirects: bool = settings.FOLLOW_REDIRECTS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the fetcher.

        Args:
            timeout: Request timeout in seconds.
            follow_redirects: Whether to follow 3xx responses.
            transport: Optional httpx transport (used by tests).
        """
        self.timeout = timeout
        self.follow_redirects = follow_redirects
        self._transport = transport

    async def fetch(self, url: str, throttle: Optional[int] = None) -> bytes:
        """
        Download a resource.

        Args:
            url: Location of the resource.
            throttle: Optional delay in milliseconds applied after the
                response arrives.

        Returns:
            The response body as bytes.

        Raises:
            ValueError: If throttle is negative.
            FetchError: On connection errors, timeouts or non-2xx status.
        """
        if throttle is not None and throttle < 0:
            raise ValueError("Throttle must be a non-negative number of milliseconds")

        logger.info("Fetching file from %s", url)
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=self.follow_redirects,
                transport=self._transport,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("Failed to fetch %s: %s", url, e)
            raise FetchError(f"Failed to fetch {url}: {e}") from e

        if throttle:
            logger.debug("Throttling %s for %d ms", url, throttle)
            await asyncio.sleep(throttle / 1000)

        data = response.content
        logger.info("Fetched %d bytes from %s", len(data), url)
        return data
