"""
converter.py — Fetch / Hash / Save Pipeline
=============================================
  url → fetch bytes → IMT digest → write hex to destination
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from imt_hasher.core.imt_hash import imt_hash
from imt_hasher.services.digest_sink import DigestSink
from imt_hasher.services.fetcher import ResourceFetcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HashResult:
    """Outcome of hashing one remote resource."""

    url: str
    digest: str
    byte_count: int
    destination: Optional[Path] = None


class HashConverter:
    """Ties a fetcher to the digest engine and an optional sink."""

    def __init__(self, fetcher: Optional[ResourceFetcher] = None):
        self.fetcher = fetcher or ResourceFetcher()

    async def digest_url(self, url: str, throttle: Optional[int] = None) -> HashResult:
        """Fetch a resource and return its digest without persisting it."""
        data = await self.fetcher.fetch(url, throttle=throttle)
        digest = imt_hash(data)
        logger.info("Hexadecimal value: %s", digest)
        return HashResult(url=url, digest=digest, byte_count=len(data))

    async def convert(
        self,
        url: str,
        destination: Union[str, Path],
        throttle: Optional[int] = None,
    ) -> HashResult:
        """
        Fetch a resource, hash it and save the hex digest.

        Args:
            url: Location of the resource.
            destination: File path the digest is written to.
            throttle: Optional fetch delay in milliseconds.

        Returns:
            HashResult with the destination path set.

        Raises:
            FetchError: If the download fails.
            SinkError: If the digest cannot be written.
        """
        result = await self.digest_url(url, throttle=throttle)
        path = DigestSink(destination).write(result.digest)
        logger.info("Conversion finished")
        return HashResult(
            url=result.url,
            digest=result.digest,
            byte_count=result.byte_count,
            destination=path,
        )
