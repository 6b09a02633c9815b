"""
digest_sink.py — Digest Persistence
=====================================
Writes a hex digest to a file on the local filesystem.
"""

import logging
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


class SinkError(RuntimeError):
    """Raised when a digest could not be written."""


class DigestSink:
    """Stores a single digest as plain text at a destination path."""

    def __init__(self, destination: Union[str, Path]):
        self.destination = Path(destination)

    def write(self, digest: str) -> Path:
        """
        Write the digest, replacing any existing file content.

        Args:
            digest: Hex digest to store (written without a trailing newline).

        Returns:
            The destination path.

        Raises:
            SinkError: If the file or its parent directory cannot be written.
        """
        logger.info("File being sent to %s", self.destination)
        try:
            self.destination.parent.mkdir(parents=True, exist_ok=True)
            self.destination.write_text(digest, encoding="utf-8")
        except OSError as e:
            logger.error("Failed to write digest to %s: %s", self.destination, e)
            raise SinkError(f"Failed to write {self.destination}: {e}") from e

        logger.info("Hexadecimal saved in: %s", self.destination)
        return self.destination

    def read(self) -> Optional[str]:
        """Return the stored digest, or None if nothing was written yet."""
        if not self.destination.is_file():
            return None
        return self.destination.read_text(encoding="utf-8")
