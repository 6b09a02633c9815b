"""
routes.py — IMT Hasher REST API Endpoints
===========================================
Endpoints:
    POST /hash    — Fetch a URL, return (and optionally save) its digest
                    (saved files live under IMT_OUTPUT_DIR)
    GET  /health  — Service health check
"""

import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, HTTPException

from imt_hasher.api.schemas import HashRequest, HashResponse, HealthResponse
from imt_hasher.config import settings
from imt_hasher.core.imt_hash import DIGEST_LENGTH
from imt_hasher.services.converter import HashConverter
from imt_hasher.services.digest_sink import SinkError
from imt_hasher.services.fetcher import FetchError

logger = logging.getLogger(__name__)

router = APIRouter()

_converter: Optional[HashConverter] = None


def get_converter() -> HashConverter:
    """Get or create the converter singleton."""
    global _converter
    if _converter is None:
        _converter = HashConverter()
    return _converter


def set_converter(converter: Optional[HashConverter]) -> None:
    """Replace the converter singleton (None resets it)."""
    global _converter
    _converter = converter


def resolve_destination(name: str) -> Path:
    """
    Map a client-supplied destination name into the output directory.

    Args:
        name: Relative file name, e.g. ``"reports/doc.txt"``.

    Returns:
        Absolute path inside ``settings.OUTPUT_DIR``.

    Raises:
        HTTPException: 400 if the name is absolute or escapes the directory.
    """
    if Path(name).is_absolute():
        raise HTTPException(
            status_code=400, detail="Destination must be a relative path"
        )

    base = Path(settings.OUTPUT_DIR).resolve()
    resolved = (base / name).resolve()
    try:
        resolved.relative_to(base)
    except ValueError:
        raise HTTPException(
            status_code=400, detail="Destination escapes the output directory"
        )
    if resolved == base:
        raise HTTPException(status_code=400, detail="Destination must name a file")
    return resolved


@router.post("/hash", response_model=HashResponse)
async def hash_resource(request: HashRequest):
    """Fetch the resource at ``request.url`` and return its IMT digest."""
    converter = get_converter()
    throttle = request.throttle
    if throttle is None:
        throttle = settings.DEFAULT_THROTTLE_MS

    destination = None
    if request.destination:
        destination = resolve_destination(request.destination)

    try:
        if destination is not None:
            result = await converter.convert(
                request.url, destination, throttle=throttle
            )
        else:
            result = await converter.digest_url(request.url, throttle=throttle)
    except FetchError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except SinkError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except ValueError as e:
        # Only reachable through a misconfigured IMT_DEFAULT_THROTTLE_MS.
        logger.error("Invalid hash configuration: %s", e)
        raise HTTPException(status_code=500, detail=f"Invalid configuration: {e}")

    return HashResponse(
        url=result.url,
        digest=result.digest,
        byte_count=result.byte_count,
        destination=str(result.destination) if result.destination else None,
    )


@router.get("/health", response_model=HealthResponse)
async def health():
    """Service health check."""
    return HealthResponse(
        status="ok",
        service="imt-hasher",
        digest_length=DIGEST_LENGTH,
    )
