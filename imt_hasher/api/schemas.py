"""
schemas.py — Pydantic Request/Response Models
=================================================
Data models for the IMT Hasher REST API.
"""

from typing import Optional

from pydantic import BaseModel, Field


class HashRequest(BaseModel):
    """Request to hash a remote resource."""

    url: str
    throttle: Optional[int] = Field(None, ge=0)   # Milliseconds
    destination: Optional[str] = None              # Relative to IMT_OUTPUT_DIR


class HashResponse(BaseModel):
    """Digest of a fetched resource."""

    url: str
    digest: str                    # 16 lowercase hex characters
    byte_count: int                # Size of the fetched body
    destination: Optional[str] = None


class HealthResponse(BaseModel):
    """Service health check response."""

    status: str
    service: str
    digest_length: int
