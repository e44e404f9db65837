from __future__ import annotations

from pydantic import BaseModel

from apod.models.metadata import APODMetadata, RateLimitInfo


class PictureResponse(BaseModel):
    """Response body for GET /apod."""

    metadata: APODMetadata
    rate_limit: RateLimitInfo


class ErrorResponse(BaseModel):
    detail: str
