from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class APODMetadata(BaseModel):
    """Metadata for a NASA "Astronomy Picture Of the Day".

    Mirrors the JSON body returned by the APOD endpoint.  Unknown keys are
    dropped; ``hdurl`` is exposed as ``hd_url``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    title: str
    explanation: str
    copyright: Optional[str] = None
    url: str
    hd_url: Optional[str] = Field(default=None, alias="hdurl")
    media_type: str


class RateLimitInfo(BaseModel):
    """Rate-limit counters for the API key and IP address pair.

    ``-1`` means the server did not report the value.
    """

    model_config = ConfigDict(frozen=True)

    remaining: int = -1
    limit: int = -1
