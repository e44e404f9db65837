from __future__ import annotations

import datetime
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from apod.client.client import APODClient
from apod.client.errors import (
    DecodeError,
    InvalidURLError,
    RateLimitError,
    RequestIOError,
    RequestStatusError,
)
from apod.core.config import settings
from apod.models.date import TODAY, Date, ExplicitDate
from apod.models.schemas import ErrorResponse, PictureResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/apod", tags=["apod"])


# ---------------------------------------------------------------------------
# Dependency
# ---------------------------------------------------------------------------


def _get_client(request: Request) -> APODClient:
    """FastAPI dependency that builds an ``APODClient`` on the app's transport."""
    return APODClient.from_settings(settings, http_client=request.app.state.http_client)


# ---------------------------------------------------------------------------
# GET /apod
# ---------------------------------------------------------------------------


@router.get(
    "",
    response_model=PictureResponse,
    responses={
        429: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
    summary="Retrieve the Astronomy Picture of the Day metadata",
)
async def get_apod(
    date: Optional[datetime.date] = None,
    hd: bool = False,
    client: APODClient = Depends(_get_client),
) -> PictureResponse:
    """Fetch picture metadata for *date* (today when omitted).

    - **200** — metadata and rate-limit counters
    - **422** — ``date`` is not a valid ``YYYY-MM-DD`` date
    - **429** — the API key has no remaining requests
    - **502** — upstream returned an error status or an undecodable body
    - **503** — upstream could not be reached
    - **500** — the configured base URL is invalid
    """
    target: Date = TODAY if date is None else ExplicitDate.from_date(date)
    try:
        metadata, rate_limit = await client.get_picture(target, hd)
    except RateLimitError as exc:
        logger.warning("GET /apod rate limited: %s", exc)
        raise HTTPException(status_code=429, detail=str(exc))
    except RequestStatusError as exc:
        logger.warning("GET /apod upstream status %d", exc.status)
        raise HTTPException(status_code=502, detail=str(exc))
    except DecodeError as exc:
        logger.warning("GET /apod decode error: %s", exc.__cause__)
        raise HTTPException(status_code=502, detail=str(exc))
    except RequestIOError as exc:
        logger.warning("GET /apod transport error: %s", exc.__cause__)
        raise HTTPException(status_code=503, detail=str(exc))
    except InvalidURLError as exc:
        logger.error("GET /apod misconfigured base URL: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc))
    return PictureResponse(metadata=metadata, rate_limit=rate_limit)
