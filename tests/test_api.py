from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from apod.client.errors import (
    DecodeError,
    InvalidURLError,
    RateLimitError,
    RequestIOError,
    RequestStatusError,
)
from apod.models.date import TODAY, ExplicitDate
from apod.models.metadata import APODMetadata, RateLimitInfo

_METADATA = APODMetadata(
    title="The Star Streams of NGC 5907",
    explanation="explanation ...",
    copyright="R Jay Gabany",
    url="https://apod.nasa.gov/apod/image/1911/ngc5907_gabany_rcl1024.jpg",
    hd_url="https://apod.nasa.gov/apod/image/1911/ngc5907_gabany_rcl.jpg",
    media_type="image",
)
_RATE_LIMIT = RateLimitInfo(remaining=42, limit=100)


class TestGetApod:
    def test_today_returns_metadata(self, client):
        with patch(
            "apod.api.routes.APODClient.get_picture",
            new_callable=AsyncMock,
            return_value=(_METADATA, _RATE_LIMIT),
        ) as mock_get:
            resp = client.get("/apod")
        assert resp.status_code == 200
        body = resp.json()
        assert body["metadata"]["title"] == "The Star Streams of NGC 5907"
        assert body["rate_limit"] == {"remaining": 42, "limit": 100}
        mock_get.assert_called_once_with(TODAY, False)

    def test_explicit_date_and_hd(self, client):
        with patch(
            "apod.api.routes.APODClient.get_picture",
            new_callable=AsyncMock,
            return_value=(_METADATA, _RATE_LIMIT),
        ) as mock_get:
            resp = client.get("/apod?date=1986-06-09&hd=true")
        assert resp.status_code == 200
        mock_get.assert_called_once_with(ExplicitDate(day=9, month=6, year=1986), True)

    def test_invalid_date_returns_422(self, client):
        resp = client.get("/apod?date=not-a-date")
        assert resp.status_code == 422

    @pytest.mark.parametrize(
        ("error", "status_code"),
        [
            (RateLimitError(), 429),
            (RequestStatusError(403), 502),
            (DecodeError(), 502),
            (RequestIOError(), 503),
            (InvalidURLError("not a url"), 500),
        ],
    )
    def test_client_errors_are_mapped(self, client, error, status_code):
        with patch(
            "apod.api.routes.APODClient.get_picture",
            new_callable=AsyncMock,
            side_effect=error,
        ):
            resp = client.get("/apod")
        assert resp.status_code == status_code
        assert resp.json()["detail"] == str(error)

    def test_status_error_detail_names_upstream_status(self, client):
        with patch(
            "apod.api.routes.APODClient.get_picture",
            new_callable=AsyncMock,
            side_effect=RequestStatusError(403),
        ):
            resp = client.get("/apod")
        assert "403" in resp.json()["detail"]


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_lifespan_owns_the_http_transport():
    from fastapi.testclient import TestClient

    from apod.main import app

    with TestClient(app):
        http = app.state.http_client
        assert not http.is_closed
    assert http.is_closed


def test_route_client_uses_app_transport(client):
    from apod.api.routes import _get_client

    request = MagicMock()
    request.app.state.http_client = client.app.state.http_client
    apod_client = _get_client(request)
    assert apod_client._http_client is client.app.state.http_client
