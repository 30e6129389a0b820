"""Integration tests for POST /track-visitor."""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi import status

MOBILE_CHROME = (
    "Mozilla/5.0 (Linux; Android 14; Pixel 8) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Mobile Safari/537.36"
)


@pytest.fixture
def mock_repository():
    with patch("site_functions.services.analytics_service.AnalyticsRepository") as mock_repo_class:
        repo = AsyncMock()
        mock_repo_class.return_value = repo
        yield repo


@pytest.mark.asyncio
async def test_track_mobile_chrome_pageview(api_client, mock_repository):
    response = await api_client.post(
        "/track-visitor",
        json={"page": "/pricing"},
        headers={"User-Agent": MOBILE_CHROME},
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": True, "tracked": True}
    event = mock_repository.create.call_args[0][0]
    assert event.device_type == "mobile"
    assert event.browser == "Chrome"
    assert event.page_path == "/pricing"
    assert event.country == "unknown"


@pytest.mark.asyncio
async def test_track_reads_netlify_geo(api_client, mock_repository):
    response = await api_client.post(
        "/track-visitor",
        json={"page": "/", "event": "signup_click"},
        headers={"x-nf-geo": '{"country": {"code": "PL"}}'},
    )

    assert response.status_code == status.HTTP_200_OK
    event = mock_repository.create.call_args[0][0]
    assert event.country == "PL"
    assert event.event_type == "signup_click"


@pytest.mark.asyncio
async def test_track_missing_page(api_client, mock_repository):
    response = await api_client.post("/track-visitor", json={"referrer": "https://x.test"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["status"] is False
    mock_repository.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_store_failure_still_returns_200(api_client, mock_repository):
    mock_repository.create.side_effect = RuntimeError("supabase unreachable")

    response = await api_client.post("/track-visitor", json={"page": "/"})

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "status": True,
        "tracked": False,
        "message": "analytics unavailable",
    }
    assert response.headers["Access-Control-Allow-Origin"] == "*"
