"""Integration tests for POST /calcom-webhook."""

import json
from unittest.mock import AsyncMock, patch

import pytest
from fastapi import status

from site_functions.utils.signature import compute_signature

CREATED = {
    "triggerEvent": "BOOKING_CREATED",
    "createdAt": "2026-10-19T12:00:00Z",
    "payload": {
        "id": 42,
        "title": "Intro call",
        "startTime": "2026-11-02T10:00:00Z",
        "endTime": "2026-11-02T10:30:00Z",
        "attendees": [{"name": "Ada Lovelace", "email": "ada@example.com"}],
    },
}


@pytest.fixture(autouse=True)
def webhook_settings(config):
    with patch("site_functions.services.booking_service.settings", config):
        yield config


@pytest.fixture
def mock_repository():
    with patch("site_functions.services.booking_service.BookingRepository") as mock_repo_class:
        repo = AsyncMock()
        repo.update_by_booking_id = AsyncMock(return_value=1)
        mock_repo_class.return_value = repo
        yield repo


def signed_post(body: bytes, secret: str) -> dict:
    return {
        "content": body,
        "headers": {
            "Content-Type": "application/json",
            "x-cal-signature-256": compute_signature(secret, body),
        },
    }


@pytest.mark.asyncio
async def test_booking_created(api_client, mock_repository, config):
    body = json.dumps(CREATED).encode()

    response = await api_client.post(
        "/calcom-webhook", **signed_post(body, config.calcom_webhook_secret)
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "status": True,
        "message": "Webhook processed",
        "event": "BOOKING_CREATED",
    }
    booking = mock_repository.create.call_args[0][0]
    assert booking.calcom_booking_id == 42
    assert booking.attendee_email == "ada@example.com"
    assert "Access-Control-Allow-Origin" not in response.headers


@pytest.mark.asyncio
async def test_signature_is_checked_against_raw_bytes(api_client, mock_repository, config):
    """Test whitespace the sender signed is not normalised away before verifying."""
    body = json.dumps(CREATED, indent=2).encode()

    response = await api_client.post(
        "/calcom-webhook", **signed_post(body, config.calcom_webhook_secret)
    )

    assert response.status_code == status.HTTP_200_OK


@pytest.mark.asyncio
async def test_altered_body_rejected(api_client, mock_repository, config):
    body = json.dumps(CREATED).encode()
    request = signed_post(body, config.calcom_webhook_secret)
    request["content"] = body.replace(b"ada@example.com", b"eve@example.com")

    response = await api_client.post("/calcom-webhook", **request)

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    data = response.json()
    assert data["status"] is False
    assert data["error"] == "Invalid signature"
    mock_repository.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_missing_signature_rejected(api_client, mock_repository):
    response = await api_client.post("/calcom-webhook", json=CREATED)

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["error"] == "Unauthorized"
    mock_repository.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_unknown_event_acknowledged(api_client, mock_repository, config):
    body = json.dumps({"triggerEvent": "MEETING_ENDED", "payload": {"id": 42}}).encode()

    response = await api_client.post(
        "/calcom-webhook", **signed_post(body, config.calcom_webhook_secret)
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["event"] == "MEETING_ENDED"
    mock_repository.create.assert_not_awaited()
    mock_repository.update_by_booking_id.assert_not_awaited()


@pytest.mark.asyncio
async def test_processing_failure_returns_500(api_client, mock_repository, config):
    mock_repository.create.side_effect = RuntimeError("insert failed")
    body = json.dumps(CREATED).encode()

    response = await api_client.post(
        "/calcom-webhook", **signed_post(body, config.calcom_webhook_secret)
    )

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json()["error"] == "Webhook processing failed"


@pytest.mark.asyncio
async def test_webhook_rejects_options(api_client):
    response = await api_client.options("/calcom-webhook")

    assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED


@pytest.mark.asyncio
async def test_non_ascii_signature_rejected(api_client, mock_repository, config):
    body = json.dumps(CREATED).encode()

    response = await api_client.post(
        "/calcom-webhook",
        content=body,
        headers=[
            (b"content-type", b"application/json"),
            (b"x-cal-signature-256", "é".encode("latin-1")),
        ],
    )

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["error"] == "Invalid signature"
    mock_repository.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_redelivered_booking_created_acknowledged(api_client, mock_repository, config):
    mock_repository.create.return_value = False
    body = json.dumps(CREATED).encode()

    response = await api_client.post(
        "/calcom-webhook", **signed_post(body, config.calcom_webhook_secret)
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["event"] == "BOOKING_CREATED"
