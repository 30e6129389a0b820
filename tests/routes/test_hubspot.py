"""Integration tests for POST /hubspot-sync."""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi import status

from site_functions.clients.hubspot import HubSpotConflictError, HubSpotError
from site_functions.models.hubspot_sync import SyncStatus

VALID_LEAD = {"email": "ada@example.com", "firstname": "Ada", "lastname": "Lovelace"}


@pytest.fixture
def mock_client():
    with patch("site_functions.services.hubspot_service.HubSpotClient") as mock_client_class:
        client = AsyncMock()
        client.create_contact = AsyncMock(return_value={"id": "901"})
        mock_client_class.return_value = client
        yield client


@pytest.fixture
def mock_audit():
    with patch(
        "site_functions.services.hubspot_service.HubSpotSyncRepository"
    ) as mock_repo_class:
        repo = AsyncMock()
        mock_repo_class.return_value = repo
        yield repo


@pytest.mark.asyncio
async def test_hubspot_sync_success(api_client, mock_client, mock_audit):
    response = await api_client.post("/hubspot-sync", json=VALID_LEAD)

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "status": True,
        "message": "Synced to HubSpot",
        "contactId": "901",
    }
    assert mock_audit.record.call_args[0][0].sync_status is SyncStatus.SUCCESS


@pytest.mark.asyncio
async def test_hubspot_sync_duplicate_returns_200(api_client, mock_client, mock_audit):
    """Test a HubSpot 409 yields 200 with status true and a duplicate audit entry."""
    mock_client.create_contact.side_effect = HubSpotConflictError("Contact already exists", 409)

    response = await api_client.post("/hubspot-sync", json=VALID_LEAD)

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["status"] is True
    assert data["message"] == "Contact already exists in HubSpot"
    assert data["email"] == "ada@example.com"
    assert mock_audit.record.call_args[0][0].sync_status is SyncStatus.DUPLICATE


@pytest.mark.asyncio
async def test_hubspot_sync_failure_returns_500(api_client, mock_client, mock_audit):
    mock_client.create_contact.side_effect = HubSpotError("Internal error", 500)

    response = await api_client.post("/hubspot-sync", json=VALID_LEAD)

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    data = response.json()
    assert data["status"] is False
    assert data["error"] == "HubSpot sync failed"
    assert mock_audit.record.call_args[0][0].sync_status is SyncStatus.FAILED


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {"email": "ada@example.com"},
        {"firstname": "Ada"},
        {"email": "not-an-email", "firstname": "Ada"},
    ],
)
async def test_hubspot_sync_invalid_input(api_client, mock_client, mock_audit, body):
    response = await api_client.post("/hubspot-sync", json=body)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    mock_client.create_contact.assert_not_awaited()
    mock_audit.record.assert_not_awaited()


@pytest.mark.asyncio
async def test_hubspot_sync_preflight(api_client):
    response = await api_client.options("/hubspot-sync")

    assert response.status_code == status.HTTP_200_OK
    assert response.headers["Access-Control-Allow-Origin"] == "*"
