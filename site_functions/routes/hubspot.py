"""Route for the HubSpot sync function."""

from fastapi import APIRouter, status

from site_functions.schemas.hubspot import HubSpotSyncRequest, HubSpotSyncResponse
from site_functions.services.hubspot_service import HubSpotSyncService

PATH = "/hubspot-sync"

router = APIRouter(tags=["CRM"])


@router.post(
    PATH,
    response_model=HubSpotSyncResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "description": "Contact created, or already present in HubSpot",
            "content": {
                "application/json": {
                    "example": {
                        "status": True,
                        "message": "Synced to HubSpot",
                        "contactId": "12345",
                    }
                }
            },
        },
        400: {"description": "Missing email/firstname or invalid email"},
        500: {"description": "HubSpot sync failed"},
    },
)
async def hubspot_sync(sync_request: HubSpotSyncRequest) -> HubSpotSyncResponse:
    """
    Create a HubSpot contact for a website lead.

    A contact that already exists in HubSpot is not an error.
    """
    service = HubSpotSyncService()
    return await service.sync(sync_request)
