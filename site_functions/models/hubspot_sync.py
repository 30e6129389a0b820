"""HubSpot sync audit log row model."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class SyncStatus(str, Enum):
    """Outcome of a single HubSpot contact sync."""

    SUCCESS = "success"
    DUPLICATE = "duplicate"
    FAILED = "failed"


class HubSpotSyncLog(BaseModel):
    """
    Append-only audit row recording one attempt to push a contact to HubSpot.

    Attributes:
        email: Contact email (None when the failure happened before it was known)
        hubspot_contact_id: ID returned by HubSpot on success
        sync_status: success, duplicate or failed
        error_message: HubSpot or transport error message
        synced_at: ISO 8601 timestamp of the attempt
    """

    email: Optional[str] = Field(None, description="Contact email")
    hubspot_contact_id: Optional[str] = Field(None, description="HubSpot contact ID")
    sync_status: SyncStatus = Field(..., description="Sync outcome")
    error_message: Optional[str] = Field(None, description="Error message")
    synced_at: str = Field(..., description="ISO 8601 sync timestamp")
