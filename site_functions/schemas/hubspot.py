"""Pydantic schemas for the HubSpot sync function."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from site_functions.schemas.common import validate_email


class HubSpotSyncRequest(BaseModel):
    """
    Request schema for pushing a website lead into HubSpot.

    Only ``email`` and ``firstname`` are required; every other property
    is sent to HubSpot as an empty string when omitted.
    """

    email: str = Field(..., min_length=1, description="Contact email")
    firstname: str = Field(..., min_length=1, description="First name")
    lastname: Optional[str] = None
    company: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    message: Optional[str] = None

    check_email = field_validator("email")(validate_email)

    def to_properties(self, lead_source: str) -> dict[str, str]:
        """
        Build the HubSpot ``properties`` object for this lead.

        Args:
            lead_source: Value for the hs_lead_source property

        Returns:
            Property name to value mapping
        """
        return {
            "email": self.email,
            "firstname": self.firstname,
            "lastname": self.lastname or "",
            "company": self.company or "",
            "phone": self.phone or "",
            "website": self.website or "",
            "message": self.message or "",
            "hs_lead_source": lead_source,
        }

    class Config:
        """Pydantic configuration."""

        json_schema_extra = {
            "example": {
                "email": "ada@example.com",
                "firstname": "Ada",
                "lastname": "Lovelace",
                "company": "Analytical Engines Ltd",
            }
        }


class HubSpotSyncResponse(BaseModel):
    """Response schema for a sync that reached HubSpot."""

    status: bool = True
    message: str
    contactId: Optional[str] = None
    email: Optional[str] = None
