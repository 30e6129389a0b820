"""Pydantic schemas for the contact intake function."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from site_functions.schemas.common import validate_email


class ContactRequest(BaseModel):
    """
    Request schema for a contact form submission.

    Attributes:
        name: Sender's name (required)
        email: Sender's email (required, must look like local@domain.tld)
        message: Message body (required)
        company: Optional company name
        phone: Optional phone number
    """

    name: str = Field(..., min_length=1, description="Sender name")
    email: str = Field(..., min_length=1, description="Sender email")
    message: str = Field(..., min_length=1, description="Message body")
    company: Optional[str] = Field(None, description="Company name")
    phone: Optional[str] = Field(None, description="Phone number")

    check_email = field_validator("email")(validate_email)

    class Config:
        """Pydantic configuration."""

        json_schema_extra = {
            "example": {
                "name": "Ada Lovelace",
                "email": "ada@example.com",
                "message": "We'd like a quote for interpreting services.",
                "company": "Analytical Engines Ltd",
                "phone": "+44 20 7946 0000",
            }
        }


class SubmittedContact(BaseModel):
    """Echo of the stored submission returned to the browser."""

    name: str
    email: str
    submittedAt: str


class ContactResponse(BaseModel):
    """Response schema for a stored contact submission."""

    status: bool = True
    message: str
    data: SubmittedContact
