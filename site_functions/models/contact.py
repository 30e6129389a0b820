"""Contact submission row model."""

from typing import Optional

from pydantic import BaseModel, Field


class ContactSubmission(BaseModel):
    """
    A message left through the website's contact form.

    Attributes:
        name: Sender's name
        email: Sender's email (unique in the contacts table)
        message: Free-text message
        company: Optional company name
        phone: Optional phone number
        created_at: ISO 8601 timestamp of submission
    """

    name: str = Field(..., description="Sender name")
    email: str = Field(..., description="Sender email")
    message: str = Field(..., description="Message body")
    company: Optional[str] = Field(None, description="Company name")
    phone: Optional[str] = Field(None, description="Phone number")
    created_at: str = Field(..., description="ISO 8601 creation timestamp")
