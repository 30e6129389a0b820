"""Pydantic schemas for the analytics intake function."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TrackVisitorRequest(BaseModel):
    """
    Request schema for a page view or custom analytics event.

    Field names follow the front end's camelCase tracker payload.
    """

    model_config = ConfigDict(populate_by_name=True)

    page: str = Field(..., min_length=1, description="Page path")
    referrer: Optional[str] = None
    user_agent: Optional[str] = Field(None, alias="userAgent")
    session_id: Optional[str] = Field(None, alias="sessionId")
    event: Optional[str] = Field("pageview", description="Event type")


class TrackVisitorResponse(BaseModel):
    """Response schema for the analytics intake function."""

    status: bool = True
    tracked: bool
    message: Optional[str] = None
