"""Analytics event row model."""

from typing import Optional

from pydantic import BaseModel


class AnalyticsEvent(BaseModel):
    """A single privacy-safe page view or custom event."""

    event_type: str
    page_path: str
    referrer: Optional[str] = None
    session_id: Optional[str] = None
    country: str = "unknown"
    browser: str = "Other"
    device_type: str = "desktop"
    created_at: str
