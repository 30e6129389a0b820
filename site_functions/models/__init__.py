"""Row models for the Supabase tables written by the site functions."""

from site_functions.models.analytics_event import AnalyticsEvent
from site_functions.models.booking import Booking, BookingStatus
from site_functions.models.contact import ContactSubmission
from site_functions.models.hubspot_sync import HubSpotSyncLog, SyncStatus

__all__ = [
    "AnalyticsEvent",
    "Booking",
    "BookingStatus",
    "ContactSubmission",
    "HubSpotSyncLog",
    "SyncStatus",
]
