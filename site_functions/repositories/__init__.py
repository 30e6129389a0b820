"""Repository layer for Supabase tables."""

from site_functions.repositories.analytics_repository import AnalyticsRepository
from site_functions.repositories.booking_repository import BookingRepository
from site_functions.repositories.contact_repository import ContactRepository
from site_functions.repositories.hubspot_sync_repository import HubSpotSyncRepository

__all__ = [
    "AnalyticsRepository",
    "BookingRepository",
    "ContactRepository",
    "HubSpotSyncRepository",
]
