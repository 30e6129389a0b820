"""Configuration management using Pydantic Settings."""

import os

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        # Only load .env file in development (not Lambda/production)
        env_file=".env" if os.getenv("AWS_EXECUTION_ENV") is None else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Supabase Configuration
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    table_contacts: str = "contacts"
    table_hubspot_syncs: str = "hubspot_syncs"
    table_bookings: str = "bookings"
    table_analytics_events: str = "analytics_events"

    # HubSpot Configuration
    hubspot_private_token: str | None = None
    hubspot_api_base_url: str = "https://api.hubapi.com"
    hubspot_lead_source: str = "Website - Linguawaves"
    hubspot_timeout_seconds: float = 10.0

    # Cal.com Configuration
    calcom_webhook_secret: str | None = None

    # Resend Configuration (contact notification is skipped unless all are set)
    resend_api_key: str | None = None
    resend_from_email: str | None = None
    contact_notification_email: str | None = None

    @field_validator(
        "supabase_url",
        "supabase_service_key",
        "hubspot_private_token",
        "calcom_webhook_secret",
        "resend_api_key",
        "resend_from_email",
        "contact_notification_email",
        mode="before",
    )
    @classmethod
    def convert_empty_string_to_none(cls, v):
        """Convert empty strings to None so unset secrets read as missing."""
        if v is None:
            return None
        if isinstance(v, str) and v.strip() == "":
            return None
        return v

    # Application Configuration
    log_level: str = "INFO"
    api_title: str = "Site Functions"
    api_version: str = "1.0.0"
    api_gateway_base_path: str = "/"

    @property
    def notifications_enabled(self) -> bool:
        """Whether contact submissions should trigger a notification email."""
        return bool(
            self.resend_api_key
            and self.resend_from_email
            and self.contact_notification_email
        )


# Global settings instance
settings = Settings()
