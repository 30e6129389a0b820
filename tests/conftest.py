"""Shared fixtures for site function tests."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from site_functions.config import Settings
from site_functions.main import app


@pytest.fixture
def config() -> Settings:
    """Settings with every upstream configured, independent of the environment."""
    return Settings(
        _env_file=None,
        supabase_url="https://project.supabase.co",
        supabase_service_key="service-role-key",
        hubspot_private_token="pat-test-token",
        hubspot_api_base_url="https://hubspot.test",
        calcom_webhook_secret="whsec_test",
        resend_api_key="re_test",
        resend_from_email="site@example.com",
        contact_notification_email="owner@example.com",
    )


@pytest.fixture
async def api_client() -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the combined app."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client
