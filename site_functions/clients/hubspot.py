"""Minimal HubSpot CRM client for creating contacts."""

from typing import Any

import httpx

from site_functions.config import Settings, settings
from site_functions.exceptions import ConfigurationError
from site_functions.logging.config import get_logger

logger = get_logger(__name__)

CONTACTS_PATH = "/crm/v3/objects/contacts"


class HubSpotError(Exception):
    """HubSpot rejected a request or could not be reached."""

    def __init__(
        self, message: str, status_code: int | None = None, body: Any = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


class HubSpotConflictError(HubSpotError):
    """HubSpot answered 409: a contact with this email already exists."""


class HubSpotClient:
    """
    Thin wrapper around the HubSpot contacts endpoint.

    One ``httpx.AsyncClient`` is opened per call; there is no retry.
    """

    def __init__(
        self,
        config: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize HubSpotClient.

        Args:
            config: Settings holding the private app token and base URL
            transport: Optional httpx transport (used by tests)
        """
        self.config = config or settings
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        token = self.config.hubspot_private_token
        if not token:
            raise ConfigurationError(
                message="HubSpot sync failed", setting="HUBSPOT_PRIVATE_TOKEN"
            )
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {token}",
        }

    async def create_contact(self, properties: dict[str, str]) -> dict[str, Any]:
        """
        Create a contact.

        Args:
            properties: HubSpot contact properties

        Returns:
            The created contact object (contains ``id``)

        Raises:
            ConfigurationError: If HUBSPOT_PRIVATE_TOKEN is not set
            HubSpotConflictError: If the contact already exists (409)
            HubSpotError: For any other non-2xx response or transport failure
        """
        headers = self._headers()
        url = self.config.hubspot_api_base_url.rstrip("/") + CONTACTS_PATH

        try:
            async with httpx.AsyncClient(
                timeout=self.config.hubspot_timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    url, json={"properties": properties}, headers=headers
                )
        except httpx.HTTPError as exc:
            raise HubSpotError(f"HubSpot request failed: {exc}") from exc

        try:
            body = response.json()
        except ValueError:
            body = {}

        if response.is_success:
            return body

        message = (
            body.get("message") if isinstance(body, dict) else None
        ) or "HubSpot sync failed"

        logger.warning(
            "HubSpot error response",
            extra={
                "context": {
                    "status_code": response.status_code,
                    "hubspot_message": message,
                    "category": body.get("category") if isinstance(body, dict) else None,
                }
            },
        )

        if response.status_code == httpx.codes.CONFLICT:
            raise HubSpotConflictError(message, response.status_code, body)
        raise HubSpotError(message, response.status_code, body)
