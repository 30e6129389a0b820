"""
Sample Python client for the site functions.

Exercises every function the way the website and Cal.com call them:
- Submitting the contact form
- Syncing a lead to HubSpot (twice, to show duplicate handling)
- Tracking a page view
- Delivering a signed Cal.com booking webhook, then cancelling it

Requirements:
    pip install httpx python-dotenv
"""

import asyncio
import hashlib
import hmac
import json
import os
import sys
from typing import Any, Dict

import httpx
from dotenv import load_dotenv


class SiteFunctionsClient:
    """Async client for the deployed (or locally served) site functions."""

    def __init__(self, base_url: str = "http://localhost:8000") -> None:
        """
        Initialize the client.

        Args:
            base_url: Base URL the functions are served from
        """
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Content-Type": "application/json"},
            timeout=30.0,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()

    async def __aenter__(self) -> "SiteFunctionsClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def _post(self, path: str, body: Dict[str, Any]) -> httpx.Response:
        response = await self.client.post(path, json=body)
        print(f"POST {path} -> {response.status_code} {response.text}")
        return response

    async def submit_contact(self, **fields: Any) -> httpx.Response:
        return await self._post("/submit-contact", fields)

    async def sync_hubspot(self, **fields: Any) -> httpx.Response:
        return await self._post("/hubspot-sync", fields)

    async def track(self, page: str, **fields: Any) -> httpx.Response:
        return await self._post("/track-visitor", {"page": page, **fields})

    async def send_calcom_event(
        self, secret: str, trigger_event: str, payload: Dict[str, Any]
    ) -> httpx.Response:
        """
        Deliver a webhook signed the way Cal.com signs it.

        Args:
            secret: Shared webhook secret
            trigger_event: e.g. "BOOKING_CREATED"
            payload: Booking payload

        Returns:
            The webhook response
        """
        body = json.dumps({"triggerEvent": trigger_event, "payload": payload}).encode()
        signature = hmac.new(secret.encode(), body, hashlib.sha256).hexdigest()
        response = await self.client.post(
            "/calcom-webhook",
            content=body,
            headers={"x-cal-signature-256": signature},
        )
        print(f"POST /calcom-webhook [{trigger_event}] -> {response.status_code} {response.text}")
        return response


async def main() -> None:
    load_dotenv()
    base_url = os.getenv("SITE_FUNCTIONS_URL", "http://localhost:8000")
    secret = os.getenv("CALCOM_WEBHOOK_SECRET")

    async with SiteFunctionsClient(base_url) as client:
        await client.submit_contact(
            name="Ada Lovelace",
            email="ada@example.com",
            message="We'd like a quote for interpreting services.",
        )

        await client.sync_hubspot(email="ada@example.com", firstname="Ada")
        # Second sync hits HubSpot's 409 and still answers 200
        await client.sync_hubspot(email="ada@example.com", firstname="Ada")

        await client.track("/pricing", referrer="https://www.google.com/")

        if not secret:
            print("CALCOM_WEBHOOK_SECRET not set; skipping webhook examples", file=sys.stderr)
            return

        booking = {
            "id": 4242,
            "startTime": "2026-11-02T10:00:00Z",
            "endTime": "2026-11-02T10:30:00Z",
            "attendees": [{"name": "Ada Lovelace", "email": "ada@example.com"}],
        }
        await client.send_calcom_event(secret, "BOOKING_CREATED", booking)
        await client.send_calcom_event(
            secret, "BOOKING_CANCELLED", {"id": 4242, "cancellationReason": "Demo"}
        )


if __name__ == "__main__":
    asyncio.run(main())
