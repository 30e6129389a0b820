"""Cal.com booking webhook service."""

import json
from typing import Any

from site_functions.config import Settings, settings
from site_functions.exceptions import UnauthorizedError, WebhookProcessingError
from site_functions.logging.config import get_logger
from site_functions.models.booking import Booking, BookingStatus
from site_functions.repositories.booking_repository import BookingRepository
from site_functions.schemas.webhook import (
    BookingPayload,
    TriggerEvent,
    WebhookEnvelope,
    WebhookResponse,
)
from site_functions.utils.signature import verify_signature
from site_functions.utils.timestamps import utc_now_iso

logger = get_logger(__name__)


class BookingService:
    """
    Applies Cal.com booking lifecycle events to the bookings table.

    Bookings are keyed by the Cal.com booking ID: a created event inserts
    the row, reschedule and cancel events update it in place.
    """

    def __init__(
        self,
        repository: BookingRepository | None = None,
        config: Settings | None = None,
    ) -> None:
        """
        Initialize BookingService.

        Args:
            repository: BookingRepository instance (creates new if None)
            config: Settings instance holding the webhook secret
        """
        self.config = config or settings
        self.repository = repository or BookingRepository(self.config)

    async def process_webhook(
        self, raw_body: bytes, signature: str | None
    ) -> WebhookResponse:
        """
        Verify, parse and dispatch one webhook delivery.

        Args:
            raw_body: Exact request body as received
            signature: Value of the x-cal-signature-256 header

        Returns:
            WebhookResponse naming the trigger event

        Raises:
            UnauthorizedError: If the signature cannot be verified (401)
            WebhookProcessingError: If a verified delivery cannot be applied (500)
        """
        try:
            verify_signature(self.config.calcom_webhook_secret, raw_body, signature)
        except UnauthorizedError:
            logger.warning("Rejected webhook with missing or invalid signature")
            raise

        trigger_event = None
        try:
            envelope = WebhookEnvelope.model_validate(json.loads(raw_body))
            trigger_event = envelope.trigger_event
            await self.dispatch(trigger_event, envelope.payload)
        except Exception as exc:
            logger.error(
                f"Webhook processing failed: {exc}",
                exc_info=exc,
                extra={"context": {"trigger_event": trigger_event}},
            )
            raise WebhookProcessingError(event=trigger_event) from exc

        return WebhookResponse(event=trigger_event)

    async def dispatch(
        self, trigger_event: str | None, payload: dict[str, Any] | None
    ) -> bool:
        """
        Route an event to its handler.

        Unknown events are logged and ignored so Cal.com does not retry them.

        Returns:
            True if the event was handled
        """
        try:
            event = TriggerEvent(trigger_event)
        except ValueError:
            logger.info(
                "Unhandled webhook event",
                extra={"context": {"trigger_event": trigger_event}},
            )
            return False

        data = BookingPayload.model_validate(payload or {})
        logger.info(
            "Cal.com event received",
            extra={"context": {"trigger_event": event.value, "booking_id": data.id}},
        )

        if event is TriggerEvent.BOOKING_CREATED:
            await self.booking_created(data)
        elif event is TriggerEvent.BOOKING_RESCHEDULED:
            await self.booking_rescheduled(data)
        else:
            await self.booking_cancelled(data)
        return True

    async def booking_created(self, data: BookingPayload) -> Booking:
        attendee = data.first_attendee
        booking = Booking(
            calcom_booking_id=data.id,
            attendee_name=attendee.name,
            attendee_email=attendee.email,
            start_time=data.start_time,
            end_time=data.end_time,
            status=BookingStatus.CONFIRMED,
            created_at=utc_now_iso(),
        )
        if await self.repository.create(booking):
            logger.info("Booking created", extra={"context": {"booking_id": data.id}})
        return booking

    async def booking_rescheduled(self, data: BookingPayload) -> int:
        values: dict[str, Any] = {
            "status": BookingStatus.RESCHEDULED.value,
            "updated_at": utc_now_iso(),
        }
        if data.start_time is not None:
            values["start_time"] = data.start_time
        if data.end_time is not None:
            values["end_time"] = data.end_time

        updated = await self.repository.update_by_booking_id(data.id, values)
        self._log_update("Booking rescheduled", data.id, updated)
        return updated

    async def booking_cancelled(self, data: BookingPayload) -> int:
        values = {
            "status": BookingStatus.CANCELLED.value,
            "cancellation_reason": data.cancellation_reason,
            "updated_at": utc_now_iso(),
        }
        updated = await self.repository.update_by_booking_id(data.id, values)
        self._log_update("Booking cancelled", data.id, updated)
        return updated

    def _log_update(self, message: str, booking_id: int | str, updated: int) -> None:
        if updated:
            logger.info(message, extra={"context": {"booking_id": booking_id}})
        else:
            logger.warning(
                f"{message}: no stored booking matched",
                extra={"context": {"booking_id": booking_id}},
            )
