"""Schemas for Cal.com webhook deliveries."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class TriggerEvent(str, Enum):
    """Cal.com trigger events the webhook acts on."""

    BOOKING_CREATED = "BOOKING_CREATED"
    BOOKING_RESCHEDULED = "BOOKING_RESCHEDULED"
    BOOKING_CANCELLED = "BOOKING_CANCELLED"


class Attendee(BaseModel):
    """One attendee of a booking."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    email: Optional[str] = None


class BookingPayload(BaseModel):
    """
    The ``payload`` object of a Cal.com booking event.

    Only the fields this function stores are declared; Cal.com sends many
    more, which are ignored.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int | str
    start_time: Optional[str] = Field(None, alias="startTime")
    end_time: Optional[str] = Field(None, alias="endTime")
    attendees: list[Attendee] = Field(default_factory=list)
    cancellation_reason: Optional[str] = Field(None, alias="cancellationReason")

    @property
    def first_attendee(self) -> Attendee:
        """The booking's first attendee, or an empty one."""
        return self.attendees[0] if self.attendees else Attendee()


class WebhookEnvelope(BaseModel):
    """Top-level Cal.com webhook body."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    trigger_event: Optional[str] = Field(None, alias="triggerEvent")
    payload: Optional[dict[str, Any]] = None


class WebhookResponse(BaseModel):
    """Response schema for a processed webhook."""

    status: bool = True
    message: str = "Webhook processed"
    event: Optional[str] = None
