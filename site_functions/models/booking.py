"""Booking row model."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class BookingStatus(str, Enum):
    """Lifecycle state of a Cal.com booking."""

    CONFIRMED = "confirmed"
    RESCHEDULED = "rescheduled"
    CANCELLED = "cancelled"


class Booking(BaseModel):
    """
    A meeting booked through Cal.com.

    ``calcom_booking_id`` is the natural key: reschedules and cancellations
    update the row carrying the same ID instead of inserting a new one.
    """

    calcom_booking_id: int | str = Field(..., description="Cal.com booking ID")
    attendee_name: Optional[str] = None
    attendee_email: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    status: BookingStatus = BookingStatus.CONFIRMED
    cancellation_reason: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
