"""Booking repository keyed by the Cal.com booking ID."""

from typing import Any

from postgrest.exceptions import APIError

from site_functions.config import Settings, settings
from site_functions.logging.config import get_logger
from site_functions.models.booking import Booking
from site_functions.repositories.base import UNIQUE_VIOLATION, BaseRepository

logger = get_logger(__name__)

KEY_COLUMN = "calcom_booking_id"


class BookingRepository(BaseRepository):
    """
    Repository for the bookings table.

    Rows are created once per booking and afterwards only ever located by
    ``calcom_booking_id``.
    """

    def __init__(self, config: Settings | None = None) -> None:
        config = config or settings
        super().__init__(config.table_bookings, config)

    async def create(self, booking: Booking) -> bool:
        """
        Insert a new booking row.

        A redelivered creation event hits the unique constraint on
        ``calcom_booking_id`` and leaves the existing row untouched.

        Args:
            booking: Booking to store

        Returns:
            True if a row was inserted, False if the booking was already stored

        Raises:
            APIError: For any other rejection by the database
        """
        try:
            await self.insert(booking.model_dump(mode="json", exclude_none=True))
        except APIError as exc:
            if exc.code == UNIQUE_VIOLATION:
                logger.info(
                    "Booking already recorded",
                    extra={"context": {"booking_id": booking.calcom_booking_id}},
                )
                return False
            raise
        return True

    async def update_by_booking_id(
        self, booking_id: int | str, values: dict[str, Any]
    ) -> int:
        """
        Update the booking with the given Cal.com ID in place.

        Args:
            booking_id: Cal.com booking ID
            values: Columns to overwrite

        Returns:
            Number of rows updated
        """
        rows = await self.update_where(values, KEY_COLUMN, booking_id)
        return len(rows or [])
