"""Read-side use cases for bookings."""

import logging

from apps.bookings.exceptions import NotFound
from apps.bookings.models import Booking

logger = logging.getLogger(__name__)


class BookingQueryService:
    """Looks bookings up by their public reference."""

    def __init__(self, store):
        self.store = store

    def get_by_reference(self, reference: str) -> Booking:
        """Booking with hotel and rooms loaded; raises NotFound on a miss."""
        booking = self.store.find_booking_by_reference((reference or '').strip())
        if booking is None:
            logger.info(f"Booking {reference!r} not found")
            raise NotFound("Booking not found")
        return booking
