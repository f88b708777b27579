"""Event handlers registered on the message bus when the app is ready."""

import logging

from apps.bookings.domain.events import BookingCreated
from shared.application.message_bus import message_bus

logger = logging.getLogger(__name__)


def log_booking_created(event: BookingCreated):
    logger.info(f"Booking confirmed: {event.to_dict()}")


def register_handlers():
    message_bus.register_event_handler(BookingCreated, log_booking_created)
