"""
Booking Command Handlers

The use case that writes bookings. It orchestrates the validator and the
inventory store inside one unit of work.

Commands:
- CreateBookingCommand: Reserve a set of rooms of one hotel for a stay
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Callable, List, Optional
import logging
import secrets

from django.conf import settings
from django.db import DatabaseError, IntegrityError, transaction
from django.utils import timezone

from shared.application.uow import DjangoUnitOfWork
from shared.domain.value_objects import DateRange
from apps.bookings.domain.events import BookingCreated
from apps.bookings.domain.validation import BookingValidator
from apps.bookings.exceptions import (
    BookingError,
    ConflictDetected,
    InvalidRange,
    StorageFailure,
    ValidationFailed,
)
from apps.bookings.models import Booking

logger = logging.getLogger(__name__)


def generate_booking_reference() -> str:
    """Booking reference: {prefix}{timestamp}{random}, e.g. BK20250715120000417"""
    prefix = settings.HOTEL_BOOKING["BOOKING_REFERENCE_PREFIX"]
    timestamp = timezone.localtime().strftime('%Y%m%d%H%M%S')
    random_part = secrets.randbelow(900) + 100
    return f"{prefix}{timestamp}{random_part}"


# ===== Commands =====

@dataclass
class CreateBookingCommand:
    """Command to book one or more rooms of a hotel"""
    hotel_id: int
    room_ids: List[int] = field(default_factory=list)
    guest_name: str = ''
    people_count: int = 1
    check_in: Optional[date] = None
    check_out: Optional[date] = None


# ===== Command Handlers =====

class CreateBookingHandler:
    """
    Handler for CreateBooking command

    Guarantees that a room is never held by two bookings with overlapping
    dates, even when requests race:

    1. Start the unit of work (transaction.atomic)
    2. Lock the requested rooms (SELECT FOR UPDATE; BEGIN IMMEDIATE on SQLite)
    3. Re-run every booking rule against the locked inventory
    4. Price the stay: sum of nightly prices * nights
    5. Insert the booking under a fresh reference, retrying on collisions
    6. Commit, then publish BookingCreated
    """

    def __init__(
        self,
        store,
        today: Callable[[], date] = timezone.localdate,
        reference_generator: Callable[[], str] = generate_booking_reference,
    ):
        self.store = store
        self.validator = BookingValidator(store, today=today)
        self.generate_reference = reference_generator

    def handle(self, command: CreateBookingCommand) -> Booking:
        """
        Handle booking creation

        Returns: the committed Booking with its rooms attached

        Raises:
            InvalidRange: party smaller than one, blank guest name or missing dates
            ConflictDetected: a selected room is booked for overlapping dates
            ValidationFailed: any other broken booking rule
            StorageFailure: the database failed; nothing was written
        """
        logger.info(
            f"Creating booking for hotel {command.hotel_id}, rooms {command.room_ids}, "
            f"dates {command.check_in} - {command.check_out}, {command.people_count} guest(s)"
        )

        if command.people_count < 1:
            raise InvalidRange("People count must be at least 1")
        if not (command.guest_name or '').strip():
            raise InvalidRange("Guest name is required")
        if command.check_in is None or command.check_out is None:
            raise InvalidRange("Check-in and check-out dates are required")

        try:
            with DjangoUnitOfWork(using=self.store.using) as uow:
                self.store.lock_rooms(command.room_ids, command.hotel_id)

                result = self.validator.validate(
                    command.hotel_id,
                    command.room_ids,
                    command.check_in,
                    command.check_out,
                    command.people_count,
                )
                if not result.ok:
                    error_class = ConflictDetected if result.has_conflict else ValidationFailed
                    raise error_class(result.issues)

                rooms = self.store.get_rooms_by_ids_and_hotel(command.room_ids, command.hotel_id)
                dates = DateRange(command.check_in, command.check_out)
                nightly = sum((room.price for room in rooms), Decimal('0.00'))
                total_price = nightly * dates.nights

                booking = self._insert_with_unique_reference(command, rooms, total_price)

                uow.collect(BookingCreated(
                    booking_id=booking.pk,
                    booking_reference=booking.booking_reference,
                    hotel_id=command.hotel_id,
                    room_ids=[room.pk for room in rooms],
                    dates=dates,
                    people_count=command.people_count,
                    total_price=total_price,
                ))
        except BookingError:
            raise
        except DatabaseError as e:
            logger.error(f"Storage failure while creating booking for hotel {command.hotel_id}: {e}", exc_info=True)
            raise StorageFailure("The booking could not be stored") from e

        logger.info(
            f"Booking created successfully: {booking.booking_reference} "
            f"(ID: {booking.pk}, total {booking.total_price})"
        )
        return booking

    def _insert_with_unique_reference(self, command: CreateBookingCommand, rooms, total_price: Decimal) -> Booking:
        max_attempts = settings.HOTEL_BOOKING["BOOKING_REFERENCE_MAX_ATTEMPTS"]

        for attempt in range(1, max_attempts + 1):
            reference = self.generate_reference()
            booking = Booking(
                hotel_id=command.hotel_id,
                guest_name=command.guest_name.strip(),
                people_count=command.people_count,
                check_in=command.check_in,
                check_out=command.check_out,
                total_price=total_price,
                booking_reference=reference,
            )
            try:
                # Savepoint: a reference collision must not poison the outer transaction
                with transaction.atomic(using=self.store.using):
                    return self.store.insert_booking(booking, rooms)
            except IntegrityError:
                if not self.store.reference_exists(reference):
                    raise
                logger.warning(
                    f"Booking reference {reference} already taken (attempt {attempt}/{max_attempts})"
                )

        raise StorageFailure(
            f"Could not generate a unique booking reference after {max_attempts} attempts"
        )
