"""Inventory store backed by the Django ORM.

Every booking component receives a store instance through its constructor
instead of reaching for the ORM directly.
"""

from __future__ import annotations

import logging
from typing import Iterable

from django.db import router, transaction  # type: ignore
from django.db.models import Exists, OuterRef, Prefetch  # type: ignore

from apps.hotels.models import Hotel, Room
from shared.domain.value_objects import DateRange

from .models import Booking

logger = logging.getLogger(__name__)


def _overlapping(queryset, dates: DateRange):
    """Half-open overlap: existing.check_in < end and start < existing.check_out."""
    return queryset.filter(check_in__lt=dates.end_date, check_out__gt=dates.start_date)


class DjangoInventoryStore:
    """Reads and writes hotels, rooms and bookings."""

    def __init__(self, using: str | None = None):
        self.using = using or router.db_for_write(Booking)

    def list_rooms(
        self,
        min_occupancy: int | None = None,
        exclude_overlapping: DateRange | None = None,
    ) -> list[Room]:
        """Rooms with hotel and room type joined, optionally only the free ones."""
        queryset = Room.objects.using(self.using).select_related("hotel", "room_type")

        if min_occupancy is not None:
            queryset = queryset.filter(room_type__max_occupancy__gte=min_occupancy)

        if exclude_overlapping is not None:
            busy = _overlapping(
                Booking.objects.using(self.using).filter(rooms=OuterRef("pk")),
                exclude_overlapping,
            )
            queryset = queryset.filter(~Exists(busy))

        return list(queryset.order_by("hotel__name", "room_number"))

    def get_hotel(self, hotel_id: int) -> Hotel | None:
        return Hotel.objects.using(self.using).filter(pk=hotel_id).first()

    def get_rooms_by_ids_and_hotel(self, room_ids: Iterable[int], hotel_id: int) -> list[Room]:
        return list(
            Room.objects.using(self.using)
            .select_related("room_type")
            .filter(pk__in=set(room_ids), hotel_id=hotel_id)
            .order_by("pk")
        )

    def lock_rooms(self, room_ids: Iterable[int], hotel_id: int) -> list[Room]:
        """Row-lock the hotel's requested rooms until the transaction ends.

        Locks are taken in primary key order so two bookings over the same
        rooms cannot deadlock each other. Backends without row locks
        (SQLite) rely on ``transaction_mode = "IMMEDIATE"`` instead.
        """
        if not transaction.get_connection(self.using).in_atomic_block:
            raise RuntimeError("lock_rooms() must run inside a unit of work")

        locked = list(
            Room.objects.using(self.using)
            .select_for_update()
            .filter(pk__in=set(room_ids), hotel_id=hotel_id)
            .order_by("pk")
        )
        logger.debug(f"Locked rooms {[room.pk for room in locked]} of hotel {hotel_id}")
        return locked

    def find_bookings_overlapping(self, room_id: int, dates: DateRange) -> list[Booking]:
        queryset = Booking.objects.using(self.using).filter(rooms__id=room_id)
        return list(_overlapping(queryset, dates).order_by("check_in", "booking_reference"))

    def find_booking_by_reference(self, reference: str) -> Booking | None:
        rooms = Room.objects.using(self.using).select_related("room_type").order_by("room_number")
        return (
            Booking.objects.using(self.using)
            .select_related("hotel")
            .prefetch_related(Prefetch("rooms", queryset=rooms))
            .filter(booking_reference=reference)
            .first()
        )

    def reference_exists(self, reference: str) -> bool:
        return Booking.objects.using(self.using).filter(booking_reference=reference).exists()

    def insert_booking(self, booking: Booking, rooms: Iterable[Room]) -> Booking:
        """Persist a new booking with its rooms; call inside a unit of work."""
        booking.save(using=self.using)
        booking.rooms.set(list(rooms))
        return booking
