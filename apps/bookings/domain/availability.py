"""
Availability Engine

Read-only search for hotels that can host a party over a stay window.

A hotel qualifies when the rooms it has free for the whole window add up
to enough capacity for the party; a single room does not need to fit the
party on its own. The result is a snapshot taken without locks: the booking
transaction re-validates everything before it writes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Callable, List

from django.utils import timezone  # type: ignore

from shared.domain.value_objects import DateRange

from .stay import ensure_valid_stay

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoomAvailability:
    room_id: int
    room_number: str
    room_type: str
    max_occupancy: int
    price: Decimal
    total_price: Decimal


@dataclass(frozen=True)
class HotelAvailability:
    hotel_id: int
    hotel_name: str
    address: str
    phone_number: str
    email: str
    available_rooms: List[RoomAvailability] = field(default_factory=list)
    total_available_capacity: int = 0
    can_accommodate_guests: bool = False


@dataclass(frozen=True)
class AvailabilitySearch:
    """Search criteria plus the hotels found, as returned by the API."""
    check_in: date
    check_out: date
    people_count: int
    nights: int
    hotels: List[HotelAvailability]

    @property
    def total_hotels_found(self) -> int:
        return len(self.hotels)

    @property
    def total_rooms_available(self) -> int:
        return sum(len(hotel.available_rooms) for hotel in self.hotels)


class AvailabilityEngine:
    """
    Finds hotels with enough free capacity for a stay.

    Usage:
        engine = AvailabilityEngine(DjangoInventoryStore())
        hotels = engine.find_available(check_in, check_out, people_count=2)
    """

    def __init__(self, store, today: Callable[[], date] = timezone.localdate):
        self.store = store
        self.today = today

    def find_available(self, check_in: date, check_out: date, people_count: int) -> List[HotelAvailability]:
        """
        Hotels with free rooms for [check_in, check_out) whose combined
        capacity fits ``people_count``, sorted by hotel name.

        Raises:
            InvalidRange: dates in the past, inverted, or a party smaller than one
        """
        dates = ensure_valid_stay(check_in, check_out, people_count, self.today())

        free_rooms = self.store.list_rooms(exclude_overlapping=dates)

        by_hotel = {}
        for room in free_rooms:
            by_hotel.setdefault(room.hotel_id, []).append(room)

        hotels = []
        for rooms in by_hotel.values():
            availability = self._hotel_availability(rooms, dates, people_count)
            if availability.can_accommodate_guests:
                hotels.append(availability)

        hotels.sort(key=lambda hotel: (hotel.hotel_name, hotel.hotel_id))

        logger.info(
            f"Availability {dates} for {people_count} guest(s): "
            f"{len(hotels)} hotel(s) out of {len(by_hotel)} with free rooms"
        )
        return hotels

    def search(self, check_in: date, check_out: date, people_count: int) -> AvailabilitySearch:
        hotels = self.find_available(check_in, check_out, people_count)
        return AvailabilitySearch(
            check_in=check_in,
            check_out=check_out,
            people_count=people_count,
            nights=(check_out - check_in).days,
            hotels=hotels,
        )

    @staticmethod
    def _hotel_availability(rooms, dates: DateRange, people_count: int) -> HotelAvailability:
        hotel = rooms[0].hotel
        ordered = sorted(rooms, key=lambda room: room.room_number)
        capacity = sum(room.room_type.max_occupancy for room in ordered)

        return HotelAvailability(
            hotel_id=hotel.pk,
            hotel_name=hotel.name,
            address=hotel.address,
            phone_number=hotel.phone_number,
            email=hotel.email,
            available_rooms=[
                RoomAvailability(
                    room_id=room.pk,
                    room_number=room.room_number,
                    room_type=room.room_type.name,
                    max_occupancy=room.room_type.max_occupancy,
                    price=room.price,
                    total_price=room.price * dates.nights,
                )
                for room in ordered
            ],
            total_available_capacity=capacity,
            can_accommodate_guests=capacity >= people_count,
        )
