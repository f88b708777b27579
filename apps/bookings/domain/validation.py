"""
Booking Validator

Checks a booking request against the inventory and reports every problem
it finds as a tagged issue. Business violations are returned, never raised.

Rules run in a fixed order. Some rules stop the run when later rules would
have nothing consistent to work on:

1. stay dates                 (first broken rule only, stops on failure)
2. at least one room          (stops on failure)
3. duplicate room ids
4. hotel exists               (stops on failure)
5. rooms exist in the hotel   (stops when any requested room is missing)
6. combined capacity
7. no overlapping booking per room
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Callable, List, Sequence

from django.utils import timezone  # type: ignore

from shared.domain.value_objects import DateRange

from .stay import stay_date_error

logger = logging.getLogger(__name__)


class IssueKind(Enum):
    DATE_INVALID = 'date_invalid'
    NO_ROOMS_SELECTED = 'no_rooms_selected'
    DUPLICATE_ROOM = 'duplicate_room'
    HOTEL_NOT_FOUND = 'hotel_not_found'
    ROOM_NOT_FOUND = 'room_not_found'
    CAPACITY_EXCEEDED = 'capacity_exceeded'
    ROOM_UNAVAILABLE = 'room_unavailable'


@dataclass(frozen=True)
class BookingIssue:
    kind: IssueKind
    detail: str

    def to_dict(self) -> dict:
        return {'kind': self.kind.value, 'detail': self.detail}


@dataclass
class ValidationResult:
    issues: List[BookingIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues

    @property
    def messages(self) -> List[str]:
        return [issue.detail for issue in self.issues]

    @property
    def has_conflict(self) -> bool:
        return any(issue.kind is IssueKind.ROOM_UNAVAILABLE for issue in self.issues)

    def add(self, kind: IssueKind, detail: str):
        self.issues.append(BookingIssue(kind, detail))


class _Stop(Exception):
    """Internal signal: later rules cannot run on this request."""


@dataclass
class _Request:
    hotel_id: int
    room_ids: Sequence[int]
    check_in: date
    check_out: date
    people_count: int
    rooms: list = field(default_factory=list)


class BookingValidator:
    """
    Runs the booking rules against the inventory store.

    Usage:
        result = BookingValidator(store).validate(hotel_id, [7, 8], check_in, check_out, 3)
        if not result.ok:
            print(result.messages)
    """

    def __init__(self, store, today: Callable[[], date] = timezone.localdate):
        self.store = store
        self.today = today
        self.rules = (
            self._check_dates,
            self._check_selection,
            self._check_duplicates,
            self._check_hotel,
            self._check_rooms,
            self._check_capacity,
            self._check_overlaps,
        )

    def validate(
        self,
        hotel_id: int,
        room_ids: Sequence[int],
        check_in: date,
        check_out: date,
        people_count: int,
    ) -> ValidationResult:
        request = _Request(hotel_id, list(room_ids or []), check_in, check_out, people_count)
        result = ValidationResult()

        for rule in self.rules:
            try:
                rule(request, result)
            except _Stop:
                break

        if not result.ok:
            logger.info(f"Booking request for hotel {hotel_id} rejected: {result.messages}")
        return result

    # ===== Rules =====

    def _check_dates(self, request: _Request, result: ValidationResult):
        error = stay_date_error(request.check_in, request.check_out, self.today())
        if error:
            result.add(IssueKind.DATE_INVALID, error)
            raise _Stop

    def _check_selection(self, request: _Request, result: ValidationResult):
        if not request.room_ids:
            result.add(IssueKind.NO_ROOMS_SELECTED, "At least one room must be selected")
            raise _Stop

    def _check_duplicates(self, request: _Request, result: ValidationResult):
        counts = Counter(request.room_ids)
        duplicates = [room_id for room_id, count in counts.items() if count > 1]
        if duplicates:
            result.add(
                IssueKind.DUPLICATE_ROOM,
                f"Duplicate room IDs found: {', '.join(str(room_id) for room_id in duplicates)}",
            )

    def _check_hotel(self, request: _Request, result: ValidationResult):
        if self.store.get_hotel(request.hotel_id) is None:
            result.add(IssueKind.HOTEL_NOT_FOUND, "Hotel not found")
            raise _Stop

    def _check_rooms(self, request: _Request, result: ValidationResult):
        request.rooms = self.store.get_rooms_by_ids_and_hotel(request.room_ids, request.hotel_id)

        found = {room.pk for room in request.rooms}
        missing = []
        for room_id in request.room_ids:
            if room_id not in found and room_id not in missing:
                missing.append(room_id)

        if missing:
            result.add(
                IssueKind.ROOM_NOT_FOUND,
                f"Rooms with IDs {', '.join(str(room_id) for room_id in missing)} "
                f"not found or don't belong to this hotel",
            )

        # A duplicated id also makes the counts differ
        if len(request.rooms) != len(request.room_ids):
            raise _Stop

    def _check_capacity(self, request: _Request, result: ValidationResult):
        capacity = sum(room.room_type.max_occupancy for room in request.rooms)
        if capacity < request.people_count:
            details = ", ".join(
                f"Room {room.room_number} ({room.room_type.name}, max {room.room_type.max_occupancy} people)"
                for room in request.rooms
            )
            result.add(
                IssueKind.CAPACITY_EXCEEDED,
                f"Selected rooms can only accommodate {capacity} people, "
                f"but {request.people_count} requested. Rooms: {details}",
            )

    def _check_overlaps(self, request: _Request, result: ValidationResult):
        dates = DateRange(request.check_in, request.check_out)

        unavailable = []
        for room in request.rooms:
            conflicts = self.store.find_bookings_overlapping(room.pk, dates)
            if conflicts:
                described = ", ".join(
                    f"Booking {booking.booking_reference} ({booking.guest_name}) "
                    f"from {booking.check_in.isoformat()} to {booking.check_out.isoformat()}"
                    for booking in conflicts
                )
                unavailable.append(f"Room {room.room_number}: {described}")

        if unavailable:
            result.add(
                IssueKind.ROOM_UNAVAILABLE,
                f"The following rooms are not available: {'; '.join(unavailable)}",
            )
