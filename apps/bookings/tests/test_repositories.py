from datetime import date

import pytest
from django.db import transaction
from django.db.models.query import QuerySet

from apps.bookings.models import Booking
from apps.bookings.tests.scenario import SHERLOCK_REFERENCE
from apps.hotels.models import Room
from shared.domain.value_objects import DateRange


@pytest.mark.django_db
def test_list_rooms_filters_by_occupancy(london, store):
    rooms = store.list_rooms(min_occupancy=3)

    assert {room.pk for room in rooms} == set(london.room_ids(5, 6, 11, 12, 17, 18))


@pytest.mark.django_db
def test_list_rooms_excludes_overlapping_bookings(london, store):
    rooms = store.list_rooms(exclude_overlapping=DateRange(date(2025, 8, 3), date(2025, 8, 5)))

    assert london.room(3).pk not in {room.pk for room in rooms}
    assert len(rooms) == 17


@pytest.mark.django_db
def test_overlap_lookup_is_half_open(london, store):
    room_id = london.room(3).pk

    assert store.find_bookings_overlapping(room_id, DateRange(date(2025, 8, 3), date(2025, 8, 4))) == [
        london.sherlock_booking
    ]
    assert store.find_bookings_overlapping(room_id, DateRange(date(2025, 8, 4), date(2025, 8, 6))) == []
    assert store.find_bookings_overlapping(room_id, DateRange(date(2025, 7, 30), date(2025, 8, 1))) == []


@pytest.mark.django_db
def test_rooms_of_other_hotels_are_not_returned(london, store):
    rooms = store.get_rooms_by_ids_and_hotel(london.room_ids(1, 7, 2), london.westminster.pk)

    assert [room.pk for room in rooms] == london.room_ids(1, 2)


@pytest.mark.django_db(transaction=True)
def test_lock_rooms_requires_a_transaction(london, store):
    with pytest.raises(RuntimeError):
        store.lock_rooms(london.room_ids(1), london.westminster.pk)

    with transaction.atomic():
        locked = store.lock_rooms(london.room_ids(2, 1), london.westminster.pk)

    assert [room.pk for room in locked] == london.room_ids(1, 2)


@pytest.mark.django_db
def test_booking_lookup_loads_rooms(london, store):
    booking = store.find_booking_by_reference(SHERLOCK_REFERENCE)

    assert booking.hotel == london.westminster
    assert [room.room_number for room in booking.rooms.all()] == ["303"]
    assert store.find_booking_by_reference("BK-missing") is None
    assert store.reference_exists(SHERLOCK_REFERENCE)


@pytest.mark.django_db
def test_booking_lookup_reads_rooms_from_the_store_database(london, store, monkeypatch):
    real_using = QuerySet.using
    aliases = []

    def recording_using(queryset, alias):
        aliases.append((queryset.model, alias))
        return real_using(queryset, alias)

    monkeypatch.setattr(QuerySet, "using", recording_using)

    booking = store.find_booking_by_reference(SHERLOCK_REFERENCE)

    assert (Room, store.using) in aliases
    assert (Booking, store.using) in aliases
    assert [room.room_number for room in booking.rooms.all()] == ["303"]
