from datetime import date
from decimal import Decimal

import pytest

from apps.bookings.domain.availability import AvailabilityEngine
from apps.bookings.exceptions import InvalidRange
from apps.bookings.tests.scenario import TODAY
from apps.hotels.models import Hotel, Room, RoomType


@pytest.fixture
def engine(store):
    return AvailabilityEngine(store, today=lambda: TODAY)


def _room_ids(hotel):
    return [room.room_id for room in hotel.available_rooms]


@pytest.mark.django_db
def test_all_hotels_returned_except_the_booked_room(london, engine):
    hotels = engine.find_available(date(2025, 7, 25), date(2025, 7, 27), 2)

    assert [hotel.hotel_name for hotel in hotels] == [
        "Big Ben Tower Suites",
        "Buckingham Gardens Lodge",
        "The Westminster Palace Hotel",
    ]
    assert sum(len(hotel.available_rooms) for hotel in hotels) == 17

    by_id = {hotel.hotel_id: hotel for hotel in hotels}
    assert _room_ids(by_id[london.westminster.pk]) == london.room_ids(1, 2, 3, 4, 5, 6)
    assert _room_ids(by_id[london.big_ben.pk]) == london.room_ids(7, 8, 9, 10, 11, 12)
    assert _room_ids(by_id[london.buckingham.pk]) == london.room_ids(13, 14, 15, 16, 18)


@pytest.mark.django_db
def test_large_party_needs_combined_capacity(london, engine):
    hotels = engine.find_available(date(2025, 7, 26), date(2025, 7, 27), 12)

    assert [hotel.hotel_id for hotel in hotels] == [london.big_ben.pk, london.westminster.pk]
    assert sum(len(hotel.available_rooms) for hotel in hotels) == 12
    for hotel in hotels:
        assert hotel.can_accommodate_guests
        assert hotel.total_available_capacity >= 12
        assert hotel.total_available_capacity == sum(room.max_occupancy for room in hotel.available_rooms)


@pytest.mark.django_db
def test_party_larger_than_any_hotel_finds_nothing(london, engine):
    assert engine.find_available(date(2025, 7, 26), date(2025, 7, 27), 13) == []


@pytest.mark.django_db
def test_stay_starting_on_previous_checkout_day_is_free(london, engine):
    hotels = engine.find_available(date(2025, 7, 28), date(2025, 7, 30), 1)

    buckingham = next(hotel for hotel in hotels if hotel.hotel_id == london.buckingham.pk)
    assert london.room(17).pk in _room_ids(buckingham)


@pytest.mark.django_db
def test_room_totals_are_price_times_nights(london, engine):
    hotels = engine.find_available(date(2025, 7, 25), date(2025, 7, 28), 1)

    westminster = next(hotel for hotel in hotels if hotel.hotel_id == london.westminster.pk)
    first = westminster.available_rooms[0]
    assert first.room_number == "101"
    assert first.room_type == "Single"
    assert first.price == Decimal("100.00")
    assert first.total_price == Decimal("300.00")


@pytest.mark.django_db
def test_rooms_sorted_by_room_number_as_text(engine):
    hotel = Hotel.objects.create(name="Annex")
    room_type = RoomType.objects.create(name="Twin", max_occupancy=2)
    for number in ("9", "101", "10"):
        Room.objects.create(hotel=hotel, room_type=room_type, room_number=number, price=Decimal("50.00"))

    hotels = engine.find_available(date(2025, 7, 25), date(2025, 7, 26), 2)

    assert [room.room_number for room in hotels[0].available_rooms] == ["10", "101", "9"]


@pytest.mark.django_db
def test_search_summarises_the_result(london, engine):
    search = engine.search(date(2025, 7, 25), date(2025, 7, 27), 2)

    assert search.nights == 2
    assert search.total_hotels_found == 3
    assert search.total_rooms_available == 17


@pytest.mark.parametrize(
    "check_in, check_out, people_count",
    [
        (date(2025, 7, 19), date(2025, 7, 22), 2),  # check-in in the past
        (date(2025, 7, 20), date(2025, 7, 20), 2),  # check-out not after today
        (date(2025, 7, 27), date(2025, 7, 25), 2),  # inverted
        (date(2025, 7, 25), date(2025, 7, 25), 2),  # zero nights
        (date(2025, 7, 25), date(2025, 7, 27), 0),  # empty party
    ],
)
def test_invalid_ranges_are_rejected_before_touching_the_store(check_in, check_out, people_count):
    class UntouchableStore:
        def list_rooms(self, **kwargs):
            raise AssertionError("store must not be queried")

    engine = AvailabilityEngine(UntouchableStore(), today=lambda: TODAY)

    with pytest.raises(InvalidRange):
        engine.find_available(check_in, check_out, people_count)


def test_invalid_range_message_names_today():
    engine = AvailabilityEngine(store=None, today=lambda: TODAY)

    with pytest.raises(InvalidRange, match="Today is 2025-07-20"):
        engine.find_available(date(2025, 7, 1), date(2025, 7, 22), 1)


def test_invalid_range_names_only_the_first_broken_rule():
    engine = AvailabilityEngine(store=None, today=lambda: TODAY)

    with pytest.raises(InvalidRange) as excinfo:
        engine.find_available(date(2025, 7, 18), date(2025, 7, 15), 0)

    assert str(excinfo.value) == "Check-in date cannot be in the past. Today is 2025-07-20"
