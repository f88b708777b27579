"""Integration tests for booking API endpoints."""

from __future__ import annotations

from datetime import timedelta
from unittest import mock

from django.db import DatabaseError
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.bookings.repositories import DjangoInventoryStore
from apps.bookings.tests.scenario import SHERLOCK_REFERENCE, WATSON_REFERENCE, build_london_inventory


class BookingAPITests(APITestCase):
    """Covers availability search, booking creation, conflicts and lookup."""

    def setUp(self) -> None:
        self.london = build_london_inventory(stay_start=timezone.localdate() + timedelta(days=30))
        self.search_url = reverse("booking-available-rooms")
        self.create_url = reverse("booking-create")

    def _search(self, start: int, end: int, people_count: int):
        return self.client.get(
            self.search_url,
            {
                "check_in": str(self.london.day(start)),
                "check_out": str(self.london.day(end)),
                "people_count": people_count,
            },
        )

    def _payload(self, hotel, room_numbers, start: int, end: int, people_count: int = 2) -> dict:
        return {
            "hotel_id": hotel.pk,
            "room_ids": self.london.room_ids(*room_numbers),
            "guest_name": "Irene Adler",
            "people_count": people_count,
            "check_in": str(self.london.day(start)),
            "check_out": str(self.london.day(end)),
        }

    def test_search_returns_hotels_with_enough_capacity(self) -> None:
        response = self._search(0, 2, 2)

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["total_hotels_found"], 3)
        self.assertEqual(response.data["total_rooms_available"], 17)
        self.assertEqual(
            response.data["search_criteria"],
            {
                "check_in": str(self.london.day(0)),
                "check_out": str(self.london.day(2)),
                "people_count": 2,
                "nights": 2,
            },
        )
        names = [hotel["hotel_name"] for hotel in response.data["hotels"]]
        self.assertEqual(names, ["Big Ben Tower Suites", "Buckingham Gardens Lodge", "The Westminster Palace Hotel"])
        first_room = response.data["hotels"][0]["available_rooms"][0]
        self.assertEqual(first_room["room_number"], "101")
        self.assertEqual(first_room["total_price"], "180.00")

    def test_search_with_past_dates_is_rejected(self) -> None:
        yesterday = timezone.localdate() - timedelta(days=1)
        response = self.client.get(
            self.search_url,
            {"check_in": str(yesterday), "check_out": str(self.london.day(1)), "people_count": 1},
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertIn("Check-in date cannot be in the past", response.data["error"])

    def test_search_requires_well_formed_parameters(self) -> None:
        response = self.client.get(self.search_url, {"check_in": "25/07/2025", "people_count": 0})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("check_in", response.data)
        self.assertIn("check_out", response.data)
        self.assertIn("people_count", response.data)

    def test_search_database_failure_returns_generic_error(self) -> None:
        with mock.patch.object(DjangoInventoryStore, "list_rooms", side_effect=DatabaseError("boom")):
            response = self._search(0, 2, 2)

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data, {"error": "An error occurred while searching for available rooms"})

    def test_guest_can_create_booking(self) -> None:
        response = self.client.post(
            self.create_url, self._payload(self.london.big_ben, (9, 11), 0, 3, people_count=5), format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        booking = Booking.objects.get(booking_reference=response.data["booking_reference"])
        self.assertEqual(response.data["hotel_id"], self.london.big_ben.pk)
        self.assertEqual(response.data["nights"], 3)
        # (140 + 230) * 3 nights
        self.assertEqual(response.data["total_price"], "1110.00")
        self.assertEqual([room["room_number"] for room in response.data["rooms"]], ["303", "505"])
        self.assertEqual(booking.rooms.count(), 2)
        self.assertTrue(response["Location"].endswith(f"/{booking.booking_reference}/"))

    def test_prevent_double_booking_on_overlap(self) -> None:
        before = Booking.objects.count()

        response = self.client.post(
            self.create_url, self._payload(self.london.buckingham, (17,), 1, 4), format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT, response.data)
        self.assertIn(WATSON_REFERENCE, response.data["error"])
        self.assertEqual(response.data["issues"][0]["kind"], "room_unavailable")
        self.assertEqual(Booking.objects.count(), before)

    def test_rule_violation_returns_bad_request_with_issues(self) -> None:
        response = self.client.post(
            self.create_url, self._payload(self.london.westminster, (1,), 0, 2, people_count=3), format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual([issue["kind"] for issue in response.data["issues"]], ["capacity_exceeded"])

    def test_unknown_hotel_is_reported(self) -> None:
        payload = self._payload(self.london.westminster, (1,), 0, 2, people_count=1)
        payload["hotel_id"] = 999999

        response = self.client.post(self.create_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["issues"], [{"kind": "hotel_not_found", "detail": "Hotel not found"}])

    def test_empty_room_selection_is_rejected(self) -> None:
        payload = self._payload(self.london.westminster, (), 0, 2)

        response = self.client.post(self.create_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("room_ids", response.data)

    def test_booking_can_be_looked_up_by_reference(self) -> None:
        response = self.client.get(reverse("booking-detail", args=[SHERLOCK_REFERENCE]))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["guest_name"], "Sherlock Holmes")
        self.assertEqual(response.data["hotel_name"], "The Westminster Palace Hotel")
        self.assertEqual(response.data["check_in"], str(self.london.day(7)))

    def test_unknown_reference_returns_not_found(self) -> None:
        response = self.client.get(reverse("booking-detail", args=["BK00000000000000000"]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {"error": "Booking not found"})

    def test_search_for_a_party_too_large_finds_no_hotels(self) -> None:
        response = self._search(0, 2, 25)

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["total_hotels_found"], 0)
        self.assertEqual(response.data["hotels"], [])
        self.assertEqual(response.data["search_criteria"]["people_count"], 25)

    def test_booking_requests_still_cap_the_party_size(self) -> None:
        payload = self._payload(self.london.big_ben, (7,), 0, 2, people_count=25)

        response = self.client.post(self.create_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("people_count", response.data)

    def test_lookup_database_failure_returns_generic_error(self) -> None:
        with mock.patch.object(DjangoInventoryStore, "find_booking_by_reference", side_effect=DatabaseError("boom")):
            response = self.client.get(reverse("booking-detail", args=[SHERLOCK_REFERENCE]))

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data, {"error": "An error occurred while loading the booking"})
