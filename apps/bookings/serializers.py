"""Serializers for the booking API."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.hotels.serializers import RoomSerializer

from .models import Booking

MAX_PEOPLE_PER_BOOKING = 20


class AvailabilityQuerySerializer(serializers.Serializer):
    """Query string of the availability search."""

    check_in = serializers.DateField(input_formats=["%Y-%m-%d"])
    check_out = serializers.DateField(input_formats=["%Y-%m-%d"])
    people_count = serializers.IntegerField(min_value=1)


class RoomAvailabilitySerializer(serializers.Serializer):
    room_id = serializers.IntegerField()
    room_number = serializers.CharField()
    room_type = serializers.CharField()
    max_occupancy = serializers.IntegerField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    total_price = serializers.DecimalField(max_digits=12, decimal_places=2)


class HotelAvailabilitySerializer(serializers.Serializer):
    hotel_id = serializers.IntegerField()
    hotel_name = serializers.CharField()
    address = serializers.CharField()
    phone_number = serializers.CharField()
    email = serializers.CharField()
    available_rooms = RoomAvailabilitySerializer(many=True)
    total_available_capacity = serializers.IntegerField()
    can_accommodate_guests = serializers.BooleanField()


class AvailabilitySearchSerializer(serializers.Serializer):
    search_criteria = serializers.SerializerMethodField()
    hotels = HotelAvailabilitySerializer(many=True)
    total_hotels_found = serializers.IntegerField()
    total_rooms_available = serializers.IntegerField()

    def get_search_criteria(self, search) -> dict:  # type: ignore
        return {
            "check_in": search.check_in.isoformat(),
            "check_out": search.check_out.isoformat(),
            "people_count": search.people_count,
            "nights": search.nights,
        }


class BookingCreateSerializer(serializers.Serializer):
    """Shape of a booking request; business rules run in the booking core."""

    hotel_id = serializers.IntegerField(min_value=1)
    room_ids = serializers.ListField(
        child=serializers.IntegerField(min_value=1),
        allow_empty=False,
        error_messages={"empty": "At least one room must be selected"},
    )
    guest_name = serializers.CharField(min_length=1, max_length=100)
    people_count = serializers.IntegerField(min_value=1, max_value=MAX_PEOPLE_PER_BOOKING)
    check_in = serializers.DateField(input_formats=["%Y-%m-%d"])
    check_out = serializers.DateField(input_formats=["%Y-%m-%d"])


class BookingSerializer(serializers.ModelSerializer):
    """Detailed booking representation."""

    hotel_id = serializers.ReadOnlyField(source="hotel.id")
    hotel_name = serializers.ReadOnlyField(source="hotel.name")
    rooms = RoomSerializer(many=True, read_only=True)
    nights = serializers.ReadOnlyField()

    class Meta:
        model = Booking
        fields = [
            "id",
            "booking_reference",
            "hotel_id",
            "hotel_name",
            "guest_name",
            "people_count",
            "check_in",
            "check_out",
            "nights",
            "total_price",
            "rooms",
            "created_at",
        ]
        read_only_fields = fields
