"""Serializers for the hotel inventory."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Hotel, Room


class RoomSerializer(serializers.ModelSerializer):
    room_type = serializers.ReadOnlyField(source="room_type.name")
    max_occupancy = serializers.ReadOnlyField(source="room_type.max_occupancy")

    class Meta:
        model = Room
        fields = ["id", "room_number", "room_type", "max_occupancy", "price"]
        read_only_fields = fields


class HotelSerializer(serializers.ModelSerializer):
    rooms = RoomSerializer(many=True, read_only=True)

    class Meta:
        model = Hotel
        fields = ["id", "name", "address", "phone_number", "email", "rooms"]
        read_only_fields = fields
