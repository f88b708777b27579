"""Hotel API views."""

from __future__ import annotations

from django.db.models import Prefetch  # type: ignore
from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import generics, permissions  # type: ignore

from .filters import HotelFilterSet
from .models import Hotel, Room
from .serializers import HotelSerializer


class HotelSearchView(generics.ListAPIView):
    """Search hotels by name. Without a name every hotel is returned."""

    serializer_class = HotelSerializer
    permission_classes = [permissions.AllowAny]
    filter_backends = [DjangoFilterBackend]
    filterset_class = HotelFilterSet
    pagination_class = None

    def get_queryset(self):  # type: ignore
        rooms = Room.objects.select_related("room_type").order_by("room_number")
        return Hotel.objects.prefetch_related(Prefetch("rooms", queryset=rooms)).order_by("name", "id")
