"""URL routing for the booking domain."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import AvailableRoomsView, BookingCreateView, BookingDetailView

urlpatterns = [
    path("", BookingCreateView.as_view(), name="booking-create"),
    path("available-rooms/", AvailableRoomsView.as_view(), name="booking-available-rooms"),
    path("<str:reference>/", BookingDetailView.as_view(), name="booking-detail"),
]
