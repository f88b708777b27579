"""URL routing for the hotels domain."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import HotelSearchView

urlpatterns = [
    path("search/", HotelSearchView.as_view(), name="hotel-search"),
]
