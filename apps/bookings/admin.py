"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    """Bookings are created through the API only and never edited."""

    list_display = (
        "booking_reference",
        "hotel",
        "guest_name",
        "people_count",
        "check_in",
        "check_out",
        "total_price",
        "created_at",
    )
    list_filter = ("hotel", "check_in", "check_out")
    search_fields = ("booking_reference", "guest_name", "hotel__name")
    list_select_related = ("hotel",)
    filter_horizontal = ("rooms",)

    def has_add_permission(self, request):  # type: ignore
        return False

    def has_change_permission(self, request, obj=None):  # type: ignore
        return False

    def has_delete_permission(self, request, obj=None):  # type: ignore
        return False
