"""Admin registration for hotel inventory."""

from __future__ import annotations

from django.contrib import admin

from .models import Hotel, Room, RoomType


class RoomInline(admin.TabularInline):
    model = Room
    extra = 0
    fields = ("room_number", "room_type", "price")


@admin.register(Hotel)
class HotelAdmin(admin.ModelAdmin):
    list_display = ("name", "address", "phone_number", "email")
    search_fields = ("name", "address")
    inlines = [RoomInline]


@admin.register(RoomType)
class RoomTypeAdmin(admin.ModelAdmin):
    list_display = ("name", "max_occupancy")
    search_fields = ("name",)


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ("room_number", "hotel", "room_type", "price")
    list_filter = ("hotel", "room_type")
    search_fields = ("room_number", "hotel__name")
    list_select_related = ("hotel", "room_type")

    def get_readonly_fields(self, request, obj=None):  # type: ignore
        # A room never changes hotel once created
        if obj is not None:
            return ("hotel",)
        return ()
