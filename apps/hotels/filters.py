"""FilterSet definitions for hotel search."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Hotel


class HotelFilterSet(django_filters.FilterSet):
    """Case-insensitive partial match on the hotel name; blank returns all."""

    name = django_filters.CharFilter(method="filter_name")

    class Meta:
        model = Hotel
        fields = ["name"]

    def filter_name(self, queryset, name, value):  # type: ignore
        value = (value or "").strip()
        if not value:
            return queryset
        return queryset.filter(name__icontains=value)
