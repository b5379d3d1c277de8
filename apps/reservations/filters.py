"""FilterSet definitions for the reservation lists."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Reservation


class ReservationFilterSet(django_filters.FilterSet):
    """Narrows the admin reservation list by room, state and stay dates."""

    room = django_filters.NumberFilter(field_name="room_id", lookup_expr="exact")
    processed = django_filters.NumberFilter(field_name="processed", lookup_expr="exact")
    arriving_from = django_filters.DateFilter(field_name="start_date", lookup_expr="gte")
    arriving_to = django_filters.DateFilter(field_name="start_date", lookup_expr="lte")
    guest = django_filters.CharFilter(method="filter_guest")

    class Meta:
        model = Reservation
        fields = ["room", "processed"]

    def filter_guest(self, queryset, name, value):  # type: ignore
        if not value:
            return queryset
        return queryset.filter(last_name__icontains=value) | queryset.filter(email__icontains=value)
