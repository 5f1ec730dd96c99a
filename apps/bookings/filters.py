"""FilterSet definitions for walk-in bookings."""

from __future__ import annotations

import django_filters  # type: ignore

from apps.rooms.models import RoomType

from .models import WalkInBooking


class WalkInBookingFilterSet(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=WalkInBooking.Status.choices)
    room_type = django_filters.ChoiceFilter(field_name="room__room_type", choices=RoomType.choices)
    room_number = django_filters.CharFilter(field_name="room__room_number")

    class Meta:
        model = WalkInBooking
        fields = ["status", "room_type", "room_number"]
