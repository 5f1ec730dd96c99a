"""FilterSet definitions for room listings."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Room, RoomType


class RoomFilterSet(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=Room.Status.choices)
    room_type = django_filters.ChoiceFilter(choices=RoomType.choices)
    floor = django_filters.NumberFilter(field_name="floor", lookup_expr="exact")
    min_occupancy = django_filters.NumberFilter(field_name="max_occupancy", lookup_expr="gte")

    class Meta:
        model = Room
        fields = ["status", "room_type", "floor"]
