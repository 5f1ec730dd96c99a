"""Serializers for the rooms domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Room


class RoomSerializer(serializers.ModelSerializer):
    status_display = serializers.ReadOnlyField(source="get_status_display")
    room_type_display = serializers.ReadOnlyField(source="get_room_type_display")

    class Meta:
        model = Room
        fields = [
            "id",
            "room_number",
            "room_type",
            "room_type_display",
            "floor",
            "max_occupancy",
            "features",
            "base_price",
            "status",
            "status_display",
            "updated_at",
        ]
        read_only_fields = fields


class RoomTypeSummarySerializer(serializers.Serializer):
    room_type = serializers.CharField()
    available = serializers.IntegerField()
    total = serializers.IntegerField()
    base_price = serializers.DecimalField(max_digits=10, decimal_places=2)


class RoomAvailabilitySerializer(serializers.Serializer):
    rooms = RoomSerializer(many=True)
    summary = RoomTypeSummarySerializer(many=True)


class RoomStatisticsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    by_status = serializers.DictField(child=serializers.IntegerField())
