"""Serializers for the pricing API."""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings  # type: ignore
from rest_framework import serializers  # type: ignore

from apps.rooms.models import RoomType

from .models import PricingHistory


class PriceInfoSerializer(serializers.Serializer):
    """Current price of a room type with the aliases the front desk displays."""

    room_type = serializers.CharField()
    room_type_name = serializers.SerializerMethodField()
    base_price = serializers.DecimalField(max_digits=10, decimal_places=2)
    breakfast_price = serializers.DecimalField(max_digits=10, decimal_places=2)
    total_with_breakfast = serializers.DecimalField(max_digits=11, decimal_places=2)
    no_breakfast = serializers.DecimalField(source="base_price", max_digits=10, decimal_places=2)
    with_breakfast = serializers.DecimalField(source="total_with_breakfast", max_digits=11, decimal_places=2)
    seasonal_multiplier = serializers.DecimalField(max_digits=6, decimal_places=4)
    effective_from = serializers.DateTimeField()
    effective_until = serializers.DateTimeField(allow_null=True)

    def get_room_type_name(self, obj) -> str:  # type: ignore
        return str(RoomType(obj.room_type).label)


class PriceUpdateSerializer(serializers.Serializer):
    base_price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal("0"),
        max_value=Decimal("100000"),
        required=False,
    )
    breakfast_price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal("0"),
        max_value=Decimal("5000"),
        required=False,
    )
    seasonal_multiplier = serializers.DecimalField(
        max_digits=6,
        decimal_places=4,
        min_value=Decimal("0"),
        required=False,
    )
    reason = serializers.CharField(required=False, allow_blank=True, default="")

    def validate_seasonal_multiplier(self, value: Decimal) -> Decimal:
        if value <= 0:
            raise serializers.ValidationError("Seasonal multiplier must be greater than zero.")
        return value


class PriceCalculationQuerySerializer(serializers.Serializer):
    room_type = serializers.ChoiceField(choices=RoomType.choices)
    include_breakfast = serializers.BooleanField(default=False)
    nights = serializers.IntegerField(min_value=1, max_value=365, default=1)


class QuoteAmountsSerializer(serializers.Serializer):
    base_amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    breakfast_amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    total = serializers.DecimalField(max_digits=14, decimal_places=2)


class PriceQuoteSerializer(serializers.Serializer):
    room_type = serializers.CharField()
    nights = serializers.IntegerField()
    include_breakfast = serializers.BooleanField()
    calculation = QuoteAmountsSerializer(source="*")


class PricingHistoryQuerySerializer(serializers.Serializer):
    limit = serializers.IntegerField(
        min_value=1,
        max_value=100,
        default=lambda: settings.FRONT_DESK["PRICING_HISTORY_LIMIT"],
    )


class PricingHistorySerializer(serializers.ModelSerializer):
    class Meta:
        model = PricingHistory
        fields = [
            "id",
            "room_type",
            "old_base_price",
            "new_base_price",
            "old_breakfast_price",
            "new_breakfast_price",
            "reason",
            "changed_by",
            "changed_at",
        ]
        read_only_fields = fields
