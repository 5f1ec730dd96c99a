"""Serializers for walk-in check-in."""

from __future__ import annotations

from datetime import date, datetime, time

import structlog
from django.conf import settings  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore
from rest_framework import serializers  # type: ignore

from .models import WalkInBooking
from .services import (
    BookingError,
    GuestDetails,
    WalkInBookingRequest,
    booking_service,
)

logger = structlog.get_logger(__name__)


def at_check_out_time(day: date) -> datetime:
    """The hotel's check-out time on ``day``, in the hotel time zone."""

    check_out_time = time.fromisoformat(settings.FRONT_DESK["CHECK_OUT_TIME"])
    return timezone.make_aware(datetime.combine(day, check_out_time))


class CheckOutDateField(serializers.Field):
    """Accepts an ISO date-time, or a plain date meaning check-out time on that day."""

    default_error_messages = {
        "invalid": _("Check-out date must be an ISO 8601 date or date-time."),
        "not_future": _("Check-out date must be in the future"),
    }

    def to_internal_value(self, data):  # type: ignore
        if not isinstance(data, str):
            self.fail("invalid")
        try:
            day = serializers.DateField().to_internal_value(data)
        except serializers.ValidationError:
            pass
        else:
            if day <= timezone.localdate():
                self.fail("not_future")
            return at_check_out_time(day)
        try:
            return serializers.DateTimeField().to_internal_value(data)
        except serializers.ValidationError:
            self.fail("invalid")

    def to_representation(self, value):  # type: ignore
        return timezone.localtime(value).isoformat()


class GuestSerializer(serializers.Serializer):
    first_name = serializers.CharField(max_length=100)
    last_name = serializers.CharField(max_length=100)
    phone = serializers.CharField(max_length=32)
    id_type = serializers.ChoiceField(choices=WalkInBooking.IdType.choices)
    id_number = serializers.CharField(max_length=50)


class WalkInCheckInSerializer(serializers.Serializer):
    """Check-in request from the front desk."""

    room_id = serializers.IntegerField(min_value=1)
    guest = GuestSerializer()
    check_out_date = CheckOutDateField()
    breakfast_included = serializers.BooleanField(default=False)

    def create(self, validated_data):  # type: ignore
        request = WalkInBookingRequest(
            room_id=validated_data["room_id"],
            guest=GuestDetails(**validated_data["guest"]),
            check_out_date=validated_data["check_out_date"],
            breakfast_included=validated_data["breakfast_included"],
        )
        try:
            return booking_service.create_walk_in_booking(request)
        except BookingError as exc:
            logger.info("walkin.checkin_rejected", room_id=request.room_id, reason=str(exc))
            raise serializers.ValidationError({"non_field_errors": [str(exc)]})


class RoomSummarySerializer(serializers.Serializer):
    number = serializers.CharField(source="room_number")
    type = serializers.CharField(source="room_type")
    floor = serializers.IntegerField()


class PricingBreakdownSerializer(serializers.Serializer):
    room_total = serializers.DecimalField(max_digits=12, decimal_places=2)
    breakfast_total = serializers.DecimalField(max_digits=12, decimal_places=2)
    total_amount = serializers.DecimalField(max_digits=12, decimal_places=2)


class BookingConfirmationSerializer(serializers.Serializer):
    """Summary returned right after a successful check-in."""

    id = serializers.IntegerField(source="booking.id")
    reference = serializers.CharField(source="booking.booking_reference")
    guest = serializers.CharField(source="booking.guest_full_name")
    room = RoomSummarySerializer(source="*")
    check_in = serializers.DateTimeField(source="booking.check_in_date")
    check_out = serializers.DateTimeField(source="booking.check_out_date")
    nights = serializers.IntegerField()
    pricing = PricingBreakdownSerializer(source="*")
    breakfast_included = serializers.BooleanField(source="booking.breakfast_included")
    status = serializers.CharField(source="booking.status")


class WalkInBookingSerializer(serializers.ModelSerializer):
    reference = serializers.ReadOnlyField(source="booking_reference")
    guest = serializers.ReadOnlyField(source="guest_full_name")
    room = RoomSummarySerializer(read_only=True)
    check_in = serializers.DateTimeField(source="check_in_date", read_only=True)
    check_out = serializers.DateTimeField(source="check_out_date", read_only=True)

    class Meta:
        model = WalkInBooking
        fields = [
            "id",
            "reference",
            "guest",
            "room",
            "check_in",
            "check_out",
            "room_price",
            "total_amount",
            "breakfast_included",
            "status",
            "created_at",
        ]
        read_only_fields = fields


class GuestDetailSerializer(serializers.Serializer):
    name = serializers.CharField(source="guest_full_name")
    first_name = serializers.CharField(source="guest_first_name")
    last_name = serializers.CharField(source="guest_last_name")
    phone = serializers.CharField(source="guest_phone")
    id_type = serializers.CharField(source="guest_id_type")
    id_number = serializers.CharField(source="guest_id_number")


class WalkInBookingDetailSerializer(WalkInBookingSerializer):
    guest = GuestDetailSerializer(source="*", read_only=True)

    class Meta(WalkInBookingSerializer.Meta):
        fields = WalkInBookingSerializer.Meta.fields + ["updated_at"]
        read_only_fields = fields
