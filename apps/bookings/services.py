"""Walk-in booking transaction."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from django.conf import settings  # type: ignore
from django.db.models import QuerySet  # type: ignore
from django.utils import timezone  # type: ignore

from apps.rooms.models import Room, RoomType
from shared.application.uow import DjangoUnitOfWork
from shared.domain.value_objects import Money

from .events import WalkInBookingCreated
from .models import WalkInBooking

# Booking-time breakfast is a fixed per-type rate, independent of the
# editable rate card in apps.pricing.
BREAKFAST_RATES = {
    RoomType.STANDARD: Decimal("250"),
    RoomType.SUPERIOR: Decimal("250"),
    RoomType.DELUXE: Decimal("250"),
    RoomType.FAMILY: Decimal("350"),
    RoomType.HOP_IN: Decimal("150"),
    RoomType.ZENITH: Decimal("350"),
}
DEFAULT_BREAKFAST_RATE = Decimal("250")

SECONDS_PER_DAY = 24 * 60 * 60


class BookingError(Exception):
    """Base class for walk-in booking errors."""


class RoomNotAvailableError(BookingError):
    """Raised when the room does not exist or is not clean."""


class InvalidDateRangeError(BookingError):
    """Raised when the check-out is not in the future."""


class BookingNotFoundError(BookingError):
    """Raised when no booking has the given reference."""


@dataclass(frozen=True)
class GuestDetails:
    first_name: str
    last_name: str
    phone: str
    id_type: str
    id_number: str


@dataclass(frozen=True)
class WalkInBookingRequest:
    room_id: int
    guest: GuestDetails
    check_out_date: datetime
    breakfast_included: bool = False


@dataclass(frozen=True)
class BookingResult:
    booking: WalkInBooking
    room_number: str
    room_type: str
    floor: int
    nights: int
    room_total: Decimal
    breakfast_total: Decimal
    total_amount: Decimal


def breakfast_rate_for(room_type: str) -> Decimal:
    return BREAKFAST_RATES.get(room_type, DEFAULT_BREAKFAST_RATE)


def count_nights(check_out: datetime, now: datetime) -> int:
    """Started days between ``now`` and ``check_out``; zero or less when not in the future."""

    return math.ceil((check_out - now).total_seconds() / SECONDS_PER_DAY)


class BookingService:
    """Creates and looks up walk-in bookings."""

    def create_walk_in_booking(self, request: WalkInBookingRequest) -> BookingResult:
        """Check a walk-in guest into a clean room.

        The room row is locked, priced from its own nightly rate and flipped
        to OCCUPIED with a conditional update in the same transaction as the
        booking insert. Losing a race for the room raises
        :class:`RoomNotAvailableError` and leaves nothing behind.
        """

        currency = settings.FRONT_DESK["CURRENCY"]

        with DjangoUnitOfWork() as uow:
            room = Room.objects.select_for_update().filter(pk=request.room_id).first()
            if room is None or room.status != Room.Status.CLEAN:
                raise RoomNotAvailableError("Room not available")

            now = timezone.now()
            nights = count_nights(request.check_out_date, now)
            if nights <= 0:
                raise InvalidDateRangeError("Check-out date must be in the future")
            max_nights = settings.FRONT_DESK["MAX_STAY_NIGHTS"]
            if nights > max_nights:
                raise InvalidDateRangeError(f"Stay cannot exceed {max_nights} nights")

            room_total = Money(room.base_price, currency) * nights
            if request.breakfast_included:
                breakfast_total = Money(breakfast_rate_for(room.room_type), currency) * nights
            else:
                breakfast_total = Money.zero(currency)
            total_amount = room_total + breakfast_total

            flipped = Room.objects.filter(pk=room.pk, status=Room.Status.CLEAN).update(
                status=Room.Status.OCCUPIED, updated_at=now
            )
            if flipped == 0:
                raise RoomNotAvailableError("Room not available")

            booking = WalkInBooking.objects.create(
                guest_first_name=request.guest.first_name,
                guest_last_name=request.guest.last_name,
                guest_phone=request.guest.phone,
                guest_id_type=request.guest.id_type,
                guest_id_number=request.guest.id_number,
                room=room,
                check_in_date=now,
                check_out_date=request.check_out_date,
                room_price=room.base_price,
                breakfast_included=request.breakfast_included,
                total_amount=total_amount.rounded(),
            )
            room.status = Room.Status.OCCUPIED

            uow.add_event(
                WalkInBookingCreated(
                    aggregate_id=booking.booking_reference,
                    booking_reference=booking.booking_reference,
                    room_number=room.room_number,
                    room_type=room.room_type,
                    check_out_date=booking.check_out_date,
                    nights=nights,
                    total_amount=booking.total_amount,
                )
            )

        return BookingResult(
            booking=booking,
            room_number=room.room_number,
            room_type=room.room_type,
            floor=room.floor,
            nights=nights,
            room_total=room_total.rounded(),
            breakfast_total=breakfast_total.rounded(),
            total_amount=total_amount.rounded(),
        )

    def get_booking_by_reference(self, reference: str) -> WalkInBooking:
        booking = WalkInBooking.objects.select_related("room").filter(booking_reference=reference).first()
        if booking is None:
            raise BookingNotFoundError(f"Booking {reference} not found")
        return booking

    def get_all_bookings(self) -> QuerySet[WalkInBooking]:
        return WalkInBooking.objects.select_related("room").order_by("-created_at", "-id")


booking_service = BookingService()
