"""Tests for the walk-in booking transaction."""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal
from unittest import mock

from django.conf import settings
from django.db import connection
from django.test import TestCase
from django.utils import timezone

from apps.bookings.events import WalkInBookingCreated
from apps.bookings.models import WalkInBooking
from apps.bookings.services import (
    BookingNotFoundError,
    GuestDetails,
    InvalidDateRangeError,
    RoomNotAvailableError,
    WalkInBookingRequest,
    booking_service,
    breakfast_rate_for,
    count_nights,
)
from apps.pricing.services import pricing_service
from apps.rooms.models import Room, RoomType
from shared.application.message_bus import message_bus

GUEST = GuestDetails(
    first_name="Somchai",
    last_name="Jaidee",
    phone="+66812345678",
    id_type=WalkInBooking.IdType.NATIONAL_ID,
    id_number="1101700203451",
)


def make_room(number: str = "101", room_type: str = RoomType.STANDARD, price: str = "1200", **extra) -> Room:
    return Room.objects.create(
        room_number=number,
        room_type=room_type,
        floor=int(number[0]),
        base_price=Decimal(price),
        **extra,
    )


def checkin_request(room: Room, *, days: float = 2, breakfast: bool = False) -> WalkInBookingRequest:
    return WalkInBookingRequest(
        room_id=room.pk,
        guest=GUEST,
        check_out_date=timezone.now() + timedelta(days=days),
        breakfast_included=breakfast,
    )


class CreateWalkInBookingTests(TestCase):
    def test_two_night_stay_with_breakfast(self) -> None:
        room = make_room()

        result = booking_service.create_walk_in_booking(checkin_request(room, breakfast=True))

        self.assertEqual(result.nights, 2)
        self.assertEqual(result.room_total, Decimal("2400.00"))
        self.assertEqual(result.breakfast_total, Decimal("500.00"))
        self.assertEqual(result.total_amount, Decimal("2900.00"))
        self.assertEqual((result.room_number, result.room_type, result.floor), ("101", "STANDARD", 1))

        room.refresh_from_db()
        self.assertEqual(room.status, Room.Status.OCCUPIED)

        booking = WalkInBooking.objects.get()
        self.assertEqual(booking, result.booking)
        self.assertTrue(booking.booking_reference.startswith("WI"))
        self.assertEqual(len(booking.booking_reference), 10)
        self.assertEqual(booking.total_amount, Decimal("2900.00"))
        self.assertEqual(booking.room_price, Decimal("1200.00"))
        self.assertEqual(booking.status, WalkInBooking.Status.CHECKED_IN)
        self.assertTrue(booking.breakfast_included)

    def test_partial_day_counts_as_a_night(self) -> None:
        room = make_room()

        result = booking_service.create_walk_in_booking(checkin_request(room, days=1 / 24))

        self.assertEqual(result.nights, 1)
        self.assertEqual(result.total_amount, Decimal("1200.00"))

    def test_breakfast_uses_fixed_rate_per_room_type(self) -> None:
        family = make_room("403", RoomType.FAMILY, "3200")
        hop_in = make_room("105", RoomType.HOP_IN, "800")

        family_result = booking_service.create_walk_in_booking(checkin_request(family, days=3, breakfast=True))
        hop_in_result = booking_service.create_walk_in_booking(checkin_request(hop_in, days=1, breakfast=True))

        self.assertEqual(family_result.breakfast_total, Decimal("1050.00"))
        self.assertEqual(family_result.total_amount, Decimal("10650.00"))
        self.assertEqual(hop_in_result.breakfast_total, Decimal("150.00"))

    def test_room_price_ignores_rate_card(self) -> None:
        room = make_room()
        pricing_service.update_price(RoomType.STANDARD, base_price=Decimal("5000"), breakfast_price=Decimal("900"))

        result = booking_service.create_walk_in_booking(checkin_request(room, days=1, breakfast=True))

        self.assertEqual(result.room_total, Decimal("1200.00"))
        self.assertEqual(result.breakfast_total, Decimal("250.00"))

    def test_occupied_or_maintenance_room_is_rejected(self) -> None:
        for number, room_status in (("102", Room.Status.OCCUPIED), ("103", Room.Status.MAINTENANCE)):
            room = make_room(number, status=room_status)

            with self.assertRaises(RoomNotAvailableError):
                booking_service.create_walk_in_booking(checkin_request(room))

            room.refresh_from_db()
            self.assertEqual(room.status, room_status)
        self.assertFalse(WalkInBooking.objects.exists())

    def test_missing_room_is_rejected(self) -> None:
        request = WalkInBookingRequest(
            room_id=424242,
            guest=GUEST,
            check_out_date=timezone.now() + timedelta(days=1),
        )

        with self.assertRaises(RoomNotAvailableError):
            booking_service.create_walk_in_booking(request)

    def test_second_booking_for_same_room_is_rejected(self) -> None:
        room = make_room()
        booking_service.create_walk_in_booking(checkin_request(room))

        with self.assertRaises(RoomNotAvailableError):
            booking_service.create_walk_in_booking(checkin_request(room))

        self.assertEqual(WalkInBooking.objects.count(), 1)

    def test_checkout_not_in_future_is_rejected(self) -> None:
        room = make_room()

        for days in (0, -1):
            with self.assertRaises(InvalidDateRangeError):
                booking_service.create_walk_in_booking(checkin_request(room, days=days))

        room.refresh_from_db()
        self.assertEqual(room.status, Room.Status.CLEAN)
        self.assertFalse(WalkInBooking.objects.exists())

    def test_stay_longer_than_limit_is_rejected(self) -> None:
        room = make_room(room_type=RoomType.ZENITH, price="5000")
        limit = settings.FRONT_DESK["MAX_STAY_NIGHTS"]

        with self.assertRaises(InvalidDateRangeError):
            booking_service.create_walk_in_booking(checkin_request(room, days=limit + 1))

        room.refresh_from_db()
        self.assertEqual(room.status, Room.Status.CLEAN)
        result = booking_service.create_walk_in_booking(checkin_request(room, days=limit))
        self.assertEqual(result.nights, limit)

    def test_failed_insert_leaves_room_clean(self) -> None:
        room = make_room()

        with mock.patch.object(WalkInBooking.objects, "create", side_effect=RuntimeError("disk full")):
            with self.assertRaises(RuntimeError):
                booking_service.create_walk_in_booking(checkin_request(room))

        room.refresh_from_db()
        self.assertEqual(room.status, Room.Status.CLEAN)

    def test_publishes_event_after_commit(self) -> None:
        room = make_room()

        with mock.patch.object(message_bus, "publish_events") as publish:
            with self.captureOnCommitCallbacks(execute=True):
                result = booking_service.create_walk_in_booking(checkin_request(room, breakfast=True))

        (events,), _ = publish.call_args
        event = events[0]
        self.assertIsInstance(event, WalkInBookingCreated)
        self.assertEqual(event.booking_reference, result.booking.booking_reference)
        self.assertEqual(event.room_number, "101")
        self.assertEqual(event.nights, 2)
        self.assertEqual(event.total_amount, Decimal("2900.00"))

    def test_rejected_booking_publishes_nothing(self) -> None:
        room = make_room(status=Room.Status.OCCUPIED)

        with mock.patch.object(message_bus, "publish_events") as publish:
            with self.captureOnCommitCallbacks(execute=True) as callbacks:
                with self.assertRaises(RoomNotAvailableError):
                    booking_service.create_walk_in_booking(checkin_request(room))

        self.assertEqual(callbacks, [])
        publish.assert_not_called()


class GuestIdEncryptionTests(TestCase):
    def test_id_number_is_encrypted_at_rest(self) -> None:
        room = make_room()
        result = booking_service.create_walk_in_booking(checkin_request(room))

        with connection.cursor() as cursor:
            cursor.execute(
                "SELECT guest_id_number FROM bookings_walkinbooking WHERE id = %s",
                [result.booking.pk],
            )
            (stored,) = cursor.fetchone()

        self.assertNotIn(GUEST.id_number, stored)
        self.assertEqual(WalkInBooking.objects.get(pk=result.booking.pk).guest_id_number, GUEST.id_number)


class BookingQueryTests(TestCase):
    def test_lookup_by_reference(self) -> None:
        room = make_room()
        created = booking_service.create_walk_in_booking(checkin_request(room)).booking

        booking = booking_service.get_booking_by_reference(created.booking_reference)

        self.assertEqual(booking.pk, created.pk)
        self.assertEqual(booking.room.room_number, "101")

    def test_unknown_reference_raises(self) -> None:
        with self.assertRaises(BookingNotFoundError):
            booking_service.get_booking_by_reference("WIDEADBEEF")

    def test_all_bookings_newest_first(self) -> None:
        first = booking_service.create_walk_in_booking(checkin_request(make_room("101"))).booking
        second = booking_service.create_walk_in_booking(checkin_request(make_room("102"))).booking

        self.assertEqual(list(booking_service.get_all_bookings()), [second, first])


class PricingHelpersTests(TestCase):
    def test_breakfast_rate_table(self) -> None:
        self.assertEqual(breakfast_rate_for(RoomType.STANDARD), Decimal("250"))
        self.assertEqual(breakfast_rate_for(RoomType.ZENITH), Decimal("350"))
        self.assertEqual(breakfast_rate_for(RoomType.HOP_IN), Decimal("150"))
        self.assertEqual(breakfast_rate_for("PENTHOUSE"), Decimal("250"))

    def test_count_nights_rounds_up(self) -> None:
        now = timezone.now()

        self.assertEqual(count_nights(now + timedelta(hours=25), now), 2)
        self.assertEqual(count_nights(now + timedelta(days=1), now), 1)
        self.assertEqual(count_nights(now, now), 0)
        self.assertLess(count_nights(now - timedelta(days=1), now), 1)
