"""Integration tests for room inventory endpoints."""

from __future__ import annotations

from decimal import Decimal
from io import StringIO

from django.core.management import call_command
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.rooms.models import Room, RoomType
from apps.rooms.services import room_service


def make_room(number: str, room_type: str, floor: int, price: str, **extra) -> Room:
    return Room.objects.create(
        room_number=number,
        room_type=room_type,
        floor=floor,
        base_price=Decimal(price),
        **extra,
    )


class RoomServiceTests(TestCase):
    def setUp(self) -> None:
        self.deluxe = make_room("401", RoomType.DELUXE, 4, "2400")
        self.standard_b = make_room("202", RoomType.STANDARD, 2, "1250", status=Room.Status.OCCUPIED)
        self.standard_a = make_room("201", RoomType.STANDARD, 2, "1200")
        self.family = make_room("403", RoomType.FAMILY, 4, "3200", status=Room.Status.MAINTENANCE)

    def test_available_rooms_are_ordered_by_type_then_number(self) -> None:
        availability = room_service.get_available_rooms()

        self.assertEqual(
            [room.room_number for room in availability.rooms],
            ["201", "202", "401", "403"],
        )

    def test_summary_covers_every_room_type_in_enum_order(self) -> None:
        summary = room_service.get_available_rooms().summary

        self.assertEqual([row.room_type for row in summary], list(RoomType.values))
        standard = summary[0]
        self.assertEqual((standard.available, standard.total), (1, 2))
        self.assertEqual(standard.base_price, Decimal("1200.00"))
        family = summary[3]
        self.assertEqual((family.available, family.total), (0, 1))
        zenith = summary[-1]
        self.assertEqual((zenith.available, zenith.total, zenith.base_price), (0, 0, Decimal("0.00")))

    def test_statistics_count_rooms_by_status(self) -> None:
        stats = room_service.get_room_statistics()

        self.assertEqual(stats["total"], 4)
        self.assertEqual(
            stats["by_status"],
            {"CLEAN": 2, "OCCUPIED": 1, "MAINTENANCE": 1},
        )

    def test_is_room_available_only_for_clean_rooms(self) -> None:
        self.assertTrue(room_service.is_room_available(self.standard_a.pk))
        self.assertFalse(room_service.is_room_available(self.standard_b.pk))
        self.assertFalse(room_service.is_room_available(999999))

    def test_all_rooms_ordered_by_floor_then_number(self) -> None:
        numbers = [room.room_number for room in room_service.get_all_rooms()]

        self.assertEqual(numbers, ["201", "202", "401", "403"])


class RoomAPITests(APITestCase):
    def setUp(self) -> None:
        make_room("201", RoomType.STANDARD, 2, "1200")
        make_room("301", RoomType.SUPERIOR, 3, "1800", status=Room.Status.OCCUPIED)
        make_room("302", RoomType.SUPERIOR, 3, "1800")

    def test_available_now_lists_rooms_and_summary(self) -> None:
        response = self.client.get(reverse("room-available-now"))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(len(response.data["rooms"]), 3)
        self.assertEqual(len(response.data["summary"]), len(RoomType.values))
        superior = response.data["summary"][1]
        self.assertEqual(superior["room_type"], "SUPERIOR")
        self.assertEqual(superior["available"], 1)
        self.assertEqual(superior["total"], 2)
        self.assertIn("timestamp", response.data)

    def test_statistics_endpoint(self) -> None:
        response = self.client.get(reverse("room-statistics"))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["total"], 3)
        self.assertEqual(response.data["by_status"]["OCCUPIED"], 1)

    def test_all_rooms_can_be_filtered(self) -> None:
        url = reverse("room-all-rooms")

        response = self.client.get(url, {"status": "CLEAN"})
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([room["room_number"] for room in response.data], ["201", "302"])

        response = self.client.get(url, {"floor": 3, "room_type": "SUPERIOR"})
        self.assertEqual([room["room_number"] for room in response.data], ["301", "302"])

    def test_room_detail(self) -> None:
        room = Room.objects.get(room_number="201")

        response = self.client.get(reverse("room-detail", args=[room.pk]))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["room_type_display"], "Standard")
        self.assertEqual(response.data["status"], "CLEAN")


class SeedRoomsCommandTests(TestCase):
    def test_seed_is_idempotent(self) -> None:
        call_command("seed_rooms", stdout=StringIO())
        call_command("seed_rooms", stdout=StringIO())

        self.assertEqual(Room.objects.count(), 14)
        self.assertFalse(Room.objects.exclude(status=Room.Status.CLEAN).exists())
        self.assertEqual(Room.objects.get(room_number="403").room_type, RoomType.FAMILY)

    def test_demo_statuses(self) -> None:
        out = StringIO()
        call_command("seed_rooms", "--demo-statuses", stdout=out)

        occupied = set(
            Room.objects.filter(status=Room.Status.OCCUPIED).values_list("room_number", flat=True)
        )
        self.assertEqual(occupied, {"202", "301", "401", "403"})
        self.assertEqual(Room.objects.get(room_number="502").status, Room.Status.MAINTENANCE)
        self.assertIn("Room inventory ready", out.getvalue())
