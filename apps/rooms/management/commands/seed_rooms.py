from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand  # type: ignore
from django.db import transaction  # type: ignore
from django.db.models import Count  # type: ignore

from apps.rooms.models import Room, RoomType

STANDARD_FEATURES = {"wifi": True, "aircon": True, "tv": True, "minibar": False, "balcony": False, "cityView": False}
SUPERIOR_FEATURES = {**STANDARD_FEATURES, "minibar": True, "cityView": True}
DELUXE_FEATURES = {**SUPERIOR_FEATURES, "balcony": True}

# (room_number, room_type, floor, base_price, max_occupancy, features)
HOTEL_LAYOUT = [
    ("201", RoomType.STANDARD, 2, "1200", 2, {**STANDARD_FEATURES, "bedType": "twin"}),
    ("202", RoomType.STANDARD, 2, "1200", 2, {**STANDARD_FEATURES, "bedType": "double"}),
    ("203", RoomType.STANDARD, 2, "1200", 2, {**STANDARD_FEATURES, "bedType": "twin"}),
    ("204", RoomType.STANDARD, 2, "1200", 2, {**STANDARD_FEATURES, "bedType": "double"}),
    ("301", RoomType.SUPERIOR, 3, "1800", 2, {**SUPERIOR_FEATURES, "bedType": "queen"}),
    ("302", RoomType.SUPERIOR, 3, "1800", 2, {**SUPERIOR_FEATURES, "bedType": "queen"}),
    ("303", RoomType.SUPERIOR, 3, "1800", 2, {**SUPERIOR_FEATURES, "bedType": "twin"}),
    ("304", RoomType.SUPERIOR, 3, "1800", 2, {**SUPERIOR_FEATURES, "bedType": "queen"}),
    ("401", RoomType.DELUXE, 4, "2400", 3, {**DELUXE_FEATURES, "bedType": "king"}),
    ("402", RoomType.DELUXE, 4, "2400", 3, {**DELUXE_FEATURES, "bedType": "king"}),
    ("501", RoomType.DELUXE, 5, "2400", 3, {**DELUXE_FEATURES, "bedType": "king"}),
    ("502", RoomType.DELUXE, 5, "2400", 3, {**DELUXE_FEATURES, "bedType": "king"}),
    ("403", RoomType.FAMILY, 4, "3200", 4, {**DELUXE_FEATURES, "bedType": "king_twin"}),
    ("404", RoomType.FAMILY, 4, "3200", 4, {**DELUXE_FEATURES, "bedType": "king_twin"}),
]

DEMO_OCCUPIED = ("202", "301", "401", "403")
DEMO_MAINTENANCE = ("502",)


class Command(BaseCommand):
    help = "Seeds the hotel room inventory. Existing rooms are left untouched."

    def add_arguments(self, parser):  # type: ignore
        parser.add_argument(
            "--demo-statuses",
            action="store_true",
            help="Mark a few rooms occupied and one under maintenance for demos.",
        )

    def handle(self, *args, **options):  # type: ignore
        created_count = 0
        with transaction.atomic():
            for number, room_type, floor, price, occupancy, features in HOTEL_LAYOUT:
                _, created = Room.objects.get_or_create(
                    room_number=number,
                    defaults={
                        "room_type": room_type,
                        "floor": floor,
                        "base_price": Decimal(price),
                        "max_occupancy": occupancy,
                        "features": features,
                    },
                )
                if created:
                    created_count += 1

            if options["demo_statuses"]:
                Room.objects.filter(room_number__in=DEMO_OCCUPIED).update(status=Room.Status.OCCUPIED)
                Room.objects.filter(room_number__in=DEMO_MAINTENANCE).update(status=Room.Status.MAINTENANCE)
                self.stdout.write(
                    f"Set {len(DEMO_OCCUPIED)} rooms occupied and {len(DEMO_MAINTENANCE)} under maintenance"
                )

        self.stdout.write(f"Created {created_count} rooms, {len(HOTEL_LAYOUT) - created_count} already existed")

        summary = Room.objects.values("room_type", "status").annotate(count=Count("id")).order_by("room_type", "status")
        for row in summary:
            self.stdout.write(f"{row['room_type']}: {row['status']} = {row['count']}")

        self.stdout.write(self.style.SUCCESS("Room inventory ready"))
