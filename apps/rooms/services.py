"""Read-side queries over the room inventory."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from django.db.models import Count, Min, Q, QuerySet  # type: ignore

from .models import Room, RoomType

ROOM_TYPE_ORDER = {value: index for index, value in enumerate(RoomType.values)}


@dataclass(frozen=True)
class RoomTypeSummary:
    room_type: str
    available: int
    total: int
    base_price: Decimal


@dataclass(frozen=True)
class RoomAvailability:
    rooms: list[Room]
    summary: list[RoomTypeSummary]


class RoomService:
    """Stateless queries over Room. Status changes belong to the booking service."""

    def is_room_available(self, room_id: int) -> bool:
        return Room.objects.filter(pk=room_id, status=Room.Status.CLEAN).exists()

    def get_all_rooms(self) -> QuerySet[Room]:
        return Room.objects.order_by("floor", "room_number")

    def get_available_rooms(self) -> RoomAvailability:
        """All rooms with their status, plus per-type availability in enum order."""

        rooms = sorted(
            Room.objects.all(),
            key=lambda room: (ROOM_TYPE_ORDER.get(room.room_type, len(ROOM_TYPE_ORDER)), room.room_number),
        )

        per_type = {
            row["room_type"]: row
            for row in Room.objects.values("room_type").annotate(
                total=Count("id"),
                available=Count("id", filter=Q(status=Room.Status.CLEAN)),
                min_price=Min("base_price"),
            ).order_by()
        }

        summary = []
        for room_type in RoomType.values:
            row = per_type.get(room_type)
            summary.append(
                RoomTypeSummary(
                    room_type=room_type,
                    available=row["available"] if row else 0,
                    total=row["total"] if row else 0,
                    base_price=row["min_price"] if row else Decimal("0.00"),
                )
            )
        return RoomAvailability(rooms=rooms, summary=summary)

    def get_room_statistics(self) -> dict:
        by_status = {
            row["status"]: row["count"]
            for row in Room.objects.values("status").annotate(count=Count("id")).order_by()
        }
        return {"total": Room.objects.count(), "by_status": by_status}


room_service = RoomService()
