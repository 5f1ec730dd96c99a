"""Room inventory models."""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class RoomType(models.TextChoices):
    """Room categories. Declaration order is the canonical display order."""

    STANDARD = "STANDARD", _("Standard")
    SUPERIOR = "SUPERIOR", _("Superior")
    DELUXE = "DELUXE", _("Deluxe")
    FAMILY = "FAMILY", _("Family")
    HOP_IN = "HOP_IN", _("Hop in")
    ZENITH = "ZENITH", _("Zenith")


class Room(models.Model):
    """A bookable hotel room."""

    class Status(models.TextChoices):
        CLEAN = "CLEAN", _("Clean")
        OCCUPIED = "OCCUPIED", _("Occupied")
        MAINTENANCE = "MAINTENANCE", _("Maintenance")

    room_number = models.CharField(max_length=10, unique=True)
    room_type = models.CharField(max_length=20, choices=RoomType.choices)
    floor = models.PositiveSmallIntegerField()
    max_occupancy = models.PositiveSmallIntegerField(default=2)
    features = models.JSONField(
        default=dict,
        blank=True,
        help_text=_("Bed type and amenities, e.g. {\"bedType\": \"king\", \"wifi\": true}."),
    )
    base_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text=_("Nightly price charged for walk-in bookings of this room."),
    )
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.CLEAN,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Room")
        verbose_name_plural = _("Rooms")
        ordering = ["floor", "room_number"]
        indexes = [
            models.Index(fields=["status"], name="room_status_idx"),
            models.Index(fields=["room_type", "status"], name="room_type_status_idx"),
        ]

    def __str__(self) -> str:
        return f"Room {self.room_number} ({self.room_type})"

    @property
    def is_available(self) -> bool:
        return self.status == self.Status.CLEAN
