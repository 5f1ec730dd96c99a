"""Walk-in booking model."""

from __future__ import annotations

import secrets
from decimal import Decimal

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.infrastructure.fields import EncryptedCharField


class WalkInBooking(models.Model):
    """A stay booked at the front desk, starting at the moment of creation."""

    class Status(models.TextChoices):
        CHECKED_IN = "CHECKED_IN", _("Checked in")
        CHECKED_OUT = "CHECKED_OUT", _("Checked out")
        CANCELLED = "CANCELLED", _("Cancelled")

    class IdType(models.TextChoices):
        PASSPORT = "PASSPORT", _("Passport")
        NATIONAL_ID = "NATIONAL_ID", _("National ID")
        DRIVERS_LICENSE = "DRIVERS_LICENSE", _("Driver's license")

    booking_reference = models.CharField(max_length=12, unique=True, editable=False)
    guest_first_name = models.CharField(max_length=100)
    guest_last_name = models.CharField(max_length=100)
    guest_phone = models.CharField(max_length=32)
    guest_id_type = models.CharField(max_length=20, choices=IdType.choices)
    guest_id_number = EncryptedCharField(help_text=_("Stored encrypted."))
    room = models.ForeignKey(
        "rooms.Room",
        on_delete=models.PROTECT,
        related_name="walk_in_bookings",
    )
    check_in_date = models.DateTimeField()
    check_out_date = models.DateTimeField()
    room_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        help_text=_("Nightly room price at the moment of booking."),
    )
    breakfast_included = models.BooleanField(default=False)
    total_amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.CHECKED_IN,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Walk-in booking")
        verbose_name_plural = _("Walk-in bookings")
        ordering = ["-created_at", "-id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(check_out_date__gt=models.F("check_in_date")),
                name="walkin_checkout_after_checkin",
            ),
        ]
        indexes = [
            models.Index(fields=["status"], name="walkin_status_idx"),
            models.Index(fields=["room", "status"], name="walkin_room_status_idx"),
        ]

    def __str__(self) -> str:
        return f"Walk-in #{self.booking_reference} in room {self.room_id}"

    @property
    def guest_full_name(self) -> str:
        return f"{self.guest_first_name} {self.guest_last_name}"

    def save(self, *args, **kwargs):  # type: ignore
        if self._state.adding and not self.booking_reference:
            self.booking_reference = self.generate_booking_reference()
        super().save(*args, **kwargs)

    @staticmethod
    def generate_booking_reference() -> str:
        reference = "WI" + secrets.token_hex(4).upper()
        while WalkInBooking.objects.filter(booking_reference=reference).exists():
            reference = "WI" + secrets.token_hex(4).upper()
        return reference
