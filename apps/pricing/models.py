"""Rate card models: effective-dated room-type prices and their audit trail."""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.db.models import Q  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from apps.rooms.models import RoomType


class RoomTypePricingQuerySet(models.QuerySet):
    def current(self, room_type: str, at=None):  # type: ignore
        """Rows in force for ``room_type`` at ``at`` (now by default), newest first."""

        at = at or timezone.now()
        return (
            self.filter(room_type=room_type, is_active=True, effective_from__lte=at)
            .filter(Q(effective_until__isnull=True) | Q(effective_until__gte=at))
            .order_by("-effective_from")
        )


class RoomTypePricing(models.Model):
    """One version of the price for a room type.

    Rows are append-only: a price change closes the current row by setting
    ``is_active=False`` and ``effective_until`` and inserts a new one.
    """

    room_type = models.CharField(max_length=20, choices=RoomType.choices)
    base_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    breakfast_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("250.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    seasonal_multiplier = models.DecimalField(
        max_digits=6,
        decimal_places=4,
        default=Decimal("1.0000"),
        validators=[MinValueValidator(Decimal("0.0000"))],
    )
    is_active = models.BooleanField(default=True)
    effective_from = models.DateTimeField(default=timezone.now)
    effective_until = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = RoomTypePricingQuerySet.as_manager()

    class Meta:
        verbose_name = _("Room type price")
        verbose_name_plural = _("Room type prices")
        ordering = ["room_type", "-effective_from"]
        indexes = [
            models.Index(fields=["room_type", "is_active"], name="pricing_type_active_idx"),
            models.Index(fields=["effective_from", "effective_until"], name="pricing_effective_idx"),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["room_type"],
                condition=Q(is_active=True),
                name="pricing_one_active_per_room_type",
            ),
        ]

    def __str__(self) -> str:
        state = "active" if self.is_active else "closed"
        return f"{self.room_type} {self.base_price} ({state})"


class PricingHistory(models.Model):
    """Immutable record of a base or breakfast price change."""

    room_type = models.CharField(max_length=20, choices=RoomType.choices)
    old_base_price = models.DecimalField(max_digits=10, decimal_places=2)
    new_base_price = models.DecimalField(max_digits=10, decimal_places=2)
    old_breakfast_price = models.DecimalField(max_digits=10, decimal_places=2)
    new_breakfast_price = models.DecimalField(max_digits=10, decimal_places=2)
    reason = models.TextField(blank=True)
    changed_by = models.CharField(max_length=150, default="system")
    changed_at = models.DateTimeField(default=timezone.now)

    class Meta:
        verbose_name = _("Pricing history entry")
        verbose_name_plural = _("Pricing history")
        ordering = ["-changed_at", "-id"]
        indexes = [
            models.Index(fields=["room_type", "-changed_at"], name="pricing_history_type_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.room_type}: {self.old_base_price} -> {self.new_base_price}"
