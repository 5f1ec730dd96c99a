"""Pricing engine: the single source of truth for room-type rates."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from django.conf import settings  # type: ignore
from django.db import IntegrityError  # type: ignore
from django.db.models import QuerySet  # type: ignore
from django.utils import timezone  # type: ignore

from apps.rooms.models import RoomType
from shared.application.uow import DjangoUnitOfWork
from shared.domain.value_objects import Money

from .events import PriceChanged, PricingInitialized
from .models import PricingHistory, RoomTypePricing

DEFAULT_BASE_PRICES = {
    RoomType.STANDARD: Decimal("1200.00"),
    RoomType.SUPERIOR: Decimal("1800.00"),
    RoomType.DELUXE: Decimal("2400.00"),
    RoomType.FAMILY: Decimal("3200.00"),
    RoomType.HOP_IN: Decimal("800.00"),
    RoomType.ZENITH: Decimal("5000.00"),
}
DEFAULT_BREAKFAST_PRICE = Decimal("250.00")
DEFAULT_SEASONAL_MULTIPLIER = Decimal("1.0000")

# Used when a room type is priced for the first time without a base price.
FALLBACK_BASE_PRICE = Decimal("0.00")


class PricingError(Exception):
    """Base class for rate card errors."""


class PriceNotFoundError(PricingError):
    """Raised when a room type has no price in force."""


class RoomTypeNotFoundError(PricingError):
    """Raised for a value that is not a known room type."""


class PricingConflictError(PricingError):
    """Raised when concurrent updates kept colliding on the same room type."""


@dataclass(frozen=True)
class PriceInfo:
    room_type: str
    base_price: Decimal
    breakfast_price: Decimal
    total_with_breakfast: Decimal
    seasonal_multiplier: Decimal
    effective_from: datetime
    effective_until: datetime | None

    @classmethod
    def from_row(cls, row: RoomTypePricing) -> "PriceInfo":
        return cls(
            room_type=row.room_type,
            base_price=row.base_price,
            breakfast_price=row.breakfast_price,
            total_with_breakfast=row.base_price + row.breakfast_price,
            seasonal_multiplier=row.seasonal_multiplier,
            effective_from=row.effective_from,
            effective_until=row.effective_until,
        )


@dataclass(frozen=True)
class PriceQuote:
    room_type: str
    nights: int
    include_breakfast: bool
    base_amount: Decimal
    breakfast_amount: Decimal
    total: Decimal


def _ensure_room_type(room_type: str) -> None:
    if room_type not in RoomType.values:
        raise RoomTypeNotFoundError(f"Unknown room type: {room_type}")


class PricingService:
    """Reads and versions the room-type rate card.

    Every change goes through :meth:`update_price`, which closes the
    current row and opens a new one inside a single transaction.
    """

    def get_current_price(self, room_type: str) -> PriceInfo:
        _ensure_room_type(room_type)
        row = RoomTypePricing.objects.current(room_type).first()
        if row is None:
            raise PriceNotFoundError(f"No current price for room type {room_type}")
        return PriceInfo.from_row(row)

    def get_all_current_prices(self) -> list[PriceInfo]:
        prices = []
        for room_type in RoomType.values:
            try:
                prices.append(self.get_current_price(room_type))
            except PriceNotFoundError:
                continue
        return prices

    def update_price(
        self,
        room_type: str,
        *,
        base_price: Decimal | None = None,
        breakfast_price: Decimal | None = None,
        seasonal_multiplier: Decimal | None = None,
        reason: str = "",
        changed_by: str = "system",
    ) -> PriceInfo:
        """Replace the current price of ``room_type``.

        ``None`` means "keep the previous value". The previous row is locked
        while it is read and closed, and the partial unique constraint on
        active rows rejects a racing first-time insert; that case is retried
        against the row the winner created.
        """

        _ensure_room_type(room_type)
        attempts = settings.FRONT_DESK["PRICING_UPDATE_ATTEMPTS"]
        for _ in range(attempts):
            try:
                return self._replace_current_row(
                    room_type,
                    base_price=base_price,
                    breakfast_price=breakfast_price,
                    seasonal_multiplier=seasonal_multiplier,
                    reason=reason,
                    changed_by=changed_by,
                )
            except IntegrityError:
                continue
        raise PricingConflictError(
            f"Price for room type {room_type} is being changed concurrently, try again"
        )

    def _replace_current_row(
        self,
        room_type: str,
        *,
        base_price: Decimal | None,
        breakfast_price: Decimal | None,
        seasonal_multiplier: Decimal | None,
        reason: str,
        changed_by: str,
    ) -> PriceInfo:
        with DjangoUnitOfWork() as uow:
            now = timezone.now()
            active_rows = list(
                RoomTypePricing.objects.select_for_update()
                .filter(room_type=room_type, is_active=True)
                .order_by("-effective_from")
            )
            current = next(
                (
                    row
                    for row in active_rows
                    if row.effective_from <= now
                    and (row.effective_until is None or row.effective_until >= now)
                ),
                None,
            )

            new_base = _pick(base_price, current and current.base_price, FALLBACK_BASE_PRICE)
            new_breakfast = _pick(breakfast_price, current and current.breakfast_price, DEFAULT_BREAKFAST_PRICE)
            new_multiplier = _pick(
                seasonal_multiplier, current and current.seasonal_multiplier, DEFAULT_SEASONAL_MULTIPLIER
            )

            if current is not None and (base_price is not None or breakfast_price is not None):
                PricingHistory.objects.create(
                    room_type=room_type,
                    old_base_price=current.base_price,
                    new_base_price=new_base,
                    old_breakfast_price=current.breakfast_price,
                    new_breakfast_price=new_breakfast,
                    reason=reason or "",
                    changed_by=changed_by or "system",
                    changed_at=now,
                )

            # Stale active rows (expired or scheduled) are closed too so the
            # one-active-row constraint holds for the new row.
            if active_rows:
                RoomTypePricing.objects.filter(pk__in=[row.pk for row in active_rows]).update(
                    is_active=False, effective_until=now
                )

            row = RoomTypePricing.objects.create(
                room_type=room_type,
                base_price=new_base,
                breakfast_price=new_breakfast,
                seasonal_multiplier=new_multiplier,
                is_active=True,
                effective_from=now,
                effective_until=None,
            )

            uow.add_event(
                PriceChanged(
                    aggregate_id=room_type,
                    room_type=room_type,
                    old_base_price=current.base_price if current else None,
                    new_base_price=row.base_price,
                    old_breakfast_price=current.breakfast_price if current else None,
                    new_breakfast_price=row.breakfast_price,
                    seasonal_multiplier=row.seasonal_multiplier,
                    changed_by=changed_by or "system",
                    reason=reason or "",
                )
            )
        return PriceInfo.from_row(row)

    def calculate_price(self, room_type: str, include_breakfast: bool = False, nights: int = 1) -> PriceQuote:
        """Quote a stay from the current rate card, rounding only the results."""

        if nights < 1:
            raise PricingError("A stay lasts at least one night")
        price = self.get_current_price(room_type)
        currency = settings.FRONT_DESK["CURRENCY"]

        base_amount = Money(price.base_price, currency) * price.seasonal_multiplier * nights
        if include_breakfast:
            breakfast_amount = Money(price.breakfast_price, currency) * nights
        else:
            breakfast_amount = Money.zero(currency)
        total = base_amount + breakfast_amount

        return PriceQuote(
            room_type=room_type,
            nights=nights,
            include_breakfast=include_breakfast,
            base_amount=base_amount.rounded(),
            breakfast_amount=breakfast_amount.rounded(),
            total=total.rounded(),
        )

    def initialize_defaults(self) -> list[PriceInfo]:
        """Seed default prices for room types without a current price."""

        created = []
        with DjangoUnitOfWork() as uow:
            now = timezone.now()
            for room_type in RoomType.values:
                if RoomTypePricing.objects.current(room_type, now).exists():
                    continue
                RoomTypePricing.objects.filter(room_type=room_type, is_active=True).update(
                    is_active=False, effective_until=now
                )
                row = RoomTypePricing.objects.create(
                    room_type=room_type,
                    base_price=DEFAULT_BASE_PRICES[room_type],
                    breakfast_price=DEFAULT_BREAKFAST_PRICE,
                    seasonal_multiplier=DEFAULT_SEASONAL_MULTIPLIER,
                    is_active=True,
                    effective_from=now,
                )
                created.append(PriceInfo.from_row(row))
            if created:
                uow.add_event(PricingInitialized(room_types=[info.room_type for info in created]))
        return created

    def get_history(self, room_type: str, limit: int | None = None) -> QuerySet[PricingHistory]:
        _ensure_room_type(room_type)
        if limit is None:
            limit = settings.FRONT_DESK["PRICING_HISTORY_LIMIT"]
        return PricingHistory.objects.filter(room_type=room_type).order_by("-changed_at", "-id")[:limit]


def _pick(supplied: Decimal | None, previous: Decimal | None, default: Decimal) -> Decimal:
    if supplied is not None:
        return Decimal(supplied)
    if previous is not None:
        return previous
    return default


pricing_service = PricingService()
