"""
Pricing Domain Events

Published after the transaction that changed the rate card commits.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from shared.domain.base import DomainEvent


@dataclass(kw_only=True)
class PriceChanged(DomainEvent):
    """
    Event: A room type received a new current price row

    Triggers:
    - Audit log entry
    """
    room_type: str
    old_base_price: Decimal | None
    new_base_price: Decimal
    old_breakfast_price: Decimal | None
    new_breakfast_price: Decimal
    seasonal_multiplier: Decimal
    changed_by: str
    reason: str = ''


@dataclass(kw_only=True)
class PricingInitialized(DomainEvent):
    """Event: Default prices were seeded for room types that had none"""
    room_types: list[str] = field(default_factory=list)
