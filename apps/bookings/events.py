"""
Walk-in Booking Domain Events

Published after the check-in transaction commits.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from shared.domain.base import DomainEvent


@dataclass(kw_only=True)
class WalkInBookingCreated(DomainEvent):
    """
    Event: A walk-in guest was checked in and the room marked occupied

    Triggers:
    - Audit log entry
    """
    booking_reference: str
    room_number: str
    room_type: str
    check_out_date: datetime
    nights: int
    total_amount: Decimal
