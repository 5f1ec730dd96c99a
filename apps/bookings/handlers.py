"""Post-commit handlers for walk-in booking events."""

from __future__ import annotations

import structlog

from shared.application.message_bus import message_bus

from .events import WalkInBookingCreated

logger = structlog.get_logger(__name__)


def log_walk_in_booking(event: WalkInBookingCreated) -> None:
    logger.info(
        "walkin.checked_in",
        event_id=str(event.event_id),
        booking_reference=event.booking_reference,
        room_number=event.room_number,
        room_type=event.room_type,
        check_out_date=event.check_out_date.isoformat(),
        nights=event.nights,
        total_amount=str(event.total_amount),
    )


def register() -> None:
    message_bus.register_event_handler(WalkInBookingCreated, log_walk_in_booking)
