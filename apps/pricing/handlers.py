"""Post-commit handlers for pricing events."""

from __future__ import annotations

import structlog

from shared.application.message_bus import message_bus

from .events import PriceChanged, PricingInitialized

logger = structlog.get_logger(__name__)


def log_price_change(event: PriceChanged) -> None:
    logger.info(
        "price_changed",
        event_id=str(event.event_id),
        room_type=event.room_type,
        old_base_price=str(event.old_base_price) if event.old_base_price is not None else None,
        new_base_price=str(event.new_base_price),
        old_breakfast_price=str(event.old_breakfast_price) if event.old_breakfast_price is not None else None,
        new_breakfast_price=str(event.new_breakfast_price),
        seasonal_multiplier=str(event.seasonal_multiplier),
        changed_by=event.changed_by,
        reason=event.reason,
    )


def log_pricing_initialized(event: PricingInitialized) -> None:
    logger.info("pricing_initialized", event_id=str(event.event_id), room_types=event.room_types)


def register() -> None:
    message_bus.register_event_handler(PriceChanged, log_price_change)
    message_bus.register_event_handler(PricingInitialized, log_pricing_initialized)
