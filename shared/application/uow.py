"""
Unit of Work

A transaction boundary that also buffers domain events. Buffered events
reach the message bus only after the surrounding database transaction
commits; a unit that exits with an exception drops them.
"""

from typing import List
import logging

from django.db import transaction

from shared.domain.base import DomainEvent

logger = logging.getLogger(__name__)


class DjangoUnitOfWork:
    """
    transaction.atomic() with an event buffer

    A unit opened inside another atomic block becomes a savepoint. Its
    events are still held back until the outermost transaction commits,
    and Django drops them if that savepoint is rolled back.

    Usage:
        with DjangoUnitOfWork() as uow:
            room = Room.objects.select_for_update().get(pk=room_id)
            ...
            uow.add_event(WalkInBookingCreated(...))
    """

    def __init__(self, using: str | None = None):
        self.using = using
        self._atomic = None
        self._pending: List[DomainEvent] = []

    def __enter__(self):
        self._atomic = transaction.atomic(using=self.using)
        self._atomic.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self._schedule_publication()
        else:
            self._discard()
        return self._atomic.__exit__(exc_type, exc_val, exc_tb)

    def add_event(self, event: DomainEvent):
        self._pending.append(event)

    def _schedule_publication(self):
        events, self._pending = self._pending, []
        if not events:
            return
        logger.debug(f"Publishing {len(events)} events once the transaction commits")
        transaction.on_commit(lambda: publish_committed(events), using=self.using)

    def _discard(self):
        if self._pending:
            logger.warning(f"Unit of work aborted, dropping {len(self._pending)} events")
        self._pending = []


def publish_committed(events: List[DomainEvent]):
    from shared.application.message_bus import message_bus

    message_bus.publish_events(events)
