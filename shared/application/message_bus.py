"""
Event Bus

Apps subscribe handlers to the domain events they care about from
AppConfig.ready(); the unit of work hands committed events to the bus.
"""

from collections import defaultdict
from typing import Callable, DefaultDict, Iterable, List, Type
import logging

from shared.domain.base import DomainEvent

logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], None]


class MessageBus:
    """Synchronous, in-process fan-out of domain events to their handlers"""

    def __init__(self):
        self._handlers: DefaultDict[Type[DomainEvent], List[EventHandler]] = defaultdict(list)

    def register_event_handler(self, event_type: Type[DomainEvent], handler: EventHandler):
        """
        Subscribe a handler to an event type

        Subscribing the same handler twice has no effect, so ready() hooks
        may run more than once.
        """
        handlers = self._handlers[event_type]
        if handler in handlers:
            return
        handlers.append(handler)
        logger.debug(f"{handler.__name__} subscribed to {event_type.__name__}")

    def handlers_for(self, event_type: Type[DomainEvent]) -> List[EventHandler]:
        return list(self._handlers.get(event_type, ()))

    def publish_events(self, events: Iterable[DomainEvent]):
        """
        Deliver each event to its handlers in subscription order

        A failing handler is logged and skipped. The state the event
        describes is already committed, so the remaining handlers still run.
        """
        for event in events:
            event_name = type(event).__name__
            for handler in self.handlers_for(type(event)):
                try:
                    handler(event)
                except Exception:
                    logger.exception(f"{handler.__name__} failed on {event_name} {event.event_id}")


message_bus = MessageBus()
