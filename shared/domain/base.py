"""
Domain building blocks shared by the apps

- ValueObject: immutable, compared by value (see value_objects.Money)
- DomainEvent: a fact recorded by a service and published after commit
"""

from abc import ABC
from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass(frozen=True)
class ValueObject(ABC):
    """Immutable value without identity; equal when all attributes are equal"""


@dataclass(kw_only=True)
class DomainEvent:
    """
    Something that happened in a unit of work

    Subclasses declare their payload as keyword-only fields. ``aggregate_id``
    names the thing the event is about (a room type, a booking reference).
    """
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    aggregate_id: str | None = None

    def to_dict(self) -> dict:
        return {
            'event_id': str(self.event_id),
            'event_type': type(self).__name__,
            'occurred_at': self.occurred_at.isoformat(),
            'aggregate_id': self.aggregate_id,
        }
