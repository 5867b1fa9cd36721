"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

import math
from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import BookingId, Email, EventId, EventMode


@dataclass(frozen=True)
class EventDraft:
    """Canonical, persist-ready event produced by input normalization."""

    title: str
    slug: str
    description: str
    overview: str
    image: str
    venue: str
    location: str
    date: datetime
    time: str
    timezone: str
    start_at_utc: datetime
    mode: EventMode
    audience: str
    organizer: str
    agenda: tuple[str, ...]
    tags: tuple[str, ...]


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event.

    ``date`` is the UTC-midnight instant of the event's calendar date.
    ``timezone`` and ``start_at_utc`` may be empty on records written before
    they were introduced.
    """

    id: EventId
    title: str
    slug: str
    description: str
    overview: str
    image: str
    venue: str
    location: str
    date: datetime
    time: str
    timezone: str
    start_at_utc: datetime | None
    mode: EventMode
    audience: str
    organizer: str
    agenda: tuple[str, ...]
    tags: tuple[str, ...]
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class BookingDraft:
    event_id: EventId
    email: Email


@dataclass(frozen=True)
class Booking:
    """Domain representation of a Booking."""

    id: BookingId
    event_id: EventId
    email: Email
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class EventPage:
    """One page of the event catalog."""

    items: tuple[Event, ...]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit)

    @property
    def has_more(self) -> bool:
        return self.page < self.total_pages
