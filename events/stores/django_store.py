"""Django ORM implementation of the event and booking stores."""

import logging
from datetime import timezone

from django.db import DatabaseError, IntegrityError, transaction

from events import models
from events.domain import (
    Booking,
    BookingDraft,
    BookingId,
    Email,
    Event,
    EventDraft,
    EventId,
    EventMode,
)
from events.domain.errors import DuplicateBookingError, DuplicateSlugError, StoreError
from events.domain.normalization import parse_array_field, utc_midnight
from events.stores.interfaces import BookingStore, EventStore

logger = logging.getLogger(__name__)


def _string_tuple(value) -> tuple[str, ...]:
    return tuple(str(item) for item in parse_array_field(value))


def event_to_domain(row: models.Event) -> Event:
    return Event(
        id=EventId(value=row.id),
        title=row.title,
        slug=row.slug,
        description=row.description,
        overview=row.overview,
        image=row.image,
        venue=row.venue,
        location=row.location,
        date=utc_midnight(row.date),
        time=row.time,
        timezone=row.timezone,
        start_at_utc=row.start_at_utc,
        mode=EventMode(row.mode),
        audience=row.audience,
        organizer=row.organizer,
        agenda=_string_tuple(row.agenda),
        tags=_string_tuple(row.tags),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def booking_to_domain(row: models.Booking) -> Booking:
    return Booking(
        id=BookingId(value=row.id),
        event_id=EventId(value=row.event_id),
        email=Email(value=row.email),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def list_events(self, offset: int, limit: int) -> list[Event]:
        rows = models.Event.objects.order_by("-created_at")[offset : offset + limit]
        return [event_to_domain(row) for row in rows]

    def count_events(self) -> int:
        return models.Event.objects.count()

    def get_event_by_slug(self, slug: str) -> Event | None:
        row = models.Event.objects.filter(slug=slug).first()
        return event_to_domain(row) if row else None

    def event_exists(self, event_id: EventId) -> bool:
        return models.Event.objects.filter(id=event_id.value).exists()

    def create_event(self, draft: EventDraft) -> Event:
        try:
            with transaction.atomic():
                row = models.Event.objects.create(
                    title=draft.title,
                    slug=draft.slug,
                    description=draft.description,
                    overview=draft.overview,
                    image=draft.image,
                    venue=draft.venue,
                    location=draft.location,
                    date=draft.date.astimezone(timezone.utc).date(),
                    time=draft.time,
                    timezone=draft.timezone,
                    start_at_utc=draft.start_at_utc,
                    mode=draft.mode.value,
                    audience=draft.audience,
                    organizer=draft.organizer,
                    agenda=list(draft.agenda),
                    tags=list(draft.tags),
                )
        except IntegrityError as exc:
            if models.Event.objects.filter(slug=draft.slug).exists():
                raise DuplicateSlugError(draft.slug) from exc
            raise StoreError(str(exc)) from exc
        except DatabaseError as exc:
            raise StoreError(str(exc)) from exc
        return event_to_domain(row)


class DjangoBookingStore(BookingStore):
    """Relational booking store using Django ORM."""

    def booking_exists(self, event_id: EventId, email: Email) -> bool:
        return models.Booking.objects.filter(event_id=event_id.value, email=email.value).exists()

    def create_booking(self, draft: BookingDraft) -> Booking:
        try:
            with transaction.atomic():
                row = models.Booking.objects.create(
                    event_id=draft.event_id.value,
                    email=draft.email.value,
                )
        except IntegrityError as exc:
            taken = models.Booking.objects.filter(
                event_id=draft.event_id.value, email=draft.email.value
            ).exists()
            if taken:
                logger.info("Booking insert lost race for event %s", draft.event_id)
                raise DuplicateBookingError() from exc
            raise StoreError(str(exc)) from exc
        except DatabaseError as exc:
            raise StoreError(str(exc)) from exc
        return booking_to_domain(row)

    def list_bookings(self, event_id: EventId | None = None) -> list[Booking]:
        rows = models.Booking.objects.order_by("-created_at")
        if event_id is not None:
            rows = rows.filter(event_id=event_id.value)
        return [booking_to_domain(row) for row in rows]
