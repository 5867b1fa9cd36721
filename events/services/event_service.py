"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Mapping
from typing import Any

from events.domain.errors import EventNotFoundError, InvalidSlugError
from events.domain.models import Event, EventPage
from events.domain.normalization import normalize_event_input
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100


def clamp_pagination(page: int | None, limit: int | None) -> tuple[int, int]:
    """Return (page, limit) with page >= 1 and 1 <= limit <= MAX_LIMIT."""
    page = DEFAULT_PAGE if page is None else max(1, page)
    limit = DEFAULT_LIMIT if limit is None else min(max(1, limit), MAX_LIMIT)
    return page, limit


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def create_event(self, payload: Mapping[str, Any]) -> Event:
        """Normalize and persist a new event.

        Raises:
            ValidationError: If the payload fails normalization.
            DuplicateSlugError: If an event with the same slug already exists.
            StoreError: For unexpected persistence failures.
        """
        draft = normalize_event_input(payload)
        event = self._store.create_event(draft)
        logger.info("Created event %s (%s)", event.slug, event.id)
        return event

    def list_events(self, page: int | None = None, limit: int | None = None) -> EventPage:
        """Return one page of events, newest first.

        Pages past the end are empty and never reach the store, so an
        arbitrarily large page number cannot overflow the backend's offset.
        """
        page, limit = clamp_pagination(page, limit)
        total = self._store.count_events()
        offset = (page - 1) * limit
        items = self._store.list_events(offset=offset, limit=limit) if offset < total else []
        return EventPage(items=tuple(items), page=page, limit=limit, total=total)

    def get_event_by_slug(self, slug: str) -> Event:
        """Return an event by slug.

        Raises:
            InvalidSlugError: If the slug is blank.
            EventNotFoundError: If the event does not exist.
        """
        slug = (slug or "").strip()
        if not slug:
            raise InvalidSlugError()

        event = self._store.get_event_by_slug(slug)
        if event is None:
            raise EventNotFoundError(slug)
        return event
