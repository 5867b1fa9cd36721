"""Booking service.

The unique (event, email) constraint in the store is what guarantees one
booking per attendee. The lookup before insert only exists to answer the
common repeat-submit case without a failed write; both paths raise the same
DuplicateBookingError.
"""

import logging
from collections.abc import Mapping
from typing import Any

from events.domain.errors import DuplicateBookingError, EventNotFoundError
from events.domain.models import Booking
from events.domain.normalization import normalize_booking_input, parse_event_id
from events.stores.interfaces import BookingStore, EventStore

logger = logging.getLogger(__name__)


class BookingService:
    """Service for booking operations."""

    def __init__(self, bookings: BookingStore, events: EventStore) -> None:
        self._bookings = bookings
        self._events = events

    def create_booking(self, payload: Mapping[str, Any]) -> Booking:
        """Book an email onto an event.

        Raises:
            ValidationError: Missing fields, malformed event ID or email.
            EventNotFoundError: If the event does not exist.
            DuplicateBookingError: If the email already booked this event.
            StoreError: For unexpected persistence failures.
        """
        draft = normalize_booking_input(payload)

        if not self._events.event_exists(draft.event_id):
            raise EventNotFoundError(str(draft.event_id))

        if self._bookings.booking_exists(draft.event_id, draft.email):
            logger.info("Duplicate booking rejected for event %s", draft.event_id)
            raise DuplicateBookingError()

        booking = self._bookings.create_booking(draft)
        logger.info("Created booking %s for event %s", booking.id, booking.event_id)
        return booking

    def list_bookings(self, event_id: str | None = None) -> list[Booking]:
        """Return bookings, newest first, optionally filtered by event.

        Raises:
            InvalidIdError: If event_id is given but is not a valid UUID.
        """
        if event_id is None:
            return self._bookings.list_bookings()
        return self._bookings.list_bookings(parse_event_id(event_id))
