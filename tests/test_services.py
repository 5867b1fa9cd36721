"""Unit tests for EventService and BookingService.

These test error handling and domain error mapping against mocked stores.
Run with: pytest tests/test_services.py -v
"""

from datetime import datetime, timezone
from unittest.mock import Mock
from uuid import uuid4

import pytest

from events.domain import Booking, BookingId, Email, EventId, EventPage
from events.domain.errors import (
    DuplicateBookingError,
    DuplicateSlugError,
    EventNotFoundError,
    InvalidIdError,
    InvalidSlugError,
    MissingFieldError,
)
from events.services import BookingService, EventService
from events.services.event_service import clamp_pagination
from events.stores.interfaces import BookingStore, EventStore
from tests.factories import make_event_payload

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def event_store() -> Mock:
    return Mock(spec=EventStore)


@pytest.fixture
def booking_store() -> Mock:
    return Mock(spec=BookingStore)


class TestEventService:
    """Tests for EventService."""

    def test_create_event_passes_canonical_draft(self, event_store):
        EventService(event_store).create_event(make_event_payload())

        draft = event_store.create_event.call_args.args[0]
        assert draft.slug == "test-con-2026-01-10"

    def test_create_event_validation_error_skips_store(self, event_store):
        with pytest.raises(MissingFieldError):
            EventService(event_store).create_event(make_event_payload(title=""))
        event_store.create_event.assert_not_called()

    def test_create_event_duplicate_slug_propagates(self, event_store):
        event_store.create_event.side_effect = DuplicateSlugError("test-con-2026-01-10")
        with pytest.raises(DuplicateSlugError):
            EventService(event_store).create_event(make_event_payload())

    def test_list_events_offsets_by_page(self, event_store):
        event_store.list_events.return_value = []
        event_store.count_events.return_value = 45

        page = EventService(event_store).list_events(page=3, limit=20)

        event_store.list_events.assert_called_once_with(offset=40, limit=20)
        assert page == EventPage(items=(), page=3, limit=20, total=45)
        assert page.has_more is False

    def test_list_events_past_the_end_skips_store(self, event_store):
        event_store.count_events.return_value = 3

        page = EventService(event_store).list_events(page=10**20, limit=20)

        event_store.list_events.assert_not_called()
        assert page.items == ()
        assert page.total == 3
        assert page.has_more is False

    def test_get_event_blank_slug_raises_error(self, event_store):
        with pytest.raises(InvalidSlugError):
            EventService(event_store).get_event_by_slug("   ")
        event_store.get_event_by_slug.assert_not_called()

    def test_get_event_not_found_raises_error(self, event_store):
        event_store.get_event_by_slug.return_value = None
        with pytest.raises(EventNotFoundError):
            EventService(event_store).get_event_by_slug("missing")

    def test_get_event_trims_slug(self, event_store):
        EventService(event_store).get_event_by_slug("  test-con-2026-01-10 ")
        event_store.get_event_by_slug.assert_called_once_with("test-con-2026-01-10")


class TestClampPagination:
    def test_defaults(self):
        assert clamp_pagination(None, None) == (1, 20)

    def test_limit_clamped_to_max(self):
        assert clamp_pagination(1, 150) == (1, 100)

    def test_lower_bounds(self):
        assert clamp_pagination(-4, 0) == (1, 1)


class TestBookingService:
    """Tests for BookingService."""

    def _payload(self, event_id=None, email="A@B.COM") -> dict:
        return {"eventId": str(event_id or uuid4()), "email": email}

    def _booking(self, event_id: EventId, email: Email) -> Booking:
        return Booking(id=BookingId(value=uuid4()), event_id=event_id, email=email, created_at=NOW, updated_at=NOW)

    def test_create_booking_lowercases_email(self, booking_store, event_store):
        event_store.event_exists.return_value = True
        booking_store.booking_exists.return_value = False
        booking_store.create_booking.side_effect = lambda draft: self._booking(draft.event_id, draft.email)

        booking = BookingService(booking_store, event_store).create_booking(self._payload())

        assert booking.email.value == "a@b.com"

    def test_create_booking_unknown_event(self, booking_store, event_store):
        event_store.event_exists.return_value = False
        with pytest.raises(EventNotFoundError):
            BookingService(booking_store, event_store).create_booking(self._payload())
        booking_store.create_booking.assert_not_called()

    def test_create_booking_precheck_duplicate(self, booking_store, event_store):
        event_store.event_exists.return_value = True
        booking_store.booking_exists.return_value = True
        with pytest.raises(DuplicateBookingError):
            BookingService(booking_store, event_store).create_booking(self._payload())
        booking_store.create_booking.assert_not_called()

    def test_create_booking_insert_conflict_reports_duplicate(self, booking_store, event_store):
        """A racing request that passed the pre-check still gets a duplicate error."""
        event_store.event_exists.return_value = True
        booking_store.booking_exists.return_value = False
        booking_store.create_booking.side_effect = DuplicateBookingError()
        with pytest.raises(DuplicateBookingError):
            BookingService(booking_store, event_store).create_booking(self._payload())

    def test_list_bookings_all(self, booking_store, event_store):
        booking_store.list_bookings.return_value = []
        BookingService(booking_store, event_store).list_bookings()
        booking_store.list_bookings.assert_called_once_with()

    def test_list_bookings_invalid_id_raises_error(self, booking_store, event_store):
        with pytest.raises(InvalidIdError):
            BookingService(booking_store, event_store).list_bookings("nope")

    def test_list_bookings_filters_by_event(self, booking_store, event_store):
        event_id = uuid4()
        booking_store.list_bookings.return_value = []
        BookingService(booking_store, event_store).list_bookings(str(event_id))
        booking_store.list_bookings.assert_called_once_with(EventId(value=event_id))
