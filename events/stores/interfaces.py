"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Uniqueness is enforced
by the backing store; implementations translate violations into
DuplicateSlugError / DuplicateBookingError.
"""

from abc import ABC, abstractmethod

from events.domain import Booking, BookingDraft, Email, Event, EventDraft, EventId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self, offset: int, limit: int) -> list[Event]:
        """Return a slice of events ordered by created_at descending."""
        ...

    @abstractmethod
    def count_events(self) -> int:
        ...

    @abstractmethod
    def get_event_by_slug(self, slug: str) -> Event | None:
        """Return an event by exact slug, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def create_event(self, draft: EventDraft) -> Event:
        """Insert an event.

        Raises:
            DuplicateSlugError: If the slug is already taken.
            StoreError: For any other persistence failure.
        """
        ...


class BookingStore(ABC):
    """Interface for booking persistence operations."""

    @abstractmethod
    def booking_exists(self, event_id: EventId, email: Email) -> bool:
        ...

    @abstractmethod
    def create_booking(self, draft: BookingDraft) -> Booking:
        """Insert a booking.

        Raises:
            DuplicateBookingError: If (event_id, email) is already booked.
            StoreError: For any other persistence failure.
        """
        ...

    @abstractmethod
    def list_bookings(self, event_id: EventId | None = None) -> list[Booking]:
        """Return bookings, newest first, optionally for one event."""
        ...
