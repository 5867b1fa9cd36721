"""Process-wide store access.

Stores are built once, on first use, under a lock so that concurrent first
requests share one instance. Each call makes sure the current thread's
database connection is open before handing the store out.
"""

import threading

from django.db import DEFAULT_DB_ALIAS, connections

from events.stores.django_store import DjangoBookingStore, DjangoEventStore
from events.stores.interfaces import BookingStore, EventStore

_lock = threading.Lock()
_event_store: EventStore | None = None
_booking_store: BookingStore | None = None


def _ensure_connection() -> None:
    connections[DEFAULT_DB_ALIAS].ensure_connection()


def get_event_store() -> EventStore:
    global _event_store
    if _event_store is None:
        with _lock:
            if _event_store is None:
                _event_store = DjangoEventStore()
    _ensure_connection()
    return _event_store


def get_booking_store() -> BookingStore:
    global _booking_store
    if _booking_store is None:
        with _lock:
            if _booking_store is None:
                _booking_store = DjangoBookingStore()
    _ensure_connection()
    return _booking_store


__all__ = [
    "BookingStore",
    "DjangoBookingStore",
    "DjangoEventStore",
    "EventStore",
    "get_booking_store",
    "get_event_store",
]
