from events.domain.models import Booking, BookingDraft, Event, EventDraft, EventPage
from events.domain.value_objects import BookingId, Email, EventId, EventMode

__all__ = [
    "Event",
    "EventDraft",
    "EventPage",
    "Booking",
    "BookingDraft",
    "EventId",
    "BookingId",
    "EventMode",
    "Email",
]
