from events.handlers.views import BookingListView, EventDetailView, EventListView

__all__ = ["BookingListView", "EventDetailView", "EventListView"]
