"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers

from events.domain.display import format_event_date, format_event_time


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    title = serializers.CharField()
    slug = serializers.CharField()
    description = serializers.CharField()
    overview = serializers.CharField()
    image = serializers.CharField()
    venue = serializers.CharField()
    location = serializers.CharField()
    date = serializers.DateTimeField()
    time = serializers.CharField()
    timezone = serializers.CharField()
    startAtUtc = serializers.DateTimeField(source="start_at_utc", allow_null=True)
    mode = serializers.CharField(source="mode.value")
    audience = serializers.CharField()
    organizer = serializers.CharField()
    agenda = serializers.ListField(child=serializers.CharField())
    tags = serializers.ListField(child=serializers.CharField())
    displayDate = serializers.SerializerMethodField()
    displayTime = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")

    def get_displayDate(self, event) -> str:
        return format_event_date(event.date, event.timezone, event.start_at_utc)

    def get_displayTime(self, event) -> str:
        return format_event_time(event.time, event.timezone, event.start_at_utc)


class BookingSerializer(serializers.Serializer):
    """Serializer for Booking domain model."""

    id = serializers.UUIDField(source="id.value")
    eventId = serializers.UUIDField(source="event_id.value")
    email = serializers.CharField(source="email.value")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class PaginationSerializer(serializers.Serializer):
    """Serializer for EventPage metadata."""

    page = serializers.IntegerField()
    limit = serializers.IntegerField()
    total = serializers.IntegerField()
    totalPages = serializers.IntegerField(source="total_pages")
    hasMore = serializers.BooleanField(source="has_more")
