"""Input validation and normalization for events and bookings.

Turns untyped request payloads into canonical drafts that the stores can
persist as-is. Every check here runs before any write; uniqueness of slugs
and bookings is enforced by the store, not here.
"""

import json
import re
from collections.abc import Mapping
from datetime import date as date_type
from datetime import datetime, timezone as dt_timezone
from typing import Any
from uuid import UUID
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from events.domain.errors import (
    EmptyCollectionError,
    InvalidDateTimeError,
    InvalidEmailError,
    InvalidEnumError,
    InvalidIdError,
    InvalidTimeFormatError,
    MissingFieldError,
)
from events.domain.models import BookingDraft, EventDraft
from events.domain.value_objects import TIME_PATTERN, Email, EventId, EventMode

REQUIRED_TEXT_FIELDS = (
    "title",
    "description",
    "overview",
    "venue",
    "location",
    "date",
    "time",
    "timezone",
    "mode",
    "audience",
    "organizer",
)
ARRAY_FIELDS = ("agenda", "tags")

_NON_SLUG_CHARS = re.compile(r"[^\w\s-]", re.ASCII)
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")


def parse_array_field(data: Any) -> list:
    """Repair an array that holds a single JSON-encoded array.

    Older clients serialized list fields as one JSON string inside a list.
    Anything that doesn't decode to a list is returned untouched; non-list
    input yields an empty list.
    """
    if not isinstance(data, (list, tuple)):
        return []

    if len(data) == 1 and isinstance(data[0], str):
        try:
            parsed = json.loads(data[0])
        except ValueError:
            return list(data)
        return parsed if isinstance(parsed, list) else list(data)

    return list(data)


def normalize_string_list(items: Any) -> tuple[str, ...]:
    if not isinstance(items, (list, tuple)):
        return ()
    trimmed = (item.strip() for item in items if isinstance(item, str))
    return tuple(item for item in trimmed if item)


def build_slug(title: str, event_date: date_type) -> str:
    """URL-safe slug from title and calendar date, e.g. ``react-summit-2026-06-12``."""
    base = _NON_SLUG_CHARS.sub("", title.lower().strip())
    base = _WHITESPACE.sub("-", base)
    base = _HYPHENS.sub("-", base)
    return f"{base}-{event_date:%Y-%m-%d}"


def parse_event_date(value: str) -> date_type:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as exc:
        raise InvalidDateTimeError() from exc


def localize_start(event_date: date_type, time: str, tz_name: str) -> datetime:
    """Interpret ``date time`` as wall-clock time in ``tz_name`` and return UTC.

    Wall-clock times skipped by a DST transition are rejected. Times that
    occur twice resolve to the first occurrence.
    """
    try:
        zone = ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise InvalidDateTimeError() from exc

    try:
        wall = datetime.strptime(f"{event_date:%Y-%m-%d} {time}", "%Y-%m-%d %H:%M")
    except ValueError as exc:
        raise InvalidDateTimeError() from exc

    local = wall.replace(tzinfo=zone, fold=0)
    instant = local.astimezone(dt_timezone.utc)
    if instant.astimezone(zone).replace(tzinfo=None) != wall:
        raise InvalidDateTimeError()
    return instant


def utc_midnight(event_date: date_type) -> datetime:
    return datetime(event_date.year, event_date.month, event_date.day, tzinfo=dt_timezone.utc)


def _required_text(raw: Mapping[str, Any], field: str) -> str:
    value = raw.get(field)
    if not isinstance(value, str) or not value.strip():
        raise MissingFieldError(field)
    return value.strip()


def normalize_event_input(raw: Mapping[str, Any]) -> EventDraft:
    """Validate and canonicalize an event creation payload.

    Raises:
        MissingFieldError: A required text field is absent or blank.
        EmptyCollectionError: Agenda or tags have no non-blank items.
        InvalidEnumError: Mode is not online, offline or hybrid.
        InvalidTimeFormatError: Time is not 24-hour HH:MM.
        InvalidDateTimeError: Date, time and timezone don't name a real instant.
    """
    fields = {name: _required_text(raw, name) for name in REQUIRED_TEXT_FIELDS}

    image = raw.get("image")
    image = image.strip() if isinstance(image, str) else ""

    collections = {}
    for name in ARRAY_FIELDS:
        collections[name] = normalize_string_list(raw.get(name))
        if not collections[name]:
            raise EmptyCollectionError(name)

    try:
        mode = EventMode(fields["mode"])
    except ValueError as exc:
        raise InvalidEnumError("mode", EventMode.values()) from exc

    if not TIME_PATTERN.match(fields["time"]):
        raise InvalidTimeFormatError()

    event_date = parse_event_date(fields["date"])
    start_at_utc = localize_start(event_date, fields["time"], fields["timezone"])

    return EventDraft(
        title=fields["title"],
        slug=build_slug(fields["title"], event_date),
        description=fields["description"],
        overview=fields["overview"],
        image=image,
        venue=fields["venue"],
        location=fields["location"],
        date=utc_midnight(event_date),
        time=fields["time"],
        timezone=fields["timezone"],
        start_at_utc=start_at_utc,
        mode=mode,
        audience=fields["audience"],
        organizer=fields["organizer"],
        agenda=collections["agenda"],
        tags=collections["tags"],
    )


def parse_event_id(value: Any) -> EventId:
    """Parse a UUID event identifier.

    Raises:
        InvalidIdError: If the value is not a valid UUID string.
    """
    if isinstance(value, UUID):
        return EventId(value=value)
    if not isinstance(value, str):
        raise InvalidIdError()
    try:
        return EventId.from_string(value.strip())
    except ValueError as exc:
        raise InvalidIdError() from exc


def normalize_booking_input(raw: Mapping[str, Any]) -> BookingDraft:
    """Validate a booking payload of ``{eventId, email}``.

    Event existence and duplicate bookings are checked by the service.
    """
    event_id = raw.get("eventId")
    email = raw.get("email")
    if not event_id:
        raise MissingFieldError("eventId", message="Event ID and email are required")
    if not isinstance(email, str) or not email.strip():
        raise MissingFieldError("email", message="Event ID and email are required")

    parsed_id = parse_event_id(event_id)
    try:
        parsed_email = Email.parse(email)
    except ValueError as exc:
        raise InvalidEmailError() from exc

    return BookingDraft(event_id=parsed_id, email=parsed_email)
