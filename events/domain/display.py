"""Human-readable event date and time labels.

Events created before timezones were tracked only have a naive ``date`` and
``time``; newer ones carry ``timezone`` and ``start_at_utc``. The two shapes
are rendered through separate display variants.
"""

from dataclasses import dataclass
from datetime import date as date_type
from datetime import datetime, timezone as dt_timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from events.domain.value_objects import TIME_PATTERN

DATE_TBA = "Date TBA"
TIME_TBA = "Time TBA"


@dataclass(frozen=True)
class ZonedDisplay:
    """An absolute instant shown in the event's own timezone."""

    instant: datetime
    timezone: str


@dataclass(frozen=True)
class LegacyDisplay:
    """Raw stored date and time, shown without conversion."""

    date: date_type | datetime | str | None
    time: str | None
    timezone: str | None = None


EventDisplay = ZonedDisplay | LegacyDisplay


def _parse_instant(value: datetime | str) -> datetime | None:
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=dt_timezone.utc)
    return value


def event_display(
    date: date_type | datetime | str | None,
    time: str | None,
    timezone: str | None = None,
    start_at_utc: datetime | str | None = None,
) -> EventDisplay:
    """Pick the display variant for whatever fields the record has."""
    if timezone and start_at_utc:
        instant = _parse_instant(start_at_utc)
        if instant is not None:
            try:
                return ZonedDisplay(instant=instant.astimezone(ZoneInfo(timezone)), timezone=timezone)
            except (ZoneInfoNotFoundError, ValueError, OSError):
                pass
    return LegacyDisplay(date=date, time=time, timezone=timezone or None)


def timezone_label(name: str) -> str:
    """``America/New_York`` -> ``America/New York``."""
    return name.replace("_", " ")


def _month_day_year(value: date_type) -> str:
    return f"{value:%B} {value.day}, {value.year}"


def _twelve_hour(hour: int, minutes: str) -> str:
    suffix = "PM" if hour >= 12 else "AM"
    return f"{hour % 12 or 12}:{minutes} {suffix}"


def _legacy_date(value: date_type | datetime | str | None) -> date_type | None:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(dt_timezone.utc)
        return value.date()
    if isinstance(value, date_type):
        return value
    if isinstance(value, str):
        try:
            return date_type.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


def render_date(display: EventDisplay) -> str:
    match display:
        case ZonedDisplay(instant=instant):
            return _month_day_year(instant)
        case LegacyDisplay(date=raw):
            parsed = _legacy_date(raw)
            return _month_day_year(parsed) if parsed else DATE_TBA


def render_time(display: EventDisplay) -> str:
    match display:
        case ZonedDisplay(instant=instant, timezone=name):
            label = _twelve_hour(instant.hour, f"{instant.minute:02d}")
            return f"{label} ({timezone_label(name)})"
        case LegacyDisplay(time=raw, timezone=name):
            if not raw or not TIME_PATTERN.match(raw.strip()):
                return TIME_TBA
            hours, minutes = raw.strip().split(":")
            label = _twelve_hour(int(hours), minutes)
            return f"{label} ({timezone_label(name)})" if name else label


def format_event_date(
    date: date_type | datetime | str | None,
    timezone: str | None = None,
    start_at_utc: datetime | str | None = None,
) -> str:
    """Format as ``June 10, 2026``."""
    return render_date(event_display(date, None, timezone, start_at_utc))


def format_event_time(
    time: str | None,
    timezone: str | None = None,
    start_at_utc: datetime | str | None = None,
) -> str:
    """Format as ``9:00 AM``, with ``(Zone Name)`` appended when known."""
    return render_time(event_display(None, time, timezone, start_at_utc))
