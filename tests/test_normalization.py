"""Unit tests for event and booking input normalization.

Run with: pytest tests/test_normalization.py -v
"""

from datetime import date, datetime, timezone
from uuid import uuid4
from zoneinfo import ZoneInfo

import pytest

from events.domain import EventMode
from events.domain.errors import (
    EmptyCollectionError,
    InvalidDateTimeError,
    InvalidEmailError,
    InvalidEnumError,
    InvalidIdError,
    InvalidTimeFormatError,
    MissingFieldError,
)
from events.domain.normalization import (
    build_slug,
    localize_start,
    normalize_booking_input,
    normalize_event_input,
    parse_array_field,
)
from tests.factories import make_event_payload


class TestBuildSlug:
    def test_title_and_date(self):
        assert build_slug("Test Con", date(2026, 1, 10)) == "test-con-2026-01-10"

    def test_strips_punctuation_and_collapses(self):
        assert build_slug("  AWS re:Invent -- 2025!  ", date(2025, 11, 30)) == "aws-reinvent-2025-2025-11-30"

    def test_is_deterministic(self):
        assert build_slug("JSNation", date(2026, 6, 11)) == build_slug("JSNation", date(2026, 6, 11))

    def test_differs_by_date(self):
        assert build_slug("JSNation", date(2026, 6, 11)) != build_slug("JSNation", date(2027, 6, 11))

    def test_non_ascii_only_title_keeps_separator(self):
        assert build_slug("东京 ☕", date(2026, 4, 1)) == "--2026-04-01"

    def test_trailing_hyphen_is_kept(self):
        """Titles differing only by a trailing hyphen must not share a slug."""
        plain = build_slug("Hello", date(2026, 1, 10))
        hyphenated = build_slug("Hello -", date(2026, 1, 10))

        assert plain == "hello-2026-01-10"
        assert hyphenated == "hello--2026-01-10"


class TestLocalizeStart:
    def test_converts_wall_clock_to_utc(self):
        instant = localize_start(date(2026, 6, 12), "09:00", "Europe/Amsterdam")
        assert instant == datetime(2026, 6, 12, 7, 0, tzinfo=timezone.utc)

    def test_half_hour_offset(self):
        instant = localize_start(date(2026, 1, 10), "9:00", "Asia/Kolkata")
        assert instant == datetime(2026, 1, 10, 3, 30, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "tz_name,time",
        [("UTC", "00:00"), ("America/New_York", "23:59"), ("Australia/Sydney", "12:15"), ("Asia/Kolkata", "07:05")],
    )
    def test_round_trip_reproduces_wall_time(self, tz_name, time):
        instant = localize_start(date(2026, 3, 20), time, tz_name)
        local = instant.astimezone(ZoneInfo(tz_name))
        assert local.strftime("%H:%M") == time

    def test_unknown_timezone(self):
        with pytest.raises(InvalidDateTimeError):
            localize_start(date(2026, 1, 10), "09:00", "Mars/Olympus_Mons")

    def test_dst_gap_is_rejected(self):
        with pytest.raises(InvalidDateTimeError):
            localize_start(date(2026, 3, 8), "02:30", "America/New_York")

    def test_dst_overlap_uses_first_occurrence(self):
        instant = localize_start(date(2026, 11, 1), "01:30", "America/New_York")
        assert instant == datetime(2026, 11, 1, 5, 30, tzinfo=timezone.utc)


class TestNormalizeEventInput:
    def test_canonical_event(self):
        draft = normalize_event_input(make_event_payload(title="  Test Con  ", agenda=[" 09:00 | Start ", "  "]))

        assert draft.title == "Test Con"
        assert draft.slug == "test-con-2026-01-10"
        assert draft.date == datetime(2026, 1, 10, tzinfo=timezone.utc)
        assert draft.start_at_utc == datetime(2026, 1, 10, 9, 0, tzinfo=timezone.utc)
        assert draft.mode is EventMode.ONLINE
        assert draft.agenda == ("09:00 | Start",)
        assert draft.tags == ("Tech",)

    def test_image_is_optional(self):
        payload = make_event_payload()
        del payload["image"]
        assert normalize_event_input(payload).image == ""

    @pytest.mark.parametrize("field", ["title", "venue", "timezone", "organizer"])
    def test_missing_field(self, field):
        with pytest.raises(MissingFieldError) as excinfo:
            normalize_event_input(make_event_payload(**{field: "   "}))
        assert excinfo.value.field == field

    def test_non_string_counts_as_missing(self):
        with pytest.raises(MissingFieldError):
            normalize_event_input(make_event_payload(title=42))

    @pytest.mark.parametrize("agenda", [[], ["", "  "], "09:00 | Start", [1, None]])
    def test_empty_agenda(self, agenda):
        with pytest.raises(EmptyCollectionError) as excinfo:
            normalize_event_input(make_event_payload(agenda=agenda))
        assert excinfo.value.message == "Agenda must have at least one item"

    def test_empty_tags(self):
        with pytest.raises(EmptyCollectionError):
            normalize_event_input(make_event_payload(tags=None))

    def test_invalid_mode(self):
        with pytest.raises(InvalidEnumError) as excinfo:
            normalize_event_input(make_event_payload(mode="virtual"))
        assert excinfo.value.message == "Mode must be online, offline, or hybrid"

    @pytest.mark.parametrize("time", ["24:00", "9am", "09:60", "0900"])
    def test_invalid_time(self, time):
        with pytest.raises(InvalidTimeFormatError):
            normalize_event_input(make_event_payload(time=time))

    @pytest.mark.parametrize("date_value", ["2026-02-30", "10/01/2026", "tomorrow"])
    def test_invalid_date(self, date_value):
        with pytest.raises(InvalidDateTimeError):
            normalize_event_input(make_event_payload(date=date_value))

    def test_invalid_timezone(self):
        with pytest.raises(InvalidDateTimeError):
            normalize_event_input(make_event_payload(timezone="Not/AZone"))


class TestParseArrayField:
    def test_repairs_json_encoded_array(self):
        assert parse_array_field(['["x","y"]']) == ["x", "y"]

    def test_leaves_plain_array(self):
        assert parse_array_field(["x", "y"]) == ["x", "y"]

    def test_non_array_is_empty(self):
        assert parse_array_field("not-array") == []

    def test_single_non_json_element_kept(self):
        assert parse_array_field(["09:00 | Start"]) == ["09:00 | Start"]

    def test_single_json_non_array_kept(self):
        assert parse_array_field(['{"a": 1}']) == ['{"a": 1}']


class TestNormalizeBookingInput:
    def test_lowercases_and_trims_email(self):
        event_id = uuid4()
        draft = normalize_booking_input({"eventId": str(event_id), "email": " A@B.COM "})
        assert draft.email.value == "a@b.com"
        assert draft.event_id.value == event_id

    @pytest.mark.parametrize("payload", [{}, {"eventId": str(uuid4())}, {"email": "a@b.com"}, {"eventId": "", "email": "a@b.com"}])
    def test_missing_fields(self, payload):
        with pytest.raises(MissingFieldError) as excinfo:
            normalize_booking_input(payload)
        assert excinfo.value.message == "Event ID and email are required"

    @pytest.mark.parametrize(
        "payload,field",
        [({"email": "a@b.com"}, "eventId"), ({"eventId": str(uuid4())}, "email"), ({"eventId": str(uuid4()), "email": "  "}, "email")],
    )
    def test_missing_field_names_the_absent_one(self, payload, field):
        with pytest.raises(MissingFieldError) as excinfo:
            normalize_booking_input(payload)
        assert excinfo.value.field == field

    def test_malformed_event_id(self):
        with pytest.raises(InvalidIdError):
            normalize_booking_input({"eventId": "abc123", "email": "a@b.com"})

    def test_malformed_email(self):
        with pytest.raises(InvalidEmailError):
            normalize_booking_input({"eventId": str(uuid4()), "email": "not-an-email"})
