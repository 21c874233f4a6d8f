from __future__ import annotations

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from housekeeping_tracker.common.datetime_utils import (
    format_cell_timestamp,
    format_timestamp,
    looks_like_timestamp,
    marker_for,
    parse_marker,
)

TZ = ZoneInfo("America/New_York")


def test_format_timestamp_has_no_zero_padding():
    assert format_timestamp(datetime(2026, 3, 5, 14, 7, 9, tzinfo=TZ), TZ) == "3/5/2026, 2:07:09 PM"
    assert format_timestamp(datetime(2026, 12, 25, 0, 0, 0, tzinfo=TZ), TZ) == "12/25/2026, 12:00:00 AM"
    assert format_timestamp(datetime(2026, 12, 25, 12, 30, 0, tzinfo=TZ), TZ) == "12/25/2026, 12:30:00 PM"


def test_aware_values_are_converted_to_configured_timezone():
    utc = datetime(2026, 3, 6, 3, 15, 0, tzinfo=timezone.utc)
    assert format_timestamp(utc, TZ) == "3/5/2026, 10:15:00 PM"
    assert marker_for(utc, TZ) == "2026-03-05"


def test_format_cell_timestamp_handles_each_cell_kind():
    assert format_cell_timestamp(None, TZ) == ""
    assert format_cell_timestamp("", TZ) == ""
    assert format_cell_timestamp("  x  ", TZ) == "x"
    assert format_cell_timestamp(date(2026, 3, 5), TZ) == "3/5/2026, 12:00:00 AM"
    assert format_cell_timestamp(42, TZ) == "42"


def test_looks_like_timestamp():
    assert looks_like_timestamp("3/5/2026, 2:07:09 PM")
    assert looks_like_timestamp(datetime(2026, 3, 5))
    assert not looks_like_timestamp("Maria")
    assert not looks_like_timestamp(None)


def test_parse_marker_rejects_garbage():
    assert parse_marker("2026-03-05") == date(2026, 3, 5)
    assert parse_marker("yesterday") is None
    assert parse_marker("") is None
    assert parse_marker(None) is None
