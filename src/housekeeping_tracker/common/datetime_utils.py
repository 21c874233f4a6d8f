from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Any, Optional
from zoneinfo import ZoneInfo

from ..core.constants import MARKER_DATE_FORMAT

TIMESTAMP_PATTERN = re.compile(r"^\d{1,2}/\d{1,2}/\d{4}, \d{1,2}:\d{2}:\d{2} [AP]M$")


def now_local(tz: ZoneInfo) -> datetime:
    """Current time in the configured timezone.

    Note: Wrapped so services can take an explicit ``now`` in tests.
    """
    return datetime.now(tz)


def to_local(value: datetime, tz: ZoneInfo) -> datetime:
    # Naive cells are already wall-clock time in the deployment timezone.
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


def format_timestamp(value: datetime, tz: ZoneInfo) -> str:
    """Format as ``M/d/yyyy, h:mm:ss AM`` (no zero padding on month, day, hour)."""
    local = to_local(value, tz)
    hour = local.hour % 12 or 12
    suffix = "AM" if local.hour < 12 else "PM"
    return f"{local.month}/{local.day}/{local.year}, {hour}:{local.minute:02d}:{local.second:02d} {suffix}"


def format_cell_timestamp(value: Any, tz: ZoneInfo) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        return format_timestamp(value, tz)
    if isinstance(value, date):
        return format_timestamp(datetime.combine(value, time()), tz)
    if isinstance(value, str):
        return value.strip()
    return str(value)


def looks_like_timestamp(value: Any) -> bool:
    if isinstance(value, datetime):
        return True
    if isinstance(value, str):
        return bool(TIMESTAMP_PATTERN.match(value.strip()))
    return False


def marker_for(now: datetime, tz: ZoneInfo) -> str:
    """Calendar day of ``now`` in the configured timezone, as ``YYYY-MM-DD``."""
    return to_local(now, tz).strftime(MARKER_DATE_FORMAT)


def parse_marker(value: Optional[str]) -> Optional[date]:
    if not value or not value.strip():
        return None
    try:
        return datetime.strptime(value.strip(), MARKER_DATE_FORMAT).date()
    except ValueError:
        return None
