from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional
from zoneinfo import ZoneInfo

from ..common.datetime_utils import marker_for, now_local, parse_marker
from ..common.validators import cell_text
from ..core.constants import AREA_COLUMNS, AREAS_TABLE, LAST_RESET_KEY, ROOM_COLUMNS, ROOMS_TABLE
from ..core.enums import CleaningStatus, ResetState
from ..rooms.mapper import is_floor_header
from ..store.repository import PropertyStore, RowStore
from ..store.tables import data_rows

logger = logging.getLogger(__name__)


class DailyResetService:
    """Once-per-calendar-day reset of every room and area to Dirty.

    Two paths reach the reset: the scheduled job (``run_daily_reset``) and the
    request fallback (``ensure_daily_reset``). Both persist the same marker.
    They may race on the same day; the reset is idempotent so a second run
    leaves the tables unchanged.
    """

    def __init__(self, rows: RowStore, properties: PropertyStore, *, tz: ZoneInfo):
        self._rows = rows
        self._properties = properties
        self._tz = tz
        self.state = ResetState.UNKNOWN

    @staticmethod
    def _reset_values(raw: list[Any], columns: dict[str, int]) -> Optional[tuple[int, list[Any]]]:
        """``(first_col, values)`` that put the row back to Dirty, None if it already is.

        Status, assigned to, time in and time out are adjacent columns in both tables.
        """
        already = (
            cell_text(raw, columns["status"]) == CleaningStatus.DIRTY.value
            and not cell_text(raw, columns["assigned_to"])
            and not cell_text(raw, columns["time_in"])
            and not cell_text(raw, columns["time_out"])
        )
        if already:
            return None
        return columns["status"], [CleaningStatus.DIRTY.value, None, None, None]

    def _reset_table(self, table: str, columns: dict[str, int], label_field: str, *, skip_headers: bool) -> int:
        updates: list[tuple[int, int, list[Any]]] = []
        for row_index, raw in data_rows(self._rows, table, missing_ok=True):
            label = cell_text(raw, columns[label_field])
            if not label or (skip_headers and is_floor_header(label)):
                continue
            patch = self._reset_values(raw, columns)
            if patch:
                updates.append((row_index, *patch))

        # One batched write per table keeps the reset within Sheets write quotas.
        self._rows.write_rows(table, updates)
        return len(updates)

    def reset_rooms(self) -> int:
        return self._reset_table(ROOMS_TABLE, ROOM_COLUMNS, "room_number", skip_headers=True)

    def reset_areas(self) -> int:
        return self._reset_table(AREAS_TABLE, AREA_COLUMNS, "name", skip_headers=False)

    def last_reset_date(self) -> Optional[str]:
        value = self._properties.get(LAST_RESET_KEY)
        return value.strip() if value else None

    def _persist_marker(self, today: str) -> None:
        current = parse_marker(self.last_reset_date())
        # Never move the marker back.
        if current and current >= parse_marker(today):
            return
        self._properties.set(LAST_RESET_KEY, today)

    def run_daily_reset(self, *, now: Optional[datetime] = None) -> None:
        """Reset everything and mark today as done. Errors propagate."""
        now = now or now_local(self._tz)
        today = marker_for(now, self._tz)

        self.state = ResetState.RESETTING
        logger.info("Daily reset started for %s", today)
        try:
            rooms = self.reset_rooms()
            areas = self.reset_areas()
            self._persist_marker(today)
        except Exception:
            self.state = ResetState.UNKNOWN
            raise

        self.state = ResetState.DONE
        logger.info("Daily reset finished for %s (rooms=%d, areas=%d)", today, rooms, areas)

    def ensure_daily_reset(self, *, now: Optional[datetime] = None) -> bool:
        """Run the reset if it has not run today. Never raises.

        Returns True when a reset ran during this call.
        """
        try:
            now = now or now_local(self._tz)
            today = marker_for(now, self._tz)
            marker = self.last_reset_date()
            last = parse_marker(marker)
            if last and last >= parse_marker(today):
                self.state = ResetState.CHECKED_TODAY
                return False

            logger.info("Reset marker is %s, today is %s; running fallback reset", marker or "unset", today)
            self.run_daily_reset(now=now)
            return True
        except Exception:
            logger.exception("Daily reset check failed; serving data without reset")
            return False
