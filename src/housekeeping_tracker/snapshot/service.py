from __future__ import annotations

from collections import Counter
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from ..areas.mapper import map_area_row
from ..areas.model import Area
from ..core.constants import AREAS_TABLE, ROOMS_TABLE, STAFF_TABLE
from ..core.enums import CleaningStatus
from ..reset.service import DailyResetService
from ..rooms.mapper import fold_room_rows
from ..rooms.model import Room
from ..staff.mapper import map_staff_row
from ..staff.model import Staff
from ..store.repository import RowStore
from ..store.tables import data_rows
from .model import Counts, Snapshot


def compute_counts(rooms: list[Room], areas: list[Area]) -> Counts:
    # Exact, case-sensitive match: "clean" or "Done" count toward the total only.
    room_status = Counter(r.status for r in rooms)
    area_status = Counter(a.status for a in areas)
    return Counts(
        total_rooms=len(rooms),
        dirty_rooms=room_status[CleaningStatus.DIRTY.value],
        in_progress_rooms=room_status[CleaningStatus.IN_PROGRESS.value],
        clean_rooms=room_status[CleaningStatus.CLEAN.value],
        total_areas=len(areas),
        dirty_areas=area_status[CleaningStatus.DIRTY.value],
        in_progress_areas=area_status[CleaningStatus.IN_PROGRESS.value],
        clean_areas=area_status[CleaningStatus.CLEAN.value],
    )


class SnapshotService:
    """Sole read entry point: reset check, then read, map and count."""

    def __init__(self, rows: RowStore, reset: DailyResetService, *, tz: ZoneInfo):
        self._rows = rows
        self._reset = reset
        self._tz = tz

    def list_staff(self) -> list[Staff]:
        out: list[Staff] = []
        for _, raw in data_rows(self._rows, STAFF_TABLE, missing_ok=True):
            member = map_staff_row(raw)
            if member:
                out.append(member)
        return out

    def list_areas(self) -> list[Area]:
        out: list[Area] = []
        for row_index, raw in data_rows(self._rows, AREAS_TABLE, missing_ok=True):
            area = map_area_row(row_index, raw, self._tz)
            if area:
                out.append(area)
        return out

    def list_rooms(self) -> list[Room]:
        return list(fold_room_rows(data_rows(self._rows, ROOMS_TABLE, missing_ok=True), self._tz).rooms)

    def get_snapshot(self, *, now: Optional[datetime] = None) -> Snapshot:
        # ensure_daily_reset logs and swallows its own failures.
        self._reset.ensure_daily_reset(now=now)

        staff = self.list_staff()
        areas = self.list_areas()
        rooms = self.list_rooms()
        return Snapshot(staff=staff, areas=areas, rooms=rooms, counts=compute_counts(rooms, areas))
