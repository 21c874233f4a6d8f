from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from ..common.datetime_utils import format_timestamp, now_local
from ..core.constants import AREA_COLUMNS, AREAS_TABLE, ROOM_COLUMNS, ROOMS_TABLE
from ..core.enums import CleaningStatus
from ..reset.service import DailyResetService
from ..snapshot.model import Snapshot
from ..snapshot.service import SnapshotService
from ..store.repository import RowStore
from .model import RowPatch

logger = logging.getLogger(__name__)


class HousekeepingService:
    """Use case: staff change the status of a room or area row."""

    def __init__(self, rows: RowStore, reset: DailyResetService, snapshots: SnapshotService, *, tz: ZoneInfo):
        self._rows = rows
        self._reset = reset
        self._snapshots = snapshots
        self._tz = tz

    def _apply(self, table: str, columns: dict[str, int], patch: RowPatch, now: datetime) -> None:
        row = patch.row_index

        self._rows.write_cell(table, row, columns["status"], patch.status or CleaningStatus.DIRTY.value)

        if patch.assigned_to is not None:
            if patch.assigned_to:
                self._rows.write_cell(table, row, columns["assigned_to"], patch.assigned_to)
            else:
                self._rows.clear_cell(table, row, columns["assigned_to"])

        if patch.set_time_in:
            self._rows.write_cell(table, row, columns["time_in"], format_timestamp(now, self._tz))
            self._rows.clear_cell(table, row, columns["time_out"])

        if patch.set_time_out:
            self._rows.write_cell(table, row, columns["time_out"], format_timestamp(now, self._tz))

        # Applied last so it wins over stamping in the same request.
        if patch.reset:
            for field in ("assigned_to", "time_in", "time_out"):
                self._rows.clear_cell(table, row, columns[field])

        logger.info("Updated %s row %d (status=%s)", table, row, patch.status or CleaningStatus.DIRTY.value)

    def update_room(self, payload: Optional[dict], *, now: Optional[datetime] = None) -> Snapshot:
        patch = RowPatch.from_payload(payload)
        now = now or now_local(self._tz)
        # Reset first, or the refreshed snapshot would wipe the first update of a new day.
        self._reset.ensure_daily_reset(now=now)
        self._apply(ROOMS_TABLE, ROOM_COLUMNS, patch, now)
        return self._snapshots.get_snapshot(now=now)

    def update_area(self, payload: Optional[dict], *, now: Optional[datetime] = None) -> Snapshot:
        patch = RowPatch.from_payload(payload)
        now = now or now_local(self._tz)
        self._reset.ensure_daily_reset(now=now)
        self._apply(AREAS_TABLE, AREA_COLUMNS, patch, now)
        return self._snapshots.get_snapshot(now=now)
