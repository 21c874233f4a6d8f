from __future__ import annotations

import logging

from ..common.datetime_utils import looks_like_timestamp
from ..common.validators import cell_text, cell_value
from ..core.constants import AREA_COLUMNS, AREAS_TABLE
from ..store.repository import RowStore
from ..store.tables import data_rows

logger = logging.getLogger(__name__)


class MaintenanceService:
    """One-off data fixes for sheets edited by older versions of the app."""

    def __init__(self, rows: RowStore):
        self._rows = rows

    def repair_area_time_columns(self) -> int:
        """Shift time in/out one column right on Area rows written with the old layout.

        Old rows carry the time-in stamp in the assigned-to column and the
        time-out stamp in the time-in column, leaving time-out empty. Best effort:
        rows that do not match that shape are left alone.
        """
        assigned_col = AREA_COLUMNS["assigned_to"]
        time_in_col = AREA_COLUMNS["time_in"]
        time_out_col = AREA_COLUMNS["time_out"]

        repaired = 0
        for row_index, raw in data_rows(self._rows, AREAS_TABLE):
            if not cell_text(raw, AREA_COLUMNS["name"]):
                continue

            old_in = cell_value(raw, assigned_col)
            old_out = cell_value(raw, time_in_col)
            if not looks_like_timestamp(old_in) or cell_text(raw, time_out_col):
                continue
            if cell_text(raw, time_in_col) and not looks_like_timestamp(old_out):
                continue

            self._rows.write_cell(AREAS_TABLE, row_index, time_in_col, old_in)
            if cell_text(raw, time_in_col):
                self._rows.write_cell(AREAS_TABLE, row_index, time_out_col, old_out)
            self._rows.clear_cell(AREAS_TABLE, row_index, assigned_col)
            repaired += 1

        logger.info("Repaired time columns on %d area rows", repaired)
        return repaired
