from __future__ import annotations

from typing import Any, Optional
from zoneinfo import ZoneInfo

from ..common.datetime_utils import format_cell_timestamp
from ..common.validators import cell_text, cell_value
from ..core.constants import AREA_COLUMNS, DEFAULT_LOCATION
from ..core.enums import CleaningStatus
from .model import Area


def map_area_row(row_index: int, raw: list[Any], tz: ZoneInfo) -> Optional[Area]:
    name = cell_text(raw, AREA_COLUMNS["name"])
    if not name:
        return None

    return Area(
        row_index=row_index,
        name=name,
        location=cell_text(raw, AREA_COLUMNS["location"]) or DEFAULT_LOCATION,
        status=cell_text(raw, AREA_COLUMNS["status"]) or CleaningStatus.DIRTY.value,
        assigned_to=cell_text(raw, AREA_COLUMNS["assigned_to"]),
        time_in=format_cell_timestamp(cell_value(raw, AREA_COLUMNS["time_in"]), tz),
        time_out=format_cell_timestamp(cell_value(raw, AREA_COLUMNS["time_out"]), tz),
    )
