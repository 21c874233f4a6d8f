from __future__ import annotations

from functools import reduce
from typing import Any, Iterable, Optional, Union
from zoneinfo import ZoneInfo

from ..common.datetime_utils import format_cell_timestamp
from ..common.validators import cell_text, cell_value
from ..core.constants import FLOOR_MARKER, ROOM_COLUMNS
from ..core.enums import CleaningStatus
from .model import FloorHeader, Room, RoomFold


def is_floor_header(label: str) -> bool:
    # Substring match: a room literally named "Floor Suite 3" reads as a header.
    return FLOOR_MARKER in label.lower()


def map_room_row(
    row_index: int,
    raw: list[Any],
    current_floor: str,
    tz: ZoneInfo,
) -> Optional[Union[Room, FloorHeader]]:
    """Map one raw Rooms row. ``None`` means the row is blank and skipped."""
    label = cell_text(raw, ROOM_COLUMNS["room_number"])
    if not label:
        return None

    if is_floor_header(label):
        return FloorHeader(row_index=row_index, label=label)

    return Room(
        row_index=row_index,
        room_number=label,
        floor=current_floor,
        status=cell_text(raw, ROOM_COLUMNS["status"]) or CleaningStatus.DIRTY.value,
        assigned_to=cell_text(raw, ROOM_COLUMNS["assigned_to"]),
        time_in=format_cell_timestamp(cell_value(raw, ROOM_COLUMNS["time_in"]), tz),
        time_out=format_cell_timestamp(cell_value(raw, ROOM_COLUMNS["time_out"]), tz),
    )


def fold_room_rows(rows: Iterable[tuple[int, list[Any]]], tz: ZoneInfo) -> RoomFold:
    """Fold ``(row_index, raw)`` pairs into the rooms, carrying the floor forward."""

    def step(acc: RoomFold, item: tuple[int, list[Any]]) -> RoomFold:
        row_index, raw = item
        mapped = map_room_row(row_index, raw, acc.current_floor, tz)
        if mapped is None:
            return acc
        if isinstance(mapped, FloorHeader):
            return RoomFold(current_floor=mapped.label, rooms=acc.rooms)
        return RoomFold(current_floor=acc.current_floor, rooms=acc.rooms + (mapped,))

    return reduce(step, rows, RoomFold())
