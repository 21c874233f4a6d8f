from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Room:
    """Domain entity: one room row of the Rooms table.

    ``row_index`` is the physical 1-based row and doubles as the room's id.
    """

    row_index: int
    room_number: str
    floor: str
    status: str
    assigned_to: str = ""
    time_in: str = ""
    time_out: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.row_index,
            "roomNumber": self.room_number,
            "floor": self.floor,
            "status": self.status,
            "assignedTo": self.assigned_to,
            "timeIn": self.time_in,
            "timeOut": self.time_out,
        }


@dataclass(frozen=True)
class FloorHeader:
    """Structural row that starts a new floor grouping. Not a room."""

    row_index: int
    label: str


@dataclass(frozen=True)
class RoomFold:
    """Accumulator when scanning the Rooms table top to bottom."""

    current_floor: str = ""
    rooms: tuple[Room, ...] = ()
