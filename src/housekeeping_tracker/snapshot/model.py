from __future__ import annotations

from dataclasses import dataclass, field

from ..areas.model import Area
from ..rooms.model import Room
from ..staff.model import Staff


@dataclass(frozen=True)
class Counts:
    total_rooms: int = 0
    dirty_rooms: int = 0
    in_progress_rooms: int = 0
    clean_rooms: int = 0
    total_areas: int = 0
    dirty_areas: int = 0
    in_progress_areas: int = 0
    clean_areas: int = 0

    def to_dict(self) -> dict:
        return {
            "totalRooms": self.total_rooms,
            "dirtyRooms": self.dirty_rooms,
            "inProgressRooms": self.in_progress_rooms,
            "cleanRooms": self.clean_rooms,
            "totalAreas": self.total_areas,
            "dirtyAreas": self.dirty_areas,
            "inProgressAreas": self.in_progress_areas,
            "cleanAreas": self.clean_areas,
        }


@dataclass(frozen=True)
class Snapshot:
    """Everything the front end renders in one payload."""

    staff: list[Staff] = field(default_factory=list)
    areas: list[Area] = field(default_factory=list)
    rooms: list[Room] = field(default_factory=list)
    counts: Counts = field(default_factory=Counts)

    def to_dict(self) -> dict:
        return {
            "staff": [s.to_dict() for s in self.staff],
            "areas": [a.to_dict() for a in self.areas],
            "rooms": [r.to_dict() for r in self.rooms],
            "counts": self.counts.to_dict(),
        }
