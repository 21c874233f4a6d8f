from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Area:
    """Domain entity: one common area row of the Area table."""

    row_index: int
    name: str
    location: str
    status: str
    assigned_to: str = ""
    time_in: str = ""
    time_out: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.row_index,
            "name": self.name,
            "location": self.location,
            "status": self.status,
            "assignedTo": self.assigned_to,
            "timeIn": self.time_in,
            "timeOut": self.time_out,
        }
