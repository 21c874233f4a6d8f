from __future__ import annotations

from typing import Any

from ..core.constants import AREAS_TABLE, ROOMS_TABLE, STAFF_TABLE

DEMO_TABLES: dict[str, list[list[Any]]] = {
    ROOMS_TABLE: [
        ["Room", "Status", "Assigned To", "Time In", "Time Out"],
        ["Floor 1"],
        ["101", "Dirty"],
        ["102", "Dirty"],
        ["103", "Dirty"],
        ["Floor 2"],
        ["201", "Dirty"],
        ["202", "Dirty"],
        ["203", "Dirty"],
    ],
    AREAS_TABLE: [
        ["Area", "Location", "Status", "Assigned To", "Time In", "Time Out"],
        ["Lobby", "Ground", "Dirty"],
        ["Breakfast Room", "Ground", "Dirty"],
        ["Gym", "", "Dirty"],
    ],
    STAFF_TABLE: [
        ["Name", "Role"],
        ["Maria", "Housekeeper"],
        ["Sam", "Housekeeper"],
        ["Lee", "Supervisor"],
    ],
}


def demo_tables() -> dict[str, list[list[Any]]]:
    return {name: [list(r) for r in rows] for name, rows in DEMO_TABLES.items()}
