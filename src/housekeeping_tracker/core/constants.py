"""Constants and defaults.

Note: Table names and column positions mirror the spreadsheet layout; keep
them here so mappers, resets and updates agree on one layout.
"""

ROOMS_TABLE = "Rooms"
AREAS_TABLE = "Area"
STAFF_TABLE = "Staff"

HEADER_ROW = 1
FIRST_DATA_ROW = 2

# Rooms: A=room number (or floor header), B=status, C=assigned to, D=time in, E=time out
ROOM_COLUMNS = {
    "room_number": 1,
    "status": 2,
    "assigned_to": 3,
    "time_in": 4,
    "time_out": 5,
}

# Area: A=name, B=location, C=status, D=assigned to, E=time in, F=time out
AREA_COLUMNS = {
    "name": 1,
    "location": 2,
    "status": 3,
    "assigned_to": 4,
    "time_in": 5,
    "time_out": 6,
}

# Staff: A=name, B=role
STAFF_COLUMNS = {
    "name": 1,
    "role": 2,
}

FLOOR_MARKER = "floor"
DEFAULT_LOCATION = "Unassigned"

LAST_RESET_KEY = "lastResetDate"
MARKER_DATE_FORMAT = "%Y-%m-%d"

DEFAULT_TIMEZONE = "America/New_York"
DEFAULT_RESET_HOUR = 0
