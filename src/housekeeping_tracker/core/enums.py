from __future__ import annotations

from enum import Enum


class CleaningStatus(str, Enum):
    """Cleaning status values as they are stored in the status column."""

    DIRTY = "Dirty"
    IN_PROGRESS = "In Progress"
    CLEAN = "Clean"


class ResetState(str, Enum):
    """Where the daily reset guard is for the current process."""

    UNKNOWN = "UNKNOWN"
    CHECKED_TODAY = "CHECKED_TODAY"
    RESETTING = "RESETTING"
    DONE = "DONE"
