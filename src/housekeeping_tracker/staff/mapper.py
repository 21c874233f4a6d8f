from __future__ import annotations

from typing import Any, Optional

from ..common.validators import cell_text
from ..core.constants import STAFF_COLUMNS
from .model import Staff


def map_staff_row(raw: list[Any]) -> Optional[Staff]:
    name = cell_text(raw, STAFF_COLUMNS["name"])
    if not name:
        return None
    return Staff(name=name, role=cell_text(raw, STAFF_COLUMNS["role"]))
