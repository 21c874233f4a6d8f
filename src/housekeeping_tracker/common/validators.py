from __future__ import annotations

from typing import Any

from ..core.constants import HEADER_ROW
from ..core.exceptions import ValidationError


def require_row_id(value: Any, field_name: str = "id") -> int:
    """Accept an int (or digit string) pointing below the header row."""
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field_name} is required")

    if isinstance(value, str):
        value = value.strip()
        # isdecimal, not isdigit: "²" is a digit that int() rejects.
        if not value.isdecimal():
            raise ValidationError(f"{field_name} must be an integer")
        try:
            value = int(value)
        except ValueError as e:
            raise ValidationError(f"{field_name} must be an integer") from e
    elif isinstance(value, float) and value.is_integer():
        value = int(value)

    if not isinstance(value, int):
        raise ValidationError(f"{field_name} must be an integer")
    if value <= HEADER_ROW:
        raise ValidationError(f"{field_name} must be greater than {HEADER_ROW}")
    return value


def cell_text(raw: list, col: int) -> str:
    """Text of a 1-based column, ``""`` when the row is short or the cell is blank."""
    if col > len(raw):
        return ""
    value = raw[col - 1]
    if value is None:
        return ""
    return str(value).strip()


def cell_value(raw: list, col: int) -> Any:
    if col > len(raw):
        return None
    return raw[col - 1]
