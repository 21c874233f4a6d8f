from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..common.validators import require_row_id
from ..core.exceptions import ValidationError


def _flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


@dataclass(frozen=True)
class RowPatch:
    """Validated update request for one room or area row.

    ``assigned_to`` is None when the caller did not send the key at all; an
    empty string means "clear the assignment".
    """

    row_index: int
    status: Optional[str] = None
    assigned_to: Optional[str] = None
    set_time_in: bool = False
    set_time_out: bool = False
    reset: bool = False

    @classmethod
    def from_payload(cls, payload: Optional[dict]) -> "RowPatch":
        payload = payload or {}
        if not isinstance(payload, dict):
            raise ValidationError("Request body must be a JSON object")
        assigned = None
        if "assignedTo" in payload:
            assigned = str(payload["assignedTo"] or "").strip()
        status = payload.get("status")

        return cls(
            row_index=require_row_id(payload.get("id")),
            status=str(status).strip() if status else None,
            assigned_to=assigned,
            set_time_in=_flag(payload.get("setTimeIn")),
            set_time_out=_flag(payload.get("setTimeOut")),
            reset=_flag(payload.get("reset")),
        )
