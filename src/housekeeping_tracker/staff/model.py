from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Staff:
    """Read-only staff member listed in the Staff table."""

    name: str
    role: str = ""

    def to_dict(self) -> dict:
        return {"name": self.name, "role": self.role}
