from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from zoneinfo import ZoneInfo

from .core.constants import DEFAULT_TIMEZONE
from .housekeeping.service import HousekeepingService
from .maintenance.service import MaintenanceService
from .reset.service import DailyResetService
from .snapshot.service import SnapshotService
from .store.connection import build_stores, store_config_from_dict
from .store.repository import PropertyStore, RowStore


@dataclass(frozen=True)
class Container:
    tz: ZoneInfo

    rows: RowStore
    properties: PropertyStore

    reset_service: DailyResetService
    snapshot_service: SnapshotService
    housekeeping_service: HousekeepingService
    maintenance_service: MaintenanceService


def build_container(
    *,
    store_config: Optional[dict] = None,
    timezone: str = DEFAULT_TIMEZONE,
    rows: Optional[RowStore] = None,
    properties: Optional[PropertyStore] = None,
) -> Container:
    """Wire services. Pass ``rows``/``properties`` to bypass the configured backend."""
    tz = ZoneInfo(timezone)

    if rows is None or properties is None:
        built_rows, built_properties = build_stores(store_config_from_dict(store_config or {}))
        rows = rows or built_rows
        properties = properties or built_properties

    reset_service = DailyResetService(rows, properties, tz=tz)
    snapshot_service = SnapshotService(rows, reset_service, tz=tz)
    housekeeping_service = HousekeepingService(rows, reset_service, snapshot_service, tz=tz)
    maintenance_service = MaintenanceService(rows)

    return Container(
        tz=tz,
        rows=rows,
        properties=properties,
        reset_service=reset_service,
        snapshot_service=snapshot_service,
        housekeeping_service=housekeeping_service,
        maintenance_service=maintenance_service,
    )
