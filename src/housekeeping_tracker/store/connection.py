from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .memory_store import InMemoryPropertyStore, InMemoryRowStore
from .repository import PropertyStore, RowStore
from .seed import demo_tables

BACKEND_WORKBOOK = "workbook"
BACKEND_GSHEETS = "gsheets"
BACKEND_MEMORY = "memory"


@dataclass
class StoreConfig:
    backend: str = BACKEND_WORKBOOK
    workbook_path: str = "data/housekeeping.xlsx"
    spreadsheet_id: Optional[str] = None
    credentials_env: str = "GOOGLE_SERVICE_ACCOUNT_JSON"


def store_config_from_dict(raw: dict) -> StoreConfig:
    return StoreConfig(
        backend=str(raw.get("backend", BACKEND_WORKBOOK)).lower(),
        workbook_path=str(raw.get("workbook_path", "data/housekeeping.xlsx")),
        spreadsheet_id=raw.get("spreadsheet_id") or None,
        credentials_env=str(raw.get("credentials_env", "GOOGLE_SERVICE_ACCOUNT_JSON")),
    )


def build_stores(config: StoreConfig) -> tuple[RowStore, PropertyStore]:
    """Pick the row store and property store for the configured backend."""
    if config.backend == BACKEND_MEMORY:
        return InMemoryRowStore(demo_tables()), InMemoryPropertyStore()

    if config.backend == BACKEND_WORKBOOK:
        from .workbook_store import WorkbookPropertyStore, WorkbookRowStore

        return WorkbookRowStore(config.workbook_path), WorkbookPropertyStore(config.workbook_path)

    if config.backend == BACKEND_GSHEETS:
        from .sheets_store import GoogleSheetPropertyStore, GoogleSheetRowStore, client_from_env

        if not config.spreadsheet_id:
            raise ValueError("spreadsheet_id is required for the gsheets backend")
        spreadsheet = client_from_env(config.credentials_env).open_by_key(config.spreadsheet_id)
        return GoogleSheetRowStore(spreadsheet), GoogleSheetPropertyStore(spreadsheet)

    raise ValueError(f"Unknown store backend: {config.backend!r}")
