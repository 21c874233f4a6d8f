from __future__ import annotations

import json
import logging
import os
from typing import Any, Optional, Sequence

import gspread
from google.oauth2.service_account import Credentials
from gspread.exceptions import APIError, WorksheetNotFound
from gspread.utils import rowcol_to_a1

from ..core.exceptions import NotFoundError, TransientIOError
from .repository import PropertyStore, RowStore

logger = logging.getLogger(__name__)

SCOPES = [
    "https://www.googleapis.com/auth/spreadsheets",
    "https://www.googleapis.com/auth/drive",
]

PROPERTIES_WORKSHEET = "Properties"


def client_from_env(env_key: str) -> gspread.Client:
    """Build a gspread client from a service-account JSON payload in ``env_key``."""
    creds_json = os.getenv(env_key)
    if not creds_json:
        raise RuntimeError(
            f"Environment variable {env_key} not found. "
            "Set it to the full JSON payload of your service account key."
        )

    try:
        info = json.loads(creds_json)
    except json.JSONDecodeError as e:
        raise RuntimeError(f"Invalid service account JSON in {env_key}") from e

    creds = Credentials.from_service_account_info(info, scopes=SCOPES)
    return gspread.authorize(creds)


class GoogleSheetRowStore(RowStore):
    """Row store over a Google spreadsheet, one worksheet per table."""

    def __init__(self, spreadsheet: gspread.Spreadsheet):
        self._spreadsheet = spreadsheet
        self._worksheets: dict[str, gspread.Worksheet] = {}

    def _worksheet(self, table: str) -> gspread.Worksheet:
        # Worksheet lookups cost an API call each; resolve a table once.
        if table in self._worksheets:
            return self._worksheets[table]
        try:
            ws = self._spreadsheet.worksheet(table)
        except WorksheetNotFound as e:
            raise NotFoundError(f"Table not found: {table}") from e
        except APIError as e:
            raise TransientIOError(f"Sheets API error opening {table}: {e}") from e
        self._worksheets[table] = ws
        return ws

    def read_table(self, table: str) -> Sequence[list[Any]]:
        ws = self._worksheet(table)
        try:
            rows = ws.get_all_values()
        except APIError as e:
            raise TransientIOError(f"Sheets API error reading {table}: {e}") from e
        logger.debug("Read %d rows from %s", len(rows), table)
        return [list(r) for r in rows]

    def write_cell(self, table: str, row: int, col: int, value: Any) -> None:
        ws = self._worksheet(table)
        try:
            ws.update_cell(int(row), int(col), "" if value is None else value)
        except APIError as e:
            raise TransientIOError(f"Sheets API error writing {table}!R{row}C{col}: {e}") from e

    def clear_cell(self, table: str, row: int, col: int) -> None:
        self.write_cell(table, row, col, "")

    def write_rows(self, table: str, updates: Sequence[tuple[int, int, list[Any]]]) -> None:
        if not updates:
            return
        ws = self._worksheet(table)
        ranges = []
        for row, first_col, values in updates:
            start = rowcol_to_a1(int(row), int(first_col))
            end = rowcol_to_a1(int(row), int(first_col) + len(values) - 1)
            ranges.append({"range": f"{start}:{end}", "values": [["" if v is None else v for v in values]]})
        try:
            ws.batch_update(ranges)
        except APIError as e:
            raise TransientIOError(f"Sheets API error writing {len(ranges)} ranges to {table}: {e}") from e
        logger.debug("Wrote %d row ranges to %s", len(ranges), table)


class GoogleSheetPropertyStore(PropertyStore):
    """Key/value pairs in a ``Properties`` worksheet (key in A, value in B)."""

    def __init__(self, spreadsheet: gspread.Spreadsheet):
        self._spreadsheet = spreadsheet

    def _worksheet(self, *, create: bool) -> Optional[gspread.Worksheet]:
        try:
            return self._spreadsheet.worksheet(PROPERTIES_WORKSHEET)
        except WorksheetNotFound:
            if not create:
                return None
            return self._spreadsheet.add_worksheet(title=PROPERTIES_WORKSHEET, rows=10, cols=2)

    def get(self, key: str) -> Optional[str]:
        try:
            ws = self._worksheet(create=False)
            if ws is None:
                return None
            for r in ws.get_all_values():
                if r and r[0] == key:
                    return r[1] if len(r) > 1 else ""
        except APIError as e:
            raise TransientIOError(f"Sheets API error reading property {key}: {e}") from e
        return None

    def set(self, key: str, value: str) -> None:
        try:
            ws = self._worksheet(create=True)
            keys = ws.col_values(1)
            if key in keys:
                ws.update_cell(keys.index(key) + 1, 2, value)
            else:
                ws.append_row([key, value])
        except APIError as e:
            raise TransientIOError(f"Sheets API error writing property {key}: {e}") from e
