from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Optional, Sequence
from zipfile import BadZipFile

import openpyxl
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.workbook import Workbook

from ..core.exceptions import NotFoundError, TransientIOError
from .repository import PropertyStore, RowStore

logger = logging.getLogger(__name__)

PROPERTIES_SHEET = "_Properties"

# One lock per workbook path: a load/modify/save cycle must not interleave
# with another request's cycle on the same file.
_locks: dict[str, threading.RLock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    key = str(path.resolve())
    with _locks_guard:
        if key not in _locks:
            _locks[key] = threading.RLock()
        return _locks[key]


@contextmanager
def workbook_session(path: Path, *, write: bool = False) -> Iterator[Workbook]:
    """Open the workbook for one operation, saving it afterwards when ``write``.

    Note: Like a short-lived DB connection, every call re-reads the file so a
    write is visible to the next read.
    """
    with _lock_for(path):
        try:
            wb = openpyxl.load_workbook(path)
        except (OSError, InvalidFileException, BadZipFile) as e:
            raise TransientIOError(f"Cannot open workbook {path}: {e}") from e

        try:
            yield wb
            if write:
                try:
                    wb.save(path)
                except OSError as e:
                    raise TransientIOError(f"Cannot save workbook {path}: {e}") from e
        finally:
            wb.close()


class WorkbookRowStore(RowStore):
    """Row store over a local ``.xlsx`` file (openpyxl)."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def _sheet(self, wb: Workbook, table: str):
        if table not in wb.sheetnames:
            raise NotFoundError(f"Table not found: {table}")
        return wb[table]

    def read_table(self, table: str) -> Sequence[list[Any]]:
        with workbook_session(self._path) as wb:
            ws = self._sheet(wb, table)
            rows = [list(r) for r in ws.iter_rows(values_only=True)]
        logger.debug("Read %d rows from %s", len(rows), table)
        return rows

    def write_cell(self, table: str, row: int, col: int, value: Any) -> None:
        with workbook_session(self._path, write=True) as wb:
            ws = self._sheet(wb, table)
            ws.cell(row=int(row), column=int(col), value=value)
        logger.debug("Wrote %s!R%dC%d", table, row, col)

    def clear_cell(self, table: str, row: int, col: int) -> None:
        self.write_cell(table, row, col, None)

    def write_rows(self, table: str, updates: Sequence[tuple[int, int, list[Any]]]) -> None:
        if not updates:
            return
        # One load/save cycle for the whole batch.
        with workbook_session(self._path, write=True) as wb:
            ws = self._sheet(wb, table)
            for row, first_col, values in updates:
                for offset, value in enumerate(values):
                    ws.cell(row=int(row), column=int(first_col) + offset, value=value)
        logger.debug("Wrote %d row ranges to %s", len(updates), table)


class WorkbookPropertyStore(PropertyStore):
    """Key/value pairs in a hidden ``_Properties`` sheet (key in A, value in B)."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def get(self, key: str) -> Optional[str]:
        with workbook_session(self._path) as wb:
            if PROPERTIES_SHEET not in wb.sheetnames:
                return None
            for k, v, *_ in wb[PROPERTIES_SHEET].iter_rows(min_col=1, max_col=2, values_only=True):
                if k == key:
                    return None if v is None else str(v)
        return None

    def set(self, key: str, value: str) -> None:
        with workbook_session(self._path, write=True) as wb:
            if PROPERTIES_SHEET in wb.sheetnames:
                ws = wb[PROPERTIES_SHEET]
            else:
                ws = wb.create_sheet(PROPERTIES_SHEET)
                ws.sheet_state = "hidden"

            for row in ws.iter_rows(min_col=1, max_col=2):
                if row[0].value == key:
                    row[1].value = value
                    return

            if ws.max_row == 1 and ws.cell(row=1, column=1).value is None:
                ws.cell(row=1, column=1, value=key)
                ws.cell(row=1, column=2, value=value)
            else:
                ws.append([key, value])


def create_workbook(path: str | Path, tables: dict[str, list[list[Any]]]) -> Path:
    """Write a fresh workbook with one sheet per table (used by seeding)."""
    path = Path(path)
    wb = openpyxl.Workbook()
    default = wb.active
    for name, rows in tables.items():
        ws = wb.create_sheet(name)
        for r in rows:
            ws.append(list(r))
    if default is not None:
        wb.remove(default)

    path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(path)
    return path
