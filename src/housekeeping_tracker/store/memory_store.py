from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.exceptions import NotFoundError
from .repository import PropertyStore, RowStore


class InMemoryRowStore(RowStore):
    """Dict-of-tables store for tests and the ``memory`` backend."""

    def __init__(self, tables: Optional[dict[str, list[list[Any]]]] = None):
        self._tables: dict[str, list[list[Any]]] = {
            name: [list(r) for r in rows] for name, rows in (tables or {}).items()
        }

    def _table(self, table: str) -> list[list[Any]]:
        if table not in self._tables:
            raise NotFoundError(f"Table not found: {table}")
        return self._tables[table]

    def read_table(self, table: str) -> Sequence[list[Any]]:
        return [list(r) for r in self._table(table)]

    def write_cell(self, table: str, row: int, col: int, value: Any) -> None:
        rows = self._table(table)
        while len(rows) < row:
            rows.append([])
        cells = rows[row - 1]
        while len(cells) < col:
            cells.append(None)
        cells[col - 1] = value

    def clear_cell(self, table: str, row: int, col: int) -> None:
        rows = self._table(table)
        if row > len(rows) or col > len(rows[row - 1]):
            return
        rows[row - 1][col - 1] = None

    def write_rows(self, table: str, updates: Sequence[tuple[int, int, list[Any]]]) -> None:
        if not updates:
            return
        for row, first_col, values in updates:
            for offset, value in enumerate(values):
                self.write_cell(table, row, first_col + offset, value)


class InMemoryPropertyStore(PropertyStore):
    def __init__(self, values: Optional[dict[str, str]] = None):
        self._values = dict(values or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value
