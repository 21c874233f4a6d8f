from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence


class RowStore(Protocol):
    """Tabular backing store addressed by table name, 1-based row and column.

    Note (DIP): services depend on this interface, never on a concrete
    spreadsheet client.
    """

    def read_table(self, table: str) -> Sequence[list[Any]]:
        """All rows of ``table`` in physical order, header row included.

        Raises NotFoundError when the table does not exist.
        """

        raise NotImplementedError

    def write_cell(self, table: str, row: int, col: int, value: Any) -> None:
        raise NotImplementedError

    def clear_cell(self, table: str, row: int, col: int) -> None:
        raise NotImplementedError

    def write_rows(self, table: str, updates: Sequence[tuple[int, int, list[Any]]]) -> None:
        """Write several row ranges in one call.

        Each update is ``(row, first_col, values)``; ``None`` values clear the cell.
        """

        raise NotImplementedError


class PropertyStore(Protocol):
    """Persisted string key/value pairs (holds the daily reset marker)."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError
