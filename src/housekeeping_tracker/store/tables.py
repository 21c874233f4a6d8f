from __future__ import annotations

import logging
from typing import Any

from ..core.constants import FIRST_DATA_ROW
from ..core.exceptions import NotFoundError
from .repository import RowStore

logger = logging.getLogger(__name__)


def data_rows(store: RowStore, table: str, *, missing_ok: bool = False) -> list[tuple[int, list[Any]]]:
    """``(row_index, raw)`` pairs below the header row.

    With ``missing_ok`` an absent table reads as empty (fetch paths); otherwise
    NotFoundError propagates (update paths).
    """
    try:
        rows = store.read_table(table)
    except NotFoundError:
        if not missing_ok:
            raise
        logger.warning("Table %s not found; treating as empty", table)
        return []

    return [(i, list(raw)) for i, raw in enumerate(rows, start=1) if i >= FIRST_DATA_ROW]
