from __future__ import annotations

from collections import Counter
from datetime import datetime
from zoneinfo import ZoneInfo

import pytest
from gspread.exceptions import APIError, WorksheetNotFound

from housekeeping_tracker.core.exceptions import NotFoundError, TransientIOError
from housekeeping_tracker.reset.service import DailyResetService
from housekeeping_tracker.store.memory_store import InMemoryPropertyStore
from housekeeping_tracker.store.sheets_store import GoogleSheetPropertyStore, GoogleSheetRowStore

TZ = ZoneInfo("America/New_York")


class FakeResponse:
    status_code = 429
    text = "Quota exceeded"

    def json(self):
        return {"error": {"code": 429, "message": "Quota exceeded", "status": "RESOURCE_EXHAUSTED"}}


class FakeWorksheet:
    def __init__(self, title, rows, calls):
        self.title = title
        self.rows = [list(r) for r in rows]
        self.calls = calls
        self.fail = False
        self.batches = []

    def _check(self):
        if self.fail:
            raise APIError(FakeResponse())

    def _set(self, row, col, value):
        while len(self.rows) < row:
            self.rows.append([])
        cells = self.rows[row - 1]
        while len(cells) < col:
            cells.append("")
        cells[col - 1] = value

    def get_all_values(self):
        self.calls["read"] += 1
        self._check()
        return [list(r) for r in self.rows]

    def col_values(self, col):
        self.calls["read"] += 1
        self._check()
        return [r[col - 1] if len(r) >= col else "" for r in self.rows]

    def update_cell(self, row, col, value):
        self.calls["write"] += 1
        self._check()
        self._set(row, col, value)

    def append_row(self, values):
        self.calls["write"] += 1
        self._check()
        self.rows.append(list(values))

    def batch_update(self, data):
        self.calls["write"] += 1
        self._check()
        self.batches.append(data)
        for item in data:
            start = item["range"].split(":")[0]
            col = ord(start[0]) - ord("A") + 1
            row = int(start[1:])
            for offset, value in enumerate(item["values"][0]):
                self._set(row, col + offset, value)


class FakeSpreadsheet:
    def __init__(self, tables):
        self.calls = Counter()
        self.sheets = {name: FakeWorksheet(name, rows, self.calls) for name, rows in tables.items()}

    def worksheet(self, title):
        self.calls["worksheet"] += 1
        if title not in self.sheets:
            raise WorksheetNotFound(title)
        return self.sheets[title]

    def add_worksheet(self, title, rows, cols):
        self.calls["add_worksheet"] += 1
        self.sheets[title] = FakeWorksheet(title, [], self.calls)
        return self.sheets[title]


def _stale_hotel(rooms=60):
    room_rows = [["Room", "Status", "Assigned To", "Time In", "Time Out"], ["Floor 1"]]
    room_rows += [[str(100 + i), "Clean", "Maria", "3/4/2026, 9:00:00 AM", "3/4/2026, 9:30:00 AM"] for i in range(rooms)]
    return FakeSpreadsheet(
        {
            "Rooms": room_rows,
            "Area": [
                ["Area", "Location", "Status", "Assigned To", "Time In", "Time Out"],
                ["Lobby", "Ground", "Clean", "Lee", "3/4/2026, 8:00:00 AM", ""],
            ],
        }
    )


def test_daily_reset_batches_writes_per_table():
    spreadsheet = _stale_hotel(60)
    svc = DailyResetService(GoogleSheetRowStore(spreadsheet), InMemoryPropertyStore(), tz=TZ)

    svc.run_daily_reset(now=datetime(2026, 3, 5, 0, 1, tzinfo=TZ))

    assert spreadsheet.calls["write"] == 2
    assert spreadsheet.calls["worksheet"] == 2
    rooms = spreadsheet.sheets["Rooms"]
    assert rooms.batches[0][0] == {"range": "B3:E3", "values": [["Dirty", "", "", ""]]}
    assert all(r[1:5] == ["Dirty", "", "", ""] for r in rooms.rows[2:])
    assert rooms.rows[1] == ["Floor 1"]
    assert spreadsheet.sheets["Area"].rows[1] == ["Lobby", "Ground", "Dirty", "", "", ""]


def test_worksheet_is_resolved_once_per_table():
    spreadsheet = _stale_hotel(3)
    store = GoogleSheetRowStore(spreadsheet)

    store.read_table("Rooms")
    store.write_cell("Rooms", 3, 2, "In Progress")
    store.clear_cell("Rooms", 3, 3)

    assert spreadsheet.calls["worksheet"] == 1
    assert store.read_table("Rooms")[2][:3] == ["100", "In Progress", ""]


def test_missing_worksheet_maps_to_not_found():
    store = GoogleSheetRowStore(_stale_hotel(1))
    with pytest.raises(NotFoundError):
        store.read_table("Staff")
    with pytest.raises(NotFoundError):
        store.write_cell("Staff", 2, 1, "Sam")


def test_api_errors_map_to_transient_io():
    spreadsheet = _stale_hotel(1)
    spreadsheet.sheets["Rooms"].fail = True
    store = GoogleSheetRowStore(spreadsheet)

    with pytest.raises(TransientIOError):
        store.read_table("Rooms")
    with pytest.raises(TransientIOError):
        store.write_cell("Rooms", 3, 2, "Clean")
    with pytest.raises(TransientIOError):
        store.write_rows("Rooms", [(3, 2, ["Dirty", None, None, None])])


def test_property_store_creates_worksheet_on_first_set():
    spreadsheet = FakeSpreadsheet({})
    props = GoogleSheetPropertyStore(spreadsheet)

    assert props.get("lastResetDate") is None
    assert spreadsheet.calls["add_worksheet"] == 0

    props.set("lastResetDate", "2026-03-05")
    props.set("lastResetDate", "2026-03-06")

    assert spreadsheet.calls["add_worksheet"] == 1
    assert spreadsheet.sheets["Properties"].rows == [["lastResetDate", "2026-03-06"]]
    assert props.get("lastResetDate") == "2026-03-06"


def test_property_store_api_errors_map_to_transient_io():
    spreadsheet = FakeSpreadsheet({"Properties": [["lastResetDate", "2026-03-05"]]})
    spreadsheet.sheets["Properties"].fail = True
    props = GoogleSheetPropertyStore(spreadsheet)

    with pytest.raises(TransientIOError):
        props.get("lastResetDate")
    with pytest.raises(TransientIOError):
        props.set("lastResetDate", "2026-03-06")
