from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from housekeeping_tracker.container import build_container
from housekeeping_tracker.core.exceptions import NotFoundError, ValidationError
from housekeeping_tracker.store.memory_store import InMemoryPropertyStore, InMemoryRowStore

TZ = ZoneInfo("America/New_York")
NOW = datetime(2026, 3, 5, 14, 7, 9, tzinfo=TZ)
LATER = datetime(2026, 3, 5, 15, 0, 1, tzinfo=TZ)


def _container(tables=None):
    rows = InMemoryRowStore(
        tables
        if tables is not None
        else {
            "Rooms": [
                ["Room", "Status", "Assigned To", "Time In", "Time Out"],
                ["Floor 1"],
                ["101", "Dirty"],
                ["102", "Clean", "Maria", "3/5/2026, 8:00:00 AM", "3/5/2026, 8:45:00 AM"],
                ["103", "Dirty"],
            ],
            "Area": [
                ["Area", "Location", "Status", "Assigned To", "Time In", "Time Out"],
                ["Lobby", "Ground", "Dirty"],
            ],
            "Staff": [["Name", "Role"], ["Maria", "Housekeeper"]],
        }
    )
    # Today's reset already ran, so updates are not wiped by the guard.
    props = InMemoryPropertyStore({"lastResetDate": "2026-03-05"})
    return build_container(timezone="America/New_York", rows=rows, properties=props)


def _room(snapshot, row_index):
    return next(r for r in snapshot.rooms if r.row_index == row_index)


@pytest.mark.parametrize("bad_id", [None, 0, 1, -3, "abc", "1", "²", " ", True, 2.5])
def test_invalid_row_id_is_rejected(bad_id):
    c = _container()
    with pytest.raises(ValidationError):
        c.housekeeping_service.update_room({"id": bad_id, "status": "Clean"}, now=NOW)


def test_missing_id_is_rejected():
    c = _container()
    with pytest.raises(ValidationError):
        c.housekeeping_service.update_area({"status": "Clean"}, now=NOW)


def test_status_round_trips_through_snapshot():
    c = _container()
    snap = c.housekeeping_service.update_room({"id": 3, "status": "In Progress"}, now=NOW)

    assert _room(snap, 3).status == "In Progress"
    assert snap.counts.in_progress_rooms == 1


def test_digit_string_id_is_accepted():
    c = _container()
    snap = c.housekeeping_service.update_room({"id": "5", "status": "Clean"}, now=NOW)
    assert _room(snap, 5).status == "Clean"


def test_falsy_status_writes_dirty():
    c = _container()
    snap = c.housekeeping_service.update_room({"id": 4, "status": ""}, now=NOW)
    assert _room(snap, 4).status == "Dirty"
    # other fields untouched when their keys are absent
    assert _room(snap, 4).assigned_to == "Maria"


def test_assigned_to_present_but_blank_clears():
    c = _container()
    snap = c.housekeeping_service.update_room({"id": 4, "status": "Clean", "assignedTo": ""}, now=NOW)
    assert _room(snap, 4).assigned_to == ""


def test_set_time_in_stamps_now_and_clears_time_out():
    c = _container()
    snap = c.housekeeping_service.update_room(
        {"id": 4, "status": "In Progress", "assignedTo": "Sam", "setTimeIn": True}, now=NOW
    )
    room = _room(snap, 4)
    assert room.assigned_to == "Sam"
    assert room.time_in == "3/5/2026, 2:07:09 PM"
    assert room.time_out == ""


def test_set_time_out_keeps_time_in():
    c = _container()
    c.housekeeping_service.update_room({"id": 3, "status": "In Progress", "setTimeIn": True}, now=NOW)
    snap = c.housekeeping_service.update_room({"id": 3, "status": "Clean", "setTimeOut": True}, now=LATER)

    room = _room(snap, 3)
    assert room.time_in == "3/5/2026, 2:07:09 PM"
    assert room.time_out == "3/5/2026, 3:00:01 PM"
    assert room.status == "Clean"


def test_reset_wins_over_stamping_in_same_call():
    c = _container()
    snap = c.housekeeping_service.update_room(
        {"id": 4, "status": "Dirty", "assignedTo": "Sam", "setTimeIn": True, "setTimeOut": True, "reset": True},
        now=NOW,
    )
    room = _room(snap, 4)
    assert (room.assigned_to, room.time_in, room.time_out) == ("", "", "")
    assert room.status == "Dirty"


def test_update_area_uses_area_columns():
    c = _container()
    snap = c.housekeeping_service.update_area(
        {"id": 2, "status": "Clean", "assignedTo": "Lee", "setTimeIn": "true"}, now=NOW
    )
    area = snap.areas[0]
    assert (area.status, area.assigned_to, area.time_in) == ("Clean", "Lee", "3/5/2026, 2:07:09 PM")
    assert c.rows.read_table("Area")[1][2] == "Clean"


def test_update_on_missing_table_fails_loudly():
    c = _container({"Rooms": [["Room", "Status"]]})
    with pytest.raises(NotFoundError):
        c.housekeeping_service.update_area({"id": 2, "status": "Clean"}, now=NOW)


def test_first_update_of_a_new_day_survives_the_reset():
    c = _container()
    tomorrow = datetime(2026, 3, 6, 9, 0, 0, tzinfo=TZ)

    snap = c.housekeeping_service.update_room({"id": 3, "status": "In Progress"}, now=tomorrow)

    assert _room(snap, 3).status == "In Progress"
    # room 102 was Clean yesterday and has been reset
    assert _room(snap, 4).status == "Dirty"
    assert c.properties.get("lastResetDate") == "2026-03-06"
