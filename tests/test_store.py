import json
from datetime import date, timedelta

import pytest

from weekalarm.store import (
    Alarm,
    Schedule,
    load_schedule,
    rotate_week,
    save_schedule,
    week_start,
)

TODAY = date(2024, 1, 10)


def write(path, root):
    path.write_text(json.dumps(root), encoding="utf-8")


def test_week_start_worked_example():
    assert week_start(TODAY) == date(2024, 1, 8)


@pytest.mark.parametrize("offset", range(14))
def test_week_start_is_monday_within_week(offset):
    day = TODAY + timedelta(days=offset)
    start = week_start(day)
    assert start.weekday() == 0
    assert 0 <= (day - start).days < 7


def test_rotate_week_wraps():
    assert rotate_week(4, 1) == 1


@pytest.mark.parametrize("week", [1, 2, 3, 4])
def test_rotate_week_full_cycle_returns_same(week):
    assert rotate_week(week, 0) == week
    assert rotate_week(week, 4) == week
    assert rotate_week(week, 8) == week


@pytest.mark.parametrize("passed", range(10))
def test_rotate_week_stays_in_range(passed):
    assert 1 <= rotate_week(2, passed) <= 4


def test_missing_file_gives_empty_schedule(tmp_path):
    assert load_schedule(tmp_path / "none.json", TODAY) == Schedule(week=1, alarms=[])


def test_invalid_json_gives_empty_schedule(tmp_path):
    path = tmp_path / "alarms.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_schedule(path, TODAY) == Schedule()


def test_non_object_root_gives_empty_schedule(tmp_path):
    path = tmp_path / "alarms.json"
    write(path, [1, 2])
    assert load_schedule(path, TODAY) == Schedule()


def test_initialises_last_monday(tmp_path):
    path = tmp_path / "alarms.json"
    write(path, {"week": 3, "alarms": []})
    schedule = load_schedule(path, TODAY)
    assert schedule.week == 3
    stored = json.loads(path.read_text(encoding="utf-8"))
    assert stored["last_monday"] == week_start(TODAY).isoformat()
    assert stored["week"] == 3


def test_advances_week_after_whole_weeks(tmp_path):
    path = tmp_path / "alarms.json"
    last = week_start(TODAY) - timedelta(days=14)
    write(path, {"week": 3, "last_monday": last.isoformat(), "alarms": []})
    schedule = load_schedule(path, TODAY)
    assert schedule.week == rotate_week(3, 2)
    stored = json.loads(path.read_text(encoding="utf-8"))
    assert stored["week"] == schedule.week
    assert stored["last_monday"] == week_start(TODAY).isoformat()


def test_same_week_leaves_file_untouched(tmp_path):
    path = tmp_path / "alarms.json"
    text = json.dumps({"week": 2, "last_monday": week_start(TODAY).isoformat()})
    path.write_text(text, encoding="utf-8")
    assert load_schedule(path, TODAY).week == 2
    assert path.read_text(encoding="utf-8") == text


def test_future_monday_does_not_rotate(tmp_path):
    path = tmp_path / "alarms.json"
    future = week_start(TODAY) + timedelta(days=21)
    write(path, {"week": 2, "last_monday": future.isoformat()})
    assert load_schedule(path, TODAY).week == 2


def test_alarm_fields_and_skipping(tmp_path):
    path = tmp_path / "alarms.json"
    write(
        path,
        {
            "week": 1,
            "last_monday": week_start(TODAY).isoformat(),
            "alarms": [
                {"day": "пн ср", "time": "07:30", "week": 2, "active": True},
                "junk",
                {},
            ],
        },
    )
    alarms = load_schedule(path, TODAY).alarms
    assert alarms == [Alarm("пн ср", "07:30", 2, True), Alarm("", "", 0, False)]


def test_save_then_load_round_trip(tmp_path):
    path = tmp_path / "alarms.json"
    alarms = [Alarm("пн", "06:00", 1, True), Alarm("вт чт", "08:15", 3, False)]
    save_schedule(path, alarms, TODAY)
    stored = json.loads(path.read_text(encoding="utf-8"))
    assert stored["alarm_trigger"] is False
    assert stored["week"] == max(a.week for a in alarms)
    assert stored["last_monday"] == week_start(TODAY).isoformat()
    schedule = load_schedule(path, TODAY)
    assert schedule.alarms == alarms
    assert schedule.week == stored["week"]


def test_save_empty_uses_week_one(tmp_path):
    path = tmp_path / "alarms.json"
    save_schedule(path, [], TODAY)
    stored = json.loads(path.read_text(encoding="utf-8"))
    assert stored["week"] == 1
    assert stored["alarms"] == []


def test_save_to_directory_raises(tmp_path):
    with pytest.raises(OSError):
        save_schedule(tmp_path, [], TODAY)