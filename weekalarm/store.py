"""Reading and writing the alarm schedule file."""

from __future__ import annotations

import json
import logging
import math
import re
from dataclasses import dataclass, field
from datetime import date, timedelta
from os import PathLike
from pathlib import Path
from typing import Any, Iterable, Union

log = logging.getLogger(__name__)

DEFAULT_FILENAME = "alarms.json"
WEEK_CYCLE = 4

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")

PathArg = Union[str, "PathLike[str]"]


@dataclass
class Alarm:
    """One alarm as stored in the schedule file."""

    day: str = ""
    time: str = ""
    week: int = 0
    enabled: bool = False


@dataclass
class Schedule:
    """The current rotation week together with the stored alarms."""

    week: int = 1
    alarms: list[Alarm] = field(default_factory=list)


def week_start(day: date) -> date:
    """Return the Monday of the week that contains ``day``."""
    return day - timedelta(days=day.weekday())


def rotate_week(week: int, weeks_passed: int) -> int:
    """Advance a week number in the four-week cycle by ``weeks_passed`` weeks."""
    # Truncating remainder, so out-of-range input behaves as the stored format expects.
    return int(math.fmod(week - 1 + weeks_passed, WEEK_CYCLE)) + 1


def _to_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return default


def _to_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _to_bool(value: Any) -> bool:
    return value if isinstance(value, bool) else False


def _parse_date(value: Any) -> date | None:
    if not isinstance(value, str) or not _ISO_DATE.fullmatch(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def _dump(root: dict[str, Any]) -> str:
    return json.dumps(root, indent=4, sort_keys=True, ensure_ascii=False) + "\n"


def _alarm_from_json(obj: dict[str, Any]) -> Alarm:
    return Alarm(
        day=_to_str(obj.get("day")),
        time=_to_str(obj.get("time")),
        week=_to_int(obj.get("week"), 0),
        enabled=_to_bool(obj.get("active")),
    )


def _alarm_to_json(alarm: Alarm) -> dict[str, Any]:
    return {
        "day": alarm.day,
        "time": alarm.time,
        "week": alarm.week,
        "active": alarm.enabled,
    }


def load_schedule(path: PathArg = DEFAULT_FILENAME, today: date | None = None) -> Schedule:
    """Load alarms from ``path`` and work out the current rotation week.

    When whole weeks have passed since the stored Monday, the week number is
    advanced and the file is rewritten. A file without a valid stored Monday is
    initialised. An unreadable or malformed file yields an empty schedule.
    """
    path = Path(path)
    today = today if today is not None else date.today()

    try:
        raw = path.read_bytes()
    except OSError:
        log.warning("cannot open file %s", path)
        return Schedule()

    try:
        root = json.loads(raw)
    except ValueError as exc:
        log.warning("JSON parse error in %s: %s", path, exc)
        return Schedule()

    if not isinstance(root, dict):
        log.warning("JSON root of %s is not an object", path)
        return Schedule()

    week = _to_int(root.get("week"), 1)
    this_monday = week_start(today)
    last_monday = _parse_date(root.get("last_monday"))

    if last_monday is None:
        needs_update = True
    else:
        weeks_passed = int((this_monday - last_monday).days / 7)
        needs_update = weeks_passed > 0
        if needs_update:
            week = rotate_week(week, weeks_passed)

    if needs_update:
        root["week"] = week
        root["last_monday"] = this_monday.isoformat()
        try:
            path.write_text(_dump(root), encoding="utf-8")
        except OSError:
            log.warning("cannot rewrite file %s", path)

    entries = root.get("alarms")
    alarms = [
        _alarm_from_json(item)
        for item in (entries if isinstance(entries, list) else [])
        if isinstance(item, dict)
    ]
    return Schedule(week=week, alarms=alarms)


def save_schedule(
    path: PathArg, alarms: Iterable[Alarm], today: date | None = None
) -> None:
    """Write ``alarms`` to ``path``; the stored week is the largest alarm week."""
    today = today if today is not None else date.today()
    alarms = list(alarms)
    root = {
        "alarm_trigger": False,
        "week": max([1, *(alarm.week for alarm in alarms)]),
        "last_monday": week_start(today).isoformat(),
        "alarms": [_alarm_to_json(alarm) for alarm in alarms],
    }
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(_dump(root))