"""The list of alarms being edited and the check for alarms that are due."""

from __future__ import annotations

import re
from datetime import date, datetime, time as Time, timedelta
from typing import Iterable, Iterator

from weekalarm.editor import DAY_NAMES, DataEditor
from weekalarm.entry import AlarmEntry
from weekalarm.store import Alarm, PathArg, save_schedule

DEFAULT_DELAY = timedelta(minutes=5)
DEFAULT_WEEK = 1

_HHMM = re.compile(r"(\d{2}):(\d{2})")


def short_day_name(day: date) -> str:
    """Return the short Russian name of the weekday of ``day``."""
    return DAY_NAMES[day.weekday()]


def _parse_hhmm(text: str) -> Time | None:
    match = _HHMM.fullmatch(text)
    if not match:
        return None
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        return None
    return Time(hour, minute)


def find_due_alarm(alarms: Iterable[Alarm], now: datetime, week: int) -> Alarm | None:
    """Return the first enabled alarm that should ring at ``now`` in ``week``."""
    day_name = short_day_name(now.date())
    for alarm in alarms:
        if not alarm.enabled or day_name not in alarm.day or alarm.week != week:
            continue
        alarm_time = _parse_hhmm(alarm.time)
        if alarm_time is None:
            continue
        if (alarm_time.hour, alarm_time.minute) == (now.hour, now.minute):
            return alarm
    return None


def _sort_key(entry: AlarmEntry) -> tuple[int, int]:
    parsed = _parse_hhmm(entry.time)
    if parsed is None:
        return (0, 0)
    return (1, parsed.hour * 60 + parsed.minute)


class AlarmList:
    """Ordered alarm entries, the selected one, and the panel that edits it."""

    def __init__(self, alarms: Iterable[Alarm] = (), editor: DataEditor | None = None) -> None:
        self.entries: list[AlarmEntry] = [AlarmEntry.from_alarm(alarm) for alarm in alarms]
        self.editor = editor if editor is not None else DataEditor()

    def __iter__(self) -> Iterator[AlarmEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def current(self) -> AlarmEntry | None:
        return self.editor.current_entry

    def add(self, day: str, time: str, week: int, enabled: bool = True) -> AlarmEntry:
        """Append a new entry and return it."""
        entry = AlarmEntry(day, time, week)
        entry.enabled = enabled
        self.entries.append(entry)
        return entry

    def add_default(self, now: datetime | None = None) -> AlarmEntry:
        """Add an enabled alarm five minutes from ``now`` on today's weekday."""
        now = now if now is not None else datetime.now()
        time_text = (now + DEFAULT_DELAY).strftime("%H:%M")
        return self.add(short_day_name(now.date()), time_text, DEFAULT_WEEK, True)

    def select(self, entry: AlarmEntry) -> None:
        """Mark ``entry`` as the only selected one and load it into the editor."""
        if not any(item is entry for item in self.entries):
            raise ValueError("entry is not in this list")
        for item in self.entries:
            item.selected = item is entry
        self.editor.load_from_entry(entry)

    def apply(self) -> None:
        """Write the editor's values back to the selected entry."""
        self.editor.apply_to_entry()

    def delete_selected(self) -> AlarmEntry | None:
        """Remove the first selected entry and return it, or None if none is."""
        chosen = next((item for item in self.entries if item.selected), None)
        if chosen is None:
            return None
        self.entries = [item for item in self.entries if item is not chosen]
        if self.editor.current_entry is chosen:
            self.editor.current_entry = None
        return chosen

    def sort_by_time(self) -> None:
        """Order entries by time of day; unreadable times come first."""
        self.entries.sort(key=_sort_key)

    def alarms(self) -> list[Alarm]:
        return [entry.to_alarm() for entry in self.entries]

    def save(self, path: PathArg, today: date | None = None) -> None:
        save_schedule(path, self.alarms(), today)