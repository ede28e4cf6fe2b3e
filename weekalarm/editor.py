"""Editing panel for a single alarm entry."""

from __future__ import annotations

import re
from datetime import datetime, time as Time
from typing import Callable, Iterable

from weekalarm.entry import AlarmEntry

DAY_NAMES = ("пн", "вт", "ср", "чт", "пт", "сб", "вс")
MIN_WEEK = 1
MAX_WEEK = 4

_HHMM = re.compile(r"(\d{2}):(\d{2})")


def parse_days(text: str) -> frozenset[str]:
    """Return the known short day names found in space-separated ``text``."""
    return frozenset(part for part in text.split(" ") if part in DAY_NAMES)


def join_days(days: Iterable[str]) -> str:
    """Join day names in weekday order, separated by single spaces."""
    chosen = set(days)
    return " ".join(name for name in DAY_NAMES if name in chosen)


def clamp_week(week: int) -> int:
    """Limit a week number to the four-week cycle."""
    return max(MIN_WEEK, min(MAX_WEEK, week))


def _parse_time(text: str) -> Time | None:
    match = _HHMM.fullmatch(text)
    if not match:
        return None
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        return None
    return Time(hour, minute)


class DataEditor:
    """Holds the time, week and days being edited for the current entry."""

    def __init__(self, time: Time | None = None) -> None:
        self.time = time if time is not None else datetime.now().time()
        self.week = MIN_WEEK
        self.days: set[str] = set()
        self.current_entry: AlarmEntry | None = None
        self._listeners: list[Callable[[], None]] = []

    @property
    def current_week(self) -> int:
        return self.week

    @property
    def week_caption(self) -> str:
        return f"Неделя: {self.week}"

    def on_data_changed(self, callback: Callable[[], None]) -> None:
        """Register ``callback`` to run after changes are applied to an entry."""
        self._listeners.append(callback)

    def set_week(self, week: int) -> None:
        self.week = clamp_week(week)

    def load_from_entry(self, entry: AlarmEntry | None) -> None:
        """Make ``entry`` the one being edited and copy its values in."""
        if entry is None:
            return
        self.current_entry = entry
        parsed = _parse_time(entry.time)
        if parsed is not None:
            self.time = parsed
        self.set_week(entry.week)
        self.days = set(parse_days(entry.day))

    def apply_to_entry(self) -> None:
        """Write the edited values back to the current entry."""
        entry = self.current_entry
        if entry is None:
            return
        entry.day = join_days(self.days)
        entry.time = self.time.strftime("%H:%M")
        entry.week = self.week
        for callback in list(self._listeners):
            callback()

    def select_all_days(self) -> None:
        self.days = set(DAY_NAMES)

    def unselect_all_days(self) -> None:
        """Clear every day and switch the current entry off."""
        self.days.clear()
        if self.current_entry is not None:
            self.current_entry.enabled = False