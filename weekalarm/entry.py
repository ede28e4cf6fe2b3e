"""An alarm as shown in the alarm list, with its on/off switch."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from weekalarm.store import Alarm

log = logging.getLogger(__name__)

ToggleCallback = Callable[[bool], None]


class ToggleSwitch:
    """An on/off switch that notifies listeners when its state changes."""

    def __init__(self, checked: bool = False) -> None:
        self._checked = bool(checked)
        self._listeners: list[ToggleCallback] = []

    @property
    def checked(self) -> bool:
        return self._checked

    def on_toggled(self, callback: ToggleCallback) -> None:
        """Register ``callback`` to receive the new state on every change."""
        self._listeners.append(callback)

    def toggle(self) -> bool:
        """Flip the switch, notify listeners and return the new state."""
        self._checked = not self._checked
        self._notify()
        return self._checked

    def set_checked(self, checked: bool) -> None:
        """Set the state; listeners hear about it only if it changed."""
        checked = bool(checked)
        if checked != self._checked:
            self._checked = checked
            self._notify()

    def _notify(self) -> None:
        for callback in list(self._listeners):
            callback(self._checked)


@dataclass(eq=False)
class AlarmEntry:
    """One row of the alarm list."""

    day: str
    time: str
    week: int
    switch: ToggleSwitch = field(default_factory=ToggleSwitch)
    selected: bool = False

    def __post_init__(self) -> None:
        self.switch.on_toggled(self._log_toggle)

    def _log_toggle(self, checked: bool) -> None:
        log.debug("toggle state changed for %s %s: %s", self.day, self.time, checked)

    @property
    def enabled(self) -> bool:
        return self.switch.checked

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self.switch.set_checked(value)

    @classmethod
    def from_alarm(cls, alarm: Alarm) -> AlarmEntry:
        entry = cls(alarm.day, alarm.time, alarm.week)
        entry.enabled = alarm.enabled
        return entry

    def to_alarm(self) -> Alarm:
        return Alarm(day=self.day, time=self.time, week=self.week, enabled=self.enabled)

    def week_label(self) -> str:
        return f"неделя {self.week}"