"""The alarm clock application: load, watch the clock, ring, save on exit."""

from __future__ import annotations

import argparse
import sys
import time as _time
from datetime import datetime
from types import TracebackType
from typing import Callable

from weekalarm.schedule import AlarmList, find_due_alarm
from weekalarm.store import DEFAULT_FILENAME, Alarm, PathArg, load_schedule

WINDOW_TITLE = "Будильник"
CHECK_INTERVAL = 60.0


def week_caption(week: int) -> str:
    """Return the caption that shows the current rotation week."""
    return f"неделя: {week}"


def wake_message() -> str:
    """Return the text shown when an alarm rings."""
    return "⏰ Будильник сработал!"


def _announce(message: str) -> None:
    print(f"{WINDOW_TITLE}: {message}", flush=True)


class AlarmWindow:
    """Holds the alarm list, checks the schedule file and saves on close."""

    def __init__(
        self,
        path: PathArg = DEFAULT_FILENAME,
        notify: Callable[[str], None] | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.path = path
        self.notify = notify if notify is not None else _announce
        self.clock = clock if clock is not None else datetime.now
        schedule = load_schedule(path, self.clock().date())
        self.week = schedule.week
        self.alarm_list = AlarmList(schedule.alarms)

    @property
    def caption(self) -> str:
        return week_caption(self.week)

    def check_alarms(self) -> Alarm | None:
        """Reload the schedule file and ring the first alarm due now, if any."""
        now = self.clock()
        schedule = load_schedule(self.path, now.date())
        self.week = schedule.week
        alarm = find_due_alarm(schedule.alarms, now, self.week)
        if alarm is not None:
            self.notify(wake_message())
        return alarm

    def close(self) -> None:
        """Save every alarm in the list to the schedule file."""
        self.alarm_list.save(self.path, self.clock().date())

    def __enter__(self) -> AlarmWindow:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="weekalarm", description="Four-week rotating alarm clock.")
    parser.add_argument("--file", default=DEFAULT_FILENAME, help="schedule file")
    parser.add_argument("--once", action="store_true", help="check the alarms once and exit")
    parser.add_argument(
        "--interval", type=float, default=CHECK_INTERVAL, help="seconds between checks"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    with AlarmWindow(args.file) as window:
        print(window.caption)
        for entry in window.alarm_list:
            state = "on" if entry.enabled else "off"
            print(f"{entry.time}  {entry.week_label()}  {state}  {entry.day}")
        if args.once:
            window.check_alarms()
            return 0
        try:
            while True:
                _time.sleep(args.interval)
                window.check_alarms()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())