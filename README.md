# weekalarm

An alarm clock whose alarms follow a four-week rotation. Each alarm has a
time (`HH:MM`), a set of weekdays (`пн вт ср чт пт сб вс`), the week of the
rotation it belongs to (1 to 4), and an on/off switch. An alarm rings only
when it is enabled, today's short weekday name appears in its days, the
current rotation week equals its week, and the clock shows its hour and
minute.

## Installation

```
pip install .
```

No packages beyond the standard library are needed.

## Running

```
weekalarm [--file PATH] [--once] [--interval SECONDS]
```

- `--file` – the schedule file (default `alarms.json` in the current
  directory).
- `--once` – check the alarms once and exit.
- `--interval` – seconds between checks (default 60).

On start the command prints the current rotation week (`неделя: N`) and one
line per alarm: time, week, `on`/`off`, and days. It then re-reads the file
and checks the alarms every interval until interrupted with Ctrl+C. When an
alarm is due it prints `Будильник: ⏰ Будильник сработал!`.

On exit (also after `--once`) the alarms are written back to the file. The
stored `week` then becomes the largest week among the alarms (at least 1),
and `last_monday` the Monday of the current week.

## The schedule file

```json
{
    "alarm_trigger": false,
    "week": 2,
    "last_monday": "2024-05-06",
    "alarms": [
        {"day": "пн ср пт", "time": "07:30", "week": 2, "active": true}
    ]
}
```

When the file is loaded, every full week that has passed since
`last_monday` moves the rotation on by one, wrapping from week 4 back to
week 1, and the file is rewritten with the new week and Monday. A file with
no valid `last_monday` is initialised the same way. A file that cannot be
read, is not valid JSON, or whose root is not an object gives an empty
schedule in week 1.

## Using the library

```python
from datetime import date, datetime
from weekalarm.store import load_schedule, save_schedule
from weekalarm.schedule import AlarmList, find_due_alarm

schedule = load_schedule("alarms.json", date.today())
alarms = AlarmList(schedule.alarms)

entry = alarms.add("пн ср", "07:30", 2)
alarms.select(entry)              # loads the entry into alarms.editor
alarms.editor.select_all_days()
alarms.editor.set_week(3)         # clamped to 1..4
alarms.apply()                    # entry.day == "пн вт ср чт пт сб вс", entry.week == 3

alarms.sort_by_time()
due = find_due_alarm(alarms.alarms(), datetime(2024, 5, 6, 7, 30), 3)

alarms.save("alarms.json", date.today())
```

- `weekalarm.store` – `Alarm`, `Schedule`, `load_schedule`, `save_schedule`,
  `week_start`, `rotate_week`.
- `weekalarm.entry` – `AlarmEntry` (a list row) and `ToggleSwitch` (its
  on/off switch with change listeners).
- `weekalarm.editor` – `DataEditor` (time, week and days being edited),
  `parse_days`, `join_days`, `clamp_week`.
- `weekalarm.schedule` – `AlarmList` (add, `add_default`, select,
  `delete_selected`, `sort_by_time`, save) and `find_due_alarm`.
- `weekalarm.app` – `AlarmWindow` (loads the file, `check_alarms`, saves on
  close or when its `with` block ends) and the `main` command.

## What it does not do

There is no graphical window and no sound. The command only prints the
alarm list and a text message when an alarm rings; alarms are added and
edited through the library (`AlarmList` and `DataEditor`) or by editing the
JSON file.

## Tests

```
pip install .[test]
pytest
```