from __future__ import annotations

from datetime import date, datetime, timedelta

WEEKDAYS = [
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
]


def parse_date(value: str) -> date:
    """Parse an ISO-8601 date or datetime, dropping any time of day."""
    return datetime.fromisoformat(value.strip().replace("Z", "+00:00")).date()


def parse_weekday(value: str | int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"Unknown weekday: {value!r}")
    if isinstance(value, int):
        if not 0 <= value <= 6:
            raise ValueError(f"Weekday index out of range: {value}")
        return value
    name = value.strip().lower()
    if name not in WEEKDAYS:
        raise ValueError(f"Unknown weekday: {value}")
    return WEEKDAYS.index(name)


def start_of_week(day: date, week_start: int = 0) -> date:
    # week_start uses date.weekday() numbering: 0 = Monday
    return day - timedelta(days=(day.weekday() - week_start) % 7)
