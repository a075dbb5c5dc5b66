#!/usr/bin/env python3
"""
Date and Time Utilities
Shared date arithmetic and parsing used by the calendar layout engine.
"""

import calendar
from datetime import date, datetime, time
from typing import Union

# Clock times assumed when a booking carries no explicit check-in/out time.
DEFAULT_CHECK_IN_TIME = time(12, 0)
DEFAULT_CHECK_OUT_TIME = time(14, 0)

MINUTES_PER_DAY = 24 * 60


def parse_time(time_str: str) -> time:
    """Parse time string in format 'HHMM' or 'HH:MM' to time object."""
    time_str = time_str.strip()

    if ':' in time_str:
        # Format: HH:MM (seconds are tolerated and dropped)
        parts = time_str.split(':')
        if len(parts) in (2, 3):
            try:
                return time(int(parts[0]), int(parts[1]))
            except ValueError:
                pass
    elif len(time_str) == 4 and time_str.isdigit():
        # Format: HHMM
        try:
            return time(int(time_str[:2]), int(time_str[2:]))
        except ValueError:
            pass

    raise ValueError(f"Invalid time format: {time_str}")


def parse_date(value: Union[str, date]) -> date:
    """
    Parse a booking date.

    Accepts 'YYYY-MM-DD', 'YYYYMMDD', full ISO timestamps (the date part is
    kept) and date/datetime objects.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Invalid date: {value!r}")

    date_str = value.strip()
    if len(date_str) == 8 and date_str.isdigit():
        return datetime.strptime(date_str, '%Y%m%d').date()
    try:
        return date.fromisoformat(date_str[:10])
    except ValueError:
        raise ValueError(f"Invalid date format: {value}") from None


def format_time(value: time) -> str:
    """Format a time object as 'HH:MM'."""
    return value.strftime('%H:%M')


def day_fraction(value: time) -> float:
    """Return the share of a day elapsed at the given clock time (0.0 - 1.0)."""
    return (value.hour * 60 + value.minute) / MINUTES_PER_DAY


def days_in_month(year: int, month_index: int) -> int:
    """
    Number of days in a month, month_index being zero-based.

    Leap years come from the calendar module, so December of the last
    supported year needs no date in the following year.
    """
    return calendar.monthrange(year, month_index + 1)[1]


def sunday_first_weekday(value: date) -> int:
    """Weekday index with Sunday as 0 and Saturday as 6."""
    # date.weekday() is Monday-first (0=Monday, 6=Sunday)
    return (value.weekday() + 1) % 7
