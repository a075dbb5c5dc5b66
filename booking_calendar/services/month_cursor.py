#!/usr/bin/env python3
"""
Month Cursor
The viewed month of the calendar and its navigation.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

from booking_calendar.models.calendar_models import MonthContext
from booking_calendar.services.calendar_builder import build_month_context

NAVIGATION_DIRECTIONS = ('prev', 'next', 'today')


@dataclass(frozen=True)
class MonthCursor:
    """Viewed (year, month_index) pair; month_index is zero-based."""
    year: int
    month_index: int

    @classmethod
    def today(cls, today: Optional[date] = None) -> 'MonthCursor':
        """Cursor on the month containing today (or the given date)."""
        today = today or date.today()
        return cls(year=today.year, month_index=today.month - 1)

    def previous(self) -> 'MonthCursor':
        """One month earlier, wrapping January to December of the previous year."""
        if self.month_index == 0:
            return MonthCursor(self.year - 1, 11)
        return MonthCursor(self.year, self.month_index - 1)

    def next(self) -> 'MonthCursor':
        """One month later, wrapping December to January of the next year."""
        if self.month_index == 11:
            return MonthCursor(self.year + 1, 0)
        return MonthCursor(self.year, self.month_index + 1)

    def navigate(self, direction: str, today: Optional[date] = None) -> 'MonthCursor':
        """Apply a navigation event: 'prev', 'next' or 'today'."""
        if direction == 'prev':
            return self.previous()
        if direction == 'next':
            return self.next()
        if direction == 'today':
            return MonthCursor.today(today)
        raise ValueError(f"Unknown navigation direction: {direction}")

    def is_current(self, today: Optional[date] = None) -> bool:
        return self == MonthCursor.today(today)

    def context(self) -> MonthContext:
        return build_month_context(self.year, self.month_index)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'year': self.year,
            'month': self.month_index + 1,
            'month_index': self.month_index,
        }
