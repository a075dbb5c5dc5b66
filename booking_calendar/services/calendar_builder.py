#!/usr/bin/env python3
"""
Calendar Builder
Builds the month coordinate system and partitions bookings by property.
"""

import logging
import math
from datetime import date
from typing import Dict, Iterable, List, Optional

from booking_calendar.date_utils import days_in_month, sunday_first_weekday
from booking_calendar.models.calendar_models import Booking, MonthContext, WeekRow

logger = logging.getLogger(__name__)


def build_month_context(year: int, month_index: int) -> MonthContext:
    """
    Compute the grid geometry of a month.

    Args:
        year: Calendar year
        month_index: Zero-based month (0=January, 11=December). Values outside
            0-11 are not supported.

    Returns:
        MonthContext with day count, Sunday-first weekday of the 1st and the
        number of 7-column rows needed to tile the month
    """
    day_count = days_in_month(year, month_index)
    first_weekday = sunday_first_weekday(date(year, month_index + 1, 1))
    week_rows = math.ceil((day_count + first_weekday) / 7)

    return MonthContext(
        year=year,
        month_index=month_index,
        days_in_month=day_count,
        first_weekday_offset=first_weekday,
        week_row_count=week_rows,
    )


def month_week_rows(month_ctx: MonthContext) -> List[WeekRow]:
    """Tile the month into Sunday-first week rows with blank leading/trailing cells."""
    rows = []
    for week_index in range(month_ctx.week_row_count):
        start_day = week_index * 7 - month_ctx.first_weekday_offset + 1
        days = []
        for day_of_week in range(7):
            day = start_day + day_of_week
            days.append(day if 1 <= day <= month_ctx.days_in_month else None)
        rows.append(WeekRow(week_index=week_index, days=tuple(days)))
    return rows


def group_by_property(bookings: Iterable[Booking]) -> Dict[str, List[Booking]]:
    """
    Partition bookings by property id.

    Groups appear in order of first occurrence and keep the input order of
    their bookings. Duplicates are not removed.
    """
    groups: Dict[str, List[Booking]] = {}
    for booking in bookings:
        groups.setdefault(booking.property_id, []).append(booking)

    logger.debug("Grouped bookings into %d properties", len(groups))
    return groups


def property_order(groups: Dict[str, List[Booking]],
                   property_ids: Optional[Iterable[str]] = None) -> List[str]:
    """
    Row order for the calendar: the given property ids first (including ones
    without bookings), then any remaining grouped properties.
    """
    ordered: List[str] = []
    for property_id in property_ids or []:
        if property_id not in ordered:
            ordered.append(property_id)
    for property_id in groups:
        if property_id not in ordered:
            ordered.append(property_id)
    return ordered
