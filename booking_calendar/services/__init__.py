"""Calendar layout services."""

from booking_calendar.services.calendar_builder import (
    build_month_context,
    group_by_property,
    month_week_rows,
)
from booking_calendar.services.month_cursor import MonthCursor
from booking_calendar.services.occupancy import (
    bookings_on_day,
    build_day_membership,
    build_grid,
    build_property_grid,
    build_timeline,
    build_timeline_rows,
    compute_bar_geometry,
)

__all__ = [
    'build_month_context',
    'month_week_rows',
    'group_by_property',
    'bookings_on_day',
    'build_day_membership',
    'build_property_grid',
    'build_grid',
    'compute_bar_geometry',
    'build_timeline',
    'build_timeline_rows',
    'MonthCursor',
]
