"""Data models for the booking calendar."""

from booking_calendar.models.calendar_models import (
    BarGeometry,
    Booking,
    BookingStatus,
    DayMembership,
    MonthContext,
    Property,
    PropertyGrid,
    WeekRow,
)

__all__ = [
    'BarGeometry',
    'Booking',
    'BookingStatus',
    'DayMembership',
    'MonthContext',
    'Property',
    'PropertyGrid',
    'WeekRow',
]
