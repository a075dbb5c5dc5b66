#!/usr/bin/env python3
"""
Calendar Formatter
Display strings for the booking calendar: status colors, legend, month and
weekday names, tooltips and currency.
"""

from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Union

from booking_calendar.date_utils import parse_date
from booking_calendar.models.calendar_models import Booking, BookingStatus, MonthContext


STATUS_COLORS: Dict[BookingStatus, str] = {
    BookingStatus.CONFIRMED: 'bg-green-500',
    BookingStatus.PENDING: 'bg-yellow-500',
    BookingStatus.CANCELLED: 'bg-red-500',
    BookingStatus.MAINTENANCE: 'bg-gray-500',
    BookingStatus.OTHER: 'bg-blue-500',
}

STATUS_LABELS: Dict[str, Dict[BookingStatus, str]] = {
    'en': {
        BookingStatus.CONFIRMED: 'Confirmed',
        BookingStatus.PENDING: 'Pending',
        BookingStatus.CANCELLED: 'Cancelled',
        BookingStatus.MAINTENANCE: 'Maintenance',
        BookingStatus.OTHER: 'Other',
    },
    'pt': {
        BookingStatus.CONFIRMED: 'Confirmada',
        BookingStatus.PENDING: 'Pendente',
        BookingStatus.CANCELLED: 'Cancelada',
        BookingStatus.MAINTENANCE: 'Manutenção',
        BookingStatus.OTHER: 'Outra',
    },
}

MONTH_NAMES: Dict[str, List[str]] = {
    'en': ['January', 'February', 'March', 'April', 'May', 'June',
           'July', 'August', 'September', 'October', 'November', 'December'],
    'pt': ['Janeiro', 'Fevereiro', 'Março', 'Abril', 'Maio', 'Junho',
           'Julho', 'Agosto', 'Setembro', 'Outubro', 'Novembro', 'Dezembro'],
}

# Sunday-first, matching MonthContext.first_weekday_offset
WEEKDAY_NAMES: Dict[str, List[str]] = {
    'en': ['Sun', 'Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat'],
    'pt': ['Dom', 'Seg', 'Ter', 'Qua', 'Qui', 'Sex', 'Sáb'],
}

DEFAULT_LOCALE = 'en'
SUPPORTED_LOCALES = tuple(MONTH_NAMES)


def _locale(locale: Optional[str]) -> str:
    if locale and locale in SUPPORTED_LOCALES:
        return locale
    return DEFAULT_LOCALE


def status_color(status: BookingStatus) -> str:
    """CSS color class for a booking status."""
    return STATUS_COLORS[BookingStatus.from_value(status)]


def status_label(status: BookingStatus, locale: str = DEFAULT_LOCALE) -> str:
    return STATUS_LABELS[_locale(locale)][BookingStatus.from_value(status)]


def legend(locale: str = DEFAULT_LOCALE) -> List[Dict[str, str]]:
    """Legend entries for every status, in enumeration order."""
    return [
        {'status': status.value, 'label': status_label(status, locale), 'color': STATUS_COLORS[status]}
        for status in BookingStatus
    ]


def month_name(month_index: int, locale: str = DEFAULT_LOCALE) -> str:
    return MONTH_NAMES[_locale(locale)][month_index]


def weekday_names(locale: str = DEFAULT_LOCALE) -> List[str]:
    return list(WEEKDAY_NAMES[_locale(locale)])


def month_title(month_ctx: MonthContext, locale: str = DEFAULT_LOCALE) -> str:
    """Header text such as 'December 2023'."""
    return f"{month_name(month_ctx.month_index, locale)} {month_ctx.year}"


def format_date(value: Union[str, date, None]) -> str:
    """
    Format a date as dd/mm/yyyy.

    Returns an empty string for empty input and the input unchanged when it
    cannot be parsed.
    """
    if not value:
        return ''
    try:
        parsed = parse_date(value)
    except ValueError:
        return str(value)
    return parsed.strftime('%d/%m/%Y')


def booking_title(booking: Booking) -> str:
    """Tooltip text for a booking cell or bar."""
    return (f"{booking.guest_name} - Check-in: {format_date(booking.date_from)}, "
            f"Check-out: {format_date(booking.date_to)}")


def format_currency(amount: Optional[float]) -> str:
    """Format an amount in Brazilian reais, e.g. 'R$ 1.234,56'."""
    if amount is None:
        return ''
    sign = '-' if amount < 0 else ''
    # Build with US separators then swap them
    text = f"{abs(amount):,.2f}"
    text = text.replace(',', '_').replace('.', ',').replace('_', '.')
    return f"{sign}R$ {text}"


def booking_summary(booking: Booking, locale: str = DEFAULT_LOCALE) -> Dict[str, Any]:
    """Display fields a renderer needs to draw a booking cell or bar."""
    return {
        'booking_id': booking.booking_id,
        'property_id': booking.property_id,
        'guest_name': booking.guest_name,
        'status': booking.status.value,
        'status_label': status_label(booking.status, locale),
        'status_color': status_color(booking.status),
        'title': booking_title(booking),
        'channel_name': booking.channel_name,
        'total_amount': format_currency(booking.total_amount),
    }


def booking_details(bookings: Iterable[Booking], locale: str = DEFAULT_LOCALE) -> Dict[str, Dict[str, Any]]:
    """Booking summaries keyed by booking id, for lookup from grid cells and bars."""
    return {booking.booking_id: booking_summary(booking, locale) for booking in bookings}
