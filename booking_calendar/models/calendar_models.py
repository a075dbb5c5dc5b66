#!/usr/bin/env python3
"""
Calendar Data Models
Data classes for the property booking calendar.
"""

import json
from dataclasses import dataclass, field
from datetime import date, time
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from booking_calendar.date_utils import format_time, parse_date, parse_time


class BookingStatus(Enum):
    """Closed set of booking states used for color coding."""
    CONFIRMED = 'confirmed'
    PENDING = 'pending'
    CANCELLED = 'cancelled'
    MAINTENANCE = 'maintenance'
    OTHER = 'other'

    @classmethod
    def from_value(cls, value: Any) -> 'BookingStatus':
        """Map a free-form channel status onto a member, falling back to OTHER."""
        if isinstance(value, cls):
            return value
        if not value:
            return cls.OTHER
        normalized = str(value).strip().lower()
        # Channels are inconsistent about British/American spelling
        if normalized == 'canceled':
            normalized = 'cancelled'
        for status in cls:
            if status.value == normalized:
                return status
        return cls.OTHER


# Wire keys used by the booking channel API, mapped to field names.
_CHANNEL_KEYS = {
    'bookId': 'booking_id',
    'bookingId': 'booking_id',
    'propId': 'property_id',
    'propertyId': 'property_id',
    'firstName': 'guest_first_name',
    'guestFirstName': 'guest_first_name',
    'lastName': 'guest_last_name',
    'guestLastName': 'guest_last_name',
    'dateFrom': 'date_from',
    'arrival': 'date_from',
    'dateTo': 'date_to',
    'departure': 'date_to',
    'checkInTime': 'check_in_time',
    'checkIn': 'check_in_time',
    'checkOutTime': 'check_out_time',
    'checkOut': 'check_out_time',
    'channelName': 'channel_name',
    'channel': 'channel_name',
    'totalAmount': 'total_amount',
    'price': 'total_amount',
}

_BOOKING_FIELDS = (
    'booking_id', 'property_id', 'guest_first_name', 'guest_last_name',
    'date_from', 'date_to', 'check_in_time', 'check_out_time', 'status',
    'channel_name', 'total_amount', 'adults', 'children', 'email', 'phone',
)


def _optional_time(value: Any) -> Optional[time]:
    if value is None or value == '':
        return None
    if isinstance(value, time):
        return value
    return parse_time(str(value))


@dataclass(frozen=True)
class Booking:
    """A reservation of one property for a date range."""
    booking_id: str
    property_id: str
    date_from: date
    date_to: date
    guest_first_name: str = ''
    guest_last_name: str = ''
    check_in_time: Optional[time] = None
    check_out_time: Optional[time] = None
    status: BookingStatus = BookingStatus.CONFIRMED
    channel_name: str = ''
    total_amount: Optional[float] = None
    adults: Optional[int] = None
    children: Optional[int] = None
    email: str = ''
    phone: str = ''
    extra: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @property
    def guest_name(self) -> str:
        return f"{self.guest_first_name} {self.guest_last_name}".strip()

    @property
    def nights(self) -> int:
        """Number of nights; zero or negative for a malformed range."""
        return (self.date_to - self.date_from).days

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        data = {
            'booking_id': self.booking_id,
            'property_id': self.property_id,
            'guest_first_name': self.guest_first_name,
            'guest_last_name': self.guest_last_name,
            'date_from': self.date_from.isoformat(),
            'date_to': self.date_to.isoformat(),
            'check_in_time': format_time(self.check_in_time) if self.check_in_time else None,
            'check_out_time': format_time(self.check_out_time) if self.check_out_time else None,
            'status': self.status.value,
            'channel_name': self.channel_name,
            'total_amount': self.total_amount,
            'adults': self.adults,
            'children': self.children,
            'email': self.email,
            'phone': self.phone,
        }
        if self.extra:
            data['extra'] = dict(self.extra)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Booking':
        """
        Create from dictionary.

        Accepts snake_case field names as well as the booking channel's
        camelCase keys (bookId, propId, dateFrom, ...). Keys that are not
        booking fields are kept in `extra`.

        Raises:
            ValueError: if an identifier is missing or a date/time is unparseable
        """
        values: Dict[str, Any] = {}
        extra: Dict[str, Any] = dict(data.get('extra') or {})
        for key, value in data.items():
            if key == 'extra':
                continue
            name = _CHANNEL_KEYS.get(key, key)
            if name in _BOOKING_FIELDS:
                values.setdefault(name, value)
            else:
                extra[key] = value

        for required in ('booking_id', 'property_id', 'date_from', 'date_to'):
            if values.get(required) in (None, ''):
                raise ValueError(f"Booking is missing required field '{required}'")

        booking_id = str(values['booking_id'])
        try:
            date_from = parse_date(values['date_from'])
            date_to = parse_date(values['date_to'])
            check_in_time = _optional_time(values.get('check_in_time'))
            check_out_time = _optional_time(values.get('check_out_time'))
        except ValueError as e:
            raise ValueError(f"Booking {booking_id}: {e}") from e

        total_amount = values.get('total_amount')
        # A record without any status is taken as a confirmed reservation
        status = values.get('status')
        return cls(
            booking_id=booking_id,
            property_id=str(values['property_id']),
            date_from=date_from,
            date_to=date_to,
            guest_first_name=values.get('guest_first_name') or '',
            guest_last_name=values.get('guest_last_name') or '',
            check_in_time=check_in_time,
            check_out_time=check_out_time,
            status=BookingStatus.from_value(status) if status else BookingStatus.CONFIRMED,
            channel_name=values.get('channel_name') or '',
            total_amount=float(total_amount) if total_amount is not None else None,
            adults=values.get('adults'),
            children=values.get('children'),
            email=values.get('email') or '',
            phone=values.get('phone') or '',
            extra=extra,
        )

    def to_json(self) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, json_str: str) -> 'Booking':
        """Create from JSON string."""
        return cls.from_dict(json.loads(json_str))


@dataclass(frozen=True)
class Property:
    """A rentable unit, with optional per-property check-in/out clock times."""
    property_id: str
    name: str = ''
    check_in_time: Optional[time] = None
    check_out_time: Optional[time] = None

    @property
    def display_name(self) -> str:
        return self.name or f"Property {self.property_id}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'property_id': self.property_id,
            'name': self.name,
            'check_in_time': format_time(self.check_in_time) if self.check_in_time else None,
            'check_out_time': format_time(self.check_out_time) if self.check_out_time else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Property':
        """Create from dictionary (snake_case or channel keys propId/id)."""
        property_id = data.get('property_id', data.get('propId', data.get('id')))
        if property_id in (None, ''):
            raise ValueError("Property is missing required field 'property_id'")
        return cls(
            property_id=str(property_id),
            name=data.get('name') or '',
            check_in_time=_optional_time(data.get('check_in_time', data.get('checkInTime'))),
            check_out_time=_optional_time(data.get('check_out_time', data.get('checkOutTime'))),
        )


@dataclass(frozen=True)
class MonthContext:
    """Calendar geometry of one month; month_index is zero-based."""
    year: int
    month_index: int
    days_in_month: int
    first_weekday_offset: int
    week_row_count: int

    @property
    def month(self) -> int:
        """One-based month number."""
        return self.month_index + 1

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        return date(self.year, self.month, self.days_in_month)

    def date_of(self, day: int) -> date:
        """Calendar date of a day-of-month in this month."""
        return date(self.year, self.month, day)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'year': self.year,
            'month': self.month,
            'month_index': self.month_index,
            'days_in_month': self.days_in_month,
            'first_weekday_offset': self.first_weekday_offset,
            'week_row_count': self.week_row_count,
        }


@dataclass(frozen=True)
class BarGeometry:
    """Horizontal position of a booking bar as percentages of the month width."""
    booking_id: str
    left_percent: float
    width_percent: float

    @property
    def visible(self) -> bool:
        return self.width_percent > 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'booking_id': self.booking_id,
            'left_percent': self.left_percent,
            'width_percent': self.width_percent,
        }


@dataclass(frozen=True)
class WeekRow:
    """One 7-column row of the month grid; None marks a blank cell."""
    week_index: int
    days: Tuple[Optional[int], ...]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'week_index': self.week_index,
            'days': list(self.days),
        }


# (property_id, day_of_month) -> bookings occupying that day
DayMembership = Dict[Tuple[str, int], List[Booking]]


@dataclass
class PropertyGrid:
    """Grid-mode layout for one property."""
    property_id: str
    label: str
    week_rows: List[WeekRow] = field(default_factory=list)
    membership: Dict[int, List[Booking]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, listing booking ids per occupied day."""
        return {
            'property_id': self.property_id,
            'label': self.label,
            'week_rows': [row.to_dict() for row in self.week_rows],
            'days': {
                str(day): [booking.booking_id for booking in bookings]
                for day, bookings in self.membership.items()
            },
        }

    def to_json(self) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict())
