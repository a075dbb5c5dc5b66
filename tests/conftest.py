"""Shared fixtures for calendar tests."""

from datetime import date

import pytest

from booking_calendar.models.calendar_models import Booking, BookingStatus


def make_booking(booking_id, property_id, date_from, date_to, **kwargs) -> Booking:
    """Build a Booking from ISO date strings."""
    return Booking(
        booking_id=booking_id,
        property_id=property_id,
        date_from=date.fromisoformat(date_from),
        date_to=date.fromisoformat(date_to),
        **kwargs,
    )


@pytest.fixture
def december_bookings():
    """Bookings modelled on the channel sample data for December 2023."""
    return [
        make_booking('B1001', '1001', '2023-12-10', '2023-12-15',
                     guest_first_name='João', guest_last_name='Silva', channel_name='Airbnb'),
        make_booking('B1002', '1002', '2023-12-20', '2023-12-27',
                     guest_first_name='Maria', guest_last_name='Santos', channel_name='Booking.com'),
        make_booking('B1003', '1003', '2023-12-05', '2023-12-08',
                     guest_first_name='Pedro', guest_last_name='Ferreira', channel_name='Direto'),
        make_booking('B1004', '1001', '2023-11-25', '2023-12-05',
                     guest_first_name='Ana', guest_last_name='Costa', status=BookingStatus.PENDING),
        make_booking('B1005', '1001', '2023-12-28', '2024-01-03',
                     guest_first_name='Luis', guest_last_name='Rocha', status=BookingStatus.MAINTENANCE),
    ]


@pytest.fixture
def channel_records():
    """Booking records as returned by the booking channel API."""
    return [
        {
            'bookId': 'B1001',
            'propId': '1001',
            'firstName': 'João',
            'lastName': 'Silva',
            'adults': 2,
            'children': 0,
            'dateFrom': '2023-12-10',
            'dateTo': '2023-12-15',
            'status': 'confirmed',
            'totalAmount': 800,
            'channelName': 'Airbnb',
        },
        {
            'bookId': 'B1002',
            'propId': '1002',
            'firstName': 'Maria',
            'lastName': 'Santos',
            'adults': 4,
            'children': 2,
            'dateFrom': '2023-12-20',
            'dateTo': '2023-12-27',
            'checkInTime': '15:00',
            'checkOutTime': '11:00',
            'status': 'confirmed',
            'totalAmount': 1500,
            'channelName': 'Booking.com',
        },
    ]
