#!/usr/bin/env python3
"""
Tests for the month grid builder and the booking grouper.
"""

import pytest

from booking_calendar.date_utils import days_in_month, sunday_first_weekday
from booking_calendar.services.calendar_builder import (
    build_month_context,
    group_by_property,
    month_week_rows,
    property_order,
)
from tests.conftest import make_booking


@pytest.mark.parametrize('year, month_index, expected', [
    (2024, 1, 29),   # February 2024, leap year
    (2023, 1, 28),
    (1900, 1, 28),   # divisible by 100, not a leap year
    (2000, 1, 29),   # divisible by 400
    (2023, 11, 31),  # December
    (2023, 3, 30),   # April
    (9999, 11, 31),  # last supported month
])
def test_days_in_month(year, month_index, expected):
    """Day counts come from the calendar, leap years included."""
    assert build_month_context(year, month_index).days_in_month == expected
    assert days_in_month(year, month_index) == expected


def test_first_weekday_is_sunday_first():
    """January 2026 starts on a Thursday, October 2023 on a Sunday."""
    assert build_month_context(2026, 0).first_weekday_offset == 4
    assert build_month_context(2023, 9).first_weekday_offset == 0
    assert build_month_context(2023, 11).first_weekday_offset == 5


def test_week_row_count():
    """Rows include leading and trailing blank cells."""
    assert build_month_context(2023, 11).week_row_count == 6   # Fri start, 31 days
    assert build_month_context(2024, 1).week_row_count == 5    # Thu start, 29 days
    assert build_month_context(2015, 1).week_row_count == 4    # Sun start, 28 days


def test_month_context_helpers():
    month_ctx = build_month_context(2023, 11)
    assert month_ctx.month == 12
    assert month_ctx.first_day.isoformat() == '2023-12-01'
    assert month_ctx.last_day.isoformat() == '2023-12-31'
    assert month_ctx.to_dict()['month'] == 12


def test_month_week_rows_tile_the_month():
    """Every day appears exactly once, in order, in Sunday-first columns."""
    month_ctx = build_month_context(2023, 11)
    rows = month_week_rows(month_ctx)

    assert len(rows) == month_ctx.week_row_count
    assert rows[0].days == (None, None, None, None, None, 1, 2)
    assert rows[-1].days == (31, None, None, None, None, None, None)

    days = [day for row in rows for day in row.days if day is not None]
    assert days == list(range(1, 32))

    for row in rows:
        for column, day in enumerate(row.days):
            if day is not None:
                assert sunday_first_weekday(month_ctx.date_of(day)) == column


def test_group_by_property_preserves_order(december_bookings):
    """Groups follow first occurrence and keep input order within a group."""
    groups = group_by_property(december_bookings)

    assert list(groups) == ['1001', '1002', '1003']
    assert [b.booking_id for b in groups['1001']] == ['B1001', 'B1004', 'B1005']
    assert [b.booking_id for b in groups['1002']] == ['B1002']


def test_group_by_property_is_a_partition(december_bookings):
    """Concatenated groups contain every input booking exactly once."""
    groups = group_by_property(december_bookings)
    flattened = [booking for group in groups.values() for booking in group]

    assert len(flattened) == len(december_bookings)
    assert sorted(b.booking_id for b in flattened) == sorted(b.booking_id for b in december_bookings)


def test_group_by_property_empty_input():
    assert group_by_property([]) == {}


def test_group_by_property_keeps_duplicates():
    """The grouper is a partition, not a set: duplicate ids stay."""
    booking = make_booking('B1', 'P1', '2023-12-01', '2023-12-03')
    groups = group_by_property([booking, booking])
    assert groups == {'P1': [booking, booking]}


def test_property_order_lists_known_properties_first(december_bookings):
    groups = group_by_property(december_bookings)
    assert property_order(groups, ['1003', '2000']) == ['1003', '2000', '1001', '1002']
    assert property_order(groups) == ['1001', '1002', '1003']
