#!/usr/bin/env python3
"""
Occupancy Resolver
Decides which bookings occupy a calendar day and where a booking's bar sits
on a single-month timeline.
"""

import logging
from datetime import date, time
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from booking_calendar.date_utils import (
    DEFAULT_CHECK_IN_TIME,
    DEFAULT_CHECK_OUT_TIME,
    day_fraction,
)
from booking_calendar.models.calendar_models import (
    BarGeometry,
    Booking,
    DayMembership,
    MonthContext,
    Property,
    PropertyGrid,
)
from booking_calendar.services.calendar_builder import month_week_rows, property_order

logger = logging.getLogger(__name__)


def occupies(booking: Booking, day_date: date) -> bool:
    """True when the booking covers the night of day_date (check-out day excluded)."""
    return booking.date_from <= day_date < booking.date_to


def bookings_on_day(group: Iterable[Booking], year: int, month_index: int, day: int) -> List[Booking]:
    """
    Bookings of a group that occupy the given day, in group order.

    The comparison uses full calendar dates, so a booking that started in a
    previous month still occupies the first days of this one.
    """
    day_date = date(year, month_index + 1, day)
    return [booking for booking in group if occupies(booking, day_date)]


def build_day_membership(groups: Mapping[str, List[Booking]], month_ctx: MonthContext) -> DayMembership:
    """
    Map (property_id, day) to the bookings occupying that day.

    Only occupied cells are present in the result.
    """
    membership: DayMembership = {}
    for property_id, group in groups.items():
        for day in range(1, month_ctx.days_in_month + 1):
            bookings = bookings_on_day(group, month_ctx.year, month_ctx.month_index, day)
            if bookings:
                membership[(property_id, day)] = bookings
    return membership


def build_property_grid(property_id: str, group: List[Booking], month_ctx: MonthContext,
                        label: Optional[str] = None, skip_empty_weeks: bool = True) -> PropertyGrid:
    """
    Grid-mode layout of one property for the month.

    Args:
        property_id: Property the group belongs to
        group: The property's bookings
        month_ctx: Month being viewed
        label: Row label (defaults to "Property <id>")
        skip_empty_weeks: Drop week rows without any booking, always keeping
            the first row so the property is still listed

    Returns:
        PropertyGrid with week rows and per-day booking lists
    """
    membership: Dict[int, List[Booking]] = {}
    for day in range(1, month_ctx.days_in_month + 1):
        bookings = bookings_on_day(group, month_ctx.year, month_ctx.month_index, day)
        if bookings:
            membership[day] = bookings

    week_rows = []
    for row in month_week_rows(month_ctx):
        has_bookings = any(day is not None and day in membership for day in row.days)
        if skip_empty_weeks and not has_bookings and row.week_index > 0:
            continue
        week_rows.append(row)

    return PropertyGrid(
        property_id=property_id,
        label=label or f"Property {property_id}",
        week_rows=week_rows,
        membership=membership,
    )


def build_grid(groups: Mapping[str, List[Booking]], month_ctx: MonthContext,
               properties: Optional[Mapping[str, Property]] = None,
               skip_empty_weeks: bool = True) -> List[PropertyGrid]:
    """Grid-mode layout for every property, in property then booking order."""
    properties = properties or {}
    grids = []
    for property_id in property_order(groups, properties.keys()):
        prop = properties.get(property_id)
        grids.append(build_property_grid(
            property_id,
            groups.get(property_id, []),
            month_ctx,
            label=prop.display_name if prop else None,
            skip_empty_weeks=skip_empty_weeks,
        ))
    return grids


def compute_bar_geometry(booking: Booking, month_ctx: MonthContext,
                         default_check_in: time = DEFAULT_CHECK_IN_TIME,
                         default_check_out: time = DEFAULT_CHECK_OUT_TIME) -> BarGeometry:
    """
    Position of a booking's bar on a one-month timeline.

    Columns are days 1..days_in_month. The bar starts partway through the
    check-in day and ends partway through the check-out day according to the
    clock times. An end that falls outside the month is clipped flush to the
    month edge with no time offset.

    Never raises: a range outside the month, an inverted range or a stay
    without a night yields width_percent <= 0, which renderers suppress.
    """
    days = month_ctx.days_in_month
    first_day = month_ctx.first_day

    # Day columns are 1-based; values outside 1..days lie in other months
    start_day = (booking.date_from - first_day).days + 1
    end_day = (booking.date_to - first_day).days + 1

    check_in = booking.check_in_time or default_check_in
    check_out = booking.check_out_time or default_check_out

    start_offset = 0.0
    if start_day < 1:
        start_day = 1
    elif start_day <= days:
        start_offset = day_fraction(check_in)

    end_offset = 0.0
    if end_day > days:
        end_day = days
    elif end_day >= 1:
        end_offset = 1 - day_fraction(check_out)

    left_percent = (start_day - 1 + start_offset) / days * 100
    width_percent = (end_day - start_day + 1 - start_offset - end_offset) / days * 100

    # A stay without a night has no bar, whatever the clock times say
    if booking.date_to <= booking.date_from:
        width_percent = min(width_percent, 0.0)

    return BarGeometry(
        booking_id=booking.booking_id,
        left_percent=left_percent,
        width_percent=width_percent,
    )


def build_timeline_rows(groups: Mapping[str, List[Booking]], month_ctx: MonthContext,
                        properties: Optional[Mapping[str, Property]] = None,
                        default_check_in: time = DEFAULT_CHECK_IN_TIME,
                        default_check_out: time = DEFAULT_CHECK_OUT_TIME,
                        include_hidden: bool = False) -> Dict[str, List[Tuple[Booking, BarGeometry]]]:
    """
    (booking, bar) pairs for every property, in property then booking order.

    A property's own check-in/out times take precedence over the defaults.
    Bars with non-positive width are dropped unless include_hidden is set.
    """
    properties = properties or {}
    rows: Dict[str, List[Tuple[Booking, BarGeometry]]] = {}
    for property_id in property_order(groups, properties.keys()):
        prop = properties.get(property_id)
        check_in = (prop.check_in_time if prop else None) or default_check_in
        check_out = (prop.check_out_time if prop else None) or default_check_out

        pairs = []
        for booking in groups.get(property_id, []):
            bar = compute_bar_geometry(booking, month_ctx, check_in, check_out)
            if bar.visible or include_hidden:
                pairs.append((booking, bar))
            else:
                logger.debug("Hiding bar for booking %s in %04d-%02d",
                             booking.booking_id, month_ctx.year, month_ctx.month)
        rows[property_id] = pairs
    return rows


def build_timeline(groups: Mapping[str, List[Booking]], month_ctx: MonthContext,
                   properties: Optional[Mapping[str, Property]] = None,
                   default_check_in: time = DEFAULT_CHECK_IN_TIME,
                   default_check_out: time = DEFAULT_CHECK_OUT_TIME,
                   include_hidden: bool = False) -> Dict[str, List[BarGeometry]]:
    """Bar geometries for every property, in property then booking order."""
    rows = build_timeline_rows(groups, month_ctx, properties,
                               default_check_in, default_check_out, include_hidden)
    return {
        property_id: [bar for _, bar in pairs]
        for property_id, pairs in rows.items()
    }
