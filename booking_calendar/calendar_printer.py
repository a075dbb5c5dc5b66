#!/usr/bin/env python3
"""
Calendar Printer for Property Bookings
Reads JSON booking data and prints the month as a text grid or timeline.
"""

import argparse
import json
from datetime import date
from typing import Any, Dict, List, Mapping, Optional

from booking_calendar.config import configure_logging, get_settings
from booking_calendar.models.calendar_models import Booking, MonthContext, Property
from booking_calendar.services.calendar_builder import build_month_context, group_by_property
from booking_calendar.services.calendar_formatter import (
    booking_details,
    format_date,
    month_title,
    status_label,
    weekday_names,
)
from booking_calendar.services.occupancy import build_grid, build_timeline, build_timeline_rows

CELL_WIDTH = 14
COLUMNS_PER_DAY = 3
LABEL_WIDTH = 24


def load_bookings(json_path: str) -> Dict[str, Any]:
    """
    Load bookings (and optional properties) from a JSON file.

    The file holds either a list of bookings or an object with "bookings"
    and "properties" lists.
    """
    with open(json_path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if isinstance(data, list):
        data = {'bookings': data}
    bookings = [Booking.from_dict(item) for item in data.get('bookings', [])]
    properties = {}
    for item in data.get('properties', []):
        prop = Property.from_dict(item)
        properties[prop.property_id] = prop
    return {'bookings': bookings, 'properties': properties}


def _fit(text: str, width: int) -> str:
    if len(text) > width:
        return text[:width - 1] + "+"
    return text


def format_grid(bookings: List[Booking], month_ctx: MonthContext,
                properties: Optional[Mapping[str, Property]] = None, locale: str = 'en') -> str:
    """Render the grid view: per property, week rows with guest names per day."""
    groups = group_by_property(bookings)
    grids = build_grid(groups, month_ctx, properties)

    header = " | ".join(f"{day:^{CELL_WIDTH}}" for day in weekday_names(locale))
    output_lines = [
        "=" * len(header),
        month_title(month_ctx, locale).upper(),
        "=" * len(header),
    ]

    if not grids:
        output_lines.append("No bookings found.")
        return "\n".join(output_lines)

    for grid in grids:
        output_lines.append("")
        output_lines.append(grid.label)
        output_lines.append(header)
        output_lines.append("-" * len(header))

        for week in grid.week_rows:
            # One line for day numbers plus one per stacked booking
            max_bookings = max(
                (len(grid.membership.get(day, [])) for day in week.days if day is not None),
                default=0,
            )
            for row_idx in range(max_bookings + 1):
                row_cells = []
                for day in week.days:
                    content = ''
                    if day is not None:
                        day_bookings = grid.membership.get(day, [])
                        if row_idx == 0:
                            content = str(day)
                        elif row_idx - 1 < len(day_bookings):
                            content = day_bookings[row_idx - 1].guest_name or day_bookings[row_idx - 1].booking_id
                    row_cells.append(f"{_fit(content, CELL_WIDTH):^{CELL_WIDTH}}")
                output_lines.append(" | ".join(row_cells))
            output_lines.append("")

    return "\n".join(output_lines)


def format_timeline(bookings: List[Booking], month_ctx: MonthContext,
                    properties: Optional[Mapping[str, Property]] = None, locale: str = 'en') -> str:
    """Render the timeline view: one bar per booking, COLUMNS_PER_DAY characters per day."""
    settings = get_settings()
    properties = properties or {}
    groups = group_by_property(bookings)
    rows = build_timeline_rows(
        groups,
        month_ctx,
        properties,
        default_check_in=settings.default_check_in,
        default_check_out=settings.default_check_out,
    )
    total_cols = month_ctx.days_in_month * COLUMNS_PER_DAY

    scale = "".join(
        f"{day:<{COLUMNS_PER_DAY}}" if day == 1 or day % 5 == 0 else " " * COLUMNS_PER_DAY
        for day in range(1, month_ctx.days_in_month + 1)
    )
    output_lines = [
        month_title(month_ctx, locale).upper(),
        f"{'':<{LABEL_WIDTH}} {scale}",
    ]

    for property_id, pairs in rows.items():
        prop = properties.get(property_id)
        output_lines.append(prop.display_name if prop else f"Property {property_id}")
        if not pairs:
            output_lines.append(f"{'':<{LABEL_WIDTH}} (no bookings)")
            continue
        for booking, bar in pairs:
            start_col = round(bar.left_percent / 100 * total_cols)
            end_col = round((bar.left_percent + bar.width_percent) / 100 * total_cols)
            end_col = max(end_col, start_col + 1)
            line = " " * start_col + "#" * (end_col - start_col)
            label = _fit(booking.guest_name or booking.booking_id, LABEL_WIDTH)
            output_lines.append(f"{label:<{LABEL_WIDTH}} {line:<{total_cols}} "
                                f"{format_date(booking.date_from)} - {format_date(booking.date_to)} "
                                f"[{status_label(booking.status, locale)}]")

    return "\n".join(output_lines)


def serialize_layout(bookings: List[Booking], month_ctx: MonthContext, mode: str,
                     properties: Optional[Mapping[str, Property]] = None, locale: str = 'en') -> str:
    """Serialize the computed layout, plus display details per booking, to JSON format."""
    settings = get_settings()
    groups = group_by_property(bookings)
    if mode == 'grid':
        layout: Any = [grid.to_dict() for grid in build_grid(groups, month_ctx, properties)]
    else:
        timeline = build_timeline(
            groups,
            month_ctx,
            properties,
            default_check_in=settings.default_check_in,
            default_check_out=settings.default_check_out,
        )
        layout = {
            property_id: [bar.to_dict() for bar in bars]
            for property_id, bars in timeline.items()
        }
    return json.dumps({
        'context': month_ctx.to_dict(),
        mode: layout,
        'bookings': booking_details(bookings, locale),
    }, indent=2)


def main(argv: Optional[List[str]] = None) -> int:
    today = date.today()
    parser = argparse.ArgumentParser(description='Print property bookings as a month calendar')
    parser.add_argument('json_file', help='Path to JSON bookings file')
    parser.add_argument('--year', type=int, default=today.year, help='Year to show')
    parser.add_argument('--month', type=int, default=today.month, help='Month to show (1-12)')
    parser.add_argument('--mode', choices=['grid', 'timeline'], default='grid',
                        help='Grid of day cells or per-booking timeline bars')
    parser.add_argument('--locale', help='Month/weekday names: en or pt (default: CALENDAR_LOCALE)')
    parser.add_argument('--json', action='store_true', help='Print the layout as JSON instead of text')
    parser.add_argument('--output', '-o', help='Output text file path (optional)')

    args = parser.parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)
    locale = args.locale or settings.locale

    if not 1 <= args.month <= 12:
        print(f"Error: month must be between 1 and 12, got {args.month}")
        return 1

    try:
        data = load_bookings(args.json_file)
        month_ctx = build_month_context(args.year, args.month - 1)

        if args.json:
            text = serialize_layout(data['bookings'], month_ctx, args.mode, data['properties'], locale)
        elif args.mode == 'grid':
            text = format_grid(data['bookings'], month_ctx, data['properties'], locale)
        else:
            text = format_timeline(data['bookings'], month_ctx, data['properties'], locale)

        if args.output:
            with open(args.output, 'w', encoding='utf-8') as f:
                f.write(text)
            print(f"Calendar saved to {args.output}")
        else:
            print(text)

    except FileNotFoundError:
        print(f"Error: Could not find file {args.json_file}")
        return 1
    except json.JSONDecodeError:
        print(f"Error: Invalid JSON in file {args.json_file}")
        return 1
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    exit(main())
