# calendar_service.py
import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI
from pydantic import BaseModel, Field

from booking_calendar.config import configure_logging, get_settings
from booking_calendar.models.calendar_models import Booking, Property
from booking_calendar.services.calendar_builder import build_month_context, group_by_property
from booking_calendar.services.calendar_formatter import booking_details, legend, month_title, weekday_names
from booking_calendar.services.month_cursor import NAVIGATION_DIRECTIONS, MonthCursor
from booking_calendar.services.occupancy import build_grid, build_timeline

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Booking Calendar Layout Service")


# Request models for POST endpoints
class LayoutRequest(BaseModel):
    bookings: List[Dict[str, Any]] = Field(default_factory=list)  # channel booking records
    properties: List[Dict[str, Any]] = Field(default_factory=list)  # optional labels / clock times
    locale: Optional[str] = None


class GridRequest(LayoutRequest):
    skip_empty_weeks: bool = True


class TimelineRequest(LayoutRequest):
    include_hidden: bool = False


def _month_index(month: int) -> int:
    """Convert a 1-12 month from the URL to a zero-based index."""
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")
    return month - 1


def _parse_layout_request(request: LayoutRequest):
    bookings = [Booking.from_dict(item) for item in request.bookings]
    properties = {}
    for item in request.properties:
        prop = Property.from_dict(item)
        properties[prop.property_id] = prop
    return bookings, properties


def _header(month_ctx, locale: Optional[str]) -> Dict[str, Any]:
    locale = locale or settings.locale
    return {
        'title': month_title(month_ctx, locale),
        'weekdays': weekday_names(locale),
        'legend': legend(locale),
        'context': month_ctx.to_dict(),
    }


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/calendar/{year}/{month}/context")
async def month_context(year: int, month: int, locale: Optional[str] = None):
    """
    Grid geometry of a month.

    Args:
        year: Calendar year
        month: Month number 1-12
    """
    try:
        month_ctx = build_month_context(year, _month_index(month))
        return {"success": True, **_header(month_ctx, locale)}
    except Exception as e:
        logger.warning("Context request failed for %s-%s: %s", year, month, e)
        return {"success": False, "error": str(e)}


@app.post("/calendar/{year}/{month}/grid")
async def grid_layout(year: int, month: int, request: GridRequest):
    """
    Grid-mode layout: week rows per property, booking ids per occupied day
    and display details (guest, status color, tooltip) per booking.

    Returns:
        Result with success status, header data and one entry per property
    """
    try:
        month_ctx = build_month_context(year, _month_index(month))
        bookings, properties = _parse_layout_request(request)
        groups = group_by_property(bookings)
        grids = build_grid(groups, month_ctx, properties, skip_empty_weeks=request.skip_empty_weeks)

        return {
            "success": True,
            **_header(month_ctx, request.locale),
            "properties": [grid.to_dict() for grid in grids],
            "bookings": booking_details(bookings, request.locale or settings.locale),
        }
    except Exception as e:
        logger.warning("Grid layout failed for %s-%s: %s", year, month, e)
        return {"success": False, "error": str(e)}


@app.post("/calendar/{year}/{month}/timeline")
async def timeline_layout(year: int, month: int, request: TimelineRequest):
    """
    Timeline-mode layout: bar geometry (left/width percentages) per booking.

    Returns:
        Result with success status, header data and bars keyed by property id
    """
    try:
        month_ctx = build_month_context(year, _month_index(month))
        bookings, properties = _parse_layout_request(request)
        groups = group_by_property(bookings)
        timeline = build_timeline(
            groups,
            month_ctx,
            properties,
            default_check_in=settings.default_check_in,
            default_check_out=settings.default_check_out,
            include_hidden=request.include_hidden,
        )

        return {
            "success": True,
            **_header(month_ctx, request.locale),
            "timeline": {
                property_id: [bar.to_dict() for bar in bars]
                for property_id, bars in timeline.items()
            },
            "bookings": booking_details(bookings, request.locale or settings.locale),
        }
    except Exception as e:
        logger.warning("Timeline layout failed for %s-%s: %s", year, month, e)
        return {"success": False, "error": str(e)}


@app.get("/calendar/navigate")
async def navigate(year: int, month: int, direction: str = 'today'):
    """
    Move the viewed month cursor.

    Handle URLs of format:
    /calendar/navigate?year=2023&month=12&direction=next
    """
    if direction not in NAVIGATION_DIRECTIONS:
        return {"success": False, "error": f"Unknown navigation direction: {direction}"}

    try:
        cursor = MonthCursor(year, _month_index(month)).navigate(direction)
        return {"success": True, **cursor.to_dict()}
    except Exception as e:
        return {"success": False, "error": str(e)}


# ###########################################
# How to start:
#  uvicorn booking_calendar.api.calendar_service:app --host 0.0.0.0 --port 8000
# ###########################################
def main():
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
