"""BeautifulSoup extraction of rooms and reservations from the timeline page."""

from __future__ import annotations

import math
from typing import Optional

import structlog
from bs4 import BeautifulSoup, Tag

from .errors import ExtractionError, NumericParseError
from .models import RawReservation, RawRoom, Timeline

LOGGER = structlog.get_logger(__name__)

ROOM_ROW_SELECTOR = "table#timeline tbody tr"
NAME_CELL_SELECTOR = "td.name"
FLOOR_CELL_SELECTOR = "td.floor"
SIZE_CELL_SELECTOR = "td.size"
SORT_ATTRIBUTE = "data-sort"

RESERVATION_SELECTOR = "div.reserved"

# Reservation elements carry their width as ``style="width: 58px;"``.
STYLE_WIDTH_PREFIX = "width: "
STYLE_WIDTH_SUFFIX = "px;"


def parse_timeline(html: str) -> Timeline:
    """Extract every room row and reservation element from the page."""

    soup = BeautifulSoup(html, "html.parser")
    timeline = Timeline(
        rooms=[_parse_room_row(row) for row in soup.select(ROOM_ROW_SELECTOR)],
        reservations=[_parse_reservation(element) for element in soup.select(RESERVATION_SELECTOR)],
    )
    LOGGER.info(
        "timeline.parse.complete",
        rooms=len(timeline.rooms),
        reservations=len(timeline.reservations),
    )
    return timeline


def extract_pixel_width(style: str) -> float:
    """Return the pixel width embedded in a reservation's ``style`` attribute."""

    end = style.find(STYLE_WIDTH_SUFFIX)
    if end == -1:
        raise ExtractionError("reservation width", f"no {STYLE_WIDTH_SUFFIX!r} in style {style!r}")
    width = _parse_float(style[len(STYLE_WIDTH_PREFIX):end], "reservation width")
    if width <= 0:
        raise NumericParseError("reservation width", width, "must be positive")
    return width


def _parse_room_row(row: Tag) -> RawRoom:
    name = _sort_value(row, NAME_CELL_SELECTOR, "room name")
    floor = _parse_int(_sort_value(row, FLOOR_CELL_SELECTOR, "room floor"), "room floor")
    size = _parse_int(_sort_value(row, SIZE_CELL_SELECTOR, "room size"), "room size")
    if size < 0:
        raise NumericParseError("room size", size, "must not be negative")
    return RawRoom(name=name, floor=floor, size=size)


def _parse_reservation(element: Tag) -> RawReservation:
    room_name = _required_attribute(element, "room_name", "reservation room name")
    seconds = _parse_float(
        _required_attribute(element, "seconds", "reservation start"),
        "reservation start",
    )
    if seconds < 0:
        raise NumericParseError("reservation start", seconds, "must not be negative")
    style = _required_attribute(element, "style", "reservation style")
    return RawReservation(room_name=room_name, seconds=seconds, pixel_width=extract_pixel_width(style))


def _sort_value(row: Tag, selector: str, field: str) -> str:
    cell = row.select_one(selector)
    if cell is None:
        raise ExtractionError(field, f"no {selector!r} cell in room row")
    return _required_attribute(cell, SORT_ATTRIBUTE, field)


def _required_attribute(element: Tag, attribute: str, field: str) -> str:
    value: Optional[str] = element.get(attribute)
    if value is None:
        raise ExtractionError(field, f"missing {attribute!r} attribute")
    return value


def _parse_int(text: str, field: str) -> int:
    try:
        return int(text)
    except ValueError as exc:
        raise NumericParseError(field, text) from exc


def _parse_float(text: str, field: str) -> float:
    try:
        value = float(text)
    except ValueError as exc:
        raise NumericParseError(field, text) from exc
    if not math.isfinite(value):
        raise NumericParseError(field, text, "must be finite")
    return value
