"""Assembly of the room model from a scraped timeline."""

from __future__ import annotations

from collections import defaultdict
from typing import Optional

import httpx
import structlog

from .config import Settings
from .duration import SECONDS_PER_PIXEL, decode_duration_seconds
from .errors import NumericParseError
from .extractor import parse_timeline
from .fetcher import fetch_timeline
from .models import RawReservation, Reservation, Room, Timeline

LOGGER = structlog.get_logger(__name__)


def scrape_rooms(settings: Settings, client: Optional[httpx.Client] = None) -> dict[str, Room]:
    """Fetch the timeline page and build today's rooms keyed by name."""
    html = fetch_timeline(settings, client=client)
    return build_rooms(parse_timeline(html), seconds_per_pixel=settings.seconds_per_pixel)


def build_rooms(timeline: Timeline, seconds_per_pixel: float = SECONDS_PER_PIXEL) -> dict[str, Room]:
    """
    Attach decoded reservations to their rooms.

    Reservations for a room that is not listed in the timeline table are dropped.
    """
    known = {raw.name for raw in timeline.rooms}
    reservations: dict[str, list[Reservation]] = defaultdict(list)

    for raw in timeline.reservations:
        if raw.room_name not in known:
            LOGGER.debug("timeline.reservation.unknown_room", room=raw.room_name, seconds=raw.seconds)
            continue
        start = int(raw.seconds)
        duration = _decode(raw, seconds_per_pixel)
        reservations[raw.room_name].append(Reservation(start=start, end=start + duration))

    rooms = {
        raw.name: Room(
            name=raw.name,
            floor=raw.floor,
            size=raw.size,
            reservations=tuple(reservations.get(raw.name, ())),
        )
        for raw in timeline.rooms
    }
    LOGGER.info("timeline.rooms.built", rooms=len(rooms))
    return rooms


def _decode(raw: RawReservation, seconds_per_pixel: float) -> int:
    try:
        duration = decode_duration_seconds(raw.pixel_width, seconds_per_pixel)
    except (OverflowError, ValueError) as exc:
        raise NumericParseError("reservation width", raw.pixel_width, "duration out of range") from exc
    if duration <= 0:
        raise NumericParseError("reservation width", raw.pixel_width, "must decode to a positive duration")
    return duration
