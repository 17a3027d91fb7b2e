"""Shared data models used across the room finder."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Reservation:
    """A booked interval in seconds since local midnight, ``[start, end)``."""

    start: int
    end: int


@dataclass(frozen=True)
class Room:
    """A bookable room and the reservations made for it today."""

    name: str
    floor: int
    size: int
    reservations: tuple[Reservation, ...] = ()


@dataclass(frozen=True)
class QueryWindow:
    """The interval a caller wants a room for, in seconds since local midnight."""

    start: int
    end: int


@dataclass(frozen=True)
class RawRoom:
    """Room row exactly as extracted from the timeline table."""

    name: str
    floor: int
    size: int


@dataclass(frozen=True)
class RawReservation:
    """Reservation element as extracted, before its width is decoded."""

    room_name: str
    seconds: float
    pixel_width: float


@dataclass
class Timeline:
    """Everything extracted from one timeline page."""

    rooms: list[RawRoom] = field(default_factory=list)
    reservations: list[RawReservation] = field(default_factory=list)
