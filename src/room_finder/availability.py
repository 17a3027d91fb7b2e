"""Selection of rooms with no reservation overlapping a query window."""

from __future__ import annotations

from typing import Iterable

from .models import QueryWindow, Reservation, Room


def conflicts(reservation: Reservation, window: QueryWindow) -> bool:
    """Whether ``window`` overlaps ``reservation``; touching edges do not count."""
    return (
        # Starts during the reservation
        (reservation.start < window.start < reservation.end)
        # Ends during the reservation
        or (reservation.start < window.end < reservation.end)
        # Reservation sits inside the window
        or (window.start < reservation.start and window.end > reservation.end)
        # Shares an edge with the reservation while overlapping it
        or (
            (window.start == reservation.start or window.end == reservation.end)
            and window.start < reservation.end
            and window.end > reservation.start
        )
    )


def is_free(room: Room, window: QueryWindow) -> bool:
    return not any(conflicts(reservation, window) for reservation in room.reservations)


def free_rooms(rooms: Iterable[Room], window: QueryWindow) -> list[Room]:
    """Return the rooms free for the whole window, in the order given."""
    return [room for room in rooms if is_free(room, window)]
