"""Console report for the free-room query."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from .models import Room


def format_time(value: datetime) -> str:
    """Render a time as ``08:30am``."""
    return value.strftime("%I:%M%p").lower()


def format_report(rooms: Iterable[Room], start: datetime, end: datetime) -> str:
    """Build the report text, listing free rooms by name."""
    lines = [f"Free rooms available from {format_time(start)} to {format_time(end)}"]
    ordered = sorted(rooms, key=lambda room: room.name)
    if not ordered:
        lines.append("No free rooms.")
    for room in ordered:
        lines.append(f"{room.name} (seats {room.size})")
    return "\n".join(lines)
