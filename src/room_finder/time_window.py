"""Utilities for resolving the query window from ``HH:MM`` arguments."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from .errors import TimeParseError
from .models import QueryWindow

DEFAULT_WINDOW = timedelta(hours=1)


def resolve_time(raw: Optional[str], default: datetime, now: Optional[datetime] = None) -> datetime:
    """
    Resolve an optional ``HH:MM`` argument into a local time today.

    Without ``raw`` the ``default`` is returned untouched. Otherwise the hour and
    minute replace those of ``now`` (the current local time unless given) and
    seconds are zeroed. Segments after the minute are ignored.
    """
    if raw is None:
        return default

    segments = raw.split(":")
    if len(segments) < 2:
        raise TimeParseError(f"Could not parse time {raw!r}: expected HH:MM")

    hour = _parse_segment(segments[0], "hour", raw)
    minute = _parse_segment(segments[1], "minute", raw)

    now = now or datetime.now()
    try:
        return now.replace(hour=hour, minute=minute, second=0, microsecond=0)
    except ValueError as exc:
        raise TimeParseError(f"Could not parse time {raw!r}: {exc}") from exc


def resolve_window(
    start_raw: Optional[str],
    end_raw: Optional[str],
    *,
    now: Optional[datetime] = None,
    default_length: timedelta = DEFAULT_WINDOW,
) -> tuple[datetime, datetime]:
    """Resolve start and end times; the end defaults to ``default_length`` after the start."""
    now = now or datetime.now()
    start = resolve_time(start_raw, now, now=now)
    end = resolve_time(end_raw, start + default_length, now=now)
    return start, end


def seconds_since_midnight(value: datetime) -> int:
    return value.hour * 3600 + value.minute * 60 + value.second


def build_query_window(start: datetime, end: datetime) -> QueryWindow:
    """
    Convert resolved times into a window measured from the start's midnight.

    A window running past midnight keeps growing past 86400 rather than wrapping.
    """
    if end <= start:
        raise TimeParseError(
            f"End time {end:%H:%M} must be after start time {start:%H:%M}"
        )
    start_seconds = seconds_since_midnight(start)
    end_seconds = start_seconds + int((end - start).total_seconds())
    return QueryWindow(start=start_seconds, end=end_seconds)


def _parse_segment(segment: str, label: str, raw: str) -> int:
    if not (segment.isascii() and segment.isdigit()):
        raise TimeParseError(f"Could not parse {label} from {raw!r}")
    return int(segment)
