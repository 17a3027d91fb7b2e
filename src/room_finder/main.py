"""Command-line entry point for the room finder."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime, timedelta
from typing import Optional

import structlog
from pydantic import ValidationError

from .availability import free_rooms
from .config import Settings
from .errors import RoomFinderError, TimeParseError
from .report import format_report
from .time_window import build_query_window, resolve_window
from .timeline import scrape_rooms

LOGGER = structlog.get_logger(__name__)


def configure_logging(level: str = "WARNING") -> None:
    """Configure structlog + stdlib logging on stderr."""
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(message)s",
        stream=sys.stderr,
        force=True,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """CLI argument parsing."""
    parser = argparse.ArgumentParser(description="List meeting rooms that are free for a time window today.")
    parser.add_argument(
        "-s",
        "--start",
        help="Start of the window in 24-hour HH:MM format (default: now).",
    )
    parser.add_argument(
        "-e",
        "--end",
        help="End of the window in 24-hour HH:MM format (default: one hour after the start).",
    )
    return parser.parse_args(argv)


def run(settings: Settings, start_raw: Optional[str], end_raw: Optional[str], now: Optional[datetime] = None) -> str:
    """Resolve the window, scrape the timeline and return the report text."""
    start, end = resolve_window(
        start_raw,
        end_raw,
        now=now,
        default_length=timedelta(minutes=settings.default_window_minutes),
    )
    window = build_query_window(start, end)
    LOGGER.info("query.window", start=window.start, end=window.end)

    rooms = scrape_rooms(settings)
    available = free_rooms(rooms.values(), window)
    LOGGER.info("query.complete", rooms=len(rooms), free=len(available))
    return format_report(available, start, end)


def cli(argv: Optional[list[str]] = None) -> int:
    """Console script entrypoint."""
    args = parse_args(argv)

    try:
        settings = Settings()
    except ValidationError as exc:
        configure_logging()
        LOGGER.error("settings.error", error=str(exc))
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    try:
        report = run(settings, args.start, args.end)
    except TimeParseError as exc:
        LOGGER.error("query.invalid_window", error=str(exc))
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except RoomFinderError as exc:
        LOGGER.exception("query.failed", error=str(exc))
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(report)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(cli())
