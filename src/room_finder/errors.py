"""Exceptions raised while scraping and filtering the room timeline."""

from __future__ import annotations

from typing import Optional


class RoomFinderError(Exception):
    """Base class for every failure that aborts a run."""


class ExtractionError(RoomFinderError):
    """A required element or attribute is missing from the timeline markup."""

    def __init__(self, field: str, detail: Optional[str] = None):
        self.field = field
        message = f"Failed to extract {field}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class NumericParseError(RoomFinderError):
    """A numeric field in the timeline markup could not be parsed."""

    def __init__(self, field: str, value: object, detail: Optional[str] = None):
        self.field = field
        self.value = value
        message = f"Could not parse {field} from {value!r}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class TimeParseError(RoomFinderError):
    """A time argument is malformed or the resulting window is empty."""


class FetchError(RoomFinderError):
    """The timeline page could not be retrieved."""
