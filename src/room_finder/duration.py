"""Decode Roomzilla reservation widths into durations.

Roomzilla's timeline does not expose an end time or a duration for a
reservation, only the rendered width of its element. One hour of booked time
is drawn as exactly 58 pixels, so the duration is recovered linearly:

    60 / 58      = 1.0344827586 minutes per pixel
    60 / 58 * 60 = 62.068965517 seconds per pixel
"""

from __future__ import annotations

import math

PIXELS_PER_HOUR = 58
SECONDS_PER_PIXEL = 3600 / PIXELS_PER_HOUR


def decode_duration_seconds(pixel_width: float, seconds_per_pixel: float = SECONDS_PER_PIXEL) -> int:
    """Convert a rendered width in pixels into whole seconds.

    Halves round away from zero rather than to the nearest even number.
    """
    return _round_half_away_from_zero(pixel_width * seconds_per_pixel)


def _round_half_away_from_zero(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))
