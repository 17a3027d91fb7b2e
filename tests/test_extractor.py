"""Tests for extracting raw records from the timeline markup."""

import pytest

from room_finder.errors import ExtractionError, NumericParseError
from room_finder.extractor import extract_pixel_width, parse_timeline
from room_finder.models import RawReservation, RawRoom


def page(rows: str = "", reservations: str = "") -> str:
    return f"""
    <table id="timeline"><tbody>{rows}</tbody></table>
    <div>{reservations}</div>
    """


def row(name="NE1", floor="1", size="4") -> str:
    cells = []
    for css, value in (("name", name), ("floor", floor), ("size", size)):
        if value is None:
            continue
        cells.append(f'<td class="{css}" data-sort="{value}"></td>')
    return f"<tr>{''.join(cells)}</tr>"


class TestParseTimeline:
    def test_extracts_rooms(self, timeline_html):
        timeline = parse_timeline(timeline_html)
        assert timeline.rooms == [
            RawRoom(name="NE1", floor=1, size=4),
            RawRoom(name="Boardroom", floor=2, size=12),
            RawRoom(name="Basement Pod", floor=-1, size=2),
        ]

    def test_extracts_reservations(self, timeline_html):
        timeline = parse_timeline(timeline_html)
        assert timeline.reservations == [
            RawReservation(room_name="NE1", seconds=37800.0, pixel_width=58.0),
            RawReservation(room_name="Boardroom", seconds=32400.0, pixel_width=29.0),
            RawReservation(room_name="Boardroom", seconds=43200.0, pixel_width=116.0),
            RawReservation(room_name="Closed Room", seconds=36000.0, pixel_width=58.0),
        ]

    def test_empty_page(self):
        timeline = parse_timeline("<html><body></body></html>")
        assert timeline.rooms == []
        assert timeline.reservations == []

    def test_missing_cell(self):
        with pytest.raises(ExtractionError) as excinfo:
            parse_timeline(page(rows=row(size=None)))
        assert excinfo.value.field == "room size"

    def test_missing_sort_attribute(self):
        html = page(rows='<tr><td class="name">NE1</td><td class="floor" data-sort="1"></td>'
                         '<td class="size" data-sort="4"></td></tr>')
        with pytest.raises(ExtractionError) as excinfo:
            parse_timeline(html)
        assert excinfo.value.field == "room name"

    @pytest.mark.parametrize(
        ("kwargs", "field"),
        [
            ({"floor": "first"}, "room floor"),
            ({"size": "4.5"}, "room size"),
            ({"size": "-3"}, "room size"),
        ],
    )
    def test_bad_room_numbers(self, kwargs, field):
        with pytest.raises(NumericParseError) as excinfo:
            parse_timeline(page(rows=row(**kwargs)))
        assert excinfo.value.field == field

    def test_missing_reservation_attribute(self):
        html = page(reservations='<div class="reserved" room_name="NE1" style="width: 58px;"></div>')
        with pytest.raises(ExtractionError) as excinfo:
            parse_timeline(html)
        assert excinfo.value.field == "reservation start"

    @pytest.mark.parametrize("seconds", ["noon", "nan", "-60"])
    def test_bad_reservation_start(self, seconds):
        html = page(
            reservations=f'<div class="reserved" room_name="NE1" seconds="{seconds}" style="width: 58px;"></div>'
        )
        with pytest.raises(NumericParseError) as excinfo:
            parse_timeline(html)
        assert excinfo.value.field == "reservation start"


class TestExtractPixelWidth:
    def test_whole_pixels(self):
        assert extract_pixel_width("width: 58px;") == 58.0

    def test_fractional_pixels(self):
        assert extract_pixel_width("width: 14.5px; left: 3px;") == 14.5

    def test_missing_suffix(self):
        with pytest.raises(ExtractionError) as excinfo:
            extract_pixel_width("width: 58px")
        assert excinfo.value.field == "reservation width"

    @pytest.mark.parametrize("style", ["width: px;", "width: wide px;", "width: infpx;"])
    def test_unparsable_width(self, style):
        with pytest.raises(NumericParseError):
            extract_pixel_width(style)

    @pytest.mark.parametrize("style", ["width: 0px;", "width: -10px;"])
    def test_non_positive_width(self, style):
        with pytest.raises(NumericParseError) as excinfo:
            extract_pixel_width(style)
        assert excinfo.value.field == "reservation width"

    def test_non_positive_width_in_page(self):
        html = page(
            rows=row(),
            reservations='<div class="reserved" room_name="NE1" seconds="1000.0" style="width: 0px;"></div>',
        )
        with pytest.raises(NumericParseError):
            parse_timeline(html)
